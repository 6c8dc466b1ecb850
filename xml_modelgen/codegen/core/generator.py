"""
Base generator interface for all code generation targets.

Defines the contract that all language generators must implement.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Any, Optional
from pathlib import Path

from .config import GeneratorConfig
from .schema import EntitySchema, GeneratedArtifact
from .templates import TemplateEngine, create_template_engine


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class CodeGenerator(ABC):
    """
    Abstract base class for all code generators.

    Generators must not keep per-schema state: one instance is shared by
    every worker of a batch.
    """

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize generator with optional configuration."""
        self.config = config or GeneratorConfig()
        self._template_engine = None
        self._setup_templates()

    def _setup_templates(self):
        """Setup template engine for this generator."""
        template_dir = self.get_template_directory()
        if template_dir:
            self._template_engine = create_template_engine(template_dir)
        else:
            # Fallback to in-memory templates
            self._template_engine = create_template_engine()

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'csharp')."""
        pass

    @property
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.g.cs')."""
        return self.config.file_extension

    def get_template_directory(self) -> Optional[Path]:
        """
        Return the directory containing templates for this generator.

        Subclasses should override this to provide their template directory.
        Return None to use in-memory templates only.
        """
        return None

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._setup_templates()
        return self._template_engine

    @abstractmethod
    def generate(self, schema: EntitySchema) -> List[GeneratedArtifact]:
        """
        Generate the source files for one entity.

        Args:
            schema: Reconciled entity schema

        Returns:
            Generated artifacts (entity file and DTO file)
        """
        pass

    def validate_schema(self, schema: EntitySchema) -> List[str]:
        """
        Validate a schema for basic structural issues.

        Language generators should override this to add language-specific validation.

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []

        if not schema.fields:
            warnings.append(f"Schema '{schema.name}' has no fields")
            return warnings

        if not schema.entity_fields:
            warnings.append(f"Schema '{schema.name}' has no entity fields")
        if not schema.dto_fields:
            warnings.append(f"Schema '{schema.name}' has no DTO fields")

        for canonical in schema.fields.values():
            if not canonical.in_entity and not canonical.in_dto:
                warnings.append(
                    f"Field {schema.name}.{canonical.name} is not flagged for "
                    f"entity or DTO and will not be generated"
                )
            elif (
                canonical.is_shared
                and canonical.entity_type.strip() != canonical.dto_type.strip()
            ):
                warnings.append(
                    f"Field {schema.name}.{canonical.name} has different types: "
                    f"entity '{canonical.entity_type}', DTO '{canonical.dto_type}'"
                )

        return warnings

    def format_code(self, code: str) -> str:
        """
        Apply basic formatting to generated code.

        Strips trailing whitespace, collapses runs of blank lines and ends
        the file with exactly one line ending.
        """
        lines = code.split("\n")
        formatted_lines = []
        blank_count = 0

        for line in lines:
            stripped = line.rstrip()
            if not stripped:
                blank_count += 1
                if blank_count <= 1:
                    formatted_lines.append("")
            else:
                blank_count = 0
                formatted_lines.append(stripped)

        while formatted_lines and not formatted_lines[-1]:
            formatted_lines.pop()
        while formatted_lines and not formatted_lines[0]:
            formatted_lines.pop(0)

        line_ending = self.config.line_ending
        return line_ending.join(formatted_lines) + line_ending

    # Template helper methods

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """Render a template with context."""
        return self.template_engine.render_template(template_name, context)

    def template_exists(self, template_name: str) -> bool:
        """Check if a template exists."""
        return self.template_engine.template_exists(template_name)
