"""
C# code generator implementation.

Generates an entity class, a DTO class and a static mapper class with
``MapToDTO``/``MapToEntity`` extension methods using templates.
"""

from typing import Dict, List, Any, Optional
from pathlib import Path

from ....logging_config import get_logger
from ...core.config import GeneratorConfig
from ...core.generator import CodeGenerator, GeneratorError
from ...core.mappers import MapperDefinition, build_mappers, create_classifier
from ...core.members import TypeDefinition, build_type_definitions
from ...core.schema import EntitySchema, GeneratedArtifact
from .naming import escape_identifier, is_reserved_word, is_valid_identifier

logger = get_logger(__name__)

ENTITY_TEMPLATE = "entity.cs.j2"
DTO_TEMPLATE = "dto.cs.j2"

HEADER = "<auto-generated />\nGenerated by xml-modelgen. Changes to this file will be lost."


class CSharpGenerator(CodeGenerator):
    """Code generator for C# entity/DTO pairs with mapper extensions."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize C# generator with configuration."""
        super().__init__(config)
        self.classifier = create_classifier(self.config)

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "csharp"

    def get_template_directory(self) -> Path:
        """Return the C# templates directory."""
        return Path(__file__).parent / "templates"

    def entity_file_name(self, entity_name: str) -> str:
        return f"{entity_name}.Entity{self.file_extension}"

    def dto_file_name(self, entity_name: str) -> str:
        return f"{entity_name}.DTO{self.file_extension}"

    def generate(self, schema: EntitySchema) -> List[GeneratedArtifact]:
        """Generate the entity file and the DTO + mapper file."""
        if not self.template_exists(ENTITY_TEMPLATE) or not self.template_exists(
            DTO_TEMPLATE
        ):
            raise GeneratorError(
                f"C# templates not found in {self.get_template_directory()}"
            )

        entity_def, dto_def = build_type_definitions(schema, self.config)
        mappers = build_mappers(schema, self.config, self.classifier)

        context = {
            "header": HEADER if self.config.add_comments else None,
            "indent": " " * self.config.indent_size,
            "entity": self._type_context(entity_def),
            "dto": self._type_context(dto_def),
            "mapper_class": mappers.class_name,
            "mappers": [
                self._mapper_context(mappers.to_dto),
                self._mapper_context(mappers.to_entity),
            ],
        }

        entity_source = self.format_code(self.render_template(ENTITY_TEMPLATE, context))
        dto_source = self.format_code(self.render_template(DTO_TEMPLATE, context))

        logger.debug(
            "Generated %s: %d entity members, %d DTO members, %d mapped",
            schema.name,
            len(entity_def.members),
            len(dto_def.members),
            len(mappers.to_dto.assignments),
        )

        return [
            GeneratedArtifact(self.entity_file_name(schema.name), entity_source),
            GeneratedArtifact(self.dto_file_name(schema.name), dto_source),
        ]

    def _identifier(self, name: str) -> str:
        if self.config.escape_keywords:
            return escape_identifier(name)
        return name

    def _type_context(self, definition: TypeDefinition) -> Dict[str, Any]:
        return {
            "class_name": self._identifier(definition.class_name),
            "namespace": definition.namespace,
            "members": [
                {"name": self._identifier(m.name), "type": m.type}
                for m in definition.members
            ],
        }

    def _mapper_context(self, mapper: MapperDefinition) -> Dict[str, Any]:
        return {
            "method_name": mapper.method_name,
            "source_type": self._identifier(mapper.source_type),
            "target_type": self._identifier(mapper.target_type),
            "parameter": mapper.parameter,
            "assignments": [
                {
                    "name": self._identifier(a.name),
                    "nested_method": a.nested_method,
                }
                for a in mapper.assignments
            ],
        }

    def validate_schema(self, schema: EntitySchema) -> List[str]:
        """Validate schema for C# generation."""
        warnings = super().validate_schema(schema)

        if not is_valid_identifier(schema.name):
            warnings.append(f"Entity name '{schema.name}' is not a valid C# identifier")

        for canonical in schema.fields.values():
            if not is_valid_identifier(canonical.name):
                warnings.append(
                    f"Field {schema.name}.{canonical.name} is not a valid C# identifier"
                )
            elif is_reserved_word(canonical.name):
                if self.config.escape_keywords:
                    warnings.append(
                        f"Field {schema.name}.{canonical.name} is a C# keyword - "
                        f"emitted as @{canonical.name}"
                    )
                else:
                    warnings.append(
                        f"Field {schema.name}.{canonical.name} is a C# keyword"
                    )

        return warnings


def create_csharp_generator(
    config: Optional[Dict[str, Any]] = None,
) -> CSharpGenerator:
    """Create a C# generator, applying overrides on top of the defaults."""
    from ...core.config import load_config

    return CSharpGenerator(load_config("csharp", custom_config=config))
