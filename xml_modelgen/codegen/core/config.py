"""
Configuration management for code generation.

Handles loading and merging configuration from JSON files,
providing defaults and validation for generator settings.
"""

import json
import re
from pathlib import Path
from typing import Dict, Any, List, Optional, Union
from dataclasses import dataclass, field, fields, asdict


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""

    pass


@dataclass
class GeneratorConfig:
    """Base configuration for code generators."""

    # Namespaces: <root_namespace>.<entity_namespace> and <root_namespace>.<dto_namespace>
    root_namespace: str = "AppConsumer"
    entity_namespace: str = "Entities"
    dto_namespace: str = "DTOs"

    # Files
    file_extension: str = ".g.cs"
    schema_suffix: str = ".model.xml"

    # Generated names
    dto_suffix: str = "DTO"
    mapper_suffix: str = "Mapper"
    to_dto_method: str = "MapToDTO"
    to_entity_method: str = "MapToEntity"

    # Code style settings
    indent_size: int = 4
    line_ending: str = "\n"
    add_comments: bool = True
    escape_keywords: bool = True

    # Type classification
    extra_simple_types: List[str] = field(default_factory=list)
    extra_collection_prefixes: List[str] = field(default_factory=list)

    # Custom settings (language-specific)
    custom: Dict[str, Any] = field(default_factory=dict)

    @property
    def entity_namespace_path(self) -> str:
        return _join_namespace(self.root_namespace, self.entity_namespace)

    @property
    def dto_namespace_path(self) -> str:
        return _join_namespace(self.root_namespace, self.dto_namespace)


def _join_namespace(*parts: str) -> str:
    return ".".join(p.strip(".") for p in parts if p and p.strip("."))


_NAMESPACE_SEGMENT = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


class ConfigManager:
    """Manages configuration loading and merging."""

    def __init__(self):
        """Initialize configuration manager."""
        self._configs: Dict[str, Dict[str, Any]] = {}
        self._load_defaults()

    def _load_defaults(self):
        """Load default configurations for supported languages."""
        self._configs["csharp"] = {
            "root_namespace": "AppConsumer",
            "entity_namespace": "Entities",
            "dto_namespace": "DTOs",
            "file_extension": ".g.cs",
            "dto_suffix": "DTO",
            "mapper_suffix": "Mapper",
            "to_dto_method": "MapToDTO",
            "to_entity_method": "MapToEntity",
            "add_comments": True,
            "escape_keywords": True,
        }

    def get_config(
        self,
        language: str = "csharp",
        custom_config: Optional[Dict[str, Any]] = None,
        config_file: Optional[Union[str, Path]] = None,
    ) -> GeneratorConfig:
        """
        Get complete configuration for a language.

        Args:
            language: Target language name
            custom_config: Custom configuration overrides
            config_file: Path to JSON configuration file

        Returns:
            Merged configuration for the language
        """
        # Start with defaults
        base_config = dict(self._configs.get(language.lower(), {}))

        # Load from file if provided
        if config_file:
            base_config.update(self._load_config_file(config_file))

        # Apply custom overrides
        if custom_config:
            base_config.update(custom_config)

        return self._dict_to_config(base_config)

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Load configuration from JSON file."""
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if path.suffix.lower() != ".json":
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file {path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to load configuration file {path}: {e}") from e

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        return config

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> GeneratorConfig:
        """Convert dictionary to GeneratorConfig instance."""
        known_fields = {f.name for f in fields(GeneratorConfig)}

        config_args = {}
        custom_args = {}

        for key, value in config_dict.items():
            if key in known_fields:
                config_args[key] = value
            else:
                custom_args[key] = value

        # Unknown keys end up in the custom dict
        if custom_args:
            existing_custom = dict(config_args.get("custom", {}))
            existing_custom.update(custom_args)
            config_args["custom"] = existing_custom

        return GeneratorConfig(**config_args)

    def save_config(self, config: GeneratorConfig, output_path: Union[str, Path]):
        """Save configuration to JSON file."""
        path = Path(output_path)

        config_dict = asdict(config)
        custom = config_dict.pop("custom", {})
        config_dict.update(custom)

        try:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(config_dict, f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise ConfigError(f"Failed to save configuration to {path}: {e}") from e

    def list_languages(self) -> list[str]:
        """Get list of languages with default configurations."""
        return list(self._configs.keys())

    def validate_config(self, config: GeneratorConfig) -> list[str]:
        """
        Validate configuration.

        Returns:
            List of validation warnings
        """
        warnings = []

        for label, value in (
            ("root_namespace", config.root_namespace),
            ("entity_namespace", config.entity_namespace),
            ("dto_namespace", config.dto_namespace),
        ):
            for segment in value.split("."):
                if not _NAMESPACE_SEGMENT.match(segment):
                    warnings.append(f"Invalid {label} segment: '{segment}'")

        if not config.dto_suffix:
            warnings.append("dto_suffix is empty - DTO and entity class names collide")

        if config.to_dto_method == config.to_entity_method:
            warnings.append("to_dto_method and to_entity_method must differ")

        if not config.file_extension.startswith("."):
            warnings.append(f"file_extension should start with '.': {config.file_extension}")

        if config.indent_size < 1:
            warnings.append(f"Invalid indent_size: {config.indent_size}")

        return warnings


# Global configuration manager instance
_config_manager = None


def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(
    language: str = "csharp",
    custom_config: Optional[Dict[str, Any]] = None,
    config_file: Optional[Union[str, Path]] = None,
) -> GeneratorConfig:
    """
    Convenience function to load configuration.

    Args:
        language: Target language name
        custom_config: Custom configuration overrides
        config_file: Path to JSON configuration file

    Returns:
        Merged configuration for the language
    """
    manager = get_config_manager()
    return manager.get_config(language, custom_config, config_file)

