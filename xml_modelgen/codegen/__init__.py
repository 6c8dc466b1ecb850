"""
XML model code generation module.

Compiles ``*.model.xml`` entity documents into entity/DTO source pairs
with mapper functions.
"""

from .registry import (
    GeneratorRegistry,
    RegistryError,
    get_generator,
    get_language_info,
    list_all_language_info,
    list_supported_languages,
)
from .compiler import GenerationResult, compile_schema, compile_batch, iter_artifacts
from .core.generator import CodeGenerator, GeneratorError
from .core.schema import (
    RawFieldDeclaration,
    CanonicalField,
    EntitySchema,
    GeneratedArtifact,
)
from .core.types import TypeKind, classify_type
from .core.config import GeneratorConfig, ConfigManager, ConfigError, load_config

__all__ = [
    "GeneratorRegistry",
    "RegistryError",
    "CodeGenerator",
    "GeneratorError",
    "GenerationResult",
    "RawFieldDeclaration",
    "CanonicalField",
    "EntitySchema",
    "GeneratedArtifact",
    "TypeKind",
    "classify_type",
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    "compile_schema",
    "compile_batch",
    "iter_artifacts",
    "get_generator",
    "get_language_info",
    "list_all_language_info",
    "list_supported_languages",
]
