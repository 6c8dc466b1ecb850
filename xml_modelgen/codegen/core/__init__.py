"""
Core code generation components.

Provides the schema pipeline (parse, reconcile, classify, project) and
the base classes used by all language generators.
"""

from .generator import CodeGenerator, GeneratorError
from .schema import (
    RawFieldDeclaration,
    RawSchema,
    CanonicalField,
    EntitySchema,
    GeneratedArtifact,
)
from .parser import ParseResult, parse_schema, parse_flag
from .reconciler import reconcile_fields, build_entity_schema
from .types import (
    TypeKind,
    TypeClassifier,
    TypeClassifierConfig,
    classify_type,
    normalize_type_name,
)
from .members import (
    MemberDefinition,
    TypeDefinition,
    entity_members,
    dto_members,
    build_type_definitions,
)
from .mappers import MemberAssignment, MapperDefinition, MapperSet, build_mappers
from .config import GeneratorConfig, ConfigManager, ConfigError, load_config
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Base generator interface
    "CodeGenerator",
    "GeneratorError",
    # Schema records
    "RawFieldDeclaration",
    "RawSchema",
    "CanonicalField",
    "EntitySchema",
    "GeneratedArtifact",
    # Parsing and reconciliation
    "ParseResult",
    "parse_schema",
    "parse_flag",
    "reconcile_fields",
    "build_entity_schema",
    # Type classification
    "TypeKind",
    "TypeClassifier",
    "TypeClassifierConfig",
    "classify_type",
    "normalize_type_name",
    # Type and mapper definitions
    "MemberDefinition",
    "TypeDefinition",
    "entity_members",
    "dto_members",
    "build_type_definitions",
    "MemberAssignment",
    "MapperDefinition",
    "MapperSet",
    "build_mappers",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
