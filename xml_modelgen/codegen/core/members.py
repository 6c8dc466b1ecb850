"""
Entity and DTO type definitions.

Projects the canonical field list onto the two generated types. Each
type only carries the fields flagged for it, typed with that side's
declared type, in canonical field order.
"""

from dataclasses import dataclass, field
from typing import List, Tuple

from .config import GeneratorConfig
from .schema import EntitySchema


@dataclass(frozen=True)
class MemberDefinition:
    """A single property of a generated type."""

    name: str
    type: str


@dataclass
class TypeDefinition:
    """A generated class: name, namespace and ordered members."""

    class_name: str
    namespace: str
    members: List[MemberDefinition] = field(default_factory=list)

    @property
    def member_names(self) -> List[str]:
        return [m.name for m in self.members]


def entity_members(schema: EntitySchema) -> List[MemberDefinition]:
    """Members of the entity type: every field with ``in_entity``."""
    return [
        MemberDefinition(name=f.name, type=f.entity_type)
        for f in schema.fields.values()
        if f.in_entity
    ]


def dto_members(schema: EntitySchema) -> List[MemberDefinition]:
    """Members of the DTO type: every field with ``in_dto``."""
    return [
        MemberDefinition(name=f.name, type=f.dto_type)
        for f in schema.fields.values()
        if f.in_dto
    ]


def dto_class_name(entity_name: str, config: GeneratorConfig) -> str:
    return f"{entity_name}{config.dto_suffix}"


def build_type_definitions(
    schema: EntitySchema, config: GeneratorConfig
) -> Tuple[TypeDefinition, TypeDefinition]:
    """
    Build the entity and DTO type definitions for a schema.

    Returns:
        Tuple of (entity definition, DTO definition)
    """
    entity = TypeDefinition(
        class_name=schema.name,
        namespace=config.entity_namespace_path,
        members=entity_members(schema),
    )
    dto = TypeDefinition(
        class_name=dto_class_name(schema.name, config),
        namespace=config.dto_namespace_path,
        members=dto_members(schema),
    )
    return entity, dto
