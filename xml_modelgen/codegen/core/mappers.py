"""
Mapper definitions between entity and DTO.

Only fields visible on both sides take part in a mapping. Composite
values are mapped through the referenced type's own mapper method of
the same name, so every generated model must expose the same pair of
mapper methods.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .config import GeneratorConfig
from .members import dto_class_name
from .schema import EntitySchema
from .types import TypeClassifier, TypeClassifierConfig, TypeKind


@dataclass(frozen=True)
class MemberAssignment:
    """Assignment of one destination member from the source instance."""

    name: str
    type: str
    kind: TypeKind
    # Method invoked on composite values; None for direct copies.
    nested_method: Optional[str] = None


@dataclass
class MapperDefinition:
    """One conversion routine."""

    method_name: str
    source_type: str
    target_type: str
    parameter: str
    assignments: List[MemberAssignment] = field(default_factory=list)

    @property
    def assigned_names(self) -> List[str]:
        return [a.name for a in self.assignments]


@dataclass
class MapperSet:
    """Both mapping directions for an entity."""

    class_name: str
    to_dto: MapperDefinition
    to_entity: MapperDefinition


def create_classifier(config: GeneratorConfig) -> TypeClassifier:
    """Build a classifier honouring the configured extra simple types."""
    if not config.extra_simple_types and not config.extra_collection_prefixes:
        return TypeClassifier()
    return TypeClassifier(
        TypeClassifierConfig.with_extras(
            config.extra_simple_types, config.extra_collection_prefixes
        )
    )


def _assignment(
    name: str, type_name: str, method: str, classifier: TypeClassifier
) -> MemberAssignment:
    kind = classifier.classify(type_name)
    return MemberAssignment(
        name=name,
        type=type_name,
        kind=kind,
        nested_method=method if kind is TypeKind.COMPOSITE else None,
    )


def build_mappers(
    schema: EntitySchema,
    config: GeneratorConfig,
    classifier: Optional[TypeClassifier] = None,
) -> MapperSet:
    """
    Build the entity -> DTO and DTO -> entity mappers.

    The entity -> DTO direction classifies each field by its DTO type and
    the reverse direction by its entity type.

    Args:
        schema: Reconciled entity schema
        config: Generator configuration (method names, suffixes)
        classifier: Type classifier; built from config when omitted

    Returns:
        MapperSet with both directions
    """
    classifier = classifier or create_classifier(config)
    entity_name = schema.name
    dto_name = dto_class_name(entity_name, config)

    to_dto = MapperDefinition(
        method_name=config.to_dto_method,
        source_type=entity_name,
        target_type=dto_name,
        parameter="entity",
    )
    to_entity = MapperDefinition(
        method_name=config.to_entity_method,
        source_type=dto_name,
        target_type=entity_name,
        parameter="dto",
    )

    for canonical in schema.shared_fields:
        to_dto.assignments.append(
            _assignment(
                canonical.name, canonical.dto_type, config.to_dto_method, classifier
            )
        )
        to_entity.assignments.append(
            _assignment(
                canonical.name,
                canonical.entity_type,
                config.to_entity_method,
                classifier,
            )
        )

    return MapperSet(
        class_name=f"{entity_name}{config.mapper_suffix}",
        to_dto=to_dto,
        to_entity=to_entity,
    )
