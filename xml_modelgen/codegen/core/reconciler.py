"""
Field reconciliation.

A field may be declared several times, for example once for the entity
shape and once for the DTO shape with a different type. The reconciler
folds those declarations into one :class:`CanonicalField` per name.
"""

from typing import Dict, Iterable

from .schema import CanonicalField, EntitySchema, RawFieldDeclaration, RawSchema


def merge_declaration(
    existing: CanonicalField, declaration: RawFieldDeclaration
) -> CanonicalField:
    """Fold a repeated declaration into an existing canonical field."""
    return CanonicalField(
        name=existing.name,
        entity_type=declaration.type if declaration.in_entity else existing.entity_type,
        dto_type=declaration.type if declaration.in_dto else existing.dto_type,
        in_entity=existing.in_entity or declaration.in_entity,
        in_dto=existing.in_dto or declaration.in_dto,
    )


def reconcile_fields(
    declarations: Iterable[RawFieldDeclaration],
) -> Dict[str, CanonicalField]:
    """
    Merge declarations by field name.

    Flags are OR-ed. The last entity-flagged declaration decides
    ``entity_type`` and the last DTO-flagged one decides ``dto_type``.
    Names keep the position of their first occurrence.

    Args:
        declarations: Declarations in document order

    Returns:
        Insertion-ordered mapping of field name to canonical field
    """
    fields: Dict[str, CanonicalField] = {}

    for declaration in declarations:
        existing = fields.get(declaration.name)
        if existing is None:
            fields[declaration.name] = CanonicalField(
                name=declaration.name,
                entity_type=declaration.type if declaration.in_entity else None,
                dto_type=declaration.type if declaration.in_dto else None,
                in_entity=declaration.in_entity,
                in_dto=declaration.in_dto,
            )
        else:
            # Reassigning an existing key keeps its dict position.
            fields[declaration.name] = merge_declaration(existing, declaration)

    return fields


def build_entity_schema(raw_schema: RawSchema) -> EntitySchema:
    """Reconcile a parsed document into an :class:`EntitySchema`."""
    return EntitySchema(
        name=raw_schema.name, fields=reconcile_fields(raw_schema.declarations)
    )
