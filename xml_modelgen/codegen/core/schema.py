"""
Core schema representation for code generation.

Holds the records that flow from the XML model parser through the
reconciler into the emitters.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass(frozen=True)
class RawFieldDeclaration:
    """A single ``<Property>`` occurrence as written in the model document."""

    name: str
    type: str
    in_entity: bool = False
    in_dto: bool = False


@dataclass
class RawSchema:
    """Parsed model document before field reconciliation."""

    name: str
    declarations: List[RawFieldDeclaration] = field(default_factory=list)


@dataclass
class CanonicalField:
    """
    Reconciled view of one field across all of its declarations.

    ``entity_type`` is set whenever ``in_entity`` is true and ``dto_type``
    whenever ``in_dto`` is true.
    """

    name: str
    entity_type: Optional[str] = None
    dto_type: Optional[str] = None
    in_entity: bool = False
    in_dto: bool = False

    @property
    def is_shared(self) -> bool:
        """True when the field is visible on both the entity and the DTO."""
        return self.in_entity and self.in_dto


@dataclass
class EntitySchema:
    """Represents one entity with its canonical fields in first-seen order."""

    name: str
    fields: Dict[str, CanonicalField] = field(default_factory=dict)

    @property
    def entity_fields(self) -> List[CanonicalField]:
        return [f for f in self.fields.values() if f.in_entity]

    @property
    def dto_fields(self) -> List[CanonicalField]:
        return [f for f in self.fields.values() if f.in_dto]

    @property
    def shared_fields(self) -> List[CanonicalField]:
        return [f for f in self.fields.values() if f.is_shared]


@dataclass(frozen=True)
class GeneratedArtifact:
    """One generated source file."""

    file_identifier: str
    source_text: str

    def as_pair(self) -> tuple:
        return (self.file_identifier, self.source_text)
