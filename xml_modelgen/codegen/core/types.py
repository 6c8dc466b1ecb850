"""
Type classification for mapper generation.

Decides per declared type string whether a value is copied as-is
between entity and DTO, or mapped through the referenced type's own
generated mapper. Classification is purely lexical: a composite type
name is never checked against the other generated models.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Iterable, Tuple


class TypeKind(Enum):
    """How a field value crosses a mapper."""

    SIMPLE = "simple"  # Copied by value
    COMPOSITE = "composite"  # Mapped by a recursive, null-safe call


BUILTIN_SIMPLE_TYPES: FrozenSet[str] = frozenset(
    {
        "int",
        "string",
        "bool",
        "decimal",
        "double",
        "float",
        "long",
        "short",
        "byte",
        "char",
        "uint",
        "ulong",
        "ushort",
        "sbyte",
        "DateTime",
        "Guid",
    }
)

COLLECTION_PREFIXES: Tuple[str, ...] = ("List<", "IEnumerable<")
ARRAY_SUFFIX = "[]"
NULLABLE_MARKER = "?"
GENERIC_OPEN = "<"


@dataclass(frozen=True)
class TypeClassifierConfig:
    """Configuration for type classification."""

    simple_types: FrozenSet[str] = BUILTIN_SIMPLE_TYPES
    collection_prefixes: Tuple[str, ...] = COLLECTION_PREFIXES
    array_suffix: str = ARRAY_SUFFIX

    @classmethod
    def with_extras(
        cls,
        extra_simple_types: Iterable[str] = (),
        extra_collection_prefixes: Iterable[str] = (),
    ) -> "TypeClassifierConfig":
        """Build a config that extends the built-in sets."""
        return cls(
            simple_types=BUILTIN_SIMPLE_TYPES | frozenset(extra_simple_types),
            collection_prefixes=COLLECTION_PREFIXES
            + tuple(p for p in extra_collection_prefixes if p not in COLLECTION_PREFIXES),
        )


def normalize_type_name(type_name: str) -> str:
    """
    Reduce a declared type to its bare name.

    ``" int? "`` becomes ``"int"`` and ``"Dictionary<string, int>"``
    becomes ``"Dictionary"``.
    """
    cleaned = type_name.strip()
    if cleaned.endswith(NULLABLE_MARKER):
        cleaned = cleaned[: -len(NULLABLE_MARKER)].rstrip()
    return cleaned.split(GENERIC_OPEN, 1)[0]


class TypeClassifier:
    """Classifies declared type strings as simple or composite."""

    def __init__(self, config: TypeClassifierConfig = None):
        self.config = config or TypeClassifierConfig()

    def classify(self, type_name: str) -> TypeKind:
        """
        Classify a declared type.

        Args:
            type_name: Type exactly as declared in the model document

        Returns:
            TypeKind.SIMPLE for built-ins, sequences and arrays, or blank
            input; TypeKind.COMPOSITE for anything else
        """
        if not type_name or not type_name.strip():
            return TypeKind.SIMPLE

        if normalize_type_name(type_name) in self.config.simple_types:
            return TypeKind.SIMPLE

        # Sequence detection looks at the declared string, not the normalised one.
        if type_name.startswith(self.config.collection_prefixes):
            return TypeKind.SIMPLE
        if type_name.endswith(self.config.array_suffix):
            return TypeKind.SIMPLE

        return TypeKind.COMPOSITE

    def is_simple(self, type_name: str) -> bool:
        return self.classify(type_name) is TypeKind.SIMPLE

    def is_composite(self, type_name: str) -> bool:
        return self.classify(type_name) is TypeKind.COMPOSITE


_default_classifier = TypeClassifier()


def classify_type(type_name: str) -> TypeKind:
    """Classify using the built-in type sets."""
    return _default_classifier.classify(type_name)
