"""Type classifier tests."""

from __future__ import annotations

import pytest
from xml_modelgen.codegen.core.types import (
    BUILTIN_SIMPLE_TYPES,
    TypeClassifier,
    TypeClassifierConfig,
    TypeKind,
    classify_type,
    normalize_type_name,
)


@pytest.mark.parametrize("type_name", sorted(BUILTIN_SIMPLE_TYPES))
def test_builtin_types_are_simple(type_name: str) -> None:
    assert classify_type(type_name) is TypeKind.SIMPLE


@pytest.mark.parametrize(
    "type_name",
    ["int?", "DateTime?", " Guid ", "decimal ?", "List<Address>", "IEnumerable<Order>", "Address[]", "byte[]"],
)
def test_nullable_sequence_and_array_forms_are_simple(type_name: str) -> None:
    assert classify_type(type_name) is TypeKind.SIMPLE


@pytest.mark.parametrize(
    "type_name",
    ["Address", "Address?", "OrderLine", "Dictionary<string, int>", "ICollection<Order>", "String", "object"],
)
def test_other_types_are_composite(type_name: str) -> None:
    assert classify_type(type_name) is TypeKind.COMPOSITE


def test_sequence_detection_uses_declared_string() -> None:
    # Leading whitespace hides the wrapper prefix; the bare name "List" is not built in.
    assert classify_type(" List<int>") is TypeKind.COMPOSITE


def test_blank_type_is_simple() -> None:
    assert classify_type("") is TypeKind.SIMPLE
    assert classify_type("   ") is TypeKind.SIMPLE


@pytest.mark.parametrize(
    ("declared", "normalized"),
    [
        ("int", "int"),
        (" int? ", "int"),
        ("Nullable<int>", "Nullable"),
        ("Dictionary<string, int>?", "Dictionary"),
    ],
)
def test_normalize_type_name(declared: str, normalized: str) -> None:
    assert normalize_type_name(declared) == normalized


def test_extra_simple_types_extend_builtins() -> None:
    classifier = TypeClassifier(
        TypeClassifierConfig.with_extras(
            extra_simple_types=["DateOnly"], extra_collection_prefixes=["ICollection<"]
        )
    )

    assert classifier.is_simple("DateOnly?")
    assert classifier.is_simple("ICollection<Order>")
    assert classifier.is_simple("int")
    assert classifier.is_composite("Address")
