"""Field reconciliation tests."""

from __future__ import annotations

from xml_modelgen.codegen.core.reconciler import build_entity_schema, reconcile_fields
from xml_modelgen.codegen.core.schema import CanonicalField, RawFieldDeclaration, RawSchema


def _decl(name: str, type_name: str, entity: bool = False, dto: bool = False) -> RawFieldDeclaration:
    return RawFieldDeclaration(name=name, type=type_name, in_entity=entity, in_dto=dto)


def test_single_declaration_copies_type_to_flagged_sides_only() -> None:
    fields = reconcile_fields([_decl("Secret", "string", entity=True)])

    assert fields["Secret"] == CanonicalField(
        name="Secret", entity_type="string", dto_type=None, in_entity=True, in_dto=False
    )


def test_split_declarations_merge_into_one_field_with_two_types() -> None:
    fields = reconcile_fields(
        [_decl("age", "int", entity=True), _decl("age", "string", dto=True)]
    )

    assert list(fields) == ["age"]
    assert fields["age"] == CanonicalField(
        name="age", entity_type="int", dto_type="string", in_entity=True, in_dto=True
    )


def test_later_repeats_do_not_move_the_field() -> None:
    fields = reconcile_fields(
        [
            _decl("b", "int", entity=True),
            _decl("a", "int", entity=True),
            _decl("b", "long", dto=True),
            _decl("c", "int", dto=True),
        ]
    )

    assert list(fields) == ["b", "a", "c"]


def test_flags_are_ored_regardless_of_order() -> None:
    forward = reconcile_fields(
        [_decl("x", "int", entity=True), _decl("x", "int"), _decl("x", "int", dto=True)]
    )
    backward = reconcile_fields(
        [_decl("x", "int", dto=True), _decl("x", "int"), _decl("x", "int", entity=True)]
    )

    for fields in (forward, backward):
        assert fields["x"].in_entity is True
        assert fields["x"].in_dto is True


def test_last_entity_flagged_declaration_wins_entity_type() -> None:
    fields = reconcile_fields(
        [
            _decl("age", "int", entity=True),
            _decl("age", "long", entity=True),
            _decl("age", "string", dto=True),
        ]
    )

    assert fields["age"].entity_type == "long"
    assert fields["age"].dto_type == "string"


def test_unflagged_repeat_does_not_overwrite_types() -> None:
    fields = reconcile_fields(
        [_decl("age", "int", entity=True, dto=True), _decl("age", "decimal")]
    )

    assert fields["age"].entity_type == "int"
    assert fields["age"].dto_type == "int"


def test_build_entity_schema_keeps_name_and_shared_fields() -> None:
    schema = build_entity_schema(
        RawSchema(
            name="Person",
            declarations=[
                _decl("Id", "int", entity=True, dto=True),
                _decl("Secret", "string", entity=True),
                _decl("Display", "string", dto=True),
            ],
        )
    )

    assert schema.name == "Person"
    assert [f.name for f in schema.entity_fields] == ["Id", "Secret"]
    assert [f.name for f in schema.dto_fields] == ["Id", "Display"]
    assert [f.name for f in schema.shared_fields] == ["Id"]
