"""Compiler facade tests: skip policy, batching and idempotence."""

from __future__ import annotations

from xml_modelgen import compile_text
from xml_modelgen.codegen.compiler import compile_batch, compile_schema, iter_artifacts
from xml_modelgen.codegen.core.config import GeneratorConfig
from xml_modelgen.codegen.core.generator import GeneratorError
from xml_modelgen.codegen.languages.csharp import CSharpGenerator


def test_valid_schema_yields_exactly_two_artifacts(person_xml: str) -> None:
    result = compile_schema("Person.model.xml", person_xml)

    assert result.success
    assert not result.skipped
    assert [a.file_identifier for a in result.artifacts] == [
        "Person.Entity.g.cs",
        "Person.DTO.g.cs",
    ]
    assert result.metadata["mapped_fields"] == 2
    assert result.metadata["entity_members"] == 3
    assert result.metadata["dto_members"] == 2


def test_malformed_document_yields_nothing_and_does_not_raise() -> None:
    result = compile_schema("broken.model.xml", "<Model name='X'><Property")

    assert result.success
    assert result.skipped
    assert result.artifacts == []
    assert result.skip_reason.startswith("malformed XML")


def test_blank_root_name_yields_nothing() -> None:
    result = compile_schema("nameless.model.xml", "<Model name=''><Property name='Id' type='int' /></Model>")

    assert result.skipped
    assert result.artifacts == []


def test_skipped_fields_surface_as_warnings() -> None:
    result = compile_schema(
        "Order.model.xml",
        "<Model name='Order'>"
        "<Property name='Id' type='int' inEntity='true' inDTO='true' />"
        "<Property name='' type='int' inEntity='true' />"
        "</Model>",
    )

    assert len(result.artifacts) == 2
    assert any("skipped" in w for w in result.warnings)


def test_recompiling_is_byte_identical(person_xml: str) -> None:
    first = compile_schema("Person.model.xml", person_xml)
    second = compile_schema("Person.model.xml", person_xml)

    assert [a.as_pair() for a in first.artifacts] == [a.as_pair() for a in second.artifacts]


def test_batch_keeps_input_order_and_survives_bad_units(person_xml: str, split_age_xml: str) -> None:
    units = [
        ("Person.model.xml", person_xml),
        ("broken.model.xml", "<<<"),
        ("missing.model.xml", None),
        ("Customer.model.xml", split_age_xml),
    ]

    results = compile_batch(units, max_workers=4)

    assert [r.identifier for r in results] == [u[0] for u in units]
    assert [r.skipped for r in results] == [False, True, True, False]
    assert [name for name, _ in iter_artifacts(results)] == [
        "Person.Entity.g.cs",
        "Person.DTO.g.cs",
        "Customer.Entity.g.cs",
        "Customer.DTO.g.cs",
    ]


def test_batch_matches_sequential_compilation(person_xml: str, split_age_xml: str) -> None:
    units = [("a", person_xml), ("b", split_age_xml)] * 5
    generator = CSharpGenerator()

    parallel = list(iter_artifacts(compile_batch(units, generator, max_workers=3)))
    sequential = list(
        iter_artifacts(compile_schema(name, text, generator) for name, text in units)
    )

    assert parallel == sequential


def test_empty_batch_returns_empty_list() -> None:
    assert compile_batch([]) == []


class _ExplodingGenerator(CSharpGenerator):
    def generate(self, schema):
        if schema.name == "Boom":
            raise GeneratorError("boom")
        if schema.name == "Crash":
            raise RuntimeError("crash")
        return super().generate(schema)


def test_generator_failures_stay_local_to_their_unit(person_xml: str) -> None:
    units = [
        ("boom", "<Model name='Boom' />"),
        ("crash", "<Model name='Crash' />"),
        ("person", person_xml),
    ]

    results = compile_batch(units, _ExplodingGenerator())

    assert [r.success for r in results] == [False, False, True]
    assert "boom" in results[0].error_message
    assert "crash" in results[1].error_message
    assert len(results[2].artifacts) == 2


def test_compile_text_returns_file_mapping(person_xml: str) -> None:
    files = compile_text(person_xml, config={"root_namespace": "Shop"})

    assert set(files) == {"Person.Entity.g.cs", "Person.DTO.g.cs"}
    assert "namespace Shop.DTOs;" in files["Person.DTO.g.cs"]
    assert compile_text("garbage") == {}


def test_unexpected_generator_error_is_returned_not_raised(person_xml: str) -> None:
    generator = CSharpGenerator(GeneratorConfig(indent_size="4"))

    result = compile_schema("Person.model.xml", person_xml, generator)

    assert not result.success
    assert result.artifacts == []
    assert result.error_message.startswith("Unexpected failure")
    assert isinstance(result.exception, TypeError)
    assert compile_text(person_xml, config={"indent_size": "4"}) == {}
