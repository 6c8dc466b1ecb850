"""C# source rendering tests."""

from __future__ import annotations

from xml_modelgen.codegen.core.config import GeneratorConfig
from xml_modelgen.codegen.core.parser import parse_schema
from xml_modelgen.codegen.core.reconciler import build_entity_schema
from xml_modelgen.codegen.languages.csharp import CSharpGenerator, escape_identifier

EXPECTED_PERSON_ENTITY = """namespace AppConsumer.Entities;

public class Person
{
    public int Id { get; set; }
    public Address Address { get; set; }
    public string Secret { get; set; }
}
"""

EXPECTED_PERSON_DTO = """using AppConsumer.Entities;

namespace AppConsumer.DTOs;

public class PersonDTO
{
    public int Id { get; set; }
    public Address Address { get; set; }
}

public static class PersonMapper
{
    public static PersonDTO MapToDTO(this Person entity) => new PersonDTO
    {
        Id = entity.Id,
        Address = entity.Address?.MapToDTO(),
    };

    public static Person MapToEntity(this PersonDTO dto) => new Person
    {
        Id = dto.Id,
        Address = dto.Address?.MapToEntity(),
    };
}
"""


def _generate(text: str, **config):
    generator = CSharpGenerator(GeneratorConfig(**config))
    schema = build_entity_schema(parse_schema(text).schema)
    return {a.file_identifier: a.source_text for a in generator.generate(schema)}


def test_person_sources_match_expected_layout(person_xml: str) -> None:
    files = _generate(person_xml, add_comments=False)

    assert list(files) == ["Person.Entity.g.cs", "Person.DTO.g.cs"]
    assert files["Person.Entity.g.cs"] == EXPECTED_PERSON_ENTITY
    assert files["Person.DTO.g.cs"] == EXPECTED_PERSON_DTO


def test_header_comment_is_emitted_by_default(person_xml: str) -> None:
    files = _generate(person_xml)

    for source in files.values():
        assert source.startswith("// <auto-generated />\n// Generated by xml-modelgen.")


def test_split_field_declares_each_side_with_its_own_type(split_age_xml: str) -> None:
    files = _generate(split_age_xml, add_comments=False)

    assert "    public int age { get; set; }" in files["Customer.Entity.g.cs"]
    dto_source = files["Customer.DTO.g.cs"]
    assert "    public string age { get; set; }" in dto_source
    assert "        age = entity.age," in dto_source
    assert "        age = dto.age," in dto_source


def test_generic_types_are_not_escaped() -> None:
    files = _generate(
        "<Model name='Cart'>"
        "<Property name='Lines' type='List&lt;CartLine&gt;' inEntity='true' inDTO='true' />"
        "</Model>",
        add_comments=False,
    )

    assert "public List<CartLine> Lines { get; set; }" in files["Cart.Entity.g.cs"]
    assert "Lines = entity.Lines," in files["Cart.DTO.g.cs"]


def test_keyword_member_names_use_verbatim_identifiers() -> None:
    files = _generate(
        "<Model name='Ticket'>"
        "<Property name='class' type='string' inEntity='true' inDTO='true' />"
        "</Model>",
        add_comments=False,
    )

    assert "public string @class { get; set; }" in files["Ticket.Entity.g.cs"]
    assert "@class = entity.@class," in files["Ticket.DTO.g.cs"]


def test_custom_namespace_extension_and_indent(person_xml: str) -> None:
    files = _generate(
        person_xml,
        root_namespace="Contoso.Billing",
        entity_namespace="Models",
        file_extension=".cs",
        indent_size=2,
        add_comments=False,
    )

    entity_source = files["Person.Entity.cs"]
    dto_source = files["Person.DTO.cs"]
    assert entity_source.startswith("namespace Contoso.Billing.Models;\n")
    assert "\n  public int Id { get; set; }\n" in entity_source
    assert dto_source.startswith("using Contoso.Billing.Models;\n\nnamespace Contoso.Billing.DTOs;\n")


def test_empty_schema_still_renders_valid_shells() -> None:
    files = _generate("<Model name='Empty' />", add_comments=False)

    assert "public class Empty\n{\n}\n" in files["Empty.Entity.g.cs"]
    assert "=> new EmptyDTO\n    {\n    };" in files["Empty.DTO.g.cs"]


def test_validate_schema_reports_type_mismatch_and_keywords(split_age_xml: str) -> None:
    generator = CSharpGenerator(GeneratorConfig())
    schema = build_entity_schema(parse_schema(split_age_xml).schema)

    warnings = generator.validate_schema(schema)

    assert any("different types" in w for w in warnings)


def test_escape_identifier_leaves_plain_names_alone() -> None:
    assert escape_identifier("Name") == "Name"
    assert escape_identifier("event") == "@event"
