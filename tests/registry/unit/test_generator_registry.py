"""Generator registry tests."""

from __future__ import annotations

import pytest
from xml_modelgen.codegen.core.config import GeneratorConfig
from xml_modelgen.codegen.languages.csharp import CSharpGenerator
from xml_modelgen.codegen.registry import (
    GeneratorRegistry,
    RegistryError,
    get_generator,
    get_language_info,
    is_language_supported,
    list_supported_languages,
)


def test_csharp_is_registered_with_aliases() -> None:
    assert list_supported_languages() == ["csharp"]
    for name in ("csharp", "CSharp", "cs", "c#"):
        assert is_language_supported(name)
    assert not is_language_supported("cobol")


def test_get_generator_accepts_dict_and_config_objects() -> None:
    from_dict = get_generator("cs", {"root_namespace": "Shop"})
    from_object = get_generator("csharp", GeneratorConfig(root_namespace="Store"))

    assert isinstance(from_dict, CSharpGenerator)
    assert from_dict.config.root_namespace == "Shop"
    assert from_object.config.root_namespace == "Store"


def test_unknown_language_raises_registry_error() -> None:
    with pytest.raises(RegistryError, match="Available: csharp"):
        get_generator("cobol")


def test_invalid_config_type_raises_registry_error() -> None:
    with pytest.raises(RegistryError, match="Invalid config type"):
        get_generator("csharp", 42)


def test_language_info_describes_generator() -> None:
    info = get_language_info("c#")

    assert info["name"] == "csharp"
    assert info["file_extension"] == ".g.cs"
    assert info["class"] == "CSharpGenerator"
    assert info["aliases"] == ["c#", "cs"]


def test_registry_rejects_non_generator_classes_and_alias_clashes() -> None:
    registry = GeneratorRegistry()

    with pytest.raises(RegistryError):
        registry.register("text", str)

    registry.register("csharp", CSharpGenerator, aliases=["cs"])
    with pytest.raises(RegistryError, match="already points"):
        registry.register("other", CSharpGenerator, aliases=["cs"])
