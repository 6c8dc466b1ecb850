"""Shared fixtures for model compilation tests."""

from __future__ import annotations

import pytest

PERSON_XML = """<?xml version="1.0" encoding="utf-8"?>
<Model name="Person">
  <Property name="Id" type="int" inEntity="true" inDTO="true" />
  <Property name="Address" type="Address" inEntity="true" inDTO="true" />
  <Property name="Secret" type="string" inEntity="true" />
</Model>
"""

SPLIT_AGE_XML = """
<Model name="Customer">
  <Property name="age" type="int" inEntity="true" />
  <Property name="age" type="string" inDTO="true" />
</Model>
"""


@pytest.fixture
def person_xml() -> str:
    return PERSON_XML


@pytest.fixture
def split_age_xml() -> str:
    return SPLIT_AGE_XML
