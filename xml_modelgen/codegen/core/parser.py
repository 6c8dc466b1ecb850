"""
XML model document parser.

Turns the text of one ``*.model.xml`` document into a :class:`RawSchema`.
Malformed documents are reported through :class:`ParseResult` instead of
exceptions so that a broken model never stops a batch.
"""

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import List, Optional

from ...logging_config import get_logger
from .schema import RawFieldDeclaration, RawSchema

logger = get_logger(__name__)

PROPERTY_TAG = "Property"

# First attribute present wins.
ENTITY_FLAG_ATTRIBUTES = ("inEntity", "inEntityTarget")
DTO_FLAG_ATTRIBUTES = ("inDTO", "inDtoTarget")

TRUE_LITERALS = frozenset({"true", "True"})


@dataclass
class ParseResult:
    """Outcome of parsing one model document."""

    schema: Optional[RawSchema] = None
    skip_reason: Optional[str] = None
    warnings: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.schema is not None

    @classmethod
    def skip(cls, reason: str) -> "ParseResult":
        return cls(schema=None, skip_reason=reason)


def parse_flag(value: Optional[str]) -> bool:
    """Parse a boolean attribute; anything but a true literal is False."""
    return value is not None and value in TRUE_LITERALS


def _first_attribute(element: ET.Element, names) -> Optional[str]:
    for name in names:
        value = element.get(name)
        if value is not None:
            return value
    return None


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def parse_property(element: ET.Element) -> Optional[RawFieldDeclaration]:
    """
    Parse one ``<Property>`` element.

    Returns:
        The declaration, or None when ``name`` or ``type`` is missing or blank.
    """
    name = element.get("name")
    type_name = element.get("type")

    if _is_blank(name) or _is_blank(type_name):
        return None

    return RawFieldDeclaration(
        name=name,
        type=type_name,
        in_entity=parse_flag(_first_attribute(element, ENTITY_FLAG_ATTRIBUTES)),
        in_dto=parse_flag(_first_attribute(element, DTO_FLAG_ATTRIBUTES)),
    )


def parse_schema(text: Optional[str]) -> ParseResult:
    """
    Parse the raw text of a model document.

    Args:
        text: XML document with one root element carrying ``name`` and
            ``<Property>`` children.

    Returns:
        ParseResult holding the schema, or a skip reason when the whole
        document has to be dropped.
    """
    if text is None:
        return ParseResult.skip("no content")

    try:
        root = ET.fromstring(text)
    except ET.ParseError as e:
        logger.debug("Unparsable model document: %s", e)
        return ParseResult.skip(f"malformed XML: {e}")

    entity_name = root.get("name")
    if _is_blank(entity_name):
        logger.debug("Model document root <%s> has no name", root.tag)
        return ParseResult.skip("root element has no name")

    result = ParseResult(schema=RawSchema(name=entity_name))

    for position, element in enumerate(root.findall(PROPERTY_TAG), start=1):
        declaration = parse_property(element)
        if declaration is None:
            message = (
                f"{entity_name}: property #{position} skipped "
                f"(missing or blank name/type)"
            )
            logger.debug(message)
            result.warnings.append(message)
            continue
        result.schema.declarations.append(declaration)

    return result
