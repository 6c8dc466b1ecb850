"""
C# naming utilities.

Member names are emitted as declared. Names that collide with C#
reserved keywords are written as verbatim identifiers (``@class``),
which still bind to the same member name.
"""

import re

CSHARP_RESERVED_WORDS = frozenset(
    {
        "abstract", "as", "base", "bool", "break", "byte", "case", "catch",
        "char", "checked", "class", "const", "continue", "decimal", "default",
        "delegate", "do", "double", "else", "enum", "event", "explicit",
        "extern", "false", "finally", "fixed", "float", "for", "foreach",
        "goto", "if", "implicit", "in", "int", "interface", "internal", "is",
        "lock", "long", "namespace", "new", "null", "object", "operator",
        "out", "override", "params", "private", "protected", "public",
        "readonly", "ref", "return", "sbyte", "sealed", "short", "sizeof",
        "stackalloc", "static", "string", "struct", "switch", "this", "throw",
        "true", "try", "typeof", "uint", "ulong", "unchecked", "unsafe",
        "ushort", "using", "virtual", "void", "volatile", "while",
    }
)

_IDENTIFIER = re.compile(r"^@?[A-Za-z_][A-Za-z0-9_]*$")


def is_reserved_word(name: str) -> bool:
    return name in CSHARP_RESERVED_WORDS


def escape_identifier(name: str) -> str:
    """Prefix reserved words with ``@``; other names are returned unchanged."""
    if is_reserved_word(name):
        return f"@{name}"
    return name


def is_valid_identifier(name: str) -> bool:
    """Check that a name is a plain C# identifier (ASCII subset)."""
    return bool(_IDENTIFIER.match(name))
