"""
C# code generator module.

Generates entity classes, DTO classes and mapper extension methods
from XML model documents.
"""

from .generator import CSharpGenerator, create_csharp_generator
from .naming import (
    CSHARP_RESERVED_WORDS,
    escape_identifier,
    is_reserved_word,
    is_valid_identifier,
)

__all__ = [
    "CSharpGenerator",
    "create_csharp_generator",
    "CSHARP_RESERVED_WORDS",
    "escape_identifier",
    "is_reserved_word",
    "is_valid_identifier",
]
