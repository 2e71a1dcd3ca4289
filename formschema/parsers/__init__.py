"""Parsers turning schema nodes into fields.

Importing this package registers every built-in kind on the default
registry.
"""

from .base import MISSING, Parser, ParserOptions
from .registry import ParserRegistry, registry
from .string import StringParser
from .number import NumberParser
from .integer import IntegerParser
from .boolean import BooleanParser
from .enum import ENUM_RADIO_LIMIT, EnumParser
from .object import ObjectParser
from .array import ArrayParser

__all__ = [
    "MISSING",
    "Parser",
    "ParserOptions",
    "ParserRegistry",
    "registry",
    "StringParser",
    "NumberParser",
    "IntegerParser",
    "BooleanParser",
    "EnumParser",
    "ENUM_RADIO_LIMIT",
    "ObjectParser",
    "ArrayParser",
]
