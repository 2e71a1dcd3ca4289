"""Plain-data helpers shared by the field tree."""

from .objects import assign, clear, clone, equals, is_empty, is_scalar
from .pattern import escape

__all__ = [
    "assign",
    "clear",
    "clone",
    "equals",
    "escape",
    "is_empty",
    "is_scalar",
]
