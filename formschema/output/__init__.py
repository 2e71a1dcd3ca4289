"""Output formatting for compiled field trees."""

from .formatter import format_field_tree

__all__ = ["format_field_tree"]
