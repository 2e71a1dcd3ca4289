"""Output formatting for compiled field trees."""

import json
from typing import Literal

from ..fields.field import Field

ATTR_ORDER = ("type", "required", "disabled", "readonly", "min", "max", "step", "minlength", "maxlength", "pattern")


def format_field_tree(
    field: Field,
    format: Literal["text", "json"] = "text",
) -> str:
    """Format a field tree for output.

    Args:
        field: The root field.
        format: Output format ("text" or "json").

    Returns:
        Formatted string representation.
    """
    if format == "json":
        return json.dumps(field.to_dict(), indent=2, default=str)
    return "\n".join(_format_text(field, 0))


def _format_text(field: Field, depth: int) -> list[str]:
    """Format a field and its children as indented lines."""
    indent = "  " * depth
    label = field.name or "(root)"
    required = " *" if field.required else ""

    line = f"{indent}{label}{required} <{field.kind}> {_format_attrs(field)}".rstrip()
    if not (field.is_object_field or field.is_array_field):
        line += f" = {field.model!r}"

    lines = [line]

    if field.is_array_field:
        lines.append(f"{indent}  ({field.items_num} item(s))")

    for child in field.get_fields():
        lines.extend(_format_text(child, depth + 1))

    for option in field.options:
        lines.append(f"{indent}  - {option.model!r}")

    return lines


def _format_attrs(field: Field) -> str:
    """Format the constraint attributes of a field."""
    parts = [
        f"{key}={field.attrs[key]}"
        for key in ATTR_ORDER
        if key in field.attrs
    ]
    return f"[{', '.join(parts)}]" if parts else ""
