"""Default descriptor factory: label and helper text for a field."""

from typing import Any

from ..schema.models import SchemaNode


def native_descriptor(schema: SchemaNode) -> dict[str, Any]:
    """Build a presentation descriptor from schema metadata."""
    descriptor: dict[str, Any] = {"label": schema.title or ""}

    if schema.description:
        descriptor["helper"] = schema.description

    return descriptor
