"""Schema layer for loading and validating type definitions."""

from .errors import (
    FieldStateError,
    FormSchemaError,
    SchemaLoadError,
    SchemaValidationError,
    UnsupportedKindError,
)
from .models import SchemaNode, json_type
from .loader import (
    load_data,
    load_model,
    load_schema_file,
    parse_schema,
    parse_schema_data,
    to_json_value,
)

__all__ = [
    "FieldStateError",
    "FormSchemaError",
    "SchemaLoadError",
    "SchemaValidationError",
    "UnsupportedKindError",
    "SchemaNode",
    "json_type",
    "load_data",
    "load_model",
    "load_schema_file",
    "parse_schema",
    "parse_schema_data",
    "to_json_value",
]
