"""Schema-driven field descriptor compiler."""

from .compiler import compile_schema, compile_schema_file
from .fields import Field
from .parsers import Parser, ParserOptions, ParserRegistry, registry
from .schema import (
    FieldStateError,
    FormSchemaError,
    SchemaLoadError,
    SchemaNode,
    SchemaValidationError,
    UnsupportedKindError,
)

__all__ = [
    "compile_schema",
    "compile_schema_file",
    "Field",
    "Parser",
    "ParserOptions",
    "ParserRegistry",
    "registry",
    "FieldStateError",
    "FormSchemaError",
    "SchemaLoadError",
    "SchemaNode",
    "SchemaValidationError",
    "UnsupportedKindError",
]
