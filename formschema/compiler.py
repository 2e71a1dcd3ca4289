"""Entry points compiling a schema and a model into a field tree."""

import logging
from pathlib import Path
from typing import Any, Callable

from .fields.field import Field
from .parsers import ParserOptions, ParserRegistry, registry as default_registry
from .schema.loader import load_model, parse_schema, parse_schema_data
from .schema.models import SchemaNode

logger = logging.getLogger(__name__)


def compile_schema(
    schema: SchemaNode | dict,
    model: Any = None,
    on_change: Callable[[Any], None] | None = None,
    registry: ParserRegistry | None = None,
    name: str = "",
) -> Field:
    """Parse a schema and its current value into a committed field tree.

    Args:
        schema: A SchemaNode or a raw JSON-Schema-like mapping.
        model: The current value for the schema.
        on_change: Called with the new model after every notifying change.
        registry: Parser registry to resolve kinds with; defaults to the
            built-in registry.
        name: Name of the root field.

    Returns:
        The root Field.

    Raises:
        SchemaValidationError: If a raw schema fails validation.
        UnsupportedKindError: If any node has no registered parser.
    """
    node = parse_schema_data(schema)
    registry = registry or default_registry

    logger.debug("Compiling %s schema '%s'", node.type, name)

    parser = registry.resolve(
        ParserOptions(
            schema=node,
            model=model,
            name=name,
            on_change=on_change,
            registry=registry,
        )
    )
    field = parser.parse()

    logger.debug("Compiled '%s' into %d field(s)", name, sum(1 for _ in field.walk()))

    return field


def compile_schema_file(
    schema_path: str | Path,
    model_path: str | Path | None = None,
    **kwargs: Any,
) -> Field:
    """Load a schema file, and optionally a model file, then compile them.

    Raises:
        SchemaLoadError: If a file cannot be loaded.
        SchemaValidationError: If the schema fails validation.
        UnsupportedKindError: If any node has no registered parser.
    """
    schema = parse_schema(schema_path)
    model = load_model(model_path) if model_path is not None else None
    return compile_schema(schema, model, **kwargs)
