"""Loading of schema files and model (current value) files."""

import datetime
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .errors import SchemaLoadError, SchemaValidationError
from .models import SchemaNode


def load_data(path: str | Path) -> Any:
    """Load a YAML or JSON file and return its raw content.

    JSON documents are valid YAML, so both are read with the YAML loader.

    Raises:
        SchemaLoadError: If the file cannot be read or parsed.
    """
    path = Path(path)

    if not path.exists():
        raise SchemaLoadError(f"File not found: {path}", str(path))

    if not path.is_file():
        raise SchemaLoadError(f"Not a file: {path}", str(path))

    try:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise SchemaLoadError(f"Invalid YAML: {e}", str(path)) from e
    except OSError as e:
        raise SchemaLoadError(f"Cannot read file: {e}", str(path)) from e


def load_schema_file(path: str | Path) -> dict:
    """Load a schema file and return its root mapping.

    An empty file is an empty schema. Any other non-mapping root is
    rejected, since a schema node is always an object.

    Raises:
        SchemaLoadError: If the file cannot be loaded or its root is not
            a mapping.
    """
    data = load_data(path)

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise SchemaLoadError(
            f"Schema root must be a mapping, got {type(data).__name__}", str(path)
        )

    return data


def load_model(path: str | Path) -> Any:
    """Load a model file holding the current value of a schema.

    Unlike schemas, a model may have any JSON value at its root. YAML-only
    values are converted to their JSON form: dates and times become ISO
    strings, mapping keys become strings.

    Raises:
        SchemaLoadError: If the file cannot be loaded or holds a value with
            no JSON equivalent.
    """
    data = load_data(path)

    try:
        return to_json_value(data)
    except TypeError as e:
        raise SchemaLoadError(f"Unsupported model value: {e}", str(path)) from e


def to_json_value(value: Any) -> Any:
    """Convert a YAML-loaded value to plain JSON data.

    Raises:
        TypeError: If value has no JSON equivalent.
    """
    if value is None or isinstance(value, (str, int, float, bool)):
        return value

    if isinstance(value, (datetime.date, datetime.time)):
        return value.isoformat()

    if isinstance(value, dict):
        return {str(key): to_json_value(item) for key, item in value.items()}

    if isinstance(value, (list, tuple)):
        return [to_json_value(item) for item in value]

    raise TypeError(type(value).__name__)


def parse_schema(path: str | Path) -> SchemaNode:
    """Load and parse a schema file into a SchemaNode.

    Raises:
        SchemaLoadError: If the file cannot be loaded.
        SchemaValidationError: If the data fails validation.
    """
    return parse_schema_data(load_schema_file(path))


def parse_schema_data(data: dict | SchemaNode) -> SchemaNode:
    """Validate raw data into a SchemaNode.

    Error locations are dotted paths into the schema document, such as
    ``properties.age.minimum``.

    Raises:
        SchemaValidationError: If the data fails validation.
    """
    if isinstance(data, SchemaNode):
        return data

    if not isinstance(data, dict):
        raise SchemaValidationError(
            f"Schema root must be a mapping, got {type(data).__name__}",
            [{"loc": "", "msg": "Input should be a mapping", "type": "dict_type"}],
        )

    try:
        return SchemaNode.model_validate(data)
    except ValidationError as e:
        errors = [
            {
                "loc": ".".join(str(x) for x in err["loc"]),
                "msg": err["msg"],
                "type": err["type"],
            }
            for err in e.errors()
        ]
        raise SchemaValidationError(
            f"Schema validation failed with {len(errors)} error(s)", errors
        ) from e
