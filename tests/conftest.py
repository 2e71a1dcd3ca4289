"""Shared fixtures for tests."""

from pathlib import Path

import pytest

from formschema.parsers import ParserOptions, registry
from formschema.schema.loader import parse_schema_data


@pytest.fixture
def examples_dir() -> Path:
    """Return the path to the examples directory."""
    return Path(__file__).parent.parent / "examples"


@pytest.fixture
def make_parser():
    """Return a factory resolving and parsing a raw schema mapping."""

    def factory(schema: dict, model=None, on_change=None, name: str = ""):
        node = parse_schema_data(schema)
        parser = registry.resolve(
            ParserOptions(schema=node, model=model, name=name, on_change=on_change)
        )
        parser.parse()
        return parser

    return factory


@pytest.fixture
def recorder():
    """Return a callable that records every value it is called with."""

    class Recorder:
        def __init__(self):
            self.calls = []

        def __call__(self, value):
            self.calls.append(value)

    return Recorder()


@pytest.fixture
def profile_schema() -> dict:
    """Return an object schema mixing scalar, enum and array properties."""
    return {
        "type": "object",
        "required": ["name"],
        "properties": {
            "name": {"type": "string", "minLength": 2},
            "age": {"type": "integer", "minimum": 0},
            "role": {"type": "string", "enum": ["admin", "editor"]},
            "tags": {
                "type": "array",
                "maxItems": 3,
                "items": {"type": "string"},
            },
        },
    }
