"""Tests for the compile entry points."""

import pytest

from formschema.compiler import compile_schema, compile_schema_file
from formschema.parsers import StringParser, registry
from formschema.schema.errors import SchemaLoadError, SchemaValidationError, UnsupportedKindError
from formschema.schema.models import SchemaNode


class TestCompileSchema:
    def test_compile_raw_mapping(self, recorder):
        field = compile_schema(
            {"type": "string", "minLength": 5, "maxLength": 15, "pattern": "arya|jon"},
            "Goku",
            on_change=recorder,
        )

        assert field.kind == "string"
        assert field.model == "Goku"
        assert field.attrs["minlength"] == 5
        assert field.attrs["maxlength"] == 15
        assert field.attrs["pattern"] == "arya|jon"
        assert recorder.calls == ["Goku"]

    def test_compile_node(self):
        field = compile_schema(SchemaNode(type="integer"), "3", name="count")

        assert field.name == "count"
        assert field.model == 3

    def test_object_aggregation(self, recorder):
        field = compile_schema(
            {"type": "object", "properties": {"a": {"type": "integer"}, "b": {"type": "string"}}},
            {"a": 1, "b": "x"},
            on_change=recorder,
        )

        assert field.model == {"a": 1, "b": "x"}

        field.fields["a"].set_value(2)

        assert field.model == {"a": 2, "b": "x"}
        assert recorder.calls[-1] == {"a": 2, "b": "x"}

    def test_invalid_schema(self):
        with pytest.raises(SchemaValidationError):
            compile_schema({"type": "string", "maxLength": "long"})

    def test_unsupported_kind(self):
        with pytest.raises(UnsupportedKindError):
            compile_schema({"type": "null"})

    def test_custom_registry(self):
        custom = registry.copy()
        custom.register("null", StringParser)

        field = compile_schema({"type": "null"}, registry=custom)

        assert field.kind == "string"


class TestCompileSchemaFile:
    def test_schema_and_model(self, examples_dir):
        field = compile_schema_file(
            examples_dir / "profile.schema.yaml",
            examples_dir / "profile.model.json",
        )

        assert field.model == {
            "name": "Arya",
            "email": "arya@winterfell.north",
            "age": 17,
            "newsletter": False,
            "role": "editor",
            "tags": ["stark", "faceless"],
        }
        assert field.fields["age"].attrs["min"] == 1
        assert field.fields["age"].attrs["max"] == 149
        assert field.fields["email"].attrs["type"] == "email"

    def test_schema_only(self, examples_dir):
        field = compile_schema_file(examples_dir / "profile.schema.yaml")

        assert field.fields["tags"].items_num == 1
        assert field.fields["newsletter"].model is False

    def test_missing_file(self):
        with pytest.raises(SchemaLoadError):
            compile_schema_file("/nonexistent/schema.yaml")

    def test_unsupported_kind_file(self, examples_dir):
        with pytest.raises(UnsupportedKindError) as exc_info:
            compile_schema_file(examples_dir / "invalid" / "unsupported_kind.yaml")
        assert exc_info.value.path == "location"
