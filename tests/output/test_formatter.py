"""Tests for field tree formatting."""

import json

from formschema.output.formatter import format_field_tree


class TestTextFormat:
    def test_scalar_line(self, make_parser):
        field = make_parser({"type": "string", "minLength": 2}, "Arya", name="name").field

        assert format_field_tree(field) == "name <string> [type=text, minlength=2] = 'Arya'"

    def test_tree(self, make_parser, profile_schema):
        field = make_parser(profile_schema, {"name": "Arya", "tags": ["a"]}).field
        lines = format_field_tree(field).splitlines()

        assert lines[0] == "(root) <object> [type=fieldset]"
        assert lines[1] == "  name * <string> [type=text, required=True, minlength=2] = 'Arya'"
        assert "    (1 item(s))" in lines
        assert "    tags[0] <string> [type=text] = 'a'" in lines
        assert "    - 'admin'" in lines


class TestJsonFormat:
    def test_json_round_trips(self, make_parser, profile_schema):
        field = make_parser(profile_schema, {"age": 3}).field
        data = json.loads(format_field_tree(field, "json"))

        assert data["kind"] == "object"
        assert data["model"]["age"] == 3
        assert data["fields"]["age"]["attrs"]["min"] == 0
