"""Tests for the shared parser lifecycle and notification protocol."""

import pytest

from formschema.parsers import ParserOptions, StringParser
from formschema.schema.errors import FieldStateError
from formschema.schema.models import SchemaNode

SCHEMA = {"type": "string", "pattern": "arya|jon", "minLength": 5, "maxLength": 15}


class TestParseField:
    def test_identity_and_flags(self, make_parser):
        parser = make_parser(
            {"type": "string", "title": "Name", "description": "Your name", "readOnly": True, "disabled": True},
            name="name",
        )
        field = parser.field

        assert field.name == "name"
        assert field.attrs["name"] == "name"
        assert field.attrs["readonly"] is True
        assert field.attrs["disabled"] is True
        assert field.descriptor == {"label": "Name", "helper": "Your name"}

    def test_unset_attrs_are_omitted(self, make_parser):
        attrs = make_parser({"type": "string"}).field.attrs

        assert attrs == {"type": "text"}

    def test_default_is_cloned(self, make_parser):
        default = {"a": 1}
        parser = make_parser({"type": "object", "default": default})

        assert parser.field.default == default
        assert parser.field.default is not parser.schema.default

    def test_custom_descriptor_factory(self):
        options = ParserOptions(
            schema=SchemaNode(type="string", title="Name"),
            descriptor_factory=lambda schema: {"label": schema.title.upper()},
        )
        field = StringParser(options).parse()

        assert field.descriptor == {"label": "NAME"}


class TestCommit:
    def test_field_is_not_live_before_commit(self):
        parser = StringParser(ParserOptions(schema=SchemaNode(type="string"), model="x"))

        assert not parser.field.committed
        assert parser.field.model is None
        with pytest.raises(FieldStateError):
            parser.field.set_value("y")

    def test_commit_binds_and_notifies_once(self, make_parser, recorder):
        parser = make_parser(SCHEMA, "arya", on_change=recorder)

        assert parser.field.committed
        assert parser.live
        assert parser.field.value == "arya"
        assert recorder.calls == ["arya"]


class TestSetValue:
    def test_set_value_updates_model_and_notifies(self, make_parser, recorder):
        parser = make_parser(SCHEMA, "arya", on_change=recorder)

        parser.field.set_value("jon")

        assert parser.raw_value == "jon"
        assert parser.model == "jon"
        assert recorder.calls == ["arya", "jon"]

    def test_same_value_does_not_notify(self, make_parser, recorder):
        parser = make_parser(SCHEMA, "arya", on_change=recorder)

        parser.field.set_value("arya")

        assert recorder.calls == ["arya"]

    def test_coerced_equal_value_does_not_notify(self, make_parser, recorder):
        parser = make_parser({"type": "string"}, "12", on_change=recorder)

        parser.field.set_value(12)

        assert recorder.calls == ["12"]

    def test_model_is_updated_before_notification(self, make_parser):
        seen = []
        parser = make_parser(SCHEMA, "arya")
        parser.options.on_change = lambda value: seen.append(parser.field.model)

        parser.field.set_value("jon")

        assert seen == ["jon"]


class TestReset:
    def test_parser_reset_is_silent_field_reset_notifies(self, make_parser, recorder):
        parser = make_parser(SCHEMA, "arya", on_change=recorder)

        assert parser.raw_value == "arya"
        assert parser.model == "arya"

        parser.field.set_value("jon")

        assert parser.raw_value == "jon"
        assert parser.model == "jon"

        parser.reset()

        assert parser.raw_value == "arya"
        assert parser.model == "arya"

        parser.field.reset()

        assert recorder.calls == ["arya", "jon", "arya"]

    def test_reset_after_many_changes(self, make_parser):
        parser = make_parser(SCHEMA, "arya")

        for value in ("jon", "sansa", None, "bran"):
            parser.field.set_value(value)
        parser.reset_silently()

        assert parser.field.model == "arya"


class TestClear:
    def test_parser_clear_is_silent_field_clear_notifies(self, make_parser, recorder):
        parser = make_parser(SCHEMA, "arya", on_change=recorder)

        parser.field.set_value("jon")

        assert parser.model == "jon"

        parser.clear()

        assert parser.raw_value is None
        assert parser.model is None

        parser.field.clear()

        assert recorder.calls == ["arya", "jon", None]


class TestListeners:
    def test_listeners_run_after_on_change_in_order(self, make_parser):
        order = []
        parser = make_parser(SCHEMA, "arya", on_change=lambda value: order.append(("on_change", value)))
        parser.field.subscribe(lambda value: order.append(("first", value)))
        parser.field.subscribe(lambda value: order.append(("second", value)))

        parser.field.set_value("jon")

        assert order == [
            ("on_change", "arya"),
            ("on_change", "jon"),
            ("first", "jon"),
            ("second", "jon"),
        ]

    def test_unsubscribe(self, make_parser, recorder):
        parser = make_parser(SCHEMA, "arya")
        unsubscribe = parser.field.subscribe(recorder)

        parser.field.set_value("jon")
        unsubscribe()
        parser.field.set_value("bran")

        assert recorder.calls == ["jon"]
