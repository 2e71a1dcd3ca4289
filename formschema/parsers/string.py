"""Parser for string schemas."""

from typing import Any

from ..lib.pattern import escape
from .base import MISSING, Parser
from .registry import registry

TYPE_FORMAT = {
    "date": "date",
    "date-time": "datetime-local",
    "email": "email",
    "idn-email": "email",
    "time": "time",
    "uri": "url",
}


def to_string(data: Any) -> str:
    """Stringify a value the way it would appear in a text input."""
    if isinstance(data, bool):
        return "true" if data else "false"
    if isinstance(data, float) and data.is_integer():
        return str(int(data))
    return str(data)


class StringParser(Parser):
    @property
    def kind(self) -> str:
        return "radio" if self.is_enum_item else "string"

    @property
    def type(self) -> str:
        if self.is_enum_item:
            return "radio"
        return TYPE_FORMAT.get(self.schema.format or "", "text")

    def is_empty(self, data: Any = MISSING) -> bool:
        if data is MISSING:
            data = self.model
        return len(data) == 0 if isinstance(data, str) else True

    def parse_value(self, data: Any) -> str | None:
        return to_string(data) if data is not None else None

    def parse_attrs(self) -> None:
        attrs = self.field.attrs
        schema = self.schema

        if schema.min_length is not None:
            attrs["minlength"] = schema.min_length
        if schema.max_length is not None:
            attrs["maxlength"] = schema.max_length

        if schema.pattern:
            attrs["pattern"] = schema.pattern
        elif schema.has_const:
            attrs["pattern"] = escape(to_string(schema.const) if schema.const is not None else "null")


registry.register("string", StringParser)
