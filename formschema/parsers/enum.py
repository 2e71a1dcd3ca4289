"""Parser for schemas restricted to a fixed set of values."""

import logging
from typing import Any

from ..lib.objects import equals
from ..schema.models import SchemaNode
from .base import MISSING, Parser, ParserOptions
from .registry import registry

logger = logging.getLogger(__name__)

# Above this many values, a select list is used instead of radio buttons
ENUM_RADIO_LIMIT = 5


class EnumParser(Parser):
    """Parse an ``enum`` schema into a field with one option per value.

    Values are coerced with the parser of the schema's base type, and
    anything outside the enumeration is treated as no value.
    """

    def __init__(self, options: ParserOptions):
        super().__init__(options)
        base_schema = self.schema.model_copy(update={"enum": None})
        self.base = self.registry.get(self.schema.type, options.name or None)(
            ParserOptions(schema=base_schema, registry=options.registry)
        )
        self.values = [self.base.parse_value(value) for value in self.schema.enum or []]

    @property
    def kind(self) -> str:
        return "enum"

    @property
    def type(self) -> str:
        return "radio" if len(self.values) <= ENUM_RADIO_LIMIT else "select"

    def is_empty(self, data: Any = MISSING) -> bool:
        if data is MISSING:
            data = self.model
        return data is None

    def parse_value(self, data: Any) -> Any:
        value = self.base.parse_value(data)

        for candidate in self.values:
            if equals(candidate, value):
                return candidate

        return None

    def parse_attrs(self) -> None:
        parser_class = type(self.base)
        multiple = len(self.values) > 1

        for value in self.values:
            option_schema = SchemaNode(type=self.schema.type, const=value, title=str(value))
            parser = parser_class(
                self.options.child(option_schema, value, self.field.name, self.field.path)
            )
            parser.is_enum_item = multiple
            self.field.options.append(parser.parse())

        logger.debug("Parsed %d options for enum field '%s'", len(self.values), self.field.name)


registry.register("enum", EnumParser)
