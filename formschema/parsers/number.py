"""Parser for number schemas."""

import math
import re
from typing import Any

from .base import MISSING, Parser
from .registry import registry

# Leading numeric literal, as read by a lenient float parser
FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|[+-]?Infinity)")


class NumberParser(Parser):
    @property
    def kind(self) -> str:
        return "number"

    @property
    def type(self) -> str:
        return "number"

    def is_empty(self, data: Any = MISSING) -> bool:
        if data is MISSING:
            data = self.model
        if isinstance(data, bool) or not isinstance(data, (int, float)):
            return True
        return not math.isfinite(data)

    def parse_value(self, data: Any) -> float | None:
        if data is None or isinstance(data, bool):
            return None

        if isinstance(data, (int, float)):
            value = float(data)
        elif isinstance(data, str):
            match = FLOAT_PREFIX.match(data)
            if match is None:
                return None
            value = float(match.group(1).replace("Infinity", "inf"))
        else:
            return None

        return None if math.isnan(value) else value

    def parse_attrs(self) -> None:
        attrs = self.field.attrs
        schema = self.schema

        # Exclusive bounds pass through unchanged for reals
        minimum = schema.minimum if schema.minimum is not None else schema.exclusive_minimum
        maximum = schema.maximum if schema.maximum is not None else schema.exclusive_maximum

        if minimum is not None:
            attrs["min"] = minimum
        if maximum is not None:
            attrs["max"] = maximum
        if schema.multiple_of is not None:
            attrs["step"] = schema.multiple_of


registry.register("number", NumberParser)
