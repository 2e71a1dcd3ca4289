"""Parser for integer schemas."""

import math
import re
from typing import Any

from .number import NumberParser
from .registry import registry

INTEGER_PREFIX = re.compile(r"\s*([+-]?\d+)")


class IntegerParser(NumberParser):
    @property
    def kind(self) -> str:
        return "integer"

    def parse_value(self, data: Any) -> int | None:
        if data is None or isinstance(data, bool):
            return None

        if isinstance(data, int):
            return data

        if isinstance(data, float):
            return int(data) if math.isfinite(data) else None

        if isinstance(data, str):
            match = INTEGER_PREFIX.match(data)
            return int(match.group(1)) if match else None

        return None

    def parse_attrs(self) -> None:
        super().parse_attrs()

        # Exclusive bounds become tight inclusive bounds on integers
        if self.schema.exclusive_minimum is not None:
            self.field.attrs["min"] = int(self.schema.exclusive_minimum) + 1
        if self.schema.exclusive_maximum is not None:
            self.field.attrs["max"] = int(self.schema.exclusive_maximum) - 1


registry.register("integer", IntegerParser)
