"""Parser for boolean schemas."""

from typing import Any

from .base import MISSING, Parser
from .registry import registry

TRUE_STRINGS = ("true", "1", "on", "yes")
FALSE_STRINGS = ("false", "0", "off", "no", "")


class BooleanParser(Parser):
    @property
    def kind(self) -> str:
        return "boolean"

    @property
    def type(self) -> str:
        return "checkbox"

    def is_empty(self, data: Any = MISSING) -> bool:
        if data is MISSING:
            data = self.model
        return data is None

    def parse_value(self, data: Any) -> bool | None:
        if isinstance(data, bool):
            return data

        if isinstance(data, (int, float)):
            return bool(data)

        if isinstance(data, str):
            text = data.strip().lower()
            if text in TRUE_STRINGS:
                return True
            if text in FALSE_STRINGS:
                return False

        return None

    def parse_attrs(self) -> None:
        self.update_attrs()

    def update_attrs(self) -> None:
        if self.model is None:
            self.field.attrs.pop("checked", None)
        else:
            self.field.attrs["checked"] = self.model


registry.register("boolean", BooleanParser)
