"""Parser for object schemas."""

from collections.abc import Mapping
from typing import Any

from .base import MISSING, Parser, ParserOptions
from .registry import registry


class ObjectParser(Parser):
    """Parse each declared property into a child field.

    The object's model is not stored: it is rebuilt from the children on
    every read, so it can never drift from them.
    """

    def __init__(self, options: ParserOptions):
        super().__init__(options)
        self.children: dict[str, Parser] = {}

    @property
    def kind(self) -> str:
        return "object"

    @property
    def type(self) -> str:
        return "fieldset"

    @property
    def model(self) -> dict[str, Any]:
        return {key: child.model for key, child in self.children.items()}

    @property
    def raw_value(self) -> dict[str, Any]:
        return {key: child.raw_value for key, child in self.children.items()}

    def parse_value(self, data: Any) -> dict | None:
        return dict(data) if isinstance(data, Mapping) else None

    def is_empty(self, data: Any = MISSING) -> bool:
        if data is MISSING:
            return all(child.is_empty() for child in self.children.values())

        value = self.parse_value(data) or {}
        return all(child.is_empty(value.get(key)) for key, child in self.children.items())

    def parse_input_value(self) -> None:
        data = self.initial if self.initial is not None else self.field.default
        value = self.parse_value(data) or {}

        for key, schema in self.schema.properties.items():
            child = self.registry.resolve(
                self.options.child(
                    schema,
                    value.get(key),
                    self._child_name(key),
                    self.field.path + (key,),
                    required=self.schema.is_required(key),
                )
            )
            child.parse()
            child.options.on_change = self._on_child_change

            self.children[key] = child
            self.field.fields[key] = child.field

    def _child_name(self, key: str) -> str:
        return f"{self.field.name}.{key}" if self.field.name else key

    def _on_child_change(self, value: Any) -> None:
        if self.live:
            self.emit()

    def set_value_silently(self, data: Any) -> bool:
        value = self.parse_value(data) or {}
        changed = False

        for key, child in self.children.items():
            if child.set_value_silently(value.get(key)):
                child.field.notify(child.model)
                changed = True

        return changed

    def reset_silently(self) -> None:
        for child in self.children.values():
            before = child.model
            child.reset_silently()
            child.notify_listeners(before)

    def clear_silently(self) -> None:
        for child in self.children.values():
            before = child.model
            child.clear_silently()
            child.notify_listeners(before)


registry.register("object", ObjectParser)
