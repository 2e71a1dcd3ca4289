"""Parser for array schemas."""

import logging
from typing import Any

from ..schema.models import SchemaNode
from .base import MISSING, Parser, ParserOptions
from .registry import registry

logger = logging.getLogger(__name__)


class ArrayParser(Parser):
    """Parse ``items`` once per array element.

    Item fields live in an ordered slot list whose length is kept within
    ``[minItems, maxItems]``. Growing appends freshly parsed items and
    shrinking drops trailing ones. The model is rebuilt from the items on
    every read.
    """

    def __init__(self, options: ParserOptions):
        super().__init__(options)
        self.children: list[Parser] = []
        self.item_schema = self.schema.items or SchemaNode(type="string")
        self._initial_data: list = []
        self._initial_count = 0
        # Leading items still parsed from the initial data
        self._pristine = 0

    @property
    def kind(self) -> str:
        return "array"

    @property
    def type(self) -> str:
        return "fieldset"

    @property
    def min_items(self) -> int:
        return self.schema.min_items or 0

    @property
    def max_items(self) -> int | None:
        return self.schema.max_items

    @property
    def items_num(self) -> int:
        return len(self.children)

    @property
    def model(self) -> list:
        return [child.model for child in self.children]

    @property
    def raw_value(self) -> list:
        return [child.raw_value for child in self.children]

    def parse_value(self, data: Any) -> list | None:
        return list(data) if isinstance(data, (list, tuple)) else None

    def is_empty(self, data: Any = MISSING) -> bool:
        if data is MISSING:
            return self.items_num == 0
        return not self.parse_value(data)

    def clamp(self, count: int) -> int:
        """Bound an item count by minItems and maxItems."""
        count = max(count, self.min_items, 0)
        if self.max_items is not None:
            count = min(count, self.max_items)
        return count

    def get_fields(self) -> list:
        return [child.field for child in self.children]

    def parse_input_value(self) -> None:
        data = self.initial if self.initial is not None else self.field.default
        self._initial_data = self.parse_value(data) or []
        self._initial_count = self.clamp(len(self._initial_data))

        self._fill(self._initial_count, self._initial_data)
        self._pristine = self._initial_count

    def _fill(self, count: int, data: list) -> None:
        while len(self.children) < count:
            index = len(self.children)
            self._append(data[index] if index < len(data) else None)

    def _append(self, data: Any) -> None:
        index = len(self.children)
        child = self.registry.resolve(
            self.options.child(
                self.item_schema,
                data,
                f"{self.field.name}[{index}]",
                self.field.path + (index,),
            )
        )
        child.parse()
        child.options.on_change = self._on_child_change

        self.children.append(child)
        self.field.items.append(child.field)

    def _truncate(self, count: int) -> None:
        for child in self.children[count:]:
            child.options.on_change = None

        del self.children[count:]
        del self.field.items[count:]
        self._pristine = min(self._pristine, count)

    def _resize(self, count: int) -> bool:
        bounded = self.clamp(count)

        if bounded != count:
            logger.debug(
                "Clamped item count of '%s' from %d to %d", self.field.name, count, bounded
            )

        current = len(self.children)

        if bounded > current:
            self._fill(bounded, [])
        elif bounded < current:
            self._truncate(bounded)

        return bounded != current

    def _on_child_change(self, value: Any) -> None:
        if self.live:
            self.emit()

    def set_items_num(self, value: int) -> None:
        if self._resize(value) and self.live:
            self.emit()

    def set_value_silently(self, data: Any) -> bool:
        value = self.parse_value(data) or []
        changed = self._resize(len(value))

        for index, child in enumerate(self.children):
            item = value[index] if index < len(value) else None
            if child.set_value_silently(item):
                child.field.notify(child.model)
                changed = True

        return changed

    def reset_silently(self) -> None:
        self._truncate(self._pristine)
        self._fill(self._initial_count, self._initial_data)

        for child in self.children:
            before = child.model
            child.reset_silently()
            child.notify_listeners(before)

        self._pristine = len(self.children)

    def clear_silently(self) -> None:
        self._resize(self.min_items)

        for child in self.children:
            before = child.model
            child.clear_silently()
            child.notify_listeners(before)


registry.register("array", ArrayParser)
