"""Shared parser lifecycle: identity, defaults, coercion and notification."""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable

from ..fields.descriptor import native_descriptor
from ..fields.field import Field
from ..lib.objects import clone, equals
from ..schema.models import SchemaNode

if TYPE_CHECKING:
    from .registry import ParserRegistry

logger = logging.getLogger(__name__)

# Marks an omitted argument where None is a meaningful value
MISSING: Any = object()


@dataclass
class ParserOptions:
    """Inputs for a single parser instance."""

    schema: SchemaNode
    model: Any = None
    name: str = ""
    path: tuple = ()
    required: bool = False
    on_change: Callable[[Any], None] | None = None
    descriptor_factory: Callable[[SchemaNode], dict] = native_descriptor
    registry: "ParserRegistry | None" = field(default=None, repr=False)

    def child(self, schema: SchemaNode, model: Any, name: str, path: tuple, **kwargs: Any) -> "ParserOptions":
        """Derive options for a nested schema node."""
        return ParserOptions(
            schema=schema,
            model=model,
            name=name,
            path=path,
            descriptor_factory=self.descriptor_factory,
            registry=self.registry,
            **kwargs,
        )


class Parser(ABC):
    """Base class for all parsers.

    A parser owns exactly one Field. ``parse()`` populates it and
    ``commit()`` makes it live: from then on the field's value reads and
    mutations go through the parser.
    """

    def __init__(self, options: ParserOptions):
        self.options = options
        self.schema = options.schema
        self.initial = options.model
        self.is_enum_item = False
        self.live = False
        self.field = Field(
            options.schema,
            name=options.name,
            path=options.path,
            required=options.required,
        )
        self._model: Any = None
        self._raw_value: Any = None
        self._reset_value: Any = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.field.name!r})"

    @property
    @abstractmethod
    def kind(self) -> str:
        """Semantic kind of the produced field."""

    @property
    @abstractmethod
    def type(self) -> str:
        """Presentation hint for the produced field."""

    @abstractmethod
    def parse_value(self, data: Any) -> Any:
        """Coerce data to the field's value type, or None when impossible."""

    @abstractmethod
    def is_empty(self, data: Any = MISSING) -> bool:
        """Check whether data (the current model by default) is empty."""

    @property
    def model(self) -> Any:
        return self._model

    @property
    def raw_value(self) -> Any:
        return self._raw_value

    @property
    def registry(self) -> "ParserRegistry":
        if self.options.registry is not None:
            return self.options.registry

        from .registry import registry

        return registry

    def parse(self) -> Field:
        """Populate the field and commit it."""
        self.parse_field()
        self.parse_input_value()
        self.parse_attrs()
        self.commit()
        return self.field

    def parse_field(self) -> None:
        field = self.field
        schema = self.schema

        field.kind = self.kind
        field.type = self.type
        field.default = clone(schema.default) if schema.has_default else None
        field.descriptor = self.options.descriptor_factory(schema)

        field.attrs["type"] = self.type
        if field.name:
            field.attrs["name"] = field.name
        if field.required:
            field.attrs["required"] = True
        if schema.disabled:
            field.attrs["disabled"] = True
        if schema.read_only:
            field.attrs["readonly"] = True

    def parse_input_value(self) -> None:
        data = self.initial if self.initial is not None else self.field.default

        self._model = self.parse_value(data)
        self._raw_value = self._model
        self._reset_value = self._model

    def parse_attrs(self) -> None:
        """Derive kind-specific attributes from schema constraints."""
        pass

    def update_attrs(self) -> None:
        """Refresh attributes that mirror the current model."""
        pass

    def commit(self) -> None:
        self.field.bind(self)
        self.live = True
        self.emit()

    def emit(self) -> None:
        """Notify on_change, then field listeners, with the current model."""
        value = self.model

        if self.options.on_change is not None:
            self.options.on_change(value)

        self.field.notify(value)

    def notify_listeners(self, before: Any) -> None:
        """Notify this field's listeners, not on_change, if the model left before."""
        if not equals(before, self.model):
            self.field.notify(self.model)

    def set_value_silently(self, data: Any) -> bool:
        """Store a new raw value and return whether the model changed."""
        value = self.parse_value(data)
        self._raw_value = value

        if equals(value, self._model):
            return False

        self._model = value
        self.update_attrs()
        return True

    def set_value(self, data: Any) -> None:
        if self.set_value_silently(data) and self.live:
            self.emit()

    def reset_silently(self) -> None:
        self._model = clone(self._reset_value)
        self._raw_value = self._model
        self.update_attrs()

    def reset_and_notify(self) -> None:
        self.reset_silently()
        self.emit()

    def clear_silently(self) -> None:
        self._model = None
        self._raw_value = None
        self.update_attrs()

    def clear_and_notify(self) -> None:
        self.clear_silently()
        self.emit()

    def reset(self) -> None:
        """Restore the parse-time value without notifying."""
        self.reset_silently()

    def clear(self) -> None:
        """Clear the value without notifying."""
        self.clear_silently()

    def set_items_num(self, value: int) -> None:
        logger.debug("Ignoring item count change on %s field '%s'", self.kind, self.field.name)
