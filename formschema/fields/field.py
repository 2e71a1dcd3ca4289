"""The Field descriptor node produced by parsers."""

from typing import TYPE_CHECKING, Any, Callable, Iterator

from ..schema.errors import FieldStateError
from ..schema.models import SchemaNode

if TYPE_CHECKING:
    from ..parsers.base import Parser

Listener = Callable[[Any], None]


class Field:
    """A parsed, render-agnostic descriptor for one schema node.

    A field is created and populated by its parser. Once the parser
    commits, ``model``, ``raw_value`` and the mutation methods read and
    write through that parser.
    """

    def __init__(
        self,
        schema: SchemaNode,
        name: str = "",
        path: tuple = (),
        required: bool = False,
    ):
        self.schema = schema
        self.name = name
        self.path = tuple(path)
        self.required = required
        self.kind: str | None = None
        self.type: str | None = None
        self.default: Any = None
        self.attrs: dict[str, Any] = {}
        self.descriptor: dict[str, Any] = {}
        self.fields: dict[str, "Field"] = {}
        self.items: list["Field"] = []
        self.options: list["Field"] = []
        self._parser: "Parser | None" = None
        self._listeners: list[Listener] = []

    def __repr__(self) -> str:
        return f"Field(name={self.name!r}, kind={self.kind!r}, model={self.model!r})"

    def bind(self, parser: "Parser") -> None:
        """Attach the parser that owns this field's value state."""
        self._parser = parser

    @property
    def committed(self) -> bool:
        return self._parser is not None

    def _bound(self) -> "Parser":
        if self._parser is None:
            raise FieldStateError(self.name)
        return self._parser

    @property
    def model(self) -> Any:
        """The committed value."""
        return self._parser.model if self._parser is not None else None

    @property
    def raw_value(self) -> Any:
        """The value last received, pending commit."""
        return self._parser.raw_value if self._parser is not None else None

    @property
    def value(self) -> Any:
        return self.model

    def set_value(self, value: Any) -> None:
        self._bound().set_value(value)

    def reset(self) -> None:
        """Restore the parse-time value and notify listeners."""
        self._bound().reset_and_notify()

    def clear(self) -> None:
        """Clear the value and notify listeners."""
        self._bound().clear_and_notify()

    def is_empty(self) -> bool:
        return self._bound().is_empty()

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a change listener and return a function removing it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def notify(self, value: Any) -> None:
        for listener in list(self._listeners):
            listener(value)

    # Composite access

    @property
    def is_array_field(self) -> bool:
        return self.kind == "array"

    @property
    def is_object_field(self) -> bool:
        return self.kind == "object"

    @property
    def items_num(self) -> int:
        return len(self.items)

    @items_num.setter
    def items_num(self, value: int) -> None:
        self._bound().set_items_num(value)

    def get_fields(self) -> list["Field"]:
        """Return the child fields in order: array items or object properties."""
        if self.is_object_field:
            return list(self.fields.values())
        return list(self.items)

    def add_item(self) -> None:
        self.items_num = self.items_num + 1

    def remove_item(self) -> None:
        self.items_num = self.items_num - 1

    def walk(self) -> Iterator["Field"]:
        """Yield this field and every descendant, depth first."""
        yield self
        for child in self.get_fields():
            yield from child.walk()

    def to_dict(self) -> dict[str, Any]:
        """Return a plain snapshot of the field tree."""
        data: dict[str, Any] = {
            "name": self.name,
            "kind": self.kind,
            "type": self.type,
            "required": self.required,
            "attrs": dict(self.attrs),
            "descriptor": dict(self.descriptor),
            "model": self.model,
        }

        if self.is_object_field:
            data["fields"] = {key: child.to_dict() for key, child in self.fields.items()}
        elif self.is_array_field:
            data["items_num"] = self.items_num
            data["items"] = [child.to_dict() for child in self.items]

        if self.options:
            data["options"] = [option.to_dict() for option in self.options]

        return data
