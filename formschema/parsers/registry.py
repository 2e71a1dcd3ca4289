"""Mapping from schema kinds to parser classes."""

import logging
from typing import TYPE_CHECKING

from ..schema.errors import UnsupportedKindError
from ..schema.models import SchemaNode

if TYPE_CHECKING:
    from .base import Parser, ParserOptions

logger = logging.getLogger(__name__)

COMPOSITE_KINDS = ("array", "object")


class ParserRegistry:
    """Registry of parser classes keyed by kind name."""

    def __init__(self):
        self._parsers: dict[str, type["Parser"]] = {}

    def __contains__(self, kind: str) -> bool:
        return kind in self._parsers

    def register(self, kind: str, parser_class: type["Parser"]) -> None:
        """Register a parser class; a later registration replaces an earlier one."""
        if kind in self._parsers:
            logger.debug(
                "Overriding parser for kind '%s': %s -> %s",
                kind,
                self._parsers[kind].__name__,
                parser_class.__name__,
            )
        self._parsers[kind] = parser_class

    def get(self, kind: str | None, path: str | None = None) -> type["Parser"]:
        """Get the parser class for a kind.

        Raises:
            UnsupportedKindError: If no parser is registered for kind.
        """
        if kind is None or kind not in self._parsers:
            raise UnsupportedKindError(kind, path)
        return self._parsers[kind]

    def kinds(self) -> list[str]:
        """Get all registered kind names, in registration order."""
        return list(self._parsers.keys())

    def copy(self) -> "ParserRegistry":
        """Return an independent registry with the same registrations."""
        other = ParserRegistry()
        other._parsers = dict(self._parsers)
        return other

    def kind_of(self, schema: SchemaNode) -> str | None:
        """Determine which kind a schema node is parsed as."""
        if schema.enum and schema.type not in COMPOSITE_KINDS:
            return "enum"
        return schema.type

    def resolve(self, options: "ParserOptions") -> "Parser":
        """Create the parser for options.schema.

        Raises:
            UnsupportedKindError: If the resolved kind has no parser.
        """
        kind = self.kind_of(options.schema)
        parser_class = self.get(kind, options.name or None)

        logger.debug("Resolved '%s' to %s", options.name, parser_class.__name__)

        if options.registry is None:
            options.registry = self

        return parser_class(options)


registry = ParserRegistry()
