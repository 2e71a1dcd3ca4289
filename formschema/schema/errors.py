"""Exceptions raised while loading schemas and compiling field trees."""


class FormSchemaError(Exception):
    """Base class for formschema errors."""

    pass


class SchemaLoadError(FormSchemaError):
    """Raised when a schema or model file cannot be loaded."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)


class SchemaValidationError(FormSchemaError):
    """Raised when a schema node fails structural validation."""

    def __init__(self, message: str, errors: list[dict] | None = None):
        self.errors = errors or []
        super().__init__(message)


class UnsupportedKindError(FormSchemaError):
    """Raised when no parser is registered for a schema kind."""

    def __init__(self, kind: str | None, path: str | None = None):
        self.kind = kind
        self.path = path
        location = f" at '{path}'" if path else ""
        super().__init__(f"Unsupported schema kind {kind!r}{location}")


class FieldStateError(FormSchemaError):
    """Raised when a field is mutated before its parser committed it."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Field '{name}' is not committed")
