"""Pydantic models for JSON-Schema-like type definitions."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


def json_type(value: Any) -> str | None:
    """Return the JSON type name of a plain value."""
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, dict):
        return "object"
    return None


def _pop_either(data: dict, alias: str, name: str) -> Any:
    if alias in data:
        return data.pop(alias)
    return data.pop(name, None)


class SchemaNode(BaseModel):
    """A single node of a JSON-Schema-like definition."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    type: str | None = None
    title: str | None = None
    description: str | None = None
    format: str | None = None
    default: Any = None
    const: Any = None
    enum: list[Any] | None = None
    pattern: str | None = None
    min_length: int | None = Field(default=None, alias="minLength")
    max_length: int | None = Field(default=None, alias="maxLength")
    minimum: int | float | None = None
    maximum: int | float | None = None
    exclusive_minimum: int | float | None = Field(default=None, alias="exclusiveMinimum")
    exclusive_maximum: int | float | None = Field(default=None, alias="exclusiveMaximum")
    multiple_of: int | float | None = Field(default=None, alias="multipleOf")
    min_items: int | None = Field(default=None, alias="minItems")
    max_items: int | None = Field(default=None, alias="maxItems")
    items: "SchemaNode | None" = None
    properties: dict[str, "SchemaNode"] = Field(default_factory=dict)
    required: list[str] = Field(default_factory=list)
    read_only: bool = Field(default=False, alias="readOnly")
    disabled: bool = False

    @model_validator(mode="before")
    @classmethod
    def normalize_node(cls, data: Any) -> Any:
        """Normalize type unions, infer missing types and draft-04 bounds."""
        if not isinstance(data, dict):
            return data

        data = dict(data)

        # ["string", "null"] -> "string"
        type_ = data.get("type")
        if isinstance(type_, (list, tuple)):
            candidates = [t for t in type_ if t != "null"]
            data["type"] = candidates[0] if candidates else "null"

        if data.get("type") is None:
            data["type"] = cls._infer_type(data)

        # Tuple validation is reduced to its first item schema
        items = data.get("items")
        if isinstance(items, (list, tuple)):
            data["items"] = items[0] if items else None

        # Draft-04 boolean exclusive bounds
        for alias, name, bound in (
            ("exclusiveMinimum", "exclusive_minimum", "minimum"),
            ("exclusiveMaximum", "exclusive_maximum", "maximum"),
        ):
            flag = data.get(alias, data.get(name))
            if isinstance(flag, bool):
                _pop_either(data, alias, name)
                if flag and data.get(bound) is not None:
                    data[alias] = data.pop(bound)

        return data

    @staticmethod
    def _infer_type(data: dict) -> str | None:
        if "properties" in data:
            return "object"
        if "items" in data:
            return "array"
        if data.get("enum"):
            return json_type(data["enum"][0])
        if "const" in data:
            return json_type(data["const"])
        return None

    @property
    def has_const(self) -> bool:
        """Check whether const was declared, even with a null value."""
        return "const" in self.model_fields_set

    @property
    def has_default(self) -> bool:
        """Check whether a default value was declared."""
        return "default" in self.model_fields_set

    def is_required(self, key: str) -> bool:
        """Check whether a property key is listed as required."""
        return key in self.required


SchemaNode.model_rebuild()
