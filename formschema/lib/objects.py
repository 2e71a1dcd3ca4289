"""Structural helpers for plain-data values (dicts, lists and scalars)."""

from collections.abc import Mapping
from typing import Any

SCALAR_TYPES = (str, int, float, bool)


def is_scalar(value: Any) -> bool:
    """Check whether value is None, a string, a number or a boolean."""
    return value is None or isinstance(value, SCALAR_TYPES)


def _strict_equals(a: Any, b: Any) -> bool:
    if is_scalar(a) and is_scalar(b):
        # True == 1 in Python, but they are different values for a field
        return type(a) is type(b) and a == b
    return a is b


def _keys(value: Any) -> list:
    if isinstance(value, Mapping):
        return list(value.keys())
    return list(range(len(value)))


def equals(a: Any, b: Any) -> bool:
    """Compare two values for change detection.

    Scalars compare strictly. Dicts and lists are equal when they hold the
    same keys (or indices) and each entry is strictly equal; nested
    containers are compared by identity, not recursively.
    """
    if is_scalar(a) or is_scalar(b):
        return _strict_equals(a, b)

    if isinstance(a, Mapping) != isinstance(b, Mapping):
        return False

    keys = _keys(a)

    if len(keys) != len(_keys(b)):
        return False

    if isinstance(b, Mapping):
        return all(key in b and _strict_equals(a[key], b[key]) for key in keys)

    return all(_strict_equals(a[i], b[i]) for i in keys)


def assign(dest: dict, src: Mapping) -> dict:
    """Deep-merge src into dest and return dest.

    Lists are shallow-copied, callables and scalars are copied by reference,
    and nested mappings are merged key by key.
    """
    for key, value in src.items():
        if is_scalar(value):
            dest[key] = value
        elif isinstance(value, (list, tuple)):
            dest[key] = list(value)
        elif callable(value):
            dest[key] = value
        elif isinstance(value, Mapping):
            if not dest.get(key):
                dest[key] = {}
            assign(dest[key], value)
        else:
            dest[key] = value

    return dest


def clone(value: Any) -> Any:
    """Copy plain data: mappings deeply, lists shallowly, scalars as-is."""
    if isinstance(value, Mapping):
        return assign({}, value)
    if isinstance(value, (list, tuple)):
        return list(value)
    return value


def clear(obj: dict) -> None:
    """Delete every key of obj in place."""
    for key in list(obj):
        del obj[key]


def is_empty(obj: Mapping) -> bool:
    return len(obj) == 0
