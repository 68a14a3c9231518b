"""JSON value kind names used in decode error messages."""

from __future__ import annotations

from typing import Any


def json_kind(value: Any) -> str:
    """Name the JSON kind of an already-parsed value.

    Examples:
        >>> json_kind([1, 2])
        'array'
        >>> json_kind(True)
        'boolean'
        >>> json_kind(None)
        'null'
    """
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "float"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, dict):
        return "object"
    if value is None:
        return "null"
    return type(value).__name__
