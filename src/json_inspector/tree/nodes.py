"""JsonKind StrEnum and the kind dispatcher shared by every traversal.

JSON values are plain Python objects (dict, list, str, int, float, bool,
None).  ``kind_of`` maps each one onto the closed ``JsonKind`` set so that
traversals branch on an explicit tag instead of ad-hoc ``isinstance`` chains.

Path helpers live here too: object keys are joined with dots (``a.b.c``) and
array positions render as ``name[idx]``.
"""

from __future__ import annotations

from enum import StrEnum, auto
from typing import Any

__all__ = [
    "MISSING",
    "JsonKind",
    "JsonValue",
    "child_path",
    "index_path",
    "is_container",
    "js_typeof",
    "kind_of",
]

# Type alias for valid JSON values
JsonValue = dict[str, Any] | list[Any] | str | int | float | bool | None


class JsonKind(StrEnum):
    """Enumeration of the six JSON value kinds.

    StrEnum values are the lowercased member names:
    - NULL    -> "null"
    - BOOLEAN -> "boolean"
    - NUMBER  -> "number"
    - STRING  -> "string"
    - ARRAY   -> "array"
    - OBJECT  -> "object"
    """

    NULL = auto()
    BOOLEAN = auto()
    NUMBER = auto()
    STRING = auto()
    ARRAY = auto()
    OBJECT = auto()


class _Missing:
    """Marker for "no value here", distinct from JSON null (``None``)."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


def kind_of(value: Any) -> JsonKind:
    """Classify a Python value as one of the six JSON kinds.

    Tuples are accepted as arrays.

    Raises:
        TypeError: If value is not a valid JSON type.
    """
    # bool MUST be checked before int: bool subclasses int
    if value is None:
        return JsonKind.NULL
    if isinstance(value, bool):
        return JsonKind.BOOLEAN
    if isinstance(value, (int, float)):
        return JsonKind.NUMBER
    if isinstance(value, str):
        return JsonKind.STRING
    if isinstance(value, dict):
        return JsonKind.OBJECT
    if isinstance(value, (list, tuple)):
        return JsonKind.ARRAY

    raise TypeError(f"Unsupported JSON value type: {type(value)!r}")


def is_container(value: Any) -> bool:
    """Return True for dicts, lists and tuples."""
    return isinstance(value, (dict, list, tuple))


def js_typeof(value: Any) -> str:
    """Return the JavaScript ``typeof`` name for a JSON value.

    Arrays and null both report ``"object"``, which is what the type
    consistency check groups array elements by.
    """
    kind = kind_of(value)
    if kind in (JsonKind.NULL, JsonKind.ARRAY, JsonKind.OBJECT):
        return "object"
    return str(kind)


def child_path(path: str, key: str) -> str:
    return f"{path}.{key}" if path else key


def index_path(path: str, idx: int) -> str:
    return f"{path}[{idx}]"
