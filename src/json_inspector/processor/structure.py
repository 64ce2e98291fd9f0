"""Whole-tree rebuilding operations: clone, merge, key sorting, pruning, transform.

Every function returns a new tree and leaves its input untouched.  Each call
owns a fresh ``CycleGuard``, so a self-referencing input fails fast with
``CycleDetectedError`` instead of exhausting the interpreter stack.

``to_json_model``/``deep_clone`` follow serialize-then-parse semantics and are
therefore *lossy by design*: values the JSON model cannot represent are
dropped (inside objects) or replaced by ``None`` (inside arrays), and
non-finite floats become ``None``.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from enum import StrEnum, auto
from typing import Any

from json_inspector.tree.guard import CycleGuard
from json_inspector.tree.nodes import JsonKind, child_path, index_path, kind_of

__all__ = [
    "ArrayMergeStrategy",
    "Transformer",
    "deep_clone",
    "deep_merge",
    "remove_nullish",
    "sort_keys",
    "to_json_model",
    "transform",
]

logger = logging.getLogger(__name__)

# fn(key, transformed_value, path) -> new value
Transformer = Callable[[str, Any, str], Any]

_DROP = object()


class ArrayMergeStrategy(StrEnum):
    """How ``deep_merge`` combines two arrays found at the same path.

    - CONCAT:  Left elements followed by right elements (no deduplication).
    - REPLACE: The right-hand array wins, like any other scalar conflict.
    """

    CONCAT = auto()
    REPLACE = auto()


# ---------------------------------------------------------------------------
# Lossy clone
# ---------------------------------------------------------------------------


def _model_key(key: Any) -> str | None:
    if isinstance(key, str):
        return key
    if key is None:
        return "null"
    if isinstance(key, bool):
        return "true" if key else "false"
    if isinstance(key, (int, float)):
        return str(key)
    return None


def _to_model(value: Any, path: str, guard: CycleGuard) -> Any:
    if value is None or isinstance(value, (bool, str, int)):
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else None

    if isinstance(value, dict):
        with guard.visit(value, path):
            out: dict[str, Any] = {}
            for key, val in value.items():
                name = _model_key(key)
                if name is None:
                    logger.debug("Dropping non-string key %r at %s", key, path)
                    continue
                converted = _to_model(val, child_path(path, name), guard)
                if converted is _DROP:
                    continue
                out[name] = converted
            return out

    if isinstance(value, (list, tuple)):
        with guard.visit(value, path):
            items = []
            for idx, item in enumerate(value):
                converted = _to_model(item, index_path(path, idx), guard)
                items.append(None if converted is _DROP else converted)
            return items

    logger.debug("Dropping non-JSON value of type %s at %s", type(value).__name__, path)
    return _DROP


def to_json_model(value: Any) -> Any:
    """Return an independent copy restricted to JSON-representable values.

    Args:
        value: Any Python value.

    Returns:
        A tree of dict/list/str/int/float/bool/None.  A root value that cannot
        be represented at all yields ``None``.

    Raises:
        CycleDetectedError: If ``value`` contains itself.
    """
    converted = _to_model(value, "", CycleGuard())
    return None if converted is _DROP else converted


def deep_clone(value: Any) -> Any:
    """Deep-copy a JSON value (lossy, see module docstring)."""
    return to_json_model(value)


# ---------------------------------------------------------------------------
# Merge
# ---------------------------------------------------------------------------


def deep_merge(
    *objects: Any,
    array_strategy: ArrayMergeStrategy = ArrayMergeStrategy.CONCAT,
) -> dict[str, Any]:
    """Merge any number of objects, later arguments winning on conflict.

    Objects found at the same path are merged recursively; arrays are combined
    according to ``array_strategy``; anything else is replaced by the later
    value.  Non-dict arguments are skipped.

    Example::

        deep_merge({"a": [1, 2]}, {"a": [3, 4]})   # {"a": [1, 2, 3, 4]}

    Returns:
        A new dict sharing no containers with the arguments.
    """
    merged: dict[str, Any] = {}
    guard = CycleGuard()
    for position, obj in enumerate(objects):
        if not isinstance(obj, dict):
            logger.warning(
                "deep_merge skipped argument %d: expected dict, got %s",
                position,
                type(obj).__name__,
            )
            continue
        _merge_into(merged, obj, "", guard, array_strategy)
    return merged


def _merge_into(
    target: dict[str, Any],
    source: dict[str, Any],
    path: str,
    guard: CycleGuard,
    array_strategy: ArrayMergeStrategy,
) -> None:
    with guard.visit(source, path):
        for key, incoming in source.items():
            key_path = child_path(path, key)
            current = target.get(key)

            if isinstance(current, list) and isinstance(incoming, (list, tuple)):
                if array_strategy is ArrayMergeStrategy.CONCAT:
                    target[key] = current + to_json_model(list(incoming))
                else:
                    target[key] = to_json_model(list(incoming))
            elif isinstance(current, dict) and isinstance(incoming, dict):
                _merge_into(current, incoming, key_path, guard, array_strategy)
            elif isinstance(incoming, dict):
                fresh: dict[str, Any] = {}
                _merge_into(fresh, incoming, key_path, guard, array_strategy)
                target[key] = fresh
            else:
                target[key] = to_json_model(incoming)


# ---------------------------------------------------------------------------
# Canonicalization and pruning
# ---------------------------------------------------------------------------


def sort_keys(value: Any) -> Any:
    """Rebuild every object with lexicographically sorted keys.

    Array order is preserved; each element is canonicalized in turn.
    """
    guard = CycleGuard()

    def _sort(node: Any, path: str) -> Any:
        kind = kind_of(node)
        if kind is JsonKind.OBJECT:
            with guard.visit(node, path):
                return {
                    key: _sort(node[key], child_path(path, key)) for key in sorted(node)
                }
        if kind is JsonKind.ARRAY:
            with guard.visit(node, path):
                return [_sort(item, index_path(path, i)) for i, item in enumerate(node)]
        return node

    return _sort(value, "")


def remove_nullish(value: Any) -> Any:
    """Strip ``None`` from objects (key removed) and arrays (element removed)."""
    guard = CycleGuard()

    def _prune(node: Any, path: str) -> Any:
        kind = kind_of(node)
        if kind is JsonKind.OBJECT:
            with guard.visit(node, path):
                out = {}
                for key, val in node.items():
                    cleaned = _prune(val, child_path(path, key))
                    if cleaned is not None:
                        out[key] = cleaned
                return out
        if kind is JsonKind.ARRAY:
            with guard.visit(node, path):
                cleaned_items = (
                    _prune(item, index_path(path, i)) for i, item in enumerate(node)
                )
                return [item for item in cleaned_items if item is not None]
        return node

    return _prune(value, "")


# ---------------------------------------------------------------------------
# Transform
# ---------------------------------------------------------------------------


def transform(value: Any, fn: Transformer) -> Any:
    """Rebuild ``value`` bottom-up through ``fn``.

    For every object entry the child is transformed *first*, then
    ``fn(key, transformed_child, path)`` decides the entry's new value.  A
    parent-level call therefore always observes post-transform children.
    Array elements are recursed into (paths ``name[idx]``) but, having no key,
    are not passed to ``fn`` themselves.

    Args:
        value: Any JSON value.
        fn:    Callable ``(key, value, path) -> new_value``.

    Returns:
        The transformed tree.
    """
    guard = CycleGuard()

    def _walk(node: Any, path: str) -> Any:
        kind = kind_of(node)
        if kind is JsonKind.ARRAY:
            with guard.visit(node, path):
                return [_walk(item, index_path(path, i)) for i, item in enumerate(node)]
        if kind is JsonKind.OBJECT:
            with guard.visit(node, path):
                out = {}
                for key, val in node.items():
                    key_path = child_path(path, key)
                    out[key] = fn(key, _walk(val, key_path), key_path)
                return out
        return node

    return _walk(value, "")
