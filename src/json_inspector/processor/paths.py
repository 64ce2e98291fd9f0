"""Dot-path addressing: lookup, assignment, deletion, flatten/unflatten.

Paths are dot-separated object keys (``"user.address.city"``).  Lookups also
accept a non-negative integer segment to index into an array
(``"students.0.grades"``).  ``flatten``/``unflatten`` treat arrays as opaque
leaves, so their keys never contain array positions.
"""

from __future__ import annotations

import logging
import re
from typing import Any

from json_inspector.processor.structure import to_json_model
from json_inspector.tree.guard import CycleGuard
from json_inspector.tree.nodes import MISSING, child_path, is_container

__all__ = [
    "MISSING",
    "delete_by_path",
    "extract_keys",
    "flatten",
    "get_by_path",
    "set_by_path",
    "unflatten",
]

logger = logging.getLogger(__name__)

_INDEX = re.compile(r"0|[1-9][0-9]*")


def _as_index(segment: str, container: list[Any] | tuple[Any, ...]) -> int | None:
    """Return the in-range array index named by ``segment``, else None."""
    if not _INDEX.fullmatch(segment):
        return None
    idx = int(segment)
    return idx if idx < len(container) else None


def _step(node: Any, segment: str) -> Any:
    if isinstance(node, dict):
        return node.get(segment, MISSING)
    if isinstance(node, (list, tuple)):
        idx = _as_index(segment, node)
        return MISSING if idx is None else node[idx]
    return MISSING


def get_by_path(
    value: Any,
    path: str,
    default: Any = MISSING,
    separator: str = ".",
) -> Any:
    """Return the node at ``path``, or ``default`` when any segment misses.

    Never raises: a missing key, an out-of-range index or a scalar
    intermediate all count as "not found".
    """
    current = value
    for segment in path.split(separator):
        current = _step(current, segment)
        if current is MISSING:
            return default
    return current


def set_by_path(target: Any, path: str, value: Any, separator: str = ".") -> None:
    """Assign ``value`` at ``path`` inside ``target``, mutating it in place.

    Missing intermediates, and intermediates holding a scalar, are replaced by
    new empty objects.  Array segments must name an existing position (the
    final segment may also equal the array length, which appends).
    """
    *parents, leaf = path.split(separator)
    current = target
    walked = ""
    for segment in parents:
        walked = child_path(walked, segment)
        if isinstance(current, list):
            idx = _as_index(segment, current)
            if idx is None:
                logger.warning(
                    "set_by_path: no array position %r at %s", segment, walked
                )
                return
            if not isinstance(current[idx], (dict, list)):
                current[idx] = {}
            current = current[idx]
        elif isinstance(current, dict):
            if not isinstance(current.get(segment), (dict, list)):
                current[segment] = {}
            current = current[segment]
        else:
            logger.warning(
                "set_by_path: cannot descend into %s at %s",
                type(current).__name__,
                walked,
            )
            return

    if isinstance(current, dict):
        current[leaf] = value
    elif (
        isinstance(current, list)
        and _INDEX.fullmatch(leaf)
        and int(leaf) <= len(current)
    ):
        idx = int(leaf)
        if idx == len(current):
            current.append(value)
        else:
            current[idx] = value
    else:
        logger.warning(
            "set_by_path: cannot assign %r into %s", leaf, type(current).__name__
        )


def delete_by_path(target: Any, path: str, separator: str = ".") -> bool:
    """Remove the node at ``path``; return whether anything was removed.

    Deleting an array position removes the element, shifting later ones.
    """
    *parents, leaf = path.split(separator)
    current = target
    for segment in parents:
        current = _step(current, segment)
        if current is MISSING:
            return False

    if isinstance(current, dict):
        if leaf in current:
            del current[leaf]
            return True
        return False
    if isinstance(current, list):
        idx = _as_index(leaf, current)
        if idx is not None:
            del current[idx]
            return True
    return False


def flatten(value: Any, separator: str = ".") -> dict[str, Any]:
    """Flatten nested objects into a single-level ``{dot.path: leaf}`` map.

    Only non-empty objects are recursed into.  Arrays and empty objects are
    stored whole (as copies) under their path so that ``unflatten`` restores
    them exactly.  A non-object root flattens to ``{}``.

    Example::

        flatten({"a": 1, "b": {"c": 2, "d": {"e": 3}}})
        # {"a": 1, "b.c": 2, "b.d.e": 3}
    """
    flat: dict[str, Any] = {}
    if not isinstance(value, dict):
        return flat

    guard = CycleGuard()

    def _walk(node: dict[str, Any], prefix: str) -> None:
        with guard.visit(node, prefix):
            for key, val in node.items():
                key_path = f"{prefix}{separator}{key}" if prefix else key
                if isinstance(val, dict) and val:
                    _walk(val, key_path)
                else:
                    flat[key_path] = to_json_model(val) if is_container(val) else val

    _walk(value, "")
    return flat


def unflatten(mapping: dict[str, Any], separator: str = ".") -> dict[str, Any]:
    """Rebuild a nested object from a ``flatten`` map."""
    result: dict[str, Any] = {}
    for key, val in mapping.items():
        leaf = to_json_model(val) if is_container(val) else val
        set_by_path(result, key, leaf, separator)
    return result


def extract_keys(value: Any) -> list[str]:
    """Return every object-key path in ``value``, sorted and deduplicated.

    Arrays are walked through transparently: keys of objects inside
    ``{"items": [{"id": 1}]}`` are reported as ``items`` and ``items.id``.
    """
    keys: set[str] = set()
    guard = CycleGuard()

    def _walk(node: Any, path: str) -> None:
        if isinstance(node, dict):
            with guard.visit(node, path):
                for key, val in node.items():
                    full = child_path(path, key)
                    keys.add(full)
                    _walk(val, full)
        elif isinstance(node, (list, tuple)):
            with guard.visit(node, path):
                for item in node:
                    _walk(item, path)

    _walk(value, "")
    return sorted(keys)
