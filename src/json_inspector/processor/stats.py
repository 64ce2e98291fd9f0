"""Tree statistics and key/value search.

Both operations are single depth-first traversals in insertion order.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import StrEnum, auto
from typing import Any

from json_inspector.processor.serialize import compress
from json_inspector.tree.guard import CycleGuard
from json_inspector.tree.nodes import (
    JsonKind,
    child_path,
    index_path,
    is_container,
    kind_of,
)

__all__ = ["JsonStats", "MatchType", "SearchMatch", "calculate_stats", "search"]


@dataclass(frozen=True, slots=True)
class JsonStats:
    """Shape summary of a JSON value.

    Attributes:
        size:     Length of the compact serialized form in Unicode code points
                  (Python ``len``), so a character outside the BMP counts once.
        depth:    Deepest nesting level of any container below the root.
                  0 for a scalar root and for a flat object or array.
        keys:     Total number of object keys across all nesting levels.
        arrays, objects:  Container counts (root included).
        nulls, booleans, numbers, strings:  Leaf counts by type.
    """

    size: int
    depth: int
    keys: int
    arrays: int
    objects: int
    nulls: int
    booleans: int
    numbers: int
    strings: int

    def to_dict(self) -> dict[str, int]:
        return asdict(self)


def calculate_stats(value: Any) -> JsonStats:
    """Collect ``JsonStats`` for ``value`` in one traversal.

    Example::

        calculate_stats({"a": {"b": {"c": 1}}}).depth   # 2
    """
    counts = dict.fromkeys(JsonKind, 0)
    depth = 0
    keys = 0
    guard = CycleGuard()

    def _walk(node: Any, level: int, path: str) -> None:
        nonlocal depth, keys
        kind = kind_of(node)
        counts[kind] += 1
        if kind is JsonKind.OBJECT:
            depth = max(depth, level)
            keys += len(node)
            with guard.visit(node, path):
                for key, val in node.items():
                    _walk(val, level + 1, child_path(path, key))
        elif kind is JsonKind.ARRAY:
            depth = max(depth, level)
            with guard.visit(node, path):
                for idx, item in enumerate(node):
                    _walk(item, level + 1, index_path(path, idx))

    _walk(value, 0, "")

    return JsonStats(
        size=len(compress(value)),
        depth=depth,
        keys=keys,
        arrays=counts[JsonKind.ARRAY],
        objects=counts[JsonKind.OBJECT],
        nulls=counts[JsonKind.NULL],
        booleans=counts[JsonKind.BOOLEAN],
        numbers=counts[JsonKind.NUMBER],
        strings=counts[JsonKind.STRING],
    )


class MatchType(StrEnum):
    """Which part of a node matched a search query."""

    KEY = auto()
    VALUE = auto()
    BOTH = auto()


@dataclass(frozen=True, slots=True)
class SearchMatch:
    """A node that matched ``search``.

    ``value`` is the matched node itself, not a copy.
    """

    path: str
    value: Any
    match_type: MatchType


def search(
    value: Any,
    query: str,
    case_sensitive: bool = False,
    max_results: int | None = None,
) -> list[SearchMatch]:
    """Find every node whose key or serialized value contains ``query``.

    Object entries match on their key name or on their serialized value;
    array elements (which have no key) match on their serialized value.
    Containers are reported *and* searched, so a match deep in the tree is
    also reported at every ancestor whose serialized form contains it.

    Args:
        value:          The tree to search.
        query:          Substring to look for.
        case_sensitive: Compare without lower-casing when True.
        max_results:    Stop after this many matches.  ``None`` means no limit.

    Returns:
        Matches in depth-first, insertion order.
    """
    needle = query if case_sensitive else query.lower()
    results: list[SearchMatch] = []
    guard = CycleGuard()

    def _fold(text: str) -> str:
        return text if case_sensitive else text.lower()

    def _full() -> bool:
        return max_results is not None and len(results) >= max_results

    def _consider(key: str | None, node: Any, path: str) -> None:
        key_hit = key is not None and needle in _fold(key)
        value_hit = needle in _fold(compress(node))
        if key_hit and value_hit:
            results.append(SearchMatch(path, node, MatchType.BOTH))
        elif key_hit:
            results.append(SearchMatch(path, node, MatchType.KEY))
        elif value_hit:
            results.append(SearchMatch(path, node, MatchType.VALUE))
        if is_container(node):
            _walk(node, path)

    def _walk(node: Any, path: str) -> None:
        if isinstance(node, dict):
            with guard.visit(node, path):
                for key, val in node.items():
                    if _full():
                        return
                    _consider(key, val, child_path(path, key))
        elif isinstance(node, (list, tuple)):
            with guard.visit(node, path):
                for idx, item in enumerate(node):
                    if _full():
                        return
                    _consider(None, item, index_path(path, idx))

    _walk(value, "")
    return results
