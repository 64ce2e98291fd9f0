"""Structural diff between two JSON values.

``compare`` walks the union of the key sets of two objects and reports each
path as added, removed or modified.  It recurses only when *both* sides of a
changed key are objects.  Arrays are compared atomically by serialized value:
a single changed element reports the whole array as ``modified``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Any

from json_inspector.processor.serialize import compress
from json_inspector.tree.guard import CycleGuard
from json_inspector.tree.nodes import MISSING, child_path

__all__ = ["ComparisonResult", "DiffType", "Difference", "compare"]


class DiffType(StrEnum):
    """Kind of change recorded at a path."""

    ADDED = auto()
    REMOVED = auto()
    MODIFIED = auto()


@dataclass(frozen=True, slots=True)
class Difference:
    """One changed path.

    Attributes:
        path:      Dot path of the changed key ("" when the roots differ).
        type:      What happened at ``path``.
        old_value: Left-hand value, ``MISSING`` for additions.
        new_value: Right-hand value, ``MISSING`` for removals.
    """

    path: str
    type: DiffType
    old_value: Any = MISSING
    new_value: Any = MISSING

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"path": self.path, "type": str(self.type)}
        if self.old_value is not MISSING:
            out["oldValue"] = self.old_value
        if self.new_value is not MISSING:
            out["newValue"] = self.new_value
        return out


@dataclass(frozen=True, slots=True)
class ComparisonResult:
    """Result of ``compare``.

    Attributes:
        equal:       True when no difference was found.
        differences: Changes in traversal order (left keys first, then keys
                     only present on the right).
    """

    equal: bool
    differences: tuple[Difference, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "equal": self.equal,
            "differences": [d.to_dict() for d in self.differences],
        }


def compare(left: Any, right: Any) -> ComparisonResult:
    """Diff two JSON values.

    Example::

        compare({}, {"x": 1}).differences
        # (Difference(path="x", type=DiffType.ADDED, new_value=1),)

    Two roots that are not both objects are compared as a whole and reported
    as a single ``modified`` entry at path ``""`` when they differ.
    """
    differences: list[Difference] = []
    left_guard = CycleGuard()
    right_guard = CycleGuard()

    def _walk(a: dict[str, Any], b: dict[str, Any], path: str) -> None:
        with left_guard.visit(a, path), right_guard.visit(b, path):
            ordered_keys = list(a) + [key for key in b if key not in a]
            for key in ordered_keys:
                key_path = child_path(path, key)
                if key not in a:
                    differences.append(
                        Difference(key_path, DiffType.ADDED, new_value=b[key])
                    )
                elif key not in b:
                    differences.append(
                        Difference(key_path, DiffType.REMOVED, old_value=a[key])
                    )
                else:
                    _diff_values(a[key], b[key], key_path)

    def _diff_values(a: Any, b: Any, path: str) -> None:
        if compress(a) == compress(b):
            return
        if isinstance(a, dict) and isinstance(b, dict):
            _walk(a, b, path)
        else:
            differences.append(Difference(path, DiffType.MODIFIED, a, b))

    _diff_values(left, right, "")
    return ComparisonResult(equal=not differences, differences=tuple(differences))
