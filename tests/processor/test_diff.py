"""Tests for the structural diff: added/removed/modified paths, atomic arrays."""

from __future__ import annotations

from typing import Any

import pytest

from json_inspector.errors import CycleDetectedError
from json_inspector.processor import MISSING, DiffType, compare


class TestCompare:
    def test_added_key(self) -> None:
        result = compare({}, {"x": 1})
        assert result.to_dict() == {
            "equal": False,
            "differences": [{"path": "x", "type": "added", "newValue": 1}],
        }

    @pytest.mark.parametrize(
        "value",
        [{}, {"a": [1, {"b": None}]}, [1, 2], "text", None, 0],
    )
    def test_identical_values(self, value: Any) -> None:
        result = compare(value, value)
        assert result.equal is True
        assert result.differences == ()

    def test_removed_key(self) -> None:
        [diff] = compare({"a": 1, "b": 2}, {"a": 1}).differences
        assert diff.path == "b"
        assert diff.type is DiffType.REMOVED
        assert diff.old_value == 2
        assert diff.new_value is MISSING

    def test_nested_modification(self) -> None:
        [diff] = compare({"a": {"b": 1, "c": 2}}, {"a": {"b": 5, "c": 2}}).differences
        assert diff.path == "a.b"
        assert diff.type is DiffType.MODIFIED
        assert (diff.old_value, diff.new_value) == (1, 5)

    def test_arrays_compared_atomically(self) -> None:
        [diff] = compare({"xs": [1, 2, 3]}, {"xs": [1, 9, 3]}).differences
        assert diff.path == "xs"
        assert diff.type is DiffType.MODIFIED
        assert diff.old_value == [1, 2, 3]
        assert diff.new_value == [1, 9, 3]

    def test_object_replaced_by_array(self) -> None:
        [diff] = compare({"a": {"b": 1}}, {"a": [1]}).differences
        assert diff.type is DiffType.MODIFIED
        assert diff.path == "a"

    def test_differing_scalar_roots(self) -> None:
        [diff] = compare(1, 2).differences
        assert diff.path == ""
        assert diff.type is DiffType.MODIFIED

    def test_order_left_keys_then_right_only(self) -> None:
        result = compare({"b": 1, "a": 1}, {"c": 1, "a": 2})
        assert [(d.path, d.type) for d in result.differences] == [
            ("b", DiffType.REMOVED),
            ("a", DiffType.MODIFIED),
            ("c", DiffType.ADDED),
        ]

    def test_to_dict_omits_absent_side(self) -> None:
        payload = compare({"a": 1}, {}).to_dict()
        assert payload["differences"] == [
            {"path": "a", "type": "removed", "oldValue": 1}
        ]

    def test_null_is_a_present_value(self) -> None:
        [diff] = compare({"a": None}, {"a": 0}).differences
        assert diff.to_dict() == {
            "path": "a",
            "type": "modified",
            "oldValue": None,
            "newValue": 0,
        }

    def test_cycle_raises(self) -> None:
        left: dict[str, Any] = {"x": 1}
        left["loop"] = left
        right: dict[str, Any] = {"x": 2}
        right["loop"] = right
        with pytest.raises(CycleDetectedError):
            compare(left, right)
