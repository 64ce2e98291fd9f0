"""Tests for whole-tree rebuilding: clone, merge, sort, prune, transform.

Covers:
- to_json_model / deep_clone lossy copy semantics
- deep_merge with CONCAT and REPLACE array strategies
- sort_keys lexicographic ordering at every depth
- remove_nullish at every depth
- transform bottom-up invocation order and paths
- CycleDetectedError on self-referencing input
"""

from __future__ import annotations

import logging
from typing import Any

import pytest

from json_inspector.errors import CycleDetectedError
from json_inspector.processor import (
    ArrayMergeStrategy,
    deep_clone,
    deep_merge,
    remove_nullish,
    sort_keys,
    to_json_model,
    transform,
)


@pytest.fixture
def cyclic() -> dict[str, Any]:
    node: dict[str, Any] = {"name": "loop"}
    node["self"] = node
    return node


# ---------------------------------------------------------------------------
# to_json_model / deep_clone
# ---------------------------------------------------------------------------


class TestToJsonModel:
    def test_non_finite_float_becomes_null(self) -> None:
        assert to_json_model({"a": float("nan"), "b": float("inf")}) == {
            "a": None,
            "b": None,
        }

    def test_unsupported_value_dropped_from_object(self) -> None:
        assert to_json_model({"a": {1, 2}, "b": 1}) == {"b": 1}

    def test_unsupported_value_nulled_in_array(self) -> None:
        assert to_json_model([1, object()]) == [1, None]

    def test_non_string_keys_stringified(self) -> None:
        assert to_json_model({1: "x", 2.5: "y", None: "z"}) == {
            "1": "x",
            "2.5": "y",
            "null": "z",
        }

    def test_tuple_becomes_list(self) -> None:
        assert to_json_model({"t": (1, 2)}) == {"t": [1, 2]}

    def test_unsupported_root_becomes_none(self) -> None:
        assert to_json_model(object()) is None

    def test_cycle_raises(self, cyclic: dict[str, Any]) -> None:
        with pytest.raises(CycleDetectedError):
            to_json_model(cyclic)


class TestDeepClone:
    def test_structurally_equal_but_distinct(self) -> None:
        original = {"a": [1, {"b": None}], "c": "x"}
        clone = deep_clone(original)
        assert clone == original
        assert clone is not original
        assert clone["a"] is not original["a"]
        assert clone["a"][1] is not original["a"][1]

    def test_scalar_root(self) -> None:
        assert deep_clone("text") == "text"

    def test_shared_reference_is_copied_twice(self) -> None:
        shared = {"v": 1}
        clone = deep_clone({"a": shared, "b": shared})
        assert clone == {"a": {"v": 1}, "b": {"v": 1}}
        assert clone["a"] is not clone["b"]


# ---------------------------------------------------------------------------
# deep_merge
# ---------------------------------------------------------------------------


class TestDeepMerge:
    def test_arrays_concatenate_by_default(self) -> None:
        assert deep_merge({"a": [1, 2]}, {"a": [3, 4]}) == {"a": [1, 2, 3, 4]}

    def test_replace_strategy(self) -> None:
        merged = deep_merge(
            {"a": [1, 2]}, {"a": [3]}, array_strategy=ArrayMergeStrategy.REPLACE
        )
        assert merged == {"a": [3]}

    def test_later_argument_wins(self) -> None:
        assert deep_merge({"a": 1, "b": 2}, {"a": 3}) == {"a": 3, "b": 2}

    def test_nested_objects_merge(self) -> None:
        merged = deep_merge({"user": {"name": "A"}}, {"user": {"age": 3}})
        assert merged == {"user": {"name": "A", "age": 3}}

    def test_scalar_replaced_by_object(self) -> None:
        assert deep_merge({"a": 1}, {"a": {"b": 2}}) == {"a": {"b": 2}}

    def test_three_way_merge(self) -> None:
        merged = deep_merge({"a": [1]}, {"a": [2]}, {"a": [3], "b": True})
        assert merged == {"a": [1, 2, 3], "b": True}

    def test_no_arguments(self) -> None:
        assert deep_merge() == {}

    def test_inputs_not_mutated_or_aliased(self) -> None:
        left = {"x": {"y": 1}, "xs": [1]}
        right = {"x": {"z": 2}, "xs": [2]}
        merged = deep_merge(left, right)
        assert left == {"x": {"y": 1}, "xs": [1]}
        assert right == {"x": {"z": 2}, "xs": [2]}
        assert merged["x"] is not left["x"]
        assert merged["xs"] is not left["xs"]

    def test_non_dict_arguments_skipped(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="json_inspector"):
            merged = deep_merge({"a": 1}, [1, 2], "text", {"b": 2})
        assert merged == {"a": 1, "b": 2}
        assert sum("deep_merge skipped" in r.getMessage() for r in caplog.records) == 2

    def test_cycle_raises(self, cyclic: dict[str, Any]) -> None:
        with pytest.raises(CycleDetectedError):
            deep_merge({"a": 1}, cyclic)


# ---------------------------------------------------------------------------
# sort_keys / remove_nullish
# ---------------------------------------------------------------------------


class TestSortKeys:
    def test_top_level(self) -> None:
        assert list(sort_keys({"z": 1, "a": 2})) == ["a", "z"]

    def test_nested_and_inside_arrays(self) -> None:
        result = sort_keys({"b": {"y": 1, "x": 2}, "a": [{"d": 1, "c": 2}]})
        assert list(result) == ["a", "b"]
        assert list(result["b"]) == ["x", "y"]
        assert list(result["a"][0]) == ["c", "d"]

    def test_array_order_preserved(self) -> None:
        assert sort_keys([3, 1, 2]) == [3, 1, 2]

    def test_cycle_raises(self, cyclic: dict[str, Any]) -> None:
        with pytest.raises(CycleDetectedError):
            sort_keys(cyclic)


class TestRemoveNullish:
    def test_strips_at_every_depth(self) -> None:
        data = {"a": None, "b": [1, None, {"c": None, "d": 0}], "e": {"f": None}}
        assert remove_nullish(data) == {"b": [1, {"d": 0}], "e": {}}

    def test_falsy_values_kept(self) -> None:
        assert remove_nullish({"a": 0, "b": "", "c": False, "d": []}) == {
            "a": 0,
            "b": "",
            "c": False,
            "d": [],
        }

    def test_input_untouched(self) -> None:
        data = {"a": None}
        remove_nullish(data)
        assert data == {"a": None}


# ---------------------------------------------------------------------------
# transform
# ---------------------------------------------------------------------------


class TestTransform:
    def test_children_before_parent(self) -> None:
        calls: list[tuple[str, Any, str]] = []

        def record(key: str, value: Any, path: str) -> Any:
            calls.append((key, value, path))
            return value

        transform({"a": {"b": 1}, "c": 2}, record)
        assert [(key, path) for key, _, path in calls] == [
            ("b", "a.b"),
            ("a", "a"),
            ("c", "c"),
        ]

    def test_parent_sees_transformed_children(self) -> None:
        def double(key: str, value: Any, path: str) -> Any:
            if isinstance(value, int):
                return value * 2
            if isinstance(value, dict):
                return {**value, "total": sum(value.values())}
            return value

        result = transform({"outer": {"x": 1, "y": 2}}, double)
        assert result == {"outer": {"x": 2, "y": 4, "total": 6}}

    def test_array_elements_recursed_with_index_paths(self) -> None:
        paths: list[str] = []

        def record(key: str, value: Any, path: str) -> Any:
            paths.append(path)
            return value

        transform({"xs": [{"k": 1}, 2]}, record)
        assert paths == ["xs[0].k", "xs"]

    def test_scalar_root_untouched(self) -> None:
        assert transform(5, lambda k, v, p: v * 10) == 5

    def test_cycle_raises(self, cyclic: dict[str, Any]) -> None:
        with pytest.raises(CycleDetectedError):
            transform(cyclic, lambda k, v, p: v)
