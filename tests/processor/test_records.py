"""Tests for record-dataset validation and preview."""

from __future__ import annotations

import json

import pytest

from json_inspector.errors import JsonValidationError
from json_inspector.processor import preview_records, validate_records


class TestValidateRecords:
    def test_not_an_array(self) -> None:
        assert validate_records({"a": 1}).errors == ["Data must be an array"]

    def test_empty(self) -> None:
        assert validate_records([]).errors == ["Data array is empty"]

    def test_non_object_item(self) -> None:
        result = validate_records([{"a": 1}, 2])
        assert result.valid is False
        assert result.errors == ["Item at index 1 is not an object"]

    def test_valid(self) -> None:
        assert validate_records([{"a": 1}, {"b": 2}]).valid


class TestPreviewRecords:
    def test_first_rows(self) -> None:
        rows = [{"n": i} for i in range(7)]
        preview = preview_records(rows)
        assert preview.total_rows == 7
        assert preview.preview_rows == 5
        assert json.loads(preview.preview) == rows[:5]

    def test_fewer_rows_than_limit(self) -> None:
        preview = preview_records([{"n": 1}], max_rows=3)
        assert preview.preview_rows == 1
        assert preview.preview == '[\n  {\n    "n": 1\n  }\n]'

    def test_invalid_raises(self) -> None:
        with pytest.raises(
            JsonValidationError, match="Cannot preview records: Data array is empty"
        ):
            preview_records([])
