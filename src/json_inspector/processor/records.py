"""Record datasets: arrays of objects as produced by scrapers and exports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from json_inspector.processor.schema import ValidationResult
from json_inspector.processor.serialize import pretty_print

__all__ = ["RecordPreview", "preview_records", "validate_records"]


@dataclass(frozen=True, slots=True)
class RecordPreview:
    """Pretty-printed head of a record dataset."""

    preview: str
    total_rows: int
    preview_rows: int


def validate_records(data: Any) -> ValidationResult:
    """Check that ``data`` is a non-empty array whose items are all objects."""
    if not isinstance(data, list):
        return ValidationResult(valid=False, errors=["Data must be an array"])
    if not data:
        return ValidationResult(valid=False, errors=["Data array is empty"])
    for idx, item in enumerate(data):
        if not isinstance(item, dict):
            return ValidationResult(
                valid=False, errors=[f"Item at index {idx} is not an object"]
            )
    return ValidationResult(valid=True)


def preview_records(data: Any, max_rows: int = 5) -> RecordPreview:
    """Render the first ``max_rows`` records as indented JSON.

    Raises:
        JsonValidationError: If ``data`` is not a valid record dataset.
    """
    validate_records(data).raise_for_errors("Cannot preview records")
    rows = data[:max_rows]
    return RecordPreview(
        preview=pretty_print(rows),
        total_rows=len(data),
        preview_rows=len(rows),
    )
