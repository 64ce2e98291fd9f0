"""processor subpackage: stateless operations over JSON value trees.

Import from this module (not from sub-modules directly) to stay on the
stable public interface.

Example::

    from json_inspector.processor import flatten, unflatten, compare

    flat = flatten({"a": 1, "b": {"c": 2}})    # {"a": 1, "b.c": 2}
    assert unflatten(flat) == {"a": 1, "b": {"c": 2}}
    compare({}, {"x": 1}).equal                 # False
"""

from __future__ import annotations

from json_inspector.processor.diff import (
    ComparisonResult,
    Difference,
    DiffType,
    compare,
)
from json_inspector.processor.paths import (
    MISSING,
    delete_by_path,
    extract_keys,
    flatten,
    get_by_path,
    set_by_path,
    unflatten,
)
from json_inspector.processor.records import (
    RecordPreview,
    preview_records,
    validate_records,
)
from json_inspector.processor.schema import ValidationResult, validate
from json_inspector.processor.serialize import (
    compress,
    escape,
    format_size,
    generate_filename,
    parse_json,
    pretty_print,
    sanitize_for_json,
    unescape,
)
from json_inspector.processor.stats import (
    JsonStats,
    MatchType,
    SearchMatch,
    calculate_stats,
    search,
)
from json_inspector.processor.structure import (
    ArrayMergeStrategy,
    deep_clone,
    deep_merge,
    remove_nullish,
    sort_keys,
    to_json_model,
    transform,
)

__all__ = [
    "MISSING",
    "ArrayMergeStrategy",
    "ComparisonResult",
    "DiffType",
    "Difference",
    "JsonStats",
    "MatchType",
    "RecordPreview",
    "SearchMatch",
    "ValidationResult",
    "calculate_stats",
    "compare",
    "compress",
    "deep_clone",
    "deep_merge",
    "delete_by_path",
    "escape",
    "extract_keys",
    "flatten",
    "format_size",
    "generate_filename",
    "get_by_path",
    "parse_json",
    "preview_records",
    "pretty_print",
    "remove_nullish",
    "sanitize_for_json",
    "search",
    "set_by_path",
    "sort_keys",
    "to_json_model",
    "transform",
    "unescape",
    "unflatten",
    "validate",
    "validate_records",
]
