"""The five analyzer check passes.

Each pass reads the tree, appends to a shared ``Findings`` and never raises
for well-formed JSON input.  Passes are independent: none of them reads what
another one produced, so they can run in any order.  ``JsonAnalyzer`` runs
them in the order listed in ``CHECKS``.

Paths use dot notation for object keys and ``[idx]`` for array elements, with
the root at ``""``.
"""

from __future__ import annotations

import json
import re
from collections import Counter
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any, NamedTuple

from json_inspector.analysis.config import AnalyzerConfig
from json_inspector.analysis.findings import Findings, Priority, Severity
from json_inspector.analysis.scoring import round_half_up
from json_inspector.analysis.validators import (
    is_parseable_date,
    is_valid_email,
    is_valid_url,
)
from json_inspector.processor.stats import JsonStats
from json_inspector.tree.guard import CycleGuard
from json_inspector.tree.nodes import child_path, index_path, js_typeof
from json_inspector.tree.normalizer import KeyNormalizer, KeyStyleClassifier

__all__ = [
    "CHECKS",
    "Check",
    "CheckContext",
    "Visit",
    "check_best_practices",
    "check_performance",
    "check_quality",
    "check_security",
    "check_structure",
    "walk",
]

_SQL = re.compile(r"select.*from|insert.*into|delete.*from", re.IGNORECASE)

_BOOLEAN_STRINGS = frozenset({"true", "false"})


@dataclass(frozen=True, slots=True)
class CheckContext:
    """State shared by the check passes of a single analysis.

    ``JsonAnalyzer`` builds a fresh context for every ``analyze`` call, so the
    classifier cache never outlives one document.
    """

    config: AnalyzerConfig
    classifier: KeyStyleClassifier
    normalizer: KeyNormalizer
    sensitive: tuple[tuple[re.Pattern[str], str], ...]

    @classmethod
    def from_config(cls, config: AnalyzerConfig) -> CheckContext:
        return cls(
            config=config,
            classifier=KeyStyleClassifier(max_cache_size=config.key_cache_size),
            normalizer=KeyNormalizer(),
            sensitive=tuple(
                (re.compile(pattern, re.IGNORECASE), category)
                for pattern, category in config.sensitive_patterns
            ),
        )


# fn(data, stats, findings, context)
Check = Callable[[Any, JsonStats, Findings, CheckContext], None]


# ---------------------------------------------------------------------------
# Traversal
# ---------------------------------------------------------------------------


class Visit(NamedTuple):
    """One node reached by ``walk``.

    ``key`` is the object key for object entries, the position for array
    elements and ``None`` for the root.
    """

    path: str
    key: str | int | None
    value: Any


def walk(data: Any) -> Iterator[Visit]:
    """Yield every node of ``data`` depth-first, parents before children.

    Raises:
        CycleDetectedError: If a container contains itself.
    """
    guard = CycleGuard()

    def _walk(node: Any, path: str, key: str | int | None) -> Iterator[Visit]:
        yield Visit(path, key, node)
        if isinstance(node, dict):
            with guard.visit(node, path):
                for name, val in node.items():
                    yield from _walk(val, child_path(path, name), name)
        elif isinstance(node, (list, tuple)):
            with guard.visit(node, path):
                for idx, item in enumerate(node):
                    yield from _walk(item, index_path(path, idx), idx)

    yield from _walk(data, "", None)


def _entries(data: Any) -> Iterator[Visit]:
    """Object entries only, at any depth (arrays are walked through)."""
    return (visit for visit in walk(data) if isinstance(visit.key, str))


def _where(path: str) -> str:
    return path or "(root)"


# ---------------------------------------------------------------------------
# Structure
# ---------------------------------------------------------------------------


def check_structure(
    data: Any, stats: JsonStats, findings: Findings, context: CheckContext
) -> None:
    """Nesting depth, document size, empty containers and key naming."""
    config = context.config
    if stats.depth > config.max_depth:
        findings.issue(
            Severity.HIGH,
            "structure",
            f"Nesting depth is too deep ({stats.depth} levels)",
            suggestion="Flatten the structure to improve performance and readability",
        )
    elif stats.depth > config.warn_depth:
        findings.warn("structure", f"Nesting depth is high ({stats.depth} levels)")

    if stats.size > config.max_size:
        findings.issue(
            Severity.MEDIUM,
            "performance",
            f"JSON document is too large ({round_half_up(stats.size / 1024)} KB)",
            suggestion="Consider splitting the data or compressing it",
        )

    for visit in walk(data):
        if isinstance(visit.value, dict) and not visit.value:
            findings.warn("quality", "Empty object", visit.path)
        elif isinstance(visit.value, (list, tuple)) and not visit.value:
            findings.warn("quality", "Empty array", visit.path)

    for visit in _entries(data):
        key = visit.key
        if " " in key:
            findings.warn("naming", f'Key contains spaces: "{key}"', visit.path)
        if not context.classifier.is_consistent(key):
            findings.suggest(
                "naming",
                f'Use one key style (camelCase or snake_case): rename "{key}" '
                f'to "{context.normalizer.to_snake(key)}"',
                Priority.LOW,
            )


# ---------------------------------------------------------------------------
# Security
# ---------------------------------------------------------------------------


def check_security(
    data: Any, stats: JsonStats, findings: Findings, context: CheckContext
) -> None:
    """Sensitive key names and SQL-looking string values."""
    for visit in walk(data):
        if visit.key is None:
            continue
        if isinstance(visit.key, str):
            for pattern, category in context.sensitive:
                if pattern.search(visit.key):
                    findings.issue(
                        Severity.CRITICAL,
                        "security",
                        f"Possible sensitive data found: {category}",
                        visit.path,
                        "Do not store sensitive data in JSON; "
                        "use encryption or references instead",
                    )
        if isinstance(visit.value, str) and _SQL.search(visit.value):
            findings.warn("security", "Possible SQL statement found", visit.path)


# ---------------------------------------------------------------------------
# Performance
# ---------------------------------------------------------------------------


def _container_texts(data: Any) -> Counter[str]:
    """Count the compact serialized form of every container in ``data``.

    Texts are assembled bottom-up from the children's texts, so each node is
    serialized once.
    """
    seen: Counter[str] = Counter()
    guard = CycleGuard()

    def _text(node: Any, path: str) -> str:
        if isinstance(node, dict):
            with guard.visit(node, path):
                body = ",".join(
                    f"{json.dumps(key, ensure_ascii=False)}:"
                    f"{_text(val, child_path(path, key))}"
                    for key, val in node.items()
                )
            text = "{" + body + "}"
        elif isinstance(node, (list, tuple)):
            with guard.visit(node, path):
                body = ",".join(
                    _text(item, index_path(path, idx)) for idx, item in enumerate(node)
                )
            text = "[" + body + "]"
        else:
            return json.dumps(node, ensure_ascii=False)
        seen[text] += 1
        return text

    _text(data, "")
    return seen


def check_performance(
    data: Any, stats: JsonStats, findings: Findings, context: CheckContext
) -> None:
    """Repeated subtrees, oversized arrays and object counts."""
    config = context.config
    duplicated = sum(1 for count in _container_texts(data).values() if count > 1)
    if duplicated:
        findings.suggest(
            "performance",
            f"Found {duplicated} duplicated values; consider using references",
            Priority.MEDIUM,
        )

    for visit in walk(data):
        if not isinstance(visit.value, (list, tuple)):
            continue
        length = len(visit.value)
        if length > config.max_array:
            findings.issue(
                Severity.HIGH,
                "performance",
                f"Array is too large ({length} items)",
                visit.path,
                "Consider pagination or moving the data to a database",
            )
        elif length > config.large_array:
            findings.suggest(
                "performance",
                f"Large array ({length} items) at {_where(visit.path)}",
                Priority.MEDIUM,
            )

    if stats.objects > config.max_objects:
        findings.suggest(
            "performance",
            f"Large number of objects ({stats.objects}); consider using a database",
            Priority.HIGH,
        )


# ---------------------------------------------------------------------------
# Quality
# ---------------------------------------------------------------------------


def _check_completeness(data: Any, findings: Findings) -> None:
    # Only a root array is treated as a record dataset
    if not isinstance(data, (list, tuple)) or not data:
        return
    fields = dict.fromkeys(
        key for item in data if isinstance(item, dict) for key in item
    )
    for idx, item in enumerate(data):
        if not isinstance(item, dict):
            continue
        for key in fields:
            if key not in item:
                findings.warn(
                    "completeness", f"Missing field: {key}", index_path("", idx)
                )


def check_quality(
    data: Any, stats: JsonStats, findings: Findings, context: CheckContext
) -> None:
    """Null values, mixed-type arrays, incomplete records and bad formats."""
    for visit in walk(data):
        if visit.value is None:
            findings.warn("quality", "Null value", visit.path)

    for visit in walk(data):
        if not isinstance(visit.value, (list, tuple)):
            continue
        if len({js_typeof(item) for item in visit.value}) > 1:
            findings.issue(
                Severity.MEDIUM,
                "quality",
                "Inconsistent data types in array",
                visit.path,
                "Make sure every array element has the same type",
            )

    _check_completeness(data, findings)

    for visit in _entries(data):
        if not isinstance(visit.value, str):
            continue
        name = visit.key.lower()
        if "email" in name and not is_valid_email(visit.value):
            findings.warn("validation", "Invalid email format", visit.path)
        if "url" in name and not is_valid_url(visit.value):
            findings.warn("validation", "Invalid URL format", visit.path)


# ---------------------------------------------------------------------------
# Best practices
# ---------------------------------------------------------------------------


def check_best_practices(
    data: Any, stats: JsonStats, findings: Findings, context: CheckContext
) -> None:
    """Id-keyed arrays, date formats, string booleans and root metadata."""
    for visit in walk(data):
        node = visit.value
        if isinstance(node, (list, tuple)) and all(
            isinstance(item, dict) and "id" in item for item in node
        ):
            findings.suggest(
                "structure",
                "Consider an object keyed by id instead of an array "
                f"at {_where(visit.path)}",
                Priority.LOW,
            )

    for visit in _entries(data):
        if (
            "date" in visit.key.lower()
            and isinstance(visit.value, str)
            and not is_parseable_date(visit.value)
        ):
            findings.warn("format", "Non-standard date format", visit.path)

    for visit in walk(data):
        if (
            visit.key is not None
            and isinstance(visit.value, str)
            and visit.value in _BOOLEAN_STRINGS
        ):
            findings.warn("type", "Use a boolean instead of a string", visit.path)

    metadata = context.config.metadata_keys
    if not (isinstance(data, dict) and any(key in data for key in metadata)):
        listed = ", ".join(metadata)
        findings.suggest(
            "documentation",
            f"Consider adding metadata fields ({listed}) for documentation",
            Priority.LOW,
        )


CHECKS: tuple[Check, ...] = (
    check_structure,
    check_security,
    check_performance,
    check_quality,
    check_best_practices,
)
