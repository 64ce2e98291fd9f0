"""pytest plugin for json-inspector.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from json_inspector import AnalyzerConfig, Grade, analyze, compare

_MAX_LISTED = 10


@pytest.fixture(scope="session")
def assert_json_equal() -> Any:
    """Fixture that returns a callable structural-equality asserter.

    Usage in tests::

        def test_payload(assert_json_equal):
            assert_json_equal(build_payload(), {"id": 1, "tags": ["a"]})

    Returns:
        A callable ``_assert(actual, expected) -> None`` that raises
        ``AssertionError`` listing the first differences (path, type, old and
        new value) when the two values are not structurally equal.
    """

    def _assert(actual: Any, expected: Any) -> None:
        result = compare(expected, actual)
        if result.equal:
            return
        lines = [
            f"  {d.type:<8} {d.path or '(root)'}: {d.old_value!r} -> {d.new_value!r}"
            for d in result.differences[:_MAX_LISTED]
        ]
        hidden = len(result.differences) - len(lines)
        if hidden > 0:
            lines.append(f"  ... and {hidden} more")
        raise AssertionError(
            f"JSON values differ ({len(result.differences)} differences):\n"
            + "\n".join(lines)
        )

    return _assert


@pytest.fixture(scope="session")
def assert_json_quality() -> Any:
    """Fixture that returns a callable asserting a minimum analyzer grade.

    Usage in tests::

        def test_export_quality(assert_json_quality):
            assert_json_quality(export_records(), minimum="B")

    Returns:
        A callable ``_assert(data, minimum="C", config=None) -> None`` that
        raises ``AssertionError`` with the report summary and critical issues
        when the document grades below ``minimum``.
    """
    order = tuple(Grade)

    def _assert(
        data: Any,
        minimum: Grade | str = Grade.C,
        config: AnalyzerConfig | None = None,
    ) -> None:
        floor = Grade(str(minimum).upper())
        report = analyze(data, config=config)
        if order.index(report.grade) <= order.index(floor):
            return
        critical = "".join(
            f"\n  critical: {issue.message} at {issue.path or '(root)'}"
            for issue in report.critical_issues
        )
        raise AssertionError(
            f"JSON quality grade {report.grade} is below {floor} "
            f"(score={report.score})\n{report.summary}{critical}"
        )

    return _assert
