"""Public API functions for json-inspector.

``analyze``, ``quality_score`` and ``meets_grade`` each create a fresh
``JsonAnalyzer`` per call, so no state is shared between calls.
"""

from __future__ import annotations

from typing import Any

from json_inspector.analysis.analyzer import JsonAnalyzer
from json_inspector.analysis.config import AnalyzerConfig
from json_inspector.analysis.report import AnalysisReport, Grade
from json_inspector.analysis.scoring import grade_for

__all__ = ["analyze", "grade_for", "meets_grade", "quality_score"]

# Best grade first
_GRADE_ORDER: tuple[Grade, ...] = tuple(Grade)


def analyze(data: Any, config: AnalyzerConfig | None = None) -> AnalysisReport:
    """Analyze a JSON value and return a full ``AnalysisReport``.

    Args:
        data:   JSON value (dict, list, str, int, float, bool, None).
        config: Thresholds and weights.  Defaults to ``AnalyzerConfig()`` when None.

    Returns:
        An ``AnalysisReport`` with score, grade, issues, warnings, suggestions,
        metrics, summary, stats and computation_time_ms populated.

    Raises:
        CycleDetectedError: If ``data`` contains itself.
    """
    return JsonAnalyzer(config=config).analyze(data)


def quality_score(data: Any, config: AnalyzerConfig | None = None) -> int:
    """Return only the overall score, an int in [0, 100]."""
    return analyze(data, config=config).score


def meets_grade(
    data: Any,
    minimum: Grade | str = Grade.C,
    config: AnalyzerConfig | None = None,
) -> bool:
    """Return True if ``data`` grades at ``minimum`` or better.

    Args:
        data:    JSON value to analyze.
        minimum: Lowest acceptable grade, as a ``Grade`` or its letter.
                 Defaults to "C".
        config:  Thresholds and weights.  Defaults to ``AnalyzerConfig()``.

    Raises:
        ValueError: If ``minimum`` is not one of A, B, C, D, F.
    """
    floor = Grade(str(minimum).upper())
    grade = analyze(data, config=config).grade
    return _GRADE_ORDER.index(grade) <= _GRADE_ORDER.index(floor)
