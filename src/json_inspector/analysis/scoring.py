"""Metrics, overall score, letter grade and plain-text summary.

Score computation:
    raw   = weights . metrics - critical_penalty * critical_issue_count
    score = round_half_up(clip(raw, 0, 100))

Grades use half-open bands: A >= 90, B >= 80, C >= 70, D >= 60, F below.
"""

from __future__ import annotations

import math

import numpy as np

from json_inspector.analysis.config import AnalyzerConfig
from json_inspector.analysis.findings import Findings, Severity
from json_inspector.analysis.report import Grade, Metrics
from json_inspector.processor.stats import JsonStats

__all__ = [
    "compute_metrics",
    "compute_score",
    "grade_for",
    "render_summary",
    "round_half_up",
]

_GRADE_BANDS: tuple[tuple[float, Grade], ...] = (
    (90.0, Grade.A),
    (80.0, Grade.B),
    (70.0, Grade.C),
    (60.0, Grade.D),
)

_CLOSING_REMARKS: tuple[tuple[float, str], ...] = (
    (90.0, "Excellent! The JSON is well structured and follows best practices."),
    (70.0, "Good! A few small improvements would make it better."),
    (50.0, "Needs improvement. Review the issues and suggestions."),
)
_FALLBACK_REMARK = "Needs major restructuring. Review all issues."


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for non-negatives.

    Python's ``round`` rounds halves to even (``round(2.5) == 2``); metric
    arithmetic expects ``2.5 -> 3``.
    """
    return math.floor(value + 0.5)


def compute_metrics(findings: Findings, stats: JsonStats) -> Metrics:
    """Derive the five sub-scores from the findings and tree statistics."""
    critical = findings.count(Severity.CRITICAL)
    high = findings.count(Severity.HIGH)
    medium = findings.count(Severity.MEDIUM)
    n_issues = len(findings.issues)
    n_warnings = len(findings.warnings)

    def _metric(value: float) -> int:
        return round_half_up(max(0.0, value))

    return Metrics(
        complexity=_metric(100 - stats.depth * 5 - stats.objects / 10),
        maintainability=_metric(100 - n_warnings * 2 - n_issues * 5),
        performance=_metric(100 - stats.size / 10000 - stats.arrays * 2),
        security=_metric(100 - critical * 30 - high * 15),
        quality=_metric(100 - medium * 5 - n_warnings * 2),
    )


def compute_score(
    metrics: Metrics, findings: Findings, config: AnalyzerConfig | None = None
) -> int:
    """Weighted metric sum minus the critical-issue penalty, as an int in [0, 100]."""
    config = config or AnalyzerConfig()
    weighted = float(np.dot(config.weights.as_array(), metrics.as_array()))
    # Float noise from the weighted sum must not flip a .5 boundary
    weighted = round(weighted, 9)
    raw = weighted - config.critical_penalty * findings.count(Severity.CRITICAL)
    return round_half_up(float(np.clip(raw, 0.0, 100.0)))


def grade_for(score: float) -> Grade:
    """Map a score to its letter grade.

    Example::

        grade_for(90)   # Grade.A
        grade_for(89)   # Grade.B
        grade_for(59)   # Grade.F
    """
    for lower, grade in _GRADE_BANDS:
        if score >= lower:
            return grade
    return Grade.F


def render_summary(score: int, grade: Grade, findings: Findings) -> str:
    lines = [f"Overall score: {score}/100 ({grade})", ""]

    critical = findings.count(Severity.CRITICAL)
    if critical:
        noun = "issue needs" if critical == 1 else "issues need"
        lines += [f"Warning: {critical} critical {noun} immediate attention!", ""]

    lines += [
        f"Issues: {len(findings.issues)}",
        f"Warnings: {len(findings.warnings)}",
        f"Suggestions: {len(findings.suggestions)}",
        "",
    ]

    remark = next(
        (text for lower, text in _CLOSING_REMARKS if score >= lower),
        _FALLBACK_REMARK,
    )
    lines.append(remark)
    return "\n".join(lines)
