"""Metrics, Grade and AnalysisReport: the analyzer's output types."""

from __future__ import annotations

from dataclasses import astuple, dataclass
from enum import StrEnum
from typing import Any

import numpy as np

from json_inspector.analysis.findings import (
    AnalysisWarning,
    Issue,
    Severity,
    Suggestion,
)
from json_inspector.processor.stats import JsonStats

__all__ = ["AnalysisReport", "Grade", "Metrics"]


class Grade(StrEnum):
    """Letter grade derived from the overall score."""

    A = "A"
    B = "B"
    C = "C"
    D = "D"
    F = "F"


@dataclass(frozen=True, slots=True)
class Metrics:
    """Five independently derived sub-scores, each an int in [0, 100]."""

    complexity: int
    maintainability: int
    performance: int
    security: int
    quality: int

    def as_array(self) -> np.ndarray:
        """Metric values in weight order, as float64."""
        return np.array(astuple(self), dtype=float)

    def to_dict(self) -> dict[str, int]:
        return {
            "complexity": self.complexity,
            "maintainability": self.maintainability,
            "performance": self.performance,
            "security": self.security,
            "quality": self.quality,
        }


@dataclass(frozen=True, slots=True)
class AnalysisReport:
    """Result of ``JsonAnalyzer.analyze``.

    Attributes:
        score:       Overall score in [0, 100].
        grade:       Letter grade for ``score``.
        issues:      Must-fix problems, in check order.
        warnings:    Probable problems, in check order.
        suggestions: Advisory improvements, in check order.
        metrics:     The five sub-scores the overall score was built from.
        summary:     Multi-line plain-text report.
        stats:       Shape statistics of the analyzed document.
        computation_time_ms: Wall-clock duration of the analysis.
    """

    score: int
    grade: Grade
    issues: tuple[Issue, ...]
    warnings: tuple[AnalysisWarning, ...]
    suggestions: tuple[Suggestion, ...]
    metrics: Metrics
    summary: str
    stats: JsonStats
    computation_time_ms: float

    @property
    def critical_issues(self) -> tuple[Issue, ...]:
        return tuple(i for i in self.issues if i.severity is Severity.CRITICAL)

    def to_dict(self) -> dict[str, Any]:
        """JSON-compatible rendering for request handlers and UI surfaces."""
        return {
            "score": self.score,
            "grade": str(self.grade),
            "issues": [i.to_dict() for i in self.issues],
            "warnings": [w.to_dict() for w in self.warnings],
            "suggestions": [s.to_dict() for s in self.suggestions],
            "metrics": self.metrics.to_dict(),
            "summary": self.summary,
            "stats": self.stats.to_dict(),
            "computationTimeMs": self.computation_time_ms,
        }
