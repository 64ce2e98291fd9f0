"""Tests for the public API functions: analyze, quality_score, meets_grade, grade_for.

Each call creates a fresh JsonAnalyzer, so results never depend on call order.
"""

from __future__ import annotations

import pytest

import json_inspector
from json_inspector import (
    AnalysisReport,
    AnalyzerConfig,
    Grade,
    analyze,
    grade_for,
    meets_grade,
    quality_score,
)

CLEAN = {"version": "1.0", "title": "demo"}
LEAKY = {"password": "abc"}


class TestAnalyze:
    def test_returns_report(self) -> None:
        report = analyze(CLEAN)
        assert isinstance(report, AnalysisReport)
        assert report.grade is Grade.A

    def test_config_forwarded(self) -> None:
        config = AnalyzerConfig(critical_penalty=0.0)
        assert analyze(LEAKY, config=config).score == 90

    def test_calls_are_independent(self) -> None:
        first = analyze(LEAKY).score
        analyze({"Mixed_Key": [1, "a", None]})
        assert analyze(LEAKY).score == first


class TestQualityScore:
    def test_clean(self) -> None:
        assert quality_score(CLEAN) == 100

    def test_leaky(self) -> None:
        assert quality_score(LEAKY) == 80


class TestMeetsGrade:
    def test_default_minimum_is_c(self) -> None:
        assert meets_grade(LEAKY)

    def test_stricter_minimum(self) -> None:
        assert not meets_grade(LEAKY, "A")
        assert meets_grade(LEAKY, Grade.B)

    def test_lowercase_letter(self) -> None:
        assert meets_grade(CLEAN, "a")

    def test_f_always_met(self) -> None:
        assert meets_grade({f"token{i}": i for i in range(12)}, "F")

    def test_unknown_grade(self) -> None:
        with pytest.raises(ValueError):
            meets_grade(CLEAN, "E")


class TestGradeFor:
    def test_reexported(self) -> None:
        assert grade_for(90) is Grade.A
        assert grade_for(59.9) is Grade.F


class TestExports:
    def test_all(self) -> None:
        assert set(json_inspector.__all__) == {
            "AnalysisReport",
            "AnalyzerConfig",
            "ComparisonResult",
            "CycleDetectedError",
            "Grade",
            "JsonAnalyzer",
            "JsonParseError",
            "JsonProcessingError",
            "JsonValidationError",
            "MetricWeights",
            "analyze",
            "compare",
            "grade_for",
            "meets_grade",
            "quality_score",
        }

    def test_compare_reexported(self) -> None:
        assert json_inspector.compare({"a": 1}, {"a": 1}).equal
