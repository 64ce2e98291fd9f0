"""JSON inspector - tree processing and quality analysis for JSON documents."""

from __future__ import annotations

import logging

from json_inspector.analysis import (
    AnalysisReport,
    AnalyzerConfig,
    Grade,
    JsonAnalyzer,
    MetricWeights,
)
from json_inspector.api import analyze, grade_for, meets_grade, quality_score
from json_inspector.errors import (
    CycleDetectedError,
    JsonParseError,
    JsonProcessingError,
    JsonValidationError,
)
from json_inspector.processor import ComparisonResult, compare

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__: str = "0.1.0"
__all__: list[str] = [
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
]
