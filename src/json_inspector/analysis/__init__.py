"""analysis subpackage: rule-based quality analysis of JSON documents.

Import from this module (not from sub-modules directly) to stay on the
stable public interface.

Example::

    from json_inspector.analysis import AnalyzerConfig, JsonAnalyzer

    analyzer = JsonAnalyzer(AnalyzerConfig(max_depth=6, warn_depth=4))
    report = analyzer.analyze({"items": [1, "two", None]})
    report.score, report.grade
"""

from __future__ import annotations

from json_inspector.analysis.analyzer import JsonAnalyzer
from json_inspector.analysis.checks import (
    CHECKS,
    CheckContext,
    check_best_practices,
    check_performance,
    check_quality,
    check_security,
    check_structure,
)
from json_inspector.analysis.config import (
    DEFAULT_METADATA_KEYS,
    DEFAULT_SENSITIVE_PATTERNS,
    AnalyzerConfig,
    MetricWeights,
)
from json_inspector.analysis.findings import (
    AnalysisWarning,
    Findings,
    Issue,
    Priority,
    Severity,
    Suggestion,
)
from json_inspector.analysis.report import AnalysisReport, Grade, Metrics
from json_inspector.analysis.scoring import (
    compute_metrics,
    compute_score,
    grade_for,
    render_summary,
)

__all__ = [
    "CHECKS",
    "DEFAULT_METADATA_KEYS",
    "DEFAULT_SENSITIVE_PATTERNS",
    "AnalysisReport",
    "AnalysisWarning",
    "AnalyzerConfig",
    "CheckContext",
    "Findings",
    "Grade",
    "Issue",
    "JsonAnalyzer",
    "MetricWeights",
    "Metrics",
    "Priority",
    "Severity",
    "Suggestion",
    "check_best_practices",
    "check_performance",
    "check_quality",
    "check_security",
    "check_structure",
    "compute_metrics",
    "compute_score",
    "grade_for",
    "render_summary",
]
