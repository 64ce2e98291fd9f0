"""JsonAnalyzer: runs the check passes and assembles an AnalysisReport.

Pipeline (straight line, no branching between stages):
    1. to_json_model   normalize the input to plain JSON values
    2. calculate_stats shape statistics
    3. CHECKS          structure, security, performance, quality, best practices
    4. scoring         metrics -> score -> grade -> summary
"""

from __future__ import annotations

import logging
import time
from typing import Any

from json_inspector.analysis.checks import CHECKS, CheckContext
from json_inspector.analysis.config import AnalyzerConfig
from json_inspector.analysis.findings import Findings
from json_inspector.analysis.report import AnalysisReport
from json_inspector.analysis.scoring import (
    compute_metrics,
    compute_score,
    grade_for,
    render_summary,
)
from json_inspector.processor.stats import calculate_stats
from json_inspector.processor.structure import to_json_model

__all__ = ["JsonAnalyzer"]

logger = logging.getLogger(__name__)


class JsonAnalyzer:
    """Rule-based quality, security and performance analysis of JSON data.

    The analyzer holds only its immutable configuration.  Every ``analyze``
    call builds its own check context, so one instance can be shared between
    threads.

    Args:
        config: Thresholds and weights.  Defaults to ``AnalyzerConfig()``.

    Example::

        report = JsonAnalyzer().analyze({"password": "abc"})
        report.grade            # Grade.B (90 weighted, minus 10 per critical)
        report.issues[0].type   # "security"
    """

    def __init__(self, config: AnalyzerConfig | None = None) -> None:
        self._config = config or AnalyzerConfig()

    @property
    def config(self) -> AnalyzerConfig:
        return self._config

    def analyze(self, data: Any) -> AnalysisReport:
        """Analyze ``data`` and return a full report.

        Values outside the JSON model are normalized first (non-finite floats
        become ``None``, unsupported values are dropped), so the report
        describes the document ``data`` would serialize to.

        Raises:
            CycleDetectedError: If ``data`` contains itself.
        """
        start = time.perf_counter()

        tree = to_json_model(data)
        stats = calculate_stats(tree)
        logger.debug(
            "Analyzing document: size=%d depth=%d objects=%d arrays=%d",
            stats.size,
            stats.depth,
            stats.objects,
            stats.arrays,
        )

        context = CheckContext.from_config(self._config)
        findings = Findings()
        for check in CHECKS:
            check(tree, stats, findings, context)
            logger.debug(
                "%s done: %d issues, %d warnings, %d suggestions so far",
                check.__name__,
                len(findings.issues),
                len(findings.warnings),
                len(findings.suggestions),
            )

        metrics = compute_metrics(findings, stats)
        score = compute_score(metrics, findings, self._config)
        grade = grade_for(score)
        summary = render_summary(score, grade, findings)

        elapsed_ms = (time.perf_counter() - start) * 1000.0
        logger.info(
            "Analysis finished: score=%d grade=%s issues=%d in %.2f ms",
            score,
            grade,
            len(findings.issues),
            elapsed_ms,
        )

        return AnalysisReport(
            score=score,
            grade=grade,
            issues=tuple(findings.issues),
            warnings=tuple(findings.warnings),
            suggestions=tuple(findings.suggestions),
            metrics=metrics,
            summary=summary,
            stats=stats,
            computation_time_ms=elapsed_ms,
        )
