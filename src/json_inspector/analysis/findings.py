"""Finding types produced by the analyzer's check passes.

Three tiers, from must-fix to advisory:
- Issue:           has a ``Severity`` (critical, high, medium, low)
- AnalysisWarning: something likely wrong, no severity
- Suggestion:      an improvement, with a ``Priority``

``Findings`` is the accumulator every check pass appends to.  Checks never
remove or reorder entries, so the report lists findings in check order.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum, auto
from typing import Any

__all__ = [
    "AnalysisWarning",
    "Findings",
    "Issue",
    "Priority",
    "Severity",
    "Suggestion",
]


class Severity(StrEnum):
    CRITICAL = auto()
    HIGH = auto()
    MEDIUM = auto()
    LOW = auto()


class Priority(StrEnum):
    HIGH = auto()
    MEDIUM = auto()
    LOW = auto()


def _without_none(payload: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in payload.items() if v is not None}


@dataclass(frozen=True, slots=True)
class Issue:
    """A must-fix problem.

    Attributes:
        severity:   How urgent the problem is.
        type:       Category tag ("structure", "security", "performance", ...).
        message:    Human-readable description.
        path:       Location in the document, when the problem has one.
        suggestion: How to fix it, when known.
    """

    severity: Severity
    type: str
    message: str
    path: str | None = None
    suggestion: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return _without_none(
            {
                "severity": str(self.severity),
                "type": self.type,
                "message": self.message,
                "path": self.path,
                "suggestion": self.suggestion,
            }
        )


@dataclass(frozen=True, slots=True)
class AnalysisWarning:
    """A probable problem without a severity tier."""

    type: str
    message: str
    path: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return _without_none(
            {"type": self.type, "message": self.message, "path": self.path}
        )


@dataclass(frozen=True, slots=True)
class Suggestion:
    """An advisory improvement."""

    category: str
    message: str
    priority: Priority

    def to_dict(self) -> dict[str, Any]:
        return {
            "category": self.category,
            "message": self.message,
            "priority": str(self.priority),
        }


@dataclass(slots=True)
class Findings:
    """Mutable accumulator shared by the check passes of one analysis."""

    issues: list[Issue] = field(default_factory=list)
    warnings: list[AnalysisWarning] = field(default_factory=list)
    suggestions: list[Suggestion] = field(default_factory=list)

    def issue(
        self,
        severity: Severity,
        type_: str,
        message: str,
        path: str | None = None,
        suggestion: str | None = None,
    ) -> None:
        self.issues.append(Issue(severity, type_, message, path, suggestion))

    def warn(self, type_: str, message: str, path: str | None = None) -> None:
        self.warnings.append(AnalysisWarning(type_, message, path))

    def suggest(self, category: str, message: str, priority: Priority) -> None:
        self.suggestions.append(Suggestion(category, message, priority))

    def count(self, severity: Severity) -> int:
        """Number of issues with the given severity."""
        return sum(1 for issue in self.issues if issue.severity is severity)
