"""AnalyzerConfig and MetricWeights: thresholds for the quality analyzer.

Both are frozen (immutable) dataclasses validated on construction, so an
analyzer can never run with weights that do not sum to 1.0 or with depth
thresholds in the wrong order.
"""

from __future__ import annotations

import re
from dataclasses import astuple, dataclass, field

import numpy as np

__all__ = [
    "DEFAULT_METADATA_KEYS",
    "DEFAULT_SENSITIVE_PATTERNS",
    "AnalyzerConfig",
    "MetricWeights",
]

# (regex, human-readable category).  Matched case-insensitively against keys.
DEFAULT_SENSITIVE_PATTERNS: tuple[tuple[str, str], ...] = (
    (r"password", "password"),
    (r"secret", "secret"),
    (r"token", "token"),
    (r"api[_-]?key", "API key"),
    (r"private[_-]?key", "private key"),
    (r"credit[_-]?card", "credit card"),
    (r"ssn", "social security number"),
)

DEFAULT_METADATA_KEYS: tuple[str, ...] = (
    "version",
    "timestamp",
    "author",
    "description",
    "schema",
)


@dataclass(frozen=True, slots=True)
class MetricWeights:
    """Contribution of each metric to the overall score.

    Attributes are listed in metric order (complexity, maintainability,
    performance, security, quality).  Each must be in [0, 1] and together
    they must sum to 1.0.
    """

    complexity: float = 0.15
    maintainability: float = 0.20
    performance: float = 0.20
    security: float = 0.30
    quality: float = 0.15

    def __post_init__(self) -> None:
        weights = astuple(self)
        for name, weight in zip(
            ("complexity", "maintainability", "performance", "security", "quality"),
            weights,
            strict=True,
        ):
            if not 0.0 <= weight <= 1.0:
                msg = f"{name} weight must be in [0, 1], got {weight}"
                raise ValueError(msg)
        if abs(sum(weights) - 1.0) >= 1e-9:
            msg = f"metric weights must sum to 1.0, got {sum(weights)}"
            raise ValueError(msg)

    def as_array(self) -> np.ndarray:
        return np.array(astuple(self), dtype=float)


@dataclass(frozen=True, slots=True)
class AnalyzerConfig:
    """Immutable configuration for ``JsonAnalyzer``.

    Attributes:
        max_depth:        Nesting depth above which a high Issue is raised.
        warn_depth:       Nesting depth above which a Warning is raised.
        max_size:         Serialized length above which a medium Issue is raised.
        large_array:      Array length above which a medium Suggestion is made.
        max_array:        Array length above which a high Issue is raised.
        max_objects:      Object count above which a datastore is suggested.
        critical_penalty: Score points removed per critical Issue (>= 0).
        weights:          Metric weights for the overall score.
        sensitive_patterns: ``(regex, category)`` pairs flagging sensitive keys.
        metadata_keys:    Root keys that count as document metadata.
        key_cache_size:   LRU size for memoized key-style classification.
    """

    max_depth: int = 10
    warn_depth: int = 7
    max_size: int = 1_000_000
    large_array: int = 1000
    max_array: int = 10_000
    max_objects: int = 1000
    critical_penalty: float = 10.0
    weights: MetricWeights = field(default_factory=MetricWeights)
    sensitive_patterns: tuple[tuple[str, str], ...] = DEFAULT_SENSITIVE_PATTERNS
    metadata_keys: tuple[str, ...] = DEFAULT_METADATA_KEYS
    key_cache_size: int = 1024

    def __post_init__(self) -> None:
        for name in (
            "max_depth",
            "warn_depth",
            "max_size",
            "large_array",
            "max_array",
            "max_objects",
        ):
            value = getattr(self, name)
            if value < 0:
                msg = f"{name} must be >= 0, got {value}"
                raise ValueError(msg)
        if self.warn_depth > self.max_depth:
            msg = (
                f"warn_depth must not exceed max_depth, "
                f"got {self.warn_depth} > {self.max_depth}"
            )
            raise ValueError(msg)
        if self.large_array > self.max_array:
            msg = (
                f"large_array must not exceed max_array, "
                f"got {self.large_array} > {self.max_array}"
            )
            raise ValueError(msg)
        if self.critical_penalty < 0.0:
            msg = f"critical_penalty must be >= 0.0, got {self.critical_penalty}"
            raise ValueError(msg)
        if self.key_cache_size < 1:
            msg = f"key_cache_size must be >= 1, got {self.key_cache_size}"
            raise ValueError(msg)
        for pattern, _category in self.sensitive_patterns:
            try:
                re.compile(pattern)
            except re.error as exc:
                msg = f"invalid sensitive pattern {pattern!r}: {exc}"
                raise ValueError(msg) from exc
