"""Exception hierarchy for json-inspector.

Every error raised on purpose by the library derives from
``JsonProcessingError`` and carries a stable machine-readable ``code`` so
outer collaborators (request handlers, UI surfaces) can map failures without
parsing messages.  Programming errors such as passing a non-JSON value to a
traversal keep using the built-in ``TypeError``/``ValueError``.
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "CycleDetectedError",
    "JsonParseError",
    "JsonProcessingError",
    "JsonValidationError",
]


class JsonProcessingError(Exception):
    """Base class for all json-inspector errors.

    Attributes:
        code:    Stable error identifier, e.g. ``"PARSE_ERROR"``.
        details: Optional JSON-compatible payload describing the failure.
    """

    def __init__(self, message: str, code: str, details: Any = None) -> None:
        super().__init__(message)
        self.code = code
        self.details = details


class CycleDetectedError(JsonProcessingError):
    """A container was re-entered while it was still being traversed."""

    def __init__(self, path: str) -> None:
        where = path or "(root)"
        super().__init__(
            f"Cyclic reference detected at {where}",
            "CYCLE_DETECTED",
            {"path": path},
        )
        self.path = path


class JsonParseError(JsonProcessingError):
    """Text could not be decoded as JSON."""

    def __init__(
        self,
        message: str,
        position: int | None = None,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        super().__init__(
            message,
            "PARSE_ERROR",
            {"position": position, "line": line, "column": column},
        )
        self.position = position
        self.line = line
        self.column = column


class JsonValidationError(JsonProcessingError):
    """Raised by callers that want a failed ``ValidationResult`` as an exception."""

    def __init__(self, message: str, errors: list[str]) -> None:
        super().__init__(message, "VALIDATION_ERROR", {"errors": list(errors)})
        self.errors = list(errors)
