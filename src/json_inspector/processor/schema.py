"""Minimal schema checker: ``type``, ``required`` and ``properties`` only.

This is intentionally not a JSON-Schema implementation.  A schema node is a
dict that may contain:

- ``type``:       one of ``string``, ``number``, ``boolean``, ``object``,
                  ``array``, ``null``.
- ``required``:   list of keys that must be present on an object.
- ``properties``: mapping of key -> nested schema node, checked only for keys
                  that are present.

``validate`` never raises: any exception during traversal (a malformed
schema, for instance) is recorded as a ``"Validation error: ..."`` string.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from json_inspector.errors import JsonValidationError
from json_inspector.tree.nodes import kind_of

__all__ = ["ValidationResult", "validate"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Outcome of a validation pass.

    Attributes:
        valid:    True when ``errors`` is empty.
        errors:   Human-readable violations, in discovery order.
        warnings: Non-fatal remarks.
    """

    valid: bool
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def raise_for_errors(self, message: str = "Validation failed") -> None:
        """Raise ``JsonValidationError`` carrying ``errors`` unless valid."""
        if not self.valid:
            detail = "; ".join(self.errors)
            raise JsonValidationError(f"{message}: {detail}", self.errors)


def validate(value: Any, schema: dict[str, Any]) -> ValidationResult:
    """Check ``value`` against a minimal schema.

    Example::

        schema = {"required": ["id"], "properties": {"name": {"type": "string"}}}
        validate({"name": 1}, schema)
        # errors: ["Missing required field: root.id",
        #          "Type mismatch at root.name: expected string, got number"]
    """
    errors: list[str] = []
    warnings: list[str] = []

    def _check(data: Any, node: dict[str, Any], path: str) -> None:
        if not isinstance(node, dict):
            msg = f"schema at {path} must be an object, got {type(node).__name__}"
            raise TypeError(msg)

        expected = node.get("type")
        if expected:
            actual = str(kind_of(data))
            if actual != expected:
                errors.append(
                    f"Type mismatch at {path}: expected {expected}, got {actual}"
                )

        required = node.get("required")
        if isinstance(required, list):
            for key in required:
                if not isinstance(data, dict) or key not in data:
                    errors.append(f"Missing required field: {path}.{key}")

        properties = node.get("properties")
        if properties and isinstance(data, dict):
            for key, sub_schema in properties.items():
                if key in data:
                    _check(data[key], sub_schema, f"{path}.{key}")

    try:
        _check(value, schema, "root")
    except Exception as exc:  # noqa: BLE001 - every failure becomes an error string
        logger.debug("Schema validation aborted", exc_info=True)
        errors.append(f"Validation error: {exc}")

    return ValidationResult(valid=not errors, errors=errors, warnings=warnings)
