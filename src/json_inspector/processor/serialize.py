"""Serialization helpers: canonical text forms, string escaping and parsing.

``compress`` is the canonical serialized form used throughout the package
(stats ``size``, duplicate detection, atomic array comparison).  It emits the
same text as ``JSON.stringify`` without indentation: no whitespace between
tokens and non-ASCII characters left as-is.
"""

from __future__ import annotations

import json
import re
from datetime import UTC, date, datetime
from typing import Any

from json_inspector.errors import JsonParseError
from json_inspector.processor.structure import to_json_model
from json_inspector.tree.guard import CycleGuard
from json_inspector.tree.nodes import child_path, index_path

__all__ = [
    "compress",
    "escape",
    "format_size",
    "generate_filename",
    "parse_json",
    "pretty_print",
    "sanitize_for_json",
    "unescape",
]

_COMPACT_SEPARATORS = (",", ":")
_SIZE_UNITS = ("Bytes", "KB", "MB", "GB")
_FILENAME_UNSAFE = re.compile(r"[^a-zA-Z0-9\-_]")


def compress(value: Any) -> str:
    """Serialize ``value`` without any insignificant whitespace."""
    return json.dumps(
        to_json_model(value),
        ensure_ascii=False,
        separators=_COMPACT_SEPARATORS,
        allow_nan=False,
    )


def pretty_print(value: Any, indent: int = 2) -> str:
    """Serialize ``value`` with ``indent`` spaces per nesting level."""
    return json.dumps(
        to_json_model(value),
        ensure_ascii=False,
        indent=indent,
        allow_nan=False,
    )


def escape(text: str) -> str:
    """Escape backslashes, double quotes, newlines, carriage returns and tabs."""
    return (
        text.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
    )


def unescape(text: str) -> str:
    """Reverse ``escape``; the escaped backslash is restored last."""
    return (
        text.replace("\\n", "\n")
        .replace("\\r", "\r")
        .replace("\\t", "\t")
        .replace('\\"', '"')
        .replace("\\\\", "\\")
    )


def _reject_constant(name: str) -> Any:
    raise JsonParseError(f"Invalid JSON format: unexpected token {name}")


def parse_json(text: str | bytes) -> Any:
    """Decode JSON text.

    ``NaN``/``Infinity`` literals are rejected, as in strict JSON.

    Raises:
        JsonParseError: With ``position``, ``line`` and ``column`` set when
            the decoder reports them.
    """
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        raise JsonParseError(
            f"Invalid JSON format: {exc.msg}",
            position=exc.pos,
            line=exc.lineno,
            column=exc.colno,
        ) from exc
    except UnicodeDecodeError as exc:
        raise JsonParseError(f"Invalid JSON format: {exc.reason}") from exc


def sanitize_for_json(value: Any) -> Any:
    """Return a copy with strings made safe for embedding in scripts.

    NUL characters are removed and the U+2028/U+2029 separators are replaced
    by their escaped text form.  Other values are copied unchanged.
    """
    guard = CycleGuard()

    def _clean(node: Any, path: str) -> Any:
        if isinstance(node, str):
            return (
                node.replace("\u0000", "")
                .replace("\u2028", "\\u2028")
                .replace("\u2029", "\\u2029")
            )
        if isinstance(node, dict):
            with guard.visit(node, path):
                return {k: _clean(v, child_path(path, k)) for k, v in node.items()}
        if isinstance(node, (list, tuple)):
            with guard.visit(node, path):
                return [_clean(v, index_path(path, i)) for i, v in enumerate(node)]
        return node

    return _clean(value, "")


def format_size(content: str | bytes) -> str:
    """Human-readable UTF-8 size of ``content`` ("0 Bytes", "1.5 KB", ...)."""
    size = len(content.encode("utf-8")) if isinstance(content, str) else len(content)
    if size == 0:
        return "0 Bytes"
    exponent = 0
    while size >= 1024 ** (exponent + 1) and exponent < len(_SIZE_UNITS) - 1:
        exponent += 1
    scaled = round(size / 1024**exponent, 2)
    return f"{scaled:g} {_SIZE_UNITS[exponent]}"


def generate_filename(
    report_name: str = "scraped-data",
    timestamp: bool = True,
    today: date | None = None,
) -> str:
    """Build a download-safe ``.json`` filename.

    Characters outside ``[a-zA-Z0-9-_]`` become ``-``; with ``timestamp`` the
    (UTC) date is appended as ``-YYYY-MM-DD``.
    """
    sanitized = _FILENAME_UNSAFE.sub("-", report_name)
    if not timestamp:
        return f"{sanitized}.json"
    stamp = today if today is not None else datetime.now(UTC).date()
    return f"{sanitized}-{stamp.isoformat()}.json"
