"""Lightweight value-format predicates used by the quality checks.

These are deliberately permissive.  They flag strings that are clearly not an
email address, URL or date; they are not full RFC validators.
"""

from __future__ import annotations

import re
from urllib.parse import urlsplit

from dateutil import parser as date_parser

__all__ = ["is_parseable_date", "is_valid_email", "is_valid_url"]

# local@domain.tld with no whitespace and a single "@" per part
_EMAIL = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

_SCHEME = re.compile(r"[a-zA-Z][a-zA-Z0-9+.\-]*")

# Schemes that always carry an authority (host) component
_HOST_SCHEMES = frozenset({"http", "https", "ftp", "ws", "wss"})


def is_valid_email(value: str) -> bool:
    return _EMAIL.fullmatch(value) is not None


def is_valid_url(value: str) -> bool:
    """True when ``value`` is an absolute URL.

    A scheme is always required.  Web schemes (http, https, ftp, ws, wss)
    additionally need a host and a numeric port, if any.  As in browsers, the
    slashes after a web scheme are optional: ``http:example.com`` names the
    host ``example.com``.
    """
    text = value.strip()
    scheme, sep, rest = text.partition(":")
    if not sep or _SCHEME.fullmatch(scheme) is None:
        return False
    if scheme.lower() not in _HOST_SCHEMES:
        return True

    authority = rest.lstrip("/\\")
    try:
        parts = urlsplit(f"{scheme}://{authority}")
        parts.port  # noqa: B018 - raises ValueError on a non-numeric port
    except ValueError:
        return False
    host = parts.hostname
    return bool(host) and not any(ch.isspace() for ch in host)


def is_parseable_date(value: str) -> bool:
    """True when ``value`` reads as a calendar date or timestamp.

    Accepts ISO 8601 (padded or not), RFC 2822 and the common written forms
    such as ``January 15 2024``, ``01/15/2024`` or ``2024/01/15 10:30``.

    Example::

        is_parseable_date("2024-1-5")      # True
        is_parseable_date("2024-13-45")    # False
        is_parseable_date("soon")          # False
    """
    text = value.strip()
    if not text:
        return False
    try:
        date_parser.parse(text)
    except (ValueError, OverflowError):
        return False
    return True
