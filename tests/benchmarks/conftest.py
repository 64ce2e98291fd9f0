"""Deterministic document generators for performance benchmarks.

All generators produce fixed, reproducible documents. No random values.
Three shapes: a record array, a deeply nested object and a wide flat object.
Pair fixtures return two documents that differ in a known number of places.
"""

from __future__ import annotations

from typing import Any

import pytest


def generate_records(count: int) -> list[dict[str, Any]]:
    """Generate ``count`` records with a repeating, mixed set of fields."""
    return [
        {
            "id": i,
            "name": f"user_{i}",
            "email": f"user_{i}@example.com" if i % 7 else "not-an-email",
            "active": i % 2 == 0,
            "score": i * 1.5,
            "tags": [f"tag_{i % 5}", f"tag_{i % 3}"],
            "address": {"city": f"city_{i % 10}", "zip": f"{10000 + i}"},
            "createdDate": "2024-01-15" if i % 11 else "15th of Jan",
        }
        for i in range(count)
    ]


def generate_nested(depth: int, fanout: int = 3) -> dict[str, Any]:
    """Generate an object ``depth`` levels deep with ``fanout`` leaves per level."""
    node: dict[str, Any] = {f"leaf_{j}": f"value_{depth}_{j}" for j in range(fanout)}
    for level in range(depth - 1, 0, -1):
        node = {
            "child": node,
            **{f"leaf_{j}": f"value_{level}_{j}" for j in range(fanout)},
        }
    return node


def generate_wide(num_keys: int) -> dict[str, Any]:
    """Generate a flat object with ``num_keys`` string-valued keys."""
    return {f"field_{i}": f"value_{i}" for i in range(num_keys)}


def _make_changed_pair(
    base: dict[str, Any], every: int
) -> tuple[dict[str, Any], dict[str, Any]]:
    """Copy ``base`` and modify every ``every``-th top-level value."""
    changed = {
        key: (f"{val}_changed" if idx % every == 0 else val)
        for idx, (key, val) in enumerate(base.items())
    }
    return base, changed


# --- Fixtures ---


@pytest.fixture
def records_100() -> list[dict[str, Any]]:
    """100 records, 8 fields each."""
    return generate_records(100)


@pytest.fixture
def records_2000() -> list[dict[str, Any]]:
    """2000 records; exceeds the default large-array threshold."""
    return generate_records(2000)


@pytest.fixture
def nested_50() -> dict[str, Any]:
    """Object nested 50 levels deep."""
    return generate_nested(50)


@pytest.fixture
def wide_1000() -> dict[str, Any]:
    """Flat object with 1000 keys."""
    return generate_wide(1000)


@pytest.fixture
def pair_wide_1000() -> tuple[dict[str, Any], dict[str, Any]]:
    """1000-key pair with every 10th value modified (100 differences)."""
    return _make_changed_pair(generate_wide(1000), 10)
