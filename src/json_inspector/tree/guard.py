"""CycleGuard: fail-fast protection against self-referencing containers.

JSON values are trees, but Python dicts and lists can refer to themselves.
Every recursive traversal in the package owns one ``CycleGuard`` per call and
wraps each container visit in ``guard.visit(container, path)``.  The guard
tracks the containers on the *current recursion stack* only, so a container
that is shared by two siblings (a DAG, not a cycle) is still accepted.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from json_inspector.errors import CycleDetectedError

__all__ = ["CycleGuard"]


class CycleGuard:
    """Tracks the identity of containers currently being traversed.

    Example::

        guard = CycleGuard()

        def walk(node, path=""):
            with guard.visit(node, path):
                ...
    """

    __slots__ = ("_active",)

    def __init__(self) -> None:
        self._active: set[int] = set()

    @contextmanager
    def visit(self, node: Any, path: str) -> Iterator[None]:
        """Mark ``node`` as active for the duration of the ``with`` block.

        Scalars pass straight through.

        Raises:
            CycleDetectedError: If ``node`` is already on the recursion stack.
        """
        if not isinstance(node, (dict, list, tuple)):
            yield
            return

        marker = id(node)
        if marker in self._active:
            raise CycleDetectedError(path)

        self._active.add(marker)
        try:
            yield
        finally:
            self._active.discard(marker)
