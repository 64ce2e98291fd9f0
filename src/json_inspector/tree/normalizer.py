"""KeyNormalizer and KeyStyleClassifier: naming-convention handling for JSON keys.

KeyNormalizer splits a key into lowercase words across the common naming
conventions:
- camelCase (e.g. "camelCase" -> "camel case")
- PascalCase (e.g. "PascalCase" -> "pascal case")
- snake_case (e.g. "snake_case" -> "snake case")
- kebab-case (e.g. "kebab-case" -> "kebab case")

KeyStyleClassifier tags a key with its ``KeyStyle``.  A key is MIXED when it
combines uppercase letters with ``_``/``-`` separators ("user_Name",
"API-Key"), i.e. it is neither lowercase, camelCase nor snake_case.  Those are
the keys the structure check asks to rename.
"""

from __future__ import annotations

import re
import threading
from enum import StrEnum, auto

from cachetools import LRUCache

__all__ = ["KeyNormalizer", "KeyStyle", "KeyStyleClassifier"]

# Matches snake_case and kebab-case separators (underscores and hyphens)
_SEP = re.compile(r"[_\-]+")

# camelCase boundary: lowercase letter followed by uppercase letter
_UPPER_LOWER = re.compile(r"([a-z])([A-Z])")

# Acronym run before an uppercase+lowercase pair ("URLParser" -> "URL Parser")
_UPPER_RUN = re.compile(r"([A-Z]+)([A-Z][a-z])")

# Letter/digit boundaries in both directions.
# NOTE: applied twice because each match consumes both characters, so the
# opposite boundary of an isolated digit ("2C" in "v2Config") needs a
# second pass.
_DIGIT_BOUNDARY = re.compile(r"([a-zA-Z])(\d)|(\d)([a-zA-Z])")

# A separator followed by any character: such a key differs from its camelCase form
_SEP_FOLLOWED = re.compile(r"[-_].")

# ASCII uppercase: such a key differs from its snake_case form
_ASCII_UPPER = re.compile(r"[A-Z]")


class KeyNormalizer:
    """Normalizes JSON object keys to lowercase space-separated words.

    Example usage:
        normalizer = KeyNormalizer()
        normalizer.normalize("camelCase")    # "camel case"
        normalizer.normalize("APIKey")       # "api key"
        normalizer.to_snake("userName")      # "user_name"
    """

    def normalize(self, key: str) -> str:
        """Normalize a JSON key to lowercase space-separated words.

        Processing pipeline (applied in order):
        1. Replace underscore and hyphen separators with spaces.
        2. Insert space at camelCase boundaries.
        3. Insert space at acronym runs.
        4. Insert space at digit boundaries (two passes).
        5. Lowercase everything and collapse whitespace.
        """
        s = _SEP.sub(" ", key)
        s = _UPPER_LOWER.sub(r"\1 \2", s)
        s = _UPPER_RUN.sub(r"\1 \2", s)
        s = _DIGIT_BOUNDARY.sub(r"\1\3 \2\4", s)
        s = _DIGIT_BOUNDARY.sub(r"\1\3 \2\4", s)
        return " ".join(s.lower().split())

    def to_snake(self, key: str) -> str:
        """Render ``key`` as snake_case ("user-Name" -> "user_name")."""
        return "_".join(self.normalize(key).split())


class KeyStyle(StrEnum):
    """Naming convention detected for a single key."""

    LOWER = auto()
    SNAKE = auto()
    KEBAB = auto()
    CAMEL = auto()
    PASCAL = auto()
    MIXED = auto()


class KeyStyleClassifier:
    """Classifies keys by naming convention, memoizing results in an LRU cache.

    Datasets shaped as arrays of records repeat the same handful of keys
    thousands of times, so every instance keeps its own ``LRUCache``.  Two
    instances never share cache state, and cache access is serialized by a
    lock so one instance may be used from several threads.

    Args:
        max_cache_size: Maximum number of keys remembered.  Defaults to 1024.
    """

    def __init__(self, max_cache_size: int = 1024) -> None:
        self._cache: LRUCache[str, KeyStyle] = LRUCache(maxsize=max_cache_size)
        self._lock = threading.Lock()

    @property
    def curr_size(self) -> int:
        """The current number of keys stored in the cache."""
        return int(self._cache.currsize)

    def classify(self, key: str) -> KeyStyle:
        with self._lock:
            style = self._cache.get(key)
        if style is None:
            style = self._classify(key)
            with self._lock:
                self._cache[key] = style
        return style

    def is_consistent(self, key: str) -> bool:
        """True unless the key mixes uppercase letters with separators."""
        return self.classify(key) is not KeyStyle.MIXED

    @staticmethod
    def _classify(key: str) -> KeyStyle:
        if key == key.lower():
            if "_" in key:
                return KeyStyle.SNAKE
            if "-" in key:
                return KeyStyle.KEBAB
            return KeyStyle.LOWER
        if not _SEP_FOLLOWED.search(key):
            return KeyStyle.PASCAL if key[:1].isupper() else KeyStyle.CAMEL
        if not _ASCII_UPPER.search(key):
            # Only non-ASCII capitals: unchanged by snake_case conversion
            return KeyStyle.SNAKE
        return KeyStyle.MIXED
