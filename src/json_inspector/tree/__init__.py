"""Tree subpackage: primitives shared by every JSON traversal.

Re-exports the public API for the tree module:
- JsonKind: StrEnum of the six JSON value kinds
- kind_of: dispatcher mapping a Python value to its JsonKind
- CycleGuard: fail-fast detector for self-referencing containers
- KeyNormalizer / KeyStyleClassifier: naming-convention handling for keys
"""

from json_inspector.tree.guard import CycleGuard
from json_inspector.tree.nodes import (
    MISSING,
    JsonKind,
    JsonValue,
    child_path,
    index_path,
    is_container,
    js_typeof,
    kind_of,
)
from json_inspector.tree.normalizer import KeyNormalizer, KeyStyle, KeyStyleClassifier

__all__ = [
    "MISSING",
    "CycleGuard",
    "JsonKind",
    "JsonValue",
    "KeyNormalizer",
    "KeyStyle",
    "KeyStyleClassifier",
    "child_path",
    "index_path",
    "is_container",
    "js_typeof",
    "kind_of",
]
