"""Safe read-only traversal of untyped values documents.

A values document is a tree of string-keyed mappings whose leaves are
scalars. Any node may be absent. The helpers here never raise and never
mutate the tree; a step that cannot be taken yields ``MISSING``.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

__all__ = ["Document", "MISSING", "try_get_mapping", "walk"]

Document = Mapping[str, Any] | None


class _Missing:
    """Marker for a node that is not present in the document."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


def try_get_mapping(node: Any, key: str) -> Any:
    """Return ``node[key]`` if node is a mapping holding key, else MISSING."""
    if not isinstance(node, Mapping):
        return MISSING
    if key not in node:
        return MISSING
    return node[key]


def walk(document: Any, path: Iterable[str]) -> Any:
    """Follow ``path`` from ``document``, stopping at the first failed step."""
    current = document
    for key in path:
        current = try_get_mapping(current, key)
        if current is MISSING:
            return MISSING
    return current
