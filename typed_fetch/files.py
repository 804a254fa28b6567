"""File-like values compared through a shared capability.

A collection can mix `TextFile` and `SpreadSheet` values because membership
only relies on the `File` capability (`path` plus `is_equal_to`), not on a
common concrete type.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Protocol, runtime_checkable


@runtime_checkable
class File(Protocol):
    path: str

    def is_equal_to(self, other: Any) -> bool: ...


class SameVariantEquality:
    """Mixin: equal only to values of the exact same class with equal fields."""

    def is_equal_to(self, other: Any) -> bool:
        if type(other) is not type(self):
            return False
        return bool(self == other)


@dataclass
class TextFile(SameVariantEquality):
    path: str
    content: str = ""


@dataclass
class SpreadSheet(SameVariantEquality):
    path: str
    cells: dict[str, str] = field(default_factory=dict)


def contains(collection: Iterable[File], target: File) -> bool:
    """Return True if any element of `collection` is equal to `target`."""
    return any(item.is_equal_to(target) for item in collection)
