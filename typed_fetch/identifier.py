"""Typed identifiers.

An identifier is a thin, immutable wrapper around one primitive value. Concrete
identifier classes pin the primitive type so a `UserID` can never be confused
with a `DocumentID`, even when both hold the same raw value.
"""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass
from typing import Any, ClassVar, Generic, TypeVar

from .exceptions import DecodeError
from .util import stringify_segment

V = TypeVar("V", bound=Hashable)


@dataclass(frozen=True)
class Identifier(Generic[V]):
    """Typed wrapper around a primitive resource key.

    Equality and hashing are derived from `value` only. Subclasses set
    `value_type` to restrict the accepted primitive type.

    Attributes:
        value: The wrapped primitive.
    """

    value: V

    value_type: ClassVar[type[Any] | tuple[type[Any], ...] | None] = None

    def __post_init__(self) -> None:
        if not _matches_type(self.value, self.value_type):
            raise TypeError(
                f"{type(self).__name__} expects {_type_label(self.value_type)}, "
                f"got {type(self.value).__name__}"
            )

    def __str__(self) -> str:
        return stringify_segment(self.value)

    def encode(self) -> V:
        """Return the primitive form used in JSON payloads."""
        return self.value

    @classmethod
    def decode(cls, raw: Any) -> "Identifier[Any]":
        """Rebuild an identifier from its primitive form.

        Raises:
            DecodeError: When `raw` is not of the pinned primitive type.
        """
        try:
            return cls(raw)
        except TypeError as err:
            raise DecodeError(str(err)) from err


def _matches_type(
    value: Any, value_type: type[Any] | tuple[type[Any], ...] | None
) -> bool:
    if value_type is None:
        return isinstance(value, Hashable) and not isinstance(value, bool)
    types = value_type if isinstance(value_type, tuple) else (value_type,)
    if isinstance(value, bool) and bool not in types:
        return False
    return isinstance(value, types)


def _type_label(value_type: type[Any] | tuple[type[Any], ...] | None) -> str:
    if value_type is None:
        return "a hashable non-bool value"
    if isinstance(value_type, tuple):
        return " or ".join(t.__name__ for t in value_type)
    return value_type.__name__
