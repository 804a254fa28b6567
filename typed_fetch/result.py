"""Result values delivered to completion callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Awaitable, Generic, TypeVar, Union

from .exceptions import TransportError, TypedFetchError

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """A fetch that produced a value."""

    value: T

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Failure:
    """A fetch that failed with exactly one error."""

    error: TypedFetchError

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self) -> Any:
        raise self.error


Result = Union[Success[T], Failure]


async def capture(awaitable: Awaitable[T]) -> "Result[T]":
    """Await `awaitable` and fold library errors into a `Failure`.

    Only `TypedFetchError` is captured; anything else is a bug and propagates.
    """
    try:
        return Success(await awaitable)
    except TypedFetchError as err:
        return Failure(err)


async def settle(awaitable: Awaitable[T]) -> "Result[T]":
    """Await `awaitable` and fold every `Exception` into a `Failure`.

    Used where a completion must run exactly once. Library errors are kept as
    they are; any other exception is wrapped in a `TransportError` chained to
    the original.
    """
    try:
        return await capture(awaitable)
    except Exception as err:
        failure = TransportError(f"Unexpected error during fetch: {err!r}")
        failure.__cause__ = err
        return Failure(failure)
