"""Library exception types.

Every failure a fetch can surface derives from `TypedFetchError`, so callers
can catch the whole family or a single kind:

    - `TransportError`: the request could not be sent or the server refused it.
    - `DecodeError`: bytes arrived but did not decode into the target resource.
"""

from __future__ import annotations

from typing import Any


class TypedFetchError(Exception):
    """Base exception for typed_fetch failures."""


class TransportError(TypedFetchError):
    """Network or protocol error while sending a request.

    Attributes:
        status: HTTP status when the server answered with an error status.
        url: Target URL, when known.
    """

    def __init__(
        self, message: str, *, status: int | None = None, url: str | None = None
    ) -> None:
        super().__init__(message)
        self.status = status
        self.url = url


class DecodeError(TypedFetchError):
    """Payload could not be decoded into the requested resource.

    Attributes:
        resource_type: Resource class the payload was decoded into, if any.
    """

    def __init__(self, message: str, *, resource_type: type[Any] | None = None) -> None:
        super().__init__(message)
        self.resource_type = resource_type


class HeaderValueError(TypedFetchError, ValueError):
    """A header name or value cannot be sent on the wire."""


class UnknownResourceError(TypedFetchError, KeyError):
    """No resource is registered under the requested category."""

    def __str__(self) -> str:
        # KeyError repr-quotes its message.
        return str(self.args[0]) if self.args else ""
