"""Transport decorators.

A decorator is itself a `Transport`: it wraps exactly one inner transport,
transforms the outgoing request, and forwards it. Decorators never touch the
response or the error path.

Stacking order: when decorators are nested, the outermost one transforms the
request first and the innermost one last, right before the terminal transport.
For headers this means the innermost decorator wins a name collision:

    transport = HeaderInjectingTransport(
        HeaderInjectingTransport(terminal, {"X-Env": "inner"}),
        {"X-Env": "outer"},
    )
    # terminal sees X-Env: inner
"""

from __future__ import annotations

from typing import Mapping

from multidict import CIMultiDict, CIMultiDictProxy

from .exceptions import HeaderValueError
from .request import Request
from .transport import Transport


class RequestTransformingTransport:
    """Base decorator: transform the request, then delegate to `inner`."""

    def __init__(self, inner: Transport) -> None:
        self.inner = inner

    def transform(self, request: Request) -> Request:
        """Return the request to forward. Must not mutate `request`."""
        return request

    async def fetch(self, request: Request) -> bytes:
        return await self.inner.fetch(self.transform(request))


class HeaderInjectingTransport(RequestTransformingTransport):
    """Set a fixed group of headers on every outgoing request.

    Each header replaces a same-named header already on the request (names are
    case-insensitive).

    Raises:
        HeaderValueError: At construction, for a non-string or empty name, a
            non-string value, or a name/value containing CR or LF.
    """

    def __init__(self, inner: Transport, headers: Mapping[str, str]) -> None:
        super().__init__(inner)
        self.headers: CIMultiDictProxy[str] = CIMultiDictProxy(
            CIMultiDict(validate_headers(headers))
        )

    def transform(self, request: Request) -> Request:
        return request.with_headers(self.headers)


def validate_headers(headers: Mapping[str, str]) -> dict[str, str]:
    """Check header names/values and return them as a plain dict."""
    out: dict[str, str] = {}
    for name, value in headers.items():
        if not isinstance(name, str) or not name.strip():
            raise HeaderValueError(f"Invalid header name: {name!r}")
        if not isinstance(value, str):
            raise HeaderValueError(
                f"Header {name!r} value must be a string, got {type(value).__name__}"
            )
        if any(c in name or c in value for c in "\r\n"):
            raise HeaderValueError(f"Header {name!r} contains a line break")
        out[name] = value
    return out
