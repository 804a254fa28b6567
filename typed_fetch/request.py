"""Wire-ready request values and the request builder.

A `Request` is self-contained and transport-agnostic: it carries the target URL
and headers, nothing else. Header updates always return a new request.

This module does not perform network I/O.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from multidict import CIMultiDict, CIMultiDictProxy
from yarl import URL

from .const import HTTP_METHOD_GET
from .identifier import Identifier
from .util import build_base_url, join_segments


def _frozen_headers(
    headers: Mapping[str, str] | None = None,
) -> CIMultiDictProxy[str]:
    return CIMultiDictProxy(CIMultiDict(headers or {}))


@dataclass(frozen=True)
class Request:
    """A GET request for one resource.

    Attributes:
        url: Fully-qualified, percent-encoded target URL.
        headers: Case-insensitive, read-only header mapping.
        method: HTTP method; always GET.
    """

    url: URL
    headers: CIMultiDictProxy[str] = field(default_factory=_frozen_headers)
    method: str = HTTP_METHOD_GET

    def with_headers(self, headers: Mapping[str, str]) -> "Request":
        """Return a copy with `headers` applied.

        Each name is set, replacing any existing value for the same name
        (case-insensitive), so the last write wins.
        """
        merged = CIMultiDict(self.headers)
        for name, value in headers.items():
            merged[name] = value
        return Request(url=self.url, headers=CIMultiDictProxy(merged), method=self.method)

    def __hash__(self) -> int:
        return hash((self.method, self.url, tuple(self.headers.items())))


def build_request(
    category: str,
    identifier: Identifier[Any],
    base_url: str | URL,
    *,
    headers: Mapping[str, str] | None = None,
) -> Request:
    """Build the request for `base_url/category/identifier`.

    Args:
        category: Resource category name (first path segment).
        identifier: Resource identifier; its value becomes the second segment.
        base_url: Host or URL the path is appended to.
        headers: Optional initial headers.

    Returns:
        A `Request` whose path segments are percent-encoded.
    """
    url = join_segments(build_base_url(base_url), category, identifier.value)
    return Request(url=url, headers=_frozen_headers(headers))
