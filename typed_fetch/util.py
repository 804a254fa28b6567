"""Small URL helpers used across the library.

This module does not perform network I/O.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

from yarl import URL

from .const import DEFAULT_BASE_URL

# -----------------------------------------------------------------------------
# Base URL
# -----------------------------------------------------------------------------


def build_base_url(host: str | URL) -> URL:
    """Build the base URL requests are resolved against.

    Args:
        host: Hostname or URL, with or without a scheme and base path.

    Returns:
        URL without a trailing slash, query, or fragment.
    """
    text = str(host or "").strip() or DEFAULT_BASE_URL
    if not (text.startswith("http://") or text.startswith("https://")):
        text = f"http://{text}"

    url = URL(text)
    return url.with_path(url.raw_path.rstrip("/"), encoded=True)


# -----------------------------------------------------------------------------
# Path segments
# -----------------------------------------------------------------------------


def stringify_segment(value: Any) -> str:
    """Return the canonical string form of an identifier value.

    Integers render as decimal text and strings as themselves. Booleans are
    rejected because they would otherwise render as `True`/`False`.
    """
    if isinstance(value, bool):
        raise TypeError("Boolean values cannot be used as path segments")
    if isinstance(value, str):
        return value
    if isinstance(value, int):
        return str(int(value))
    return str(value)


def quote_segment(value: Any) -> str:
    """Percent-encode a single path segment, including `/`."""
    return quote(stringify_segment(value), safe="")


def join_segments(base: URL, *segments: Any) -> URL:
    """Append percent-encoded segments to `base`."""
    path = base.raw_path.rstrip("/")
    for segment in segments:
        path = f"{path}/{quote_segment(segment)}"
    return base.with_path(path, encoded=True)
