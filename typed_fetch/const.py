"""Constants for the typed_fetch client library.

This module centralizes configuration keys and defaults.
"""

from __future__ import annotations

from typing import Final

DOMAIN: Final = "typed_fetch"

# Use a stable logger name so applications can configure logging via
# `logging.getLogger("typed_fetch").setLevel(logging.DEBUG)`.
LOGGER_NAME: Final = DOMAIN

CONF_BASE_URL: Final = "base_url"
CONF_TIMEOUT: Final = "timeout_seconds"
CONF_HEADERS: Final = "headers"

DEFAULT_BASE_URL: Final = "http://localhost"
DEFAULT_TIMEOUT_SECONDS: Final[int] = 10
DEFAULT_ACCEPT: Final = "application/json"

# Requests are read-only fetches.
HTTP_METHOD_GET: Final = "GET"
