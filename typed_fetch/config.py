"""Client configuration.

`ClientConfig` gathers the handful of settings a client needs. It can be built
from a loosely-typed mapping (for example, an application's settings section);
missing or malformed values fall back to defaults rather than failing.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, cast

from .const import (
    CONF_BASE_URL,
    CONF_HEADERS,
    CONF_TIMEOUT,
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT_SECONDS,
)
from .decorators import HeaderInjectingTransport, validate_headers
from .transport import AiohttpTransport, Transport


def _to_timeout(value: Any) -> float:
    if isinstance(value, bool):
        return float(DEFAULT_TIMEOUT_SECONDS)
    if isinstance(value, (int, float)) and value > 0:
        return float(value)
    if isinstance(value, str):
        try:
            parsed = float(value.strip())
        except ValueError:
            return float(DEFAULT_TIMEOUT_SECONDS)
        if parsed > 0:
            return parsed
    return float(DEFAULT_TIMEOUT_SECONDS)


@dataclass(frozen=True)
class ClientConfig:
    """Settings for a `ResourceClient`.

    Attributes:
        base_url: Host or URL resources are fetched from.
        timeout_seconds: Per-request timeout for the terminal transport.
        headers: Static headers attached to every request.
    """

    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = float(DEFAULT_TIMEOUT_SECONDS)
    headers: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> "ClientConfig":
        """Create a config from a loosely-typed mapping.

        Args:
            data: Mapping using the `CONF_*` keys.

        Returns:
            A populated `ClientConfig`.

        Raises:
            HeaderValueError: When a configured header is malformed.
        """
        data_any: Any = data or {}
        values = cast(Mapping[str, Any], data_any) if isinstance(data_any, Mapping) else {}

        base_url = str(values.get(CONF_BASE_URL) or "").strip() or DEFAULT_BASE_URL

        headers_any: Any = values.get(CONF_HEADERS)
        headers: dict[str, str] = {}
        if isinstance(headers_any, Mapping):
            headers = validate_headers(cast(Mapping[str, str], headers_any))

        return cls(
            base_url=base_url,
            timeout_seconds=_to_timeout(values.get(CONF_TIMEOUT)),
            headers=headers,
        )

    def build_transport(self, inner: Transport | None = None) -> Transport:
        """Wrap `inner` with the configured headers.

        Without `inner`, an `AiohttpTransport` using the configured timeout is
        built. With no configured headers, the transport is returned as is.
        """
        terminal = (
            inner
            if inner is not None
            else AiohttpTransport(timeout_seconds=self.timeout_seconds)
        )
        if not self.headers:
            return terminal
        return HeaderInjectingTransport(terminal, self.headers)
