"""Transports: the network boundary.

A transport sends one prepared `Request` and returns the raw response body.
Awaiting `fetch` completes exactly once: it returns bytes (possibly empty) or
raises `TransportError`.

`AiohttpTransport` is the terminal transport used by default; everything else
in the library only depends on the `Transport` protocol, so tests and callers
can substitute any object with a compatible `fetch` coroutine.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Protocol, runtime_checkable

import aiohttp
import async_timeout

from .const import DEFAULT_TIMEOUT_SECONDS, LOGGER_NAME
from .exceptions import TransportError
from .request import Request

_LOGGER = logging.getLogger(LOGGER_NAME)


@runtime_checkable
class Transport(Protocol):
    """Send a prepared request and return the response body."""

    async def fetch(self, request: Request) -> bytes:
        """Send `request`.

        Returns:
            Response body; an empty body is returned as `b""`.

        Raises:
            TransportError: When the request could not be completed.
        """
        ...


class AiohttpTransport:
    """Terminal transport backed by an `aiohttp.ClientSession`.

    The session is either injected (and left open on close) or created lazily on
    first use and owned by the transport. Configuration is fixed at
    construction, so one instance can serve concurrent fetches.
    """

    def __init__(
        self,
        *,
        session: aiohttp.ClientSession | None = None,
        timeout_seconds: float | None = None,
    ) -> None:
        self.timeout_seconds = float(timeout_seconds or DEFAULT_TIMEOUT_SECONDS)

        self._session = session
        self._owns_session = session is None
        self._session_loop: asyncio.AbstractEventLoop | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        loop = asyncio.get_running_loop()
        if (
            self._session is not None
            and self._owns_session
            and self._session_loop is not loop
        ):
            # An owned session cannot outlive the loop it was created on.
            _LOGGER.debug("Event loop changed; replacing owned aiohttp session")
            self._session.detach()
            self._session = None
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession()
            self._owns_session = True
            self._session_loop = loop
        return self._session

    async def async_close(self) -> None:
        """Close any internally-owned aiohttp session."""
        if self._owns_session and self._session is not None:
            await self._session.close()
            self._session = None
            self._session_loop = None

    async def fetch(self, request: Request) -> bytes:
        url = str(request.url)
        _LOGGER.debug("%s %s", request.method, url)

        try:
            async with async_timeout.timeout(self.timeout_seconds):
                async with self.session.get(
                    request.url, headers=request.headers
                ) as resp:
                    if resp.status >= 400:
                        raise TransportError(
                            f"HTTP error fetching {url} (status={resp.status})",
                            status=resp.status,
                            url=url,
                        )
                    body = await resp.read()
        except TransportError:
            raise
        except asyncio.TimeoutError as err:
            _LOGGER.debug("Timed out fetching %s", url)
            raise TransportError(
                f"Timed out after {self.timeout_seconds:g}s fetching {url}", url=url
            ) from err
        except aiohttp.ClientError as err:
            _LOGGER.debug("Error fetching %s: %s", url, err)
            raise TransportError(f"Error fetching {url}: {err}", url=url) from err

        return body or b""


# Process-wide default transport. Its session is created on first use.
SHARED_TRANSPORT = AiohttpTransport()
