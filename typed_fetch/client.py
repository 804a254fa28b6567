"""Generic resource client.

One client fetches every `Resource` type: the category and identifier class
come from the resource class passed in, so there is no per-type code.

    client = ResourceClient("https://api.example.com")
    user = await client.async_fetch(User, User.ID(1))

Callback-style callers can use `fetch`, which schedules the work on the running
event loop and hands a `Result` to the completion exactly once.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, Mapping, TypeVar

from multidict import CIMultiDict, CIMultiDictProxy
from yarl import URL

from .config import ClientConfig
from .const import DEFAULT_ACCEPT, LOGGER_NAME
from .exceptions import DecodeError, TransportError
from .identifier import Identifier
from .request import Request, build_request
from .resources.base import Resource
from .resources.registry import get_resource
from .result import Result, capture, settle
from .transport import SHARED_TRANSPORT, Transport
from .util import build_base_url

_LOGGER = logging.getLogger(LOGGER_NAME)

R = TypeVar("R", bound=Resource[Any])

Completion = Callable[[Result[R]], None]


def check_identifier(resource_type: type[Resource[Any]], identifier: Any) -> None:
    """Ensure `identifier` is an instance of `resource_type.ID`.

    Raises:
        TypeError: On a mismatched identifier class.
    """
    if not isinstance(identifier, resource_type.ID):
        raise TypeError(
            f"{resource_type.__name__} expects a {resource_type.ID.__name__}, "
            f"got {type(identifier).__name__}"
        )


class ResourceClient:
    """Async client fetching typed resources by identifier."""

    def __init__(
        self,
        base_url: str | URL,
        *,
        transport: Transport = SHARED_TRANSPORT,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        self.base_url = build_base_url(base_url)
        self.transport = transport
        default_headers = CIMultiDict({"Accept": DEFAULT_ACCEPT})
        for name, value in (headers or {}).items():
            default_headers[name] = value
        self.headers: CIMultiDictProxy[str] = CIMultiDictProxy(default_headers)

        self._pending: set[asyncio.Task[None]] = set()

    @classmethod
    def from_config(
        cls, config: ClientConfig, *, transport: Transport | None = None
    ) -> "ResourceClient":
        """Create a client from a `ClientConfig`.

        When no transport is given, one is built from the config. A given
        transport is wrapped with the configured headers.
        """
        return cls(config.base_url, transport=config.build_transport(transport))

    def request_for(
        self, resource_type: type[Resource[Any]], identifier: Identifier[Any]
    ) -> Request:
        """Build the request for one resource without sending it."""
        check_identifier(resource_type, identifier)
        return build_request(
            resource_type.category, identifier, self.base_url, headers=self.headers
        )

    async def async_fetch(self, resource_type: type[R], identifier: Identifier[Any]) -> R:
        """Fetch and decode one resource.

        Args:
            resource_type: Resource class to decode into.
            identifier: Instance of `resource_type.ID`.

        Returns:
            The decoded resource.

        Raises:
            TypeError: If `identifier` is not a `resource_type.ID`.
            TransportError: On network failures (propagated unchanged).
            DecodeError: If the body does not decode into `resource_type`.
        """
        request = self.request_for(resource_type, identifier)

        try:
            body = await self.transport.fetch(request)
        except TransportError as err:
            _LOGGER.debug(
                "Fetching %s %s failed: %s", resource_type.category, identifier, err
            )
            raise

        try:
            return resource_type.decode(body)
        except DecodeError as err:
            _LOGGER.debug(
                "Decoding %s %s failed: %s", resource_type.category, identifier, err
            )
            raise

    async def async_fetch_result(
        self, resource_type: type[R], identifier: Identifier[Any]
    ) -> "Result[R]":
        """Like `async_fetch`, but return a `Success`/`Failure` instead of raising."""
        check_identifier(resource_type, identifier)
        return await capture(self.async_fetch(resource_type, identifier))

    async def async_fetch_by_category(
        self, category: str, raw_id: Any
    ) -> Resource[Any]:
        """Fetch a registered resource by category name and raw identifier value.

        Raises:
            UnknownResourceError: When the category is not registered.
            TypeError: When `raw_id` has the wrong primitive type.
        """
        spec = get_resource(category)
        return await self.async_fetch(spec.model, spec.model.ID(raw_id))

    def fetch(
        self,
        resource_type: type[R],
        identifier: Identifier[Any],
        completion: Completion[R],
    ) -> asyncio.Task[None]:
        """Schedule a fetch and deliver its `Result` to `completion`.

        Returns immediately. Must be called while an event loop is running.

        Returns:
            The scheduled task; it finishes after `completion` has run. The
            client keeps a reference until then, so callers may drop it.

        Raises:
            TypeError: If `identifier` is not a `resource_type.ID`.
            RuntimeError: If no event loop is running.
        """
        check_identifier(resource_type, identifier)

        async def _run() -> None:
            completion(await settle(self.async_fetch(resource_type, identifier)))

        task = asyncio.get_running_loop().create_task(_run())
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task
