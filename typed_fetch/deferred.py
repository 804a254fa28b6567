"""Deferred and refresh requests.

Both types erase the resource type at construction time by closing over it, so
a single list can hold pending User fetches next to pending Document fetches:

    pending = [
        DeferredRequest.fetching(User, User.ID(2), on_user, base_url=base),
        DeferredRequest.fetching(Document, Document.ID("2"), on_doc, base_url=base),
    ]
    await execute_all(pending)

Executing a collection issues requests in collection order without waiting for
earlier ones; completions may arrive in any order.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Iterable, Mapping, TypeVar

from yarl import URL

from .client import Completion, ResourceClient, check_identifier
from .exceptions import DecodeError
from .identifier import Identifier
from .request import Request, build_request
from .resources.base import Resource
from .result import Failure, Result, Success, settle
from .transport import SHARED_TRANSPORT, Transport

R = TypeVar("R", bound=Resource[Any])

RawCompletion = Callable[[Result[bytes]], None]


# -----------------------------------------------------------------------------
# Deferred requests
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class DeferredRequest:
    """A built request paired with the handler for its raw outcome.

    Attributes:
        request: Wire-ready request.
        completion: Receives the transport outcome exactly once.
    """

    request: Request
    completion: RawCompletion

    @classmethod
    def fetching(
        cls,
        resource_type: type[R],
        identifier: Identifier[Any],
        completion: Completion[R],
        *,
        base_url: str | URL,
        headers: Mapping[str, str] | None = None,
    ) -> "DeferredRequest":
        """Build a deferred fetch that decodes into `resource_type`.

        Raises:
            TypeError: If `identifier` is not a `resource_type.ID`.
        """
        check_identifier(resource_type, identifier)
        request = build_request(
            resource_type.category, identifier, base_url, headers=headers
        )

        def _complete(raw: Result[bytes]) -> None:
            if isinstance(raw, Failure):
                completion(raw)
                return
            try:
                completion(Success(resource_type.decode(raw.value)))
            except DecodeError as err:
                completion(Failure(err))

        return cls(request=request, completion=_complete)

    async def execute(self, transport: Transport = SHARED_TRANSPORT) -> None:
        """Send the request through `transport` and run the completion."""
        self.completion(await settle(transport.fetch(self.request)))


async def execute_all(
    requests: Iterable[DeferredRequest], transport: Transport = SHARED_TRANSPORT
) -> None:
    """Execute every deferred request concurrently.

    Returns once all completions have run.
    """
    await asyncio.gather(*(r.execute(transport) for r in requests))


# -----------------------------------------------------------------------------
# Refresh requests
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class RefreshRequest:
    """An executable unit that re-fetches one resource."""

    perform: Callable[[], Awaitable[None]]

    @classmethod
    def for_resource(
        cls,
        client: ResourceClient,
        resource_type: type[R],
        identifier: Identifier[Any],
        completion: Completion[R],
    ) -> "RefreshRequest":
        check_identifier(resource_type, identifier)

        async def _perform() -> None:
            completion(await settle(client.async_fetch(resource_type, identifier)))

        return cls(perform=_perform)


async def refresh_all(refreshes: Iterable[RefreshRequest]) -> None:
    """Perform every refresh concurrently."""
    await asyncio.gather(*(r.perform() for r in refreshes))
