"""Tests for request-transforming transport decorators."""

from __future__ import annotations

import pytest
from yarl import URL

from typed_fetch.decorators import (
    HeaderInjectingTransport,
    RequestTransformingTransport,
)
from typed_fetch.exceptions import HeaderValueError, TransportError
from typed_fetch.request import Request
from typed_fetch.transport import Transport


class _RecordingTransport:
    """Terminal transport that records what it was asked to send."""

    def __init__(self, body: bytes = b"{}", error: Exception | None = None):
        self.body = body
        self.error = error
        self.requests: list[Request] = []

    async def fetch(self, request: Request) -> bytes:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.body


def _request() -> Request:
    return Request(url=URL("http://h/user/1"))


def test_decorator_satisfies_transport_protocol() -> None:
    assert isinstance(HeaderInjectingTransport(_RecordingTransport(), {}), Transport)


async def test_header_injection_reaches_terminal() -> None:
    terminal = _RecordingTransport(body=b"payload")
    transport = HeaderInjectingTransport(terminal, {"Authorization": "X"})

    body = await transport.fetch(_request())

    assert body == b"payload"
    assert terminal.requests[0].headers["Authorization"] == "X"


async def test_header_injection_does_not_mutate_caller_request() -> None:
    terminal = _RecordingTransport()
    transport = HeaderInjectingTransport(terminal, {"Authorization": "X"})
    original = _request()

    await transport.fetch(original)

    assert "Authorization" not in original.headers
    assert terminal.requests[0] is not original


async def test_header_injection_replaces_existing_header() -> None:
    terminal = _RecordingTransport()
    transport = HeaderInjectingTransport(terminal, {"accept": "application/json"})

    await transport.fetch(_request().with_headers({"Accept": "text/plain"}))

    assert terminal.requests[0].headers.getall("Accept") == ["application/json"]


async def test_stacked_decorators_innermost_wins_on_collision() -> None:
    terminal = _RecordingTransport()
    inner = HeaderInjectingTransport(terminal, {"A": "2", "X-Inner": "i"})
    outer = HeaderInjectingTransport(inner, {"A": "1", "X-Outer": "o"})

    await outer.fetch(_request())

    sent = terminal.requests[0].headers
    assert sent.getall("A") == ["2"]
    assert sent["X-Inner"] == "i"
    assert sent["X-Outer"] == "o"


async def test_decorator_propagates_inner_error_unchanged() -> None:
    error = TransportError("down")
    transport = HeaderInjectingTransport(_RecordingTransport(error=error), {"A": "1"})

    with pytest.raises(TransportError) as excinfo:
        await transport.fetch(_request())

    assert excinfo.value is error


async def test_custom_transform_hook() -> None:
    class _Tracing(RequestTransformingTransport):
        def transform(self, request: Request) -> Request:
            return request.with_headers({"X-Trace": "abc"})

    terminal = _RecordingTransport()
    await _Tracing(terminal).fetch(_request())

    assert terminal.requests[0].headers["X-Trace"] == "abc"


@pytest.mark.parametrize(
    "headers",
    [
        {"": "x"},
        {"  ": "x"},
        {"X-Bad": "a\r\nInjected: 1"},
        {"X-Bad\n": "a"},
        {"X-Num": 5},
        {5: "x"},
    ],
)
def test_malformed_headers_rejected_at_construction(headers) -> None:
    with pytest.raises(HeaderValueError):
        HeaderInjectingTransport(_RecordingTransport(), headers)


def test_header_value_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        HeaderInjectingTransport(_RecordingTransport(), {"X": None})  # type: ignore[dict-item]
