"""Tests for client configuration parsing."""

from __future__ import annotations

import pytest

from typed_fetch.config import ClientConfig
from typed_fetch.const import CONF_BASE_URL, CONF_HEADERS, CONF_TIMEOUT
from typed_fetch.decorators import HeaderInjectingTransport
from typed_fetch.exceptions import HeaderValueError
from typed_fetch.transport import AiohttpTransport


def test_from_mapping_reads_values() -> None:
    config = ClientConfig.from_mapping(
        {
            CONF_BASE_URL: " https://api.example.com ",
            CONF_TIMEOUT: "2.5",
            CONF_HEADERS: {"Authorization": "X"},
        }
    )

    assert config.base_url == "https://api.example.com"
    assert config.timeout_seconds == 2.5
    assert dict(config.headers) == {"Authorization": "X"}


@pytest.mark.parametrize("data", [None, {}, "nope", {CONF_BASE_URL: None}])
def test_from_mapping_falls_back_to_defaults(data) -> None:
    config = ClientConfig.from_mapping(data)

    assert config == ClientConfig()


@pytest.mark.parametrize("timeout", [0, -1, True, "abc", [], None])
def test_from_mapping_ignores_invalid_timeouts(timeout) -> None:
    config = ClientConfig.from_mapping({CONF_TIMEOUT: timeout})

    assert config.timeout_seconds == 10.0


def test_from_mapping_rejects_malformed_headers() -> None:
    with pytest.raises(HeaderValueError):
        ClientConfig.from_mapping({CONF_HEADERS: {"X": "a\nb"}})


def test_build_transport_without_headers_is_terminal() -> None:
    transport = ClientConfig(timeout_seconds=4).build_transport()

    assert isinstance(transport, AiohttpTransport)
    assert transport.timeout_seconds == 4.0


def test_build_transport_with_headers_is_decorated() -> None:
    transport = ClientConfig(headers={"A": "1"}).build_transport()

    assert isinstance(transport, HeaderInjectingTransport)
    assert transport.headers["A"] == "1"


def test_build_transport_wraps_given_inner_transport() -> None:
    inner = AiohttpTransport()

    assert ClientConfig().build_transport(inner) is inner
    wrapped = ClientConfig(headers={"A": "1"}).build_transport(inner)
    assert isinstance(wrapped, HeaderInjectingTransport)
    assert wrapped.inner is inner
