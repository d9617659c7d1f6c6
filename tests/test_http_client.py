"""Tests for the bounded HTTP exchange helper."""

import asyncio

import httpx
import pytest

from adapters.http_client import RawResponse, build_async_client, send_request
from core.config import AppSettings
from core.errors import NetworkError, URLError


def make_settings(**overrides):
    return AppSettings(_env_file=None, **overrides)


def test_send_request_returns_status_and_body():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["method"] = request.method
        seen["url"] = str(request.url)
        seen["user_agent"] = request.headers.get("user-agent")
        return httpx.Response(201, content=b'{"ok": true}')

    result = send_request(
        "POST",
        "http://mastermind.test/game",
        settings=make_settings(user_agent="tests/1.0"),
        transport=httpx.MockTransport(handler),
    )

    assert result == RawResponse(status_code=201, body=b'{"ok": true}')
    assert seen == {
        "method": "POST",
        "url": "http://mastermind.test/game",
        "user_agent": "tests/1.0",
    }


def test_send_request_forwards_body_and_headers():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.headers["content-type"] == "application/json"
        assert request.content == b'{"a": 1}'
        return httpx.Response(200)

    result = send_request(
        "POST",
        "http://mastermind.test/guess",
        content=b'{"a": 1}',
        headers={"Content-Type": "application/json"},
        settings=make_settings(),
        transport=httpx.MockTransport(handler),
    )
    assert result.status_code == 200
    assert result.body == b""


def test_transport_failure_becomes_network_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(NetworkError) as excinfo:
        send_request(
            "GET",
            "http://mastermind.test/game",
            settings=make_settings(),
            transport=httpx.MockTransport(handler),
        )

    assert excinfo.value.message == "connection refused"
    assert isinstance(excinfo.value.cause, httpx.ConnectError)


def test_transport_timeout_becomes_network_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("", request=request)

    with pytest.raises(NetworkError) as excinfo:
        send_request(
            "GET",
            "http://mastermind.test/game",
            settings=make_settings(),
            transport=httpx.MockTransport(handler),
        )
    assert "timed out" in excinfo.value.message


def test_outer_ceiling_fires_before_transport_timeout():
    async def handler(request: httpx.Request) -> httpx.Response:
        await asyncio.sleep(5)
        return httpx.Response(200)

    settings = make_settings(
        http_timeout_seconds=60,
        resource_timeout_seconds=60,
        wait_ceiling_seconds=0.05,
    )
    with pytest.raises(NetworkError) as excinfo:
        send_request(
            "POST",
            "http://mastermind.test/game",
            settings=settings,
            transport=httpx.MockTransport(handler),
        )
    assert excinfo.value.message == "request timed out after 0.05 seconds"


def test_resource_timeout_bounds_whole_exchange():
    async def handler(request: httpx.Request) -> httpx.Response:
        await asyncio.sleep(5)
        return httpx.Response(200)

    settings = make_settings(resource_timeout_seconds=0.05, wait_ceiling_seconds=60)
    with pytest.raises(NetworkError) as excinfo:
        send_request(
            "POST",
            "http://mastermind.test/game",
            settings=settings,
            transport=httpx.MockTransport(handler),
        )
    assert excinfo.value.message == "request timed out after 0.05 seconds"


def test_unsupported_scheme_is_url_error():
    with pytest.raises(URLError):
        send_request("GET", "ftp://mastermind.test/game", settings=make_settings())


def test_build_async_client_defaults():
    settings = make_settings(http_timeout_seconds=15, user_agent="tests/1.0")
    client = build_async_client(settings, extra_headers={"X-Trace": "1"})
    try:
        assert client.timeout == httpx.Timeout(15)
        assert client.headers["user-agent"] == "tests/1.0"
        assert client.headers["x-trace"] == "1"
    finally:
        asyncio.run(client.aclose())
