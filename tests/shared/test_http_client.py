"""Unit tests for the retrying shared HTTP transport clients."""

from __future__ import annotations

import asyncio
import json
import logging

import httpx
import pytest

from packages.admin_shared.errors import AppError
from packages.admin_shared.http import (
    AsyncHttpClient,
    HttpClient,
    HttpError,
    RequestDescriptor,
    RetryConfig,
)


def _recording_sleep(calls: list[float]):
    def sleep(seconds: float) -> None:
        calls.append(seconds)

    return sleep


def _async_recording_sleep(calls: list[float]):
    async def sleep(seconds: float) -> None:
        calls.append(seconds)

    return sleep


def test_send_get_returns_parsed_json_response() -> None:
    """A 2xx JSON GET should resolve with status, headers and decoded data."""
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(
            200, json={"foo": "bar"}, headers={"X-Test": "1"}, request=request
        )

    client = HttpClient(transport=httpx.MockTransport(handler))
    try:
        response = client.send(
            RequestDescriptor(method="GET", url="https://example.test/v1/items")
        )
    finally:
        client.close()

    assert response.status == 200
    assert response.headers["x-test"] == "1"
    assert response.data == {"foo": "bar"}
    assert response.is_json() is True
    assert len(seen) == 1
    assert seen[0].method == "GET"
    assert "content-type" not in seen[0].headers


@pytest.mark.parametrize("method", ["GET", "HEAD"])
def test_send_rejects_body_on_bodyless_methods(method: str) -> None:
    """GET/HEAD with data should fail before any network call."""
    calls: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(200, request=request)

    client = HttpClient(transport=httpx.MockTransport(handler))
    try:
        with pytest.raises(AppError) as exc_info:
            client.send(
                RequestDescriptor(
                    method=method, url="https://example.test", data={"a": 1}
                )
            )
    finally:
        client.close()

    assert exc_info.value.code == "app/network-error"
    assert exc_info.value.message == f"{method} requests cannot have a body"
    assert calls == []


def test_send_post_serializes_json_and_sets_default_headers() -> None:
    """Object bodies should be JSON-encoded with default content type and length."""
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={}, request=request)

    headers = {"X-Caller": "yes"}
    descriptor = RequestDescriptor(
        method="POST",
        url="https://example.test/v1/items",
        headers=headers,
        data={"name": "item"},
    )
    client = HttpClient(transport=httpx.MockTransport(handler))
    try:
        client.send(descriptor)
    finally:
        client.close()

    request = seen[0]
    assert json.loads(request.content) == {"name": "item"}
    assert request.headers["content-type"] == "application/json;charset=utf-8"
    assert request.headers["content-length"] == str(len(request.content))
    assert request.headers["x-caller"] == "yes"
    assert headers == {"X-Caller": "yes"}
    assert descriptor.headers == {"X-Caller": "yes"}


def test_send_keeps_caller_content_type_in_any_case() -> None:
    """A caller-supplied content type should never be overridden."""
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, request=request)

    client = HttpClient(transport=httpx.MockTransport(handler))
    try:
        client.send(
            RequestDescriptor(
                method="PUT",
                url="https://example.test/blob",
                headers={"content-TYPE": "text/plain"},
                data="hello",
            )
        )
    finally:
        client.close()

    assert seen[0].headers["content-type"] == "text/plain"
    assert seen[0].content == b"hello"


def test_send_rejects_non_serializable_data() -> None:
    """Values that cannot be JSON-encoded should fail with a network error."""
    client = HttpClient(
        transport=httpx.MockTransport(lambda request: httpx.Response(200))
    )
    try:
        with pytest.raises(AppError) as exc_info:
            client.send(
                RequestDescriptor(
                    method="POST", url="https://example.test", data={"bad": object()}
                )
            )
    finally:
        client.close()

    assert exc_info.value.code == "app/network-error"
    assert "Request data must be a string" in exc_info.value.message


def test_send_merges_params_and_defaults_scheme() -> None:
    """Query params should merge with the URL query; missing scheme means https."""
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, request=request)

    client = HttpClient(transport=httpx.MockTransport(handler))
    try:
        client.send(
            RequestDescriptor(
                method="GET",
                url="example.test/v1/items?existing=1",
                params={"pageSize": 10},
            )
        )
    finally:
        client.close()

    url = seen[0].url
    assert url.scheme == "https"
    assert url.host == "example.test"
    assert url.params["existing"] == "1"
    assert url.params["pageSize"] == "10"


def test_send_retries_503_with_exponential_backoff_then_fails() -> None:
    """Persistent 503s should be attempted 5 times and end in HttpError."""
    calls: list[httpx.Request] = []
    sleeps: list[float] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(503, text="unavailable", request=request)

    client = HttpClient(
        transport=httpx.MockTransport(handler), sleep=_recording_sleep(sleeps)
    )
    try:
        with pytest.raises(HttpError) as exc_info:
            client.send(RequestDescriptor(method="GET", url="https://example.test"))
    finally:
        client.close()

    assert len(calls) == 5
    assert sleeps == [0, 1.0, 2.0, 4.0]
    assert exc_info.value.response.status == 503
    assert exc_info.value.message == "Server responded with status 503."


def test_send_honours_retry_after_header() -> None:
    """``Retry-After: 30`` should produce one 30 second wait before success."""
    sleeps: list[float] = []
    responses = iter(
        [
            httpx.Response(503, headers={"Retry-After": "30"}),
            httpx.Response(200, json={"ok": True}),
        ]
    )

    def handler(request: httpx.Request) -> httpx.Response:
        return next(responses)

    client = HttpClient(
        transport=httpx.MockTransport(handler), sleep=_recording_sleep(sleeps)
    )
    try:
        response = client.send(
            RequestDescriptor(method="GET", url="https://example.test")
        )
    finally:
        client.close()

    assert response.data == {"ok": True}
    assert sleeps == [30.0]


def test_send_without_retry_config_fails_immediately() -> None:
    """``retry=None`` should surface the first 503 without sleeping."""
    calls: list[httpx.Request] = []
    sleeps: list[float] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(503, request=request)

    client = HttpClient(
        retry=None,
        transport=httpx.MockTransport(handler),
        sleep=_recording_sleep(sleeps),
    )
    try:
        with pytest.raises(HttpError):
            client.send(RequestDescriptor(method="GET", url="https://example.test"))
    finally:
        client.close()

    assert len(calls) == 1
    assert sleeps == []


def test_send_retries_connection_resets() -> None:
    """Read errors map to ECONNRESET and are retried by default."""
    attempts: list[int] = []

    def handler(request: httpx.Request) -> httpx.Response:
        attempts.append(1)
        if len(attempts) == 1:
            raise httpx.ReadError("connection reset", request=request)
        return httpx.Response(200, json={"ok": True}, request=request)

    client = HttpClient(
        transport=httpx.MockTransport(handler), sleep=_recording_sleep([])
    )
    try:
        response = client.send(
            RequestDescriptor(method="GET", url="https://example.test")
        )
    finally:
        client.close()

    assert len(attempts) == 2
    assert response.status == 200


def test_send_maps_connect_failure_to_network_error() -> None:
    """Non-retryable transport failures should raise ``app/network-error``."""

    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection failed", request=request)

    client = HttpClient(transport=httpx.MockTransport(handler))
    try:
        with pytest.raises(AppError) as exc_info:
            client.send(RequestDescriptor(method="GET", url="https://example.test"))
    finally:
        client.close()

    error = exc_info.value
    assert error.code == "app/network-error"
    assert error.message == (
        "Error while making request: connection failed. Error code: ECONNREFUSED"
    )
    assert isinstance(error.__cause__, httpx.ConnectError)


def test_send_maps_timeout_to_network_timeout() -> None:
    """Timeouts should raise ``app/network-timeout`` naming the limit."""

    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    client = HttpClient(retry=None, transport=httpx.MockTransport(handler))
    try:
        with pytest.raises(AppError) as exc_info:
            client.send(
                RequestDescriptor(
                    method="GET", url="https://example.test", timeout=0.05
                )
            )
    finally:
        client.close()

    assert exc_info.value.code == "app/network-timeout"
    assert exc_info.value.message == (
        "Error while making request: timeout of 50ms exceeded."
    )


def test_send_logs_each_retry_decision(caplog: pytest.LogCaptureFixture) -> None:
    """Each retry should emit one WARNING record."""
    responses = iter([httpx.Response(503), httpx.Response(200)])
    client = HttpClient(
        transport=httpx.MockTransport(lambda request: next(responses)),
        sleep=_recording_sleep([]),
    )
    caplog.set_level(logging.WARNING, logger="packages.admin_shared.http.client")
    try:
        client.send(RequestDescriptor(method="GET", url="https://example.test"))
    finally:
        client.close()

    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert "status 503" in warnings[0].getMessage()


def test_send_uses_descriptor_http_agent() -> None:
    """A per-request httpx client should be used instead of the owned one."""
    owned_calls: list[httpx.Request] = []
    agent_calls: list[httpx.Request] = []

    def owned(request: httpx.Request) -> httpx.Response:
        owned_calls.append(request)
        return httpx.Response(200, request=request)

    def agent_handler(request: httpx.Request) -> httpx.Response:
        agent_calls.append(request)
        return httpx.Response(200, request=request)

    agent = httpx.Client(transport=httpx.MockTransport(agent_handler))
    client = HttpClient(transport=httpx.MockTransport(owned))
    try:
        client.send(
            RequestDescriptor(
                method="GET", url="https://example.test", http_agent=agent
            )
        )
    finally:
        client.close()
        agent.close()

    assert owned_calls == []
    assert len(agent_calls) == 1


def test_async_send_retries_then_returns_response() -> None:
    """AsyncHttpClient should share retry semantics with the sync client."""
    sleeps: list[float] = []
    responses = iter(
        [
            httpx.Response(503),
            httpx.Response(503),
            httpx.Response(200, json={"done": True}),
        ]
    )

    async def run() -> dict[str, bool]:
        async with AsyncHttpClient(
            transport=httpx.MockTransport(lambda request: next(responses)),
            sleep=_async_recording_sleep(sleeps),
        ) as client:
            response = await client.send(
                RequestDescriptor(method="POST", url="https://example.test", data="x")
            )
            return response.data

    assert asyncio.run(run()) == {"done": True}
    assert sleeps == [0, 1.0]


def test_async_send_uses_custom_retry_config() -> None:
    """Custom status codes and retry counts should drive the async loop."""
    calls: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(500, text="boom", request=request)

    async def run() -> HttpError:
        client = AsyncHttpClient(
            retry=RetryConfig(max_retries=2, status_codes=frozenset({500})),
            transport=httpx.MockTransport(handler),
            sleep=_async_recording_sleep([]),
        )
        try:
            with pytest.raises(HttpError) as exc_info:
                await client.send(
                    RequestDescriptor(method="DELETE", url="https://example.test/x")
                )
        finally:
            await client.aclose()
        return exc_info.value

    error = asyncio.run(run())
    assert len(calls) == 3
    assert error.response.text == "boom"


def test_send_appends_params_sharing_a_key_with_the_url_query() -> None:
    """A key present in both the URL and ``params`` should keep both values."""
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, request=request)

    client = HttpClient(transport=httpx.MockTransport(handler))
    try:
        client.send(
            RequestDescriptor(
                method="GET", url="https://example.test/p?f=a", params={"f": "b"}
            )
        )
    finally:
        client.close()

    assert seen[0].url.params.get_list("f") == ["a", "b"]


def test_send_surfaces_the_last_http_failure_after_retries() -> None:
    """When attempts fail differently, the final failure should be raised."""
    responses = iter(
        [
            httpx.Response(503, text="first"),
            httpx.Response(503, text="second"),
            httpx.Response(500, text="last"),
        ]
    )
    client = HttpClient(
        transport=httpx.MockTransport(lambda request: next(responses)),
        sleep=_recording_sleep([]),
    )
    try:
        with pytest.raises(HttpError) as exc_info:
            client.send(RequestDescriptor(method="GET", url="https://example.test"))
    finally:
        client.close()

    assert exc_info.value.status == 500
    assert exc_info.value.response.text == "last"


def test_send_surfaces_io_failure_that_exhausts_the_retry_budget() -> None:
    """A retried 503 followed by a reset should end in the reset's error."""
    attempts: list[int] = []

    def handler(request: httpx.Request) -> httpx.Response:
        attempts.append(1)
        if len(attempts) == 1:
            return httpx.Response(503, request=request)
        raise httpx.ReadError("connection reset", request=request)

    client = HttpClient(
        retry=RetryConfig(
            max_retries=1,
            io_error_codes=frozenset({"ECONNRESET"}),
            status_codes=frozenset({503}),
        ),
        transport=httpx.MockTransport(handler),
        sleep=_recording_sleep([]),
    )
    try:
        with pytest.raises(AppError) as exc_info:
            client.send(RequestDescriptor(method="GET", url="https://example.test"))
    finally:
        client.close()

    assert len(attempts) == 2
    assert exc_info.value.code == "app/network-error"
    assert exc_info.value.message == (
        "Error while making request: connection reset. Error code: ECONNRESET"
    )
