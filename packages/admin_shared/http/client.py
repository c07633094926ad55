"""Retrying HTTP transport clients over httpx.

Both clients expose ``send(descriptor)``, which resolves with an
``HttpResponse`` for 2xx replies and otherwise raises exactly one typed error:

- ``AppError`` for invalid descriptors, raised before any network call.
- ``HttpError`` for a non-2xx reply that the retry policy gave up on.
- ``AppError`` (``network-timeout`` / ``network-error``) for transport
  failures that the retry policy gave up on.

Retry waits go through an injectable ``sleep`` hook and are strictly
sequential.
"""

from __future__ import annotations

import asyncio
import errno
import logging
import time
from collections.abc import Awaitable, Callable, Mapping

import httpx

from ..errors import AppError, AppErrorCode
from ..logging import bind_context, fields, log_context
from .errors import HttpError
from .request import PreparedRequest, RequestDescriptor, prepare_request
from .response import HttpResponse
from .retry import (
    ECONNRESET,
    ETIMEDOUT,
    IoFailure,
    RetryConfig,
    RetryDecision,
    RetryPolicy,
    default_retry_config,
)

logger = logging.getLogger(__name__)

DEFAULT_RETRY = default_retry_config()
DEFAULT_TIMEOUT_SECONDS = 10.0

Sleep = Callable[[float], None]
AsyncSleep = Callable[[float], Awaitable[None]]


def _errno_name(exc: BaseException) -> str | None:
    """Return the symbolic errno of the first ``OSError`` in the cause chain."""
    seen: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        if isinstance(current, OSError) and current.errno in errno.errorcode:
            return errno.errorcode[current.errno]
        current = current.__cause__ or current.__context__
    return None


def _timeout_millis(
    prepared: PreparedRequest, client: httpx.Client | httpx.AsyncClient
) -> int | None:
    if prepared.timeout_millis is not None:
        return prepared.timeout_millis
    timeout = client.timeout
    limits = [
        value
        for value in (timeout.connect, timeout.read, timeout.write, timeout.pool)
        if value is not None
    ]
    return int(round(max(limits) * 1000)) if limits else None


def io_failure_from(
    exc: httpx.RequestError,
    prepared: PreparedRequest,
    client: httpx.Client | httpx.AsyncClient,
) -> IoFailure:
    """Classify one httpx transport exception into a retryable I/O failure."""
    if isinstance(exc, httpx.TimeoutException):
        millis = _timeout_millis(prepared, client)
        message = (
            f"timeout of {millis}ms exceeded"
            if millis is not None
            else "request timed out"
        )
        return IoFailure(code=ETIMEDOUT, message=message, cause=exc)

    message = str(exc) or type(exc).__name__
    code = _errno_name(exc)
    if code is None:
        if isinstance(exc, httpx.ConnectError):
            code = "ECONNREFUSED"
        elif isinstance(
            exc,
            (
                httpx.ReadError,
                httpx.WriteError,
                httpx.CloseError,
                httpx.RemoteProtocolError,
            ),
        ):
            code = ECONNRESET
        else:
            code = type(exc).__name__
    return IoFailure(code=code, message=message, cause=exc)


def network_error_from(failure: IoFailure) -> AppError:
    """Build the terminal ``AppError`` for an I/O failure that will not be retried."""
    if failure.code == ETIMEDOUT:
        return AppError(
            AppErrorCode.NETWORK_TIMEOUT.value,
            f"Error while making request: {failure.message}.",
        )
    return AppError(
        AppErrorCode.NETWORK_ERROR.value,
        f"Error while making request: {failure.message}. Error code: {failure.code}",
    )


def _is_success(response: HttpResponse) -> bool:
    return 200 <= response.status < 300


def _log_retry(
    prepared: PreparedRequest,
    reason: str,
    decision: RetryDecision,
    attempt: int,
    config: RetryConfig | None,
) -> None:
    max_retries = config.max_retries if config is not None else 0
    logger.warning(
        "HTTP %s %s failed with %s, retrying in %dms (retry %d/%d)",
        prepared.method,
        prepared.url,
        reason,
        decision.delay_millis,
        attempt + 1,
        max_retries,
        extra={fields.DELAY_MS: decision.delay_millis},
    )


def _request_context(prepared: PreparedRequest) -> dict[str, object]:
    return {fields.HTTP_METHOD: prepared.method, fields.HTTP_URL: prepared.url}


def _wrong_agent(expected: str) -> AppError:
    return AppError(
        AppErrorCode.INVALID_ARGUMENT.value,
        f"http_agent must be an {expected} for this client",
    )


class HttpClient:
    """Synchronous retrying transport over ``httpx.Client``."""

    def __init__(
        self,
        *,
        retry: RetryConfig | None = DEFAULT_RETRY,
        timeout_seconds: float | None = DEFAULT_TIMEOUT_SECONDS,
        headers: Mapping[str, str] | None = None,
        transport: httpx.BaseTransport | None = None,
        client: httpx.Client | None = None,
        sleep: Sleep | None = None,
    ) -> None:
        """Create a transport; ``retry=None`` disables retries entirely."""
        self._owns_client = client is None
        self._client = client or httpx.Client(
            timeout=timeout_seconds,
            headers=dict(headers or {}),
            follow_redirects=False,
            transport=transport,
        )
        self.policy = RetryPolicy(retry)
        self._sleep = sleep or time.sleep

    @property
    def retry(self) -> RetryConfig | None:
        """Return the retry configuration in effect."""
        return self.policy.config

    def close(self) -> None:
        """Close underlying transport resources when owned."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> HttpClient:
        """Enter context manager scope."""
        return self

    def __exit__(self, *_: object) -> None:
        """Exit context manager scope and close client."""
        self.close()

    def _client_for(self, descriptor: RequestDescriptor) -> httpx.Client:
        agent = descriptor.http_agent
        if agent is None:
            return self._client
        if not isinstance(agent, httpx.Client):
            raise _wrong_agent("httpx.Client")
        return agent

    def _dispatch(
        self, client: httpx.Client, prepared: PreparedRequest
    ) -> httpx.Response:
        return client.request(
            prepared.method,
            prepared.url,
            headers=prepared.headers,
            content=prepared.content,
            timeout=(
                prepared.timeout
                if prepared.timeout is not None
                else httpx.USE_CLIENT_DEFAULT
            ),
        )

    def send(self, descriptor: RequestDescriptor) -> HttpResponse:
        """Send one request, retrying per policy, and return the 2xx response."""
        prepared = prepare_request(descriptor)
        client = self._client_for(descriptor)
        attempt = 0
        with log_context(_request_context(prepared)):
            while True:
                bind_context(**{fields.ATTEMPT: attempt})
                try:
                    raw = self._dispatch(client, prepared)
                except httpx.RequestError as exc:
                    failure = io_failure_from(exc, prepared, client)
                    decision = self.policy.decide(failure, attempt)
                    if not decision.should_retry:
                        logger.debug(
                            "HTTP %s %s failed with %s",
                            prepared.method,
                            prepared.url,
                            failure.code,
                            extra={fields.ERROR_CODE: failure.code},
                        )
                        raise network_error_from(failure) from exc
                    _log_retry(prepared, failure.code, decision, attempt, self.retry)
                else:
                    response = HttpResponse.from_httpx(raw)
                    if _is_success(response):
                        return response
                    decision = self.policy.decide(response, attempt)
                    if not decision.should_retry:
                        logger.debug(
                            "HTTP %s %s responded with status %d",
                            prepared.method,
                            prepared.url,
                            response.status,
                            extra={fields.HTTP_STATUS: response.status},
                        )
                        raise HttpError(response)
                    _log_retry(
                        prepared,
                        f"status {response.status}",
                        decision,
                        attempt,
                        self.retry,
                    )
                self._sleep(decision.delay_millis / 1000)
                attempt += 1


class AsyncHttpClient:
    """Asynchronous retrying transport over ``httpx.AsyncClient``."""

    def __init__(
        self,
        *,
        retry: RetryConfig | None = DEFAULT_RETRY,
        timeout_seconds: float | None = DEFAULT_TIMEOUT_SECONDS,
        headers: Mapping[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        client: httpx.AsyncClient | None = None,
        sleep: AsyncSleep | None = None,
    ) -> None:
        """Create an async transport; ``retry=None`` disables retries entirely."""
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            timeout=timeout_seconds,
            headers=dict(headers or {}),
            follow_redirects=False,
            transport=transport,
        )
        self.policy = RetryPolicy(retry)
        self._sleep = sleep or asyncio.sleep

    @property
    def retry(self) -> RetryConfig | None:
        """Return the retry configuration in effect."""
        return self.policy.config

    async def aclose(self) -> None:
        """Close underlying transport resources when owned."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> AsyncHttpClient:
        """Enter async context manager scope."""
        return self

    async def __aexit__(self, *_: object) -> None:
        """Exit async context manager scope and close client."""
        await self.aclose()

    def _client_for(self, descriptor: RequestDescriptor) -> httpx.AsyncClient:
        agent = descriptor.http_agent
        if agent is None:
            return self._client
        if not isinstance(agent, httpx.AsyncClient):
            raise _wrong_agent("httpx.AsyncClient")
        return agent

    async def _dispatch(
        self, client: httpx.AsyncClient, prepared: PreparedRequest
    ) -> httpx.Response:
        return await client.request(
            prepared.method,
            prepared.url,
            headers=prepared.headers,
            content=prepared.content,
            timeout=(
                prepared.timeout
                if prepared.timeout is not None
                else httpx.USE_CLIENT_DEFAULT
            ),
        )

    async def send(self, descriptor: RequestDescriptor) -> HttpResponse:
        """Send one request, retrying per policy, and return the 2xx response."""
        prepared = prepare_request(descriptor)
        client = self._client_for(descriptor)
        attempt = 0
        with log_context(_request_context(prepared)):
            while True:
                bind_context(**{fields.ATTEMPT: attempt})
                try:
                    raw = await self._dispatch(client, prepared)
                except httpx.RequestError as exc:
                    failure = io_failure_from(exc, prepared, client)
                    decision = self.policy.decide(failure, attempt)
                    if not decision.should_retry:
                        logger.debug(
                            "HTTP %s %s failed with %s",
                            prepared.method,
                            prepared.url,
                            failure.code,
                            extra={fields.ERROR_CODE: failure.code},
                        )
                        raise network_error_from(failure) from exc
                    _log_retry(prepared, failure.code, decision, attempt, self.retry)
                else:
                    response = HttpResponse.from_httpx(raw)
                    if _is_success(response):
                        return response
                    decision = self.policy.decide(response, attempt)
                    if not decision.should_retry:
                        logger.debug(
                            "HTTP %s %s responded with status %d",
                            prepared.method,
                            prepared.url,
                            response.status,
                            extra={fields.HTTP_STATUS: response.status},
                        )
                        raise HttpError(response)
                    _log_retry(
                        prepared,
                        f"status {response.status}",
                        decision,
                        attempt,
                        self.retry,
                    )
                await self._sleep(decision.delay_millis / 1000)
                attempt += 1
