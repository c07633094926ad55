"""Wire settings, credentials and transport into ready-to-use SDK clients."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass

import httpx

from packages.admin_shared.config import AdminSettings, load_settings
from packages.admin_shared.http import (
    AsyncAuthorizedHttpClient,
    AsyncBatchRequestClient,
    AsyncHttpClient,
    AuthorizedHttpClient,
    HttpClient,
)
from packages.admin_shared.http.client import AsyncSleep, Sleep
from packages.admin_shared.logging import configure_logging

from .credentials import AsyncTokenProvider, TokenProvider

CLIENT_VERSION_HEADER = "X-Client-Version"


def configure_sdk_logging(settings: AdminSettings) -> logging.Handler:
    """Apply ``settings.logging`` to the root logger."""
    config = settings.logging
    return configure_logging(
        level=config.level,
        json_output=config.json_output,
        service=config.service,
        environment=config.environment,
        quiet_http_libraries=config.quiet_http_libraries,
    )


def _default_headers(settings: AdminSettings) -> dict[str, str]:
    return {CLIENT_VERSION_HEADER: settings.http.client_version}


@dataclass(frozen=True)
class AdminHttpClients:
    """Async transport plus its bearer-token decorator, built from settings."""

    transport: AsyncHttpClient
    authorized: AsyncAuthorizedHttpClient

    @classmethod
    def from_settings(
        cls,
        token_provider: AsyncTokenProvider | TokenProvider,
        settings: AdminSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        sleep: AsyncSleep | None = None,
    ) -> AdminHttpClients:
        """Build the authorized async client described by ``settings``.

        ``settings`` defaults to ``load_settings()``.
        """
        resolved = settings or load_settings()
        http = AsyncHttpClient(
            retry=resolved.http.retry.to_retry_config(),
            timeout_seconds=resolved.http.timeout_seconds,
            headers=_default_headers(resolved),
            transport=transport,
            sleep=sleep,
        )
        return cls(
            transport=http,
            authorized=AsyncAuthorizedHttpClient(token_provider, http),
        )

    def batch(
        self, batch_url: str, common_headers: Mapping[str, str] | None = None
    ) -> AsyncBatchRequestClient:
        """Return a batch client that signs its requests like ``authorized``."""
        return AsyncBatchRequestClient(self.authorized, batch_url, common_headers)

    async def aclose(self) -> None:
        """Release transport resources."""
        await self.transport.aclose()


def authorized_client_from_settings(
    token_provider: TokenProvider,
    settings: AdminSettings | None = None,
    *,
    transport: httpx.BaseTransport | None = None,
    sleep: Sleep | None = None,
) -> AuthorizedHttpClient:
    """Build the blocking authorized client for scripts and CLIs."""
    resolved = settings or load_settings()
    http = HttpClient(
        retry=resolved.http.retry.to_retry_config(),
        timeout_seconds=resolved.http.timeout_seconds,
        headers=_default_headers(resolved),
        transport=transport,
        sleep=sleep,
    )
    return AuthorizedHttpClient(token_provider, http)
