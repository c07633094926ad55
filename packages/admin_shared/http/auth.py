"""Bearer-token decorators over the transport clients.

A token provider is any object exposing ``get_access_token()`` that returns an
access-token string, an object with an ``access_token`` string attribute, or
``None``. Token objects exposing ``is_expired()`` are rejected once expired.
Tokens are fetched once per ``send`` and never cached here.
"""

from __future__ import annotations

import inspect
from typing import Any, Protocol

from ..errors import AppError, AppErrorCode, has_code
from .client import AsyncHttpClient, HttpClient
from .request import RequestDescriptor, set_header
from .response import HttpResponse

MISSING_TOKEN_MESSAGE = (
    "The credential did not return a valid access token. Make sure the "
    "credential used to initialize the SDK is configured correctly."
)
EXPIRED_TOKEN_MESSAGE = (
    "The credential returned an access token that has already expired."
)


class SupportsAccessToken(Protocol):
    """Synchronous token provider capability."""

    def get_access_token(self) -> Any: ...


def _invalid_credential(message: str) -> AppError:
    return AppError(AppErrorCode.INVALID_CREDENTIAL.value, message)


def extract_token(value: object) -> str:
    """Return the bearer token carried by ``value`` or raise ``invalid-credential``."""
    token = value if isinstance(value, str) else getattr(value, "access_token", None)
    if not isinstance(token, str) or not token:
        raise _invalid_credential(MISSING_TOKEN_MESSAGE)
    is_expired = getattr(value, "is_expired", None)
    if callable(is_expired) and is_expired():
        raise _invalid_credential(EXPIRED_TOKEN_MESSAGE)
    return token


def _provider_failure(exc: Exception) -> AppError:
    return _invalid_credential(
        f"Failed to obtain an access token from the credential: {exc}"
    )


def authorize(descriptor: RequestDescriptor, token: str) -> RequestDescriptor:
    """Return a copy of ``descriptor`` carrying ``Authorization: Bearer <token>``."""
    headers = dict(descriptor.headers or {})
    set_header(headers, "Authorization", f"Bearer {token}")
    return descriptor.with_headers(headers)


class AuthorizedHttpClient:
    """Synchronous transport that signs every request with a fresh token."""

    def __init__(self, token_provider: SupportsAccessToken, client: HttpClient) -> None:
        self.token_provider = token_provider
        self.client = client

    def close(self) -> None:
        """Close the wrapped transport."""
        self.client.close()

    def __enter__(self) -> AuthorizedHttpClient:
        return self

    def __exit__(self, *_: object) -> None:
        self.close()

    def get_token(self) -> str:
        """Fetch one bearer token from the provider."""
        try:
            value = self.token_provider.get_access_token()
        except Exception as exc:
            if has_code(exc, AppErrorCode.INVALID_CREDENTIAL.value):
                raise
            raise _provider_failure(exc) from exc
        return extract_token(value)

    def send(self, descriptor: RequestDescriptor) -> HttpResponse:
        """Authorize and send one request through the wrapped transport."""
        return self.client.send(authorize(descriptor, self.get_token()))


class AsyncAuthorizedHttpClient:
    """Asynchronous transport that signs every request with a fresh token.

    The provider's ``get_access_token`` may be a coroutine function or a plain
    callable.
    """

    def __init__(self, token_provider: Any, client: AsyncHttpClient) -> None:
        self.token_provider = token_provider
        self.client = client

    async def aclose(self) -> None:
        """Close the wrapped transport."""
        await self.client.aclose()

    async def __aenter__(self) -> AsyncAuthorizedHttpClient:
        return self

    async def __aexit__(self, *_: object) -> None:
        await self.aclose()

    async def get_token(self) -> str:
        """Fetch one bearer token from the provider."""
        try:
            value = self.token_provider.get_access_token()
            if inspect.isawaitable(value):
                value = await value
        except Exception as exc:
            if has_code(exc, AppErrorCode.INVALID_CREDENTIAL.value):
                raise
            raise _provider_failure(exc) from exc
        return extract_token(value)

    async def send(self, descriptor: RequestDescriptor) -> HttpResponse:
        """Authorize and send one request through the wrapped transport."""
        token = await self.get_token()
        return await self.client.send(authorize(descriptor, token))
