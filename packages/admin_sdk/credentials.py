"""Token provider capability consumed by the authorized transport.

Credential acquisition and refresh live outside this package; callers inject
any object that satisfies ``TokenProvider`` or ``AsyncTokenProvider``.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol, runtime_checkable


@dataclass(frozen=True, slots=True)
class AccessToken:
    """One OAuth2 access token and its optional expiry."""

    access_token: str
    expiration_time: datetime | None = None

    def is_expired(self, *, now: datetime | None = None) -> bool:
        """Return whether the token is past its expiry, when one is known."""
        if self.expiration_time is None:
            return False
        return (now or datetime.now(UTC)) >= self.expiration_time


@runtime_checkable
class TokenProvider(Protocol):
    """Synchronous access-token source."""

    def get_access_token(self) -> AccessToken | str | None: ...


@runtime_checkable
class AsyncTokenProvider(Protocol):
    """Asynchronous access-token source."""

    async def get_access_token(self) -> AccessToken | str | None: ...


@dataclass(frozen=True, slots=True)
class StaticTokenProvider:
    """Provider returning one fixed token; intended for tests and emulators."""

    token: str | None

    def get_access_token(self) -> AccessToken | None:
        """Return the configured token, or ``None`` when unset."""
        if self.token is None:
            return None
        return AccessToken(access_token=self.token)
