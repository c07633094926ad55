"""Unit tests for SDK access-token values and providers."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from packages.admin_sdk.credentials import (
    AccessToken,
    StaticTokenProvider,
    TokenProvider,
)
from packages.admin_shared.errors import AppError
from packages.admin_shared.http.auth import extract_token


def test_access_token_expiry() -> None:
    """Tokens without an expiry never expire; others expire at their deadline."""
    now = datetime(2024, 1, 1, tzinfo=UTC)
    token = AccessToken("abc", expiration_time=now + timedelta(minutes=5))

    assert AccessToken("abc").is_expired(now=now) is False
    assert token.is_expired(now=now) is False
    assert token.is_expired(now=now + timedelta(minutes=5)) is True


def test_static_provider_satisfies_sync_protocol() -> None:
    """``StaticTokenProvider`` should satisfy the synchronous provider protocol."""
    provider = StaticTokenProvider("abc")

    assert isinstance(provider, TokenProvider)
    assert provider.get_access_token() == AccessToken("abc")
    assert StaticTokenProvider(None).get_access_token() is None


def test_extract_token_accepts_strings_and_token_objects() -> None:
    """Bare strings and ``access_token`` attributes count; ``None`` does not."""
    assert extract_token("raw") == "raw"
    assert extract_token(AccessToken("wrapped")) == "wrapped"
    with pytest.raises(AppError) as exc_info:
        extract_token(None)
    assert exc_info.value.code == "app/invalid-credential"


def test_extract_token_rejects_expired_access_token() -> None:
    """A token whose expiry has passed counts as no credential at all."""
    now = datetime.now(UTC)
    expired = AccessToken("old", expiration_time=now - timedelta(seconds=5))
    fresh = AccessToken("new", expiration_time=now + timedelta(hours=1))

    assert extract_token(fresh) == "new"
    with pytest.raises(AppError) as exc_info:
        extract_token(expired)
    assert exc_info.value.code == "app/invalid-credential"
    assert "expired" in exc_info.value.message
