"""Unit tests for prefixed error types and server-code translation tables."""

from __future__ import annotations

import pytest

from packages.admin_shared.errors import (
    AppError,
    AuthClientErrorCode,
    AuthError,
    MessagingClientErrorCode,
    MessagingError,
    SecurityRulesError,
    auth_error_from_server,
    has_code,
    messaging_error_from_server,
    messaging_error_from_topic_management,
)


def test_prefixed_errors_namespace_their_codes() -> None:
    """Bare codes should gain the service prefix exactly once."""
    error = AuthError(code="user-not-found", message="missing")
    already = AuthError(code="auth/user-not-found", message="missing")

    assert error.code == "auth/user-not-found"
    assert already.code == "auth/user-not-found"
    assert error.bare_code == "user-not-found"
    assert str(error) == "missing"
    assert error.to_dict() == {"code": "auth/user-not-found", "message": "missing"}


def test_has_code_matches_within_own_namespace_only() -> None:
    """``has_code`` should compare bare codes inside the error's own prefix."""
    error = SecurityRulesError(code="not-found", message="gone")

    assert error.code == "security-rules/not-found"
    assert error.has_code("not-found") is True
    assert error.has_code("security-rules/not-found") is False
    assert has_code(error, "not-found") is True
    assert has_code(AppError(code="not-found", message="x"), "not-found") is True
    assert has_code(ValueError("not-found"), "not-found") is False


def test_errors_are_immutable_exceptions() -> None:
    """Error values should be raisable and frozen."""
    error = AppError(code="network-error", message="down")

    with pytest.raises(AppError) as exc_info:
        raise error
    with pytest.raises(AttributeError):
        error.message = "changed"  # type: ignore[misc]

    assert exc_info.value.code == "app/network-error"


def test_auth_server_code_maps_to_default_message() -> None:
    """Known tokens should map to their client entry and default message."""
    error = auth_error_from_server("USER_NOT_FOUND")

    assert isinstance(error, AuthError)
    assert error.code == "auth/user-not-found"
    assert error.message == AuthClientErrorCode.USER_NOT_FOUND.value.message


def test_server_detail_after_colon_wins_over_message() -> None:
    """``CODE : detail`` should look up ``CODE`` and use ``detail`` as message."""
    error = auth_error_from_server(
        "INVALID_ID_TOKEN : Token expired", message="ignored"
    )

    assert error.code == "auth/invalid-id-token"
    assert error.message == "Token expired"


def test_caller_message_overrides_default_message() -> None:
    """A caller message should replace the default when no detail is present."""
    error = auth_error_from_server("EMAIL_EXISTS", message="taken")

    assert error.code == "auth/email-already-exists"
    assert error.message == "taken"


def test_unknown_auth_code_falls_back_with_raw_response() -> None:
    """Unknown tokens should fall back to internal-error and append raw JSON."""
    error = auth_error_from_server(
        "SOMETHING_NEW", raw_server_response={"error": {"message": "SOMETHING_NEW"}}
    )

    assert error.code == "auth/internal-error"
    assert error.message == (
        AuthClientErrorCode.INTERNAL_ERROR.value.message
        + ' Raw server response: "{"error":{"message":"SOMETHING_NEW"}}"'
    )


def test_known_code_ignores_raw_response() -> None:
    """Raw payloads should only be appended for fallback entries."""
    error = auth_error_from_server("USER_NOT_FOUND", raw_server_response={"a": 1})

    assert "Raw server response" not in error.message


def test_unserializable_raw_response_is_omitted() -> None:
    """Payloads that cannot be JSON-encoded should leave the message unchanged."""
    error = auth_error_from_server("NOPE", raw_server_response={object()})

    assert error.code == "auth/internal-error"
    assert error.message == AuthClientErrorCode.INTERNAL_ERROR.value.message


@pytest.mark.parametrize(
    ("server_code", "expected"),
    [
        ("NotRegistered", "messaging/registration-token-not-registered"),
        ("UNREGISTERED", "messaging/registration-token-not-registered"),
        ("INVALID_ARGUMENT", "messaging/invalid-argument"),
        ("BRAND_NEW", "messaging/unknown-error"),
        (None, "messaging/unknown-error"),
    ],
)
def test_messaging_server_codes(server_code: str | None, expected: str) -> None:
    """Legacy, canonical and v1 FCM tokens should share one mapping."""
    error = messaging_error_from_server(server_code)

    assert isinstance(error, MessagingError)
    assert error.code == expected


def test_topic_management_codes_use_their_own_table() -> None:
    """Topic-management tokens should map through the topic table."""
    error = messaging_error_from_topic_management("TOO_MANY_TOPICS")
    invalid = messaging_error_from_topic_management("INVALID_ARGUMENT")

    assert error.code == "messaging/too-many-topics"
    assert error.message == MessagingClientErrorCode.TOO_MANY_TOPICS.value.message
    assert invalid.code == "messaging/invalid-registration-token"
