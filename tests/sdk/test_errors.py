"""Unit tests for SDK translation of transport ``HttpError`` into service errors."""

from __future__ import annotations

import json
from typing import Any

import pytest

from packages.admin_sdk.errors import (
    FCM_ERROR_TYPE,
    auth_error_from_http_error,
    canonical_error_from_http_error,
    database_error_from_http_error,
    get_messaging_error_code,
    instance_id_error_from_http_error,
    messaging_error_from_http_error,
    project_management_error_from_http_error,
)
from packages.admin_shared.errors import (
    AppError,
    AuthError,
    DatabaseError,
    InstanceIdError,
    MessagingError,
    ProjectManagementError,
    SecurityRulesError,
)
from packages.admin_shared.http import HttpError, HttpResponse


def _json_error(status: int, payload: Any) -> HttpError:
    return HttpError(
        HttpResponse(
            status=status,
            headers={"content-type": "application/json; charset=UTF-8"},
            body=json.dumps(payload).encode("utf-8"),
        )
    )


def _text_error(status: int, body: str) -> HttpError:
    return HttpError(
        HttpResponse(
            status=status, headers={"content-type": "text/html"}, body=body.encode()
        )
    )


def test_http_error_default_message_names_status() -> None:
    """``HttpError`` should describe the failing status when no message is given."""
    error = _text_error(503, "busy")

    assert error.status == 503
    assert str(error) == "Server responded with status 503."


@pytest.mark.parametrize(
    "translate",
    [
        auth_error_from_http_error,
        messaging_error_from_http_error,
        canonical_error_from_http_error,
        project_management_error_from_http_error,
        database_error_from_http_error,
    ],
)
def test_non_http_errors_pass_through_unchanged(translate: Any) -> None:
    """Network and credential failures should not be re-typed."""
    error = AppError(code="network-timeout", message="slow")

    assert translate(error) is error


def test_get_messaging_error_code_prefers_fcm_detail() -> None:
    """The FCM detail ``errorCode`` should win over the canonical status."""
    payload = {
        "error": {
            "status": "NOT_FOUND",
            "message": "Requested entity was not found.",
            "details": [{"@type": FCM_ERROR_TYPE, "errorCode": "UNREGISTERED"}],
        }
    }

    assert get_messaging_error_code(payload) == "UNREGISTERED"
    assert get_messaging_error_code({"error": "NotRegistered"}) == "NotRegistered"
    assert get_messaging_error_code({"error": {"status": "INTERNAL"}}) == "INTERNAL"
    assert get_messaging_error_code({"results": []}) is None


def test_messaging_json_error_uses_server_message() -> None:
    """JSON FCM failures should map the token and keep the server message."""
    error = messaging_error_from_http_error(
        _json_error(
            404,
            {
                "error": {
                    "status": "NOT_FOUND",
                    "message": "Requested entity was not found.",
                    "details": [
                        {"@type": FCM_ERROR_TYPE, "errorCode": "UNREGISTERED"}
                    ],
                }
            },
        )
    )

    assert isinstance(error, MessagingError)
    assert error.code == "messaging/registration-token-not-registered"
    assert error.message == "Requested entity was not found."


def test_messaging_non_json_error_maps_by_status() -> None:
    """Non-JSON FCM failures should map by status and quote the raw body."""
    error = messaging_error_from_http_error(_text_error(503, "Service Unavailable"))

    assert isinstance(error, MessagingError)
    assert error.code == "messaging/server-unavailable"
    assert error.message.endswith(
        ' Raw server response: "Service Unavailable". Status code: 503.'
    )


def test_auth_error_reads_identity_toolkit_message_token() -> None:
    """Identity Toolkit ``error.message`` tokens should map to auth codes."""
    error = auth_error_from_http_error(
        _json_error(400, {"error": {"message": "USER_NOT_FOUND"}})
    )

    assert isinstance(error, AuthError)
    assert error.code == "auth/user-not-found"


def test_auth_error_with_non_json_body_falls_back_to_internal_error() -> None:
    """Unparseable auth failures should surface as ``auth/internal-error``."""
    error = auth_error_from_http_error(_text_error(500, "oops"))

    assert isinstance(error, AuthError)
    assert error.code == "auth/internal-error"
    assert 'Raw server response: ""oops""' in error.message


def test_canonical_error_maps_status_and_message() -> None:
    """Canonical ``error.status`` values should map into the rules namespace."""
    error = canonical_error_from_http_error(
        _json_error(404, {"error": {"status": "NOT_FOUND", "message": "No ruleset"}})
    )

    assert isinstance(error, SecurityRulesError)
    assert error.code == "security-rules/not-found"
    assert error.message == "No ruleset"


def test_canonical_error_non_json_body_is_unknown() -> None:
    """Non-JSON canonical failures should describe status and body."""
    error = canonical_error_from_http_error(_text_error(502, "bad gateway"))

    assert isinstance(error, SecurityRulesError)
    assert error.code == "security-rules/unknown-error"
    assert error.message == (
        "Unexpected response with status: 502 and body: bad gateway"
    )


def test_project_management_error_maps_status() -> None:
    """Project Management failures should map by status with the raw body."""
    error = project_management_error_from_http_error(_text_error(409, "dup"))
    unknown = project_management_error_from_http_error(_text_error(418, ""))

    assert isinstance(error, ProjectManagementError)
    assert error.code == "project-management/already-exists"
    assert error.message == (
        'The specified entity already exists. Status code: 409. '
        'Raw server response: "dup".'
    )
    assert unknown.code == "project-management/unknown-error"
    assert 'Raw server response: "<missing>".' in unknown.message


def test_instance_id_error_names_the_instance() -> None:
    """Known statuses should produce a message naming the instance ID."""
    error = instance_id_error_from_http_error(_text_error(404, ""), "iid-1")
    other = instance_id_error_from_http_error(
        _json_error(418, {"error": "teapot"}), "iid-1"
    )

    assert isinstance(error, InstanceIdError)
    assert error.code == "instance-id/api-error"
    assert error.message == 'Instance ID "iid-1": Failed to find the instance ID.'
    assert other.message == "teapot"


def test_database_error_prefixes_rules_detail() -> None:
    """Rules endpoint failures should surface as ``database/internal-error``."""
    error = database_error_from_http_error(
        _json_error(401, {"error": "Permission denied"})
    )
    raw = database_error_from_http_error(_text_error(500, "boom"))

    assert isinstance(error, DatabaseError)
    assert error.code == "database/internal-error"
    assert error.message == "Error while accessing security rules: Permission denied"
    assert raw.message == "Error while accessing security rules: boom"
