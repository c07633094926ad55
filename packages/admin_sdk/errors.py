"""Translate transport ``HttpError`` rejections into service-typed errors.

These helpers sit on the service-caller side of the transport: a service
catches ``HttpError`` from ``send`` and passes it through the matching function
here. Anything that is not an ``HttpError`` (network failures, credential
errors, validation errors) is returned unchanged so callers can simply
``raise translate(exc) from exc``.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Mapping

from packages.admin_shared.errors import (
    AppError,
    DatabaseError,
    InstanceIdError,
    MessagingClientErrorCode,
    MessagingError,
    PrefixedFirebaseError,
    ProjectManagementError,
    SecurityRulesError,
    auth_error_from_server,
    messaging_error_from_server,
)
from packages.admin_shared.errors.codes import (
    INSTANCE_ID_STATUS_MESSAGES,
    PROJECT_MANAGEMENT_STATUS_ERRORS,
    PROJECT_MANAGEMENT_UNKNOWN_ERROR,
    SECURITY_RULES_SERVER_TO_CLIENT_CODE,
    InstanceIdClientErrorCode,
    SecurityRulesErrorCode,
)
from packages.admin_shared.http import HttpError, HttpResponse

FCM_ERROR_TYPE = "type.googleapis.com/google.firebase.fcm.v1.FcmError"

_MESSAGING_STATUS_ERRORS: Mapping[int, MessagingClientErrorCode] = {
    400: MessagingClientErrorCode.INVALID_ARGUMENT,
    401: MessagingClientErrorCode.AUTHENTICATION_ERROR,
    403: MessagingClientErrorCode.AUTHENTICATION_ERROR,
    500: MessagingClientErrorCode.INTERNAL_ERROR,
    503: MessagingClientErrorCode.SERVER_UNAVAILABLE,
}


def _safe_text(response: HttpResponse) -> str:
    """Return response text, tolerating multipart bodies."""
    try:
        return response.text
    except AppError:
        return response.body.decode("utf-8", errors="replace").rstrip()


def _json_payload(response: HttpResponse) -> Any | None:
    """Return the decoded body of a JSON response, or ``None``."""
    if not response.is_json():
        return None
    try:
        return response.data
    except AppError:
        return None


def _error_object(payload: Any) -> Any:
    if isinstance(payload, dict):
        return payload.get("error")
    return None


def get_messaging_error_code(payload: Any) -> str | None:
    """Extract the most specific FCM error token from one JSON error body."""
    if not isinstance(payload, dict) or "error" not in payload:
        return None
    error = payload["error"]
    if isinstance(error, str):
        return error
    if not isinstance(error, dict):
        return None
    details = error.get("details")
    if isinstance(details, list):
        for element in details:
            if isinstance(element, dict) and element.get("@type") == FCM_ERROR_TYPE:
                return element.get("errorCode")
    if "status" in error:
        return error["status"]
    return error.get("message")


def _messaging_error_message(payload: Any) -> str | None:
    error = _error_object(payload)
    if isinstance(error, dict):
        message = error.get("message")
        if isinstance(message, str) and message:
            return message
    return None


def messaging_error_from_http_error(error: Exception) -> Exception:
    """Map one FCM ``HttpError`` into ``MessagingError``."""
    if not isinstance(error, HttpError):
        return error
    response = error.response
    payload = _json_payload(response)
    if payload is not None:
        return messaging_error_from_server(
            get_messaging_error_code(payload),
            _messaging_error_message(payload),
            payload,
        )

    entry = _MESSAGING_STATUS_ERRORS.get(
        response.status, MessagingClientErrorCode.UNKNOWN_ERROR
    )
    return MessagingError(
        code=entry.value.code,
        message=(
            f'{entry.value.message} Raw server response: "{_safe_text(response)}". '
            f"Status code: {response.status}."
        ),
    )


def auth_error_from_http_error(error: Exception) -> Exception:
    """Map one Identity Toolkit ``HttpError`` into ``AuthError``."""
    if not isinstance(error, HttpError):
        return error
    response = error.response
    payload = _json_payload(response)
    if payload is None:
        return auth_error_from_server(None, None, _safe_text(response))
    code = None
    detail = _error_object(payload)
    if isinstance(detail, dict) and isinstance(detail.get("message"), str):
        code = detail["message"]
    return auth_error_from_server(code, None, payload)


def canonical_error_from_http_error(
    error: Exception,
    error_type: type[PrefixedFirebaseError] = SecurityRulesError,
    mapping: Mapping[str, Enum] = SECURITY_RULES_SERVER_TO_CLIENT_CODE,
    unknown_code: str = SecurityRulesErrorCode.UNKNOWN_ERROR.value,
) -> Exception:
    """Map a Google canonical ``error.status`` response into ``error_type``."""
    if not isinstance(error, HttpError):
        return error
    response = error.response
    payload = _json_payload(response)
    if payload is None:
        return error_type(
            code=unknown_code,
            message=(
                f"Unexpected response with status: {response.status} "
                f"and body: {_safe_text(response)}"
            ),
        )

    detail = _error_object(payload)
    if not isinstance(detail, dict):
        detail = {}
    code = unknown_code
    status = detail.get("status")
    if isinstance(status, str) and status in mapping:
        code = mapping[status].value
    message = detail.get("message") or f"Unknown server error: {_safe_text(response)}"
    return error_type(code=code, message=message)


def project_management_error_from_http_error(error: Exception) -> Exception:
    """Map one Project Management ``HttpError`` into ``ProjectManagementError``."""
    if not isinstance(error, HttpError):
        return error
    response = error.response
    info = PROJECT_MANAGEMENT_STATUS_ERRORS.get(
        response.status, PROJECT_MANAGEMENT_UNKNOWN_ERROR
    )
    text = _safe_text(response) or "<missing>"
    return ProjectManagementError(
        code=info.code,
        message=(
            f"{info.message} Status code: {response.status}. "
            f'Raw server response: "{text}".'
        ),
    )


def instance_id_error_from_http_error(
    error: Exception, instance_id: str
) -> Exception:
    """Map one Instance ID ``HttpError`` into ``InstanceIdError``."""
    if not isinstance(error, HttpError):
        return error
    response = error.response
    template = INSTANCE_ID_STATUS_MESSAGES.get(response.status)
    if template is not None:
        message = f'Instance ID "{instance_id}": {template}'
    else:
        payload = _json_payload(response)
        server_error = _error_object(payload)
        message = str(server_error) if server_error else _safe_text(response)
    return InstanceIdError(
        code=InstanceIdClientErrorCode.API_ERROR.value.code, message=message
    )


def database_error_from_http_error(error: Exception) -> Exception:
    """Map one rules-endpoint ``HttpError`` into ``DatabaseError``."""
    if not isinstance(error, HttpError):
        return error
    intro = "Error while accessing security rules"
    response = error.response
    try:
        body = response.data
    except AppError:
        body = None
    detail = _error_object(body)
    if isinstance(detail, str) and detail.strip():
        message = f"{intro}: {detail.strip()}"
    else:
        message = f"{intro}: {_safe_text(response)}"
    return DatabaseError(code="internal-error", message=message)
