"""Shared client error codes for app-level and smaller service namespaces.

Auth and Messaging keep their larger tables in ``auth_codes`` and
``messaging_codes``. All tables here are static data.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping

from .types import ErrorInfo


class AppErrorCode(str, Enum):
    """Bare ``app/*`` error codes."""

    APP_DELETED = "app-deleted"
    DUPLICATE_APP = "duplicate-app"
    INVALID_ARGUMENT = "invalid-argument"
    INTERNAL_ERROR = "internal-error"
    INVALID_APP_NAME = "invalid-app-name"
    INVALID_APP_OPTIONS = "invalid-app-options"
    INVALID_CREDENTIAL = "invalid-credential"
    NETWORK_ERROR = "network-error"
    NETWORK_TIMEOUT = "network-timeout"
    NO_APP = "no-app"
    UNABLE_TO_PARSE_RESPONSE = "unable-to-parse-response"


class InstanceIdClientErrorCode(Enum):
    """Instance ID client errors and their default messages."""

    INVALID_ARGUMENT = ErrorInfo("invalid-argument", "Invalid argument provided.")
    INVALID_PROJECT_ID = ErrorInfo("invalid-project-id", "Invalid project ID provided.")
    INVALID_INSTANCE_ID = ErrorInfo(
        "invalid-instance-id", "Invalid instance ID provided."
    )
    API_ERROR = ErrorInfo("api-error", "Instance ID API call failed.")


# Instance ID failures are reported by status; the message names the instance.
INSTANCE_ID_STATUS_MESSAGES: Mapping[int, str] = MappingProxyType(
    {
        400: "Malformed instance ID argument.",
        401: "Request not authorized.",
        403: (
            "Project does not match instance ID or the client does not have "
            "sufficient privileges."
        ),
        404: "Failed to find the instance ID.",
        409: "Already deleted.",
        429: "Request throttled out by the backend server.",
        500: "Internal server error.",
        503: "Backend servers are over capacity. Try again later.",
    }
)


class SecurityRulesErrorCode(str, Enum):
    """Bare ``security-rules/*`` error codes."""

    ALREADY_EXISTS = "already-exists"
    AUTHENTICATION_ERROR = "authentication-error"
    INTERNAL_ERROR = "internal-error"
    INVALID_ARGUMENT = "invalid-argument"
    INVALID_SERVER_RESPONSE = "invalid-server-response"
    NOT_FOUND = "not-found"
    RESOURCE_EXHAUSTED = "resource-exhausted"
    SERVICE_UNAVAILABLE = "service-unavailable"
    UNKNOWN_ERROR = "unknown-error"


# Google canonical ``error.status`` values returned by the rules API.
SECURITY_RULES_SERVER_TO_CLIENT_CODE: Mapping[str, SecurityRulesErrorCode] = (
    MappingProxyType(
        {
            "INVALID_ARGUMENT": SecurityRulesErrorCode.INVALID_ARGUMENT,
            "NOT_FOUND": SecurityRulesErrorCode.NOT_FOUND,
            "RESOURCE_EXHAUSTED": SecurityRulesErrorCode.RESOURCE_EXHAUSTED,
            "UNAUTHENTICATED": SecurityRulesErrorCode.AUTHENTICATION_ERROR,
            "UNKNOWN": SecurityRulesErrorCode.UNKNOWN_ERROR,
        }
    )
)


class ProjectManagementErrorCode(str, Enum):
    """Bare ``project-management/*`` error codes."""

    ALREADY_EXISTS = "already-exists"
    AUTHENTICATION_ERROR = "authentication-error"
    INTERNAL_ERROR = "internal-error"
    INVALID_ARGUMENT = "invalid-argument"
    INVALID_PROJECT_ID = "invalid-project-id"
    INVALID_SERVER_RESPONSE = "invalid-server-response"
    NOT_FOUND = "not-found"
    SERVICE_UNAVAILABLE = "service-unavailable"
    UNKNOWN_ERROR = "unknown-error"


PROJECT_MANAGEMENT_STATUS_ERRORS: Mapping[int, ErrorInfo] = MappingProxyType(
    {
        400: ErrorInfo(
            ProjectManagementErrorCode.INVALID_ARGUMENT.value,
            "Invalid argument provided.",
        ),
        401: ErrorInfo(
            ProjectManagementErrorCode.AUTHENTICATION_ERROR.value,
            "An error occurred when trying to authenticate. Make sure the credential "
            "used to authenticate this SDK has the proper permissions. See "
            "https://firebase.google.com/docs/admin/setup for setup instructions.",
        ),
        403: ErrorInfo(
            ProjectManagementErrorCode.AUTHENTICATION_ERROR.value,
            "An error occurred when trying to authenticate. Make sure the credential "
            "used to authenticate this SDK has the proper permissions. See "
            "https://firebase.google.com/docs/admin/setup for setup instructions.",
        ),
        404: ErrorInfo(
            ProjectManagementErrorCode.NOT_FOUND.value,
            "The specified entity could not be found.",
        ),
        409: ErrorInfo(
            ProjectManagementErrorCode.ALREADY_EXISTS.value,
            "The specified entity already exists.",
        ),
        500: ErrorInfo(
            ProjectManagementErrorCode.INTERNAL_ERROR.value,
            "An internal error has occurred. Please retry the request.",
        ),
        503: ErrorInfo(
            ProjectManagementErrorCode.SERVICE_UNAVAILABLE.value,
            "The server could not process the request in time. See the error "
            "documentation for more details.",
        ),
    }
)

PROJECT_MANAGEMENT_UNKNOWN_ERROR = ErrorInfo(
    ProjectManagementErrorCode.UNKNOWN_ERROR.value,
    "An unknown server error was returned.",
)
