"""Public error taxonomy for Firebase Admin service calls."""

from . import codes
from .auth_codes import AUTH_SERVER_TO_CLIENT_CODE, AuthClientErrorCode
from .codes import AppErrorCode
from .factories import (
    AUTH_ERRORS,
    MESSAGING_ERRORS,
    TOPIC_MANAGEMENT_ERRORS,
    ServiceErrorTable,
    auth_error_from_server,
    from_server_error,
    messaging_error_from_server,
    messaging_error_from_topic_management,
)
from .messaging_codes import (
    MESSAGING_SERVER_TO_CLIENT_CODE,
    TOPIC_MGT_SERVER_TO_CLIENT_CODE,
    MessagingClientErrorCode,
)
from .types import (
    AppError,
    AuthError,
    DatabaseError,
    ErrorInfo,
    FirebaseError,
    FirestoreError,
    InstanceIdError,
    MessagingError,
    PrefixedFirebaseError,
    ProjectManagementError,
    SecurityRulesError,
    has_code,
)

__all__ = [
    "AUTH_ERRORS",
    "AUTH_SERVER_TO_CLIENT_CODE",
    "AppError",
    "AppErrorCode",
    "AuthClientErrorCode",
    "AuthError",
    "DatabaseError",
    "ErrorInfo",
    "FirebaseError",
    "FirestoreError",
    "InstanceIdError",
    "MESSAGING_ERRORS",
    "MESSAGING_SERVER_TO_CLIENT_CODE",
    "MessagingClientErrorCode",
    "MessagingError",
    "PrefixedFirebaseError",
    "ProjectManagementError",
    "SecurityRulesError",
    "ServiceErrorTable",
    "TOPIC_MANAGEMENT_ERRORS",
    "TOPIC_MGT_SERVER_TO_CLIENT_CODE",
    "auth_error_from_server",
    "codes",
    "from_server_error",
    "has_code",
    "messaging_error_from_server",
    "messaging_error_from_topic_management",
]
