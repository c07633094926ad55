"""Public Firebase Admin SDK surface for service callers."""

from packages.admin_sdk.client import (
    CLIENT_VERSION_HEADER,
    AdminHttpClients,
    authorized_client_from_settings,
    configure_sdk_logging,
)
from packages.admin_sdk.credentials import (
    AccessToken,
    AsyncTokenProvider,
    StaticTokenProvider,
    TokenProvider,
)
from packages.admin_sdk.errors import (
    auth_error_from_http_error,
    canonical_error_from_http_error,
    database_error_from_http_error,
    get_messaging_error_code,
    instance_id_error_from_http_error,
    messaging_error_from_http_error,
    project_management_error_from_http_error,
)

__all__ = [
    "AccessToken",
    "AdminHttpClients",
    "AsyncTokenProvider",
    "CLIENT_VERSION_HEADER",
    "StaticTokenProvider",
    "TokenProvider",
    "auth_error_from_http_error",
    "authorized_client_from_settings",
    "canonical_error_from_http_error",
    "configure_sdk_logging",
    "database_error_from_http_error",
    "get_messaging_error_code",
    "instance_id_error_from_http_error",
    "messaging_error_from_http_error",
    "project_management_error_from_http_error",
]
