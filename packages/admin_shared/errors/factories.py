"""Translate raw backend error tokens into typed service errors.

Each service contributes a ``ServiceErrorTable``: its error class, the mapping
from server tokens to client error entries, and the fallback entry used for
anything it does not recognise. ``from_server_error`` is the single code path
that every service factory goes through.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, cast

from .auth_codes import AUTH_SERVER_TO_CLIENT_CODE, AuthClientErrorCode
from .messaging_codes import (
    MESSAGING_SERVER_TO_CLIENT_CODE,
    TOPIC_MGT_SERVER_TO_CLIENT_CODE,
    MessagingClientErrorCode,
)
from .types import (
    AuthError,
    ErrorInfo,
    MessagingError,
    PrefixedFirebaseError,
)


class _Unset:
    """Marker for an omitted raw server response."""

    def __repr__(self) -> str:
        return "<unset>"


_UNSET: Any = _Unset()


@dataclass(frozen=True)
class ServiceErrorTable:
    """Static translation table for one service namespace."""

    error_type: type[PrefixedFirebaseError]
    server_codes: Mapping[str, Enum]
    fallback: Enum

    def lookup(self, server_code: str) -> Enum:
        """Return the client entry for one server token, or the fallback."""
        return self.server_codes.get(server_code, self.fallback)


AUTH_ERRORS = ServiceErrorTable(
    error_type=AuthError,
    server_codes=AUTH_SERVER_TO_CLIENT_CODE,
    fallback=AuthClientErrorCode.INTERNAL_ERROR,
)

MESSAGING_ERRORS = ServiceErrorTable(
    error_type=MessagingError,
    server_codes=MESSAGING_SERVER_TO_CLIENT_CODE,
    fallback=MessagingClientErrorCode.UNKNOWN_ERROR,
)

TOPIC_MANAGEMENT_ERRORS = ServiceErrorTable(
    error_type=MessagingError,
    server_codes=TOPIC_MGT_SERVER_TO_CLIENT_CODE,
    fallback=MessagingClientErrorCode.UNKNOWN_ERROR,
)


def _raw_response_suffix(raw_server_response: Any) -> str:
    """Render the raw payload suffix; empty when it cannot be serialised."""
    try:
        rendered = json.dumps(raw_server_response, separators=(",", ":"))
    except (TypeError, ValueError):
        return ""
    return f' Raw server response: "{rendered}"'


def from_server_error(
    table: ServiceErrorTable,
    server_code: str | None,
    message: str | None = None,
    raw_server_response: Any = _UNSET,
) -> PrefixedFirebaseError:
    """Build a typed error from one raw backend token.

    ``server_code`` may carry a detail after the first colon
    (``"CODE : detail"``); the left side is looked up and the detail, when
    non-empty, wins over ``message``. The raw payload is appended only when the
    token fell back to the table's default entry.
    """
    token = server_code or ""
    detail = ""
    if ":" in token:
        token, _, detail = token.partition(":")
        token = token.strip()
        detail = detail.strip()

    entry = table.lookup(token)
    info: ErrorInfo = entry.value
    resolved_message = detail or message or info.message
    if entry is table.fallback and raw_server_response is not _UNSET:
        resolved_message += _raw_response_suffix(raw_server_response)
    return table.error_type(code=info.code, message=resolved_message)


def auth_error_from_server(
    server_code: str | None,
    message: str | None = None,
    raw_server_response: Any = _UNSET,
) -> AuthError:
    """Translate one Identity Toolkit error token into ``AuthError``."""
    return cast(
        AuthError,
        from_server_error(AUTH_ERRORS, server_code, message, raw_server_response),
    )


def messaging_error_from_server(
    server_code: str | None,
    message: str | None = None,
    raw_server_response: Any = _UNSET,
) -> MessagingError:
    """Translate one FCM send error token into ``MessagingError``."""
    return cast(
        MessagingError,
        from_server_error(MESSAGING_ERRORS, server_code, message, raw_server_response),
    )


def messaging_error_from_topic_management(
    server_code: str | None,
    message: str | None = None,
    raw_server_response: Any = _UNSET,
) -> MessagingError:
    """Translate one Instance ID topic-management token into ``MessagingError``."""
    return cast(
        MessagingError,
        from_server_error(
            TOPIC_MANAGEMENT_ERRORS, server_code, message, raw_server_response
        ),
    )
