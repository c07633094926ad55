"""Firebase Cloud Messaging client error table and server token mappings."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping

from .types import ErrorInfo


class MessagingClientErrorCode(Enum):
    """Messaging client errors and their default messages."""

    INVALID_ARGUMENT = ErrorInfo("invalid-argument", "Invalid argument provided.")
    INVALID_RECIPIENT = ErrorInfo(
        "invalid-recipient", "Invalid message recipient provided."
    )
    INVALID_PAYLOAD = ErrorInfo("invalid-payload", "Invalid message payload provided.")
    INVALID_DATA_PAYLOAD_KEY = ErrorInfo(
        "invalid-data-payload-key",
        "The data message payload contains an invalid key. See the reference "
        "documentation for the DataMessagePayload type for restricted keys.",
    )
    PAYLOAD_SIZE_LIMIT_EXCEEDED = ErrorInfo(
        "payload-size-limit-exceeded",
        "The provided message payload exceeds the FCM size limits. See the error "
        "documentation for more details.",
    )
    INVALID_OPTIONS = ErrorInfo("invalid-options", "Invalid message options provided.")
    INVALID_REGISTRATION_TOKEN = ErrorInfo(
        "invalid-registration-token",
        "Invalid registration token provided. Make sure it matches the "
        "registration token the client app receives from registering with FCM.",
    )
    REGISTRATION_TOKEN_NOT_REGISTERED = ErrorInfo(
        "registration-token-not-registered",
        "The provided registration token is not registered. A previously valid "
        "registration token can be unregistered for a variety of reasons. See the "
        "error documentation for more details. Remove this registration token and "
        "stop using it to send messages.",
    )
    MISMATCHED_CREDENTIAL = ErrorInfo(
        "mismatched-credential",
        "The credential used to authenticate this SDK does not have permission to "
        "send messages to the device corresponding to the provided registration "
        "token. Make sure the credential and registration token both belong to the "
        "same Firebase project.",
    )
    INVALID_PACKAGE_NAME = ErrorInfo(
        "invalid-package-name",
        "The message was addressed to a registration token whose package name does "
        'not match the provided "restrictedPackageName" option.',
    )
    DEVICE_MESSAGE_RATE_EXCEEDED = ErrorInfo(
        "device-message-rate-exceeded",
        "The rate of messages to a particular device is too high. Reduce the "
        "number of messages sent to this device and do not immediately retry "
        "sending to this device.",
    )
    TOPICS_MESSAGE_RATE_EXCEEDED = ErrorInfo(
        "topics-message-rate-exceeded",
        "The rate of messages to subscribers to a particular topic is too high. "
        "Reduce the number of messages sent for this topic, and do not immediately "
        "retry sending to this topic.",
    )
    MESSAGE_RATE_EXCEEDED = ErrorInfo(
        "message-rate-exceeded", "Sending limit exceeded for the message target."
    )
    THIRD_PARTY_AUTH_ERROR = ErrorInfo(
        "third-party-auth-error",
        "A message targeted to an iOS device could not be sent because the "
        "required APNs SSL certificate was not uploaded or has expired. Check the "
        "validity of your development and production certificates.",
    )
    TOO_MANY_TOPICS = ErrorInfo(
        "too-many-topics",
        "The maximum number of topics the provided registration token can be "
        "subscribed to has been exceeded.",
    )
    AUTHENTICATION_ERROR = ErrorInfo(
        "authentication-error",
        "An error occurred when trying to authenticate to the FCM servers. Make "
        "sure the credential used to authenticate this SDK has the proper "
        "permissions. See https://firebase.google.com/docs/admin/setup for setup "
        "instructions.",
    )
    SERVER_UNAVAILABLE = ErrorInfo(
        "server-unavailable",
        "The FCM server could not process the request in time. See the error "
        "documentation for more details.",
    )
    INTERNAL_ERROR = ErrorInfo(
        "internal-error", "An internal error has occurred. Please retry the request."
    )
    UNKNOWN_ERROR = ErrorInfo("unknown-error", "An unknown server error was returned.")


_M = MessagingClientErrorCode

MESSAGING_SERVER_TO_CLIENT_CODE: Mapping[str, MessagingClientErrorCode] = (
    MappingProxyType(
        {
            # Legacy HTTP API tokens.
            "InvalidParameters": _M.INVALID_ARGUMENT,
            "MismatchSenderId": _M.MISMATCHED_CREDENTIAL,
            "Unavailable": _M.SERVER_UNAVAILABLE,
            "InternalServerError": _M.INTERNAL_ERROR,
            "InvalidRegistration": _M.INVALID_REGISTRATION_TOKEN,
            "NotRegistered": _M.REGISTRATION_TOKEN_NOT_REGISTERED,
            "InvalidPackageName": _M.INVALID_PACKAGE_NAME,
            "MessageTooBig": _M.PAYLOAD_SIZE_LIMIT_EXCEEDED,
            "InvalidDataKey": _M.INVALID_DATA_PAYLOAD_KEY,
            "InvalidTtl": _M.INVALID_OPTIONS,
            "DeviceMessageRateExceeded": _M.DEVICE_MESSAGE_RATE_EXCEEDED,
            "TopicsMessageRateExceeded": _M.TOPICS_MESSAGE_RATE_EXCEEDED,
            "InvalidApnsCredential": _M.THIRD_PARTY_AUTH_ERROR,
            # FCM v1 canonical codes.
            "NOT_FOUND": _M.REGISTRATION_TOKEN_NOT_REGISTERED,
            "PERMISSION_DENIED": _M.MISMATCHED_CREDENTIAL,
            "RESOURCE_EXHAUSTED": _M.MESSAGE_RATE_EXCEEDED,
            "UNAUTHENTICATED": _M.THIRD_PARTY_AUTH_ERROR,
            # FCM v1 error codes.
            "APNS_AUTH_ERROR": _M.THIRD_PARTY_AUTH_ERROR,
            "INTERNAL": _M.INTERNAL_ERROR,
            "INVALID_ARGUMENT": _M.INVALID_ARGUMENT,
            "QUOTA_EXCEEDED": _M.MESSAGE_RATE_EXCEEDED,
            "SENDER_ID_MISMATCH": _M.MISMATCHED_CREDENTIAL,
            "THIRD_PARTY_AUTH_ERROR": _M.THIRD_PARTY_AUTH_ERROR,
            "UNAVAILABLE": _M.SERVER_UNAVAILABLE,
            "UNREGISTERED": _M.REGISTRATION_TOKEN_NOT_REGISTERED,
            "UNSPECIFIED_ERROR": _M.UNKNOWN_ERROR,
        }
    )
)

TOPIC_MGT_SERVER_TO_CLIENT_CODE: Mapping[str, MessagingClientErrorCode] = (
    MappingProxyType(
        {
            "NOT_FOUND": _M.REGISTRATION_TOKEN_NOT_REGISTERED,
            "INVALID_ARGUMENT": _M.INVALID_REGISTRATION_TOKEN,
            "TOO_MANY_TOPICS": _M.TOO_MANY_TOPICS,
            "RESOURCE_EXHAUSTED": _M.TOO_MANY_TOPICS,
            "PERMISSION_DENIED": _M.AUTHENTICATION_ERROR,
            "DEADLINE_EXCEEDED": _M.SERVER_UNAVAILABLE,
            "INTERNAL": _M.INTERNAL_ERROR,
            "UNKNOWN": _M.UNKNOWN_ERROR,
        }
    )
)
