"""Shared HTTP transport for Firebase Admin service calls."""

from .auth import AsyncAuthorizedHttpClient, AuthorizedHttpClient
from .batch import (
    AsyncBatchRequestClient,
    BatchRequestClient,
    PART_BOUNDARY,
    SubRequest,
)
from .client import AsyncHttpClient, HttpClient
from .errors import HttpError
from .request import PreparedRequest, RequestDescriptor, prepare_request
from .response import HttpResponse, parse_http_response
from .retry import (
    IoFailure,
    RetryConfig,
    RetryDecision,
    RetryPolicy,
    default_retry_config,
    parse_retry_after,
)

__all__ = [
    "AsyncAuthorizedHttpClient",
    "AsyncBatchRequestClient",
    "AsyncHttpClient",
    "AuthorizedHttpClient",
    "BatchRequestClient",
    "HttpClient",
    "HttpError",
    "HttpResponse",
    "IoFailure",
    "PART_BOUNDARY",
    "PreparedRequest",
    "RequestDescriptor",
    "RetryConfig",
    "RetryDecision",
    "RetryPolicy",
    "SubRequest",
    "default_retry_config",
    "parse_http_response",
    "parse_retry_after",
    "prepare_request",
]
