"""Outgoing request descriptors and their wire-ready preparation."""

from __future__ import annotations

import json
from dataclasses import dataclass, field, replace
from typing import Any, Mapping, Union

import httpx

from ..errors import AppError, AppErrorCode

SUPPORTED_METHODS = frozenset({"GET", "POST", "PUT", "PATCH", "DELETE", "HEAD"})
BODYLESS_METHODS = frozenset({"GET", "HEAD"})
DEFAULT_CONTENT_TYPE = "application/json;charset=utf-8"

HttpAgent = Union[httpx.Client, httpx.AsyncClient]


@dataclass(frozen=True)
class RequestDescriptor:
    """Caller-owned description of one outgoing HTTP call.

    Args:
        method: One of ``GET``, ``POST``, ``PUT``, ``PATCH``, ``DELETE``, ``HEAD``.
        url: Absolute URL; a missing scheme defaults to ``https``.
        headers: Extra request headers. Never mutated by the transport.
        data: ``str``, ``bytes`` or a JSON-serializable value. Not allowed on
            ``GET``/``HEAD``.
        params: Query parameters merged with any query already on ``url``.
        timeout: Whole-request timeout in seconds.
        http_agent: httpx client to send this call through instead of the
            transport's own client.
    """

    method: str
    url: str
    headers: Mapping[str, str] | None = None
    data: Any = None
    params: Mapping[str, Any] | None = None
    timeout: float | None = None
    http_agent: HttpAgent | None = field(default=None, compare=False)

    def with_headers(self, headers: Mapping[str, str]) -> RequestDescriptor:
        """Return a copy of this descriptor carrying ``headers``."""
        return replace(self, headers=dict(headers))


@dataclass(frozen=True)
class PreparedRequest:
    """Wire-ready request derived from one ``RequestDescriptor``."""

    method: str
    url: str
    headers: dict[str, str]
    content: bytes | None = None
    timeout: float | None = None

    @property
    def request_line(self) -> str:
        """Return ``METHOD url`` for diagnostics."""
        return f"{self.method} {self.url}"

    @property
    def timeout_millis(self) -> int | None:
        """Return the timeout in whole milliseconds, when one is set."""
        if self.timeout is None:
            return None
        return int(round(self.timeout * 1000))


def _network_error(message: str) -> AppError:
    return AppError(AppErrorCode.NETWORK_ERROR.value, message)


def has_header(headers: Mapping[str, str], name: str) -> bool:
    """Return whether ``headers`` contains ``name`` in any letter case."""
    lowered = name.lower()
    return any(key.lower() == lowered for key in headers)


def set_header(headers: dict[str, str], name: str, value: str) -> None:
    """Set ``name`` on ``headers``, replacing any case-variant of it in place."""
    lowered = name.lower()
    for key in [key for key in headers if key.lower() == lowered]:
        del headers[key]
    headers[name] = value


def encode_json(data: Any) -> bytes:
    """Encode ``data`` as compact UTF-8 JSON or raise ``app/network-error``."""
    try:
        return json.dumps(data, separators=(",", ":")).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise _network_error(
            "Request data must be a string, bytes or a JSON serializable value"
        ) from exc


def encode_body(data: Any) -> bytes:
    """Encode request data into bytes for the wire."""
    if isinstance(data, str):
        return data.encode("utf-8")
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    return encode_json(data)


def resolve_url(url: str, params: Mapping[str, Any] | None = None) -> str:
    """Apply the default scheme and merge ``params`` into the query string."""
    if "://" not in url:
        url = f"https://{url.lstrip('/')}"
    try:
        resolved = httpx.URL(url)
    except httpx.InvalidURL as exc:
        raise _network_error(f"Invalid request URL: {url}") from exc
    if params:
        # Repeated keys keep every value.
        merged = list(resolved.params.multi_items())
        merged.extend(httpx.QueryParams(params).multi_items())
        resolved = resolved.copy_with(params=httpx.QueryParams(merged))
    return str(resolved)


def prepare_request(descriptor: RequestDescriptor) -> PreparedRequest:
    """Validate one descriptor and build its wire-ready form.

    Raises ``AppError`` before any network activity when the descriptor cannot
    be sent.
    """
    method = descriptor.method.upper()
    if method not in SUPPORTED_METHODS:
        raise AppError(
            AppErrorCode.INVALID_ARGUMENT.value, f"Unsupported HTTP method: {method}"
        )
    if descriptor.data is not None and method in BODYLESS_METHODS:
        raise _network_error(f"{method} requests cannot have a body")

    headers = dict(descriptor.headers or {})
    content: bytes | None = None
    if descriptor.data is not None:
        content = encode_body(descriptor.data)
        if not has_header(headers, "Content-Type"):
            headers["Content-Type"] = DEFAULT_CONTENT_TYPE
        set_header(headers, "Content-Length", str(len(content)))

    return PreparedRequest(
        method=method,
        url=resolve_url(descriptor.url, descriptor.params),
        headers=headers,
        content=content,
        timeout=descriptor.timeout,
    )
