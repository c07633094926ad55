"""Immutable HTTP response model shared by the transport and batch helpers."""

from __future__ import annotations

import gzip
import json
import re
import zlib
from dataclasses import dataclass, field
from email.message import Message
from functools import cached_property
from types import MappingProxyType
from typing import Any, Mapping

import httpx

from ..errors import AppError, AppErrorCode

_STATUS_LINE = re.compile(r"^HTTP/\d+(?:\.\d+)?\s+(\d{3})(?:\s+.*)?$")
_HEADER_BREAK = b"\r\n\r\n"


def _parse_error(message: str) -> AppError:
    return AppError(AppErrorCode.UNABLE_TO_PARSE_RESPONSE.value, message)


@dataclass(frozen=True)
class HttpResponse:
    """One completed HTTP response with lazily computed body views.

    Header names are lowercase. ``body`` is already decompressed; a gzip or
    deflate ``content-encoding`` header is not exposed.
    """

    status: int
    headers: Mapping[str, str] = field(default_factory=dict)
    body: bytes = b""
    request: str = ""

    def __post_init__(self) -> None:
        normalized = {str(name).lower(): value for name, value in self.headers.items()}
        object.__setattr__(self, "headers", MappingProxyType(normalized))

    @classmethod
    def from_httpx(cls, response: httpx.Response) -> HttpResponse:
        """Normalize one fully-read ``httpx.Response``.

        httpx decodes gzip/deflate bodies on read, so the encoding header is
        dropped to keep ``headers`` consistent with ``body``.
        """
        headers = {
            name: value
            for name, value in response.headers.items()
            if name.lower() != "content-encoding"
        }
        request = response.request
        return cls(
            status=response.status_code,
            headers=headers,
            body=response.content,
            request=f"{request.method} {request.url}",
        )

    @property
    def content_type(self) -> str:
        """Return the raw ``content-type`` header, or an empty string."""
        return self.headers.get("content-type", "")

    def is_json(self) -> bool:
        """Return whether the response declares a JSON body."""
        return self.content_type.startswith("application/json")

    @cached_property
    def multipart(self) -> list[bytes] | None:
        """Return each MIME part body for multipart responses, else ``None``."""
        if "multipart/" not in self.content_type:
            return None
        header = Message()
        header["content-type"] = self.content_type
        boundary = header.get_boundary()
        if not boundary:
            raise _parse_error("Multipart response is missing a boundary.")
        return split_multipart(self.body, boundary)

    @cached_property
    def text(self) -> str:
        """Return the UTF-8 body with trailing whitespace trimmed."""
        if self.multipart is not None:
            raise _parse_error("Unable to parse multipart payload as text")
        return self.body.decode("utf-8", errors="replace").rstrip()

    @cached_property
    def data(self) -> Any:
        """Return the JSON-decoded body."""
        if self.multipart is not None:
            raise _parse_error("Unable to parse multipart payload as JSON")
        try:
            return json.loads(self.text)
        except ValueError as exc:
            raise _parse_error(
                f'Error while parsing response data: "{exc}". Raw server '
                f'response: "{self.text}". Status code: "{self.status}". '
                f'Outgoing request: "{self.request}."'
            ) from exc


def split_multipart(body: bytes, boundary: str) -> list[bytes]:
    """Split a multipart body into part payloads, dropping each part's headers."""
    delimiter = b"--" + boundary.encode("ascii")
    parts: list[bytes] = []
    for chunk in body.split(delimiter)[1:]:
        if chunk.startswith(b"--"):
            break
        # Discard the remainder of the boundary line.
        _, _, chunk = chunk.partition(b"\r\n")
        if chunk.endswith(b"\r\n"):
            chunk = chunk[:-2]
        if chunk.startswith(b"\r\n"):
            parts.append(chunk[2:])
            continue
        _, found, payload = chunk.partition(_HEADER_BREAK)
        parts.append(payload if found else b"")
    return parts


def _decompress(body: bytes, encoding: str) -> bytes:
    try:
        if encoding == "gzip":
            return gzip.decompress(body)
        try:
            return zlib.decompress(body)
        except zlib.error:
            # Some servers send raw deflate streams without the zlib wrapper.
            return zlib.decompress(body, -zlib.MAX_WBITS)
    except (OSError, EOFError, zlib.error) as exc:
        raise _parse_error(
            f"Failed to decompress {encoding} response body: {exc}"
        ) from exc


def parse_http_response(raw: bytes | str, request: str = "") -> HttpResponse:
    """Parse one serialized HTTP/1.x response, such as a batch sub-response.

    The input looks like ``HTTP/1.1 200 OK\\r\\nName: value\\r\\n\\r\\n<body>``.
    Compressed bodies are inflated and the encoding header removed.
    """
    data = raw.encode("utf-8") if isinstance(raw, str) else raw
    head, _, body = data.partition(_HEADER_BREAK)

    lines = head.decode("iso-8859-1").split("\r\n")
    match = _STATUS_LINE.match(lines[0].strip())
    if match is None:
        raise _parse_error("Malformed HTTP status line.")

    headers: dict[str, str] = {}
    for line in lines[1:]:
        name, colon, value = line.partition(":")
        if not colon:
            continue
        headers[name.strip().lower()] = value.strip()

    encoding = headers.pop("content-encoding", "").strip().lower()
    if encoding in {"gzip", "deflate"}:
        body = _decompress(body, encoding)
    else:
        if encoding:
            headers["content-encoding"] = encoding
        if body.endswith(b"\n"):
            body = body[:-1]
        if body.endswith(b"\r"):
            body = body[:-1]

    return HttpResponse(
        status=int(match.group(1)), headers=headers, body=body, request=request
    )
