"""Multipart batch requests: many JSON sub-requests in one HTTP call.

Each sub-request is serialized as a ``POST <url> HTTP/1.1`` message inside an
``application/http`` part. The server answers with one multipart response
whose parts are parsed back into ``HttpResponse`` objects, in request order.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Protocol, Sequence

from ..errors import AppError, AppErrorCode
from .request import RequestDescriptor, encode_json
from .response import HttpResponse, parse_http_response

PART_BOUNDARY = "__END_OF_PART__"
BATCH_TIMEOUT_SECONDS = 10.0


class SupportsSend(Protocol):
    def send(self, descriptor: RequestDescriptor) -> HttpResponse: ...


class SupportsAsyncSend(Protocol):
    async def send(self, descriptor: RequestDescriptor) -> HttpResponse: ...


@dataclass(frozen=True)
class SubRequest:
    """One JSON request embedded in a batch."""

    url: str
    body: Any
    headers: Mapping[str, str] = field(default_factory=dict)


def serialize_sub_request(request: SubRequest, headers: Mapping[str, str]) -> bytes:
    """Render one sub-request in HTTP/1.1 wire format."""
    body = encode_json(request.body)
    lines = [
        f"POST {request.url} HTTP/1.1",
        f"Content-Length: {len(body)}",
        "Content-Type: application/json; charset=UTF-8",
    ]
    lines.extend(f"{name}: {value}" for name, value in headers.items())
    head = "\r\n".join(lines) + "\r\n\r\n"
    return head.encode("utf-8") + body


def create_part(serialized: bytes, index: int, boundary: str = PART_BOUNDARY) -> bytes:
    """Wrap one serialized sub-request in its multipart envelope."""
    head = (
        f"--{boundary}\r\n"
        f"Content-Length: {len(serialized)}\r\n"
        "Content-Type: application/http\r\n"
        f"content-id: {index + 1}\r\n"
        "content-transfer-encoding: binary\r\n"
        "\r\n"
    )
    return head.encode("utf-8") + serialized + b"\r\n"


def _merge(*sources: Mapping[str, str] | None) -> dict[str, str]:
    merged: dict[str, str] = {}
    for source in sources:
        merged.update(source or {})
    return merged


class _BatchBuilder:
    def __init__(
        self, batch_url: str, common_headers: Mapping[str, str] | None = None
    ) -> None:
        self.batch_url = batch_url
        self.common_headers = dict(common_headers or {})

    def build(self, requests: Sequence[SubRequest]) -> RequestDescriptor:
        payload = b"".join(
            create_part(
                serialize_sub_request(
                    request, _merge(self.common_headers, request.headers)
                ),
                index,
            )
            for index, request in enumerate(requests)
        )
        payload += f"--{PART_BOUNDARY}--\r\n".encode("utf-8")
        return RequestDescriptor(
            method="POST",
            url=self.batch_url,
            headers=_merge(
                self.common_headers,
                {"Content-Type": f"multipart/mixed; boundary={PART_BOUNDARY}"},
            ),
            data=payload,
            timeout=BATCH_TIMEOUT_SECONDS,
        )

    def parse(self, response: HttpResponse) -> list[HttpResponse]:
        parts = response.multipart
        if parts is None:
            raise AppError(
                AppErrorCode.INTERNAL_ERROR.value, "Expected a multipart response."
            )
        return [parse_http_response(part, response.request) for part in parts]


class BatchRequestClient:
    """Send sub-requests as one multipart batch through a synchronous client."""

    def __init__(
        self,
        client: SupportsSend,
        batch_url: str,
        common_headers: Mapping[str, str] | None = None,
    ) -> None:
        self.client = client
        self._builder = _BatchBuilder(batch_url, common_headers)

    def send(self, requests: Sequence[SubRequest]) -> list[HttpResponse]:
        """Send the batch and return one response per sub-request."""
        response = self.client.send(self._builder.build(requests))
        return self._builder.parse(response)


class AsyncBatchRequestClient:
    """Send sub-requests as one multipart batch through an async client."""

    def __init__(
        self,
        client: SupportsAsyncSend,
        batch_url: str,
        common_headers: Mapping[str, str] | None = None,
    ) -> None:
        self.client = client
        self._builder = _BatchBuilder(batch_url, common_headers)

    async def send(self, requests: Sequence[SubRequest]) -> list[HttpResponse]:
        """Send the batch and return one response per sub-request."""
        response = await self.client.send(self._builder.build(requests))
        return self._builder.parse(response)
