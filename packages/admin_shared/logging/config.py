"""Stream logging setup for processes using the Firebase Admin transport.

One handler on the root logger, either newline-delimited JSON or a readable
single line, with the bound request context (method, url, attempt) attached to
every record. httpx and httpcore log every request at INFO; they are raised to
WARNING unless the caller opts out.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from typing import IO, Any

from . import fields
from .context import bind_context, get_context

_QUIET_LOGGERS = ("httpx", "httpcore")
_RECORD_EXTRAS = (fields.DELAY_MS, fields.HTTP_STATUS, fields.ERROR_CODE)


class ContextFilter(logging.Filter):
    """Copy the current logging context onto each record as ``record.context``."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.context = get_context()
        return True


def _record_context(record: logging.LogRecord) -> dict[str, str]:
    context = getattr(record, "context", None)
    return context if isinstance(context, dict) else {}


class JsonFormatter(logging.Formatter):
    """Render one JSON object per record: core fields first, then context."""

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, UTC)
        payload: dict[str, Any] = {
            fields.TIMESTAMP: created.isoformat(),
            fields.LEVEL: record.levelname,
            fields.LOGGER: record.name,
            fields.MESSAGE: record.getMessage(),
            **_record_context(record),
        }
        for key in _RECORD_EXTRAS:
            value = getattr(record, key, None)
            if value is not None:
                payload[key] = value
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str, separators=(",", ":"))


class PlainFormatter(logging.Formatter):
    """Readable single-line output with sorted ``key=value`` context pairs."""

    def __init__(self) -> None:
        super().__init__(
            fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S%z",
        )

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        pairs = sorted(_record_context(record).items())
        if not pairs:
            return line
        return line + " " + " ".join(f"{key}={value}" for key, value in pairs)


def _build_handler(
    level: str, json_output: bool, stream: IO[str] | None
) -> logging.Handler:
    handler = logging.StreamHandler(stream=stream or sys.stdout)
    handler.setLevel(level)
    handler.addFilter(ContextFilter())
    handler.setFormatter(JsonFormatter() if json_output else PlainFormatter())
    return handler


def configure_logging(
    *,
    level: str = "INFO",
    json_output: bool = True,
    service: str | None = None,
    environment: str | None = None,
    quiet_http_libraries: bool = True,
    stream: IO[str] | None = None,
) -> logging.Handler:
    """Install a single root handler and return it.

    Previous root handlers are removed, so calling this twice never doubles
    output. ``service`` and ``environment`` are bound into the logging context.
    """
    resolved_level = level.upper()
    handler = _build_handler(resolved_level, json_output, stream)

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(resolved_level)

    if quiet_http_libraries:
        for name in _QUIET_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)

    bind_context(**{fields.SERVICE: service, fields.ENVIRONMENT: environment})
    return handler


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a standard library logger for ``name``."""
    return logging.getLogger(name)
