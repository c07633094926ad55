"""Structured log keys used by the transport and its formatters."""

TIMESTAMP = "timestamp"
LEVEL = "level"
LOGGER = "logger"
MESSAGE = "message"

# Bound for the duration of one ``send``.
HTTP_METHOD = "http_method"
HTTP_URL = "http_url"
ATTEMPT = "attempt"

# Per-record extras on retry and failure lines.
DELAY_MS = "delay_ms"
HTTP_STATUS = "http_status"
ERROR_CODE = "error_code"

# Process-level, bound by ``configure_logging``.
SERVICE = "service"
ENVIRONMENT = "environment"
