"""Plain-dict view of the settings used when no init, env or YAML value is set.

Kept equal to ``AdminSettings().model_dump()``; handy for writing a starter
``admin.yaml``.
"""

from __future__ import annotations

from typing import Any

BUILTIN_DEFAULTS: dict[str, Any] = {
    "logging": {
        "level": "INFO",
        "json_output": True,
        "service": "firebase-admin",
        "environment": "dev",
        "quiet_http_libraries": True,
    },
    "http": {
        "timeout_seconds": 10.0,
        "client_version": "firebase-admin-python/0.1.0",
        "retry": {
            "enabled": True,
            "max_retries": 4,
            "io_error_codes": ["ECONNRESET", "ETIMEDOUT"],
            "status_codes": [503],
            "max_delay_in_millis": 60000,
            "backoff_factor": 0.5,
        },
    },
}
