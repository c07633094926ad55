"""Public API for Firebase Admin configuration utilities."""

from .defaults import BUILTIN_DEFAULTS
from .loader import load_settings
from .models import (
    DEFAULT_CONFIG_PATH,
    AdminSettings,
    HttpSettings,
    LoggingSettings,
    RetrySettings,
)

__all__ = [
    "BUILTIN_DEFAULTS",
    "DEFAULT_CONFIG_PATH",
    "AdminSettings",
    "HttpSettings",
    "LoggingSettings",
    "RetrySettings",
    "load_settings",
]
