"""Typed configuration models for Firebase Admin runtime settings."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

from ..http.retry import RetryConfig

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "firebase-admin" / "admin.yaml"


class LoggingSettings(BaseModel):
    """Structured logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    json_output: bool = True
    service: str = "firebase-admin"
    environment: str = "dev"
    quiet_http_libraries: bool = True


class RetrySettings(BaseModel):
    """Retry policy for outgoing requests; ``enabled=False`` disables retries."""

    enabled: bool = True
    max_retries: int = Field(default=4, ge=0)
    io_error_codes: list[str] = Field(
        default_factory=lambda: ["ECONNRESET", "ETIMEDOUT"]
    )
    status_codes: list[int] = Field(default_factory=lambda: [503])
    max_delay_in_millis: int = Field(default=60_000, ge=0)
    backoff_factor: float | None = Field(default=0.5, ge=0)

    def to_retry_config(self) -> RetryConfig | None:
        """Return the equivalent ``RetryConfig``, or ``None`` when disabled."""
        if not self.enabled:
            return None
        return RetryConfig(
            max_retries=self.max_retries,
            io_error_codes=frozenset(self.io_error_codes),
            status_codes=frozenset(self.status_codes),
            max_delay_in_millis=self.max_delay_in_millis,
            backoff_factor=self.backoff_factor,
        )


class HttpSettings(BaseModel):
    """Transport settings shared by every service client."""

    timeout_seconds: float | None = Field(default=10.0, gt=0)
    client_version: str = "firebase-admin-python/0.1.0"
    retry: RetrySettings = Field(default_factory=RetrySettings)


class AdminSettings(BaseSettings):
    """Process-wide Firebase Admin settings: logging plus HTTP transport."""

    model_config = SettingsConfigDict(
        env_prefix="FIREBASE_ADMIN_",
        env_nested_delimiter="__",
        extra="ignore",
        nested_model_default_partial_update=True,
        yaml_file=DEFAULT_CONFIG_PATH,
        yaml_file_encoding="utf-8",
    )

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    http: HttpSettings = Field(default_factory=HttpSettings)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Apply precedence: init > env > yaml > model defaults."""
        return (
            init_settings,
            env_settings,
            YamlConfigSettingsSource(settings_cls),
        )
