"""Resolve ``AdminSettings`` for one process.

Explicit ``cli_params`` beat ``FIREBASE_ADMIN_*`` environment variables, which
beat the YAML file, which beats the model defaults. Nested keys use ``__`` in
variable names, so ``FIREBASE_ADMIN_HTTP__RETRY__MAX_RETRIES=2`` sets
``http.retry.max_retries``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

from pydantic_settings import SettingsConfigDict

from .models import DEFAULT_CONFIG_PATH, AdminSettings


def load_settings(
    *,
    cli_params: Mapping[str, Any] | None = None,
    config_path: str | Path | None = None,
) -> AdminSettings:
    """Resolve ``AdminSettings`` from init params, env and one YAML file.

    A missing YAML file is treated as empty.
    """
    resolved = Path(config_path) if config_path is not None else DEFAULT_CONFIG_PATH

    class _FileBoundSettings(AdminSettings):
        model_config = SettingsConfigDict(yaml_file=resolved)

    return _FileBoundSettings(**dict(cli_params or {}))
