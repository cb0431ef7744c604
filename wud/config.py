# SPDX-License-Identifier: MIT
# Copyright (c) 2025 WUD contributors

"""Environment-backed configuration for the reporting client."""

import os
from typing import Any, Mapping

from .exceptions import ConfigurationError
from .models import DEFAULT_TIMEOUT_SECONDS, ReportingConfig

ENV_APP_NAME = "WUD_APP_NAME"
ENV_WEBHOOK_URL = "WUD_WEBHOOK_URL"
ENV_TIMEOUT_SECONDS = "WUD_TIMEOUT_SECONDS"
ENV_APP_ROOT_MARKERS = "WUD_APP_ROOT_MARKERS"
ENV_EXCLUDE_MARKERS = "WUD_EXCLUDE_MARKERS"


class EnvConfigProvider:
    """Configuration provider that reads from environment variables."""

    def __init__(self, environ: Mapping[str, str] | None = None):
        self._environ = environ if environ is not None else os.environ

    def get(self, key: str, default: Any = None) -> Any:
        return self._environ.get(key, default)

    def get_float(self, key: str, default: float = 0.0) -> float:
        value = self._environ.get(key)
        if value is None:
            return default
        try:
            return float(value)
        except ValueError:
            return default

    def get_list(self, key: str, separator: str = ",") -> list[str]:
        """Get a separated list value, dropping blank entries."""
        value = self._environ.get(key)
        if not value:
            return []
        return [item.strip() for item in value.split(separator) if item.strip()]


def load_reporting_config(environ: Mapping[str, str] | None = None) -> ReportingConfig:
    """Load reporting configuration from environment variables.

    Args:
        environ: Optional mapping to read instead of ``os.environ``

    Returns:
        ReportingConfig instance

    Raises:
        ConfigurationError: If a required variable is missing or a value is invalid
    """
    provider = EnvConfigProvider(environ)

    app_name = provider.get(ENV_APP_NAME)
    if not app_name:
        raise ConfigurationError(f"{ENV_APP_NAME} environment variable is required")

    webhook_url = provider.get(ENV_WEBHOOK_URL)
    if not webhook_url:
        raise ConfigurationError(f"{ENV_WEBHOOK_URL} environment variable is required")

    return ReportingConfig(
        app_name=app_name,
        webhook_url=webhook_url,
        timeout_seconds=provider.get_float(ENV_TIMEOUT_SECONDS, DEFAULT_TIMEOUT_SECONDS),
        app_root_markers=tuple(provider.get_list(ENV_APP_ROOT_MARKERS)),
        exclude_markers=tuple(provider.get_list(ENV_EXCLUDE_MARKERS)),
    )
