# SPDX-License-Identifier: MIT
# Copyright (c) 2025 WUD contributors

"""WUD error reporting client.

Captures application errors with a filtered backtrace and posts them to a
Slack incoming webhook.

Example:
    >>> from wud import ReportingConfig, ReportingClient
    >>> client = ReportingClient(
    ...     ReportingConfig(app_name="wud", webhook_url="https://hooks.slack.com/services/...")
    ... )
    >>> client.report(InvalidAmount("amount exceeds limit"))
"""

import os

from .client import ReportingClient
from .config import (
    ENV_APP_NAME,
    ENV_TIMEOUT_SECONDS,
    ENV_WEBHOOK_URL,
    EnvConfigProvider,
    load_reporting_config,
)
from .delivery import WebhookDeliveryClient
from .error_reporter import ErrorReporter
from .event_builder import build_error_event
from .exceptions import ConfigurationError, DeliveryError, ReportError, WudError
from .frame_filter import FrameFilter
from .models import ErrorEvent, RawFrame, ReportingConfig, StackFrame, SymbolResolution
from .slack_formatter import format_slack_message
from .stack import StackCapture, capture_stack
from .taxonomy import ReportableError, resolve_error_type

__version__ = "0.1.0"


def create_reporting_client(
    app_name: str | None = None,
    webhook_url: str | None = None,
    timeout_seconds: float | None = None,
) -> ReportingClient:
    """Create a reporting client.

    Explicit arguments win; anything omitted is read from the ``WUD_*``
    environment variables.

    Args:
        app_name: Application name. Defaults to WUD_APP_NAME env.
        webhook_url: Webhook URL. Defaults to WUD_WEBHOOK_URL env.
        timeout_seconds: Request timeout. Defaults to WUD_TIMEOUT_SECONDS env or 5.

    Returns:
        ReportingClient instance

    Raises:
        ConfigurationError: If the name or URL is missing or invalid
    """
    environ = dict(os.environ)
    if app_name is not None:
        environ[ENV_APP_NAME] = app_name
    if webhook_url is not None:
        environ[ENV_WEBHOOK_URL] = webhook_url
    if timeout_seconds is not None:
        environ[ENV_TIMEOUT_SECONDS] = str(timeout_seconds)

    return ReportingClient(load_reporting_config(environ))


__all__ = [
    # Version
    "__version__",
    # Client
    "ErrorReporter",
    "ReportingClient",
    "create_reporting_client",
    # Pipeline
    "FrameFilter",
    "StackCapture",
    "WebhookDeliveryClient",
    "build_error_event",
    "capture_stack",
    "format_slack_message",
    # Models
    "ErrorEvent",
    "RawFrame",
    "ReportingConfig",
    "StackFrame",
    "SymbolResolution",
    # Taxonomy
    "ReportableError",
    "resolve_error_type",
    # Configuration
    "EnvConfigProvider",
    "load_reporting_config",
    # Exceptions
    "ConfigurationError",
    "DeliveryError",
    "ReportError",
    "WudError",
]
