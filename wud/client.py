# SPDX-License-Identifier: MIT
# Copyright (c) 2025 WUD contributors

"""Reporting client: captures, formats, and delivers error reports."""

import functools
import logging

from .delivery import WebhookDeliveryClient
from .error_reporter import ErrorReporter
from .event_builder import build_error_event
from .frame_filter import FrameFilter
from .models import ReportingConfig
from .slack_formatter import format_slack_message
from .stack import StackCapture, capture_stack
from .taxonomy import resolve_error_message, resolve_error_type

logger = logging.getLogger(__name__)


class ReportingClient(ErrorReporter):
    """Reports application errors to a Slack incoming webhook.

    The client holds only read-only configuration, so a single instance can
    be shared and called repeatedly. Concurrent calls share the delivery
    client's HTTP session, so their safety is whatever that session provides.

    Example:
        >>> config = ReportingConfig(app_name="wud", webhook_url="https://hooks.slack.com/services/...")
        >>> with ReportingClient(config) as client:
        ...     try:
        ...         process_payment(1, 100.0)
        ...     except InvalidAmount as e:
        ...         client.report(e)
    """

    def __init__(
        self,
        config: ReportingConfig,
        delivery_client: WebhookDeliveryClient | None = None,
        frame_filter: FrameFilter | None = None,
        stack_capture: StackCapture | None = None,
    ):
        """Initialize reporting client.

        Args:
            config: Reporting configuration
            delivery_client: Optional delivery client (defaults to one using
                the configured timeout)
            frame_filter: Optional frame filter (defaults to one built from
                the configured markers)
            stack_capture: Callable returning the current raw stack (defaults
                to ``capture_stack`` bounded by the filter's frame limit)
        """
        self.config = config
        self.delivery_client = delivery_client or WebhookDeliveryClient(
            timeout_seconds=config.timeout_seconds
        )
        self.frame_filter = frame_filter or FrameFilter(
            include_markers=config.app_root_markers or None,
            exclude_markers=config.exclude_markers or None,
        )
        self.stack_capture = stack_capture or functools.partial(
            capture_stack, limit=self.frame_filter.max_frames
        )

    def report(self, error: BaseException) -> None:
        """Report an error to the configured webhook.

        The local log line is written before delivery, so it survives a
        delivery failure.

        Args:
            error: The error to report

        Raises:
            DeliveryError: If the webhook could not be reached
        """
        raw_trace = self.stack_capture()
        error_type = resolve_error_type(error)
        error_message = resolve_error_message(error)

        frames = self.frame_filter.filter(raw_trace)
        event = build_error_event(self.config, error_type, error_message, frames)

        logger.error(f"{event.error_type}:{event.error_message}")

        document = format_slack_message(event)
        self.delivery_client.deliver(self.config.webhook_url, document)

    def close(self) -> None:
        """Release the delivery client's HTTP resources."""
        self.delivery_client.close()

    def __enter__(self) -> "ReportingClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
