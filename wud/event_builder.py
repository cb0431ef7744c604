# SPDX-License-Identifier: MIT
# Copyright (c) 2025 WUD contributors

"""Construction of error events."""

from typing import Iterable

from .models import ErrorEvent, ReportingConfig, StackFrame


def build_error_event(
    config: ReportingConfig,
    error_type: str,
    error_message: str,
    frames: Iterable[StackFrame],
) -> ErrorEvent:
    """Assemble an immutable error event.

    Args:
        config: Reporting configuration supplying the application name
        error_type: Stable identifier of the error kind
        error_message: Human-readable error description
        frames: Filtered application frames

    Returns:
        ErrorEvent instance
    """
    return ErrorEvent(
        app_name=config.app_name,
        error_type=error_type,
        error_message=error_message,
        frames=tuple(frames),
    )
