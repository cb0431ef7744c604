# SPDX-License-Identifier: MIT
# Copyright (c) 2025 WUD contributors

"""Rendering of error events as Slack Block Kit messages.

The block layout is the contract with the receiving channel:

1. A header block: ``:warning: WUD Report | <app_name>``
2. A section with two fields, error type and error message
3. A section with the backtrace as a code block, only when frames exist
"""

from typing import Any

from .models import ErrorEvent

HEADER_PREFIX = ":warning: WUD Report"


def _header_block(event: ErrorEvent) -> dict[str, Any]:
    return {
        "type": "header",
        "text": {
            "type": "plain_text",
            "text": f"{HEADER_PREFIX} | {event.app_name}",
            "emoji": True,
        },
    }


def _fields_block(event: ErrorEvent) -> dict[str, Any]:
    return {
        "type": "section",
        "fields": [
            {"type": "mrkdwn", "text": f"*Error Type:*\n{event.error_type}"},
            {"type": "mrkdwn", "text": f"*Error Message:*\n{event.error_message}"},
        ],
    }


def _backtrace_block(event: ErrorEvent) -> dict[str, Any]:
    backtrace = "\n".join(frame.render() for frame in event.frames)
    return {
        "type": "section",
        "text": {
            "type": "mrkdwn",
            "text": f"```{backtrace}```",
        },
    }


def format_slack_message(event: ErrorEvent) -> dict[str, Any]:
    """Render an error event as a Slack message document.

    Args:
        event: The error event to render

    Returns:
        JSON-serializable message document
    """
    blocks = [_header_block(event), _fields_block(event)]
    if event.frames:
        blocks.append(_backtrace_block(event))
    return {"blocks": blocks}
