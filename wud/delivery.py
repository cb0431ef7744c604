# SPDX-License-Identifier: MIT
# Copyright (c) 2025 WUD contributors

"""Webhook delivery of formatted error reports."""

import json
import logging
from typing import Any

import requests

from .exceptions import DeliveryError
from .models import DEFAULT_TIMEOUT_SECONDS

logger = logging.getLogger(__name__)


class WebhookDeliveryClient:
    """Posts JSON documents to an incoming webhook.

    Each ``deliver`` call makes exactly one request. There is no retry,
    backoff, or queueing. Webhook URLs embed their credentials, so they are
    never written to logs or exception messages.
    """

    def __init__(
        self,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        session: requests.Session | None = None,
    ):
        """Initialize webhook delivery client.

        Args:
            timeout_seconds: Request timeout in seconds (default: 5)
            session: Optional requests session to send through
        """
        self.timeout_seconds = timeout_seconds
        self.session = session or requests.Session()

    def deliver(self, endpoint_url: str, document: dict[str, Any]) -> int:
        """Send a document to the webhook endpoint.

        Args:
            endpoint_url: Webhook URL
            document: JSON-serializable message document

        Returns:
            HTTP status code of the response

        Raises:
            DeliveryError: If serialization or the HTTP transport fails
        """
        try:
            body = json.dumps(document)
        except (TypeError, ValueError) as e:
            raise DeliveryError(f"Failed to serialize report payload: {e}") from e

        try:
            with self.session.post(
                endpoint_url,
                data=body.encode("utf-8"),
                headers={"Content-Type": "application/json"},
                timeout=self.timeout_seconds,
            ) as response:
                # Read the body fully so the connection is released
                response.content
                status_code = response.status_code
        except requests.RequestException as e:
            # Transport errors quote the request URL, so only the type is logged
            logger.warning(f"Webhook delivery failed: {type(e).__name__}")
            raise DeliveryError(f"Webhook delivery failed: {type(e).__name__}") from e

        if not 200 <= status_code < 300:
            logger.warning(f"Webhook responded with HTTP {status_code}")
        else:
            logger.debug(f"Webhook responded with HTTP {status_code}")

        return status_code

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.session.close()
