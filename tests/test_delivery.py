# SPDX-License-Identifier: MIT
# Copyright (c) 2025 WUD contributors

"""Tests for webhook delivery."""

import json
import logging
from unittest.mock import MagicMock, PropertyMock, patch

import pytest
import requests

from wud import DeliveryError, ReportError, WebhookDeliveryClient

DOCUMENT = {"blocks": [{"type": "header", "text": {"type": "plain_text", "text": "hi"}}]}


class TestWebhookDeliveryClient:
    """Tests for WebhookDeliveryClient."""

    def test_posts_json_once(self, mock_session, webhook_url):
        """Test that a single JSON POST is sent to the endpoint."""
        client = WebhookDeliveryClient(timeout_seconds=3, session=mock_session)

        status = client.deliver(webhook_url, DOCUMENT)

        assert status == 200
        mock_session.post.assert_called_once()
        call_args = mock_session.post.call_args
        assert call_args[0][0] == webhook_url
        assert call_args[1]["headers"] == {"Content-Type": "application/json"}
        assert call_args[1]["timeout"] == 3
        assert json.loads(call_args[1]["data"]) == DOCUMENT

    def test_response_is_closed(self, mock_session, webhook_url):
        """Test that the response is released after delivery."""
        client = WebhookDeliveryClient(session=mock_session)

        client.deliver(webhook_url, DOCUMENT)

        mock_session.post.return_value.__exit__.assert_called_once()

    def test_response_is_closed_when_body_read_fails(self, mock_session, webhook_url):
        """Test that the response is released when reading the body fails."""
        response = mock_session.post.return_value
        type(response).content = PropertyMock(
            side_effect=requests.exceptions.ChunkedEncodingError("connection broken")
        )
        client = WebhookDeliveryClient(session=mock_session)

        with pytest.raises(DeliveryError):
            client.deliver(webhook_url, DOCUMENT)

        response.__exit__.assert_called_once()

    @pytest.mark.parametrize(
        "error",
        [
            requests.ConnectionError("connection refused"),
            requests.Timeout("timed out"),
            requests.exceptions.SSLError("bad certificate"),
            requests.exceptions.ChunkedEncodingError("body read failed"),
        ],
    )
    def test_transport_failure_raises_delivery_error(self, mock_session, webhook_url, error):
        """Test that transport failures surface as DeliveryError."""
        mock_session.post.side_effect = error
        client = WebhookDeliveryClient(session=mock_session)

        with pytest.raises(DeliveryError) as exc_info:
            client.deliver(webhook_url, DOCUMENT)

        assert exc_info.value.__cause__ is error
        assert isinstance(exc_info.value, ReportError)

    def test_failure_does_not_leak_url(self, mock_session, webhook_url, caplog):
        """Test that the secret webhook URL stays out of logs and messages."""
        mock_session.post.side_effect = requests.ConnectionError(f"cannot reach {webhook_url}")
        client = WebhookDeliveryClient(session=mock_session)

        with caplog.at_level(logging.WARNING, logger="wud.delivery"):
            with pytest.raises(DeliveryError) as exc_info:
                client.deliver(webhook_url, DOCUMENT)

        assert webhook_url not in str(exc_info.value)
        assert webhook_url not in caplog.text
        assert "ConnectionError" in caplog.text

    def test_no_retry(self, mock_session, webhook_url):
        """Test that a failed delivery is attempted exactly once."""
        mock_session.post.side_effect = requests.ConnectionError("down")
        client = WebhookDeliveryClient(session=mock_session)

        with pytest.raises(DeliveryError):
            client.deliver(webhook_url, DOCUMENT)

        assert mock_session.post.call_count == 1

    def test_non_2xx_is_not_a_failure(self, mock_session, webhook_url, caplog):
        """Test that an error status is logged and returned, not raised."""
        mock_session.post.return_value.status_code = 404

        client = WebhookDeliveryClient(session=mock_session)
        with caplog.at_level(logging.WARNING, logger="wud.delivery"):
            status = client.deliver(webhook_url, DOCUMENT)

        assert status == 404
        assert "HTTP 404" in caplog.text

    def test_unserializable_document(self, mock_session, webhook_url):
        """Test that a document that cannot be serialized raises DeliveryError."""
        client = WebhookDeliveryClient(session=mock_session)

        with pytest.raises(DeliveryError, match="serialize"):
            client.deliver(webhook_url, {"blocks": [object()]})

        mock_session.post.assert_not_called()

    def test_default_session(self):
        """Test that a requests session is created when none is given."""
        with patch("wud.delivery.requests.Session") as mock_session_cls:
            client = WebhookDeliveryClient()

        assert client.session is mock_session_cls.return_value
        assert client.timeout_seconds == 5.0

    def test_close(self):
        """Test that close releases the session."""
        session = MagicMock()
        client = WebhookDeliveryClient(session=session)

        client.close()

        session.close.assert_called_once()
