"""Mailjet implementation of the NotificationPort.

Sends interest notifications through the Mailjet Send API v3.1:

    POST https://api.mailjet.com/v3.1/send
    Authorization: Basic <api_key:secret_key>
    {"Messages": [{"From": ..., "To": [...], "Subject": ..., "TextPart": ...}]}

The response carries one entry per message with a "Status" of "success"
or "error".
"""

import logging
from typing import Any, Optional

import httpx

from ...domain.errors import NotificationDeliveryError
from ...domain.notifications.ports import (
    InterestNotification,
    NotificationPort,
    NotificationResult,
)
from ...domain.notifications.templates import render_subject, render_text

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.mailjet.com/v3.1/send"


class MailjetNotifier(NotificationPort):
    """Notification transport using Mailjet over httpx.

    One instance is built per process and injected where needed; the
    underlying httpx.Client keeps its connection pool between sends.

    Args:
        api_key: Mailjet public API key
        secret_key: Mailjet private API key
        sender_email: Verified sender address
        sender_name: Display name of the sender
        api_url: Send endpoint (override for sandboxes)
        timeout: Request timeout in seconds
        client: Optional preconfigured httpx.Client (tests pass a MockTransport)
    """

    def __init__(
        self,
        api_key: Optional[str],
        secret_key: Optional[str],
        sender_email: str,
        sender_name: str = "MarryFest",
        api_url: str = DEFAULT_API_URL,
        timeout: float = 10.0,
        client: Optional[httpx.Client] = None,
    ):
        self.api_key = api_key
        self.secret_key = secret_key
        self.sender_email = sender_email
        self.sender_name = sender_name
        self.api_url = api_url
        self.timeout = timeout
        self.client = client or httpx.Client(timeout=timeout)

    def build_payload(self, notification: InterestNotification) -> dict[str, Any]:
        """Build the Send API v3.1 request body for one notification."""
        return {
            "Messages": [
                {
                    "From": {
                        "Email": self.sender_email,
                        "Name": self.sender_name,
                    },
                    "To": [
                        {
                            "Email": notification.recipient_email,
                            "Name": notification.recipient_name,
                        }
                    ],
                    "Subject": render_subject(notification),
                    "TextPart": render_text(notification),
                }
            ]
        }

    def send(self, notification: InterestNotification) -> NotificationResult:
        """Send the notification.

        Returns:
            NotificationResult with Mailjet's per-message status

        Raises:
            NotificationDeliveryError: On timeouts or connection errors
        """
        if not self.api_key or not self.secret_key:
            logger.error("Mailjet credentials are not configured")
            return NotificationResult(status="error", detail="Mailjet credentials are not configured")

        try:
            response = self.client.post(
                self.api_url,
                json=self.build_payload(notification),
                auth=(self.api_key, self.secret_key),
                timeout=self.timeout,
            )
        except httpx.HTTPError as e:
            logger.error(f"Mailjet request failed: {e}", exc_info=True)
            raise NotificationDeliveryError(str(e)) from e

        return self._parse_response(response)

    def _parse_response(self, response: httpx.Response) -> NotificationResult:
        try:
            message = response.json()["Messages"][0]
        except (ValueError, KeyError, IndexError, TypeError):
            logger.error(
                f"Unexpected Mailjet response ({response.status_code})",
                extra={"status_code": response.status_code},
            )
            return NotificationResult(
                status="error",
                detail=f"Unexpected Mailjet response ({response.status_code})",
            )

        status = message.get("Status", "error")
        message_id = None
        recipients = message.get("To") or []
        if recipients:
            message_id = str(recipients[0].get("MessageID")) if recipients[0].get("MessageID") else None

        detail = None
        errors = message.get("Errors") or []
        if errors:
            detail = "; ".join(error.get("ErrorMessage", "unknown error") for error in errors)

        if status != "success":
            logger.warning(
                f"Mailjet reported status {status}",
                extra={"status_code": response.status_code},
            )

        return NotificationResult(status=status, message_id=message_id, detail=detail)

    def close(self) -> None:
        self.client.close()
