"""NotificationPort interface and message value objects."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date
from typing import Optional

SUCCESS_STATUS = "success"


@dataclass(frozen=True)
class InterestNotification:
    """Data of the "someone is interested in you" message.

    The recipient fields address the message; the sender fields are the
    details shown to the recipient.
    """
    recipient_email: str
    recipient_name: str
    sender_first_name: str
    sender_last_name: Optional[str]
    sender_dob: Optional[date]
    sender_height_feet: Optional[int]
    sender_height_inches: Optional[int]
    sender_religion: Optional[str]
    sender_city: Optional[str]
    sender_state: Optional[str]
    sender_country: Optional[str]
    sender_contact: Optional[str]
    sender_community: Optional[str]


@dataclass(frozen=True)
class NotificationResult:
    """Outcome reported by a notification transport.

    Anything other than status "success" counts as a failure.
    """
    status: str
    message_id: Optional[str] = None
    detail: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.status == SUCCESS_STATUS


class NotificationPort(ABC):
    """Port interface for outbound interest notifications.

    Implementations:
    - MailjetNotifier: Mailjet Send API v3.1 over HTTPS
    """

    @abstractmethod
    def send(self, notification: InterestNotification) -> NotificationResult:
        """Send an interest notification.

        Args:
            notification: Message data

        Returns:
            NotificationResult; callers treat non-success as failure

        Raises:
            NotificationDeliveryError: On transport errors such as timeouts
        """
        pass
