"""Notifications domain module - interest message data and the NotificationPort."""

from .ports import (
    InterestNotification,
    NotificationPort,
    NotificationResult,
    SUCCESS_STATUS,
)
from .templates import build_interest_notification, render_subject, render_text

__all__ = [
    "InterestNotification",
    "NotificationPort",
    "NotificationResult",
    "SUCCESS_STATUS",
    "build_interest_notification",
    "render_subject",
    "render_text",
]
