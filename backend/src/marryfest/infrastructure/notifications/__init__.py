"""Notification transports."""

from .mailjet_notifier import MailjetNotifier

__all__ = ["MailjetNotifier"]
