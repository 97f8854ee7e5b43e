"""Notification gateway for django-pickups.

Usage:
    from django_pickups.notifications import Notifier, dispatch

    message = Notifier().volunteer_log_reminder(volunteer, logs)
    dispatch(message, dry_run=False)
"""

from .message import PreparedMessage, dispatch
from .notifier import Notifier
from .routing import get_provider

__all__ = [
    "Notifier",
    "PreparedMessage",
    "dispatch",
    "get_provider",
]
