"""Delivery providers."""

from .base import BaseProvider, SendResult
from .console import ConsoleProvider
from .django_mail import DjangoMailProvider
from .ses import SESEmailProvider

__all__ = [
    "BaseProvider",
    "ConsoleProvider",
    "DjangoMailProvider",
    "SESEmailProvider",
    "SendResult",
]
