"""Rendered, ready-to-deliver messages."""

import logging
from dataclasses import dataclass

from ..exceptions import ProviderError
from .providers import ConsoleProvider, SendResult
from .routing import get_provider

logger = logging.getLogger(__name__)


@dataclass
class PreparedMessage:
    """A rendered message of one kind, not yet delivered."""

    kind: str
    to: list[str]
    subject: str
    body: str
    from_address: str

    def __str__(self):
        return (
            f"Kind: {self.kind}\n"
            f"To: {', '.join(self.to)}\n"
            f"From: {self.from_address}\n"
            f"Subject: {self.subject}\n"
            f"\n{self.body}"
        )

    def deliver(self, provider=None) -> SendResult:
        """Send through ``provider`` (the configured one by default).

        Raises:
            ProviderError: If the provider reports a failure
        """
        provider = provider or get_provider()
        result = provider.send(self)
        if not result.success:
            logger.error(f"{self.kind} to {', '.join(self.to)} failed: {result.error}")
            raise ProviderError(
                message=result.error or "Unknown error",
                provider=result.provider,
            )
        return result


def dispatch(message: PreparedMessage, dry_run: bool) -> SendResult:
    """Deliver a message, or only log it when ``dry_run`` is set."""
    if dry_run:
        return message.deliver(provider=ConsoleProvider())
    return message.deliver()
