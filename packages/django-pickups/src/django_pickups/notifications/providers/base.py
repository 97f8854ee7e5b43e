"""Base provider interface for message delivery."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ..message import PreparedMessage


@dataclass
class SendResult:
    """Result of a send operation."""

    success: bool
    provider: str
    message_id: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, provider: str, message_id: str = "") -> "SendResult":
        return cls(success=True, provider=provider, message_id=message_id)

    @classmethod
    def fail(cls, provider: str, error: str) -> "SendResult":
        return cls(success=False, provider=provider, error=error)


class BaseProvider(ABC):
    """Abstract base class for delivery providers."""

    provider_name: str = "base"

    @abstractmethod
    def send(self, message: "PreparedMessage") -> SendResult:
        """Send a message and return the result.

        Args:
            message: The PreparedMessage to send

        Returns:
            SendResult with success/failure status and provider details
        """
        raise NotImplementedError
