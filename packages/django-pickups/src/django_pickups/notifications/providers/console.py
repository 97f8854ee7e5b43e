"""Console provider for dry runs and development."""

import logging
import uuid

from .base import BaseProvider, SendResult

logger = logging.getLogger(__name__)


class ConsoleProvider(BaseProvider):
    """Provider that logs messages instead of sending them."""

    provider_name = "console"

    def send(self, message) -> SendResult:
        """Log the message and return success."""
        fake_message_id = f"console-{uuid.uuid4().hex[:12]}"
        rule = "=" * 60

        logger.info(
            f"\n{rule}\n"
            "CONSOLE EMAIL (not actually sent)\n"
            f"{rule}\n"
            f"{message}\n"
            f"{rule}"
        )

        return SendResult.ok(provider=self.provider_name, message_id=fake_message_id)
