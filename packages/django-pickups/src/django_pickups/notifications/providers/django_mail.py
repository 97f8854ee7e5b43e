"""Provider sending through Django's configured EMAIL_BACKEND."""

import logging

from django.core.mail import EmailMessage

from .base import BaseProvider, SendResult

logger = logging.getLogger(__name__)


class DjangoMailProvider(BaseProvider):
    """Email provider using django.core.mail (SMTP in production)."""

    provider_name = "django"

    def send(self, message) -> SendResult:
        email = EmailMessage(
            subject=message.subject,
            body=message.body,
            from_email=message.from_address,
            to=message.to,
        )
        try:
            sent = email.send(fail_silently=False)
        except Exception as e:
            error_msg = str(e)
            logger.error(f"Mail send failed to {message.to}: {error_msg}")
            return SendResult.fail(provider=self.provider_name, error=error_msg)

        if not sent:
            return SendResult.fail(provider=self.provider_name, error="Backend sent nothing")

        logger.info(f"Email sent: {message.kind} to {', '.join(message.to)}")
        return SendResult.ok(provider=self.provider_name)
