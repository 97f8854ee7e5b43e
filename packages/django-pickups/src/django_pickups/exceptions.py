"""Custom exceptions for django-pickups."""


class PickupsError(Exception):
    """Base exception for pickups errors."""
    pass


class NotificationError(PickupsError):
    """Base exception for notification errors."""
    pass


class ProviderError(NotificationError):
    """Error from a delivery provider (SMTP, SES, etc.)."""

    def __init__(self, message: str, provider: str, original_error: Exception = None):
        self.provider = provider
        self.original_error = original_error
        super().__init__(f"[{provider}] {message}")


class MissingRecipientError(NotificationError):
    """No address is available for a message."""

    def __init__(self, kind: str, reason: str):
        self.kind = kind
        self.reason = reason
        super().__init__(f"No recipient for {kind}: {reason}")
