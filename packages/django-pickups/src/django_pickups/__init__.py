"""Django Pickups - food rescue pickup logs, reminders and summaries."""

__version__ = "0.1.0"

__all__ = [
    # Models
    "Absence",
    "Location",
    "Log",
    "LogPart",
    "Region",
    "ScheduleChain",
    "ScheduleStop",
    "Volunteer",
    # Services
    "generate_log_entries",
    "generate_absence_logs",
    "send_reminders",
    "send_weekly_summary",
    # Exceptions
    "PickupsError",
    "NotificationError",
    "ProviderError",
    "MissingRecipientError",
]

_MODELS = (
    "Absence",
    "Location",
    "Log",
    "LogPart",
    "Region",
    "ScheduleChain",
    "ScheduleStop",
    "Volunteer",
)

_SERVICES = (
    "generate_log_entries",
    "generate_absence_logs",
    "send_reminders",
    "send_weekly_summary",
)

_EXCEPTIONS = (
    "PickupsError",
    "NotificationError",
    "ProviderError",
    "MissingRecipientError",
)


def __getattr__(name: str):
    """Lazy import to avoid AppRegistryNotReady errors."""
    if name in _MODELS:
        from . import models

        return getattr(models, name)
    if name in _SERVICES:
        from . import services

        return getattr(services, name)
    if name in _EXCEPTIONS:
        from . import exceptions

        return getattr(exceptions, name)

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
