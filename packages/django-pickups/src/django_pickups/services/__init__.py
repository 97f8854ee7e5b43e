"""django-pickups services.

Re-exports all services for convenient importing.
"""

from .generation import LogKey, generate_absence_logs, generate_log_entries
from .reminders import send_reminders
from .summary import send_weekly_summary, summarize_region, weekly_logs

__all__ = [
    # Generation
    "LogKey",
    "generate_absence_logs",
    "generate_log_entries",
    # Reminders
    "send_reminders",
    # Weekly summary
    "send_weekly_summary",
    "summarize_region",
    "weekly_logs",
]
