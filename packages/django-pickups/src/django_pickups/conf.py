"""Django Pickups configuration.

All settings can be overridden in your Django settings.py.

Example:
    # settings.py
    PICKUPS_DRY_RUN = True
    PICKUPS_EMAIL_PROVIDER = 'ses'
    PICKUPS_ADMIN_EMAILS = ['dispatch@example.org']

Values are looked up on every call so that override_settings() applies.
"""

from django.conf import settings


DEFAULTS = {
    # Log messages instead of delivering them
    'DRY_RUN': False,
    # One of 'console', 'django', 'ses'
    'EMAIL_PROVIDER': 'django',
    # Sender address, falls back to DEFAULT_FROM_EMAIL
    'FROM_EMAIL': None,
    # Admin recipients when a region has no admin_email
    'ADMIN_EMAILS': [],
    # Days past a pickup before its volunteers are reminded
    'REMINDER_DAYS': 2,
    # Reminder count at which a log is escalated to the region admins
    'ESCALATION_REMINDERS': 3,
    # Trailing window for the weekly summary
    'SUMMARY_WINDOW_DAYS': 7,
    'SES_REGION': 'us-east-1',
    'SES_CONFIGURATION_SET': '',
}


def get_setting(name: str, default=None):
    """Get a setting with PICKUPS_ prefix."""
    if default is None:
        default = DEFAULTS.get(name)
    return getattr(settings, f"PICKUPS_{name}", default)


def is_dry_run() -> bool:
    """Check if deliveries should only be logged."""
    return bool(get_setting('DRY_RUN'))


def get_from_email() -> str:
    """Sender address for outgoing messages."""
    return get_setting('FROM_EMAIL') or settings.DEFAULT_FROM_EMAIL


def get_admin_emails() -> list[str]:
    """Fallback admin recipients."""
    return list(get_setting('ADMIN_EMAILS') or [])
