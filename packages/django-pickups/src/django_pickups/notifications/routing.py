"""Provider routing for django-pickups notifications."""

from django.core.exceptions import ImproperlyConfigured

from .. import conf


def get_provider(name: str = None):
    """Get the provider instance for a provider name.

    Args:
        name: 'console', 'django' or 'ses' (defaults to PICKUPS_EMAIL_PROVIDER)

    Returns:
        Provider instance ready to send messages

    Raises:
        ImproperlyConfigured: If the provider name is unknown
    """
    provider_name = name or conf.get_setting("EMAIL_PROVIDER") or "django"

    if provider_name == "console":
        from .providers import ConsoleProvider

        return ConsoleProvider()
    elif provider_name == "django":
        from .providers import DjangoMailProvider

        return DjangoMailProvider()
    elif provider_name == "ses":
        from .providers import SESEmailProvider

        return SESEmailProvider()
    else:
        raise ImproperlyConfigured(f"Unknown email provider: {provider_name}")
