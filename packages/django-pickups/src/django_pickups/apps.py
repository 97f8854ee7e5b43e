from django.apps import AppConfig


class DjangoPickupsConfig(AppConfig):
    name = "django_pickups"
    verbose_name = "Pickups"
    default_auto_field = "django.db.models.BigAutoField"
