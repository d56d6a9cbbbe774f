from django.apps import AppConfig


class UiConfig(AppConfig):
    """Landing page and shared templates."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "ui"
