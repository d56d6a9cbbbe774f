from django.apps import AppConfig


class ApiConfig(AppConfig):
    """JSON API over courses, enrolments and statistics."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "api"
