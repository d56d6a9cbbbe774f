from django.apps import AppConfig


class MaterialsConfig(AppConfig):
    """Files attached to courses (stored under MEDIA_ROOT)."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "materials"
    verbose_name = "Course materials"
