from django.apps import AppConfig


class CoursesConfig(AppConfig):
    """Courses, enrolments, and the rules that guard them."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "courses"
    verbose_name = "Courses"
