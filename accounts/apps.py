from django.apps import AppConfig


class AccountsConfig(AppConfig):
    """Registration, login, and the student/teacher role profile."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "accounts"
    verbose_name = "Accounts"

    def ready(self) -> None:  # pragma: no cover (import-time hook)
        from . import signals  # noqa: F401  (connects profile creation)
        return super().ready()
