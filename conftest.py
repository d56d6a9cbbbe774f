import logging

import pytest
from django.contrib.auth.models import User


@pytest.fixture(autouse=True)
def silence_django_request_logger():
    """Reduce noise from expected 4xx in passing tests.

    Many tests intentionally exercise 403/404 paths. Django logs these at
    WARNING via 'django.request'; lower that logger to ERROR during tests.
    """
    logger = logging.getLogger("django.request")
    old = logger.level
    logger.setLevel(logging.ERROR)
    try:
        yield
    finally:
        logger.setLevel(old)


@pytest.fixture(autouse=True)
def isolated_uploads(settings, tmp_path):
    """Keep uploaded files out of the working tree; hash passwords fast."""
    settings.MEDIA_ROOT = tmp_path / "uploads"
    settings.PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]


@pytest.fixture
def make_user(db):
    def _make(username: str, role: str = "student", password: str = "pw", **extra) -> User:
        extra.setdefault("email", f"{username}@example.com")
        user = User.objects.create_user(username=username, password=password, **extra)
        user.profile.role = role
        user.profile.save(update_fields=["role"])
        return user

    return _make


@pytest.fixture
def teacher(make_user):
    return make_user("teacher1", role="teacher")


@pytest.fixture
def student(make_user):
    return make_user("student1")
