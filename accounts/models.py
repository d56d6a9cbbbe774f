"""Accounts models: user profile and roles.

Defines a `UserProfile` associated one-to-one with Django's `User`,
capturing the role (student/teacher) chosen at registration. The
profile is created automatically on user creation.
"""
from __future__ import annotations

from django.conf import settings
from django.db import models


class Role(models.TextChoices):
    """Closed set of platform roles.

    Every authorisation rule switches over these values; adding a role
    means revisiting `courses.services`.
    """

    STUDENT = "student", "Student"
    TEACHER = "teacher", "Teacher"


class UserProfile(models.Model):
    """Profile linked to a Django auth user.

    - `role`: fixed at registration, never edited through the UI
    - `full_name`: display name collected at registration
    """

    user = models.OneToOneField(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="profile")
    role = models.CharField(max_length=16, choices=Role.choices, default=Role.STUDENT)
    full_name = models.CharField(max_length=200, blank=True)
    avatar = models.ImageField(upload_to="profile_pictures/", blank=True, null=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self) -> str:  # pragma: no cover (string repr convenience)
        return f"Profile<{self.user.username}:{self.role}>"

    @property
    def display_name(self) -> str:
        return self.full_name or self.user.username


def role_of(user) -> str | None:
    """Return the role of an authenticated user, or None."""
    if not getattr(user, "is_authenticated", False):
        return None
    profile = getattr(user, "profile", None)
    return getattr(profile, "role", None)
