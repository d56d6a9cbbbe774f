from __future__ import annotations

import pytest
from django.contrib.auth import get_user_model
from django.core.exceptions import ValidationError
from django.test import Client

from accounts.forms import RegistrationForm
from accounts.models import Role, UserProfile, role_of
from accounts.validators import PasswordComplexityValidator

User = get_user_model()


def test_password_complexity_validator():
    v = PasswordComplexityValidator()
    with pytest.raises(ValidationError):
        v.validate("passwordonly")
    with pytest.raises(ValidationError):
        v.validate("1234567890")
    v.validate("lettersand42")


@pytest.mark.django_db
def test_profile_created_for_every_user():
    user = User.objects.create_user(username="auto", password="pw")
    assert UserProfile.objects.get(user=user).role == Role.STUDENT


@pytest.mark.django_db
def test_register_teacher_logs_in_and_redirects():
    c = Client()
    r = c.post(
        "/accounts/register/",
        {
            "username": "ada",
            "name": "Ada Lovelace",
            "email": "Ada@Example.com",
            "role": "teacher",
            "password1": "engine4analysis",
            "password2": "engine4analysis",
        },
    )
    assert r.status_code == 302
    assert r["Location"] == "/accounts/dashboard/"
    user = User.objects.get(username="ada")
    assert user.email == "ada@example.com"
    assert user.profile.role == Role.TEACHER
    assert user.profile.full_name == "Ada Lovelace"
    assert c.get("/accounts/dashboard/")["Location"] == "/accounts/dashboard/teacher/"


@pytest.mark.django_db
def test_registration_duplicate_email_rejected():
    User.objects.create_user(username="demo", email="dup@example.com", password="pw")
    form = RegistrationForm(
        {
            "username": "someone",
            "name": "Some One",
            "email": "DUP@example.com",
            "role": "student",
            "password1": "engine4analysis",
            "password2": "engine4analysis",
        }
    )
    assert not form.is_valid()
    assert "email" in form.errors


@pytest.mark.django_db
def test_role_cannot_be_changed_from_profile(student):
    c = Client(); c.force_login(student)
    r = c.post(
        "/accounts/profile/",
        {"full_name": "Renamed", "email": "student1@example.com", "current_password": "pw", "role": "teacher"},
    )
    assert r.status_code == 302
    profile = UserProfile.objects.get(user=student)
    assert profile.full_name == "Renamed"
    assert profile.role == Role.STUDENT
    assert role_of(User.objects.get(pk=student.pk)) == Role.STUDENT


@pytest.mark.django_db
def test_profile_email_change_requires_password(student):
    c = Client(); c.force_login(student)
    r = c.post("/accounts/profile/", {"full_name": "", "email": "new@example.com", "current_password": "wrong"})
    assert r.status_code == 200
    student.refresh_from_db()
    assert student.email == "student1@example.com"
