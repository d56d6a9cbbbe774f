from __future__ import annotations

import pytest
from django.test import Client

from courses.models import Course, Enrolment


@pytest.mark.django_db
def test_login_with_email(student):
    c = Client()
    r = c.post("/accounts/login/", {"username": "student1@example.com", "password": "pw"})
    assert r.status_code == 302
    assert r["Location"] == "/accounts/dashboard/"


@pytest.mark.django_db
def test_login_with_wrong_password_rerenders(student):
    r = Client().post("/accounts/login/", {"username": "student1", "password": "nope"})
    assert r.status_code == 200


@pytest.mark.django_db
def test_dashboards_are_role_scoped(teacher, student):
    algebra = Course.objects.create(teacher=teacher, title="Algebra")
    Course.objects.create(teacher=teacher, title="Biology")
    Enrolment.objects.create(course=algebra, student=student)

    cs = Client(); cs.force_login(student)
    r = cs.get("/accounts/dashboard/", follow=True)
    assert r.redirect_chain[-1][0] == "/accounts/dashboard/student/"
    assert b"Algebra" in r.content and b"Biology" not in r.content
    assert cs.get("/accounts/dashboard/teacher/").status_code == 403

    ct = Client(); ct.force_login(teacher)
    r = ct.get("/accounts/dashboard/", follow=True)
    assert r.redirect_chain[-1][0] == "/accounts/dashboard/teacher/"
    assert b"Algebra" in r.content and b"Biology" in r.content
    assert ct.get("/accounts/dashboard/student/").status_code == 403


@pytest.mark.django_db
def test_dashboard_requires_login():
    r = Client().get("/accounts/dashboard/")
    assert r.status_code == 302
    assert r["Location"].startswith("/accounts/login/")


@pytest.mark.django_db
def test_logout_returns_to_login(student):
    c = Client(); c.force_login(student)
    r = c.post("/accounts/logout/")
    assert r.status_code == 302
    assert r["Location"] == "/accounts/login/"
