from __future__ import annotations

import pytest
from rest_framework.test import APIClient

from courses.models import Course, Enrolment


@pytest.mark.django_db
def test_courses_page_size_is_capped(teacher):
    for i in range(0, 105):
        Course.objects.create(teacher=teacher, title=f"C{i:03d}")
    c = APIClient()
    r = c.get("/api/v1/courses/", {"page_size": 500})
    assert r.status_code == 200
    assert r.json()["count"] == 105
    assert len(r.json()["results"]) == 100
    assert len(c.get("/api/v1/courses/", {"page_size": 5}).json()["results"]) == 5


@pytest.mark.django_db
def test_courses_ordering_by_enrolment_count(teacher, make_user):
    quiet = Course.objects.create(teacher=teacher, title="Quiet")
    busy = Course.objects.create(teacher=teacher, title="Busy")
    for i in range(2):
        Enrolment.objects.create(course=busy, student=make_user(f"s{i}"))
    r = APIClient().get("/api/v1/courses/", {"ordering": "-num_students"})
    ids = [row["id"] for row in r.json()["results"]]
    assert ids == [busy.id, quiet.id]


@pytest.mark.django_db
def test_courses_search_and_teacher_filter(teacher, make_user):
    other = make_user("teacher2", role="teacher")
    Course.objects.create(teacher=teacher, title="Organic Chemistry")
    Course.objects.create(teacher=other, title="Chemistry Lab")
    Course.objects.create(teacher=other, title="Poetry")
    c = APIClient()

    names = {row["name"] for row in c.get("/api/v1/courses/", {"search": "chem"}).json()["results"]}
    assert names == {"Organic Chemistry", "Chemistry Lab"}

    rows = c.get("/api/v1/courses/", {"teacher": other.id}).json()["results"]
    assert {row["name"] for row in rows} == {"Chemistry Lab", "Poetry"}


@pytest.mark.django_db
def test_users_filter_by_role(teacher, student):
    rows = APIClient().get("/api/v1/users/", {"profile__role": "teacher"}).json()["results"]
    assert [row["username"] for row in rows] == ["teacher1"]
    assert rows[0]["role"] == "teacher"


@pytest.mark.django_db
def test_anonymous_cannot_enrol(teacher):
    course = Course.objects.create(teacher=teacher, title="C")
    r = APIClient().post(f"/api/v1/courses/{course.id}/enrol/")
    assert r.status_code in (401, 403)
    assert not Enrolment.objects.exists()
