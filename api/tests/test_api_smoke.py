from __future__ import annotations

from django.test import TestCase
from django.contrib.auth.models import User
from rest_framework.test import APIClient

from accounts.models import Role
from courses.models import Course, Enrolment


class ApiSmokeTests(TestCase):
    def setUp(self):
        self.teacher = User.objects.create_user(username="t1", password="pw")
        self.teacher.profile.role = Role.TEACHER
        self.teacher.profile.save(update_fields=["role"])

        self.student = User.objects.create_user(username="s1", password="pw")
        self.student.profile.role = Role.STUDENT
        self.student.profile.save(update_fields=["role"])

        self.course = Course.objects.create(teacher=self.teacher, title="Demo", description="")
        self.client = APIClient()

    def test_schema_available(self):
        r = self.client.get("/api/schema/")
        assert r.status_code == 200

    def test_public_courses_list(self):
        r = self.client.get("/api/v1/courses/")
        assert r.status_code == 200
        item = r.json()["results"][0]
        assert item["name"] == "Demo"
        assert item["teacher"]["username"] == "t1"
        assert item["students_count"] == 0

    def test_student_cannot_create_course(self):
        self.client.force_authenticate(self.student)
        r = self.client.post("/api/v1/courses/", {"title": "Nope"}, format="json")
        assert r.status_code == 403
        assert not Course.objects.filter(title="Nope").exists()

    def test_teacher_creates_course_owned_by_self(self):
        self.client.force_authenticate(self.teacher)
        r = self.client.post(
            "/api/v1/courses/",
            {"title": "Physics", "videos": ["https://example.com/intro"], "notes": ["Lab on Friday"]},
            format="json",
        )
        assert r.status_code == 201
        course = Course.objects.get(pk=r.json()["id"])
        assert course.teacher == self.teacher
        assert course.name == "Physics"
        assert course.videos == ["https://example.com/intro"]

    def test_enrol_then_duplicate_returns_400(self):
        self.client.force_authenticate(self.student)
        r1 = self.client.post(f"/api/v1/courses/{self.course.id}/enrol/")
        assert r1.status_code == 201
        assert r1.json()["students_count"] == 1
        r2 = self.client.post(f"/api/v1/courses/{self.course.id}/enrol/")
        assert r2.status_code == 400
        assert "already enrolled" in r2.json()["detail"]

    def test_owner_self_enrol_is_forbidden(self):
        self.client.force_authenticate(self.teacher)
        r = self.client.post(f"/api/v1/courses/{self.course.id}/enrol/")
        assert r.status_code == 403
        assert "own course" in r.json()["detail"]

    def test_enrol_unknown_course_is_404(self):
        self.client.force_authenticate(self.student)
        r = self.client.post("/api/v1/courses/999999/enrol/")
        assert r.status_code == 404

    def test_unenrol_twice_succeeds(self):
        Enrolment.objects.create(course=self.course, student=self.student)
        self.client.force_authenticate(self.student)
        for _ in range(2):
            r = self.client.post(f"/api/v1/courses/{self.course.id}/unenrol/")
            assert r.status_code == 200
            assert r.json()["students_count"] == 0

    def test_update_and_delete_are_owner_only(self):
        other = User.objects.create_user(username="t2", password="pw")
        other.profile.role = Role.TEACHER
        other.profile.save(update_fields=["role"])

        self.client.force_authenticate(other)
        r = self.client.patch(f"/api/v1/courses/{self.course.id}/", {"title": "Hijack"}, format="json")
        assert r.status_code == 403
        assert self.client.delete(f"/api/v1/courses/{self.course.id}/").status_code == 403

        self.client.force_authenticate(self.teacher)
        r = self.client.patch(f"/api/v1/courses/{self.course.id}/", {"title": "Renamed"}, format="json")
        assert r.status_code == 200
        assert r.json()["name"] == "Renamed"
        assert self.client.delete(f"/api/v1/courses/{self.course.id}/").status_code == 204

    def test_non_owner_invalid_update_is_forbidden_not_bad_request(self):
        other = User.objects.create_user(username="t3", password="pw")
        other.profile.role = Role.TEACHER
        other.profile.save(update_fields=["role"])

        self.client.force_authenticate(other)
        r = self.client.patch(f"/api/v1/courses/{self.course.id}/", {"title": ""}, format="json")
        assert r.status_code == 403
        r = self.client.put(f"/api/v1/courses/{self.course.id}/", {"videos": ["not a url"]}, format="json")
        assert r.status_code == 403

        self.client.force_authenticate(self.student)
        r = self.client.patch(f"/api/v1/courses/{self.course.id}/", {"title": ""}, format="json")
        assert r.status_code == 403

        self.client.force_authenticate(self.teacher)
        r = self.client.patch(f"/api/v1/courses/{self.course.id}/", {"title": ""}, format="json")
        assert r.status_code == 400

    def test_top_courses_and_stats(self):
        busy = Course.objects.create(teacher=self.teacher, title="Busy")
        Enrolment.objects.create(course=busy, student=self.student)
        Enrolment.objects.create(course=self.course, student=self.student)
        Course.objects.create(teacher=self.teacher, title="Quiet")
        Enrolment.objects.filter(course=self.course).delete()

        r = self.client.get("/api/v1/courses/top/", {"limit": 2})
        assert r.status_code == 200
        names = [c["name"] for c in r.json()]
        assert names[0] == "Busy"
        assert len(names) == 2

        r = self.client.get("/api/v1/stats/")
        assert r.json() == {"distinct_student_count": 1, "teacher_count": 1, "course_count": 3}
