"""Courses and enrolments models.

A `Course` is owned by the teacher who created it. Students join
through `Enrolment` rows, which give the `students` relation set
semantics (one row per course/student pair).
"""
from __future__ import annotations

from django.conf import settings
from django.db import models

from .exceptions import SelfEnrollmentDenied


class Course(models.Model):
    """A course authored by a teacher user."""

    name = models.CharField(max_length=200)
    title = models.CharField(max_length=200, blank=True)
    description = models.TextField(blank=True)
    teacher = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="teaching_courses")
    students = models.ManyToManyField(
        settings.AUTH_USER_MODEL,
        through="Enrolment",
        related_name="enrolled_courses",
        blank=True,
    )
    thumbnail = models.ImageField(upload_to="course_thumbnails/", blank=True)
    videos = models.JSONField(default=list, blank=True)
    notes = models.JSONField(default=list, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["name", "id"]

    def __str__(self) -> str:  # pragma: no cover
        return self.name

    @classmethod
    def from_db(cls, db, field_names, values):
        instance = super().from_db(db, field_names, values)
        instance._loaded_teacher_id = getattr(instance, "teacher_id", None)
        return instance

    def save(self, *args, **kwargs):
        loaded = getattr(self, "_loaded_teacher_id", None)
        if loaded is not None and loaded != self.teacher_id:
            raise ValueError("The owning teacher of a course cannot be changed.")
        if not self.name and self.title:
            self.name = self.title
        super().save(*args, **kwargs)
        self._loaded_teacher_id = self.teacher_id

    def is_owner(self, user) -> bool:
        return bool(user and getattr(user, "is_authenticated", False) and self.teacher_id == user.id)

    @property
    def display_title(self) -> str:
        return self.title or self.name

    @property
    def students_count(self) -> int:
        # `top_courses` annotates the count; fall back to a query otherwise.
        annotated = getattr(self, "num_students", None)
        if annotated is not None:
            return annotated
        return self.enrolments.count()

    @property
    def material_paths(self) -> list[str]:
        return [m.file.name for m in self.materials.all()]


class Enrolment(models.Model):
    """Link a student to a course."""

    course = models.ForeignKey(Course, on_delete=models.CASCADE, related_name="enrolments")
    student = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="enrolments")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        unique_together = ("course", "student")
        ordering = ["course_id", "student_id"]

    def __str__(self) -> str:  # pragma: no cover
        return f"{self.student_id}->{self.course_id}"

    def save(self, *args, **kwargs):
        if self.student_id is not None and self.student_id == self.course.teacher_id:
            raise SelfEnrollmentDenied()
        super().save(*args, **kwargs)
