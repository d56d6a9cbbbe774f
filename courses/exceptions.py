"""Errors raised by the course authorities.

`NotFound` is also an `Http404` and the two authorisation errors are also
`PermissionDenied`, so both Django and DRF turn them into 404/403 without
extra handling. `AlreadyEnrolled` and `SelfEnrollmentDenied` are
informational; callers surface them as a message. `SelfEnrollmentDenied`
is a `Forbidden` raised when a teacher targets their own course.
"""
from __future__ import annotations

from django.core.exceptions import PermissionDenied
from django.http import Http404


class CourseError(Exception):
    default_message = "Course action failed."

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFound(CourseError, Http404):
    default_message = "Course not found"


class Forbidden(CourseError, PermissionDenied):
    default_message = "Only teachers can access this resource"


class NotAuthorized(CourseError, PermissionDenied):
    default_message = "Not authorized to modify this course"


class AlreadyEnrolled(CourseError):
    default_message = "You are already enrolled in this course"


class SelfEnrollmentDenied(Forbidden):
    default_message = "You cannot enroll in your own course"
