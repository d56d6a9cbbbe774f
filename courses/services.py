"""Enrolment and ownership rules, plus home-page statistics.

Every function receives the acting user explicitly; nothing here reads
the request. Course arguments accept either a `Course` instance or its
primary key.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from django.contrib.auth import get_user_model
from django.db import IntegrityError, transaction
from django.db.models import Count, QuerySet
from django.utils import timezone

from accounts.models import Role, role_of
from .exceptions import AlreadyEnrolled, Forbidden, NotAuthorized, NotFound, SelfEnrollmentDenied
from .models import Course, Enrolment

logger = logging.getLogger(__name__)


class Action(str, Enum):
    """Structural mutations guarded by `authorize_mutation`."""

    CREATE = "create"
    EDIT = "edit"
    DELETE = "delete"
    UPLOAD = "upload"


@dataclass(frozen=True)
class HomeStats:
    distinct_student_count: int
    teacher_count: int
    course_count: int


def get_course(course) -> Course:
    """Return the course for an instance or id, raising `NotFound`."""
    if isinstance(course, Course):
        return course
    try:
        return Course.objects.select_related("teacher").get(pk=course)
    except (Course.DoesNotExist, ValueError, TypeError) as exc:
        raise NotFound() from exc


def is_enrolled(course: Course, user) -> bool:
    if not getattr(user, "is_authenticated", False):
        return False
    return Enrolment.objects.filter(course=course, student=user).exists()


# -- Enrolment ---------------------------------------------------------------

def _owns(course, actor) -> bool:
    pk = course.pk if isinstance(course, Course) else course
    try:
        return Course.objects.filter(pk=pk, teacher_id=actor.pk).exists()
    except (ValueError, TypeError):
        return False


def _touch(course: Course) -> None:
    """Bump `updated_at`, raising `NotFound` if the row is gone."""
    now = timezone.now()
    if not Course.objects.filter(pk=course.pk).update(updated_at=now):
        raise NotFound()
    course.updated_at = now


def enrol(course, actor) -> Course:
    """Add `actor` to the course roster.

    Checks run in a fixed order: role, missing course, existing
    membership, then ownership. A teacher aiming at their own course gets
    `SelfEnrollmentDenied`, any other non-student gets `Forbidden`.
    """
    role = role_of(actor)
    if role != Role.STUDENT:
        if role == Role.TEACHER and _owns(course, actor):
            raise SelfEnrollmentDenied()
        raise Forbidden("Only students can enroll in courses")
    course = get_course(course)
    if is_enrolled(course, actor):
        raise AlreadyEnrolled()
    if course.teacher_id == actor.id:
        raise SelfEnrollmentDenied()
    try:
        with transaction.atomic():
            Enrolment.objects.create(course=course, student=actor)
    except IntegrityError as exc:
        # Either the course row vanished or an identical request won the race
        if not Course.objects.filter(pk=course.pk).exists():
            raise NotFound() from exc
        raise AlreadyEnrolled() from exc
    _touch(course)
    logger.info("User %s enrolled in course %s", actor.pk, course.pk)
    return course


def unenrol(course, actor) -> bool:
    """Remove `actor` from the roster; a no-op for non-members.

    Returns True when a membership was removed.
    """
    course = get_course(course)
    deleted, _ = Enrolment.objects.filter(course=course, student_id=actor.pk).delete()
    _touch(course)
    if deleted:
        logger.info("User %s unenrolled from course %s", actor.pk, course.pk)
    return bool(deleted)


# -- Ownership ---------------------------------------------------------------

def authorize_mutation(course: Course | None, actor, action: Action) -> None:
    """Raise unless `actor` may perform `action` on `course`.

    Teachers may act on their own courses only; creation needs no
    course. Students may never perform structural changes.
    """
    role = role_of(actor)
    if role == Role.TEACHER:
        if action == Action.CREATE:
            return
        if course is None or course.teacher_id != actor.id:
            logger.warning("Teacher %s denied %s on course %s", actor.pk, action.value, getattr(course, "pk", None))
            raise NotAuthorized(f"Not authorized to {action.value} this course")
        return
    if role == Role.STUDENT:
        raise Forbidden()
    # Anonymous users and unknown roles
    raise Forbidden()


def can_mutate(course: Course | None, actor, action: Action) -> bool:
    try:
        authorize_mutation(course, actor, action)
    except (Forbidden, NotAuthorized):
        return False
    return True


def role_scoped_courses(actor) -> QuerySet[Course]:
    """Courses a user studies (student) or teaches (teacher)."""
    role = role_of(actor)
    if role == Role.STUDENT:
        return Course.objects.filter(students=actor).select_related("teacher")
    if role == Role.TEACHER:
        return Course.objects.filter(teacher=actor)
    return Course.objects.none()


# -- Statistics --------------------------------------------------------------

def compute_home_stats(courses: QuerySet[Course] | None = None, users: QuerySet | None = None) -> HomeStats:
    """Totals for the landing page.

    `distinct_student_count` sums memberships per course, so a student
    in two courses counts twice.
    """
    if courses is None:
        courses = Course.objects.all()
    if users is None:
        users = get_user_model().objects.all()
    memberships = courses.aggregate(total=Count("enrolments"))["total"] or 0
    return HomeStats(
        distinct_student_count=memberships,
        teacher_count=users.filter(profile__role=Role.TEACHER).count(),
        course_count=courses.count(),
    )


def top_courses(courses: QuerySet[Course] | None = None, n: int = 3) -> list[Course]:
    """The `n` courses with the most students; ties go to the older course."""
    if courses is None:
        courses = Course.objects.all()
    if n <= 0:
        return []
    ranked = (
        courses.select_related("teacher")
        .annotate(num_students=Count("enrolments"))
        .order_by("-num_students", "id")
    )
    return list(ranked[:n])
