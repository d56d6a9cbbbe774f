from __future__ import annotations

import pytest

from courses.models import Course, Enrolment
from courses.services import HomeStats, compute_home_stats, top_courses


def _course_with(teacher, name, students):
    course = Course.objects.create(teacher=teacher, name=name)
    for s in students:
        Enrolment.objects.create(course=course, student=s)
    return course


@pytest.mark.django_db
def test_home_stats_sums_memberships(teacher, make_user):
    a, b, c = (make_user(f"s{i}") for i in range(3))
    _course_with(teacher, "One", [a, b])
    _course_with(teacher, "Two", [a, b, c])  # overlap still counts twice
    make_user("teacher2", role="teacher")

    stats = compute_home_stats()
    assert stats == HomeStats(distinct_student_count=5, teacher_count=2, course_count=2)


@pytest.mark.django_db
def test_home_stats_empty_platform():
    assert compute_home_stats() == HomeStats(0, 0, 0)


@pytest.mark.django_db
def test_home_stats_respects_given_querysets(teacher, student):
    keep = _course_with(teacher, "Keep", [student])
    _course_with(teacher, "Skip", [student])
    stats = compute_home_stats(courses=Course.objects.filter(pk=keep.pk))
    assert stats.distinct_student_count == 1
    assert stats.course_count == 1


@pytest.mark.django_db
def test_top_courses_orders_by_enrolment(teacher, make_user):
    pool = [make_user(f"p{i}") for i in range(5)]
    five = _course_with(teacher, "Five", pool)
    _course_with(teacher, "One", pool[:1])
    three_a = _course_with(teacher, "ThreeA", pool[:3])
    three_b = _course_with(teacher, "ThreeB", pool[2:])
    _course_with(teacher, "Zero", [])

    top = top_courses(n=3)
    assert len(top) == 3
    assert top[0] == five
    assert set(top[1:]) == {three_a, three_b}
    assert [c.students_count for c in top] == [5, 3, 3]


@pytest.mark.django_db
def test_top_courses_tie_goes_to_older_course(teacher, student):
    first = _course_with(teacher, "B first", [student])
    second = _course_with(teacher, "A second", [student])
    assert top_courses(n=2) == [first, second]


@pytest.mark.django_db
def test_top_courses_shorter_than_n(teacher):
    only = _course_with(teacher, "Only", [])
    assert top_courses(n=3) == [only]
    assert top_courses(n=0) == []
