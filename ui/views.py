import logging

from django.conf import settings
from django.db import DatabaseError
from django.http import HttpRequest, HttpResponse
from django.shortcuts import render

from courses.services import HomeStats, compute_home_stats, top_courses

logger = logging.getLogger(__name__)


def index(request: HttpRequest) -> HttpResponse:
    """Render the public landing page: most popular courses and totals.

    A database failure must not take the landing page down; it falls
    back to an empty list and zeroed totals.
    """
    try:
        courses = top_courses(n=settings.HOME_TOP_COURSES)
        stats = compute_home_stats()
    except DatabaseError:
        logger.exception("Error fetching homepage data")
        courses = []
        stats = HomeStats(distinct_student_count=0, teacher_count=0, course_count=0)
    ctx = {
        "courses": courses,
        "stats": {
            "students": stats.distinct_student_count,
            "instructors": stats.teacher_count,
            "courses": stats.course_count,
        },
    }
    return render(request, "index.html", ctx)
