"""Attach uploaded files to courses once ownership has been checked."""
from __future__ import annotations

import logging
from typing import Iterable

from courses.models import Course
from courses.services import Action, authorize_mutation
from .models import Material

logger = logging.getLogger(__name__)


def attach_materials(course: Course, actor, files: Iterable, title: str = "") -> list[Material]:
    """Store each file and record it on the course; returns the new rows.

    `title` applies to every file; an empty title falls back to the file
    name.
    """
    authorize_mutation(course, actor, Action.UPLOAD)
    created = []
    for f in files:
        material = Material(course=course, uploaded_by=actor, file=f, title=title)
        material.save()
        created.append(material)
    if created:
        course.save(update_fields=["updated_at"])
        logger.info("Attached %d material(s) to course %s", len(created), course.pk)
    return created
