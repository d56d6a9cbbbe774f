"""Materials models and upload validators.

A `Material` is a file a teacher attached to one of their courses. The
file is stored on disk under `course_materials/` and the stored path is
what the course lists as its materials.
"""
from __future__ import annotations

import mimetypes
from pathlib import Path

from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import models

from courses.models import Course


ALLOWED_EXT = {
    ".pdf", ".doc", ".docx", ".ppt", ".pptx", ".xls", ".xlsx", ".txt", ".md",
    ".zip", ".jpg", ".jpeg", ".png", ".webp", ".gif", ".mp4", ".webm", ".mp3",
}
THUMBNAIL_EXT = {".jpg", ".jpeg", ".png", ".webp", ".gif"}


def _check(file, max_bytes: int, allowed_ext: set[str]) -> None:
    size = getattr(file, "size", None)
    if size is not None and size > max_bytes:
        raise ValidationError(f"File too large (max {max_bytes // (1024 * 1024)} MB)")
    ext = Path(getattr(file, "name", "")).suffix.lower()
    if ext not in allowed_ext:
        raise ValidationError("Unsupported file type")


def validate_upload(file) -> None:
    """Course material check: size cap and extension allow-list."""
    _check(file, settings.COURSE_MATERIAL_MAX_BYTES, ALLOWED_EXT)


def validate_thumbnail(file) -> None:
    _check(file, settings.COURSE_THUMBNAIL_MAX_BYTES, THUMBNAIL_EXT)


class Material(models.Model):
    """A file attached to a course, uploaded by its teacher."""

    course = models.ForeignKey(Course, on_delete=models.CASCADE, related_name="materials")
    uploaded_by = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="materials")
    title = models.CharField(max_length=200, blank=True)
    file = models.FileField(upload_to="course_materials/", validators=[validate_upload])
    size_bytes = models.PositiveBigIntegerField(default=0)
    mime = models.CharField(max_length=100, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["created_at", "id"]

    def save(self, *args, **kwargs):
        self.size_bytes = getattr(self.file, "size", None) or self.size_bytes or 0
        self.mime = mimetypes.guess_type(self.file.name or "")[0] or ""
        if not self.title:
            self.title = Path(self.file.name or "").name
        super().save(*args, **kwargs)

    def __str__(self) -> str:  # pragma: no cover
        return f"{self.title} ({self.course_id})"

    @property
    def path(self) -> str:
        return self.file.name
