"""Forms for creating and editing courses."""
from __future__ import annotations

from django import forms
from django.conf import settings

from materials.models import validate_thumbnail, validate_upload
from .models import Course


def _split_lines(s: str) -> list[str]:
    return [line.strip() for line in (s or "").splitlines() if line.strip()]


class MultipleFileInput(forms.ClearableFileInput):
    allow_multiple_selected = True


class MultipleFileField(forms.FileField):
    """File field accepting several uploads under one name."""

    def __init__(self, *args, **kwargs):
        kwargs.setdefault("widget", MultipleFileInput())
        super().__init__(*args, **kwargs)

    def clean(self, data, initial=None):
        single = super().clean
        if isinstance(data, (list, tuple)):
            return [single(d, initial) for d in data if d]
        return [single(data, initial)] if data else []


class CourseForm(forms.ModelForm):
    """Teacher-facing form for creating a course with optional uploads."""

    materials = MultipleFileField(required=False, help_text="Up to 5 files.")

    class Meta:
        model = Course
        fields = ("title", "description", "thumbnail")

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields["title"].required = True

    def clean_thumbnail(self):
        f = self.cleaned_data.get("thumbnail")
        if f and hasattr(f, "content_type"):
            validate_thumbnail(f)
        return f

    def clean_materials(self):
        files = self.cleaned_data.get("materials") or []
        limit = settings.COURSE_MAX_MATERIALS_PER_CREATE
        if len(files) > limit:
            raise forms.ValidationError(f"At most {limit} material files per upload.")
        for f in files:
            validate_upload(f)
        return files

    def save(self, commit: bool = True) -> Course:
        course = super().save(commit=False)
        course.name = course.title
        if commit:
            course.save()
        return course


class CourseEditForm(CourseForm):
    """Owner edit form; videos and notes are entered one per line."""

    videos_text = forms.CharField(
        label="Videos",
        required=False,
        widget=forms.Textarea(attrs={"rows": 4, "placeholder": "One video URL per line"}),
    )
    notes_text = forms.CharField(
        label="Notes",
        required=False,
        widget=forms.Textarea(attrs={"rows": 6, "placeholder": "One note per line"}),
    )

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        del self.fields["materials"]
        if self.instance.pk:
            self.fields["videos_text"].initial = "\n".join(self.instance.videos or [])
            self.fields["notes_text"].initial = "\n".join(self.instance.notes or [])

    def clean_videos_text(self):
        urls = _split_lines(self.cleaned_data.get("videos_text"))
        validate = forms.URLField().clean
        return [validate(u) for u in urls]

    def save(self, commit: bool = True) -> Course:
        course = super().save(commit=False)
        course.videos = self.cleaned_data.get("videos_text") or []
        course.notes = _split_lines(self.cleaned_data.get("notes_text"))
        if commit:
            course.save()
        return course
