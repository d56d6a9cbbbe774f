"""Form for adding one material to an existing course."""
from __future__ import annotations

from django import forms

from .models import Material


class MaterialUploadForm(forms.ModelForm):
    class Meta:
        model = Material
        fields = ("title", "file")
