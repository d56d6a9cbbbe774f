"""Upload view for course materials."""
from __future__ import annotations

from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.http import HttpRequest, HttpResponse
from django.shortcuts import redirect
from django.views.decorators.http import require_POST

from courses.services import Action, authorize_mutation, get_course
from .forms import MaterialUploadForm
from .services import attach_materials


@login_required
@require_POST
def upload_for_course(request: HttpRequest, course_id: int) -> HttpResponse:
    """Owner-only upload of a single material file."""
    course = get_course(course_id)
    authorize_mutation(course, request.user, Action.UPLOAD)
    form = MaterialUploadForm(request.POST, request.FILES)
    if form.is_valid():
        attach_materials(course, request.user, [form.cleaned_data["file"]], title=form.cleaned_data.get("title", ""))
        messages.success(request, "Material uploaded.")
    else:
        messages.error(request, "; ".join(str(e) for e in form.errors.get("file", [])) or "Upload failed.")
    return redirect("courses:detail", pk=course.pk)
