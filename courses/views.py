"""Course catalogue, detail, authoring, and enrolment actions."""
from __future__ import annotations

import logging

from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.db import transaction
from django.db.models import Q
from django.http import HttpRequest, HttpResponse
from django.shortcuts import redirect, render
from django.views.decorators.http import require_POST

from accounts.models import Role, role_of
from materials.forms import MaterialUploadForm
from materials.services import attach_materials
from .exceptions import AlreadyEnrolled, SelfEnrollmentDenied
from .forms import CourseEditForm, CourseForm
from .models import Course, Enrolment
from .services import (
    Action,
    authorize_mutation,
    can_mutate,
    enrol,
    get_course,
    is_enrolled,
    role_scoped_courses,
    unenrol,
)

logger = logging.getLogger(__name__)


def course_list(request: HttpRequest) -> HttpResponse:
    """Public course catalogue; actions vary by role."""
    q = (request.GET.get("q") or "").strip()
    courses = Course.objects.select_related("teacher", "teacher__profile").all()
    if q:
        courses = courses.filter(
            Q(name__icontains=q)
            | Q(title__icontains=q)
            | Q(teacher__username__icontains=q)
            | Q(teacher__profile__full_name__icontains=q)
        )
    enrolled_ids = set()
    if request.user.is_authenticated:
        enrolled_ids = set(Enrolment.objects.filter(student=request.user).values_list("course_id", flat=True))
    ctx = {"courses": courses, "enrolled_ids": enrolled_ids, "role": role_of(request.user), "q": q}
    return render(request, "courses/list.html", ctx)


@login_required
def course_create(request: HttpRequest) -> HttpResponse:
    """Teacher-only course creation with optional thumbnail and materials."""
    authorize_mutation(None, request.user, Action.CREATE)
    if request.method == "POST":
        form = CourseForm(request.POST, request.FILES)
        if form.is_valid():
            with transaction.atomic():
                course = form.save(commit=False)
                course.teacher = request.user
                course.save()
                attach_materials(course, request.user, form.cleaned_data["materials"])
            logger.info("Teacher %s created course %s", request.user.pk, course.pk)
            messages.success(request, "Course created.")
            return redirect("courses:mine")
    else:
        form = CourseForm()
    return render(request, "courses/create.html", {"form": form})


def course_detail(request: HttpRequest, pk: int) -> HttpResponse:
    """Course page; students must be enrolled to see it."""
    course = get_course(pk)
    owner_view = course.is_owner(request.user)
    enrolled = is_enrolled(course, request.user)
    if role_of(request.user) == Role.STUDENT and not enrolled:
        return redirect("courses:list")
    ctx = {
        "course": course,
        "owner_view": owner_view,
        "is_enrolled": enrolled,
        "can_edit": can_mutate(course, request.user, Action.EDIT),
        "materials": course.materials.all(),
        "upload_form": MaterialUploadForm() if owner_view else None,
    }
    return render(request, "courses/detail.html", ctx)


@login_required
def my_courses(request: HttpRequest) -> HttpResponse:
    """Enrolled courses for students, taught courses for teachers."""
    role = role_of(request.user)
    courses = role_scoped_courses(request.user)
    ctx = {
        "role": role,
        "enrolled_courses": courses if role == Role.STUDENT else [],
        "teaching_courses": courses if role == Role.TEACHER else [],
    }
    return render(request, "courses/my_courses.html", ctx)


@login_required
def course_edit(request: HttpRequest, pk: int) -> HttpResponse:
    """Owner-only edit of title, description, thumbnail, videos and notes."""
    course = get_course(pk)
    authorize_mutation(course, request.user, Action.EDIT)
    if request.method == "POST":
        form = CourseEditForm(request.POST, request.FILES, instance=course)
        if form.is_valid():
            form.save()
            messages.success(request, "Course updated.")
            return redirect("courses:detail", pk=course.pk)
        # The bound form has already copied the rejected values onto `course`
        course = get_course(pk)
    else:
        form = CourseEditForm(instance=course)
    return render(request, "courses/edit.html", {"form": form, "course": course})


@login_required
@require_POST
def course_enrol(request: HttpRequest, pk: int) -> HttpResponse:
    try:
        enrol(pk, request.user)
    except AlreadyEnrolled as exc:
        messages.info(request, exc.message)
    except SelfEnrollmentDenied as exc:
        messages.error(request, exc.message)
    else:
        messages.success(request, "Enrolled in course.")
    return redirect("courses:detail", pk=pk)


@login_required
@require_POST
def course_unenrol(request: HttpRequest, pk: int) -> HttpResponse:
    if unenrol(pk, request.user):
        messages.success(request, "Unenrolled from course.")
    return redirect("courses:mine")


@login_required
@require_POST
def course_delete(request: HttpRequest, pk: int) -> HttpResponse:
    course = get_course(pk)
    authorize_mutation(course, request.user, Action.DELETE)
    course.delete()
    logger.info("Teacher %s deleted course %s", request.user.pk, pk)
    messages.success(request, "Course deleted.")
    return redirect("courses:mine")
