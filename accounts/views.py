"""Accounts views: registration, login, dashboards, and profile."""
from __future__ import annotations

from django.contrib import messages
from django.contrib.auth import login
from django.contrib.auth.decorators import login_required
from django.contrib.auth.views import LoginView, LogoutView
from django.http import HttpRequest, HttpResponse
from django.shortcuts import redirect, render

from courses.services import role_scoped_courses
from .decorators import role_required
from .forms import RegistrationForm, ProfileForm, EmailOrUsernameAuthenticationForm
from .models import Role, role_of


class PlatformLoginView(LoginView):
    template_name = "registration/login.html"
    form_class = EmailOrUsernameAuthenticationForm
    redirect_authenticated_user = True


class PlatformLogoutView(LogoutView):
    next_page = "accounts:login"


def register(request: HttpRequest) -> HttpResponse:
    """Register a new user with a fixed role.

    On success the user is logged in and sent to their dashboard.
    """
    if request.method == "POST":
        form = RegistrationForm(request.POST)
        if form.is_valid():
            user = form.save()
            login(request, user, backend="django.contrib.auth.backends.ModelBackend")
            messages.success(request, "Welcome aboard!")
            return redirect("accounts:dashboard")
    else:
        form = RegistrationForm()
    return render(request, "accounts/register.html", {"form": form})


@login_required
def dashboard(request: HttpRequest) -> HttpResponse:
    """Dispatch to a role-specific dashboard."""
    if role_of(request.user) == Role.TEACHER:
        return redirect("accounts:dashboard-teacher")
    return redirect("accounts:dashboard-student")


@login_required
@role_required(Role.TEACHER)
def dashboard_teacher(request: HttpRequest) -> HttpResponse:
    courses = role_scoped_courses(request.user)
    return render(request, "accounts/dashboard_teacher.html", {"teaching_courses": courses})


@login_required
@role_required(Role.STUDENT)
def dashboard_student(request: HttpRequest) -> HttpResponse:
    courses = role_scoped_courses(request.user)
    return render(request, "accounts/dashboard_student.html", {"enrolled_courses": courses})


@login_required
def profile(request: HttpRequest) -> HttpResponse:
    """Show the profile with role-scoped courses; POST edits details."""
    profile_obj = request.user.profile
    if request.method == "POST":
        form = ProfileForm(request.POST, request.FILES, instance=profile_obj, user=request.user)
        if form.is_valid():
            form.save()
            messages.success(request, "Profile updated.")
            return redirect("accounts:profile")
    else:
        form = ProfileForm(instance=profile_obj, user=request.user)
    ctx = {
        "form": form,
        "profile_obj": profile_obj,
        "role": profile_obj.role,
        "courses": role_scoped_courses(request.user),
    }
    return render(request, "accounts/profile.html", ctx)
