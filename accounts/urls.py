from django.urls import path

from .views import (
    PlatformLoginView,
    PlatformLogoutView,
    register,
    dashboard,
    dashboard_teacher,
    dashboard_student,
    profile,
)

app_name = "accounts"

urlpatterns = [
    path("login/", PlatformLoginView.as_view(), name="login"),
    path("logout/", PlatformLogoutView.as_view(), name="logout"),
    path("register/", register, name="register"),
    path("dashboard/", dashboard, name="dashboard"),
    path("dashboard/teacher/", dashboard_teacher, name="dashboard-teacher"),
    path("dashboard/student/", dashboard_student, name="dashboard-student"),
    path("profile/", profile, name="profile"),
]
