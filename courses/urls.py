from django.urls import path

from .views import (
    course_list,
    course_create,
    course_detail,
    course_edit,
    course_enrol,
    course_unenrol,
    course_delete,
    my_courses,
)

app_name = "courses"

urlpatterns = [
    path("", course_list, name="list"),
    path("create/", course_create, name="create"),
    path("mine/", my_courses, name="mine"),
    path("<int:pk>/", course_detail, name="detail"),
    path("<int:pk>/edit/", course_edit, name="edit"),
    path("<int:pk>/enrol/", course_enrol, name="enrol"),
    path("<int:pk>/unenrol/", course_unenrol, name="unenrol"),
    path("<int:pk>/delete/", course_delete, name="delete"),
]
