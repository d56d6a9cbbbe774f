from django.urls import path

from .views import upload_for_course

app_name = "materials"

urlpatterns = [
    path("course/<int:course_id>/upload/", upload_for_course, name="upload"),
]
