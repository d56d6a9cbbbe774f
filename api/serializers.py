"""Serializers for REST API v1.

File uploads happen through the HTML forms; the API exposes stored
paths and public URLs only.
"""
from __future__ import annotations

from django.contrib.auth import get_user_model
from rest_framework import serializers

from courses.models import Course

User = get_user_model()


class UserSerializer(serializers.ModelSerializer):
    role = serializers.SerializerMethodField()
    name = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = ("id", "username", "name", "role")

    def get_role(self, obj) -> str | None:
        profile = getattr(obj, "profile", None)
        return getattr(profile, "role", None)

    def get_name(self, obj) -> str:
        profile = getattr(obj, "profile", None)
        return getattr(profile, "full_name", "") or obj.username


class CourseSerializer(serializers.ModelSerializer):
    teacher = UserSerializer(read_only=True)
    students_count = serializers.IntegerField(read_only=True)
    material_paths = serializers.ListField(child=serializers.CharField(), read_only=True)
    videos = serializers.ListField(child=serializers.URLField(), required=False)
    notes = serializers.ListField(child=serializers.CharField(), required=False)

    class Meta:
        model = Course
        fields = (
            "id",
            "name",
            "title",
            "description",
            "teacher",
            "students_count",
            "thumbnail",
            "material_paths",
            "videos",
            "notes",
            "created_at",
            "updated_at",
        )
        read_only_fields = ("name", "thumbnail", "created_at", "updated_at")
        extra_kwargs = {"title": {"required": True, "allow_blank": False}}

    def validate(self, attrs):
        # `name` mirrors the title, as in the HTML forms
        if attrs.get("title"):
            attrs["name"] = attrs["title"]
        return attrs


class HomeStatsSerializer(serializers.Serializer):
    distinct_student_count = serializers.IntegerField()
    teacher_count = serializers.IntegerField()
    course_count = serializers.IntegerField()
