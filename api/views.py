"""REST API v1 viewsets and endpoints."""
from __future__ import annotations

from dataclasses import asdict

from django.conf import settings
from django.contrib.auth import get_user_model
from django.db.models import Count
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import mixins, status, viewsets
from rest_framework.decorators import action, api_view
from rest_framework.response import Response

from courses.exceptions import AlreadyEnrolled
from courses.models import Course
from courses.services import (
    Action,
    authorize_mutation,
    compute_home_stats,
    enrol,
    top_courses,
    unenrol,
)
from .pagination import DefaultPagination
from .permissions import IsAuthenticatedOrReadOnly
from .serializers import CourseSerializer, HomeStatsSerializer, UserSerializer

User = get_user_model()

MAX_TOP_LIMIT = 50


class UserViewSet(mixins.ListModelMixin, mixins.RetrieveModelMixin, viewsets.GenericViewSet):
    queryset = User.objects.all().select_related("profile").order_by("username")
    serializer_class = UserSerializer
    permission_classes = [IsAuthenticatedOrReadOnly]
    pagination_class = DefaultPagination
    filterset_fields = ["profile__role"]
    search_fields = ["username", "profile__full_name"]
    ordering_fields = ["username", "id"]


class CourseViewSet(viewsets.ModelViewSet):
    serializer_class = CourseSerializer
    permission_classes = [IsAuthenticatedOrReadOnly]
    pagination_class = DefaultPagination
    filterset_fields = ["teacher"]
    search_fields = ["name", "title", "description", "teacher__username"]
    ordering_fields = ["created_at", "updated_at", "name", "num_students"]
    ordering = ["name", "id"]

    def get_queryset(self):
        return (
            Course.objects.select_related("teacher", "teacher__profile")
            .prefetch_related("materials")
            .annotate(num_students=Count("enrolments"))
        )

    def perform_create(self, serializer):
        authorize_mutation(None, self.request.user, Action.CREATE)
        serializer.save(teacher=self.request.user)

    def update(self, request, *args, **kwargs):
        # Ownership before payload validation; partial_update lands here too
        authorize_mutation(self.get_object(), request.user, Action.EDIT)
        return super().update(request, *args, **kwargs)

    def perform_destroy(self, instance):
        authorize_mutation(instance, self.request.user, Action.DELETE)
        instance.delete()

    @extend_schema(request=None, responses=CourseSerializer)
    @action(detail=True, methods=["post"])
    def enrol(self, request, pk=None):
        try:
            enrol(pk, request.user)
        except AlreadyEnrolled as exc:
            return Response({"detail": exc.message}, status=status.HTTP_400_BAD_REQUEST)
        return Response(self.get_serializer(self.get_object()).data, status=status.HTTP_201_CREATED)

    @extend_schema(request=None, responses=CourseSerializer)
    @action(detail=True, methods=["post"])
    def unenrol(self, request, pk=None):
        unenrol(pk, request.user)
        return Response(self.get_serializer(self.get_object()).data)

    @extend_schema(
        parameters=[OpenApiParameter("limit", OpenApiTypes.INT, description="Number of courses (max 50).")],
        responses=CourseSerializer(many=True),
    )
    @action(detail=False, methods=["get"])
    def top(self, request):
        try:
            limit = int(request.query_params.get("limit", settings.HOME_TOP_COURSES))
        except (TypeError, ValueError):
            limit = settings.HOME_TOP_COURSES
        limit = max(0, min(limit, MAX_TOP_LIMIT))
        base = Course.objects.select_related("teacher__profile").prefetch_related("materials")
        return Response(self.get_serializer(top_courses(base, limit), many=True).data)


@extend_schema(responses=HomeStatsSerializer)
@api_view(["GET"])
def home_stats(request):
    """Student memberships, teachers, and courses on the platform."""
    return Response(HomeStatsSerializer(asdict(compute_home_stats())).data)
