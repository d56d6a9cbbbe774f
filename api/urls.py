"""API routes: versioned REST endpoints plus OpenAPI schema and docs."""
from django.urls import path, include
from rest_framework.routers import DefaultRouter
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView


from .views import CourseViewSet, UserViewSet, home_stats

router = DefaultRouter()
router.register(r"api/v1/users", UserViewSet, basename="users")
router.register(r"api/v1/courses", CourseViewSet, basename="courses")

urlpatterns = [
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path("docs/", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),
    path("api/v1/stats/", home_stats, name="home-stats"),
    path("", include(router.urls)),
]
