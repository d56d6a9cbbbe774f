"""Custom permissions for REST API v1."""
from __future__ import annotations

from rest_framework.permissions import BasePermission, SAFE_METHODS


class IsAuthenticatedOrReadOnly(BasePermission):
    """Anyone may read; writes need a session.

    Role and ownership checks happen in `courses.services`.
    """

    def has_permission(self, request, view):  # noqa: D401
        return bool(request.method in SAFE_METHODS or (request.user and request.user.is_authenticated))
