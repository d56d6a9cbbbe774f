"""Role-based access decorators."""
from __future__ import annotations

from functools import wraps
from django.core.exceptions import PermissionDenied
from django.http import HttpRequest

from .models import role_of


def role_required(*roles: str):
    """Require the current user to have one of the given roles.

    Unauthenticated users and users without a profile are rejected.
    """

    def decorator(view_func):
        @wraps(view_func)
        def _wrapped(request: HttpRequest, *args, **kwargs):
            if role_of(getattr(request, "user", None)) not in roles:
                raise PermissionDenied
            return view_func(request, *args, **kwargs)

        return _wrapped

    return decorator
