# core/permissions.py
from rest_framework import permissions

from .exceptions import Unauthenticated


class ReadOnlyOrAuthenticated(permissions.BasePermission):
    """
    - GET/HEAD/OPTIONS : public
    - POST/PUT/PATCH/DELETE : jeton valide obligatoire
    """
    def has_permission(self, request, view):
        if request.method in permissions.SAFE_METHODS:
            return True
        user = request.user
        if user is not None and getattr(user, "is_authenticated", False):
            return True
        raise Unauthenticated()
