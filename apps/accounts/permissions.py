"""
Custom permission classes for accounts app.

Admin status is read from the authenticated user on every request,
so role changes take effect immediately.
"""
from rest_framework.permissions import BasePermission

from .models import UserRole


class IsAdminRole(BasePermission):
    """
    Permission that only allows users with the admin role.

    Usage:
        @permission_classes([IsAuthenticated, IsAdminRole])
        def list_users(request):
            ...
    """

    message = 'Admin access required'

    def has_permission(self, request, view):
        """Check that the requesting user holds the admin role."""
        user = request.user
        return bool(
            user
            and user.is_authenticated
            and user.is_active
            and getattr(user, 'role', None) == UserRole.ADMIN
        )
