"""
Tests for accounts permission classes.

Tests cover:
- IsAdminRole: only active users with the admin role pass
"""
from unittest.mock import Mock

from django.contrib.auth.models import AnonymousUser

from apps.accounts.permissions import IsAdminRole
from apps.accounts.models import UserRole


def _request_for(user):
    request = Mock()
    request.user = user
    return request


class TestIsAdminRole:
    """Tests for IsAdminRole permission."""

    def setup_method(self):
        self.permission = IsAdminRole()
        self.view = Mock()

    def test_admin_allowed(self):
        user = Mock(is_authenticated=True, is_active=True, role=UserRole.ADMIN)
        assert self.permission.has_permission(_request_for(user), self.view) is True

    def test_regular_user_denied(self):
        user = Mock(is_authenticated=True, is_active=True, role=UserRole.USER)
        assert self.permission.has_permission(_request_for(user), self.view) is False

    def test_inactive_admin_denied(self):
        user = Mock(is_authenticated=True, is_active=False, role=UserRole.ADMIN)
        assert self.permission.has_permission(_request_for(user), self.view) is False

    def test_anonymous_denied(self):
        assert self.permission.has_permission(_request_for(AnonymousUser()), self.view) is False

    def test_message(self):
        assert self.permission.message == 'Admin access required'
