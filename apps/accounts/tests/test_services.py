"""
Service layer unit tests for accounts app.

Tests cover:
- User creation (normalisation, duplicates, rollback)
- User updates and deactivation rules
"""

import pytest
from unittest.mock import patch

from apps.accounts.models import User, UserRole
from apps.accounts.services import (
    create_user,
    update_user,
    deactivate_user,
    DuplicateEmailError,
    UserNotFoundError,
    SelfDeactivationError,
)


@pytest.mark.django_db
class TestCreateUser:

    def test_create_user_lowercases_email(self, admin_user):
        user = create_user(
            email=' Mixed.Case@Example.com ',
            password='secret1',
            full_name='  Mixed Case ',
            created_by=admin_user,
        )

        assert user.email == 'mixed.case@example.com'
        assert user.full_name == 'Mixed Case'
        assert user.role == UserRole.USER
        assert user.check_password('secret1')

    def test_duplicate_email_rejected(self, user):
        with pytest.raises(DuplicateEmailError):
            create_user(email=user.email.upper(), password='secret1')

    def test_failure_after_insert_leaves_no_user(self):
        """A failure inside the transaction rolls back the account."""
        with patch('apps.accounts.services.user_management.logger') as mock_logger:
            mock_logger.info.side_effect = RuntimeError('profile write failed')
            with pytest.raises(RuntimeError):
                create_user(email='rollback@example.com', password='secret1')

        assert not User.objects.filter(email='rollback@example.com').exists()


@pytest.mark.django_db
class TestUpdateUser:

    def test_update_missing_user(self, admin_user):
        with pytest.raises(UserNotFoundError):
            update_user(
                user_id='00000000-0000-0000-0000-000000000000',
                updated_by=admin_user,
                full_name='Ghost',
            )

    def test_update_email_keeps_own_address(self, admin_user, user):
        updated = update_user(user_id=user.id, updated_by=admin_user, email=user.email)
        assert updated.email == user.email

    def test_cannot_remove_own_admin_role(self, admin_user):
        with pytest.raises(SelfDeactivationError):
            update_user(user_id=admin_user.id, updated_by=admin_user, role=UserRole.USER)


@pytest.mark.django_db
class TestDeactivateUser:

    def test_deactivate(self, admin_user, user):
        result = deactivate_user(user_id=user.id, deactivated_by=admin_user)
        assert result.is_active is False

    def test_cannot_deactivate_self(self, admin_user):
        with pytest.raises(SelfDeactivationError):
            deactivate_user(user_id=admin_user.id, deactivated_by=admin_user)
