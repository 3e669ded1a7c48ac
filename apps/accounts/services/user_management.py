"""User administration service (admin-only operations)."""

import logging
from typing import Optional
from uuid import UUID

from django.contrib.auth import get_user_model
from django.db import transaction

from ..models import UserRole
from .exceptions import DuplicateEmailError, UserNotFoundError, SelfDeactivationError

User = get_user_model()

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    return email.strip().lower()


def get_user(*, user_id: UUID) -> User:
    try:
        return User.objects.get(id=user_id)
    except User.DoesNotExist:
        raise UserNotFoundError('User not found')


@transaction.atomic
def create_user(
    *,
    email: str,
    password: str,
    full_name: str = '',
    role: str = UserRole.USER,
    created_by: Optional[User] = None,
) -> User:
    """
    Create a user account with a role.

    The account and its profile fields are written in one transaction,
    so a failure leaves no half-created user behind.

    Args:
        email: Login email (stored lowercased)
        password: Plain password (hashed before storage)
        full_name: Optional display name
        role: 'admin' or 'user'
        created_by: Admin performing the action (for logging)

    Returns:
        Created User instance

    Raises:
        DuplicateEmailError: If the email is already registered
    """
    email = normalize_email(email)

    if User.objects.filter(email=email).exists():
        raise DuplicateEmailError('User with this email already exists')

    user = User.objects.create_user(
        email=email,
        password=password,
        full_name=(full_name or '').strip(),
        role=role,
    )

    logger.info(
        'User %s created with role %s by %s',
        user.email, user.role, created_by.email if created_by else 'system'
    )
    return user


@transaction.atomic
def update_user(
    *,
    user_id: UUID,
    updated_by: User,
    email: Optional[str] = None,
    full_name: Optional[str] = None,
    role: Optional[str] = None,
    password: Optional[str] = None,
) -> User:
    """
    Update a user's email, name, role or password.

    Raises:
        UserNotFoundError: If user doesn't exist
        DuplicateEmailError: If the new email belongs to another user
        SelfDeactivationError: If an admin tries to drop their own admin role
    """
    try:
        user = User.objects.select_for_update().get(id=user_id)
    except User.DoesNotExist:
        raise UserNotFoundError('User not found')

    if email is not None:
        email = normalize_email(email)
        if User.objects.filter(email=email).exclude(id=user.id).exists():
            raise DuplicateEmailError('User with this email already exists')
        user.email = email

    if full_name is not None:
        user.full_name = full_name.strip()

    if role is not None:
        if user.id == updated_by.id and role != UserRole.ADMIN:
            raise SelfDeactivationError('You cannot remove your own admin role')
        user.role = role

    if password:
        user.set_password(password)

    user.save()
    return user


@transaction.atomic
def deactivate_user(*, user_id: UUID, deactivated_by: User) -> User:
    """
    Deactivate a user account (accounts are never hard-deleted).

    Raises:
        UserNotFoundError: If user doesn't exist
        SelfDeactivationError: If an admin targets their own account
    """
    if user_id == deactivated_by.id:
        raise SelfDeactivationError('You cannot deactivate your own account')

    try:
        user = User.objects.select_for_update().get(id=user_id)
    except User.DoesNotExist:
        raise UserNotFoundError('User not found')

    user.is_active = False
    user.save(update_fields=['is_active', 'updated_at'])

    logger.info('User %s deactivated by %s', user.email, deactivated_by.email)
    return user
