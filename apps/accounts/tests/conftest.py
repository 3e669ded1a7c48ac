import pytest
from apps.accounts.models import User, UserRole


@pytest.fixture
def inactive_user(db):
    """Create and return an inactive user."""
    return User.objects.create_user(
        email='inactive@example.com',
        password='InactivePass123!',
        full_name='Inactive User',
        is_active=False,
    )


@pytest.fixture
def second_admin(db):
    """Create and return another admin."""
    return User.objects.create_user(
        email='second.admin@example.com',
        password='AdminPass123!',
        full_name='Second Admin',
        role=UserRole.ADMIN,
    )
