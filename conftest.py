import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User, UserRole


def _authenticate(client, user):
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def admin_user(db):
    """Create and return an admin user."""
    return User.objects.create_user(
        email='admin@example.com',
        password='AdminPass123!',
        full_name='Admin User',
        role=UserRole.ADMIN,
    )


@pytest.fixture
def user(db):
    """Create and return a regular (non-admin) user."""
    return User.objects.create_user(
        email='operator@example.com',
        password='OperatorPass123!',
        full_name='Operator User',
        role=UserRole.USER,
    )


@pytest.fixture
def admin_client(admin_user):
    """Return an API client authenticated as admin using JWT."""
    return _authenticate(APIClient(), admin_user)


@pytest.fixture
def authenticated_client(user):
    """Return an API client authenticated as a regular user using JWT."""
    return _authenticate(APIClient(), user)


# =============================================================================
# Shared domain fixtures
# =============================================================================

@pytest.fixture
def categories(db):
    """Create three active linen categories keyed by short name."""
    from decimal import Decimal
    from apps.catalog.models import LinenCategory, CategorySection

    return {
        'towel': LinenCategory.objects.create(
            name='Towels - Bath Towel',
            price_per_item=Decimal('15.50'),
            section=CategorySection.HOUSEKEEPING,
        ),
        'sheet': LinenCategory.objects.create(
            name='Flat Sheet - Double',
            price_per_item=Decimal('8.75'),
            section=CategorySection.HOUSEKEEPING,
        ),
        'duvet': LinenCategory.objects.create(
            name='Duvet Covers - Double',
            price_per_item=Decimal('25.00'),
            section=CategorySection.HOUSEKEEPING,
        ),
    }


@pytest.fixture
def inactive_category(db):
    from decimal import Decimal
    from apps.catalog.models import LinenCategory

    return LinenCategory.objects.create(
        name='Curtain',
        price_per_item=Decimal('145.20'),
        is_active=False,
    )


@pytest.fixture
def linen_client(db):
    """Create and return an active laundry client."""
    from apps.clients.models import Client

    return Client.objects.create(
        name='Ocean View Hotel',
        email='accounts@oceanview.example.com',
        contact_number='021 555 0100',
        address='1 Beach Road, Cape Town',
    )
