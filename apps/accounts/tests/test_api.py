import pytest
from django.urls import reverse
from rest_framework import status
from apps.accounts.models import User, UserRole


# =============================================================================
# Login Tests
# =============================================================================

@pytest.mark.django_db
class TestLogin:
    """Tests for POST /api/auth/login/"""

    def test_login_success(self, api_client, user):
        """Valid credentials return tokens inside the envelope."""
        url = reverse('accounts:login')
        response = api_client.post(url, {
            'email': 'operator@example.com',
            'password': 'OperatorPass123!',
        }, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['success'] is True
        assert response.data['error'] is None
        assert 'access' in response.data['data']['tokens']
        assert response.data['data']['user']['role'] == 'user'

    def test_login_email_case_insensitive(self, api_client, user):
        """Email is matched regardless of case."""
        url = reverse('accounts:login')
        response = api_client.post(url, {
            'email': 'Operator@Example.com',
            'password': 'OperatorPass123!',
        }, format='json')

        assert response.status_code == status.HTTP_200_OK

    def test_login_wrong_password(self, api_client, user):
        """Wrong password returns 401 envelope."""
        url = reverse('accounts:login')
        response = api_client.post(url, {
            'email': user.email,
            'password': 'WrongPass!',
        }, format='json')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data['success'] is False
        assert response.data['error'] == 'Invalid credentials'
        assert response.data['data'] is None

    def test_login_inactive_user(self, api_client, inactive_user):
        """Inactive users cannot log in."""
        url = reverse('accounts:login')
        response = api_client.post(url, {
            'email': inactive_user.email,
            'password': 'InactivePass123!',
        }, format='json')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_login_missing_fields(self, api_client):
        """Missing fields return 400 with a flattened message."""
        url = reverse('accounts:login')
        response = api_client.post(url, {'email': 'a@b.com'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'password' in response.data['error']

    def test_login_get_not_allowed(self, api_client):
        """GET on login returns 405 envelope."""
        url = reverse('accounts:login')
        response = api_client.get(url)

        assert response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED
        assert response.data['success'] is False


@pytest.mark.django_db
class TestCurrentUser:
    """Tests for GET /api/auth/me/"""

    def test_current_user(self, authenticated_client, user):
        url = reverse('accounts:current-user')
        response = authenticated_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['data']['email'] == user.email

    def test_current_user_unauthenticated(self, api_client):
        url = reverse('accounts:current-user')
        response = api_client.get(url)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data['success'] is False


# =============================================================================
# User Administration Tests
# =============================================================================

@pytest.mark.django_db
class TestUserList:
    """Tests for GET/POST /api/users/"""

    def test_list_users_as_admin(self, admin_client, admin_user, user):
        url = reverse('accounts:user-list')
        response = admin_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        emails = [u['email'] for u in response.data['data']]
        assert admin_user.email in emails
        assert user.email in emails

    def test_list_users_as_regular_user_forbidden(self, authenticated_client):
        url = reverse('accounts:user-list')
        response = authenticated_client.get(url)

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.data['error'] == 'Admin access required'

    def test_create_user(self, admin_client):
        """Admin creates a user; email is lowercased."""
        url = reverse('accounts:user-list')
        response = admin_client.post(url, {
            'email': '  New.User@Example.COM ',
            'password': 'secret1',
            'full_name': 'New User',
            'role': 'user',
        }, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['data']['email'] == 'new.user@example.com'
        assert User.objects.filter(email='new.user@example.com').exists()

    def test_create_user_defaults_to_user_role(self, admin_client):
        url = reverse('accounts:user-list')
        response = admin_client.post(url, {
            'email': 'plain@example.com',
            'password': 'secret1',
        }, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['data']['role'] == UserRole.USER

    def test_create_user_duplicate_email(self, admin_client, user):
        url = reverse('accounts:user-list')
        response = admin_client.post(url, {
            'email': user.email.upper(),
            'password': 'secret1',
        }, format='json')

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.data['error'] == 'User with this email already exists'

    def test_create_user_short_password(self, admin_client):
        url = reverse('accounts:user-list')
        response = admin_client.post(url, {
            'email': 'short@example.com',
            'password': '12345',
        }, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'Password must be at least 6 characters' in response.data['error']

    def test_create_user_invalid_email(self, admin_client):
        url = reverse('accounts:user-list')
        response = admin_client.post(url, {
            'email': 'not-an-email',
            'password': 'secret1',
        }, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_create_user_invalid_role(self, admin_client):
        url = reverse('accounts:user-list')
        response = admin_client.post(url, {
            'email': 'role@example.com',
            'password': 'secret1',
            'role': 'superuser',
        }, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'Role must be either "admin" or "user"' in response.data['error']

    def test_create_user_forbidden_for_regular_user(self, authenticated_client):
        url = reverse('accounts:user-list')
        response = authenticated_client.post(url, {
            'email': 'x@example.com',
            'password': 'secret1',
        }, format='json')

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_put_not_allowed(self, admin_client):
        url = reverse('accounts:user-list')
        response = admin_client.put(url, {}, format='json')

        assert response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED


@pytest.mark.django_db
class TestUserDetail:
    """Tests for GET/PATCH/DELETE /api/users/{id}/"""

    def test_get_user(self, admin_client, user):
        url = reverse('accounts:user-detail', kwargs={'pk': user.id})
        response = admin_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['data']['id'] == str(user.id)

    def test_get_missing_user(self, admin_client):
        url = reverse('accounts:user-detail', kwargs={'pk': '00000000-0000-0000-0000-000000000000'})
        response = admin_client.get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data['error'] == 'User not found'

    def test_patch_role_and_name(self, admin_client, user):
        url = reverse('accounts:user-detail', kwargs={'pk': user.id})
        response = admin_client.patch(url, {
            'role': 'admin',
            'full_name': 'Promoted',
        }, format='json')

        assert response.status_code == status.HTTP_200_OK
        user.refresh_from_db()
        assert user.role == UserRole.ADMIN
        assert user.full_name == 'Promoted'

    def test_patch_password(self, admin_client, user):
        url = reverse('accounts:user-detail', kwargs={'pk': user.id})
        response = admin_client.patch(url, {'password': 'brandnew'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        user.refresh_from_db()
        assert user.check_password('brandnew')

    def test_patch_email_conflict(self, admin_client, user, admin_user):
        url = reverse('accounts:user-detail', kwargs={'pk': user.id})
        response = admin_client.patch(url, {'email': admin_user.email}, format='json')

        assert response.status_code == status.HTTP_409_CONFLICT

    def test_patch_empty_body(self, admin_client, user):
        url = reverse('accounts:user-detail', kwargs={'pk': user.id})
        response = admin_client.patch(url, {}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_admin_cannot_demote_self(self, admin_client, admin_user):
        url = reverse('accounts:user-detail', kwargs={'pk': admin_user.id})
        response = admin_client.patch(url, {'role': 'user'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        admin_user.refresh_from_db()
        assert admin_user.role == UserRole.ADMIN

    def test_delete_deactivates_user(self, admin_client, user):
        url = reverse('accounts:user-detail', kwargs={'pk': user.id})
        response = admin_client.delete(url)

        assert response.status_code == status.HTTP_200_OK
        user.refresh_from_db()
        assert user.is_active is False

    def test_admin_cannot_deactivate_self(self, admin_client, admin_user):
        url = reverse('accounts:user-detail', kwargs={'pk': admin_user.id})
        response = admin_client.delete(url)

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_role_change_applies_on_next_request(self, api_client, admin_user, second_admin):
        """Demoted admins lose access immediately (no cached role)."""
        from rest_framework_simplejwt.tokens import RefreshToken

        token = RefreshToken.for_user(second_admin).access_token
        api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {token}')
        url = reverse('accounts:user-list')
        assert api_client.get(url).status_code == status.HTTP_200_OK

        second_admin.role = UserRole.USER
        second_admin.save()

        assert api_client.get(url).status_code == status.HTTP_403_FORBIDDEN
