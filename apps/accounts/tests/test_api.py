import pytest
from django.urls import reverse
from rest_framework import status
from apps.accounts.models import User, UserType


@pytest.mark.django_db
class TestUserManager:
    """Tests for the email-based user manager."""

    def test_create_user_normalizes_email(self):
        user = User.objects.create_user(email='Someone@Example.COM', password='TestPass123!')

        assert user.email == 'someone@example.com'
        assert user.username == 'someone'
        assert user.user_type == UserType.CONSUMER
        assert user.check_password('TestPass123!')

    def test_create_user_requires_email(self):
        with pytest.raises(ValueError):
            User.objects.create_user(email='', password='TestPass123!')

    def test_create_superuser(self):
        admin = User.objects.create_superuser(email='admin@example.com', password='TestPass123!')

        assert admin.is_staff is True
        assert admin.is_superuser is True

    def test_display_name_falls_back_to_username(self, user):
        user.display_name = ''

        assert user.get_display_name() == 'testuser'


@pytest.mark.django_db
class TestTokenObtain:
    """Tests for POST /api/auth/token/"""

    def test_login_success(self, api_client, user):
        url = reverse('token_obtain_pair')
        response = api_client.post(url, {'email': 'testuser@example.com', 'password': 'TestPass123!'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert 'access' in response.data
        assert 'refresh' in response.data

    def test_login_wrong_password(self, api_client, user):
        url = reverse('token_obtain_pair')
        response = api_client.post(url, {'email': 'testuser@example.com', 'password': 'WrongPass!'}, format='json')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_login_inactive_user(self, api_client, user_inactive):
        url = reverse('token_obtain_pair')
        response = api_client.post(url, {'email': 'inactive@example.com', 'password': 'TestPass123!'}, format='json')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_refresh(self, api_client, user):
        tokens = api_client.post(
            reverse('token_obtain_pair'),
            {'email': 'testuser@example.com', 'password': 'TestPass123!'},
            format='json',
        ).data

        response = api_client.post(reverse('token_refresh'), {'refresh': tokens['refresh']}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert 'access' in response.data


@pytest.mark.django_db
class TestHealthCheck:
    """Tests for GET /api/health/"""

    def test_health(self, api_client):
        response = api_client.get(reverse('health-check'))

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {'status': 'ok'}
