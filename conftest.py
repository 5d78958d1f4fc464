"""Account fixtures shared by every app's tests."""

import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User, Role


def _client_for(user):
    client = APIClient()
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def user(db):
    """Create and return a shopper."""
    return User.objects.create_user(
        username='shopper',
        password='TestPass123!',
        display_name='Test Shopper',
    )


@pytest.fixture
def other_user(db):
    """Create and return another shopper."""
    return User.objects.create_user(
        username='othershopper',
        password='OtherPass123!',
        display_name='Other Shopper',
    )


@pytest.fixture
def manager(db):
    return User.objects.create_user(
        username='manager',
        password='ManagerPass123!',
        role=Role.MANAGER,
    )


@pytest.fixture
def admin_user(db):
    return User.objects.create_user(
        username='storeadmin',
        password='AdminPass123!',
        role=Role.ADMIN,
    )


@pytest.fixture
def authenticated_client(user):
    """Return an API client authenticated as the shopper using JWT."""
    return _client_for(user)


@pytest.fixture
def other_client(other_user):
    return _client_for(other_user)


@pytest.fixture
def manager_client(manager):
    return _client_for(manager)


@pytest.fixture
def admin_client(admin_user):
    return _client_for(admin_user)
