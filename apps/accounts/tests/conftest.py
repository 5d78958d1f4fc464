import pytest
from apps.accounts.models import User


@pytest.fixture
def user_inactive(db):
    """Create and return a deactivated account."""
    return User.objects.create_user(
        username='inactive',
        password='TestPass123!',
        display_name='Inactive User',
        is_active=False,
    )
