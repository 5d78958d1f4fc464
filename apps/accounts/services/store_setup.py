"""
First-run setup service.

A fresh installation has no users. The first account is created through
the setup endpoint and is always an admin; afterwards setup is closed.
"""

import logging

from django.db import transaction
from django.contrib.auth import get_user_model

from apps.accounts.models import Role
from .exceptions import SetupAlreadyCompletedError

User = get_user_model()
logger = logging.getLogger(__name__)


def needs_setup() -> bool:
    """Return True while no account exists."""
    return not User.objects.exists()


@transaction.atomic
def initialize_store_admin(*, username: str, password: str) -> User:
    """
    Create the initial admin account.

    Raises:
        SetupAlreadyCompletedError: If any user already exists
    """
    if User.objects.select_for_update().exists():
        raise SetupAlreadyCompletedError("Setup already completed")

    user = User.objects.create_user(
        username=username,
        password=password,
        role=Role.ADMIN,
        is_staff=True,
    )

    logger.info("Setup completed, initial admin %s created", user.username)
    return user
