"""User registration service."""

import logging

from django.db import transaction, IntegrityError
from django.contrib.auth import get_user_model

from .exceptions import UserRegistrationError

User = get_user_model()
logger = logging.getLogger(__name__)


@transaction.atomic
def register_user(
    *,
    username: str,
    password: str,
    email: str = None,
    display_name: str = ""
) -> User:
    """
    Register a new shopper account.

    Args:
        username: Login name (unique)
        password: User's password (will be hashed)
        email: Optional email address (unique when given)
        display_name: Optional display name

    Returns:
        Created User instance

    Raises:
        UserRegistrationError: If the username or email is taken
    """
    if User.objects.filter(username__iexact=username).exists():
        raise UserRegistrationError(f"Username '{username}' is already taken")

    if email and User.objects.filter(email__iexact=email).exists():
        raise UserRegistrationError("Email already registered")

    try:
        user = User.objects.create_user(
            username=username,
            password=password,
            email=email or None,
            display_name=display_name or '',
        )
    except IntegrityError as e:
        raise UserRegistrationError(f"Registration failed: {str(e)}")

    logger.info("Registered user %s", user.username)
    return user
