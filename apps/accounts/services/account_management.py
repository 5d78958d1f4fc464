"""Account management service."""

from django.db import transaction
from django.contrib.auth import get_user_model
from uuid import UUID
from typing import Dict, Any

from .exceptions import UserNotFoundError, UserRegistrationError

User = get_user_model()


@transaction.atomic
def update_profile(*, user_id: UUID, data: Dict[str, Any]) -> User:
    """
    Update the editable profile fields of a user.

    Args:
        user_id: User's ID
        data: Fields to update (display_name, email, family)

    Returns:
        Updated User instance

    Raises:
        UserNotFoundError: If user doesn't exist
        UserRegistrationError: If the new email belongs to someone else
    """
    try:
        user = (
            User.objects
            .select_for_update()
            .get(id=user_id)
        )
    except User.DoesNotExist:
        raise UserNotFoundError(f"User {user_id} not found")

    email = data.get('email')
    if email and User.objects.filter(email__iexact=email).exclude(id=user.id).exists():
        raise UserRegistrationError("Email already registered")

    allowed_fields = ['display_name', 'email', 'family']
    update_fields = []
    for field in allowed_fields:
        if field in data:
            value = data[field]
            if field == 'email':
                value = value or None
            setattr(user, field, value)
            update_fields.append(field)

    if update_fields:
        update_fields.append('updated_at')
        user.save(update_fields=update_fields)

    return user
