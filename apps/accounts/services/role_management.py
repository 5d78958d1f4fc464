"""
Role management service.

Handles store role updates with concurrency protection.
"""

import logging
from uuid import UUID

from django.db import transaction
from django.contrib.auth import get_user_model

from apps.accounts.models import Role
from .exceptions import InvalidRoleError, UserNotFoundError, LastAdminError

User = get_user_model()
logger = logging.getLogger(__name__)


@transaction.atomic
def update_user_role(*, user_id: UUID, new_role: str, updated_by: User) -> User:
    """
    Change a user's store role.

    Demoting the only remaining admin is refused so the back-office
    always stays reachable.

    Args:
        user_id: UUID of the user whose role to update
        new_role: 'user', 'manager' or 'admin'
        updated_by: Admin performing the update

    Returns:
        Updated User instance

    Raises:
        InvalidRoleError: If new_role is not a known role
        UserNotFoundError: If the user doesn't exist
        LastAdminError: If the change would remove the last admin
    """
    if new_role not in Role.values:
        raise InvalidRoleError(f"Invalid role. Must be one of: {', '.join(Role.values)}")

    try:
        user = User.objects.select_for_update().get(id=user_id)
    except User.DoesNotExist:
        raise UserNotFoundError(f"User {user_id} not found")

    if user.role == Role.ADMIN and new_role != Role.ADMIN:
        remaining_admins = (
            User.objects
            .filter(role=Role.ADMIN, is_active=True)
            .exclude(id=user.id)
            .count()
        )
        if remaining_admins == 0:
            raise LastAdminError("Cannot demote the last admin")

    old_role = user.role
    user.role = new_role
    user.is_staff = new_role == Role.ADMIN or user.is_superuser
    user.save(update_fields=['role', 'is_staff', 'updated_at'])

    logger.info(
        "Role of %s changed from %s to %s by %s",
        user.username, old_role, new_role, updated_by.username
    )
    return user
