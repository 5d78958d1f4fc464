"""
Role-based permission classes shared by every app.

Store roles are 'user', 'manager' and 'admin'. Managers and admins run the
back-office (inventory, promos, maps, recipes); only admins manage users.
"""
from rest_framework.permissions import BasePermission


class IsStoreAdmin(BasePermission):
    """Permission: User must have the admin role."""

    message = 'Admin role required.'

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and user.is_store_admin)


class IsStoreStaff(BasePermission):
    """Permission: User must be a manager or an admin."""

    message = 'Manager or admin role required.'

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and user.is_store_staff)


class IsAccountOwnerOrAdmin(BasePermission):
    """
    Permission for per-user resources addressed as /api/users/{user_id}/...

    Allows access if the URL's user is the requester, or the requester is
    an admin.
    """

    message = 'You can only access your own account.'

    def has_permission(self, request, view):
        user = request.user
        if not (user and user.is_authenticated):
            return False

        owner_id = view.kwargs.get('user_id') or view.kwargs.get('pk')
        if owner_id is None:
            return False

        return str(owner_id) == str(user.id) or user.is_store_admin
