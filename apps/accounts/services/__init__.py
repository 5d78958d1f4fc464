"""Services for accounts business logic."""

from .exceptions import (
    AccountsServiceError,
    UserRegistrationError,
    InvalidCredentialsError,
    InactiveAccountError,
    UserNotFoundError,
    SetupAlreadyCompletedError,
    InvalidRoleError,
    LastAdminError,
)
from .user_registration import register_user
from .user_authentication import authenticate_user
from .store_setup import needs_setup, initialize_store_admin
from .role_management import update_user_role
from .account_management import update_profile

__all__ = [
    # Exceptions
    'AccountsServiceError',
    'UserRegistrationError',
    'InvalidCredentialsError',
    'InactiveAccountError',
    'UserNotFoundError',
    'SetupAlreadyCompletedError',
    'InvalidRoleError',
    'LastAdminError',
    # Services
    'register_user',
    'authenticate_user',
    'needs_setup',
    'initialize_store_admin',
    'update_user_role',
    'update_profile',
]
