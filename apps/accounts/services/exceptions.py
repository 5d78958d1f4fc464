"""Domain-specific exceptions for accounts services."""


class AccountsServiceError(Exception):
    """Base exception for accounts services."""
    pass


class UserRegistrationError(AccountsServiceError):
    """Raised when user registration fails."""
    pass


class InvalidCredentialsError(AccountsServiceError):
    """Raised when authentication credentials are invalid."""
    pass


class InactiveAccountError(AccountsServiceError):
    """Raised when account is deactivated."""
    pass


class UserNotFoundError(AccountsServiceError):
    """Raised when user does not exist."""
    pass


class SetupAlreadyCompletedError(AccountsServiceError):
    """Raised when first-run setup is attempted on a populated store."""
    pass


class InvalidRoleError(AccountsServiceError):
    """Raised when an unknown role is requested."""
    pass


class LastAdminError(AccountsServiceError):
    """Raised when a change would leave the store without an admin."""
    pass
