"""Domain-specific exceptions for wishlist services."""


class WishlistsServiceError(Exception):
    """Base exception for wishlist services."""
    pass


class WishlistNotFoundError(WishlistsServiceError):
    """Raised when wishlist does not exist or belongs to someone else."""
    pass


class DuplicateWishlistError(WishlistsServiceError):
    """Raised when the user already has a wishlist with that name."""
    pass


class ItemNotFoundError(WishlistsServiceError):
    """Raised when the item to add does not exist."""
    pass
