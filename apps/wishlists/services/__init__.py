"""Services for wishlists."""

from .exceptions import (
    WishlistsServiceError,
    WishlistNotFoundError,
    DuplicateWishlistError,
    ItemNotFoundError,
)
from .wishlist_management import (
    get_user_wishlists,
    get_wishlist,
    create_wishlist,
    delete_wishlist,
    add_item_to_wishlist,
    remove_item_from_wishlist,
)

__all__ = [
    # Exceptions
    'WishlistsServiceError',
    'WishlistNotFoundError',
    'DuplicateWishlistError',
    'ItemNotFoundError',
    # Wishlist management
    'get_user_wishlists',
    'get_wishlist',
    'create_wishlist',
    'delete_wishlist',
    'add_item_to_wishlist',
    'remove_item_from_wishlist',
]
