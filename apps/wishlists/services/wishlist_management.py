"""Wishlist management service - a shopper's named item lists."""

from django.db import transaction
from django.db.models import QuerySet
from uuid import UUID

from apps.accounts.models import User
from apps.inventory.models import Item
from ..models import Wishlist
from .exceptions import (
    WishlistNotFoundError,
    DuplicateWishlistError,
    ItemNotFoundError,
)


def get_user_wishlists(*, user: User) -> QuerySet[Wishlist]:
    return Wishlist.objects.filter(user=user).prefetch_related('items')


def get_wishlist(*, user: User, wishlist_id: UUID) -> Wishlist:
    """
    Raises:
        WishlistNotFoundError: If the wishlist is not one of the user's
    """
    try:
        return Wishlist.objects.prefetch_related('items').get(id=wishlist_id, user=user)
    except Wishlist.DoesNotExist:
        raise WishlistNotFoundError("Wishlist not found")


@transaction.atomic
def create_wishlist(*, user: User, name: str) -> Wishlist:
    """
    Create an empty wishlist.

    Args:
        user: Owner
        name: List name, unique per user (case-insensitive)

    Returns:
        Created Wishlist instance

    Raises:
        DuplicateWishlistError: If the user already has a list with that name
    """
    name = name.strip()
    if Wishlist.objects.filter(user=user, name__iexact=name).exists():
        raise DuplicateWishlistError(f"You already have a wishlist named '{name}'")
    return Wishlist.objects.create(user=user, name=name)


@transaction.atomic
def delete_wishlist(*, user: User, wishlist_id: UUID) -> None:
    deleted, _ = Wishlist.objects.filter(id=wishlist_id, user=user).delete()
    if not deleted:
        raise WishlistNotFoundError("Wishlist not found")


@transaction.atomic
def add_item_to_wishlist(*, user: User, wishlist_id: UUID, item_id: UUID) -> tuple[Wishlist, bool]:
    """
    Add an item to a wishlist.

    Adding an item that is already listed changes nothing.

    Returns:
        Tuple of (Wishlist, added: bool)

    Raises:
        WishlistNotFoundError: If the wishlist is not one of the user's
        ItemNotFoundError: If the item doesn't exist
    """
    wishlist = get_wishlist(user=user, wishlist_id=wishlist_id)

    try:
        item = Item.objects.get(id=item_id)
    except Item.DoesNotExist:
        raise ItemNotFoundError("Item not found")

    added = not wishlist.items.filter(id=item.id).exists()
    if added:
        wishlist.items.add(item)
        wishlist.save(update_fields=['updated_at'])

    return get_wishlist(user=user, wishlist_id=wishlist_id), added


@transaction.atomic
def remove_item_from_wishlist(*, user: User, wishlist_id: UUID, item_id: UUID) -> Wishlist:
    """
    Remove an item from a wishlist; removing an unlisted item is a no-op.

    Raises:
        WishlistNotFoundError: If the wishlist is not one of the user's
    """
    wishlist = get_wishlist(user=user, wishlist_id=wishlist_id)
    wishlist.items.remove(item_id)
    return get_wishlist(user=user, wishlist_id=wishlist_id)
