import uuid
import pytest
from apps.wishlists.services import (
    create_wishlist,
    delete_wishlist,
    add_item_to_wishlist,
    remove_item_from_wishlist,
    WishlistNotFoundError,
    DuplicateWishlistError,
    ItemNotFoundError,
)


@pytest.mark.django_db
class TestWishlistManagement:

    def test_create(self, user):
        wishlist = create_wishlist(user=user, name='  Weekend ')

        assert wishlist.name == 'Weekend'

    def test_duplicate_name_case_insensitive(self, wishlist, user):
        with pytest.raises(DuplicateWishlistError):
            create_wishlist(user=user, name='party')

    def test_same_name_for_other_user(self, wishlist, other_user):
        assert create_wishlist(user=other_user, name='Party').user == other_user

    def test_add_item_is_idempotent(self, wishlist, user, coffee):
        _, added = add_item_to_wishlist(user=user, wishlist_id=wishlist.id, item_id=coffee.id)
        assert added is True

        result, added = add_item_to_wishlist(user=user, wishlist_id=wishlist.id, item_id=coffee.id)
        assert added is False
        assert result.items.count() == 1

    def test_add_unknown_item(self, wishlist, user):
        with pytest.raises(ItemNotFoundError):
            add_item_to_wishlist(user=user, wishlist_id=wishlist.id, item_id=uuid.uuid4())

    def test_cannot_touch_other_users_list(self, wishlist, other_user, coffee):
        with pytest.raises(WishlistNotFoundError):
            add_item_to_wishlist(user=other_user, wishlist_id=wishlist.id, item_id=coffee.id)

    def test_remove_item(self, wishlist, user, coffee):
        wishlist.items.add(coffee)

        result = remove_item_from_wishlist(user=user, wishlist_id=wishlist.id, item_id=coffee.id)

        assert result.items.count() == 0

    def test_delete(self, wishlist, user):
        delete_wishlist(user=user, wishlist_id=wishlist.id)

        with pytest.raises(WishlistNotFoundError):
            delete_wishlist(user=user, wishlist_id=wishlist.id)
