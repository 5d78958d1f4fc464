import pytest
from decimal import Decimal
from apps.inventory.models import Item
from apps.wishlists.models import Wishlist


@pytest.fixture
def coffee(db):
    return Item.objects.create(name='Ground Coffee', category='Pantry', price=Decimal('8.99'))


@pytest.fixture
def wishlist(user):
    return Wishlist.objects.create(user=user, name='Party')
