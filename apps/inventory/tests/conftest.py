import pytest
from decimal import Decimal
from apps.inventory.models import Item, ItemReview
from apps.inventory.services import create_item
from apps.stores.models import StoreMap, Aisle


@pytest.fixture
def aisle(db):
    store_map = StoreMap.objects.create(store_id='default', width=10, height=10)
    return Aisle.objects.create(store_map=store_map, x=2, y=3, label='Dairy')


@pytest.fixture
def milk(db):
    """Item created through the service so it has an opening price entry."""
    return create_item(
        name='Whole Milk',
        barcode='0123456789012',
        category='Dairy',
        price=Decimal('3.49'),
        stock=12,
    )


@pytest.fixture
def bread(db):
    return create_item(
        name='Sourdough Bread',
        barcode='0987654321098',
        category='Bakery',
        price=Decimal('4.25'),
        promo=True,
    )


@pytest.fixture
def review(milk, other_user):
    return ItemReview.objects.create(item=milk, reviewer=other_user, rating=4, review_text='Fresh')
