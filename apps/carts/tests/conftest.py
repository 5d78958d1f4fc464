import pytest
from decimal import Decimal
from apps.inventory.models import Item
from apps.carts.models import CartItem


@pytest.fixture
def apples(db):
    return Item.objects.create(
        name='Apples', barcode='4011', category='Produce', price=Decimal('10.00'), stock=5
    )


@pytest.fixture
def soap(db):
    # Stock not tracked
    return Item.objects.create(name='Soap', category='Household', price=Decimal('3.33'))


@pytest.fixture
def filled_cart(user, apples, soap):
    CartItem.objects.create(user=user, item=apples, quantity=2)
    CartItem.objects.create(user=user, item=soap, quantity=1)
    return user


@pytest.fixture(autouse=True)
def tax_rate(settings):
    settings.TAX_RATE = Decimal('0.0825')
