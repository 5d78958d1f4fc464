import pytest
from decimal import Decimal
from apps.inventory.models import Item
from apps.recipes.services import create_recipe


@pytest.fixture
def pasta(db):
    return Item.objects.create(name='Spaghetti', category='Pantry', price=Decimal('1.99'))


@pytest.fixture
def sauce(db):
    return Item.objects.create(name='Tomato Sauce', category='Pantry', price=Decimal('2.50'))


@pytest.fixture
def recipe(pasta, sauce):
    return create_recipe(name='Spaghetti Night', feeds=3, ingredient_ids=[pasta.id, sauce.id])
