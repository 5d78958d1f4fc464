import pytest
from apps.stores.models import StoreMap, Aisle, WallSegment


@pytest.fixture
def store_map(db):
    """6x4 map with two aisles and an outer-wall strip."""
    store_map = StoreMap.objects.create(store_id='default', width=6, height=4)
    WallSegment.objects.create(store_map=store_map, start_x=0, start_y=0, end_x=5, end_y=0)
    return store_map


@pytest.fixture
def aisle_a(store_map):
    return Aisle.objects.create(store_map=store_map, x=1, y=2, label='Dairy')


@pytest.fixture
def aisle_b(store_map):
    return Aisle.objects.create(store_map=store_map, x=3, y=2, label='Bakery')
