import pytest
from apps.inventory.models import Item
from apps.stores.models import StoreMap, Aisle
from apps.stores.services import (
    WALL,
    save_store_map,
    toggle_map_cell,
    render_store_grid,
    InvalidMapError,
    CellOutOfBoundsError,
    InvalidToolError,
)


@pytest.mark.django_db
class TestSaveStoreMap:

    def test_creates_map(self):
        store_map = save_store_map(
            store_id='north',
            width=5,
            height=5,
            aisles=[{'x': 1, 'y': 1, 'label': 'Produce'}],
            walls=[{'start_x': 4, 'start_y': 4, 'end_x': 0, 'end_y': 4}],
        )

        assert store_map.aisles.count() == 1
        wall = store_map.walls.get()
        assert (wall.start_x, wall.end_x) == (0, 4)

    def test_rejects_size_out_of_range(self):
        with pytest.raises(InvalidMapError):
            save_store_map(store_id='north', width=51, height=5, aisles=[], walls=[])

    def test_rejects_shared_cell(self):
        with pytest.raises(InvalidMapError):
            save_store_map(
                store_id='north', width=5, height=5,
                aisles=[{'x': 1, 'y': 1}, {'x': 1, 'y': 1}],
                walls=[],
            )

    def test_rejects_out_of_bounds_wall(self):
        with pytest.raises(CellOutOfBoundsError):
            save_store_map(
                store_id='north', width=5, height=5, aisles=[],
                walls=[{'start_x': 0, 'start_y': 0, 'end_x': 5, 'end_y': 0}],
            )

    def test_kept_aisle_moves_with_its_items(self, store_map, aisle_a, aisle_b):
        item = Item.objects.create(name='Milk', price='1.99', location=aisle_a)

        save_store_map(
            store_id='default', width=6, height=4,
            aisles=[
                {'id': aisle_a.id, 'x': 3, 'y': 2},
                {'id': aisle_b.id, 'x': 1, 'y': 2},
            ],
            walls=[],
        )

        aisle_a.refresh_from_db()
        item.refresh_from_db()
        assert (aisle_a.x, aisle_a.y) == (3, 2)
        assert item.location_id == aisle_a.id
        assert store_map.walls.count() == 0

    def test_omitted_aisle_deleted_and_items_unlocated(self, store_map, aisle_a, aisle_b):
        item = Item.objects.create(name='Bread', price='2.49', location=aisle_b)

        save_store_map(
            store_id='default', width=6, height=4,
            aisles=[{'id': aisle_a.id, 'x': 1, 'y': 2}, {'x': 5, 'y': 3}],
            walls=[],
        )

        item.refresh_from_db()
        assert item.location is None
        assert not Aisle.objects.filter(id=aisle_b.id).exists()
        assert store_map.aisles.count() == 2


@pytest.mark.django_db
class TestToggleMapCell:

    def test_creates_default_map(self):
        store_map = toggle_map_cell(store_id='fresh', tool='aisle', x=2, y=3)

        assert (store_map.width, store_map.height) == (10, 10)
        assert store_map.aisles.filter(x=2, y=3).exists()

    def test_aisle_toggle_removes_existing(self, aisle_a):
        toggle_map_cell(store_id='default', tool='aisle', x=1, y=2)

        assert not Aisle.objects.filter(id=aisle_a.id).exists()

    def test_wall_toggle(self, store_map):
        toggle_map_cell(store_id='default', tool='wall', x=2, y=3)
        assert store_map.walls.filter(start_x=2, start_y=3).exists()

        toggle_map_cell(store_id='default', tool='wall', x=2, y=3)
        assert not store_map.walls.filter(start_x=2, start_y=3).exists()

    def test_wall_toggle_under_larger_wall(self, store_map):
        toggle_map_cell(store_id='default', tool='wall', x=1, y=0)
        assert store_map.walls.count() == 2
        assert store_map.walls.filter(start_x=1, start_y=0, end_x=1, end_y=0).exists()

        toggle_map_cell(store_id='default', tool='wall', x=1, y=0)
        walls = list(store_map.walls.all())
        assert len(walls) == 1
        assert (walls[0].start_x, walls[0].end_x) == (0, 5)

    def test_out_of_bounds(self, store_map):
        with pytest.raises(CellOutOfBoundsError):
            toggle_map_cell(store_id='default', tool='wall', x=6, y=0)

    def test_unknown_tool(self, store_map):
        with pytest.raises(InvalidToolError):
            toggle_map_cell(store_id='default', tool='eraser', x=0, y=0)


@pytest.mark.django_db
class TestRenderStoreGrid:

    def test_unmapped_store(self):
        result = render_store_grid(store_id='nowhere')

        assert (result['width'], result['height']) == (10, 10)
        assert result['product_counts'] == {}

    def test_renders_walls_aisles_and_counts(self, store_map, aisle_a):
        Item.objects.create(name='Milk', price='1.99', location=aisle_a)

        result = render_store_grid(store_id='default')

        assert result['cells'][0] == [WALL] * 6
        assert result['cells'][2][1] == str(aisle_a.id)
        assert result['product_counts'] == {str(aisle_a.id): 1}
        assert StoreMap.objects.count() == 1
