"""
Store map persistence and editing.

Saving a map upserts the StoreMap row, replaces its walls and reconciles
its aisles so that aisles which keep their id keep their stocked items.
"""

import logging
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from django.conf import settings
from django.db import transaction

from ..models import StoreMap, Aisle, WallSegment
from .exceptions import InvalidMapError, CellOutOfBoundsError, InvalidToolError
from .grid import (
    WallRect,
    AisleCell,
    build_grid,
)

logger = logging.getLogger(__name__)

DEFAULT_MAP_SIZE = 10

TOOL_AISLE = 'aisle'
TOOL_WALL = 'wall'


def default_map_payload(store_id: str) -> Dict[str, Any]:
    """Payload served for a store that has never been mapped."""
    return {
        'id': 'default',
        'store_id': store_id,
        'map_size': {'width': DEFAULT_MAP_SIZE, 'height': DEFAULT_MAP_SIZE},
        'aisles': [],
        'wall_coordinates': [],
    }


def get_store_map(*, store_id: str) -> Optional[StoreMap]:
    return (
        StoreMap.objects
        .prefetch_related('aisles__products', 'walls')
        .filter(store_id=store_id)
        .first()
    )


def _wall_rects(store_map: StoreMap) -> List[WallRect]:
    return [
        WallRect(w.start_x, w.start_y, w.end_x, w.end_y)
        for w in store_map.walls.all()
    ]


def render_store_grid(*, store_id: str) -> Dict[str, Any]:
    """
    Render the store's grid along with the number of products per aisle.

    An unmapped store renders as an empty default-size grid.
    """
    store_map = get_store_map(store_id=store_id)
    if store_map is None:
        return {
            'store_id': store_id,
            'width': DEFAULT_MAP_SIZE,
            'height': DEFAULT_MAP_SIZE,
            'cells': build_grid(DEFAULT_MAP_SIZE, DEFAULT_MAP_SIZE),
            'product_counts': {},
        }

    aisles = list(store_map.aisles.all())
    cells = build_grid(
        store_map.width,
        store_map.height,
        walls=_wall_rects(store_map),
        aisles=[AisleCell(str(a.id), a.x, a.y) for a in aisles],
    )
    return {
        'store_id': store_map.store_id,
        'width': store_map.width,
        'height': store_map.height,
        'cells': cells,
        'product_counts': {str(a.id): len(a.products.all()) for a in aisles},
    }


def _validate_layout(width, height, aisles, walls):
    max_dimension = settings.MAP_MAX_DIMENSION
    for name, value in (('width', width), ('height', height)):
        if not 1 <= value <= max_dimension:
            raise InvalidMapError(f"Map {name} must be between 1 and {max_dimension}")

    seen = set()
    seen_ids = set()
    for aisle in aisles:
        x, y = aisle['x'], aisle['y']
        if not (0 <= x < width and 0 <= y < height):
            raise CellOutOfBoundsError(f"Aisle at ({x}, {y}) is outside the {width}x{height} map")
        if (x, y) in seen:
            raise InvalidMapError(f"Two aisles share cell ({x}, {y})")
        seen.add((x, y))
        if aisle.get('id'):
            if str(aisle['id']) in seen_ids:
                raise InvalidMapError(f"Aisle {aisle['id']} submitted twice")
            seen_ids.add(str(aisle['id']))

    for wall in walls:
        for key_x, key_y in (('start_x', 'start_y'), ('end_x', 'end_y')):
            x, y = wall[key_x], wall[key_y]
            if not (0 <= x < width and 0 <= y < height):
                raise CellOutOfBoundsError(f"Wall point ({x}, {y}) is outside the {width}x{height} map")


@transaction.atomic
def save_store_map(
    *,
    store_id: str,
    width: int,
    height: int,
    aisles: List[Dict[str, Any]],
    walls: List[Dict[str, Any]],
) -> StoreMap:
    """
    Upsert a store map from the editor.

    Args:
        store_id: Store slug
        width: Grid width in cells
        height: Grid height in cells
        aisles: [{'x', 'y', optional 'id', optional 'label'}]
        walls: [{'start_x', 'start_y', 'end_x', 'end_y'}]

    Returns:
        Saved StoreMap

    Raises:
        InvalidMapError: If the size is out of range or aisles overlap
        CellOutOfBoundsError: If an aisle or wall lies outside the map
    """
    _validate_layout(width, height, aisles, walls)

    store_map, created = StoreMap.objects.select_for_update().get_or_create(
        store_id=store_id,
        defaults={'width': width, 'height': height},
    )
    if not created:
        store_map.width = width
        store_map.height = height
        store_map.save(update_fields=['width', 'height', 'updated_at'])

    # Walls are replaced wholesale
    store_map.walls.all().delete()
    WallSegment.objects.bulk_create([
        WallSegment(
            store_map=store_map,
            **asdict(WallRect(w['start_x'], w['start_y'], w['end_x'], w['end_y']).normalized()),
        )
        for w in walls
    ])

    _reconcile_aisles(store_map, aisles)

    logger.info(
        "Saved map %s (%sx%s) with %s aisles and %s walls",
        store_id, width, height, len(aisles), len(walls)
    )
    return store_map


def _reconcile_aisles(store_map: StoreMap, aisles: List[Dict[str, Any]]) -> None:
    """
    Match submitted aisles against stored ones by id.

    Known ids are moved (keeping their products), unknown or missing ids
    become new aisles, and stored aisles not submitted are deleted.
    """
    existing = {str(a.id): a for a in store_map.aisles.all()}
    kept = {
        str(data['id']): data
        for data in aisles
        if data.get('id') and str(data['id']) in existing
    }

    store_map.aisles.exclude(id__in=list(kept)).delete()

    # Park moving aisles off-grid first so swaps never collide on (x, y)
    moving = [
        existing[aisle_id] for aisle_id, data in kept.items()
        if (existing[aisle_id].x, existing[aisle_id].y) != (data['x'], data['y'])
    ]
    for offset, aisle in enumerate(moving):
        aisle.x = aisle.y = settings.MAP_MAX_DIMENSION + offset
        aisle.save(update_fields=['x', 'y'])

    for aisle_id, data in kept.items():
        aisle = existing[aisle_id]
        aisle.x, aisle.y = data['x'], data['y']
        aisle.label = data.get('label', aisle.label)
        aisle.save(update_fields=['x', 'y', 'label'])

    Aisle.objects.bulk_create([
        Aisle(
            store_map=store_map,
            x=data['x'],
            y=data['y'],
            label=data.get('label', ''),
        )
        for data in aisles
        if not (data.get('id') and str(data['id']) in kept)
    ])


@transaction.atomic
def toggle_map_cell(*, store_id: str, tool: str, x: int, y: int) -> StoreMap:
    """
    Apply one editor click to the stored map.

    The "aisle" tool adds or removes an aisle at the cell; the "wall" tool
    adds or removes a single-cell wall. An unmapped store is created with
    the default size first.

    Raises:
        InvalidToolError: If tool is not 'aisle' or 'wall'
        CellOutOfBoundsError: If (x, y) is outside the map
    """
    if tool not in (TOOL_AISLE, TOOL_WALL):
        raise InvalidToolError(f"Unknown tool '{tool}'")

    store_map, _ = StoreMap.objects.select_for_update().get_or_create(
        store_id=store_id,
        defaults={'width': DEFAULT_MAP_SIZE, 'height': DEFAULT_MAP_SIZE},
    )
    if not store_map.contains(x, y):
        raise CellOutOfBoundsError(
            f"Cell ({x}, {y}) is outside the {store_map.width}x{store_map.height} map"
        )

    if tool == TOOL_AISLE:
        existing = store_map.aisles.filter(x=x, y=y).first()
        if existing is None:
            Aisle.objects.create(store_map=store_map, x=x, y=y)
        else:
            existing.delete()
    else:
        # Larger rectangles covering the cell are left alone
        single = next(
            (wall for wall in store_map.walls.all() if wall.is_single_cell_at(x, y)),
            None,
        )
        if single is None:
            WallSegment.objects.create(
                store_map=store_map, start_x=x, start_y=y, end_x=x, end_y=y
            )
        else:
            single.delete()

    store_map.save(update_fields=['updated_at'])
    logger.debug("Toggled %s at (%s, %s) on map %s", tool, x, y, store_id)
    return store_map
