"""Services for store maps."""

from .exceptions import (
    StoresServiceError,
    InvalidMapError,
    CellOutOfBoundsError,
    InvalidToolError,
)
from .grid import (
    WALL,
    WallRect,
    AisleCell,
    build_grid,
)
from .map_management import (
    DEFAULT_MAP_SIZE,
    TOOL_AISLE,
    TOOL_WALL,
    default_map_payload,
    get_store_map,
    render_store_grid,
    save_store_map,
    toggle_map_cell,
)

__all__ = [
    # Exceptions
    'StoresServiceError',
    'InvalidMapError',
    'CellOutOfBoundsError',
    'InvalidToolError',
    # Grid rendering
    'WALL',
    'WallRect',
    'AisleCell',
    'build_grid',
    # Map management
    'DEFAULT_MAP_SIZE',
    'TOOL_AISLE',
    'TOOL_WALL',
    'default_map_payload',
    'get_store_map',
    'render_store_grid',
    'save_store_map',
    'toggle_map_cell',
]
