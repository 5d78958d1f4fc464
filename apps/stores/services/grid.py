"""
Store grid rendering.

Turns a map description (size, wall rectangles, aisle cells) into a
row-major grid the apps draw cell by cell. Pure functions over plain data
so the same code serves the API and the tests.

Cell values:
    None      empty floor
    'wall'    wall cell
    '<id>'    aisle id (string)
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional

WALL = 'wall'


@dataclass(frozen=True)
class WallRect:
    start_x: int
    start_y: int
    end_x: int
    end_y: int

    def normalized(self) -> 'WallRect':
        """Return the same rectangle with start <= end on both axes."""
        return WallRect(
            start_x=min(self.start_x, self.end_x),
            start_y=min(self.start_y, self.end_y),
            end_x=max(self.start_x, self.end_x),
            end_y=max(self.start_y, self.end_y),
        )

    def covers(self, x: int, y: int) -> bool:
        rect = self.normalized()
        return rect.start_x <= x <= rect.end_x and rect.start_y <= y <= rect.end_y


@dataclass(frozen=True)
class AisleCell:
    id: str
    x: int
    y: int


def build_grid(
    width: int,
    height: int,
    walls: Iterable[WallRect] = (),
    aisles: Iterable[AisleCell] = (),
) -> List[List[Optional[str]]]:
    """
    Render a map into ``grid[y][x]``.

    Walls are painted first and clipped to the grid; aisles are painted
    afterwards and win over walls. Anything outside the grid is skipped.
    """
    grid: List[List[Optional[str]]] = [[None] * width for _ in range(height)]

    for wall in walls:
        rect = wall.normalized()
        for y in range(max(rect.start_y, 0), min(rect.end_y, height - 1) + 1):
            for x in range(max(rect.start_x, 0), min(rect.end_x, width - 1) + 1):
                grid[y][x] = WALL

    for aisle in aisles:
        if 0 <= aisle.x < width and 0 <= aisle.y < height:
            grid[aisle.y][aisle.x] = str(aisle.id)

    return grid

