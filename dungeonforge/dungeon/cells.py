from typing import Iterator, List, Tuple

from .tiles import WALL

Grid = List[List[int]]
Coord2D = Tuple[int, int]

NEIGHBORS4 = ((-1, 0), (1, 0), (0, -1), (0, 1))


def new_grid(width: int, height: int) -> Grid:
    """All-wall grid indexed ``grid[y][x]``."""
    return [[WALL for _ in range(width)] for _ in range(height)]


def in_bounds(grid: Grid, x: int, y: int) -> bool:
    return 0 <= y < len(grid) and 0 <= x < len(grid[0])


def neighbors4(grid: Grid, x: int, y: int) -> Iterator[Coord2D]:
    for dx, dy in NEIGHBORS4:
        nx, ny = x + dx, y + dy
        if in_bounds(grid, nx, ny):
            yield nx, ny
