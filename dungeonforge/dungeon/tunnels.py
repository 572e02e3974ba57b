from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

from ..logging_utils import get_logger
from ..rng import SeededRandom
from .cells import Coord2D, Grid, in_bounds
from .connectivity import Edge, build_spanning_tree, pick_extra_edges
from .rooms import Room
from .tiles import FLOOR, WALL

log = get_logger("dungeonforge.tunnels")

HORIZONTAL_FIRST = "horizontal-first"
VERTICAL_FIRST = "vertical-first"


@dataclass
class Corridor:
    start: Coord2D
    end: Coord2D
    width: int
    type: str
    path: List[Coord2D] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "start": {"x": self.start[0], "y": self.start[1]},
            "end": {"x": self.end[0], "y": self.end[1]},
            "path": [{"x": x, "y": y} for x, y in self.path],
            "width": self.width,
            "type": self.type,
        }


def _carve_cell(grid: Grid, x: int, y: int, path: List[Coord2D]) -> None:
    # Only walls are converted; existing floor/door/center cells are left alone
    if in_bounds(grid, x, y) and grid[y][x] == WALL:
        grid[y][x] = FLOOR
        path.append((x, y))


def _carve_horizontal(grid: Grid, x1: int, x2: int, y: int, width: int, path: List[Coord2D]) -> None:
    for x in range(min(x1, x2), max(x1, x2) + 1):
        for w in range(width):
            _carve_cell(grid, x, y + w - width // 2, path)


def _carve_vertical(grid: Grid, y1: int, y2: int, x: int, width: int, path: List[Coord2D]) -> None:
    for y in range(min(y1, y2), max(y1, y2) + 1):
        for w in range(width):
            _carve_cell(grid, x + w - width // 2, y, path)


def carve_corridor(grid: Grid, start: Coord2D, end: Coord2D, width: int) -> Corridor:
    """L-shaped corridor between two points.

    The longer axis is walked first (horizontal on ties). Carving is idempotent:
    re-running it over the same grid converts nothing and yields an empty path.
    """
    x1, y1 = start
    x2, y2 = end
    path: List[Coord2D] = []
    if abs(x2 - x1) >= abs(y2 - y1):
        kind = HORIZONTAL_FIRST
        _carve_horizontal(grid, x1, x2, y1, width, path)
        _carve_vertical(grid, y1, y2, x2, width, path)
    else:
        kind = VERTICAL_FIRST
        _carve_vertical(grid, y1, y2, x1, width, path)
        _carve_horizontal(grid, x1, x2, y2, width, path)
    return Corridor(start=start, end=end, width=width, type=kind, path=path)


def connect_rooms(grid: Grid, rooms: List[Room], corridor_width: int, rng: SeededRandom) -> Tuple[List[Corridor], List[Edge], List[Corridor]]:
    """Carve spanning-tree corridors, then the extra loop edges.

    Returns (corridors, tree_edges, loops). Only tree corridors are part of
    the dungeon's corridor list; loops are carved into the grid but kept
    separate.
    """
    tree = build_spanning_tree(rooms, rng)
    corridors = [carve_corridor(grid, rooms[a].center, rooms[b].center, corridor_width) for a, b in tree]
    extras = pick_extra_edges(rooms, tree, rng)
    loops = [carve_corridor(grid, rooms[a].center, rooms[b].center, corridor_width) for a, b in extras]
    log.debug(
        event="corridors_carved",
        tree_edges=len(tree),
        extra_edges=len(loops),
        cells=sum(len(c.path) for c in corridors),
        loop_cells=sum(len(c.path) for c in loops),
    )
    return corridors, tree, loops
