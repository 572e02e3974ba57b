"""Door placement at room/corridor junctions.

A door candidate is a plain floor cell inside a room that touches, on one of
its four sides, a floor cell belonging to no room (i.e. corridor). The scan is
row-major over the interior and mutates the grid as it goes, so a cell turned
into a door no longer counts as corridor floor for later neighbours.
"""
from __future__ import annotations

from typing import Dict, List, Optional

from ..rng import SeededRandom
from .cells import Coord2D, Grid, neighbors4
from .rooms import Room
from .tiles import DOOR, FLOOR

DOOR_CHANCE = 0.7


def _in_any_room(rooms: List[Room], x: int, y: int) -> bool:
    return any(r.contains(x, y) for r in rooms)


def is_door_candidate(grid: Grid, rooms: List[Room], x: int, y: int) -> bool:
    if grid[y][x] != FLOOR or not _in_any_room(rooms, x, y):
        return False
    for nx, ny in neighbors4(grid, x, y):
        if grid[ny][nx] == FLOOR and not _in_any_room(rooms, nx, ny):
            return True
    return False


def place_doors(grid: Grid, rooms: List[Room], rng: SeededRandom, metrics: Optional[Dict] = None) -> List[Coord2D]:
    height = len(grid)
    width = len(grid[0]) if height else 0
    placed: List[Coord2D] = []
    candidates = 0
    for y in range(1, height - 1):
        for x in range(1, width - 1):
            if not is_door_candidate(grid, rooms, x, y):
                continue
            candidates += 1
            if rng.next() < DOOR_CHANCE:
                grid[y][x] = DOOR
                placed.append((x, y))
    if metrics is not None:
        metrics["door_candidates"] = candidates
        metrics["doors_placed"] = len(placed)
    return placed
