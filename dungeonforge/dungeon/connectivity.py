"""Room graph construction and reachability checks.

The spanning tree is grown Prim-style from room 0 using Manhattan distance
between room centers. A couple of random extra edges are layered on top so
larger layouts get loops. ``rooms_connected`` is the post-carve check behind
the ``connected`` metric.
"""
from __future__ import annotations

from collections import deque
from typing import List, Optional, Set, Tuple

from ..logging_utils import get_logger
from ..rng import SeededRandom
from .cells import Coord2D, Grid, neighbors4
from .rooms import Room
from .tiles import WALKABLE

log = get_logger("dungeonforge.connectivity")

Edge = Tuple[int, int]

MAX_EXTRA_EDGES = 2


def _manhattan(a: Room, b: Room) -> int:
    (ax, ay), (bx, by) = a.center, b.center
    return abs(ax - bx) + abs(ay - by)


def build_spanning_tree(rooms: List[Room], rng: SeededRandom) -> List[Edge]:
    """Edges (connected_id, new_id) in the order rooms join the tree."""
    if len(rooms) < 2:
        return []
    connected = [0]
    unconnected = [r.id for r in rooms[1:]]
    edges: List[Edge] = []
    while unconnected:
        best: Optional[Edge] = None
        best_dist = None
        for cid in connected:
            for uid in unconnected:
                d = _manhattan(rooms[cid], rooms[uid])
                if best_dist is None or d < best_dist:
                    best, best_dist = (cid, uid), d
        if best is None:
            # Unreachable with real rooms; keeps the stream contract if it ever happens
            best = (connected[rng.next_int(0, len(connected) - 1)], unconnected[0])
        edges.append(best)
        connected.append(best[1])
        unconnected.remove(best[1])
    log.debug(event="spanning_tree", rooms=len(rooms), edges=len(edges))
    return edges


def pick_extra_edges(rooms: List[Room], edges: List[Edge], rng: SeededRandom) -> List[Edge]:
    """Random loop edges. Only self-pairs and direct tree links are skipped;
    a pair drawn twice (in either order) is carved twice.
    """
    extras: List[Edge] = []
    tree = {frozenset(e) for e in edges}
    for _ in range(min(MAX_EXTRA_EDGES, len(rooms) // 3)):
        a = rng.choice(rooms)
        b = rng.choice(rooms)
        if a.id == b.id:
            continue
        if frozenset((a.id, b.id)) in tree:
            continue
        extras.append((a.id, b.id))
    return extras


def reachable_cells(grid: Grid, start: Coord2D) -> Set[Coord2D]:
    sx, sy = start
    if grid[sy][sx] not in WALKABLE:
        return set()
    visited = {start}
    q = deque([start])
    while q:
        cx, cy = q.popleft()
        for nx, ny in neighbors4(grid, cx, cy):
            if (nx, ny) not in visited and grid[ny][nx] in WALKABLE:
                visited.add((nx, ny))
                q.append((nx, ny))
    return visited


def rooms_connected(grid: Grid, rooms: List[Room]) -> bool:
    """True when every room center is reachable from room 0's center."""
    if len(rooms) < 2:
        return True
    seen = reachable_cells(grid, rooms[0].center)
    return all(r.center in seen for r in rooms)
