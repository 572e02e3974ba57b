# Cell codes written into the output grid (grid[y][x])
WALL = 0
FLOOR = 1
DOOR = 2
ROOM_CENTER = 3

WALKABLE = frozenset({FLOOR, DOOR, ROOM_CENTER})

CELL_KINDS = {
    WALL: "wall",
    FLOOR: "floor",
    DOOR: "door",
    ROOM_CENTER: "room_center",
}

__all__ = ["WALL", "FLOOR", "DOOR", "ROOM_CENTER", "WALKABLE", "CELL_KINDS"]
