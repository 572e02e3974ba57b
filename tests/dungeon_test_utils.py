from collections import deque

# Cell codes duplicated lightly for test independence
WALL = 0
FLOOR = 1
DOOR = 2
ROOM_CENTER = 3
WALKABLE = {FLOOR, DOOR, ROOM_CENTER}


def first_room_center(dungeon):
    """Return (x,y) center of the first placed room if any, else None."""
    rooms = getattr(dungeon, "rooms", []) or []
    if not rooms:
        return None
    return rooms[0].center


def bfs_reachable(grid, start):
    """Return set of (x,y) walkable cells reachable from start. grid is indexed grid[y][x]."""
    if start is None:
        return set()
    h = len(grid)
    w = len(grid[0])
    sx, sy = start
    if not (0 <= sx < w and 0 <= sy < h):
        return set()
    if grid[sy][sx] not in WALKABLE:
        return set()
    q = deque([start])
    vis = {start}
    while q:
        x, y = q.popleft()
        for dx, dy in ((1, 0), (-1, 0), (0, 1), (0, -1)):
            nx, ny = x + dx, y + dy
            if 0 <= nx < w and 0 <= ny < h and (nx, ny) not in vis:
                if grid[ny][nx] in WALKABLE:
                    vis.add((nx, ny))
                    q.append((nx, ny))
    return vis


def iter_cells(grid, value):
    for y, row in enumerate(grid):
        for x, c in enumerate(row):
            if c == value:
                yield x, y


def padded_overlap(a, b, pad=2):
    return (
        a.x < b.x + b.w + pad
        and a.x + a.w + pad > b.x
        and a.y < b.y + b.h + pad
        and a.y + a.h + pad > b.y
    )


def grid_from_rows(rows):
    """Build grid[y][x] from strings of digits, e.g. ["000", "010"]."""
    return [[int(ch) for ch in row] for row in rows]
