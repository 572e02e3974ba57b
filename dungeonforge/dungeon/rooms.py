from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional, Tuple

from ..logging_utils import get_logger
from ..rng import SeededRandom
from .cells import Grid, in_bounds
from .tiles import FLOOR, ROOM_CENTER

log = get_logger("dungeonforge.rooms")

ROOM_TYPES = (
    "Chamber",
    "Hall",
    "Treasury",
    "Barracks",
    "Library",
    "Armory",
    "Kitchen",
    "Throne Room",
    "Chapel",
    "Laboratory",
)

MIN_ROOM_SIZE = 4
MAX_ROOM_SIZE = 8
ROOM_PADDING = 2  # clear cells required between any two rooms
ATTEMPTS_PER_ROOM = 10


@dataclass
class Room:
    id: int
    x: int
    y: int
    w: int
    h: int
    type: str
    center_x: Optional[int] = None
    center_y: Optional[int] = None

    def cells(self) -> Iterator[Tuple[int, int]]:
        for iy in range(self.y, self.y + self.h):
            for ix in range(self.x, self.x + self.w):
                yield ix, iy

    def contains(self, cx: int, cy: int) -> bool:
        return self.x <= cx < self.x + self.w and self.y <= cy < self.y + self.h

    @property
    def center(self) -> Tuple[int, int]:
        if self.center_x is not None and self.center_y is not None:
            return (self.center_x, self.center_y)
        return (self.x + self.w // 2, self.y + self.h // 2)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "x": self.x,
            "y": self.y,
            "width": self.w,
            "height": self.h,
            "type": self.type,
            "centerX": self.center_x,
            "centerY": self.center_y,
        }


def place_rooms(width: int, height: int, room_count: int, rng: SeededRandom) -> Tuple[List[Room], int]:
    """Rejection-sample up to ``room_count`` non-overlapping rooms.

    Returns (rooms, attempts_used). Every attempt draws size, position and type
    in that order whether or not the candidate is kept, so the stream position
    after placement depends only on the attempt count.
    """
    rooms: List[Room] = []
    attempts = room_count * ATTEMPTS_PER_ROOM
    used = 0
    while used < attempts and len(rooms) < room_count:
        used += 1
        w = rng.next_int(MIN_ROOM_SIZE, MAX_ROOM_SIZE)
        h = rng.next_int(MIN_ROOM_SIZE, MAX_ROOM_SIZE)
        x = rng.next_int(1, width - w - 1)
        y = rng.next_int(1, height - h - 1)
        candidate = Room(id=len(rooms), x=x, y=y, w=w, h=h, type=rng.choice(ROOM_TYPES))
        if _room_overlaps(candidate, rooms):
            continue
        rooms.append(candidate)
    if len(rooms) < room_count:
        log.warn(event="rooms_short", requested=room_count, placed=len(rooms), attempts=used)
    else:
        log.debug(event="rooms_placed", placed=len(rooms), attempts=used)
    return rooms, used


def _room_overlaps(room: Room, existing: List[Room]) -> bool:
    pad = ROOM_PADDING
    for r in existing:
        if (
            room.x < r.x + r.w + pad
            and room.x + room.w + pad > r.x
            and room.y < r.y + r.h + pad
            and room.y + room.h + pad > r.y
        ):
            return True
    return False


def stamp_rooms(grid: Grid, rooms: List[Room]) -> None:
    """Write room floors then mark each center cell; fills in the room center fields."""
    for room in rooms:
        for ix, iy in room.cells():
            if in_bounds(grid, ix, iy):
                grid[iy][ix] = FLOOR
        cx, cy = room.x + room.w // 2, room.y + room.h // 2
        if in_bounds(grid, cx, cy):
            grid[cy][cx] = ROOM_CENTER
            room.center_x, room.center_y = cx, cy
