import pytest

from dungeonforge.dungeon.cells import new_grid
from dungeonforge.dungeon.rooms import ROOM_TYPES, Room, place_rooms, stamp_rooms
from dungeonforge.dungeon.tiles import FLOOR, ROOM_CENTER, WALL
from dungeonforge.rng import SeededRandom

from dungeon_test_utils import padded_overlap


def test_golden_placement():
    rng = SeededRandom("test1")
    rooms, attempts = place_rooms(20, 20, 5, rng)
    got = [(r.id, r.x, r.y, r.w, r.h, r.type) for r in rooms]
    assert got == [
        (0, 4, 10, 7, 4, "Chapel"),
        (1, 4, 2, 4, 6, "Kitchen"),
        (2, 14, 9, 4, 4, "Hall"),
        (3, 11, 1, 4, 6, "Barracks"),
    ]
    # Shortfall: every one of the 5*10 attempts is used
    assert attempts == 50


def test_every_attempt_draws_five_values():
    rng = SeededRandom("test1")
    _, attempts = place_rooms(20, 20, 5, rng)
    assert rng.draws == attempts * 5


@pytest.mark.parametrize("seed", ["alpha", "beta", "gamma", "dungeon-seed-0001", "42"])
@pytest.mark.parametrize("size,count", [((20, 20), 8), ((50, 50), 20), ((10, 10), 3)])
def test_rooms_never_overlap_and_stay_in_bounds(seed, size, count):
    w, h = size
    rooms, attempts = place_rooms(w, h, count, SeededRandom(seed))
    assert 1 <= len(rooms) <= count
    assert attempts <= count * 10
    for i, r in enumerate(rooms):
        assert r.id == i
        assert r.type in ROOM_TYPES
        assert 4 <= r.w <= 8 and 4 <= r.h <= 8
        assert r.x >= 1 and r.y >= 1
        assert r.x + r.w <= w - 1 and r.y + r.h <= h - 1
        for other in rooms[i + 1:]:
            assert not padded_overlap(r, other)


def test_stamp_sets_floor_and_center():
    grid = new_grid(12, 12)
    room = Room(id=0, x=2, y=3, w=5, h=4, type="Hall")
    stamp_rooms(grid, [room])
    assert (room.center_x, room.center_y) == (4, 5)
    assert grid[5][4] == ROOM_CENTER
    floor = sum(1 for row in grid for c in row if c == FLOOR)
    assert floor == 5 * 4 - 1
    assert grid[2][2] == WALL and grid[3][7] == WALL


def test_room_to_dict_keys():
    room = Room(id=3, x=1, y=2, w=4, h=5, type="Library", center_x=3, center_y=4)
    assert room.to_dict() == {
        "id": 3,
        "x": 1,
        "y": 2,
        "width": 4,
        "height": 5,
        "type": "Library",
        "centerX": 3,
        "centerY": 4,
    }


def test_contains_is_half_open():
    room = Room(id=0, x=2, y=2, w=4, h=4, type="Hall")
    assert room.contains(2, 2) and room.contains(5, 5)
    assert not room.contains(6, 2) and not room.contains(2, 6)
