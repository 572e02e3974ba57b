"""Structural dungeon generation: grid, rooms, corridors, doors, encounters."""

from .pipeline import GeneratedDungeon, generate_dungeon
from .rooms import ROOM_TYPES, Room
from .tunnels import Corridor
from .encounters import Creature, Encounter
from .tiles import CELL_KINDS, DOOR, FLOOR, ROOM_CENTER, WALL

__all__ = [
    "GeneratedDungeon",
    "generate_dungeon",
    "Room",
    "ROOM_TYPES",
    "Corridor",
    "Creature",
    "Encounter",
    "CELL_KINDS",
    "WALL",
    "FLOOR",
    "DOOR",
    "ROOM_CENTER",
]
