"""Per-room combat encounters drawn from the biome's creature table."""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List

from ..logging_utils import get_logger
from ..rng import SeededRandom, round_half_up
from ..vocab import KeyedTable
from .rooms import Room

log = get_logger("dungeonforge.encounters")

ENCOUNTER_CHANCE = 0.6

DIFFICULTY_BASE_CR = KeyedTable(
    "difficulty_base_cr",
    {"easy": 0.5, "medium": 1.0, "hard": 1.5, "deadly": 2.0},
    default="medium",
)

BIOME_CREATURES = KeyedTable(
    "biome_creatures",
    {
        "dungeon": ["Goblin", "Skeleton", "Orc", "Troll", "Dragon"],
        "cave": ["Bat", "Bear", "Kobold", "Owlbear", "Bulette"],
        "forest": ["Wolf", "Dryad", "Treant", "Dire Wolf", "Green Dragon"],
        "crypt": ["Zombie", "Wraith", "Lich", "Mummy", "Vampire"],
        "temple": ["Celestial", "Demon", "Angel", "Paladin", "Cleric"],
        "tower": ["Mage", "Elemental", "Gargoyle", "Wizard", "Archmage"],
    },
    default="dungeon",
)

ROOM_DESCRIPTIONS = KeyedTable(
    "room_descriptions",
    {
        "Chamber": "A dimly lit chamber where danger lurks in the shadows.",
        "Hall": "The echoing hall stretches before you, inhabited by hostile forces.",
        "Treasury": "Gold and gems glitter in this treasure room, but guardians protect the hoard.",
        "Barracks": "Old bunks and weapons racks suggest this was once a military quarters.",
        "Library": "Ancient tomes line the shelves of this forgotten library.",
        "Armory": "Weapons and armor hang from the walls, some still serviceable.",
        "Kitchen": "The smell of old food and decay fills this abandoned kitchen.",
        "Throne Room": "A grand throne dominates this royal chamber.",
        "Chapel": "Sacred symbols and altar suggest this was once a holy place.",
        "Laboratory": "Bubbling potions and strange apparatus fill this research chamber.",
    },
    default="Chamber",
)


@dataclass
class Creature:
    name: str
    count: int

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "count": self.count}


@dataclass
class Encounter:
    id: int
    room_id: int
    name: str
    description: str
    challenge_rating: int
    creatures: List[Creature] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "roomId": self.room_id,
            "name": self.name,
            "description": self.description,
            "challengeRating": self.challenge_rating,
            "creatures": [c.to_dict() for c in self.creatures],
        }


def describe_encounter(room_type: str, creatures: List[Creature]) -> str:
    # Grammar keys off the number of entries, not the head count
    names = ", ".join(c.name.lower() for c in creatures)
    single = len(creatures) == 1
    return (
        f"{ROOM_DESCRIPTIONS.resolve(room_type)}"
        f"{' A ' if single else ' Several '}{names}"
        f"{' guards' if single else ' guard'} this area."
    )


def generate_encounters(rooms: List[Room], difficulty: str, biome: str, rng: SeededRandom) -> List[Encounter]:
    base = DIFFICULTY_BASE_CR.resolve(difficulty)
    creatures = BIOME_CREATURES.resolve(biome)
    max_count = max(1, math.floor(base * 2))
    encounters: List[Encounter] = []
    for room in rooms:
        if rng.next() >= ENCOUNTER_CHANCE:
            continue
        group = []
        for _ in range(rng.next_int(1, 3)):
            name = rng.choice(creatures)
            group.append(Creature(name=name, count=rng.next_int(1, max_count)))
        encounters.append(
            Encounter(
                id=len(encounters),
                room_id=room.id,
                name=f"{room.type} Encounter",
                description=describe_encounter(room.type, group),
                challenge_rating=max(1, round_half_up(base * rng.next() * 3)),
                creatures=group,
            )
        )
    log.debug(event="encounters", rooms=len(rooms), encounters=len(encounters), biome=biome)
    return encounters
