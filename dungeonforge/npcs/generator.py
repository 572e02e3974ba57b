from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, List

from ..logging_utils import get_logger
from ..rng import SeededRandom, derive_seed, round_half_up
from .tables import (
    APPEARANCES,
    AVATARS,
    BEHAVIORS,
    CLASSES_BY_BIOME,
    DEFAULT_AVATAR,
    DIFFICULTY_MODIFIER,
    LOCATIONS,
    MOTIVATIONS_BY_BIOME,
    NAMES_BY_RACE,
    PERSONALITY_TRAITS,
    RACES_BY_BIOME,
    SECRETS,
)

log = get_logger("dungeonforge.npcs")

NPC_ROOM_RATIO = 0.4
NPC_STREAM = "npcs"


@dataclass
class NPC:
    id: int
    name: str
    race: str
    npc_class: str
    level: int
    ac: int
    hp: int
    cr: float
    description: str
    avatar: str
    personality: str
    motivation: str
    secrets: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "race": self.race,
            "class": self.npc_class,
            "level": self.level,
            "ac": self.ac,
            "hp": self.hp,
            "cr": self.cr,
            "description": self.description,
            "avatar": self.avatar,
            "personality": self.personality,
            "motivation": self.motivation,
            "secrets": self.secrets,
        }


def npc_avatar(race: str, npc_class: str) -> str:
    by_class = AVATARS.get(race, {})
    return by_class.get(npc_class) or by_class.get("default") or DEFAULT_AVATAR


def _pick_name(rng: SeededRandom, race: str) -> str:
    names = NAMES_BY_RACE.resolve(race)
    first = rng.choice(names["first"])
    last = rng.choice(names["last"])
    return f"{first} {last}"


def _describe(rng: SeededRandom, name: str, race: str, npc_class: str, biome: str) -> str:
    appearance = rng.choice(APPEARANCES)
    behavior = rng.choice(BEHAVIORS)
    location = LOCATIONS.resolve(biome)
    return (
        f"{name} is a {appearance} {race} {npc_class} found {location}. "
        f"They {behavior} and seem to have important knowledge about this place."
    )


def generate_npc(rng: SeededRandom, index: int, biome: str, difficulty: str) -> NPC:
    """One NPC. Draw order: race, class, names, level, hp roll, description, personality, motivation, secret."""
    race = rng.choice(RACES_BY_BIOME.resolve(biome))
    npc_class = rng.choice(CLASSES_BY_BIOME.resolve(biome))
    name = _pick_name(rng, race)

    modifier = DIFFICULTY_MODIFIER.resolve(difficulty)
    level = max(1, math.floor(rng.next_int(1, 8) * modifier))
    hp_roll = rng.next_int(4, 8)
    base_ac = 10 + level // 2
    base_hp = 8 + level * hp_roll
    base_cr = max(0.125, level / 4)

    return NPC(
        id=index,
        name=name,
        race=race,
        npc_class=npc_class,
        level=level,
        ac=math.floor(base_ac * modifier),
        hp=math.floor(base_hp * modifier),
        cr=round_half_up(base_cr * modifier * 4) / 4,  # nearest quarter
        description=_describe(rng, name, race, npc_class, biome),
        avatar=npc_avatar(race, npc_class),
        personality=rng.choice(PERSONALITY_TRAITS),
        motivation=rng.choice(MOTIVATIONS_BY_BIOME.resolve(biome)),
        secrets=rng.choice(SECRETS),
    )


def generate_npcs(seed: str, room_count: int, biome: str, difficulty: str, enable_ai: bool = True) -> List[NPC]:
    """NPC roster for a dungeon with ``room_count`` placed rooms.

    Uses its own stream (``<seed>_npcs``) so the roster never shifts the
    structural layout. Returns an empty list when AI features are off.
    """
    if not enable_ai:
        return []
    rng = SeededRandom(derive_seed(seed, NPC_STREAM))
    count = math.floor(room_count * NPC_ROOM_RATIO)
    npcs = [generate_npc(rng, i, biome, difficulty) for i in range(count)]
    log.debug(event="npcs_generated", count=len(npcs), biome=biome)
    return npcs
