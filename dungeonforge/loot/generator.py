"""Loot generation utilities.

Builds the loot tables for a generated dungeon: one main treasure hoard, an
optional table per room keyed to the room's type, and a combat rewards table.
Everything is drawn from a dedicated ``<seed>_loot`` stream so loot never
perturbs the structural layout or the NPC roster.

Item draws happen in a fixed order (rarity, type, icon, five value rolls,
description, prefix, base noun, then biome suffix for rare+). All five value
rolls are consumed even though only the one matching the rarity is used.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..logging_utils import get_logger
from ..rng import SeededRandom, derive_seed
from .tables import (
    BASE_NOUNS,
    BIOME_SUFFIXES,
    DESCRIPTIONS,
    DIFFICULTY_MODIFIER,
    GENERIC_NOUN,
    ICONS,
    PREFIXES,
    RARITIES,
    RARITY_WEIGHTS,
    ROOM_LOOT,
    SUFFIXED_RARITIES,
    TYPE_VALUE_MULTIPLIER,
    TYPES_BY_BIAS,
    UNKNOWN_ICON,
    VALUE_RANGES,
)

log = get_logger("dungeonforge.loot")

LOOT_STREAM = "loot"
ROOM_LOOT_CHANCE = 0.7


@dataclass
class LootItem:
    name: str
    icon: str
    rarity: str
    type: str
    value: str
    description: str

    @property
    def gp(self) -> int:
        return int(self.value.split()[0])

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "icon": self.icon,
            "rarity": self.rarity,
            "type": self.type,
            "value": self.value,
            "description": self.description,
        }


@dataclass
class LootTable:
    id: str
    name: str
    type: str
    items: List[LootItem] = field(default_factory=list)
    room_id: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {"id": self.id, "name": self.name, "type": self.type}
        if self.room_id is not None:
            d["roomId"] = self.room_id
        d["items"] = [it.to_dict() for it in self.items]
        return d


def roll_rarity(rng: SeededRandom, difficulty: str) -> str:
    return rng.weighted_choice(RARITIES, RARITY_WEIGHTS.resolve(difficulty))


def roll_value(rng: SeededRandom, rarity: str, item_type: str) -> str:
    rolls = {name: rng.next_int(lo, hi) for name, lo, hi in VALUE_RANGES}
    base = rolls.get(rarity, rolls["common"])
    return f"{math.floor(base * TYPE_VALUE_MULTIPLIER.get(item_type, 1.0))} gp"


def generate_item(rng: SeededRandom, biome: str, difficulty: str, bias: str = "general") -> LootItem:
    rarity = roll_rarity(rng, difficulty)
    item_type = rng.choice(TYPES_BY_BIAS.resolve(bias))
    icon = rng.choice(ICONS.get(item_type, [UNKNOWN_ICON]))
    value = roll_value(rng, rarity, item_type)
    description = rng.choice(DESCRIPTIONS.resolve(item_type))

    prefix = rng.choice(PREFIXES.resolve(rarity))
    noun = rng.choice(BASE_NOUNS.get(item_type, [GENERIC_NOUN]))
    name = f"{prefix} {noun}"
    if rarity in SUFFIXED_RARITIES:
        name = f"{name} {rng.choice(BIOME_SUFFIXES.resolve(biome))}"

    return LootItem(name=name, icon=icon, rarity=rarity, type=item_type, value=value, description=description)


def gold_item(amount: int) -> LootItem:
    return LootItem(
        name="Gold Pieces",
        icon="🪙",
        rarity="common",
        type="currency",
        value=f"{amount} gp",
        description="Standard gold currency of the realm",
    )


def _main_table(rng: SeededRandom, biome: str, difficulty: str) -> LootTable:
    modifier = DIFFICULTY_MODIFIER.resolve(difficulty)
    count = math.floor(rng.next_int(3, 8) * modifier)
    items = [generate_item(rng, biome, difficulty, "treasure") for _ in range(count)]
    items.append(gold_item(math.floor(rng.next_int(50, 500) * modifier)))
    return LootTable(id="main_treasure", name="Main Treasure", type="treasure", items=items)


def _room_table(rng: SeededRandom, room, index: int, biome: str, difficulty: str) -> LootTable:
    count, bias = ROOM_LOOT.resolve(room.type)
    items = [generate_item(rng, biome, difficulty, bias) for _ in range(count)]
    return LootTable(id=f"room_{index}", name=f"{room.type} Loot", type="room", room_id=room.id, items=items)


def _encounter_table(rng: SeededRandom, biome: str, difficulty: str) -> LootTable:
    count = rng.next_int(2, 5)
    items = [generate_item(rng, biome, difficulty, "combat") for _ in range(count)]
    return LootTable(id="encounter_loot", name="Combat Rewards", type="encounter", items=items)


def generate_loot(seed: str, rooms, biome: str, difficulty: str) -> List[LootTable]:
    """Main hoard, per-room tables (70% each, empty ones dropped), then combat rewards."""
    rng = SeededRandom(derive_seed(seed, LOOT_STREAM))
    tables = [_main_table(rng, biome, difficulty)]
    for index, room in enumerate(rooms):
        if rng.next() < ROOM_LOOT_CHANCE:
            table = _room_table(rng, room, index, biome, difficulty)
            if table.items:
                tables.append(table)
    tables.append(_encounter_table(rng, biome, difficulty))
    log.debug(
        event="loot_generated",
        tables=len(tables),
        items=sum(len(t.items) for t in tables),
    )
    return tables
