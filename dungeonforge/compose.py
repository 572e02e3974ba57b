"""Top-level composition: one call from parameters to the full output bundle.

``generate`` validates the request, runs the structural pipeline, then the
NPC and loot generators on their own seed-derived streams, and stamps a
metadata envelope. ``summarize`` derives the headline numbers the CLI banner
prints.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from .config import GenerationParams, GeneratorSettings, coerce_params
from .dungeon.pipeline import GeneratedDungeon, generate_dungeon
from .dungeon.tiles import CELL_KINDS, DOOR, FLOOR, ROOM_CENTER, WALKABLE
from .logging_utils import get_logger
from .loot import LootTable, generate_loot
from .npcs import NPC, generate_npcs

log = get_logger("dungeonforge.compose")


def iso_timestamp(now: datetime) -> str:
    """UTC ISO-8601 with millisecond precision and a ``Z`` suffix."""
    if now.tzinfo is not None:
        now = now.astimezone(timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"


@dataclass
class DungeonBundle:
    dungeon: GeneratedDungeon
    params: GenerationParams
    generated_at: str
    npcs: List[NPC] = field(default_factory=list)
    loot: List[LootTable] = field(default_factory=list)

    @property
    def metrics(self) -> Dict[str, Any]:
        return self.dungeon.metrics

    def to_dict(self) -> Dict[str, Any]:
        out = self.dungeon.to_dict()
        out["npcs"] = [n.to_dict() for n in self.npcs]
        out["loot"] = [t.to_dict() for t in self.loot]
        out["metadata"] = {
            "generatedAt": self.generated_at,
            "seed": self.params.seed,
            "parameters": self.params.to_dict(),
            "cellKinds": {str(code): name for code, name in CELL_KINDS.items()},
        }
        return out


@dataclass
class DungeonStats:
    rooms: int
    corridors: int
    doors: int
    floor_cells: int
    encounters: int
    creatures: int
    npcs: int
    loot_tables: int
    loot_items: int
    loot_value_gp: int
    coverage: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "rooms": self.rooms,
            "corridors": self.corridors,
            "doors": self.doors,
            "floorCells": self.floor_cells,
            "encounters": self.encounters,
            "creatures": self.creatures,
            "npcs": self.npcs,
            "lootTables": self.loot_tables,
            "lootItems": self.loot_items,
            "lootValueGp": self.loot_value_gp,
            "coverage": self.coverage,
        }


def summarize(bundle: DungeonBundle) -> DungeonStats:
    d = bundle.dungeon
    cells = [c for row in d.grid for c in row]
    walkable = sum(1 for c in cells if c in WALKABLE)
    return DungeonStats(
        rooms=len(d.rooms),
        corridors=len(d.corridors),
        doors=sum(1 for c in cells if c == DOOR),
        floor_cells=sum(1 for c in cells if c in (FLOOR, ROOM_CENTER)),
        encounters=len(d.encounters),
        creatures=sum(c.count for e in d.encounters for c in e.creatures),
        npcs=len(bundle.npcs),
        loot_tables=len(bundle.loot),
        loot_items=sum(len(t.items) for t in bundle.loot),
        loot_value_gp=sum(it.gp for t in bundle.loot for it in t.items),
        coverage=round(walkable / len(cells), 4) if cells else 0.0,
    )


def generate(params: Any, *, settings: Optional[GeneratorSettings] = None, now: Optional[datetime] = None) -> DungeonBundle:
    """Generate a complete dungeon bundle.

    ``params`` may be a ``GenerationParams`` or a mapping using either
    snake_case or camelCase keys. Raises ``InvalidParameter`` before any
    generation work when the request is out of range. ``now`` only feeds the
    ``generatedAt`` stamp; everything else is a pure function of ``params``.
    """
    p = coerce_params(params)
    dungeon = generate_dungeon(p, settings)
    npcs = generate_npcs(p.seed, len(dungeon.rooms), p.biome, p.difficulty, p.enable_ai)
    loot = generate_loot(p.seed, dungeon.rooms, p.biome, p.difficulty)
    bundle = DungeonBundle(
        dungeon=dungeon,
        params=p,
        generated_at=iso_timestamp(now or datetime.now(timezone.utc)),
        npcs=npcs,
        loot=loot,
    )
    log.info(
        event="dungeon_generated",
        seed=p.seed,
        size=f"{p.width}x{p.height}",
        rooms=len(dungeon.rooms),
        requested=p.room_count,
        npcs=len(npcs),
        loot_tables=len(loot),
        runtime_ms=dungeon.metrics.get("runtime_ms"),
    )
    return bundle
