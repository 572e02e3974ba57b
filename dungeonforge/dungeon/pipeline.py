"""Pipeline orchestration for the structural dungeon pass.

Runs the ordered phases over a single ``SeededRandom`` built from the request
seed: room placement, stamping, corridor carving, door placement and
encounters. Grid mutation is strictly ordered (rooms, then corridors, then
doors) and every phase consumes draws from the same stream, so the phase order
is part of the reproducibility contract.

When metrics are enabled each phase is timed into ``metrics['phase_ms']``.
Metrics are kept on the result object for diagnostics and are never part of
``to_dict()``.
"""
from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..config import GenerationParams, GeneratorSettings
from ..logging_utils import get_logger
from ..rng import SeededRandom
from .cells import Coord2D, Grid, new_grid
from .connectivity import rooms_connected
from .doors import place_doors
from .encounters import Encounter, generate_encounters
from .metrics import init_metrics
from .rooms import Room, place_rooms, stamp_rooms
from .tunnels import Corridor, connect_rooms

log = get_logger("dungeonforge.pipeline")


@dataclass
class GeneratedDungeon:
    width: int
    height: int
    grid: Grid
    rooms: List[Room]
    corridors: List[Corridor]
    encounters: List[Encounter]
    biome: str
    difficulty: str
    doors: List[Coord2D] = field(default_factory=list)
    loops: List[Corridor] = field(default_factory=list)
    metrics: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "width": self.width,
            "height": self.height,
            "grid": [list(row) for row in self.grid],
            "rooms": [r.to_dict() for r in self.rooms],
            "corridors": [c.to_dict() for c in self.corridors],
            "encounters": [e.to_dict() for e in self.encounters],
            "biome": self.biome,
            "difficulty": self.difficulty,
        }


def generate_dungeon(params: GenerationParams, settings: Optional[GeneratorSettings] = None) -> GeneratedDungeon:
    """Build the grid, rooms, corridors, doors and encounters for validated ``params``."""
    settings = settings or GeneratorSettings.from_env()
    metrics: Dict[str, Any] = init_metrics() if settings.enable_metrics else {}
    phase_times: Dict[str, int] = {}
    start = time.perf_counter()

    if settings.enable_metrics:
        def _phase(label, fn, *a, **k):
            ps = time.perf_counter(); r = fn(*a, **k); pe = time.perf_counter()
            phase_times[label] = int((pe - ps) * 1000)
            return r
    else:
        def _phase(label, fn, *a, **k):
            return fn(*a, **k)

    rng = SeededRandom(params.seed)
    grid = new_grid(params.width, params.height)

    rooms, attempts = _phase('place_rooms', place_rooms, params.width, params.height, params.room_count, rng)
    _phase('stamp_rooms', stamp_rooms, grid, rooms)
    corridors, tree, loops = _phase('connect_rooms', connect_rooms, grid, rooms, params.corridor_width, rng)
    doors = _phase('place_doors', place_doors, grid, rooms, rng, metrics if settings.enable_metrics else None)
    encounters = _phase('encounters', generate_encounters, rooms, params.difficulty, params.biome, rng)

    if settings.enable_metrics:
        metrics['rooms_requested'] = params.room_count
        metrics['rooms_placed'] = len(rooms)
        metrics['placement_attempts'] = attempts
        metrics['tree_edges'] = len(tree)
        metrics['extra_edges'] = len(loops)
        metrics['corridor_cells'] = sum(len(c.path) for c in corridors)
        metrics['loop_cells'] = sum(len(c.path) for c in loops)
        metrics['connected'] = rooms_connected(grid, rooms)
        metrics['encounters'] = len(encounters)
        metrics['runtime_ms'] = int((time.perf_counter() - start) * 1000)
        metrics['phase_ms'] = phase_times

    log.debug(
        event="structure_done",
        seed=params.seed,
        rooms=len(rooms),
        corridors=len(corridors),
        doors=len(doors),
        encounters=len(encounters),
    )
    return GeneratedDungeon(
        width=params.width,
        height=params.height,
        grid=grid,
        rooms=rooms,
        corridors=corridors,
        encounters=encounters,
        biome=params.biome,
        difficulty=params.difficulty,
        doors=doors,
        loops=loops,
        metrics=metrics,
    )
