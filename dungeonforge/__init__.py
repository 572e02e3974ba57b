"""DungeonForge: seeded procedural dungeon generator.

Same seed and parameters always produce the same grid, rooms, corridors,
encounters, NPCs and loot.
"""

__version__ = "0.1.0"

from .compose import DungeonBundle, DungeonStats, generate, summarize
from .config import BIOMES, DIFFICULTIES, GenerationParams, GeneratorSettings, random_seed
from .errors import EmptyVocabularyError, GenerationError, InvalidParameter
from .rng import SeededRandom

__all__ = [
    "__version__",
    "generate",
    "summarize",
    "DungeonBundle",
    "DungeonStats",
    "GenerationParams",
    "GeneratorSettings",
    "BIOMES",
    "DIFFICULTIES",
    "random_seed",
    "SeededRandom",
    "GenerationError",
    "InvalidParameter",
    "EmptyVocabularyError",
]
