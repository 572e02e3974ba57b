"""Generation parameters and process settings.

``GenerationParams`` is the request a caller hands to ``dungeonforge.generate``.
It accepts both snake_case and the camelCase keys used by the output contract
(``roomCount``, ``corridorWidth``, ``enableAI``), and ``validate()`` collects
every range violation before any generation work starts.

``GeneratorSettings`` holds process-level switches read from the environment.
"""

from __future__ import annotations

import os
import random
import string
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping

from .errors import InvalidParameter

BIOMES = ("dungeon", "cave", "forest", "crypt", "temple", "tower")
DIFFICULTIES = ("easy", "medium", "hard", "deadly")
CORRIDOR_WIDTHS = (1, 2, 3)

DIMENSION_RANGE = (10, 50)
ROOM_COUNT_RANGE = (3, 20)

_KEY_ALIASES = {
    "roomCount": "room_count",
    "corridorWidth": "corridor_width",
    "enableAI": "enable_ai",
    "enableAi": "enable_ai",
}

_SEED_ALPHABET = string.digits + string.ascii_lowercase


def random_seed(length: int = 11) -> str:
    """Fresh lowercase base-36 seed for callers that did not supply one."""
    return "".join(random.choices(_SEED_ALPHABET, k=length))


def env_flag(name: str, default: bool) -> bool:
    if name not in os.environ:
        return default
    return os.environ.get(name, "").strip().lower() not in {"0", "false", "no", "off", ""}


@dataclass
class GenerationParams:
    seed: str
    width: int = 20
    height: int = 20
    room_count: int = 8
    corridor_width: int = 1
    difficulty: str = "medium"
    biome: str = "dungeon"
    enable_ai: bool = True

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> "GenerationParams":
        if not isinstance(payload, Mapping):
            raise InvalidParameter("__root__", "parameters must be a mapping", "type")
        known = {f for f in cls.__dataclass_fields__}
        values: Dict[str, Any] = {}
        for key, value in payload.items():
            name = _KEY_ALIASES.get(key, key)
            if name in known:
                values[name] = value
        if "seed" not in values:
            raise InvalidParameter("seed", "missing required field", "required")
        return cls(**values)

    def collect_errors(self) -> List[Dict[str, Any]]:
        errors: List[Dict[str, Any]] = []

        def fail(name: str, message: str, code: str) -> None:
            errors.append({"field": name, "error": message, "code": code})

        if not isinstance(self.seed, str):
            fail("seed", "expected str", "type")
        elif not self.seed.strip():
            fail("seed", "must not be empty", "empty")

        for name, (lo, hi) in (
            ("width", DIMENSION_RANGE),
            ("height", DIMENSION_RANGE),
            ("room_count", ROOM_COUNT_RANGE),
        ):
            value = getattr(self, name)
            # bool is an int subclass; reject it explicitly
            if isinstance(value, bool) or not isinstance(value, int):
                fail(name, "expected int", "type")
            elif not lo <= value <= hi:
                fail(name, f"must be between {lo} and {hi}", "range")

        cw = self.corridor_width
        if isinstance(cw, bool) or not isinstance(cw, int) or cw not in CORRIDOR_WIDTHS:
            fail("corridor_width", f"must be one of {list(CORRIDOR_WIDTHS)}", "choice")
        if self.difficulty not in DIFFICULTIES:
            fail("difficulty", f"must be one of {list(DIFFICULTIES)}", "choice")
        if self.biome not in BIOMES:
            fail("biome", f"must be one of {list(BIOMES)}", "choice")
        if not isinstance(self.enable_ai, bool):
            fail("enable_ai", "expected bool", "type")
        return errors

    def validate(self) -> "GenerationParams":
        errors = self.collect_errors()
        if errors:
            first = errors[0]
            raise InvalidParameter(first["field"], first["error"], first["code"], errors=errors)
        return self

    def to_dict(self) -> Dict[str, Any]:
        return {
            "seed": self.seed,
            "width": self.width,
            "height": self.height,
            "roomCount": self.room_count,
            "corridorWidth": self.corridor_width,
            "difficulty": self.difficulty,
            "biome": self.biome,
            "enableAI": self.enable_ai,
        }


@dataclass
class GeneratorSettings:
    enable_metrics: bool = True

    @classmethod
    def from_env(cls) -> "GeneratorSettings":
        return cls(enable_metrics=env_flag("DUNGEONFORGE_ENABLE_METRICS", True))


def coerce_params(params: Any) -> GenerationParams:
    """Accept a ``GenerationParams`` or a plain mapping, return validated params."""
    if isinstance(params, GenerationParams):
        return params.validate()
    return GenerationParams.from_mapping(params).validate()


__all__ = [
    "BIOMES",
    "DIFFICULTIES",
    "CORRIDOR_WIDTHS",
    "GenerationParams",
    "GeneratorSettings",
    "coerce_params",
    "env_flag",
    "random_seed",
]
