"""Deterministic random source shared by every generator.

The stream is a small linear congruential generator seeded from a string hash.
Both the hash and the LCG step are bit-exact so the same seed string yields
the same dungeon on any platform:

    state = abs(int32 string hash of seed)      # h = h*31 + code_unit, wrapped
    state = (state * 9301 + 49297) % 233280     # per draw
    value = state / 233280                      # in [0, 1)

Each subsystem (structure, NPCs, loot) owns its own ``SeededRandom``; the NPC
and loot streams are derived with ``derive_seed`` so they never share draws.
"""

from __future__ import annotations

import math
from typing import List, Sequence, TypeVar

from .errors import EmptyVocabularyError

T = TypeVar("T")

LCG_MULTIPLIER = 9301
LCG_INCREMENT = 49297
LCG_MODULUS = 233280


def _code_units(text: str) -> List[int]:
    # Hash over UTF-16 code units so astral characters count as surrogate pairs
    raw = text.encode("utf-16-le", "surrogatepass")
    return [int.from_bytes(raw[i : i + 2], "little") for i in range(0, len(raw), 2)]


def hash_seed(seed: str) -> int:
    """Shift-and-subtract string hash (``(h << 5) - h + c``) with 32-bit wraparound, absolute value."""
    h = 0
    for unit in _code_units(seed):
        h = (h * 31 + unit) & 0xFFFFFFFF
        if h >= 0x80000000:
            h -= 0x100000000
    return abs(h)


def derive_seed(seed: str, suffix: str) -> str:
    return f"{seed}_{suffix}"


def round_half_up(value: float) -> int:
    """Round .5 upward; challenge ratings depend on this instead of banker's rounding."""
    return math.floor(value + 0.5)


class SeededRandom:
    """Single-writer LCG stream. Not thread-safe."""

    def __init__(self, seed: str):
        self.seed_text = seed
        self.state = hash_seed(seed)
        self.draws = 0

    def next(self) -> float:
        self.state = (self.state * LCG_MULTIPLIER + LCG_INCREMENT) % LCG_MODULUS
        self.draws += 1
        return self.state / LCG_MODULUS

    def next_int(self, lo: int, hi: int) -> int:
        """Uniform integer in ``[lo, hi]`` inclusive."""
        return math.floor(self.next() * (hi - lo + 1)) + lo

    def choice(self, items: Sequence[T]) -> T:
        if not items:
            raise EmptyVocabularyError("choice() from an empty sequence")
        return items[self.next_int(0, len(items) - 1)]

    def shuffle(self, items: Sequence[T]) -> List[T]:
        """Fisher-Yates over a copy; ``items`` is left untouched."""
        shuffled = list(items)
        for i in range(len(shuffled) - 1, 0, -1):
            j = self.next_int(0, i)
            shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
        return shuffled

    def weighted_choice(self, items: Sequence[T], weights: Sequence[float]) -> T:
        """Cumulative-subtraction pick.

        Draws ``next() * sum(weights)`` and subtracts each weight in order until
        the remainder is <= 0. Falls back to the last item when float error
        leaves a positive remainder after the final weight.
        """
        if not items:
            raise EmptyVocabularyError("weighted_choice() from an empty sequence")
        if len(items) != len(weights):
            raise ValueError(f"weighted_choice() got {len(items)} items but {len(weights)} weights")
        remaining = self.next() * sum(weights)
        for item, weight in zip(items, weights):
            remaining -= weight
            if remaining <= 0:
                return item
        return items[-1]

    def __repr__(self) -> str:
        return f"SeededRandom(seed={self.seed_text!r}, state={self.state}, draws={self.draws})"


__all__ = ["SeededRandom", "hash_seed", "derive_seed", "round_half_up"]
