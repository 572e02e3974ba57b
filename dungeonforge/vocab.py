"""Keyed vocabulary tables with an explicit fallback key.

Every content table (creatures by biome, names by race, item nouns by type...)
is a ``KeyedTable``: lookups for unknown keys resolve to the declared default
entry, and that fallback is part of the table definition rather than an
``or`` scattered at call sites.
"""

from __future__ import annotations

from typing import Dict, Iterator, Mapping, TypeVar

from .errors import EmptyVocabularyError

V = TypeVar("V")


class KeyedTable(Mapping[str, V]):
    def __init__(self, name: str, entries: Dict[str, V], default: str):
        if default not in entries:
            raise EmptyVocabularyError(f"{name}: default key {default!r} missing from table")
        self.name = name
        self.default = default
        self._entries = dict(entries)

    def __getitem__(self, key: str) -> V:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def resolve(self, key: str) -> V:
        """Entry for ``key``, or the default entry when ``key`` is not listed."""
        return self._entries.get(key, self._entries[self.default])

    def __repr__(self) -> str:
        return f"KeyedTable({self.name!r}, keys={list(self._entries)}, default={self.default!r})"


__all__ = ["KeyedTable"]
