"""Exception types raised by the generator.

Callers see two kinds of failure:

* ``InvalidParameter``: the request itself is unusable (bad seed, dimensions
  out of range, unknown biome...). Raised before any generation work starts.
* ``EmptyVocabularyError``: an internal table was empty when a draw was made.
  This is a programming error in the tables, never a user error.

Placing fewer rooms than requested is *not* an error; it is reported through
metrics and a ``warn`` log line instead.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional


class GenerationError(Exception):
    """Root of every error raised by dungeonforge."""


class InvalidParameter(GenerationError, ValueError):
    def __init__(self, field: str, message: str, code: str, errors: Optional[List[Dict[str, Any]]] = None):
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message
        self.code = code
        # Every violation found, first one mirrored in field/message/code
        self.errors = errors or [{"field": field, "error": message, "code": code}]

    def to_dict(self) -> Dict[str, Any]:
        return {"field": self.field, "error": self.message, "code": self.code, "errors": list(self.errors)}


class EmptyVocabularyError(GenerationError, LookupError):
    pass


__all__ = ["GenerationError", "InvalidParameter", "EmptyVocabularyError"]
