"""Minimal structured logging helper.

Provides a lightweight wrapper around print() to emit key=value pairs with a
timestamp and level, so generation runs can be grepped or parsed without
configuring the stdlib logging tree.

Usage:
    from dungeonforge.logging_utils import get_logger
    log = get_logger("dungeonforge.rooms")
    log.info(event="rooms_placed", placed=6, requested=8)

Environment:
    DUNGEONFORGE_LOG_LEVEL  debug|info|warn|error (default: info)
    DUNGEONFORGE_LOG_JSON   emit one JSON object per line when truthy

All non-numeric values are str()'d with spaces replaced. Reserved keys: level, ts.
"""

from __future__ import annotations

import json
import os
import sys
import time

LEVELS = {"debug": 10, "info": 20, "warn": 30, "error": 40}
CURRENT_LEVEL = LEVELS.get(os.getenv("DUNGEONFORGE_LOG_LEVEL", "info").lower(), 20)
JSON_MODE = os.getenv("DUNGEONFORGE_LOG_JSON", "0") in ("1", "true", "TRUE", "yes", "on")
# Route every level to stderr (the CLI does this when stdout carries JSON)
ALL_TO_STDERR = False


def _format(level: str, **fields):
    if JSON_MODE:
        rec = {k: v for k, v in fields.items() if v is not None}
        rec["level"] = level
        rec["ts"] = int(time.time())
        return json.dumps(rec, separators=(",", ":"), default=str)
    parts = [f"level={level}", f"ts={int(time.time())}"]
    for k, v in fields.items():
        if v is None:
            continue
        if isinstance(v, (int, float)):
            parts.append(f"{k}={v}")
        else:
            s = str(v).replace(" ", "_")
            parts.append(f"{k}={s}")
    return " ".join(parts)


def set_level(level: str) -> None:
    """Change the process-wide threshold (used by the CLI ``--verbose`` flag)."""
    global CURRENT_LEVEL
    CURRENT_LEVEL = LEVELS[level]


def log_to_stderr(enabled: bool = True) -> None:
    global ALL_TO_STDERR
    ALL_TO_STDERR = enabled


class _Logger:
    def __init__(self, name: str | None = None):
        self.name = name or "dungeonforge"

    def _log(self, lvl: str, **fields):
        if LEVELS[lvl] < CURRENT_LEVEL:
            return
        if "logger" not in fields:
            fields["logger"] = self.name
        to_err = ALL_TO_STDERR or lvl == "error"
        print(_format(lvl, **fields), file=sys.stderr if to_err else sys.stdout)

    def debug(self, **fields):
        self._log("debug", **fields)

    def info(self, **fields):
        self._log("info", **fields)

    def warn(self, **fields):
        self._log("warn", **fields)

    def error(self, **fields):
        self._log("error", **fields)


_LOGGER_CACHE = {}


def get_logger(name: str):
    if name not in _LOGGER_CACHE:
        _LOGGER_CACHE[name] = _Logger(name)
    return _LOGGER_CACHE[name]


log = get_logger("dungeonforge")
