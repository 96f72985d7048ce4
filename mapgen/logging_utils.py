"""Structured log lines for map generation.

The generator and connector report what happened to each run as one line per
event: `room_dropped` when a room runs out of placement attempts,
`rooms_generated` with requested/placed/tunnel counts, `areas_connected` from
the connector, and `invalid_argument` from the CLI. Lines are key=value pairs,
or one JSON object each when JSON mode is on.

Usage:
    from mapgen.logging_utils import get_logger
    log = get_logger("rooms")
    if log.is_enabled("debug"):
        log.debug(event="room_dropped", index=3, attempts=10)

Environment (re-read by ``configure()``):
    MAPGEN_LOG_LEVEL   debug | info | warn | error (default: info)
    MAPGEN_LOG_JSON    1/true/yes/on switches to JSON lines

Error lines go to stderr so they never mix with CLI JSON output on stdout.
"""

from __future__ import annotations

import json
import os
import sys
import time
from typing import Dict, Optional

LEVELS = {"debug": 10, "info": 20, "warn": 30, "error": 40}
_TRUTHY = ("1", "true", "TRUE", "yes", "on")

CURRENT_LEVEL = 20
JSON_MODE = False


def configure(level: Optional[str] = None, json_mode: Optional[bool] = None) -> None:
    """(Re)read level and output mode; explicit arguments override the environment."""
    global CURRENT_LEVEL, JSON_MODE
    lvl = level if level is not None else os.getenv("MAPGEN_LOG_LEVEL", "info")
    CURRENT_LEVEL = LEVELS.get(lvl.lower(), 20)
    if json_mode is None:
        json_mode = os.getenv("MAPGEN_LOG_JSON", "0") in _TRUTHY
    JSON_MODE = json_mode


def _format(level: str, **fields) -> str:
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


class _Logger:
    def __init__(self, name: Optional[str] = None):
        self.name = name or "mapgen"

    def _log(self, lvl: str, **fields) -> None:
        if LEVELS[lvl] < CURRENT_LEVEL:
            return
        if "logger" not in fields:
            fields["logger"] = self.name
        print(_format(lvl, **fields), file=sys.stdout if lvl != "error" else sys.stderr)

    def is_enabled(self, lvl: str) -> bool:
        return LEVELS[lvl] >= CURRENT_LEVEL

    def debug(self, **fields) -> None:
        self._log("debug", **fields)

    def info(self, **fields) -> None:
        self._log("info", **fields)

    def warn(self, **fields) -> None:
        self._log("warn", **fields)

    def error(self, **fields) -> None:
        self._log("error", **fields)


_LOGGER_CACHE: Dict[str, _Logger] = {}


def get_logger(name: str) -> _Logger:
    if name not in _LOGGER_CACHE:
        _LOGGER_CACHE[name] = _Logger(name)
    return _LOGGER_CACHE[name]


configure()
log = get_logger("mapgen")

__all__ = ["LEVELS", "configure", "get_logger", "log"]
