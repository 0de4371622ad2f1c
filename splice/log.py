"""Log severity levels."""

from __future__ import annotations

from enum import IntEnum

BUFFER_SIZE = 1024


class Level(IntEnum):
    DEBUG = 0
    INFO = 1
    WARN = 2
    ERROR = 3
    FATAL = 4


_NAMES = {
    Level.DEBUG: "Debug",
    Level.INFO: "Info",
    Level.WARN: "Warn",
    Level.ERROR: "Error",
    Level.FATAL: "Fatal",
}


def level_name(level: int) -> str:
    """Display name of a level, or ``"Unknown"`` for a value that is not one."""
    try:
        return _NAMES[Level(level)]
    except ValueError:
        return "Unknown"