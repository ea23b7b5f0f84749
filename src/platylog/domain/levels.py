from __future__ import annotations

"""
Severity Level Model.

Defines the six independent severities as bits of a level mask and the
registry holding the console and file masks. Levels are not ordered: any
combination of bits may be enabled for either sink.
"""

from enum import IntFlag
from typing import Dict


class LogLevel(IntFlag):
    """Bit flags selecting severities for a sink."""
    NONE = 0
    TRACE = 1
    INFO = 1 << 1
    DEBUG = 1 << 2
    WARNING = 1 << 3
    ERROR = 1 << 4
    FATAL = 1 << 5
    ALL = 63


# Labels printed inside the record header
LEVEL_NAMES: Dict[LogLevel, str] = {
    LogLevel.TRACE: "Trace",
    LogLevel.INFO: "Info",
    LogLevel.DEBUG: "Debug",
    LogLevel.WARNING: "Warning",
    LogLevel.ERROR: "Error",
    LogLevel.FATAL: "Fatal",
}

SINGLE_LEVELS = tuple(LEVEL_NAMES)


def level_name(level: int) -> str:
    """Return the header label for a single severity."""
    try:
        return LEVEL_NAMES[LogLevel(level)]
    except (KeyError, ValueError):
        return str(int(level))


class LevelRegistry:
    """
    Holds the display (console) and persist (file) masks.

    Pure state: no I/O and no locking. The engine serializes every access
    under its own lock.
    """

    def __init__(self, display_mask: int = LogLevel.ALL, persist_mask: int = LogLevel.ALL) -> None:
        self._display_mask = int(display_mask)
        self._persist_mask = int(persist_mask)

    @property
    def display_mask(self) -> int:
        return self._display_mask

    @property
    def persist_mask(self) -> int:
        return self._persist_mask

    def set_display_levels(self, mask: int) -> None:
        self._display_mask = int(mask)

    def set_persist_levels(self, mask: int) -> None:
        self._persist_mask = int(mask)

    def is_displayed(self, level: int) -> bool:
        return (self._display_mask & int(level)) != 0

    def is_persisted(self, level: int) -> bool:
        return (self._persist_mask & int(level)) != 0
