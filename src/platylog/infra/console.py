from __future__ import annotations

"""
Console Output Capability.

Models "apply style S to the console, then print" as an interface with two
implementations selected at construction time: a colorama-backed styled
console and a plain console whose styling is a no-op. Neither ever raises
on a broken or closed stream.
"""

import sys
import threading
from abc import ABC, abstractmethod
from typing import Dict, Optional, TextIO

import colorama
from colorama import Fore, Style

from platylog.domain.levels import LogLevel

# Severity to terminal style table
LEVEL_STYLES: Dict[LogLevel, str] = {
    LogLevel.TRACE: Fore.WHITE,
    LogLevel.INFO: Fore.BLUE,
    LogLevel.DEBUG: Fore.GREEN,
    LogLevel.WARNING: Fore.YELLOW,
    LogLevel.ERROR: Fore.RED,
    LogLevel.FATAL: Style.BRIGHT + Fore.RED,
}

_windows_fix_lock = threading.Lock()
_windows_fix_applied = False


def _enable_windows_ansi() -> None:
    """Enable ANSI processing on legacy Windows consoles, once per process."""
    global _windows_fix_applied
    with _windows_fix_lock:
        if not _windows_fix_applied:
            colorama.just_fix_windows_console()
            _windows_fix_applied = True


class ConsoleSink(ABC):
    """
    Destination for console records.

    Args:
        stream: Target text stream. None resolves to sys.stdout at write time.
    """

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> Optional[TextIO]:
        """Target stream; None when the process has no stdout (pythonw, daemons)."""
        return self._stream if self._stream is not None else sys.stdout

    @abstractmethod
    def apply(self, level: int) -> None:
        """Request the style of the given severity for subsequent output."""

    def write_line(self, text: str) -> None:
        self._write(text + "\n")

    def _write(self, text: str) -> None:
        stream = self.stream
        if stream is None:
            return
        try:
            stream.write(text)
            stream.flush()
        except (AttributeError, OSError, ValueError):
            pass


class PlainConsole(ConsoleSink):
    """Console without styling support."""

    def apply(self, level: int) -> None:
        return None


class StyledConsole(ConsoleSink):
    """Console emitting ANSI styles through colorama."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        super().__init__(stream)
        _enable_windows_ansi()

    def apply(self, level: int) -> None:
        try:
            style = LEVEL_STYLES[LogLevel(level)]
        except (KeyError, ValueError):
            return
        self._write(style)

    def write_line(self, text: str) -> None:
        self._write(text + Style.RESET_ALL + "\n")


def select_console(stream: Optional[TextIO] = None, colorize: Optional[bool] = None) -> ConsoleSink:
    """
    Pick the console implementation for a stream.

    Args:
        stream: Target stream (None means sys.stdout, resolved lazily).
        colorize: Force styling on or off. None styles only interactive terminals.

    Returns:
        ConsoleSink: Styled or plain console.
    """
    if colorize is None:
        target = stream if stream is not None else sys.stdout
        try:
            colorize = bool(target.isatty())
        except (AttributeError, ValueError):
            colorize = False
    return StyledConsole(stream) if colorize else PlainConsole(stream)
