from __future__ import annotations

"""
Exception hierarchy. None of these ever leave a leveled logging call.
"""


class PlatyLogError(Exception):
    """Base class for errors raised inside the logging engine."""


class SessionWriteError(PlatyLogError):
    """The session file (or its directories) could not be opened for writing."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Cannot write session file '{path}': {reason}")
        self.path = path
        self.reason = reason
