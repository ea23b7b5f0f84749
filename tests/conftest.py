from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures: a fixed clock, an in-memory console and engines
   rooted in temporary directories.
"""

import io
import os
import sys
import time
from typing import Iterator, List, Tuple

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from platylog import api  # noqa: E402
from platylog.core.engine import LogEngine  # noqa: E402
from platylog.domain.config import LoggerConfig  # noqa: E402
from platylog.infra.clock import Clock  # noqa: E402
from platylog.infra.console import ConsoleSink  # noqa: E402


# -----------------------------------------------------------------------------
# Test Doubles
# -----------------------------------------------------------------------------
class FixedClock(Clock):
    """Clock frozen at a given calendar time."""

    def __init__(self, t: Tuple[int, int, int, int, int, int] = (2024, 1, 5, 10, 30, 0)) -> None:
        self.set(t)

    def set(self, t: Tuple[int, int, int, int, int, int]) -> None:
        self._now = time.struct_time(t + (0, 0, -1))

    def now(self) -> time.struct_time:
        return self._now


class RecordingConsole(ConsoleSink):
    """Console capturing styles and lines in memory."""

    def __init__(self) -> None:
        super().__init__(io.StringIO())
        self.styles: List[int] = []
        self.lines: List[str] = []

    def apply(self, level: int) -> None:
        self.styles.append(int(level))

    def write_line(self, text: str) -> None:
        self.lines.append(text)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def fixed_clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def console() -> RecordingConsole:
    return RecordingConsole()


@pytest.fixture
def log_dir(tmp_path) -> str:
    return str(tmp_path / "logs")


@pytest.fixture
def engine(log_dir: str, console: RecordingConsole, fixed_clock: FixedClock) -> LogEngine:
    """Engine writing under a temporary 'logs' directory."""
    return LogEngine(LoggerConfig(log_dir=log_dir), console=console, clock=fixed_clock)


@pytest.fixture(autouse=True)
def reset_default_engine() -> Iterator[None]:
    """Ensure the process-wide engine never leaks between tests."""
    api.reset()
    yield
    api.reset()
