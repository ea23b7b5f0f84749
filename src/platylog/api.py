from __future__ import annotations

"""
Process-wide Logging Facade.

Module-level leveled calls backed by a lazily created default engine, so
callers can log from anywhere without holding a handle. The engine can be
replaced explicitly with configure(), which is also how tests isolate the
log directory.
"""

import threading
from typing import Any, Optional

from platylog.core.engine import LogEngine
from platylog.domain.config import LoggerConfig

_engine: Optional[LogEngine] = None
_engine_lock = threading.Lock()


# ==============================================================================
# ENGINE LIFECYCLE
# ==============================================================================

def get_engine() -> LogEngine:
    """Return the default engine, creating it with LoggerConfig() on first use."""
    global _engine
    with _engine_lock:
        if _engine is None:
            _engine = LogEngine(LoggerConfig())
        return _engine


def configure(config: Optional[LoggerConfig] = None, **overrides: Any) -> LogEngine:
    """
    Replace the default engine.

    A new engine starts a new session: its first file write archives the
    current session file.

    Args:
        config: Base configuration (defaults to LoggerConfig()).
        **overrides: Keyword overrides forwarded to the engine constructor
            (console, clock, store).

    Returns:
        LogEngine: The newly installed engine.
    """
    global _engine
    engine = LogEngine(config or LoggerConfig(), **overrides)
    with _engine_lock:
        _engine = engine
    return engine


def reset() -> None:
    """Drop the default engine; the next call builds a fresh one."""
    global _engine
    with _engine_lock:
        _engine = None


# ==============================================================================
# LEVELED CALLS
# ==============================================================================

def trace(template: Any, *args: Any) -> None:
    get_engine().trace(template, *args)


def info(template: Any, *args: Any) -> None:
    get_engine().info(template, *args)


def debug(template: Any, *args: Any) -> None:
    get_engine().debug(template, *args)


def warning(template: Any, *args: Any) -> None:
    get_engine().warning(template, *args)


def error(template: Any, *args: Any) -> None:
    get_engine().error(template, *args)


def fatal(template: Any, *args: Any) -> None:
    get_engine().fatal(template, *args)


# ==============================================================================
# LEVEL CONFIGURATION
# ==============================================================================

def set_levels_to_display(mask: int) -> None:
    get_engine().set_levels_to_display(mask)


def set_levels_to_save(mask: int) -> None:
    get_engine().set_levels_to_save(mask)


def set_number_of_files_to_save(count: int) -> None:
    get_engine().set_number_of_files_to_save(count)
