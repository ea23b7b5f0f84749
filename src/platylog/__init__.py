from __future__ import annotations

import logging

from platylog.api import (
    configure,
    debug,
    error,
    fatal,
    get_engine,
    info,
    reset,
    set_levels_to_display,
    set_levels_to_save,
    set_number_of_files_to_save,
    trace,
    warning,
)
from platylog.core.engine import LogEngine
from platylog.domain.config import LoggerConfig
from platylog.domain.errors import PlatyLogError, SessionWriteError
from platylog.domain.levels import LogLevel

# Library diagnostics stay silent unless the host application configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "LogEngine",
    "LogLevel",
    "LoggerConfig",
    "PlatyLogError",
    "SessionWriteError",
    "configure",
    "get_engine",
    "reset",
    "trace",
    "info",
    "debug",
    "warning",
    "error",
    "fatal",
    "set_levels_to_display",
    "set_levels_to_save",
    "set_number_of_files_to_save",
]
