from __future__ import annotations

"""
Bridge Configuration Models.

Defines the settings used to route Python 'logging' records into a
LogEngine and the severity mappings between the two level systems.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

from platylog.domain.levels import LogLevel

# Mapping of string identifiers to native logging constants
_LEVEL_MAP: Dict[str, int] = {
    "TRACE": 5,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
}


def to_log_level(levelno: int) -> LogLevel:
    """Map a native logging level number onto a single engine severity."""
    if levelno >= logging.CRITICAL:
        return LogLevel.FATAL
    if levelno >= logging.ERROR:
        return LogLevel.ERROR
    if levelno >= logging.WARNING:
        return LogLevel.WARNING
    if levelno >= logging.INFO:
        return LogLevel.INFO
    if levelno >= logging.DEBUG:
        return LogLevel.DEBUG
    return LogLevel.TRACE


@dataclass(frozen=True)
class BridgeConfig:
    """
    Immutable settings for the logging bridge.

    Attributes:
        level: Minimum native severity forwarded to the engine.
        logger_name: Logger to attach to. None targets the root logger.
        include_logger_name: Prefix payloads with the originating logger name.
    """
    level: str = "DEBUG"
    logger_name: Optional[str] = None
    include_logger_name: bool = False
