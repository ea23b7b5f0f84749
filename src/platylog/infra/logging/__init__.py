from __future__ import annotations

from .config import BridgeConfig, to_log_level
from .core import configure_logging, get_recent_logs, remove_logging_bridge
from .handlers import EngineHandler

__all__ = [
    "BridgeConfig",
    "EngineHandler",
    "configure_logging",
    "get_recent_logs",
    "remove_logging_bridge",
    "to_log_level",
]
