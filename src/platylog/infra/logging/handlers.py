from __future__ import annotations

"""
Bridge Handler and Low-Level Utilities.

Provides the handler forwarding native log records into a LogEngine and the
tagging mechanism used to tell our handlers apart from handlers installed by
the host application or other libraries.
"""

import logging
from typing import Optional

from platylog.core.engine import LogEngine
from platylog.infra.logging.config import to_log_level

# Internal attribute used to tag and identify our own handlers
_HANDLER_TAG_ATTR: str = "_platylog_handler"

# Records from these loggers are emitted while the engine lock is held
_INTERNAL_LOGGER_PREFIX = "platylog"


# ==============================================================================
# INTERNAL LOGGING UTILITIES
# ==============================================================================

def _tag_handler(handler: logging.Handler) -> None:
    """
    Mark a handler as an internally-managed handler.

    Args:
        handler: The logging handler instance to tag.
    """
    setattr(handler, _HANDLER_TAG_ATTR, True)


def _is_our_handler(handler: logging.Handler) -> bool:
    """
    Verify if a handler was installed by this bridge.

    Args:
        handler: The handler to inspect.

    Returns:
        bool: True if the handler carries our internal tag.
    """
    return bool(getattr(handler, _HANDLER_TAG_ATTR, False))


def _is_internal_record(record: logging.LogRecord) -> bool:
    name = record.name or ""
    return name == _INTERNAL_LOGGER_PREFIX or name.startswith(_INTERNAL_LOGGER_PREFIX + ".")


# ==============================================================================
# HANDLER
# ==============================================================================

class EngineHandler(logging.Handler):
    """
    Forward native log records to a LogEngine.

    The engine adds its own header, so only the resolved message (and the
    exception text, when present) is passed through.

    Args:
        engine: Target engine. None resolves the process-wide default per record.
        level: Minimum native level handled.
        include_logger_name: Prefix each payload with 'name: '.
    """

    def __init__(
            self,
            engine: Optional[LogEngine] = None,
            level: int = logging.NOTSET,
            include_logger_name: bool = False,
    ) -> None:
        super().__init__(level)
        self._engine = engine
        self._include_logger_name = include_logger_name

    @property
    def engine(self) -> LogEngine:
        if self._engine is not None:
            return self._engine
        from platylog.api import get_engine
        return get_engine()

    def emit(self, record: logging.LogRecord) -> None:
        if _is_internal_record(record):
            return
        try:
            payload = record.getMessage()
            if record.exc_info:
                payload = f"{payload}\n{self.formatException(record.exc_info)}"
            if self._include_logger_name:
                payload = f"{record.name}: {payload}"
            self.engine.emit(to_log_level(record.levelno), payload)
        except Exception:
            self.handleError(record)

    def formatException(self, exc_info) -> str:
        formatter = self.formatter or logging.Formatter()
        return formatter.formatException(exc_info)
