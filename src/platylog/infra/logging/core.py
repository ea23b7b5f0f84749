from __future__ import annotations

"""
Bridge Core Orchestrator.

Maintains the idempotent lifecycle of the bridge between Python's native
'logging' module and a LogEngine, so application and third-party loggers
end up in the same console and session file as direct leveled calls.
"""

import logging
from typing import Optional

from platylog.core.engine import LogEngine
from platylog.infra.logging.config import _LEVEL_MAP, BridgeConfig
from platylog.infra.logging.handlers import EngineHandler, _is_our_handler, _tag_handler

# Internal state flag for idempotency
_CONFIGURED_FLAG_ATTR: str = "_platylog_configured"


# ==============================================================================
# PUBLIC API
# ==============================================================================

def configure_logging(
        cfg: Optional[BridgeConfig] = None,
        *,
        engine: Optional[LogEngine] = None,
        force: bool = False,
) -> logging.Logger:
    """
    Attach the engine bridge to a native logger, once.

    Checks an internal flag to avoid redundant handler attachments unless
    explicit re-configuration is requested.

    Args:
        cfg: Bridge settings. Defaults to BridgeConfig().
        engine: Target engine. None forwards to the process-wide default engine.
        force: If True, replace a previously installed bridge handler.

    Returns:
        logging.Logger: The logger the bridge is attached to.
    """
    cfg = cfg or BridgeConfig()
    target = logging.getLogger(cfg.logger_name)

    already_configured = bool(getattr(target, _CONFIGURED_FLAG_ATTR, False))
    if already_configured and not force:
        return target

    level_int = _parse_level(cfg.level)
    target.setLevel(level_int)

    # Cleanup existing bridge handlers to prevent duplicates
    _remove_our_handlers(target)

    handler = EngineHandler(engine, level=level_int, include_logger_name=cfg.include_logger_name)
    _tag_handler(handler)
    target.addHandler(handler)

    setattr(target, _CONFIGURED_FLAG_ATTR, True)
    return target


def remove_logging_bridge(logger_name: Optional[str] = None) -> None:
    """Detach bridge handlers from a logger and clear its configured flag."""
    target = logging.getLogger(logger_name)
    _remove_our_handlers(target)
    if hasattr(target, _CONFIGURED_FLAG_ATTR):
        delattr(target, _CONFIGURED_FLAG_ATTR)


def get_recent_logs(n_lines: int = 100, engine: Optional[LogEngine] = None) -> str:
    """
    Extract the tail of the current session file for diagnostics.

    Args:
        n_lines: Maximum number of lines to retrieve from the file end.
        engine: Engine whose session file is read (default engine if None).

    Returns:
        str: Consolidated log tail content, or a notice if there is none.
    """
    if engine is None:
        from platylog.api import get_engine
        engine = get_engine()

    lines = engine.recent_lines(n_lines)
    if not lines:
        return "Log file not found."
    return "".join(lines)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _parse_level(level: str) -> int:
    """Convert a string-based logging level to its numeric constant."""
    if not level:
        return logging.DEBUG
    return _LEVEL_MAP.get(str(level).strip().upper(), logging.DEBUG)


def _remove_our_handlers(target: logging.Logger) -> None:
    """Identify and detach all bridge handlers from a logger."""
    for h in list(target.handlers):
        if _is_our_handler(h):
            target.removeHandler(h)
            h.close()
