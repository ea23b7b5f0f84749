from __future__ import annotations

"""
Integration tests for the native logging bridge.

Verifies idempotency of configuration, level mapping, filtering of the
library's own diagnostics and the session tail helper.
"""

import logging
from typing import Iterator

import pytest

from platylog.core.engine import LogEngine
from platylog.domain.levels import LogLevel
from platylog.infra.logging import (
    BridgeConfig,
    EngineHandler,
    configure_logging,
    get_recent_logs,
    remove_logging_bridge,
    to_log_level,
)
from platylog.infra.logging.core import _CONFIGURED_FLAG_ATTR
from platylog.infra.logging.handlers import _HANDLER_TAG_ATTR

_BRIDGE_LOGGER = "bridge_test"


@pytest.fixture(autouse=True)
def reset_bridge() -> Iterator[None]:
    """Detach bridge handlers before and after each test."""
    remove_logging_bridge(_BRIDGE_LOGGER)
    remove_logging_bridge(None)
    yield
    remove_logging_bridge(_BRIDGE_LOGGER)
    remove_logging_bridge(None)


def _bridge(engine: LogEngine, **kwargs) -> logging.Logger:
    logger = configure_logging(BridgeConfig(logger_name=_BRIDGE_LOGGER, **kwargs), engine=engine)
    logger.propagate = False
    return logger


def test_bridge_idempotency(engine: LogEngine) -> None:
    """TC-01: Verify that multiple config calls do not duplicate handlers."""
    target = _bridge(engine)
    initial = len(target.handlers)

    _bridge(engine)
    assert len(target.handlers) == initial
    assert getattr(target, _CONFIGURED_FLAG_ATTR) is True


def test_bridge_force_replaces_handler(engine: LogEngine) -> None:
    target = _bridge(engine)
    first = [h for h in target.handlers if getattr(h, _HANDLER_TAG_ATTR, False)]

    configure_logging(BridgeConfig(logger_name=_BRIDGE_LOGGER), engine=engine, force=True)
    second = [h for h in target.handlers if getattr(h, _HANDLER_TAG_ATTR, False)]

    assert len(second) == 1
    assert second[0] is not first[0]


def test_native_records_reach_engine(engine: LogEngine, console) -> None:
    """TC-02: Native levels are mapped onto engine severities."""
    logger = _bridge(engine)

    logger.debug("d %s", 1)
    logger.info("i")
    logger.warning("w")
    logger.error("e")
    logger.critical("c")

    assert console.lines == [
        "[10:30:0] <Debug> - d 1",
        "[10:30:0] <Info> - i",
        "[10:30:0] <Warning> - w",
        "[10:30:0] <Error> - e",
        "[10:30:0] <Fatal> - c",
    ]


def test_bridge_level_threshold(engine: LogEngine, console) -> None:
    logger = _bridge(engine, level="WARNING")
    logger.info("dropped")
    logger.warning("kept")
    assert console.lines == ["[10:30:0] <Warning> - kept"]


def test_bridge_includes_logger_name(engine: LogEngine, console) -> None:
    logger = _bridge(engine, include_logger_name=True)
    logger.info("tagged")
    assert console.lines == [f"[10:30:0] <Info> - {_BRIDGE_LOGGER}: tagged"]


def test_bridge_appends_exception_text(engine: LogEngine, console) -> None:
    logger = _bridge(engine)
    try:
        raise RuntimeError("kaput")
    except RuntimeError:
        logger.exception("failed")

    assert console.lines[0].startswith("[10:30:0] <Error> - failed\nTraceback")
    assert "RuntimeError: kaput" in console.lines[0]


def test_internal_records_are_not_forwarded(engine: LogEngine, console) -> None:
    """TC-03: The library's own diagnostics never re-enter the engine."""
    handler = EngineHandler(engine)
    record = logging.LogRecord("platylog.core.store", logging.DEBUG, __file__, 1, "x", (), None)
    handler.emit(record)
    assert console.lines == []


def test_root_bridge_uses_default_engine(monkeypatch, tmp_path) -> None:
    monkeypatch.chdir(tmp_path)
    root = configure_logging()
    try:
        assert root is logging.getLogger()
        handlers = [h for h in root.handlers if isinstance(h, EngineHandler)]
        assert len(handlers) == 1
        from platylog import api
        assert handlers[0].engine is api.get_engine()
    finally:
        root.setLevel(logging.WARNING)


@pytest.mark.parametrize(
    "levelno,expected",
    [
        (5, LogLevel.TRACE),
        (logging.DEBUG, LogLevel.DEBUG),
        (logging.INFO, LogLevel.INFO),
        (logging.WARNING, LogLevel.WARNING),
        (logging.ERROR, LogLevel.ERROR),
        (logging.CRITICAL, LogLevel.FATAL),
        (60, LogLevel.FATAL),
    ],
)
def test_to_log_level(levelno: int, expected: LogLevel) -> None:
    assert to_log_level(levelno) == expected


def test_get_recent_logs(engine: LogEngine) -> None:
    """TC-04: The tail helper returns the latest session lines."""
    assert get_recent_logs(engine=engine) == "Log file not found."

    engine.info("one")
    engine.info("two")
    assert get_recent_logs(1, engine=engine) == "[10:30:0] <Info> - two\n"
