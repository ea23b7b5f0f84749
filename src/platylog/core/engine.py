from __future__ import annotations

"""
Logging Engine.

The synchronized entry point every leveled call funnels through. One lock
covers style application, console output and file persistence, so each
record is atomic with respect to concurrent callers and console and file
lines appear in lock-acquisition order.
"""

import logging
import threading
from typing import Any, List, Optional

from platylog.core.formatting import format_header, format_record, render_message
from platylog.core.store import FileStore
from platylog.domain.config import LoggerConfig
from platylog.domain.constants import EVICTION_NOTICE
from platylog.domain.errors import SessionWriteError
from platylog.domain.levels import LevelRegistry, LogLevel
from platylog.infra.clock import Clock
from platylog.infra.console import ConsoleSink, select_console

logger = logging.getLogger(__name__)


class LogEngine:
    """
    Explicit logging context: level masks, console, session store and lock.

    Args:
        config: Construction parameters. Defaults to LoggerConfig().
        console: Console capability. Selected from config.colorize if omitted.
        clock: Calendar time source shared with the default store.
        store: Session store. Built from config if omitted.
    """

    def __init__(
            self,
            config: Optional[LoggerConfig] = None,
            *,
            console: Optional[ConsoleSink] = None,
            clock: Optional[Clock] = None,
            store: Optional[FileStore] = None,
    ) -> None:
        self._config = config or LoggerConfig()
        self._lock = threading.Lock()
        self._clock = clock or Clock()
        self._registry = LevelRegistry(self._config.display_levels, self._config.save_levels)
        self._console = console or select_console(colorize=self._config.colorize)
        self._store = store or FileStore(
            self._config.log_dir,
            session_file_name=self._config.session_file_name,
            archive_dir_name=self._config.archive_dir_name,
            files_to_keep=self._config.files_to_keep,
            clock=self._clock,
        )

    @property
    def config(self) -> LoggerConfig:
        return self._config

    @property
    def store(self) -> FileStore:
        return self._store

    # -------------------------------------------------------------------------
    # Configuration
    # -------------------------------------------------------------------------

    def set_levels_to_display(self, mask: int) -> None:
        with self._lock:
            self._registry.set_display_levels(mask)

    def set_levels_to_save(self, mask: int) -> None:
        with self._lock:
            self._registry.set_persist_levels(mask)

    def set_number_of_files_to_save(self, count: int) -> None:
        with self._lock:
            self._store.files_to_keep = count

    def levels_to_display(self) -> int:
        with self._lock:
            return self._registry.display_mask

    def levels_to_save(self) -> int:
        with self._lock:
            return self._registry.persist_mask

    # -------------------------------------------------------------------------
    # Emission
    # -------------------------------------------------------------------------

    def emit(self, level: int, message: str) -> None:
        """
        Write one already-formatted record to the enabled sinks.

        Never raises. A session file that cannot be opened disables file
        persistence for the rest of this engine's life.

        Args:
            level: Single severity bit.
            message: Final payload string.
        """
        header = format_header(self._clock.now(), level)

        with self._lock:
            if self._registry.is_displayed(level):
                self._console.apply(level)
                self._console.write_line(format_record(header, message))

            if self._registry.is_persisted(level):
                self._persist(header, message)

    def log(self, level: int, template: Any, *args: Any) -> None:
        self.emit(level, render_message(template, args))

    def trace(self, template: Any, *args: Any) -> None:
        self.emit(LogLevel.TRACE, render_message(template, args))

    def info(self, template: Any, *args: Any) -> None:
        self.emit(LogLevel.INFO, render_message(template, args))

    def debug(self, template: Any, *args: Any) -> None:
        self.emit(LogLevel.DEBUG, render_message(template, args))

    def warning(self, template: Any, *args: Any) -> None:
        self.emit(LogLevel.WARNING, render_message(template, args))

    def error(self, template: Any, *args: Any) -> None:
        self.emit(LogLevel.ERROR, render_message(template, args))

    def fatal(self, template: Any, *args: Any) -> None:
        self.emit(LogLevel.FATAL, render_message(template, args))

    def recent_lines(self, n_lines: int = 100) -> List[str]:
        """Return the tail of the current session file."""
        with self._lock:
            return self._store.read_tail(n_lines)

    # -------------------------------------------------------------------------
    # Private Helpers (lock held)
    # -------------------------------------------------------------------------

    def _persist(self, header: str, message: str) -> None:
        try:
            self._store.persist(header, message, on_evict=self._report_eviction)
        except SessionWriteError as e:
            self._registry.set_persist_levels(LogLevel.NONE)
            logger.debug("File persistence disabled: %s", e)

    def _report_eviction(self, path: str) -> None:
        # Printed as the archive is removed, before the new session banner
        self._console.apply(LogLevel.ERROR)
        self._console.write_line(EVICTION_NOTICE.format(path=path))
