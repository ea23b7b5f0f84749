from __future__ import annotations

"""
Session File Store.

Owns the on-disk layout of a logging session:

    <log_dir>/<session_file_name>               current session
    <log_dir>/<archive_dir_name>/log_<...>.txt  archived sessions

The first write of a store archives the previous session file (if any),
evicting at most one old archive when the retention limit is reached, and
starts a fresh session with a creation banner. Every later write is an
independent open/append/close cycle. The store is not thread-safe; the
engine serializes all calls.
"""

import logging
import os
from dataclasses import dataclass
from typing import Callable, List, Optional

from platylog.core.formatting import (
    archive_name_from_banner,
    format_banner,
    format_record,
)
from platylog.domain.constants import (
    DEFAULT_ARCHIVE_DIR_NAME,
    DEFAULT_FILES_TO_KEEP,
    DEFAULT_LOG_DIR,
    DEFAULT_SESSION_FILE_NAME,
)
from platylog.domain.errors import SessionWriteError
from platylog.infra.clock import Clock
from platylog.infra.fs import (
    CreationTimeResolver,
    copy_file,
    count_regular_files,
    find_oldest_file,
    get_creation_time,
    missing_directories,
    read_first_line,
    read_last_lines,
    safe_mkdir,
)

logger = logging.getLogger(__name__)

EvictionCallback = Callable[[str], None]


@dataclass(frozen=True)
class RotationResult:
    """
    Outcome of archiving the previous session.

    Attributes:
        archived_path: Archive copy written, or None if the copy failed.
        evicted_path: Old archive removed to respect the retention limit.
    """
    archived_path: Optional[str] = None
    evicted_path: Optional[str] = None


class FileStore:
    """
    Persists records to the session file and manages session rotation.

    Args:
        log_dir: Root directory of the log layout.
        session_file_name: File name of the current session.
        archive_dir_name: Subdirectory holding archived sessions.
        files_to_keep: Retention limit of the archive directory.
        clock: Calendar time source for banners and fallback names.
        creation_time: Resolver used to choose the archive to evict.
    """

    def __init__(
            self,
            log_dir: str = DEFAULT_LOG_DIR,
            *,
            session_file_name: str = DEFAULT_SESSION_FILE_NAME,
            archive_dir_name: str = DEFAULT_ARCHIVE_DIR_NAME,
            files_to_keep: int = DEFAULT_FILES_TO_KEEP,
            clock: Optional[Clock] = None,
            creation_time: CreationTimeResolver = get_creation_time,
    ) -> None:
        self._log_dir = log_dir
        self._session_path = os.path.join(log_dir, session_file_name)
        self._archive_dir = os.path.join(log_dir, archive_dir_name)
        self._files_to_keep = int(files_to_keep)
        self._clock = clock or Clock()
        self._creation_time = creation_time
        self._should_rotate = True

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def log_dir(self) -> str:
        return self._log_dir

    @property
    def session_path(self) -> str:
        return self._session_path

    @property
    def archive_dir(self) -> str:
        return self._archive_dir

    @property
    def should_rotate(self) -> bool:
        """True until the first write of this store has started a session."""
        return self._should_rotate

    @property
    def files_to_keep(self) -> int:
        return self._files_to_keep

    @files_to_keep.setter
    def files_to_keep(self, value: int) -> None:
        self._files_to_keep = int(value)

    # -------------------------------------------------------------------------
    # Public API
    # -------------------------------------------------------------------------

    def persist(
            self,
            header: str,
            message: str,
            on_evict: Optional[EvictionCallback] = None,
    ) -> Optional[RotationResult]:
        """
        Append one record to the session file.

        On the first call, archives the previous session (if present) and
        truncates the session file with a fresh banner before writing.

        Args:
            header: Formatted record header.
            message: Formatted payload.
            on_evict: Called with the path of an archive about to be removed by
                the retention limit, before the removal and the new session banner.

        Returns:
            Optional[RotationResult]: Set when a previous session was archived by this call.

        Raises:
            SessionWriteError: If the directories or the session file cannot be opened.
        """
        self._ensure_directories()

        rotation: Optional[RotationResult] = None
        if self._should_rotate:
            if os.path.exists(self._session_path):
                rotation = self._archive_previous_session(on_evict)
            mode = "w"
            preamble = format_banner(self._clock.now()) + "\n\n"
            self._should_rotate = False
        else:
            mode = "a"
            preamble = ""

        try:
            with open(self._session_path, mode, encoding="utf-8", errors="replace") as f:
                f.write(preamble + format_record(header, message) + "\n")
        except OSError as e:
            raise SessionWriteError(self._session_path, str(e)) from e

        return rotation

    def read_tail(self, n_lines: int = 100) -> List[str]:
        """Return the last lines of the current session file."""
        return read_last_lines(self._session_path, n_lines)

    # -------------------------------------------------------------------------
    # Rotation
    # -------------------------------------------------------------------------

    def _ensure_directories(self) -> None:
        for directory in missing_directories(self._log_dir, self._archive_dir):
            ok, err = safe_mkdir(directory)
            if not ok:
                raise SessionWriteError(self._session_path, err or "directory creation failed")

    def _archive_previous_session(self, on_evict: Optional[EvictionCallback] = None) -> RotationResult:
        """Copy the previous session into the archive, evicting one old archive if full."""
        safe_mkdir(self._archive_dir)

        evicted = self._evict_oldest_archive(on_evict)

        archive_name = self._derive_archive_name()
        if archive_name is None:
            logger.debug("Previous session at %s could not be named; not archived", self._session_path)
            return RotationResult(archived_path=None, evicted_path=evicted)

        target = os.path.join(self._archive_dir, archive_name)
        try:
            copy_file(self._session_path, target)
        except OSError as e:
            logger.debug("Failed to archive %s to %s: %s", self._session_path, target, e)
            return RotationResult(archived_path=None, evicted_path=evicted)

        logger.debug("Archived previous session to %s", target)
        return RotationResult(archived_path=target, evicted_path=evicted)

    def _evict_oldest_archive(self, on_evict: Optional[EvictionCallback] = None) -> Optional[str]:
        # At most one eviction per rotation, even if the directory is far over the limit
        if count_regular_files(self._archive_dir) < self._files_to_keep:
            return None

        oldest = find_oldest_file(self._archive_dir, self._creation_time)
        if oldest is None:
            return None

        if on_evict is not None:
            on_evict(oldest)

        try:
            os.remove(oldest)
        except OSError as e:
            logger.debug("Failed to evict archive %s: %s", oldest, e)
            return None
        return oldest

    def _derive_archive_name(self) -> Optional[str]:
        """
        Name the archive from the session banner.

        Falls back to the session file's modification time rendered through
        the banner format when the banner is unreadable or empty.
        """
        first_line = read_first_line(self._session_path)
        if first_line is not None:
            name = archive_name_from_banner(first_line)
            if name:
                return name

        try:
            mtime = os.path.getmtime(self._session_path)
        except OSError:
            return None
        return archive_name_from_banner(format_banner(self._clock.from_timestamp(mtime)))
