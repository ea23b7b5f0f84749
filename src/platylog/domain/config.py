from __future__ import annotations

"""
Logger Configuration Model.

Immutable construction parameters for a LogEngine. Values are taken
as-is: masks and retention limits are not validated.
"""

from dataclasses import dataclass
from typing import Optional

from platylog.domain.constants import (
    DEFAULT_ARCHIVE_DIR_NAME,
    DEFAULT_FILES_TO_KEEP,
    DEFAULT_LOG_DIR,
    DEFAULT_SESSION_FILE_NAME,
)
from platylog.domain.levels import LogLevel


@dataclass(frozen=True)
class LoggerConfig:
    """
    Immutable settings for a logging engine.

    Attributes:
        log_dir: Root directory holding the session file and the archive.
        session_file_name: Name of the current session file inside log_dir.
        archive_dir_name: Name of the archive subdirectory inside log_dir.
        files_to_keep: Retention limit of the archive directory.
        display_levels: Initial console level mask.
        save_levels: Initial file level mask.
        colorize: Force console styling on/off. None selects it from the TTY state.
    """
    log_dir: str = DEFAULT_LOG_DIR
    session_file_name: str = DEFAULT_SESSION_FILE_NAME
    archive_dir_name: str = DEFAULT_ARCHIVE_DIR_NAME
    files_to_keep: int = DEFAULT_FILES_TO_KEEP

    display_levels: int = LogLevel.ALL
    save_levels: int = LogLevel.ALL

    colorize: Optional[bool] = None
