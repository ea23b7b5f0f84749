from __future__ import annotations

"""
Domain Constants.

Default filesystem layout, retention policy and the session banner
contract shared by the writer and the archive naming logic.
"""

# -----------------------------------------------------------------------------
# FILESYSTEM LAYOUT
# -----------------------------------------------------------------------------
DEFAULT_LOG_DIR = "./logs"
DEFAULT_SESSION_FILE_NAME = "latest_log.txt"
DEFAULT_ARCHIVE_DIR_NAME = "past_logs"
DEFAULT_FILES_TO_KEEP = 5

# -----------------------------------------------------------------------------
# SESSION BANNER
# -----------------------------------------------------------------------------
# The archive name is derived by cutting exactly len(BANNER_LABEL) characters
# from the banner line. Change both together or not at all.
BANNER_LABEL = "Created - "
BANNER_PREFIX_LENGTH = len(BANNER_LABEL)

ARCHIVE_NAME_PREFIX = "log_"
ARCHIVE_NAME_SUFFIX = ".txt"

RECORD_SEPARATOR = " - "

EVICTION_NOTICE = "Maximum number of past logs reached, removing: {path}"
