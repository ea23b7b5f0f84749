from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Thin wrappers over 'os' and 'shutil' used by the session store: directory
bootstrap, archive directory scans, creation-time resolution and small
read helpers. Platform differences in file metadata are resolved here so
the store never branches on the operating system.
"""

import os
import shutil
from collections import deque
from typing import Callable, List, Optional, Tuple

CreationTimeResolver = Callable[[str], float]

# -----------------------------------------------------------------------------
# DIRECTORY BOOTSTRAP
# -----------------------------------------------------------------------------

def safe_mkdir(path: str) -> Tuple[bool, Optional[str]]:
    """
    Attempt to recursively create a directory structure safely.

    Args:
        path: Target directory path.

    Returns:
        Tuple[bool, Optional[str]]: (Success flag, Error message if applicable).
    """
    try:
        os.makedirs(path, exist_ok=True)
        return True, None
    except OSError as e:
        return False, str(e)


def missing_directories(*paths: str) -> List[str]:
    """Return the subset of paths that do not currently exist as directories."""
    return [p for p in paths if not os.path.isdir(p)]

# -----------------------------------------------------------------------------
# ARCHIVE DIRECTORY SCANS
# -----------------------------------------------------------------------------

def list_regular_files(directory: str) -> List[str]:
    """
    List the regular files directly inside a directory.

    Args:
        directory: Directory to scan.

    Returns:
        List[str]: Full paths, sorted by name. Empty if the directory is unreadable.
    """
    try:
        with os.scandir(directory) as it:
            files = [e.path for e in it if e.is_file(follow_symlinks=False)]
    except OSError:
        return []
    return sorted(files)


def count_regular_files(directory: str) -> int:
    return len(list_regular_files(directory))


def get_creation_time(path: str) -> float:
    """
    Resolve the creation time of a file as an epoch timestamp.

    Uses 'st_birthtime' where the platform records it, 'st_ctime' on
    Windows (where it is the creation time) and falls back to the
    modification time elsewhere.

    Args:
        path: File to inspect.

    Returns:
        float: Timestamp, or 0.0 when the file cannot be inspected.
    """
    try:
        st = os.stat(path)
    except OSError:
        return 0.0

    birth = getattr(st, "st_birthtime", None)
    if birth:
        return float(birth)
    if os.name == "nt":
        return float(st.st_ctime)
    return float(st.st_mtime)


def find_oldest_file(
        directory: str,
        creation_time: CreationTimeResolver = get_creation_time,
) -> Optional[str]:
    """
    Select the eviction candidate of a directory.

    Files whose creation time resolves to zero rank before every file with
    a real timestamp. Equal timestamps are ordered by file name so the
    choice is deterministic.

    Args:
        directory: Directory to scan.
        creation_time: Resolver returning an epoch timestamp (0 if unknown).

    Returns:
        Optional[str]: Path of the oldest regular file, or None if there is none.
    """
    candidates = list_regular_files(directory)
    if not candidates:
        return None
    return min(candidates, key=lambda p: (max(creation_time(p), 0.0), os.path.basename(p)))

# -----------------------------------------------------------------------------
# FILE CONTENT HELPERS
# -----------------------------------------------------------------------------

def read_first_line(path: str) -> Optional[str]:
    """Read the first line of a text file, or None if it cannot be opened."""
    try:
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            return f.readline()
    except OSError:
        return None


def read_last_lines(path: str, n_lines: int) -> List[str]:
    """Return up to n_lines trailing lines of a text file (empty on error)."""
    if n_lines <= 0:
        return []
    try:
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            return list(deque(f, maxlen=n_lines))
    except OSError:
        return []


def copy_file(src: str, dst: str) -> None:
    """
    Copy a file with its metadata, replacing dst if it already exists.

    Raises:
        OSError: If the source cannot be read or the destination written.
    """
    shutil.copy2(src, dst)
