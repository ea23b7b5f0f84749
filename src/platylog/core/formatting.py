from __future__ import annotations

"""
Record and Banner Formatting.

Turns calendar time, severities and caller payloads into the exact text
written to the console and the session file, and derives archive file
names back from the session banner.

Session file layout:
    Created - 2024. 1. 5. 10:30:0
    <blank line>
    [10:30:0] <Info> - message
"""

import time
from collections.abc import Mapping
from typing import Any, Optional, Tuple

from platylog.domain.constants import (
    ARCHIVE_NAME_PREFIX,
    ARCHIVE_NAME_SUFFIX,
    BANNER_LABEL,
    BANNER_PREFIX_LENGTH,
    RECORD_SEPARATOR,
)
from platylog.domain.levels import level_name

# -----------------------------------------------------------------------------
# PAYLOAD FORMATTING
# -----------------------------------------------------------------------------

def render_message(template: Any, args: Tuple[Any, ...]) -> str:
    """
    Resolve a %-style template against positional arguments.

    Follows the convention of the standard 'logging' module: a single
    non-empty mapping argument is used as the mapping for named fields.
    A template that does not match its arguments never raises; the raw
    template and the arguments are joined instead.

    Args:
        template: Message template (any object, converted with str()).
        args: Positional arguments for the template.

    Returns:
        str: The final payload string.
    """
    msg = _safe_str(template)
    if not args:
        return msg

    if len(args) == 1 and isinstance(args[0], Mapping) and args[0]:
        args = args[0]  # type: ignore[assignment]

    try:
        return msg % args
    except Exception:
        values = args.values() if isinstance(args, Mapping) else args
        return " ".join([msg] + [_safe_str(a) for a in values])


def _safe_str(value: Any) -> str:
    """Convert an argument for the fallback payload without ever raising."""
    try:
        return str(value)
    except Exception:
        pass
    try:
        return repr(value)
    except Exception:
        return f"<unprintable {type(value).__name__} object>"


# -----------------------------------------------------------------------------
# HEADERS AND BANNERS
# -----------------------------------------------------------------------------

def format_header(t: time.struct_time, level: int) -> str:
    """Build the '[H:M:S] <Level>' record header with unpadded fields."""
    return f"[{t.tm_hour}:{t.tm_min}:{t.tm_sec}] <{level_name(level)}>"


def format_record(header: str, message: str) -> str:
    return f"{header}{RECORD_SEPARATOR}{message}"


def format_banner(t: time.struct_time) -> str:
    """Build the session creation banner (without line terminators)."""
    return (
        f"{BANNER_LABEL}{t.tm_year}. {t.tm_mon}. {t.tm_mday}. "
        f"{t.tm_hour}:{t.tm_min}:{t.tm_sec}"
    )


def archive_name_from_banner(line: str) -> Optional[str]:
    """
    Derive the archive file name from a session banner line.

    Cuts the fixed label prefix, removes every whitespace character and
    replaces colons with hyphens so the name is filesystem-safe.

    Args:
        line: First line of a session file, with or without newline.

    Returns:
        Optional[str]: 'log_<stem>.txt', or None if nothing remains after cleanup.
    """
    stem = "".join(line[BANNER_PREFIX_LENGTH:].split())
    stem = stem.replace(":", "-")
    if not stem:
        return None
    return f"{ARCHIVE_NAME_PREFIX}{stem}{ARCHIVE_NAME_SUFFIX}"
