from __future__ import annotations

"""
Unit tests for Record and Banner Formatting.

Verifies:
1. Header and banner layouts (unpadded fields).
2. Archive name derivation from the banner line.
3. Payload interpolation and its fail-safe behavior.
"""

import time

from platylog.core.formatting import (
    archive_name_from_banner,
    format_banner,
    format_header,
    format_record,
    render_message,
)
from platylog.domain.constants import BANNER_LABEL, BANNER_PREFIX_LENGTH
from platylog.domain.levels import LogLevel


def _t(*fields: int) -> time.struct_time:
    return time.struct_time(fields + (0, 0, -1))


# -----------------------------------------------------------------------------
# HEADER / BANNER
# -----------------------------------------------------------------------------

def test_format_header_unpadded() -> None:
    header = format_header(_t(2024, 1, 5, 9, 5, 3), LogLevel.WARNING)
    assert header == "[9:5:3] <Warning>"


def test_format_record_joins_header_and_message() -> None:
    assert format_record("[1:2:3] <Info>", "hello") == "[1:2:3] <Info> - hello"


def test_format_banner() -> None:
    assert format_banner(_t(2024, 1, 5, 10, 30, 0)) == "Created - 2024. 1. 5. 10:30:0"


def test_banner_label_and_prefix_length_are_one_contract() -> None:
    """TC-01: The archive cut length always equals the banner label length."""
    assert BANNER_PREFIX_LENGTH == len(BANNER_LABEL) == 10
    assert format_banner(_t(2024, 1, 5, 10, 30, 0)).startswith(BANNER_LABEL)


# -----------------------------------------------------------------------------
# ARCHIVE NAMING
# -----------------------------------------------------------------------------

def test_archive_name_from_banner() -> None:
    """TC-02: Whitespace removed and colons replaced with hyphens."""
    name = archive_name_from_banner("Created - 2024. 1. 5. 10:30:0\n")
    assert name == "log_2024.1.5.10-30-0.txt"


def test_archive_name_round_trips_banner_format() -> None:
    banner = format_banner(_t(2023, 12, 31, 23, 59, 59))
    assert archive_name_from_banner(banner) == "log_2023.12.31.23-59-59.txt"


def test_archive_name_empty_banner() -> None:
    assert archive_name_from_banner("") is None
    assert archive_name_from_banner("Created - \n") is None


# -----------------------------------------------------------------------------
# PAYLOAD RENDERING
# -----------------------------------------------------------------------------

def test_render_message_without_args_is_verbatim() -> None:
    assert render_message("100% done", ()) == "100% done"


def test_render_message_positional() -> None:
    assert render_message("%s has %d items", ("cart", 3)) == "cart has 3 items"


def test_render_message_mapping() -> None:
    assert render_message("%(user)s logged in", ({"user": "ana"},)) == "ana logged in"


def test_render_message_mismatch_never_raises() -> None:
    """TC-03: A bad template degrades to a space-joined payload."""
    assert render_message("value: %d", ("abc",)) == "value: %d abc"
    assert render_message("no placeholders", (1, 2)) == "no placeholders 1 2"


def test_render_message_non_string_template() -> None:
    assert render_message(42, ()) == "42"


def test_render_message_overflow_never_raises() -> None:
    """TC-03: Overflowing conversions fall back like any other mismatch."""
    assert render_message("count %d", (float("inf"),)) == "count %d inf"
    assert render_message("char %c", (10 ** 9,)) == "char %c 1000000000"


def test_render_message_argument_with_broken_str() -> None:
    class BrokenStr:
        def __str__(self) -> str:
            raise RuntimeError("no str")

        def __repr__(self) -> str:
            return "<broken>"

    class BrokenBoth:
        def __str__(self) -> str:
            raise RuntimeError("no str")

        def __repr__(self) -> str:
            raise RuntimeError("no repr")

    assert render_message("obj %s", (BrokenStr(),)) == "obj %s <broken>"
    assert render_message("obj %s", (BrokenBoth(),)) == "obj %s <unprintable BrokenBoth object>"
    assert render_message(BrokenBoth(), ()) == "<unprintable BrokenBoth object>"
