from __future__ import annotations

"""
Wall-clock access for record headers, session banners and archive names.
"""

import time


class Clock:
    """Source of local calendar time. Replaced by a fixed clock in tests."""

    def now(self) -> time.struct_time:
        return time.localtime()

    def from_timestamp(self, timestamp: float) -> time.struct_time:
        """Convert an epoch timestamp (e.g. a file mtime) to local calendar time."""
        return time.localtime(timestamp)
