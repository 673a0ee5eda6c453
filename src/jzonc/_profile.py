"""
Hot-path profiling for the parser, enabled by setting JZONC_PROFILE.

The flag is read once at import. When it is absent the context manager is
a no-op so builders can wrap themselves unconditionally.
"""

import os
import time
from dataclasses import dataclass
from typing import Any

from ._cursor import Cursor

PROFILE_HOT_PATHS = __debug__ and "JZONC_PROFILE" in os.environ


@dataclass
class HotPathStats:
    """Call count, wall time and characters consumed by one builder."""

    function_name: str
    call_count: int = 0
    total_time_ns: int = 0
    chars_processed: int = 0

    def record_call(self, duration_ns: int, chars: int = 0) -> None:
        self.call_count += 1
        self.total_time_ns += duration_ns
        self.chars_processed += chars


if PROFILE_HOT_PATHS:
    _hot_path_stats: dict[str, HotPathStats] = {}

    class ProfileContext:
        """
        Times one builder call and counts the characters it consumed.

        With a cursor, the count is the span from the character under the
        cursor on entry to the one under it on exit, both inclusive, since
        builders stop on their last character. Without one, ``chars`` is
        recorded as given.
        """

        def __init__(
            self, func_name: str, cursor: Cursor | None = None, chars: int = 0
        ) -> None:
            self.func_name = func_name
            self.cursor = cursor
            self.chars = chars
            self.start_idx = 0
            self.start_time = 0

        def __enter__(self) -> "ProfileContext":
            if self.cursor is not None:
                self.start_idx = self.cursor.idx
            self.start_time = time.perf_counter_ns()
            return self

        def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
            duration = time.perf_counter_ns() - self.start_time
            chars = self.chars
            if self.cursor is not None:
                chars = self.cursor.idx - self.start_idx + 1
            stats = _hot_path_stats.get(self.func_name)
            if stats is None:
                stats = _hot_path_stats[self.func_name] = HotPathStats(
                    self.func_name
                )
            stats.record_call(duration, chars)

    def get_hot_path_stats() -> dict[str, HotPathStats]:
        """Returns a snapshot of the statistics gathered so far."""
        return _hot_path_stats.copy()

    def clear_hot_path_stats() -> None:
        _hot_path_stats.clear()

else:

    class ProfileContext:  # type: ignore[no-redef]
        def __init__(
            self, func_name: str, cursor: Cursor | None = None, chars: int = 0
        ) -> None:
            pass

        def __enter__(self) -> "ProfileContext":
            return self

        def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
            pass

    def get_hot_path_stats() -> dict[str, HotPathStats]:
        return {}

    def clear_hot_path_stats() -> None:
        pass
