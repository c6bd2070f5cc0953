"""
FILE: dragboard/core/ids.py
PURPOSE: Unique identifier allocation for new columns and tasks
EXPORTS:
  - IdAllocator (class)
DEPENDENCIES:
  - time (stdlib)
NOTES:
  - Ids are wall-clock milliseconds, bumped so they strictly increase
  - Ids already present on the board are skipped
"""

import time
from typing import Callable, Iterable, Optional


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


class IdAllocator:
    """
    Hands out integer ids based on the current time in milliseconds.

    Two allocations within the same millisecond, or a clock that goes
    backwards, still yield distinct ids because every id is at least one
    greater than the previous one.
    """

    def __init__(self, clock: Optional[Callable[[], int]] = None):
        self._clock = clock or _now_ms
        self._last: Optional[int] = None

    def allocate(self, existing: Iterable = ()) -> int:
        """
        Return a new id not in `existing` and greater than any id issued so far.

        Args:
            existing: Ids already in use on the board (non-int ids are ignored)
        """
        taken = {value for value in existing if isinstance(value, int)}
        candidate = self._clock()
        if self._last is not None and candidate <= self._last:
            candidate = self._last + 1
        while candidate in taken:
            candidate += 1
        self._last = candidate
        return candidate
