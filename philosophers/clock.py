"""Millisecond wall-clock helpers."""

from __future__ import annotations

import time

_POLL_SECONDS = 0.00001


def now_ms() -> int:
    """Return the current wall-clock time in whole milliseconds."""
    return time.time_ns() // 1_000_000


def sleep_ms(milliseconds: int) -> None:
    """Wait at least ``milliseconds`` ms, polling the clock in short steps."""
    start = now_ms()
    while now_ms() - start < milliseconds:
        time.sleep(_POLL_SECONDS)