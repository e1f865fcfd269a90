"""Millisecond clock and a sleep that wakes close to its deadline."""

from __future__ import annotations

import time

_STEP_SECONDS = 0.0005


def now_ms() -> int:
    """Return the current time in whole milliseconds."""
    return time.monotonic_ns() // 1_000_000


def sleep_precise(milliseconds: int) -> None:
    """Sleep for ``milliseconds`` using short steps to limit overshoot."""
    start = now_ms()
    while now_ms() - start < milliseconds:
        time.sleep(_STEP_SECONDS)