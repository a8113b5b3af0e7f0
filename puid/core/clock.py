# puid/core/clock.py
from __future__ import annotations

import logging
import threading
import time

logger = logging.getLogger(__name__)

COUNTER_MAX = 255


def time_millis() -> int:
    """Whole milliseconds elapsed since the Unix epoch."""
    return time.time_ns() // 1_000_000


class AtomicCounter:
    """Wrapping counter, 0..maximum then back to 0."""
    def __init__(self, maximum: int = COUNTER_MAX) -> None:
        self._lock = threading.Lock()
        self._maximum = maximum
        self._value = 0

    def next(self) -> int:
        with self._lock:
            current = self._value
            if current == self._maximum:
                self._value = 0
                logger.debug("counter wrapped at %d", current)
            else:
                self._value = current + 1
            return current

    @property
    def value(self) -> int:
        return self._value


COUNTER = AtomicCounter()


def counter() -> int:
    """Return the process-wide counter value and advance it."""
    return COUNTER.next()
