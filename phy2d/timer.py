"""Wall-clock timer for measuring elapsed simulation time."""

from __future__ import annotations

import time
from typing import Callable, Optional


class Timer:
    """Measures seconds elapsed since :meth:`start` was called."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._start: Optional[float] = None

    def start(self) -> None:
        """Start, or restart, the timer."""
        self._start = self._clock()

    def elapsed(self) -> float:
        """Return seconds since the timer was started."""
        if self._start is None:
            raise RuntimeError("timer has not been started")
        return float(self._clock() - self._start)