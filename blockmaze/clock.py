"""Frame delta timing and a simple stopwatch."""

from __future__ import annotations

import time
from typing import Callable

Clock = Callable[[], float]


class FrameClock:
    """Measures the time between successive refreshes, in seconds."""

    def __init__(self, clock: Clock = time.perf_counter) -> None:
        self._clock = clock
        self._delta = 0.0
        self._current = clock()

    def reset(self) -> None:
        """Restart measuring from now."""
        self._current = self._clock()

    def refresh(self) -> None:
        """Record the time elapsed since the previous refresh or reset."""
        last = self._current
        self._current = self._clock()
        self._delta = self._current - last

    def delta_time(self) -> float:
        """Return the duration of the last measured frame."""
        return self._delta


class Timer:
    """A stopwatch started on creation."""

    def __init__(self, clock: Clock = time.perf_counter) -> None:
        self._clock = clock
        self._start = clock()

    def restart(self) -> None:
        """Start counting from now."""
        self._start = self._clock()

    def elapsed(self) -> float:
        """Return seconds elapsed since creation or the last restart."""
        return self._clock() - self._start