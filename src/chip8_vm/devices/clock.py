"""Wall-clock gate for the fixed-rate timer/display tick."""

from __future__ import annotations

import time
from collections.abc import Callable

from ..cpu.timers import TIMER_HZ


class TickClock:
    """Reports when one tick interval has elapsed.

    The deadline advances by exactly one interval per reported tick, so a
    host that falls behind catches up with back-to-back ticks instead of
    losing them.
    """

    def __init__(
        self,
        hz: float = TIMER_HZ,
        now: Callable[[], float] = time.monotonic,
    ) -> None:
        if hz <= 0:
            raise ValueError(f"tick rate must be positive, got {hz}")
        self._now = now
        self._interval = 1.0 / hz
        self._deadline = now() + self._interval

    @property
    def interval(self) -> float:
        return self._interval

    def check(self) -> bool:
        """True if a tick is due; consumes that tick."""
        if self._now() >= self._deadline:
            self._deadline += self._interval
            return True
        return False

    def remaining(self) -> float:
        """Seconds until the next tick, zero if already due."""
        return max(0.0, self._deadline - self._now())
