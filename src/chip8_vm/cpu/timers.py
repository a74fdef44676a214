"""Delay and sound timers, decremented by the external 60 Hz tick."""

TIMER_HZ = 60.0


class Timers:
    """Two independent 8-bit down-counters floored at zero."""

    def __init__(self) -> None:
        self._delay = 0
        self._sound = 0

    @property
    def delay(self) -> int:
        return self._delay

    @property
    def sound(self) -> int:
        return self._sound

    def set_delay(self, value: int) -> None:
        self._delay = value & 0xFF

    def set_sound(self, value: int) -> None:
        self._sound = value & 0xFF

    def tick(self) -> None:
        """Decrement both timers by one, stopping at zero."""
        if self._delay > 0:
            self._delay -= 1
        if self._sound > 0:
            self._sound -= 1

    def reset(self) -> None:
        self._delay = 0
        self._sound = 0
