"""Hex keypad input: a protocol for key-state providers and a simple holder."""

from typing import Protocol, runtime_checkable

KEY_COUNT = 16


@runtime_checkable
class Keyboard(Protocol):
    """Anything that can report whether key 0x0..0xF is currently down.

    Polled synchronously by SKP, SKNP and the key-wait instruction; it
    must return immediately.
    """

    def key_is_pressed(self, key: int) -> bool:
        ...


class KeyState:
    """In-memory key state, updated by the host or a test."""

    def __init__(self) -> None:
        self._down = [False] * KEY_COUNT

    def key_is_pressed(self, key: int) -> bool:
        return self._down[key & 0xF]

    def press(self, key: int) -> None:
        self._down[key & 0xF] = True

    def release(self, key: int) -> None:
        self._down[key & 0xF] = False

    def release_all(self) -> None:
        self._down = [False] * KEY_COUNT

    def pressed(self) -> list[int]:
        """Indices of all keys currently held, ascending."""
        return [k for k, down in enumerate(self._down) if down]
