"""Call stack: fixed-capacity LIFO of saved program counters."""

from __future__ import annotations

from ..errors import StackOverflow, StackUnderflow
from ..memory.address import MemoryAddress, StackIndex

STACK_SIZE = StackIndex.CAPACITY


class CallStack:
    """Return addresses for CALL/RET.

    ``pointer`` is the number of occupied slots. Slot ``pointer - 1`` holds
    the most recent return address. Overflow and underflow raise instead of
    truncating, and a failed operation leaves the stack untouched.
    """

    def __init__(self) -> None:
        self._slots: list[MemoryAddress] = [MemoryAddress(0)] * STACK_SIZE
        self._depth = 0

    @property
    def pointer(self) -> int:
        return self._depth

    @property
    def capacity(self) -> int:
        return STACK_SIZE

    def __len__(self) -> int:
        return self._depth

    def push(self, addr: MemoryAddress) -> None:
        """Save a return address.

        Raises:
            StackOverflow: If all slots are occupied.
        """
        if self._depth >= STACK_SIZE:
            raise StackOverflow(
                f"call stack full ({STACK_SIZE} entries), cannot push {addr!r}"
            )
        self._slots[StackIndex(self._depth)] = MemoryAddress(addr)
        self._depth += 1

    def pop(self) -> MemoryAddress:
        """Remove and return the most recently pushed address.

        Raises:
            StackUnderflow: If the stack is empty.
        """
        if self._depth == 0:
            raise StackUnderflow("return with empty call stack")
        self._depth -= 1
        slot = StackIndex(self._depth)
        addr = self._slots[slot]
        self._slots[slot] = MemoryAddress(0)
        return addr

    def peek(self) -> MemoryAddress | None:
        """Top of stack without removing it, or None when empty."""
        if self._depth == 0:
            return None
        return self._slots[StackIndex(self._depth - 1)]

    def reset(self) -> None:
        self._slots = [MemoryAddress(0)] * STACK_SIZE
        self._depth = 0
