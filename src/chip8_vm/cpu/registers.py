"""Register file: 16 x 8-bit registers V0..VF plus the index register I."""

from __future__ import annotations

from ..memory.address import MemoryAddress, RegisterIndex

VF = RegisterIndex(0xF)


class RegisterFile:
    """General-purpose registers. VF doubles as the carry/borrow/collision flag."""

    def __init__(self) -> None:
        self._regs: list[int] = [0] * RegisterIndex.CAPACITY
        self.index = MemoryAddress(0)

    def read(self, reg: RegisterIndex | int) -> int:
        """Read register value."""
        return self._regs[RegisterIndex(reg)]

    def write(self, reg: RegisterIndex | int, value: int) -> None:
        """Write register value. Value masked to 8 bits."""
        self._regs[RegisterIndex(reg)] = value & 0xFF

    def snapshot(self) -> list[int]:
        """Return the 16 register values V0..VF."""
        return list(self._regs)

    def reset(self) -> None:
        self._regs = [0] * RegisterIndex.CAPACITY
        self.index = MemoryAddress(0)
