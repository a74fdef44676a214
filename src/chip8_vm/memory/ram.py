"""Memory: the 4 KiB byte array addressed through MemoryAddress.

Block reads and writes clip at the end of the address space: a range that
would run past the last byte is truncated, never wrapped back to 0x000.
"""

from __future__ import annotations

from .address import MemoryAddress

MEMORY_SIZE = MemoryAddress.CAPACITY
DISPLAY_BASE = 0xF00
DISPLAY_SIZE = 0x100


class Memory:
    """Byte-addressable memory of fixed capacity."""

    def __init__(self) -> None:
        self.size = MEMORY_SIZE
        self._data = bytearray(MEMORY_SIZE)

    def _span(self, start: MemoryAddress | int, length: int) -> tuple[int, int]:
        """Return the clipped ``[begin, end)`` range for a block access."""
        begin = MemoryAddress(start).value
        end = min(begin + max(length, 0), self.size)
        return begin, end

    def read(self, addr: MemoryAddress | int) -> int:
        """Read an unsigned byte."""
        return self._data[MemoryAddress(addr).value]

    def write(self, addr: MemoryAddress | int, value: int) -> None:
        """Write a byte. Value masked to 8 bits."""
        self._data[MemoryAddress(addr).value] = value & 0xFF

    def read_word(self, addr: MemoryAddress | int) -> int:
        """Read a big-endian 16-bit instruction word.

        The second byte of a word at the last address is read from 0x000,
        as the program counter itself wraps.
        """
        addr = MemoryAddress(addr)
        return (self.read(addr) << 8) | self.read(addr + 1)

    def read_block(self, start: MemoryAddress | int, length: int) -> bytes:
        """Read up to ``length`` bytes, clipped at the end of memory."""
        begin, end = self._span(start, length)
        return bytes(self._data[begin:end])

    def write_block(self, start: MemoryAddress | int, data: bytes) -> int:
        """Copy ``data`` into memory, clipped at the end of memory.

        Returns:
            The number of bytes actually written.
        """
        begin, end = self._span(start, len(data))
        count = end - begin
        self._data[begin:end] = data[:count]
        return count

    def load_segment(self, start: MemoryAddress | int, data: bytes) -> int:
        """Bulk-load bytes at ``start``. Same clipping as write_block."""
        return self.write_block(start, bytes(data))

    def display_block(self) -> bytes:
        """The 256-byte display mirror window at 0xF00."""
        return self.read_block(DISPLAY_BASE, DISPLAY_SIZE)

    def write_display_block(self, data: bytes) -> None:
        """Refresh the display mirror window from a packed framebuffer."""
        self.write_block(DISPLAY_BASE, data[:DISPLAY_SIZE])

    def clear(self) -> None:
        self._data[:] = bytes(self.size)
