"""Address types and the machine's byte-addressable memory."""

from .address import BoundedAddress, MemoryAddress, RegisterIndex, StackIndex
from .ram import DISPLAY_BASE, DISPLAY_SIZE, MEMORY_SIZE, Memory

__all__ = [
    "BoundedAddress",
    "DISPLAY_BASE",
    "DISPLAY_SIZE",
    "MEMORY_SIZE",
    "Memory",
    "MemoryAddress",
    "RegisterIndex",
    "StackIndex",
]
