"""CHIP-8 virtual machine: bounded memory, decoder, execution engine, display."""

from .cpu.cpu import CPU, UnrecognizedOpcode
from .errors import Chip8Error, RomError, StackOverflow, StackUnderflow

__all__ = [
    "CPU",
    "Chip8Error",
    "RomError",
    "StackOverflow",
    "StackUnderflow",
    "UnrecognizedOpcode",
]
