"""ROM loader module."""

from .rom import MAX_ROM_SIZE, read_rom

__all__ = ["MAX_ROM_SIZE", "read_rom"]
