"""ROM loader: reads a raw CHIP-8 program image from disk."""

from __future__ import annotations

from pathlib import Path

from ..cpu.cpu import PROGRAM_SPACE
from ..errors import RomError

MAX_ROM_SIZE = PROGRAM_SPACE


def read_rom(path: str | Path) -> bytes:
    """Read a ROM image, checking that it fits between 0x200 and the display window.

    Args:
        path: Path to the raw program file.

    Returns:
        The ROM bytes.

    Raises:
        RomError: If the file cannot be read, is empty, or is too large.
    """
    try:
        data = Path(path).read_bytes()
    except OSError as e:
        raise RomError(f"cannot read ROM '{path}': {e}") from e
    if not data:
        raise RomError(f"ROM '{path}' is empty")
    if len(data) > MAX_ROM_SIZE:
        raise RomError(
            f"ROM '{path}' is {len(data)} bytes, at most {MAX_ROM_SIZE} fit in memory"
        )
    return data
