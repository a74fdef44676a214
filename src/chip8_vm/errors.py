"""Exception hierarchy for the CHIP-8 machine."""


class Chip8Error(Exception):
    """Base class for all machine errors."""


class StackOverflow(Chip8Error):
    """Raised when a CALL pushes onto a full call stack."""


class StackUnderflow(Chip8Error):
    """Raised when a RET pops from an empty call stack."""


class RomError(Chip8Error):
    """Raised when a ROM image cannot be read or does not fit in memory."""
