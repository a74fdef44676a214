"""Instruction decoder: maps a 16-bit word to a typed Instruction.

Every CHIP-8 instruction is four nibbles ``o x y n``. The decode table below
is the single authority for the mapping; rows are tried in order and the
first ``word & mask == pattern`` wins, so the exact 00E0/00EE rows must
precede the catch-all 0nnn row.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from ..memory.address import MemoryAddress, RegisterIndex


class Op(enum.Enum):
    """The closed set of decoded operations."""

    SYS = "SYS"        # 0nnn  machine-code routine (ignored)
    CLS = "CLS"        # 00E0  clear screen
    RET = "RET"        # 00EE  return
    JP = "JP"          # 1nnn  jump
    CALL = "CALL"      # 2nnn  call
    ISE = "ISE"        # 3xkk  skip if Vx == kk
    ISNE = "ISNE"      # 4xkk  skip if Vx != kk
    RSE = "RSE"        # 5xy0  skip if Vx == Vy
    ILD = "ILD"        # 6xkk  Vx = kk
    IADD = "IADD"      # 7xkk  Vx += kk, no flag
    RLD = "RLD"        # 8xy0  Vx = Vy
    ROR = "ROR"        # 8xy1  Vx |= Vy
    RAND = "RAND"      # 8xy2  Vx &= Vy
    RXOR = "RXOR"      # 8xy3  Vx ^= Vy
    RADD = "RADD"      # 8xy4  Vx += Vy, VF = carry
    RSUB = "RSUB"      # 8xy5  Vx -= Vy, VF = not borrow
    SHR = "SHR"        # 8xy6  Vx >>= 1, VF = old bit 0
    RSUBN = "RSUBN"    # 8xy7  Vx = Vy - Vx, VF = not borrow
    SHL = "SHL"        # 8xyE  Vx <<= 1, VF = old bit 7
    RSNE = "RSNE"      # 9xy0  skip if Vx != Vy
    LDI = "LDI"        # Annn  I = nnn
    JPV0 = "JPV0"      # Bnnn  jump to nnn + V0
    RND = "RND"        # Cxkk  Vx = random & kk
    DRW = "DRW"        # Dxyn  draw n-row sprite at (Vx, Vy)
    SKP = "SKP"        # Ex9E  skip if key Vx down
    SKNP = "SKNP"      # ExA1  skip if key Vx up
    LDDT = "LDDT"      # Fx07  Vx = delay timer
    LDK = "LDK"        # Fx0A  wait for key, Vx = key
    SETDT = "SETDT"    # Fx15  delay timer = Vx
    SETST = "SETST"    # Fx18  sound timer = Vx
    ADDI = "ADDI"      # Fx1E  I += Vx
    LDFI = "LDFI"      # Fx29  I = font sprite for digit Vx
    LDBCD = "LDBCD"    # Fx33  BCD of Vx at I, I+1, I+2
    DUMP = "DUMP"      # Fx55  store V0..Vx at I
    LOAD = "LOAD"      # Fx65  load V0..Vx from I


@dataclass(frozen=True)
class Instruction:
    """Decoded CHIP-8 instruction with its typed operands.

    Operands a layout does not use keep their zero defaults.
    """

    op: Op
    word: int = 0
    x: RegisterIndex = RegisterIndex(0)
    y: RegisterIndex = RegisterIndex(0)
    addr: MemoryAddress = MemoryAddress(0)
    byte: int = 0
    nibble: int = 0


# Operand layouts
_NONE = ""
_NNN = "nnn"
_XKK = "xkk"
_XY = "xy"
_X = "x"
_XYN = "xyn"

# (mask, pattern, op, layout)
DECODE_TABLE: list[tuple[int, int, Op, str]] = [
    (0xFFFF, 0x00E0, Op.CLS, _NONE),
    (0xFFFF, 0x00EE, Op.RET, _NONE),
    (0xF000, 0x0000, Op.SYS, _NNN),
    (0xF000, 0x1000, Op.JP, _NNN),
    (0xF000, 0x2000, Op.CALL, _NNN),
    (0xF000, 0x3000, Op.ISE, _XKK),
    (0xF000, 0x4000, Op.ISNE, _XKK),
    (0xF00F, 0x5000, Op.RSE, _XY),
    (0xF000, 0x6000, Op.ILD, _XKK),
    (0xF000, 0x7000, Op.IADD, _XKK),
    (0xF00F, 0x8000, Op.RLD, _XY),
    (0xF00F, 0x8001, Op.ROR, _XY),
    (0xF00F, 0x8002, Op.RAND, _XY),
    (0xF00F, 0x8003, Op.RXOR, _XY),
    (0xF00F, 0x8004, Op.RADD, _XY),
    (0xF00F, 0x8005, Op.RSUB, _XY),
    (0xF00F, 0x8006, Op.SHR, _X),
    (0xF00F, 0x8007, Op.RSUBN, _XY),
    (0xF00F, 0x800E, Op.SHL, _X),
    (0xF00F, 0x9000, Op.RSNE, _XY),
    (0xF000, 0xA000, Op.LDI, _NNN),
    (0xF000, 0xB000, Op.JPV0, _NNN),
    (0xF000, 0xC000, Op.RND, _XKK),
    (0xF000, 0xD000, Op.DRW, _XYN),
    (0xF0FF, 0xE09E, Op.SKP, _X),
    (0xF0FF, 0xE0A1, Op.SKNP, _X),
    (0xF0FF, 0xF007, Op.LDDT, _X),
    (0xF0FF, 0xF00A, Op.LDK, _X),
    (0xF0FF, 0xF015, Op.SETDT, _X),
    (0xF0FF, 0xF018, Op.SETST, _X),
    (0xF0FF, 0xF01E, Op.ADDI, _X),
    (0xF0FF, 0xF029, Op.LDFI, _X),
    (0xF0FF, 0xF033, Op.LDBCD, _X),
    (0xF0FF, 0xF055, Op.DUMP, _X),
    (0xF0FF, 0xF065, Op.LOAD, _X),
]


def decode(word: int) -> Instruction | None:
    """Decode a 16-bit instruction word.

    Returns:
        The decoded Instruction, or None if no table row matches.
    """
    word &= 0xFFFF
    x = RegisterIndex((word >> 8) & 0xF)
    y = RegisterIndex((word >> 4) & 0xF)

    for mask, pattern, op, layout in DECODE_TABLE:
        if word & mask != pattern:
            continue
        if layout == _NNN:
            return Instruction(op, word, addr=MemoryAddress(word & 0xFFF))
        if layout == _XKK:
            return Instruction(op, word, x=x, byte=word & 0xFF)
        if layout == _XY:
            return Instruction(op, word, x=x, y=y)
        if layout == _X:
            return Instruction(op, word, x=x)
        if layout == _XYN:
            return Instruction(op, word, x=x, y=y, nibble=word & 0xF)
        return Instruction(op, word)

    return None


def decode_bytes(high: int, low: int) -> Instruction | None:
    """Decode an instruction given as its two big-endian bytes."""
    return decode(((high & 0xFF) << 8) | (low & 0xFF))


def instruction_mnemonic(inst: Instruction | None) -> str:
    """Short mnemonic for statistics; "UNKNOWN" for undecodable words."""
    if inst is None:
        return "UNKNOWN"
    return inst.op.value
