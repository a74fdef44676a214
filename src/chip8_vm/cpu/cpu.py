"""CPU core: fetch-decode-execute loop plus the external tick."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol

import numpy as np

from ..devices.display import Framebuffer
from ..devices.keyboard import Keyboard, KeyState
from ..memory.address import MemoryAddress
from ..memory.font import FONT_BASE, FONT_SPRITES
from ..memory.ram import DISPLAY_BASE, Memory
from .decode import Instruction, decode, instruction_mnemonic
from .execute import execute
from .registers import RegisterFile
from .stack import CallStack
from .timers import Timers

logger = logging.getLogger(__name__)

PROGRAM_START = 0x200
PROGRAM_SPACE = DISPLAY_BASE - PROGRAM_START


class RandomSource(Protocol):
    """Subset of ``numpy.random.Generator`` used by the RND instruction."""

    def integers(self, low: int, high: int) -> int:
        ...


@dataclass(frozen=True)
class UnrecognizedOpcode:
    """A fetched word that matched no decode table row."""

    address: int
    word: int

    def __str__(self) -> str:
        return f"unrecognized opcode 0x{self.word:04X} at 0x{self.address:03X}"


class CPU:
    """CHIP-8 machine: memory, registers, call stack, display and timers.

    The host drives two independent rates: ``step()`` once per instruction
    and ``tick()`` at 60 Hz for the timers and frame presentation.
    """

    def __init__(
        self,
        keyboard: Keyboard | None = None,
        rng: RandomSource | None = None,
    ) -> None:
        self.memory = Memory()
        self.registers = RegisterFile()
        self.stack = CallStack()
        self.display = Framebuffer()
        self.timers = Timers()
        self.keyboard: Keyboard = keyboard if keyboard is not None else KeyState()
        self.rng: RandomSource = rng if rng is not None else np.random.default_rng()
        self.pc = MemoryAddress(PROGRAM_START)
        self.cycle_count: int = 0
        self.waiting_for_key: bool = False
        self.instruction_stats: dict[str, int] = {}
        self.unrecognized_count: int = 0
        self.last_unrecognized: UnrecognizedOpcode | None = None
        self.reset()

    def reset(self) -> None:
        """Clear all state, reload the font and point PC at 0x200."""
        self.memory.clear()
        self.memory.write_block(FONT_BASE, FONT_SPRITES)
        self.registers.reset()
        self.stack.reset()
        self.display.clear()
        self.display.dirty = False
        self.timers.reset()
        self.pc = MemoryAddress(PROGRAM_START)
        self.cycle_count = 0
        self.waiting_for_key = False
        self.instruction_stats = {}
        self.unrecognized_count = 0
        self.last_unrecognized = None

    def load(self, rom: bytes) -> int:
        """Copy a ROM image to 0x200.

        Bytes that would reach the display window at 0xF00 are dropped.

        Returns:
            The number of bytes written.
        """
        written = self.memory.write_block(PROGRAM_START, rom[:PROGRAM_SPACE])
        if written < len(rom):
            logger.warning(
                "ROM truncated: %d of %d bytes fit below the display window",
                written, len(rom),
            )
        return written

    @property
    def delay_timer(self) -> int:
        return self.timers.delay

    @property
    def sound_timer(self) -> int:
        return self.timers.sound

    @property
    def sound_active(self) -> bool:
        """True while the sound timer is running and a tone should play."""
        return self.timers.sound > 0

    def sync_display_mirror(self) -> None:
        """Copy the packed framebuffer into the 0xF00 display window."""
        self.memory.write_display_block(self.display.packed())

    def step(self) -> Instruction | None:
        """Execute one instruction cycle: fetch, decode, execute.

        An undecodable word is skipped (PC advances by 2), counted and
        logged. Stack errors propagate and leave the machine as it was
        before the step.

        Returns:
            The executed instruction, or None for an unrecognized word.
        """
        word = self.memory.read_word(self.pc)
        inst = decode(word)
        mnemonic = instruction_mnemonic(inst)

        if inst is None:
            event = UnrecognizedOpcode(self.pc.value, word)
            logger.warning("%s", event)
            self.last_unrecognized = event
            self.unrecognized_count += 1
            self.pc = self.pc + 2
        else:
            self.pc = execute(inst, self)

        self.instruction_stats[mnemonic] = self.instruction_stats.get(mnemonic, 0) + 1
        self.cycle_count += 1
        return inst

    def tick(self) -> bool:
        """Advance the 60 Hz time base by one interval.

        Decrements both timers and reports whether the framebuffer changed
        since the previous tick and should be presented.
        """
        self.timers.tick()
        return self.display.consume_dirty()

    def run(self, max_cycles: int = 1_000_000, cycles_per_tick: int = 0) -> None:
        """Execute ``max_cycles`` instructions.

        If ``cycles_per_tick`` is positive, ``tick()`` is called after every
        that many instructions, standing in for a wall clock.
        """
        for n in range(1, max_cycles + 1):
            self.step()
            if cycles_per_tick > 0 and n % cycles_per_tick == 0:
                self.tick()
