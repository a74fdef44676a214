"""Live display host loop: wall-clock ticks, instruction steps, Rich output."""

from __future__ import annotations

import logging
import time
from pathlib import Path

import numpy as np
from rich.console import Console
from rich.live import Live

from ..cpu.cpu import CPU
from ..cpu.timers import TIMER_HZ
from ..devices.clock import TickClock
from ..devices.keyboard import Keyboard
from ..loader.rom import read_rom
from .screen import render_screen

logger = logging.getLogger(__name__)


def run_display(
    rom_path: str | Path,
    hz: float = TIMER_HZ,
    cycles_per_tick: int = 10,
    seed: int | None = None,
    keyboard: Keyboard | None = None,
    console: Console | None = None,
) -> CPU:
    """Run a ROM with a live terminal display until Ctrl-C.

    Each tick of the clock executes ``cycles_per_tick`` instructions, then
    calls ``cpu.tick()`` and redraws the screen if the framebuffer changed.

    Args:
        rom_path: Path to the ROM image.
        hz: Timer/display tick rate.
        cycles_per_tick: Instructions executed per tick.
        seed: Seed for the RND instruction's generator.
        keyboard: Key-state provider; defaults to no keys held.
        console: Rich console to draw on.

    Returns:
        The CPU in its final state.
    """
    cpu = CPU(keyboard=keyboard, rng=np.random.default_rng(seed))
    cpu.load(read_rom(rom_path))
    title = Path(rom_path).name
    clock = TickClock(hz)

    with Live(
        render_screen(cpu, title),
        console=console or Console(),
        auto_refresh=False,
    ) as live:
        try:
            while True:
                if not clock.check():
                    time.sleep(clock.remaining())
                    continue
                for _ in range(cycles_per_tick):
                    cpu.step()
                if cpu.tick():
                    live.update(render_screen(cpu, title), refresh=True)
        except KeyboardInterrupt:
            logger.info("stopped after %d cycles", cpu.cycle_count)
    return cpu
