"""Command-line interface for the CHIP-8 virtual machine."""

import argparse
import logging
import sys

import numpy as np
from rich.console import Console

from .cpu.cpu import CPU
from .cpu.timers import TIMER_HZ
from .errors import Chip8Error, RomError
from .loader.rom import read_rom
from .tui import render_screen, run_display

logger = logging.getLogger(__name__)

DEFAULT_MAX_CYCLES = 100_000
DEFAULT_CYCLES_PER_TICK = 10


def _positive_int(value: str) -> int:
    """argparse type for strictly positive integers."""
    try:
        number = int(value, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer '{value}'") from None
    if number <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {number}")
    return number


def _add_common_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("rom", help="Path to a raw CHIP-8 ROM image")
    parser.add_argument(
        "--cycles-per-tick", type=_positive_int, default=DEFAULT_CYCLES_PER_TICK,
        metavar="K", help="Instructions executed per 60 Hz tick (default: 10)",
    )
    parser.add_argument(
        "--seed", type=int, default=None,
        help="Seed for the random-number instruction",
    )


def main(argv: list[str] | None = None) -> None:
    """Entry point for the emulator CLI."""
    parser = argparse.ArgumentParser(description="CHIP-8 Virtual Machine")
    parser.add_argument(
        "--log-level", default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING)",
    )
    sub = parser.add_subparsers(dest="command")

    run_parser = sub.add_parser("run", help="Run a ROM headless and print the final screen")
    _add_common_args(run_parser)
    run_parser.add_argument(
        "--max-cycles", type=_positive_int, default=DEFAULT_MAX_CYCLES,
        metavar="N", help="Number of instructions to execute (default: 100000)",
    )

    play_parser = sub.add_parser("play", help="Run a ROM with a live terminal display")
    _add_common_args(play_parser)
    play_parser.add_argument(
        "--hz", type=float, default=TIMER_HZ,
        help="Timer and display tick rate (default: 60)",
    )

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "run":
        sys.exit(run_rom(args.rom, args.max_cycles, args.cycles_per_tick, args.seed))
    elif args.command == "play":
        try:
            run_display(args.rom, args.hz, args.cycles_per_tick, args.seed)
        except Chip8Error as e:
            logger.error("%s", e)
            sys.exit(1)
    else:
        parser.print_help()
        sys.exit(1)


def run_rom(
    path: str,
    max_cycles: int = DEFAULT_MAX_CYCLES,
    cycles_per_tick: int = DEFAULT_CYCLES_PER_TICK,
    seed: int | None = None,
    console: Console | None = None,
) -> int:
    """Load a ROM, run it for ``max_cycles`` instructions, show the screen.

    Timers are ticked every ``cycles_per_tick`` instructions instead of by
    wall-clock time, so runs with the same seed are reproducible.

    Returns:
        Process exit code: 0 on success, 1 on a ROM or stack error.
    """
    console = console or Console()
    try:
        rom = read_rom(path)
    except RomError as e:
        logger.error("%s", e)
        return 1

    cpu = CPU(rng=np.random.default_rng(seed))
    cpu.load(rom)

    code = 0
    try:
        cpu.run(max_cycles, cycles_per_tick)
    except Chip8Error as e:
        logger.error("%s (PC=0x%03X, cycle %d)", e, cpu.pc.value, cpu.cycle_count)
        code = 1

    console.print(render_screen(cpu, title=path))
    print(f"Ran {cpu.cycle_count} cycles.", file=sys.stderr)
    if cpu.unrecognized_count:
        print(
            f"  {cpu.unrecognized_count} unrecognized opcode(s), "
            f"last: {cpu.last_unrecognized}",
            file=sys.stderr,
        )
    return code
