"""Shared fixtures for CPU tests."""

import pytest

from chip8_vm.cpu.cpu import CPU, PROGRAM_START
from chip8_vm.devices.keyboard import KeyState


class FixedRandom:
    """RNG stand-in that always returns the same byte."""

    def __init__(self, value: int) -> None:
        self.value = value
        self.calls: list[tuple[int, int]] = []

    def integers(self, low: int, high: int) -> int:
        self.calls.append((low, high))
        return self.value


@pytest.fixture
def fixed_random():
    """The FixedRandom class, for tests that inspect RNG calls."""
    return FixedRandom


@pytest.fixture
def keys() -> KeyState:
    return KeyState()


@pytest.fixture
def make_cpu(keys):
    """Factory fixture: returns a function that creates a fresh CPU."""
    def _make(rng=None) -> CPU:
        return CPU(keyboard=keys, rng=rng if rng is not None else FixedRandom(0))
    return _make


@pytest.fixture
def exec_instruction(make_cpu):
    """Write a single 16-bit instruction word at PC and step once."""
    def _exec(cpu: CPU | None = None, word: int = 0) -> CPU:
        if cpu is None:
            cpu = make_cpu()
        cpu.memory.write_block(cpu.pc, bytes([(word >> 8) & 0xFF, word & 0xFF]))
        cpu.step()
        return cpu
    return _exec


@pytest.fixture
def load_program(make_cpu):
    """Create a CPU with a list of instruction words loaded at 0x200."""
    def _load(words: list[int], cpu: CPU | None = None) -> CPU:
        if cpu is None:
            cpu = make_cpu()
        rom = b"".join(w.to_bytes(2, "big") for w in words)
        cpu.load(rom)
        assert cpu.pc.value == PROGRAM_START
        return cpu
    return _load


@pytest.fixture
def set_regs():
    """Set named registers (e.g., set_regs(cpu, v1=5, vf=1))."""
    def _set(cpu: CPU, **kwargs: int) -> None:
        for name, value in kwargs.items():
            if not name.startswith("v"):
                raise ValueError(f"Register name must start with 'v': {name}")
            cpu.registers.write(int(name[1:], 16), value)
    return _set
