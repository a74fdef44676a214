"""Tests for the ROM loader."""

import pytest

from chip8_vm.cpu.cpu import PROGRAM_START
from chip8_vm.errors import Chip8Error, RomError
from chip8_vm.loader.rom import MAX_ROM_SIZE, read_rom
from chip8_vm.memory.ram import DISPLAY_BASE


class TestReadRom:
    def test_reads_bytes(self, tmp_path) -> None:
        path = tmp_path / "prog.ch8"
        path.write_bytes(b"\x00\xE0\x12\x00")
        assert read_rom(path) == b"\x00\xE0\x12\x00"

    def test_accepts_str_path(self, tmp_path) -> None:
        path = tmp_path / "prog.ch8"
        path.write_bytes(b"\x12\x00")
        assert read_rom(str(path)) == b"\x12\x00"

    def test_max_size_fits(self, tmp_path) -> None:
        path = tmp_path / "big.ch8"
        path.write_bytes(b"\x00" * MAX_ROM_SIZE)
        assert len(read_rom(path)) == MAX_ROM_SIZE == 0xD00

    def test_max_size_stops_at_display_window(self) -> None:
        assert PROGRAM_START + MAX_ROM_SIZE == DISPLAY_BASE

    def test_too_large(self, tmp_path) -> None:
        path = tmp_path / "huge.ch8"
        path.write_bytes(b"\x00" * (MAX_ROM_SIZE + 1))
        with pytest.raises(RomError, match="at most"):
            read_rom(path)

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(RomError, match="cannot read"):
            read_rom(tmp_path / "nope.ch8")

    def test_empty_file(self, tmp_path) -> None:
        path = tmp_path / "empty.ch8"
        path.write_bytes(b"")
        with pytest.raises(RomError, match="empty"):
            read_rom(path)

    def test_error_is_machine_error(self) -> None:
        assert issubclass(RomError, Chip8Error)
