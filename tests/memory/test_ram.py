"""Tests for Memory read/write operations."""

from chip8_vm.memory.address import MemoryAddress
from chip8_vm.memory.ram import DISPLAY_BASE, DISPLAY_SIZE, MEMORY_SIZE, Memory


class TestMemory:
    def test_size(self) -> None:
        assert Memory().size == MEMORY_SIZE == 4096

    def test_read_write(self) -> None:
        mem = Memory()
        mem.write(MemoryAddress(0x200), 0xAB)
        assert mem.read(MemoryAddress(0x200)) == 0xAB

    def test_int_address_is_reduced(self) -> None:
        mem = Memory()
        mem.write(0x1300, 0x42)
        assert mem.read(0x300) == 0x42

    def test_write_masks_value(self) -> None:
        mem = Memory()
        mem.write(0x200, 0x1FF)
        assert mem.read(0x200) == 0xFF

    def test_initial_values_zero(self) -> None:
        mem = Memory()
        assert mem.read_block(0, MEMORY_SIZE) == bytes(MEMORY_SIZE)

    def test_read_word_big_endian(self) -> None:
        mem = Memory()
        mem.write_block(0x200, b"\x12\x28")
        assert mem.read_word(0x200) == 0x1228

    def test_read_word_at_top_wraps(self) -> None:
        mem = Memory()
        mem.write(0xFFF, 0xAB)
        mem.write(0x000, 0xCD)
        assert mem.read_word(0xFFF) == 0xABCD


class TestBlocks:
    def test_block_round_trip(self) -> None:
        mem = Memory()
        assert mem.write_block(0x300, b"\x01\x02\x03") == 3
        assert mem.read_block(0x300, 3) == b"\x01\x02\x03"

    def test_read_block_clips_at_end(self) -> None:
        mem = Memory()
        mem.write(0xFFE, 0x11)
        mem.write(0xFFF, 0x22)
        assert mem.read_block(0xFFE, 5) == b"\x11\x22"

    def test_write_block_clips_at_end(self) -> None:
        mem = Memory()
        written = mem.write_block(0xFFD, b"\xAA\xBB\xCC\xDD\xEE")
        assert written == 3
        assert mem.read_block(0xFFD, 3) == b"\xAA\xBB\xCC"
        assert mem.read(0x000) == 0  # nothing wrapped
        assert mem.read(0x001) == 0

    def test_zero_length(self) -> None:
        mem = Memory()
        assert mem.read_block(0x100, 0) == b""
        assert mem.write_block(0x100, b"") == 0

    def test_load_segment(self) -> None:
        mem = Memory()
        mem.load_segment(0x200, bytearray(b"\x60\x05"))
        assert mem.read_word(0x200) == 0x6005

    def test_clear(self) -> None:
        mem = Memory()
        mem.write(0x10, 1)
        mem.clear()
        assert mem.read(0x10) == 0


class TestDisplayBlock:
    def test_window_location(self) -> None:
        mem = Memory()
        mem.write(DISPLAY_BASE, 0x80)
        mem.write(DISPLAY_BASE + DISPLAY_SIZE - 1, 0x01)
        block = mem.display_block()
        assert len(block) == 256
        assert block[0] == 0x80
        assert block[-1] == 0x01

    def test_write_display_block(self) -> None:
        mem = Memory()
        mem.write_display_block(bytes(range(256)))
        assert mem.read(0xF00) == 0
        assert mem.read(0xFFF) == 255
        assert mem.display_block() == bytes(range(256))

    def test_display_block_is_a_copy(self) -> None:
        mem = Memory()
        block = mem.display_block()
        assert isinstance(block, bytes)
