"""Tests for the terminal framebuffer rendering."""

import io

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from chip8_vm.cpu.cpu import CPU
from chip8_vm.devices.display import Framebuffer
from chip8_vm.tui.screen import format_status, render_framebuffer, render_screen


class TestRenderFramebuffer:
    def test_returns_text(self) -> None:
        assert isinstance(render_framebuffer(Framebuffer()), Text)

    def test_blank_screen_shape(self) -> None:
        lines = render_framebuffer(Framebuffer()).plain.split("\n")
        assert len(lines) == 16
        assert all(line == " " * 64 for line in lines)

    def test_half_block_glyphs(self) -> None:
        fb = Framebuffer()
        fb.blit_sprite(b"\x80", 0, 0)        # top only
        fb.blit_sprite(b"\x40", 0, 1)        # bottom only
        fb.blit_sprite(b"\x20\x20", 0, 0)    # both
        line = render_framebuffer(fb).plain.split("\n")[0]
        assert line[:4] == "▀▄█ "


class TestFormatStatus:
    def test_contains_pc_and_timers(self) -> None:
        cpu = CPU()
        cpu.timers.set_delay(12)
        status = format_status(cpu)
        assert "PC: 0x200" in status
        assert "DT:  12" in status
        assert "off" in status

    def test_reports_unrecognized(self) -> None:
        cpu = CPU()
        cpu.load(b"\xFF\xFF")
        cpu.step()
        assert "unrecognized: 1" in format_status(cpu)

    def test_reports_key_wait(self) -> None:
        cpu = CPU()
        cpu.load(b"\xF0\x0A")
        cpu.step()
        assert "waiting for key" in format_status(cpu)


class TestRenderScreen:
    def test_returns_panel(self) -> None:
        assert isinstance(render_screen(CPU()), Panel)

    def test_renders_without_error(self) -> None:
        console = Console(file=io.StringIO(), width=100)
        console.print(render_screen(CPU(), title="test.ch8"))
        output = console.file.getvalue()
        assert "test.ch8" in output
