"""Framebuffer rendering: two pixel rows per terminal line with half blocks."""

from __future__ import annotations

from rich.panel import Panel
from rich.text import Text

from ..cpu.cpu import CPU
from ..devices.display import Framebuffer

# (top pixel, bottom pixel) -> glyph
_GLYPHS: dict[tuple[int, int], str] = {
    (0, 0): " ",
    (1, 0): "▀",
    (0, 1): "▄",
    (1, 1): "█",
}


def render_framebuffer(fb: Framebuffer, style: str = "bold green") -> Text:
    """Render the pixel grid as Rich Text.

    Args:
        fb: The framebuffer to draw.
        style: Rich style applied to lit pixels.

    Returns:
        A Text with ``height / 2`` lines of ``width`` characters.
    """
    pixels = fb.pixels
    text = Text(style=style)
    for row in range(0, fb.height, 2):
        top = pixels[row]
        bottom = pixels[row + 1]
        line = "".join(
            _GLYPHS[(int(t), int(b))] for t, b in zip(top, bottom)
        )
        text.append(line)
        if row + 2 < fb.height:
            text.append("\n")
    return text


def format_status(cpu: CPU) -> str:
    """One-line machine summary shown under the screen."""
    sound = "on" if cpu.sound_active else "off"
    status = (
        f"PC: 0x{cpu.pc.value:03X}  |  "
        f"Cycles: {cpu.cycle_count}  |  "
        f"DT: {cpu.delay_timer:3d}  ST: {cpu.sound_timer:3d} ({sound})"
    )
    if cpu.waiting_for_key:
        status += "  |  waiting for key"
    if cpu.unrecognized_count:
        status += f"  |  unrecognized: {cpu.unrecognized_count}"
    return status


def render_screen(cpu: CPU, title: str = "CHIP-8") -> Panel:
    """Screen panel with the status line as subtitle."""
    return Panel(
        render_framebuffer(cpu.display),
        title=title,
        subtitle=format_status(cpu),
        expand=False,
    )
