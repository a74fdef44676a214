"""Terminal presentation of the framebuffer using Rich."""

from .app import run_display
from .screen import format_status, render_framebuffer, render_screen

__all__ = ["format_status", "render_framebuffer", "render_screen", "run_display"]
