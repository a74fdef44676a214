"""Peripherals: display, keypad and the tick clock."""

from .clock import TickClock
from .display import DISPLAY_HEIGHT, DISPLAY_WIDTH, Framebuffer
from .keyboard import Keyboard, KeyState

__all__ = [
    "DISPLAY_HEIGHT",
    "DISPLAY_WIDTH",
    "Framebuffer",
    "KeyState",
    "Keyboard",
    "TickClock",
]
