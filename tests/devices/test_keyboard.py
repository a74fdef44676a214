"""Tests for the keypad state holder."""

from chip8_vm.devices.keyboard import Keyboard, KeyState


class TestKeyState:
    def test_initially_released(self) -> None:
        keys = KeyState()
        assert not any(keys.key_is_pressed(k) for k in range(16))
        assert keys.pressed() == []

    def test_press_release(self) -> None:
        keys = KeyState()
        keys.press(0xA)
        assert keys.key_is_pressed(0xA)
        keys.release(0xA)
        assert not keys.key_is_pressed(0xA)

    def test_pressed_sorted(self) -> None:
        keys = KeyState()
        keys.press(0xF)
        keys.press(0x2)
        assert keys.pressed() == [0x2, 0xF]

    def test_release_all(self) -> None:
        keys = KeyState()
        keys.press(1)
        keys.press(2)
        keys.release_all()
        assert keys.pressed() == []

    def test_key_index_masked(self) -> None:
        keys = KeyState()
        keys.press(0x13)
        assert keys.key_is_pressed(0x3)

    def test_satisfies_protocol(self) -> None:
        assert isinstance(KeyState(), Keyboard)
