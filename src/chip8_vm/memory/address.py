"""Bounded addresses: integers that always lie inside a fixed capacity.

Each address space gets its own nominal type. Raw integers are reduced
modulo the capacity on construction and after arithmetic, so a valid
instance can always index its space. Mixing two different address types
is a ``TypeError``.
"""

from __future__ import annotations

from typing import TypeVar

A = TypeVar("A", bound="BoundedAddress")


class BoundedAddress:
    """Unsigned integer reduced into ``[0, CAPACITY)``."""

    CAPACITY: int = 0

    __slots__ = ("_value",)

    def __init__(self, raw: int | BoundedAddress = 0) -> None:
        if isinstance(raw, BoundedAddress):
            if type(raw) is not type(self):
                raise TypeError(
                    f"cannot build {type(self).__name__} from {type(raw).__name__}"
                )
            raw = raw._value
        self._value = int(raw) % self.CAPACITY

    @classmethod
    def is_overflow(cls, raw: int) -> bool:
        """True if ``raw`` lies outside the space and would be reduced."""
        return not 0 <= raw < cls.CAPACITY

    @property
    def value(self) -> int:
        return self._value

    def _coerce(self, other: object) -> int:
        if isinstance(other, BoundedAddress):
            if type(other) is not type(self):
                raise TypeError(
                    f"cannot mix {type(self).__name__} and {type(other).__name__}"
                )
            return other._value
        if isinstance(other, int):
            return other
        return NotImplemented  # type: ignore[return-value]

    def __add__(self: A, other: int | A) -> A:
        rhs = self._coerce(other)
        if rhs is NotImplemented:
            return NotImplemented
        return type(self)(self._value + rhs)

    __radd__ = __add__

    def __sub__(self: A, other: int | A) -> A:
        rhs = self._coerce(other)
        if rhs is NotImplemented:
            return NotImplemented
        return type(self)(self._value - rhs)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value == other._value  # type: ignore[attr-defined]

    def __lt__(self: A, other: A) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value < other._value

    def __le__(self: A, other: A) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value <= other._value

    def __gt__(self: A, other: A) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value > other._value

    def __ge__(self: A, other: A) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value >= other._value

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._value))

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __repr__(self) -> str:
        return f"{type(self).__name__}(0x{self._value:03X})"


class MemoryAddress(BoundedAddress):
    """Address into the 4 KiB program memory."""

    CAPACITY = 0x1000
    __slots__ = ()


class RegisterIndex(BoundedAddress):
    """Index of one of the 16 general-purpose registers V0..VF."""

    CAPACITY = 16
    __slots__ = ()

    def __repr__(self) -> str:
        return f"V{self._value:X}"


class StackIndex(BoundedAddress):
    """Slot index into the 16-entry call stack."""

    CAPACITY = 16
    __slots__ = ()
