"""A boxed signed 16-bit integer."""

from __future__ import annotations

import functools

from .boxes import _INT_PREFIX

_INT16_MIN = -(2**15)
_INT16_MAX = 2**15 - 1


def _wrap16(value: int) -> int:
    return (value - _INT16_MIN) % 2**16 + _INT16_MIN


@functools.total_ordering
class Short:
    """A boxed signed 16-bit integer; arithmetic wraps around on overflow."""

    __slots__ = ("_value",)

    MAX_VALUE = _INT16_MAX
    MIN_VALUE = _INT16_MIN

    def __init__(self, value: int) -> None:
        if isinstance(value, Short):
            value = value._value
        value = int(value)
        if not _INT16_MIN <= value <= _INT16_MAX:
            raise OverflowError(f"Value out of range for Short: {value}")
        self._value = value

    def __int__(self) -> int:
        return self._value

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"Short({self._value})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Short):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other: "Short") -> bool:
        if not isinstance(other, Short):
            return NotImplemented
        return self._value < other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def compare_to(self, other: "Short") -> int:
        """Return the difference of the two values."""
        return self._value - other._value

    @staticmethod
    def parse_short(text: str) -> "Short":
        """Parse the leading decimal integer of ``text``."""
        match = _INT_PREFIX.match(text)
        if match is None:
            raise ValueError("Invalid input string for Short conversion")
        value = int(match.group(1))
        if not _INT16_MIN <= value <= _INT16_MAX:
            raise OverflowError("Value out of range for Short")
        return Short(value)

    def _quotient(self, other: "Short") -> int:
        quotient = abs(self._value) // abs(other._value)
        return -quotient if (self._value < 0) != (other._value < 0) else quotient

    def __add__(self, other: "Short") -> "Short":
        if not isinstance(other, Short):
            return NotImplemented
        return Short(_wrap16(self._value + other._value))

    def __sub__(self, other: "Short") -> "Short":
        if not isinstance(other, Short):
            return NotImplemented
        return Short(_wrap16(self._value - other._value))

    def __mul__(self, other: "Short") -> "Short":
        if not isinstance(other, Short):
            return NotImplemented
        return Short(_wrap16(self._value * other._value))

    def __floordiv__(self, other: "Short") -> "Short":
        """Divide, truncating towards zero."""
        if not isinstance(other, Short):
            return NotImplemented
        if other._value == 0:
            raise ZeroDivisionError("Division by zero")
        return Short(_wrap16(self._quotient(other)))

    def __mod__(self, other: "Short") -> "Short":
        """Remainder of the truncating division; it takes the dividend's sign."""
        if not isinstance(other, Short):
            return NotImplemented
        if other._value == 0:
            raise ZeroDivisionError("Modulo by zero")
        return Short(_wrap16(self._value - other._value * self._quotient(other)))