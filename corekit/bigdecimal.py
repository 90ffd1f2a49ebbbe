"""Arbitrary precision decimal numbers with 100 significant digits."""

from __future__ import annotations

import functools
from decimal import Context, Decimal, InvalidOperation

PRECISION = 100

_CONTEXT = Context(prec=PRECISION)


@functools.total_ordering
class BigDecimal:
    """An immutable decimal number carrying up to 100 significant digits.

    Every arithmetic result is rounded to that precision.
    """

    __slots__ = ("_value",)

    def __init__(self, value) -> None:
        if isinstance(value, BigDecimal):
            self._value = value._value
            return
        if isinstance(value, bool) or not isinstance(value, (str, float, int, Decimal)):
            raise TypeError(f"Cannot build a BigDecimal from {type(value).__name__}")
        try:
            raw = Decimal(value.strip()) if isinstance(value, str) else Decimal(value)
        except InvalidOperation:
            raise ValueError(f"Invalid decimal string: {value!r}") from None
        self._value = _CONTEXT.plus(raw)

    @classmethod
    def _of(cls, value: Decimal) -> "BigDecimal":
        result = cls.__new__(cls)
        result._value = _CONTEXT.plus(value)
        return result

    def __add__(self, other: "BigDecimal") -> "BigDecimal":
        if not isinstance(other, BigDecimal):
            return NotImplemented
        return BigDecimal._of(_CONTEXT.add(self._value, other._value))

    def __sub__(self, other: "BigDecimal") -> "BigDecimal":
        if not isinstance(other, BigDecimal):
            return NotImplemented
        return BigDecimal._of(_CONTEXT.subtract(self._value, other._value))

    def __mul__(self, other: "BigDecimal") -> "BigDecimal":
        if not isinstance(other, BigDecimal):
            return NotImplemented
        return BigDecimal._of(_CONTEXT.multiply(self._value, other._value))

    def __truediv__(self, other: "BigDecimal") -> "BigDecimal":
        if not isinstance(other, BigDecimal):
            return NotImplemented
        if other._value == 0:
            raise ZeroDivisionError("Division by zero is not allowed.")
        return BigDecimal._of(_CONTEXT.divide(self._value, other._value))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BigDecimal):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other: "BigDecimal") -> bool:
        if not isinstance(other, BigDecimal):
            return NotImplemented
        return self._value < other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __str__(self) -> str:
        if not self._value.is_finite():
            return str(self._value).lower()
        text = format(self._value.normalize(_CONTEXT), "f")
        return "0" if text in ("-0", "0") else text

    def __repr__(self) -> str:
        return f"BigDecimal('{self}')"