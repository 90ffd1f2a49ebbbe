"""Boxed primitive values: booleans, characters, 32-bit floats and 64-bit integers."""

from __future__ import annotations

import functools
import math
import re
import struct

_SPACE = "[ \t\n\v\f\r]*"
_INT_PREFIX = re.compile(_SPACE + r"([+-]?[0-9]+)")
_FLOAT_PREFIX = re.compile(
    _SPACE + r"([+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def _to_float32(value: float) -> float:
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _format_float32(value: float) -> str:
    """Shortest text that reads back as the same 32-bit float."""
    if math.isnan(value):
        return "nan"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value == 0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"
    for precision in range(1, 10):
        text = f"{value:.{precision - 1}e}"
        if _to_float32(float(text)) == value:
            break
    mantissa, exp_text = text.split("e")
    sign = "-" if mantissa.startswith("-") else ""
    digits = mantissa.lstrip("-").replace(".", "").rstrip("0") or "0"
    exponent = int(exp_text)
    scientific = digits[0] + ("." + digits[1:] if len(digits) > 1 else "")
    scientific += "e" + ("+" if exponent >= 0 else "-") + f"{abs(exponent):02d}"
    if exponent >= len(digits) - 1:
        fixed = digits + "0" * (exponent - len(digits) + 1)
    elif exponent >= 0:
        fixed = digits[:exponent + 1] + "." + digits[exponent + 1:]
    else:
        fixed = "0." + "0" * (-exponent - 1) + digits
    return sign + (fixed if len(fixed) <= len(scientific) else scientific)


def _wrap64(value: int) -> int:
    return (value - _INT64_MIN) % 2**64 + _INT64_MIN


def _char(c: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"Expected a single character, got {c!r}")
    return c


class Boolean:
    """A boxed boolean; it prints as ``true`` or ``false``."""

    __slots__ = ("_value",)

    TRUE: "Boolean"
    FALSE: "Boolean"

    def __init__(self, value) -> None:
        self._value = bool(value)

    @property
    def value(self) -> bool:
        return self._value

    def __bool__(self) -> bool:
        return self._value

    def __str__(self) -> str:
        return "true" if self._value else "false"

    def __repr__(self) -> str:
        return f"Boolean({self._value})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Boolean):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def compare_to(self, other: "Boolean") -> int:
        """Return 1, 0 or -1 with ``true`` ordered after ``false``."""
        return int(self._value) - int(other._value)

    @staticmethod
    def parse_boolean(text: str) -> "Boolean":
        """Parse ``true``/``TRUE`` or ``false``/``FALSE``."""
        if text in ("true", "TRUE"):
            return Boolean(True)
        if text in ("false", "FALSE"):
            return Boolean(False)
        raise ValueError("Invalid input string for Boolean conversion")


Boolean.TRUE = Boolean(True)
Boolean.FALSE = Boolean(False)


@functools.total_ordering
class Character:
    """A boxed single character. Classification follows the ASCII rules."""

    __slots__ = ("_value",)

    def __init__(self, value: str) -> None:
        self._value = _char(value)

    @property
    def value(self) -> str:
        return self._value

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"Character({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Character):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other: "Character") -> bool:
        if not isinstance(other, Character):
            return NotImplemented
        return self._value < other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def compare_to(self, other: "Character") -> int:
        """Return the difference of the two character codes."""
        return ord(self._value) - ord(other._value)

    @staticmethod
    def is_letter(c: str) -> bool:
        return _char(c).isascii() and c.isalpha()

    @staticmethod
    def is_digit(c: str) -> bool:
        return _char(c) in "0123456789"

    @staticmethod
    def is_letter_or_digit(c: str) -> bool:
        return Character.is_letter(c) or Character.is_digit(c)

    @staticmethod
    def is_upper_case(c: str) -> bool:
        return "A" <= _char(c) <= "Z"

    @staticmethod
    def is_lower_case(c: str) -> bool:
        return "a" <= _char(c) <= "z"

    @staticmethod
    def to_upper_case(c: str) -> str:
        """Upper-case an ASCII letter; any other character is returned as is."""
        return c.upper() if Character.is_lower_case(c) else c

    @staticmethod
    def to_lower_case(c: str) -> str:
        """Lower-case an ASCII letter; any other character is returned as is."""
        return c.lower() if Character.is_upper_case(c) else c


class Float:
    """A boxed single-precision float; arithmetic is rounded to 32 bits."""

    __slots__ = ("_value",)

    POSITIVE_INFINITY = math.inf
    NEGATIVE_INFINITY = -math.inf
    NaN = math.nan
    MAX_VALUE = struct.unpack("<f", bytes.fromhex("ffff7f7f"))[0]
    MIN_VALUE = struct.unpack("<f", bytes.fromhex("00008000"))[0]

    def __init__(self, value) -> None:
        if isinstance(value, Float):
            value = value._value
        self._value = _to_float32(float(value))

    def __float__(self) -> float:
        return self._value

    def __str__(self) -> str:
        return _format_float32(self._value)

    def __repr__(self) -> str:
        return f"Float({self})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Float):
            return NotImplemented
        return self._value == other._value

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Float):
            return NotImplemented
        return self._value != other._value

    def __lt__(self, other: "Float") -> bool:
        if not isinstance(other, Float):
            return NotImplemented
        return self._value < other._value

    def __le__(self, other: "Float") -> bool:
        if not isinstance(other, Float):
            return NotImplemented
        return self._value <= other._value

    def __gt__(self, other: "Float") -> bool:
        if not isinstance(other, Float):
            return NotImplemented
        return self._value > other._value

    def __ge__(self, other: "Float") -> bool:
        if not isinstance(other, Float):
            return NotImplemented
        return self._value >= other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def compare_to(self, other: "Float") -> int:
        """Return 1, 0 or -1; NaN compares as equal to everything."""
        return (self._value > other._value) - (self._value < other._value)

    @staticmethod
    def parse_float(text: str) -> "Float":
        """Parse the leading number of ``text``, ignoring what follows it."""
        match = _FLOAT_PREFIX.match(text)
        if match is None:
            raise ValueError("Invalid input string for Float conversion")
        raw = float(match.group(1))
        if math.isfinite(raw) and math.isinf(_to_float32(raw)):
            raise OverflowError("Value out of range for Float")
        return Float(raw)

    def __add__(self, other: "Float") -> "Float":
        if not isinstance(other, Float):
            return NotImplemented
        return Float(self._value + other._value)

    def __sub__(self, other: "Float") -> "Float":
        if not isinstance(other, Float):
            return NotImplemented
        return Float(self._value - other._value)

    def __mul__(self, other: "Float") -> "Float":
        if not isinstance(other, Float):
            return NotImplemented
        return Float(self._value * other._value)

    def __truediv__(self, other: "Float") -> "Float":
        if not isinstance(other, Float):
            return NotImplemented
        if other._value == 0.0:
            raise ZeroDivisionError("Division by zero")
        return Float(self._value / other._value)


@functools.total_ordering
class Long:
    """A boxed signed 64-bit integer; arithmetic wraps around on overflow."""

    __slots__ = ("_value",)

    MAX_VALUE = _INT64_MAX
    MIN_VALUE = _INT64_MIN

    def __init__(self, value: int) -> None:
        if isinstance(value, Long):
            value = value._value
        value = int(value)
        if not _INT64_MIN <= value <= _INT64_MAX:
            raise OverflowError(f"Value out of range for Long: {value}")
        self._value = value

    def __int__(self) -> int:
        return self._value

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"Long({self._value})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Long):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other: "Long") -> bool:
        if not isinstance(other, Long):
            return NotImplemented
        return self._value < other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def compare_to(self, other: "Long") -> int:
        return (self._value > other._value) - (self._value < other._value)

    @staticmethod
    def parse_long(text: str) -> "Long":
        """Parse the leading decimal integer of ``text``."""
        match = _INT_PREFIX.match(text)
        if match is None:
            raise ValueError("Invalid input string for Long conversion")
        value = int(match.group(1))
        if not _INT64_MIN <= value <= _INT64_MAX:
            raise OverflowError("Value out of range for Long")
        return Long(value)

    def _quotient(self, other: "Long") -> int:
        quotient = abs(self._value) // abs(other._value)
        return -quotient if (self._value < 0) != (other._value < 0) else quotient

    def __add__(self, other: "Long") -> "Long":
        if not isinstance(other, Long):
            return NotImplemented
        return Long(_wrap64(self._value + other._value))

    def __sub__(self, other: "Long") -> "Long":
        if not isinstance(other, Long):
            return NotImplemented
        return Long(_wrap64(self._value - other._value))

    def __mul__(self, other: "Long") -> "Long":
        if not isinstance(other, Long):
            return NotImplemented
        return Long(_wrap64(self._value * other._value))

    def __floordiv__(self, other: "Long") -> "Long":
        """Divide, truncating towards zero."""
        if not isinstance(other, Long):
            return NotImplemented
        if other._value == 0:
            raise ZeroDivisionError("Division by zero")
        return Long(_wrap64(self._quotient(other)))

    def __mod__(self, other: "Long") -> "Long":
        """Remainder of the truncating division; it takes the dividend's sign."""
        if not isinstance(other, Long):
            return NotImplemented
        if other._value == 0:
            raise ZeroDivisionError("Modulo by zero")
        return Long(_wrap64(self._value - other._value * self._quotient(other)))