"""128-bit identifiers built from two 64-bit halves."""

from __future__ import annotations

import functools
import secrets
import string

_MASK64 = (1 << 64) - 1
_FNV_OFFSET = 0xCBF29CE484222325
_FNV_PRIME = 0x100000001B3


def _fnv1a64(data: bytes) -> int:
    value = _FNV_OFFSET
    for byte in data:
        value = ((value ^ byte) * _FNV_PRIME) & _MASK64
    return value


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= 1 << 31 else value


@functools.total_ordering
class Uuid:
    """An identifier made of a most and a least significant 64-bit half."""

    __slots__ = ("_msb", "_lsb")

    def __init__(self, most_significant_bits: int = 0, least_significant_bits: int = 0) -> None:
        for bits in (most_significant_bits, least_significant_bits):
            if not 0 <= bits <= _MASK64:
                raise ValueError(f"Not an unsigned 64-bit value: {bits}")
        self._msb = most_significant_bits
        self._lsb = least_significant_bits

    @property
    def most_significant_bits(self) -> int:
        return self._msb

    @property
    def least_significant_bits(self) -> int:
        return self._lsb

    @staticmethod
    def random_uuid() -> "Uuid":
        return Uuid(secrets.randbits(64), secrets.randbits(64))

    @staticmethod
    def from_string(text: str) -> "Uuid":
        """Read hex digits, ignoring dashes: 16 for the high half, the rest for the low."""
        msb = 0
        lsb = 0
        for index, ch in enumerate(text.replace("-", "")):
            if ch not in string.hexdigits:
                raise ValueError(f"Invalid hex digit in UUID: {ch!r}")
            digit = int(ch, 16)
            if index < 16:
                msb = ((msb << 4) | digit) & _MASK64
            else:
                lsb = ((lsb << 4) | digit) & _MASK64
        return Uuid(msb, lsb)

    @staticmethod
    def name_uuid_from_bytes(name: bytes) -> "Uuid":
        """Derive an identifier from the 64-bit FNV-1a hash of ``name``."""
        value = _fnv1a64(bytes(name))
        return Uuid(value, value >> 32)

    def __str__(self) -> str:
        return (
            f"{self._msb >> 32:08x}-{(self._msb >> 16) & 0xFFFF:04x}-{self._msb & 0xFFFF:04x}"
            f"-{self._lsb >> 48:04x}-{self._lsb & 0xFFFFFFFFFFFF:012x}"
        )

    def __repr__(self) -> str:
        return f"Uuid('{self}')"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Uuid):
            return NotImplemented
        return (self._msb, self._lsb) == (other._msb, other._lsb)

    def __lt__(self, other: "Uuid") -> bool:
        if not isinstance(other, Uuid):
            return NotImplemented
        return (self._msb, self._lsb) < (other._msb, other._lsb)

    def __hash__(self) -> int:
        return self.hash_code()

    def compare_to(self, other: "Uuid") -> int:
        """Return -1, 0 or 1 comparing both halves as unsigned numbers."""
        mine = (self._msb, self._lsb)
        theirs = (other._msb, other._lsb)
        return (mine > theirs) - (mine < theirs)

    def hash_code(self) -> int:
        """Fold both halves into a signed 32-bit value."""
        return _to_int32((self._msb >> 32) ^ self._msb ^ (self._lsb >> 32) ^ self._lsb)