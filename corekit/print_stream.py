"""An output stream that prints text representations of values."""

from __future__ import annotations

from collections.abc import Iterable

from .output_stream import OutputStream, _check_byte

_UNAVAILABLE = "Output stream is not available"


def _render(value) -> bytes:
    if isinstance(value, bool):
        return bytes((1 if value else 0,))
    if isinstance(value, int):
        return str(value).encode("ascii")
    if isinstance(value, float):
        return f"{value:f}".encode("ascii")
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, Iterable):
        return "".join(value).encode("utf-8")
    raise TypeError(f"Cannot print value of type {type(value).__name__}")


class PrintStream(OutputStream):
    """Writes values as bytes to a target stream.

    Booleans are written as a single byte 1 or 0, integers as their decimal
    digits, floats with six decimals and text as UTF-8. With ``auto_flush``
    the target is flushed after every print or append.
    """

    def __init__(self, target: OutputStream | None, auto_flush: bool = False) -> None:
        self._target = target
        self._auto_flush = auto_flush

    def _flush_if_needed(self) -> None:
        if self._auto_flush and self._target is not None:
            self._target.flush()

    def write_byte(self, value: int) -> None:
        if self._target is None:
            raise RuntimeError(_UNAVAILABLE)
        self._target.write_byte(_check_byte(value))

    def append(self, text, start: int = 0, end: int | None = None) -> "PrintStream":
        """Write ``text[start:end]`` and return the stream."""
        if not isinstance(text, str):
            text = "".join(text)
        if end is None:
            end = len(text)
        for value in text[start:end].encode("utf-8"):
            self.write_byte(value)
        self._flush_if_needed()
        return self

    def print(self, value="") -> None:
        """Write the representation of ``value``; ``None`` writes nothing."""
        if value is None:
            return
        if self._target is None:
            return
        for byte in _render(value):
            self._target.write_byte(byte)
        self._flush_if_needed()

    def println(self, value="") -> None:
        """Print ``value`` followed by a newline."""
        self.print(value)
        self.print("\n")

    def flush(self) -> None:
        if self._target is not None:
            self._target.flush()

    def close(self) -> None:
        if self._target is not None:
            self._target.close()