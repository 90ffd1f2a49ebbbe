"""Console access and a line-oriented scanner."""

from __future__ import annotations

import re
import sys
from typing import TextIO

_INT_PREFIX = re.compile(r"[+-]?\d+")
_FLOAT_PREFIX = re.compile(
    r"[+-]?(?:\d+\.?\d*(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


def _strip_newline(line: str) -> str:
    return line.removesuffix("\n")


class Console:
    """Formatted output and line input on a pair of text streams.

    Without explicit streams it uses the process's standard input and output.
    """

    def __init__(self, reader: TextIO | None = None, writer: TextIO | None = None) -> None:
        self._reader = reader
        self._writer = writer

    def writer(self) -> TextIO:
        return self._writer if self._writer is not None else sys.stdout

    def reader(self) -> TextIO:
        return self._reader if self._reader is not None else sys.stdin

    def format(self, fmt: str, *args) -> None:
        """Write ``fmt`` with ``{}`` fields filled from ``args``."""
        self.writer().write(fmt.format(*args))

    def printf(self, fmt: str, *args) -> None:
        self.format(fmt, *args)

    def read_line(self, fmt: str = "", *args) -> str:
        """Show a formatted prompt and return one line without its newline."""
        self.format(fmt, *args)
        return _strip_newline(self.reader().readline())

    def flush(self) -> None:
        self.writer().flush()


class Scanner:
    """Reads values from a text stream, one line per value."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream

    def next_token(self) -> str | None:
        """Return the first whitespace-separated token of the next line.

        An empty line gives an empty string; the end of input gives ``None``.
        """
        line = self._stream.readline()
        if not line:
            return None
        parts = line.split()
        return parts[0] if parts else ""

    def next_int(self) -> int:
        token = self.next_token()
        if token is None:
            raise EOFError("No more integers available.")
        match = _INT_PREFIX.match(token)
        if match is None:
            raise ValueError(f"Not an integer: {token!r}")
        value = int(match.group())
        if not _INT32_MIN <= value <= _INT32_MAX:
            raise OverflowError(f"Integer out of range: {token!r}")
        return value

    def next_double(self) -> float:
        token = self.next_token()
        if token is None:
            raise EOFError("No more doubles available.")
        match = _FLOAT_PREFIX.match(token)
        if match is None:
            raise ValueError(f"Not a number: {token!r}")
        return float(match.group())

    def next_line(self) -> str:
        return _strip_newline(self._stream.readline())

    def next_tokens(self, delimiter: str = " ") -> list[str]:
        """Split the next line on ``delimiter``, keeping empty fields."""
        return self.next_line().split(delimiter)