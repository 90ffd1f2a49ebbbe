"""A reader over an in-memory sequence of characters."""

from __future__ import annotations


class CharArrayReader:
    """Reads characters from a copy of ``chars`` or a slice of it.

    ``read`` returns character codes and -1 at the end. ``mark(n)`` sets the
    reset position to ``n`` itself.
    """

    def __init__(self, chars, offset: int | None = None, length: int | None = None) -> None:
        text = chars if isinstance(chars, str) else "".join(chars)
        if offset is not None or length is not None:
            offset = offset or 0
            if length is None:
                length = len(text) - offset
            if offset < 0 or length < 0 or offset > len(text) or offset + length > len(text):
                raise ValueError("Invalid offset or length")
            text = text[offset:offset + length]
        self._chars = text
        self._pos = 0
        self._mark = 0

    def read(self) -> int:
        """Return the next character's code, or -1 at the end."""
        if self._pos >= len(self._chars):
            return -1
        ch = self._chars[self._pos]
        self._pos += 1
        return ord(ch)

    def readinto(self, buffer: list, offset: int = 0, length: int | None = None) -> int:
        """Copy characters into the list ``buffer``; -1 once nothing is left."""
        if self._pos >= len(self._chars):
            return -1
        if length is None:
            length = len(buffer) - offset
        if offset < 0 or length < 0 or offset >= len(buffer) or offset + length > len(buffer):
            raise IndexError("Invalid offset or length for target buffer")
        count = min(length, len(self._chars) - self._pos)
        buffer[offset:offset + count] = list(self._chars[self._pos:self._pos + count])
        self._pos += count
        return count

    def skip(self, n: int) -> int:
        count = min(n, len(self._chars) - self._pos)
        self._pos += count
        return count

    def ready(self) -> bool:
        return self._pos < len(self._chars)

    def mark_supported(self) -> bool:
        return True

    def mark(self, read_ahead_limit: int) -> None:
        self._mark = read_ahead_limit

    def reset(self) -> None:
        self._pos = self._mark

    def close(self) -> None:
        """Drop the characters; the reader then behaves as empty."""
        self._chars = ""
        self._pos = 0
        self._mark = 0