"""An input stream over an in-memory byte sequence."""

from __future__ import annotations


class ByteArrayInputStream:
    """Reads bytes from a copy of ``data``. ``read`` gives -1 at the end.

    ``mark(n)`` sets the reset position to ``n`` (clipped to the data size),
    not to the current position. Closing is recorded but does not stop reads.
    """

    def __init__(self, data) -> None:
        self._data = bytes(data)
        self._pos = 0
        self._mark = 0
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def read(self) -> int:
        if self._pos >= len(self._data):
            return -1
        value = self._data[self._pos]
        self._pos += 1
        return value

    def readinto(self, buffer: bytearray, offset: int = 0, length: int | None = None) -> int:
        """Copy up to ``length`` bytes into ``buffer`` at ``offset``; return the count."""
        if length is None:
            length = len(buffer) - offset
        if offset < 0 or length < 0 or offset + length > len(buffer):
            raise IndexError("Offset and length exceed the size of the buffer")
        if self._pos >= len(self._data):
            return 0
        length = min(length, len(self._data) - self._pos)
        buffer[offset:offset + length] = self._data[self._pos:self._pos + length]
        self._pos += length
        return length

    def skip(self, n: int) -> int:
        count = min(n, self.available())
        self._pos += count
        return count

    def available(self) -> int:
        return len(self._data) - self._pos

    def mark(self, read_ahead_limit: int) -> None:
        self._mark = min(read_ahead_limit, len(self._data))

    def reset(self) -> None:
        self._pos = self._mark

    def mark_supported(self) -> bool:
        return True

    def close(self) -> None:
        """Record that the stream was closed; the data stays readable."""
        self._closed = True