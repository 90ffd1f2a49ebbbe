"""Byte output streams: an abstract base and a buffering filter."""

from __future__ import annotations

from abc import ABC, abstractmethod

DEFAULT_BUFFER_SIZE = 8192


def _check_byte(value: int) -> int:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"Byte value out of range: {value}")
    return value


class OutputStream(ABC):
    """A sink for bytes.

    Subclasses implement ``write_byte``, ``flush`` and ``close``; ``write``
    sends a slice of a byte sequence one byte at a time.
    """

    @abstractmethod
    def write_byte(self, value: int) -> None:
        """Write a single byte given as an integer in 0..255."""

    def write(self, data, offset: int = 0, length: int | None = None) -> None:
        """Write ``length`` bytes of ``data`` starting at ``offset``."""
        if length is None:
            length = len(data) - offset
        if offset < 0 or length < 0 or offset + length > len(data):
            raise IndexError("Buffer offset/length out of range")
        for value in data[offset:offset + length]:
            self.write_byte(value)

    @abstractmethod
    def flush(self) -> None:
        """Push buffered output onwards."""

    @abstractmethod
    def close(self) -> None:
        """Release the stream."""

    def __enter__(self) -> "OutputStream":
        return self

    def __exit__(self, *args) -> None:
        self.close()


class BufferedOutputStream(OutputStream):
    """Collects bytes in a fixed-size buffer in front of another stream.

    ``close`` closes the target without flushing; leaving a ``with`` block
    flushes first.
    """

    def __init__(self, target: OutputStream, size: int = DEFAULT_BUFFER_SIZE) -> None:
        if target is None:
            raise ValueError("Output stream cannot be null")
        if size <= 0:
            raise ValueError("Buffer size must be greater than 0")
        self._target = target
        self._size = size
        self._buffer = bytearray()

    def _flush_buffer(self) -> None:
        if self._buffer:
            self._target.write(bytes(self._buffer), 0, len(self._buffer))
            self._buffer.clear()

    def write_byte(self, value: int) -> None:
        if len(self._buffer) >= self._size:
            self._flush_buffer()
        self._buffer.append(_check_byte(value))

    def write(self, data, offset: int = 0, length: int | None = None) -> None:
        if length is None:
            length = len(data) - offset
        if offset < 0 or length < 0 or offset + length > len(data):
            raise IndexError("Data offset/length out of range")
        view = bytes(data[offset:offset + length])
        written = 0
        while written < length:
            if len(self._buffer) == self._size:
                self._flush_buffer()
            count = min(length - written, self._size - len(self._buffer))
            self._buffer.extend(view[written:written + count])
            written += count

    def flush(self) -> None:
        self._flush_buffer()
        self._target.flush()

    def close(self) -> None:
        self._target.close()

    def __exit__(self, *args) -> None:
        try:
            self.flush()
        finally:
            self.close()