"""Byte streams backed by files."""

from __future__ import annotations

import os

from .output_stream import OutputStream, _check_byte


class FileInputStream:
    """Reads bytes from a file. ``read`` gives -1 at the end of the file."""

    def __init__(self, path: str | os.PathLike) -> None:
        if not os.path.exists(path):
            raise FileNotFoundError(f"File does not exist: {os.fspath(path)}")
        if os.path.isdir(path):
            raise IsADirectoryError(f"Path is a directory: {os.fspath(path)}")
        self._file = open(path, "rb")
        self.name = os.fspath(path)

    def read(self) -> int:
        """Return the next byte, or -1 at the end of the file."""
        chunk = self._file.read(1)
        return chunk[0] if chunk else -1

    def readinto(self, buffer: bytearray, offset: int = 0, length: int | None = None) -> int:
        """Read up to ``length`` bytes into ``buffer`` at ``offset``; return the count."""
        if length is None:
            length = len(buffer) - offset
        if offset < 0 or length < 0 or offset + length > len(buffer):
            raise ValueError("Invalid buffer, offset, or length.")
        data = self._file.read(length)
        buffer[offset:offset + len(data)] = data
        return len(data)

    def skip(self, n: int) -> int:
        self._file.seek(n, os.SEEK_CUR)
        return n

    def available(self) -> int:
        current = self._file.tell()
        end = self._file.seek(0, os.SEEK_END)
        self._file.seek(current, os.SEEK_SET)
        return end - current

    def mark_supported(self) -> bool:
        return False

    def close(self) -> None:
        if not self._file.closed:
            self._file.close()

    def __enter__(self) -> "FileInputStream":
        return self

    def __exit__(self, *args) -> None:
        self.close()


class FileOutputStream(OutputStream):
    """Writes bytes to a file, truncating it unless ``append`` is set."""

    def __init__(self, path: str | os.PathLike, append: bool = False) -> None:
        if os.path.isdir(path):
            raise IsADirectoryError(f"Path is a directory: {os.fspath(path)}")
        self._file = open(path, "ab" if append else "wb")
        self.name = os.fspath(path)

    def _ensure_writable(self) -> None:
        if self._file.closed:
            raise OSError("Stream is not writable.")

    def write_byte(self, value: int) -> None:
        self._ensure_writable()
        self._file.write(bytes((_check_byte(value),)))

    def write(self, data, offset: int = 0, length: int | None = None) -> None:
        if length is None:
            length = len(data) - offset
        if offset < 0 or offset > len(data) or length < 0 or length > len(data) - offset:
            raise ValueError("Invalid buffer, offset, or length.")
        self._ensure_writable()
        self._file.write(bytes(data[offset:offset + length]))

    def flush(self) -> None:
        self._ensure_writable()
        self._file.flush()

    def close(self) -> None:
        if not self._file.closed:
            self._file.close()