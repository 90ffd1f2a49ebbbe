"""Input stream and reader wrappers that delegate to another source."""

from __future__ import annotations

_UNAVAILABLE = "Input stream is not available"


class FilterInputStream:
    """Forwards every call to a wrapped byte input stream."""

    def __init__(self, source) -> None:
        self._source = source

    def _require(self):
        if self._source is None:
            raise RuntimeError(_UNAVAILABLE)
        return self._source

    def available(self) -> int:
        return self._require().available()

    def mark(self, read_limit: int) -> None:
        self._require().mark(read_limit)

    def mark_supported(self) -> bool:
        if self._source is None:
            return False
        return self._source.mark_supported()

    def read(self) -> int:
        return self._require().read()

    def readinto(self, buffer, offset: int = 0, length: int | None = None) -> int:
        return self._require().readinto(buffer, offset, length)

    def reset(self) -> None:
        self._require().reset()

    def skip(self, n: int) -> int:
        return self._require().skip(n)

    def close(self) -> None:
        self._require().close()


class FilterReader:
    """Forwards every call to a wrapped character reader."""

    def __init__(self, source) -> None:
        self._source = source

    def close(self) -> None:
        self._source.close()

    def mark(self, read_ahead_limit: int) -> None:
        self._source.mark(read_ahead_limit)

    def mark_supported(self) -> bool:
        return self._source.mark_supported()

    def read(self) -> int:
        return self._source.read()

    def readinto(self, buffer, offset: int = 0, length: int | None = None) -> int:
        if length is not None and offset + length > len(buffer):
            raise IndexError("Buffer overflow detected.")
        return self._source.readinto(buffer, offset, length)

    def ready(self) -> bool:
        return self._source.ready()

    def reset(self) -> None:
        self._source.reset()

    def skip(self, n: int) -> int:
        return self._source.skip(n)