"""Fixed-capacity typed buffers with a position and a limit."""

from __future__ import annotations

from array import array


class BufferOverflowError(OverflowError):
    """Raised when a put does not fit before the limit."""


class BufferUnderflowError(ArithmeticError):
    """Raised when a get asks for more than is left before the limit."""


class Buffer:
    """Common position, limit and capacity bookkeeping."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("Capacity cannot be negative")
        self._capacity = capacity
        self._limit = capacity
        self._position = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def limit(self) -> int:
        return self._limit

    @limit.setter
    def limit(self, value: int) -> None:
        if not 0 <= value <= self._capacity:
            raise ValueError("Limit out of range")
        self._limit = value
        if self._position > value:
            self._position = value

    @property
    def position(self) -> int:
        return self._position

    @position.setter
    def position(self, value: int) -> None:
        if not 0 <= value <= self._limit:
            raise ValueError("Position out of range")
        self._position = value

    def remaining(self) -> int:
        return self._limit - self._position

    def has_remaining(self) -> bool:
        return self._position < self._limit

    def rewind(self) -> None:
        self._position = 0


class ByteBuffer(Buffer):
    """A buffer of bytes."""

    def __init__(self, capacity: int) -> None:
        super().__init__(capacity)
        self._data = bytearray(capacity)

    def put(self, value) -> None:
        """Put one byte (an int) or every byte of a bytes-like value."""
        if isinstance(value, int):
            if not self.has_remaining():
                raise BufferOverflowError("Buffer overflow")
            if not 0 <= value <= 0xFF:
                raise ValueError(f"Byte value out of range: {value}")
            self._data[self._position] = value
            self._position += 1
            return
        chunk = bytes(value)
        if len(chunk) > self.remaining():
            raise BufferOverflowError("Insufficient space in buffer")
        self._data[self._position:self._position + len(chunk)] = chunk
        self._position += len(chunk)

    def get(self, length: int | None = None):
        """Return the next byte, or the next ``length`` bytes as ``bytes``."""
        if length is None:
            if not self.has_remaining():
                raise BufferUnderflowError("Buffer underflow")
            value = self._data[self._position]
            self._position += 1
            return value
        if length < 0 or length > self.remaining():
            raise BufferUnderflowError("Insufficient data in buffer")
        result = bytes(self._data[self._position:self._position + length])
        self._position += length
        return result


class DoubleBuffer(Buffer):
    """A buffer of double-precision floats."""

    def __init__(self, capacity: int) -> None:
        super().__init__(capacity)
        self._data = array("d", [0.0]) * capacity

    def put(self, value) -> "DoubleBuffer":
        """Put one number or each number of an iterable, in order."""
        if isinstance(value, (int, float)):
            if self._position >= self._limit:
                raise BufferOverflowError("Buffer overflow: Position exceeds limit.")
            self._data[self._position] = value
            self._position += 1
            return self
        for item in value:
            self.put(item)
        return self

    def get(self) -> float:
        if self._position >= self._limit:
            raise BufferUnderflowError("Buffer underflow: Position exceeds limit.")
        value = self._data[self._position]
        self._position += 1
        return value


class FloatBuffer(Buffer):
    """A buffer of single-precision floats."""

    def __init__(self, capacity: int) -> None:
        super().__init__(capacity)
        self._data = array("f", [0.0]) * capacity

    @staticmethod
    def allocate(capacity: int) -> "FloatBuffer":
        return FloatBuffer(capacity)

    def put(self, value) -> None:
        """Put one number, or all numbers of an iterable if they all fit."""
        if isinstance(value, (int, float)):
            if self._position >= self._limit:
                raise BufferOverflowError("Buffer overflow")
            self._data[self._position] = value
            self._position += 1
            return
        values = list(value)
        if self._position + len(values) > self._limit:
            raise BufferOverflowError("Buffer overflow")
        self._data[self._position:self._position + len(values)] = array("f", values)
        self._position += len(values)

    def get(self, length: int | None = None):
        """Return the next float, or a list of the next ``length`` floats."""
        if length is None:
            if self._position >= self._limit:
                raise BufferUnderflowError("Buffer underflow")
            value = self._data[self._position]
            self._position += 1
            return value
        if length < 0 or self._position + length > self._limit:
            raise BufferUnderflowError("Buffer underflow")
        result = self._data[self._position:self._position + length].tolist()
        self._position += length
        return result


class ShortBuffer(Buffer):
    """A buffer of 16-bit signed integers with relative and absolute access."""

    def __init__(self, capacity: int) -> None:
        super().__init__(capacity)
        self._data = array("h", [0]) * capacity

    @staticmethod
    def wrap(values) -> "ShortBuffer":
        """Return a buffer holding a copy of ``values``."""
        items = array("h", values)
        buffer = ShortBuffer(len(items))
        buffer._data[:] = items
        return buffer

    def get(self, index: int | None = None) -> int:
        """Return the value at the position (advancing it) or at ``index``."""
        if index is None:
            if self._position >= self._limit:
                raise IndexError("Position exceeds limit.")
            value = self._data[self._position]
            self._position += 1
            return value
        if not 0 <= index < self._limit:
            raise IndexError("Index exceeds limit.")
        return self._data[index]

    def put(self, value: int, index: int | None = None) -> None:
        """Store ``value`` at the position (advancing it) or at ``index``."""
        if index is None:
            if self._position >= self._limit:
                raise IndexError("Position exceeds limit.")
            self._data[self._position] = value
            self._position += 1
            return
        if not 0 <= index < self._limit:
            raise IndexError("Index exceeds limit.")
        self._data[index] = value

    def data(self) -> array:
        """Return the underlying storage; changes to it show in the buffer."""
        return self._data