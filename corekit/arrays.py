"""Helpers for sequences: searching, copying, filling, sorting and printing."""

from __future__ import annotations

from bisect import bisect_left

_MISSING = object()


def as_list(array) -> list:
    """Return a new list with the items of ``array``."""
    return list(array)


def _check_range(from_index: int, to_index: int) -> None:
    if from_index >= to_index:
        raise IndexError("Invalid range")


def binary_search(array, key, from_index=None, to_index=None) -> int:
    """Return the index of ``key`` in the sorted ``array``, or -1.

    With a range, only ``array[from_index:to_index]`` is searched and the
    index returned is still counted from the start of ``array``.
    """
    if from_index is None and to_index is None:
        lo, hi = 0, len(array)
    else:
        lo = 0 if from_index is None else from_index
        hi = len(array) if to_index is None else to_index
        _check_range(lo, hi)
    index = bisect_left(array, key, lo, hi)
    if index != hi and array[index] == key:
        return index
    return -1


def _zero_of(original):
    if not original:
        return None
    try:
        return type(original[0])()
    except TypeError:
        return None


def copy_of(original, new_length: int, default=_MISSING) -> list:
    """Return ``new_length`` items of ``original``, padded with ``default``.

    Without ``default`` the padding is the empty value of the items' type
    (0 for numbers, "" for strings).
    """
    if new_length < 0:
        raise ValueError("New length cannot be negative")
    if default is _MISSING:
        default = _zero_of(original)
    head = list(original[:new_length])
    return head + [default] * (new_length - len(head))


def copy_of_range(original, start: int, end: int) -> list:
    """Return the items of ``original`` from ``start`` up to ``end``."""
    if start > end or start < 0 or end > len(original):
        raise IndexError("Invalid range")
    return list(original[start:end])


def equals(a, b) -> bool:
    """Return whether the two sequences have equal items in the same order."""
    if len(a) != len(b):
        return False
    return all(x == y for x, y in zip(a, b))


def fill(array, value) -> None:
    """Set every item of the mutable sequence ``array`` to ``value``."""
    array[:] = [value] * len(array)


def sort(array, from_index=None, to_index=None) -> None:
    """Sort ``array`` in place, or only ``array[from_index:to_index]``."""
    if from_index is None and to_index is None:
        array[:] = sorted(array)
        return
    lo = 0 if from_index is None else from_index
    hi = len(array) if to_index is None else to_index
    _check_range(lo, hi)
    array[lo:hi] = sorted(array[lo:hi])


def _stream_text(value) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


def to_string(array) -> str:
    """Return the items as ``[a, b, c]``; booleans print as 1 and 0."""
    return "[" + ", ".join(_stream_text(item) for item in array) + "]"


def type_name(value) -> str:
    """Return the readable name of the type of ``value``."""
    cls = type(value)
    if cls.__module__ == "builtins":
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"