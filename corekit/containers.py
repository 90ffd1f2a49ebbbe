"""Random containers of numbers drawn uniformly from a range."""

from __future__ import annotations

import random
from collections import Counter, deque

_RNG = random.Random()


def _check(min_value, max_value, size: int) -> None:
    if min_value > max_value or size < 0:
        raise ValueError("ContainerGenerator: invalid parameters")


def _next_value(min_value, max_value, rng: random.Random):
    if isinstance(min_value, int) and isinstance(max_value, int):
        return rng.randint(min_value, max_value)
    if isinstance(min_value, (int, float)) and isinstance(max_value, (int, float)):
        return rng.uniform(float(min_value), float(max_value))
    raise TypeError("unsupported type")


def _values(min_value, max_value, size: int, rng):
    _check(min_value, max_value, size)
    rng = rng or _RNG
    return (_next_value(min_value, max_value, rng) for _ in range(size))


def _pairs(min_key, max_key, min_value, max_value, size: int, rng):
    _check(min_key, max_key, size)
    _check(min_value, max_value, size)
    rng = rng or _RNG
    for _ in range(size):
        key = _next_value(min_key, max_key, rng)
        yield key, _next_value(min_value, max_value, rng)


def generate_list(min_value, max_value, size: int, rng: random.Random | None = None) -> list:
    """Return ``size`` values; integers for integer bounds, floats otherwise."""
    return list(_values(min_value, max_value, size, rng))


def generate_deque(min_value, max_value, size: int, rng: random.Random | None = None) -> deque:
    return deque(_values(min_value, max_value, size, rng))


def generate_array(min_value, max_value, size: int, rng: random.Random | None = None) -> tuple:
    """Return a fixed-length tuple of ``size`` values."""
    return tuple(_values(min_value, max_value, size, rng))


def generate_set(min_value, max_value, size: int, rng: random.Random | None = None) -> set:
    """Return the distinct values among ``size`` draws."""
    return set(_values(min_value, max_value, size, rng))


def generate_multiset(min_value, max_value, size: int, rng: random.Random | None = None) -> Counter:
    """Return ``size`` draws counted by value."""
    return Counter(_values(min_value, max_value, size, rng))


def generate_map(min_key, max_key, min_value, max_value, size: int, rng: random.Random | None = None) -> dict:
    """Return a mapping of ``size`` drawn pairs; a repeated key keeps its first value."""
    result: dict = {}
    for key, value in _pairs(min_key, max_key, min_value, max_value, size, rng):
        result.setdefault(key, value)
    return result


def generate_multimap(min_key, max_key, min_value, max_value, size: int, rng: random.Random | None = None) -> list:
    """Return ``size`` drawn pairs ordered by key, equal keys in drawing order."""
    pairs = list(_pairs(min_key, max_key, min_value, max_value, size, rng))
    pairs.sort(key=lambda pair: pair[0])
    return pairs