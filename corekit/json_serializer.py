"""Saving and loading objects as JSON files."""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from collections.abc import Mapping, MutableMapping
from typing import Any, TypeVar

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1

T = TypeVar("T", bound="JsonSerializable")


class JsonSerializable(ABC):
    """An object that writes its fields to a JSON object and reads them back."""

    @abstractmethod
    def serialize(self, out: MutableMapping[str, Any]) -> None:
        """Store this object's fields in ``out``."""

    @abstractmethod
    def deserialize(self, data: Mapping[str, Any]) -> None:
        """Set this object's fields from the JSON object ``data``."""


def save_to_json_file(entity: JsonSerializable, filename) -> None:
    """Write ``entity`` to ``filename`` as indented JSON."""
    if not isinstance(entity, JsonSerializable):
        raise TypeError(f"{type(entity).__name__} is not JSON serializable")
    out: dict[str, Any] = {}
    entity.serialize(out)
    text = json.dumps(out, indent=4, ensure_ascii=False)
    with open(filename, "w", encoding="utf-8") as handle:
        handle.write(text)


def load_from_json_file(cls: type[T], filename) -> T:
    """Build a ``cls`` and fill it from the JSON object in ``filename``.

    A document that is not a JSON object leaves the new instance untouched.
    """
    if not (isinstance(cls, type) and issubclass(cls, JsonSerializable)):
        raise TypeError(f"{cls!r} is not a JsonSerializable class")
    entity = cls()
    with open(filename, encoding="utf-8") as handle:
        text = handle.read()
    try:
        document = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError("JSON parse error!") from exc
    if isinstance(document, dict):
        entity.deserialize(document)
    return entity


def _member(data, key: str):
    if isinstance(data, Mapping) and key in data:
        return data[key], True
    return None, False


def get_string_or_default(data, key: str, default: str) -> str:
    value, found = _member(data, key)
    return value if found and isinstance(value, str) else default


def get_int_or_default(data, key: str, default: int) -> int:
    """Return the member if it is an integer fitting in 32 bits."""
    value, found = _member(data, key)
    if found and isinstance(value, int) and not isinstance(value, bool):
        if _INT32_MIN <= value <= _INT32_MAX:
            return value
    return default


def get_double_or_default(data, key: str, default: float) -> float:
    """Return the member only if it is a floating-point number, not an integer."""
    value, found = _member(data, key)
    return value if found and isinstance(value, float) else default


def get_bool_or_default(data, key: str, default: bool) -> bool:
    value, found = _member(data, key)
    return value if found and isinstance(value, bool) else default


def serialize_field(out: MutableMapping[str, Any], key: str, value) -> None:
    """Store a string, integer, float or boolean under ``key``."""
    if not isinstance(value, (str, bool, int, float)):
        raise TypeError(f"Unsupported field type: {type(value).__name__}")
    out[key] = value