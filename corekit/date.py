"""A point in time with millisecond resolution, read in local time."""

from __future__ import annotations

import functools
import time

_FORMAT = "%Y-%m-%d %H:%M:%S"


@functools.total_ordering
class Date:
    """Milliseconds since the epoch; calendar fields use the local time zone."""

    __slots__ = ("_millis",)

    def __init__(self, timestamp: int | None = None) -> None:
        """Create a date from ``timestamp`` in milliseconds, or for now."""
        if timestamp is None:
            timestamp = time.time_ns() // 1_000_000
        self._millis = int(timestamp)

    @staticmethod
    def of(year: int, month: int, day: int, hours: int = 0, minutes: int = 0, seconds: int = 0) -> "Date":
        """Build a date from local calendar fields.

        Days past the end of the month roll over into the next one.
        """
        if not (1 <= month <= 12 and 1 <= day <= 31):
            raise ValueError("Invalid date components.")
        if not (0 <= hours <= 23 and 0 <= minutes <= 59 and 0 <= seconds <= 59):
            raise ValueError("Invalid date-time components.")
        epoch_seconds = time.mktime((year, month, day, hours, minutes, seconds, 0, 0, -1))
        return Date(int(epoch_seconds) * 1000)

    def clone(self) -> "Date":
        return Date(self._millis)

    def after(self, other: "Date") -> bool:
        return self._millis > other._millis

    def before(self, other: "Date") -> bool:
        return self._millis < other._millis

    @property
    def time(self) -> int:
        """Milliseconds since the epoch."""
        return self._millis

    def _local(self) -> time.struct_time:
        return time.localtime(self._millis // 1000)

    @property
    def year(self) -> int:
        return self._local().tm_year

    @property
    def month(self) -> int:
        return self._local().tm_mon

    @property
    def day(self) -> int:
        return self._local().tm_mday

    def __str__(self) -> str:
        return time.strftime(_FORMAT, self._local())

    def __repr__(self) -> str:
        return f"Date({self._millis})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._millis == other._millis

    def __lt__(self, other: "Date") -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._millis < other._millis

    def __hash__(self) -> int:
        return hash(self._millis)