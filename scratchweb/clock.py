"""A 24-hour clock without dates, normalised to minutes past midnight."""

from __future__ import annotations

MINUTES_PER_HOUR = 60
MINUTES_PER_DAY = 24 * MINUTES_PER_HOUR


class Clock:
    """A time of day; any hours and minutes, negative too, wrap into one day."""

    __slots__ = ("_minutes",)

    def __init__(self, hours: int = 0, minutes: int = 0) -> None:
        self._minutes = (hours * MINUTES_PER_HOUR + minutes) % MINUTES_PER_DAY

    @property
    def total_minutes(self) -> int:
        """Minutes past midnight, in ``range(0, 1440)``."""
        return self._minutes

    @property
    def hours(self) -> int:
        return self._minutes // MINUTES_PER_HOUR

    @property
    def minutes(self) -> int:
        return self._minutes % MINUTES_PER_HOUR

    def add_minutes(self, minutes: int) -> "Clock":
        """Return a new clock ``minutes`` later (earlier if negative)."""
        return Clock(0, self._minutes + minutes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Clock):
            return NotImplemented
        return self._minutes == other._minutes

    def __hash__(self) -> int:
        return hash(self._minutes)

    def __repr__(self) -> str:
        return f"Clock({self.hours}, {self.minutes})"

    def __str__(self) -> str:
        return f"{self.hours:02}:{self.minutes:02}"