"""Calendar slots identified by year, month, day and hour."""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from datetime import datetime, timedelta

_EPOCH = datetime(1970, 1, 1)


def _days_from_civil(year: int, month: int, day: int) -> int:
    """Days since 1970-01-01 for a proleptic Gregorian date (month 1..12)."""
    year -= month <= 2
    era = year // 400
    year_of_era = year - era * 400
    day_of_year = (153 * (month + (-3 if month > 2 else 9)) + 2) // 5 + day - 1
    day_of_era = (
        year_of_era * 365 + year_of_era // 4 - year_of_era // 100 + day_of_year
    )
    return era * 146097 + day_of_era - 719468


@dataclass
class TimeSlot:
    """A point in time at hour resolution.

    Out-of-range months, days and hours are carried over into the next
    unit when the slot is compared or converted, as a calendar would.
    """

    hour: int = 0
    year: int = 0
    day: int = 0
    month: int = 0

    def __post_init__(self) -> None:
        if min(self.hour, self.year, self.day, self.month) < 0:
            warnings.warn(
                "negative values given for a time slot; all fields reset to 0",
                UserWarning,
                stacklevel=3,
            )
            self.hour = self.year = self.day = self.month = 0

    @classmethod
    def from_number(cls, number: int) -> TimeSlot:
        """Build a slot from a YYYYMMDDHH integer."""
        return cls(
            hour=number % 100,
            year=number // 1000000,
            day=(number // 100) % 100,
            month=(number // 10000) % 100,
        )

    def numeric(self) -> int:
        """The slot as a YYYYMMDDHH integer."""
        return self.year * 1000000 + self.month * 10000 + self.day * 100 + self.hour

    def _hours_since_epoch(self) -> int:
        months = self.year * 12 + (self.month - 1)
        year, month_index = divmod(months, 12)
        days = _days_from_civil(year, month_index + 1, 1) + (self.day - 1)
        return days * 24 + self.hour

    def is_before(self, other: TimeSlot) -> bool:
        """Whether this slot lies strictly earlier than ``other``."""
        return self._hours_since_epoch() < other._hours_since_epoch()

    def to_datetime(self) -> datetime:
        """The normalised slot as a naive datetime.

        Raises ValueError when the slot falls outside datetime's range.
        """
        try:
            return _EPOCH + timedelta(hours=self._hours_since_epoch())
        except OverflowError as exc:
            raise ValueError(f"time slot {self!r} is out of range") from exc