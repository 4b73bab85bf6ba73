"""Calendar dates with day stepping and a day count since year zero."""

from __future__ import annotations

import datetime
import re
from dataclasses import dataclass
from functools import total_ordering

_DAYS_IN_MONTH = (31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
_INT_PREFIX = re.compile(r"\s*[+-]?\d+")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


class DateError(ValueError):
    """Raised for a date that is malformed or does not exist."""


def is_leap_year(year: int) -> bool:
    """Return True for a Gregorian leap year."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def _month_length(month: int, year: int) -> int:
    if month == 2 and not is_leap_year(year):
        return 28
    return _DAYS_IN_MONTH[month - 1]


def _to_int(text: str) -> int:
    match = _INT_PREFIX.match(text)
    if match is None:
        raise DateError("Invalid_argument of date!")
    value = int(match.group())
    if not _INT_MIN <= value <= _INT_MAX:
        raise DateError("Out_of_range of date!")
    return value


@total_ordering
@dataclass(frozen=True)
class Date:
    """A day of the Gregorian calendar."""

    day: int = 1
    month: int = 1
    year: int = 2000

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise DateError("Invalid month!")
        if not 1 <= self.day <= _month_length(self.month, self.year):
            raise DateError("Invalid day!")

    @classmethod
    def parse(cls, text: str) -> Date:
        """Parse a date written as ``day.month.year``."""
        parts = text.split(".", 2)
        if len(parts) != 3:
            raise DateError("Invalid_argument of date!")
        day, month, year = (_to_int(part) for part in parts)
        return cls(day, month, year)

    @classmethod
    def today(cls) -> Date:
        """Return the current local date."""
        now = datetime.date.today()
        return cls(now.day, now.month, now.year)

    def next_day(self) -> Date:
        """Return the following day."""
        day, month, year = self.day + 1, self.month, self.year
        if day > _month_length(month, year):
            day = 1
            month += 1
        if month > 12:
            month = 1
            year += 1
        return Date(day, month, year)

    def previous_day(self) -> Date:
        """Return the preceding day."""
        day, month, year = self.day - 1, self.month, self.year
        if day < 1:
            if month > 1:
                month -= 1
            else:
                month = 12
                year -= 1
            day = _month_length(month, year)
        return Date(day, month, year)

    def days(self) -> int:
        """Return the number of days counted from the start of year zero."""
        total = self.day + sum(_DAYS_IN_MONTH[: self.month - 1])
        if self.month > 2 and not is_leap_year(self.year):
            total -= 1
        years = max(self.year, 0)
        centuries4, years = divmod(years, 400)
        centuries, years = divmod(years, 100)
        quads, years = divmod(years, 4)
        return total + centuries4 * 146096 + centuries * 36523 + quads * 1461 + years * 365

    def _key(self) -> tuple[int, int, int]:
        return (self.year, self.month, self.day)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() < other._key()

    def __str__(self) -> str:
        return f"{self.day}.{self.month}.{self.year}"


def difference(lhs: Date, rhs: Date) -> int:
    """Return the number of days from ``rhs`` to ``lhs``."""
    return lhs.days() - rhs.days()