"""TimeUnit enumeration for duration granularities.

This module provides the TimeUnit enum representing the ten duration
units from years down to nanoseconds.
"""

from __future__ import annotations

from enum import Enum

from civiltime._internal.constants import (
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
    NANOS_PER_WEEK,
)
from civiltime.errors import ParseError


class TimeUnit(Enum):
    """Duration units, declared from coarsest to finest.

    The declaration order is significant: it decides how far duration
    balancing cascades for a given largest unit. Comparisons follow it,
    so a coarser unit compares less than a finer one.

    Note:
        YEARS and MONTHS have no fixed length. to_nanoseconds() returns
        None for them.

    Examples:
        >>> TimeUnit.HOURS < TimeUnit.MINUTES
        True

        >>> TimeUnit.parse("day")
        <TimeUnit.DAYS: 'days'>

        >>> TimeUnit.MONTHS.to_nanoseconds() is None
        True
    """

    YEARS = "years"
    MONTHS = "months"
    WEEKS = "weeks"
    DAYS = "days"
    HOURS = "hours"
    MINUTES = "minutes"
    SECONDS = "seconds"
    MILLISECONDS = "milliseconds"
    MICROSECONDS = "microseconds"
    NANOSECONDS = "nanoseconds"

    @property
    def rank(self) -> int:
        """Return the position of this unit, 0 for YEARS to 9 for NANOSECONDS."""
        return _RANKS[self]

    @property
    def is_date_unit(self) -> bool:
        """Return True for YEARS, MONTHS, WEEKS and DAYS."""
        return self.rank <= _RANKS[TimeUnit.DAYS]

    def to_nanoseconds(self) -> int | None:
        """Return the length of one unit in nanoseconds.

        Days count as exactly 24 hours.

        Returns:
            Nanoseconds in one unit, or None for YEARS and MONTHS.

        Examples:
            >>> TimeUnit.MINUTES.to_nanoseconds()
            60000000000
        """
        return _LENGTHS[self]

    @classmethod
    def parse(cls, value: TimeUnit | str) -> TimeUnit:
        """Return the TimeUnit for a member or a singular or plural name.

        Raises:
            ParseError: If the name matches no unit.
        """
        if isinstance(value, TimeUnit):
            return value
        if not isinstance(value, str):
            raise ParseError(f"unknown duration unit: {value!r}")
        name = value.strip().lower()
        if not name.endswith("s"):
            name += "s"
        try:
            return cls(name)
        except ValueError:
            raise ParseError(f"unknown duration unit: {value!r}") from None

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, TimeUnit):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, TimeUnit):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, TimeUnit):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, TimeUnit):
            return NotImplemented
        return self.rank >= other.rank


_RANKS: dict[TimeUnit, int] = {unit: index for index, unit in enumerate(TimeUnit)}

_LENGTHS: dict[TimeUnit, int | None] = {
    TimeUnit.YEARS: None,  # Variable length (leap years)
    TimeUnit.MONTHS: None,  # Variable length
    TimeUnit.WEEKS: NANOS_PER_WEEK,
    TimeUnit.DAYS: NANOS_PER_DAY,
    TimeUnit.HOURS: NANOS_PER_HOUR,
    TimeUnit.MINUTES: NANOS_PER_MINUTE,
    TimeUnit.SECONDS: NANOS_PER_SECOND,
    TimeUnit.MILLISECONDS: NANOS_PER_MILLISECOND,
    TimeUnit.MICROSECONDS: NANOS_PER_MICROSECOND,
    TimeUnit.NANOSECONDS: 1,
}


__all__ = ["TimeUnit"]
