"""Value objects returned by calendar and duration arithmetic.

These are small immutable records with structural equality:
    - YMD: a (year, month, day) calendar date
    - YM: a (year, month) pair
    - NanoDays: whole days and a sub-day remainder split from nanoseconds
"""

from __future__ import annotations

from dataclasses import dataclass

from civiltime._internal.constants import NANOS_PER_DAY


@dataclass(frozen=True)
class YMD:
    """A calendar date as plain year, month and day fields.

    Instances are canonical when month is in 1-12 and day is within the
    month's length. Balancing may build non-canonical instances only as
    intermediate values; every public operation returns canonical ones
    except regulate_date under Overflow.REJECT, which returns its input.

    Examples:
        >>> YMD(2024, 2, 29).is_canonical
        True
        >>> YMD(2023, 2, 29).is_canonical
        False
    """

    year: int
    month: int
    day: int

    @property
    def is_canonical(self) -> bool:
        """Return True if month and day are within their ranges."""
        from civiltime.core.calendar import days_in_month

        if self.month < 1 or self.month > 12:
            return False
        return 1 <= self.day <= days_in_month(self.year, self.month)

    def as_tuple(self) -> tuple[int, int, int]:
        """Return the fields as a (year, month, day) tuple."""
        return (self.year, self.month, self.day)


@dataclass(frozen=True)
class YM:
    """A year and month pair, canonical when month is in 1-12."""

    year: int
    month: int

    def as_tuple(self) -> tuple[int, int]:
        return (self.year, self.month)


@dataclass(frozen=True)
class NanoDays:
    """Whole 24-hour days and a remainder split from a nanosecond count.

    Attributes:
        days: Whole days, truncated toward zero.
        nanoseconds: Remainder with the same sign as the input,
            |nanoseconds| < 86_400_000_000_000.
        day_length_ns: Length of one day carrying the input's sign.
            Positive when the input is zero.
    """

    days: int
    nanoseconds: int
    day_length_ns: int = NANOS_PER_DAY


__all__ = [
    "YMD",
    "YM",
    "NanoDays",
]
