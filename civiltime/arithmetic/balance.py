"""Date balancing, regulation and calendar-aware addition.

Balancing carries out-of-range fields into the next coarser unit, so
month 13 becomes January of the next year and day 0 becomes the last
day of the previous month. Regulation applies an Overflow policy to a
date whose month and day may be out of range.

Examples:
    balance_date(2023, 1, 32)                -> YMD(2023, 2, 1)
    constrain_date(2024, 2, 30)              -> YMD(2024, 2, 29)
    add_date(2023, 1, 31, months=1)          -> YMD(2023, 2, 28)
    add_date(2024, 2, 29, years=1, days=1)   -> YMD(2025, 3, 1)
"""

from __future__ import annotations

from typing import Callable

from civiltime._internal.constants import DAYS_PER_WEEK, MONTHS_PER_YEAR
from civiltime.core.calendar import days_in_month, days_in_year
from civiltime.core.values import YM, YMD
from civiltime.units.overflow import Overflow

DateValidator = Callable[[int, int, int], None]


def balance_year_month(year: int, month: int) -> YM:
    """Carry an arbitrary month into the year so that month is in 1-12.

    Args:
        year: The year.
        month: Any month number, including zero and negatives.

    Returns:
        The balanced YM.

    Examples:
        >>> balance_year_month(2023, 13)
        YM(year=2024, month=1)
        >>> balance_year_month(2023, 0)
        YM(year=2022, month=12)
        >>> balance_year_month(2023, -13)
        YM(year=2021, month=11)
    """
    # Zero-based month; floor division keeps the remainder in 0-11
    years, month0 = divmod(month - 1, MONTHS_PER_YEAR)
    return YM(year + years, month0 + 1)


def balance_date(year: int, month: int, day: int) -> YMD:
    """Normalize a date whose month or day may be out of range.

    The month is balanced first. Whole years are then moved out of day,
    then whole months, one at a time, until the day fits its month.

    Args:
        year: The year.
        month: Any month number.
        day: Any day number, including zero and negatives.

    Returns:
        The canonical YMD.

    Examples:
        >>> balance_date(2023, 1, 32)
        YMD(year=2023, month=2, day=1)
        >>> balance_date(2023, 3, 0)
        YMD(year=2023, month=2, day=28)
    """
    ym = balance_year_month(year, month)
    year, month = ym.year, ym.month

    # A span of one year starting in this month crosses the February of
    # test_year, so that year decides whether the span has 366 days
    test_year = year if month > 2 else year - 1

    while day < -days_in_year(test_year):
        day += days_in_year(test_year)
        year -= 1
        test_year -= 1

    test_year += 1

    while day > days_in_year(test_year):
        day -= days_in_year(test_year)
        year += 1
        test_year += 1

    while day < 1:
        ym = balance_year_month(year, month - 1)
        year, month = ym.year, ym.month
        day += days_in_month(year, month)

    while day > days_in_month(year, month):
        day -= days_in_month(year, month)
        ym = balance_year_month(year, month + 1)
        year, month = ym.year, ym.month

    return YMD(year, month, day)


def constrain_to_range(value: int, minimum: int, maximum: int) -> int:
    """Clamp value to [minimum, maximum]."""
    return min(maximum, max(minimum, value))


def constrain_date(year: int, month: int, day: int) -> YMD:
    """Clamp month to 1-12, then day to the clamped month's length.

    Examples:
        >>> constrain_date(2023, 13, 1)
        YMD(year=2023, month=12, day=1)
        >>> constrain_date(2024, 2, 30)
        YMD(year=2024, month=2, day=29)
    """
    month = constrain_to_range(month, 1, 12)
    day = constrain_to_range(day, 1, days_in_month(year, month))
    return YMD(year, month, day)


def regulate_date(
    year: int,
    month: int,
    day: int,
    overflow: Overflow | str = Overflow.CONSTRAIN,
    reject: DateValidator | None = None,
) -> YMD:
    """Apply an overflow policy to a possibly invalid date.

    Under Overflow.CONSTRAIN the date is clamped with constrain_date.
    Under Overflow.REJECT the fields are returned unchanged; when a
    ``reject`` validator is given it is called first, and whatever it
    raises propagates to the caller. No validator runs by default.

    Args:
        year: The year.
        month: The month, possibly out of range.
        day: The day, possibly out of range.
        overflow: The policy, as an Overflow or its name.
        reject: Optional validator called as reject(year, month, day)
            under Overflow.REJECT, e.g. civiltime.reject_date.

    Returns:
        The regulated YMD.
    """
    overflow = Overflow.parse(overflow)
    if overflow.is_constrain:
        return constrain_date(year, month, day)

    if reject is not None:
        reject(year, month, day)
    return YMD(year, month, day)


def add_date(
    year: int,
    month: int,
    day: int,
    years: int = 0,
    months: int = 0,
    weeks: int = 0,
    days: int = 0,
    overflow: Overflow | str = Overflow.CONSTRAIN,
    reject: DateValidator | None = None,
) -> YMD:
    """Add calendar units to a date.

    The components are applied in order:
    1. Years and months, then the year/month pair is balanced
    2. The overflow policy, so the day is regulated against the
       target month
    3. Weeks and days, then the whole date is balanced

    Args:
        year, month, day: The starting date.
        years, months, weeks, days: Signed amounts to add.
        overflow: Policy for a day that does not fit the target month.
        reject: Optional validator used under Overflow.REJECT.

    Returns:
        The resulting YMD.

    Examples:
        >>> add_date(2023, 1, 31, months=1)
        YMD(year=2023, month=2, day=28)
        >>> add_date(2024, 1, 1, weeks=-1)
        YMD(year=2023, month=12, day=25)
    """
    ym = balance_year_month(year + years, month + months)
    ymd = regulate_date(ym.year, ym.month, day, overflow, reject)
    day = ymd.day + DAYS_PER_WEEK * weeks + days
    return balance_date(ymd.year, ymd.month, day)


__all__ = [
    "DateValidator",
    "balance_year_month",
    "balance_date",
    "constrain_to_range",
    "constrain_date",
    "regulate_date",
    "add_date",
]
