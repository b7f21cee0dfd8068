"""Calendar facts for the proleptic Gregorian calendar.

This module provides pure queries over (year, month, day) triples:
leap years, month and year lengths, day of year, ISO day of week and
ISO 8601 week number.

None of these functions balance their input. Callers pass a month in
1-12; use civiltime.arithmetic.balance first for out-of-range fields.
"""

from __future__ import annotations

from civiltime._internal.constants import DAYS_IN_MONTH, DAYS_IN_MONTH_LEAP


def leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check (can be negative for BCE).

    Returns:
        True if the year is a leap year.

    Examples:
        >>> leap_year(2000)  # Divisible by 400
        True
        >>> leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> leap_year(2024)
        True
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return 366 if leap_year(year) else 365


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12). Other values are not checked.

    Returns:
        Number of days in the month.

    Examples:
        >>> days_in_month(2024, 2)
        29
        >>> days_in_month(2023, 2)
        28
    """
    table = DAYS_IN_MONTH_LEAP if leap_year(year) else DAYS_IN_MONTH
    return table[month - 1]


def day_of_year(year: int, month: int, day: int) -> int:
    """Return the 1-based ordinal of a date within its year.

    Examples:
        >>> day_of_year(2024, 3, 1)
        61
    """
    days = day
    for m in range(1, month):
        days += days_in_month(year, m)
    return days


def day_of_week(year: int, month: int, day: int) -> int:
    """Return the ISO weekday of a date (1=Monday, 7=Sunday).

    Uses Zeller's congruence with March as the first month of the
    shifted year, so January and February count against the previous
    year. The month term is floor(2.6*m - 0.2), evaluated exactly in
    integers as (13*m - 1) // 5.

    Examples:
        >>> day_of_week(2024, 1, 1)
        1
        >>> day_of_week(2023, 1, 1)
        7
    """
    m = month + (10 if month < 3 else -2)
    shifted_year = year - (1 if month < 3 else 0)
    century = shifted_year // 100
    y = shifted_year - century * 100

    day_term = day
    month_term = (13 * m - 1) // 5
    year_term = y + y // 4
    century_term = century // 4 - 2 * century

    dow = (day_term + month_term + year_term + century_term) % 7
    return dow if dow > 0 else 7


def week_of_year(year: int, month: int, day: int) -> int:
    """Return the ISO 8601 week number of a date.

    Week 1 is the week holding the year's first Thursday. Dates in early
    January can belong to week 52 or 53 of the previous year, and dates
    in late December can belong to week 1 of the next year.

    Args:
        year: The year.
        month: The month (1-12).
        day: The day of the month.

    Returns:
        The ISO week number (1-53).

    Examples:
        >>> week_of_year(2024, 1, 1)
        1
        >>> week_of_year(2023, 1, 1)  # Sunday, last week of 2022
        52
        >>> week_of_year(2021, 1, 1)  # 2020 has 53 ISO weeks
        53
    """
    doy = day_of_year(year, month, day)
    dow = day_of_week(year, month, day)
    doj = day_of_week(year, 1, 1)

    week = (doy - dow + 10) // 7

    if week < 1:
        # The previous year has 53 weeks when it starts on a Thursday,
        # i.e. this year starts on a Friday (or Saturday after a leap year)
        if doj == 5 or (doj == 6 and leap_year(year - 1)):
            return 53
        return 52

    if week == 53 and days_in_year(year) - doy < 4 - dow:
        return 1

    return week


__all__ = [
    "leap_year",
    "days_in_year",
    "days_in_month",
    "day_of_year",
    "day_of_week",
    "week_of_year",
]
