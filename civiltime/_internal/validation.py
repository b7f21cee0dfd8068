"""Validation utilities for civiltime.

This module provides field validators that raise ValidationError, and
reject_date, an opt-in validator for regulate_date under
Overflow.REJECT.

This module is not part of the public API; reject_date is re-exported
from the package root.
"""

from __future__ import annotations

from civiltime.errors import ValidationError


def validate_month(month: int) -> None:
    """Validate that a month is within 1-12.

    Args:
        month: The month to validate.

    Raises:
        ValidationError: If month is outside 1-12.
    """
    if month < 1 or month > 12:
        raise ValidationError(f"month must be between 1 and 12, got {month}")


def validate_day(year: int, month: int, day: int) -> None:
    """Validate that a day is valid for the given year and month.

    Args:
        year: The year.
        month: The month (1-12).
        day: The day to validate.

    Raises:
        ValidationError: If day is invalid for the month.
    """
    from civiltime.core.calendar import days_in_month

    max_day = days_in_month(year, month)
    if day < 1 or day > max_day:
        raise ValidationError(
            f"day must be between 1 and {max_day} for {year}-{month:02d}, got {day}"
        )


def reject_date(year: int, month: int, day: int) -> None:
    """Raise ValidationError unless (year, month, day) is a canonical date.

    Pass this as the ``reject`` callback of regulate_date or add_date to
    turn Overflow.REJECT into a hard check.

    Examples:
        >>> regulate_date(2023, 2, 30, Overflow.REJECT, reject=reject_date)
        Traceback (most recent call last):
        ...
        ValidationError: day must be between 1 and 28 for 2023-02, got 30
    """
    validate_month(month)
    validate_day(year, month, day)


__all__ = [
    "validate_month",
    "validate_day",
    "reject_date",
]
