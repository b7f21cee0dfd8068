"""Core calendar types and facts.

This module provides:
    - YMD, YM, NanoDays: Immutable value records
    - Duration: Ten-field duration record
    - Calendar facts: leap years, month lengths, weekdays, ISO weeks
"""

from __future__ import annotations

from civiltime.core.calendar import (
    day_of_week,
    day_of_year,
    days_in_month,
    days_in_year,
    leap_year,
    week_of_year,
)
from civiltime.core.duration import Duration
from civiltime.core.values import YM, YMD, NanoDays

__all__: list[str] = [
    # Values
    "YMD",
    "YM",
    "NanoDays",
    "Duration",
    # Calendar facts
    "leap_year",
    "days_in_year",
    "days_in_month",
    "day_of_year",
    "day_of_week",
    "week_of_year",
]
