"""Calendar and duration arithmetic.

Date Operations (from civiltime.arithmetic.balance):
    - balance_year_month: Carry an out-of-range month into the year
    - balance_date: Normalize out-of-range month and day
    - constrain_to_range: Clamp an integer
    - constrain_date: Clamp month and day into range
    - regulate_date: Apply an Overflow policy
    - add_date: Add years, months, weeks and days to a date

Duration Operations (from civiltime.arithmetic.duration_ops):
    - total_duration_nanoseconds: Fold days..nanoseconds into nanoseconds
    - nanoseconds_to_days: Split nanoseconds into days and a remainder
    - balance_duration: Redistribute a duration up to a largest unit
"""

from __future__ import annotations

from civiltime.arithmetic.balance import (
    DateValidator,
    add_date,
    balance_date,
    balance_year_month,
    constrain_date,
    constrain_to_range,
    regulate_date,
)
from civiltime.arithmetic.duration_ops import (
    balance_duration,
    nanoseconds_to_days,
    total_duration_nanoseconds,
)

__all__ = [
    # Date operations
    "DateValidator",
    "balance_year_month",
    "balance_date",
    "constrain_to_range",
    "constrain_date",
    "regulate_date",
    "add_date",
    # Duration operations
    "total_duration_nanoseconds",
    "nanoseconds_to_days",
    "balance_duration",
]
