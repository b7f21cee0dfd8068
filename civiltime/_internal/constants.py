"""Internal constants for civiltime.

These constants define the unit conversions, month tables, and numeric
limits used throughout the library. This module is not part of the
public API.
"""

from __future__ import annotations

# Time unit conversions
NANOS_PER_MICROSECOND: int = 1_000
NANOS_PER_MILLISECOND: int = 1_000_000
NANOS_PER_SECOND: int = 1_000_000_000
NANOS_PER_MINUTE: int = 60 * NANOS_PER_SECOND
NANOS_PER_HOUR: int = 60 * NANOS_PER_MINUTE
NANOS_PER_DAY: int = 24 * NANOS_PER_HOUR  # 86_400_000_000_000
NANOS_PER_WEEK: int = 7 * NANOS_PER_DAY

MICROS_PER_MILLISECOND: int = 1_000
MILLIS_PER_SECOND: int = 1_000
SECONDS_PER_MINUTE: int = 60
MINUTES_PER_HOUR: int = 60
HOURS_PER_DAY: int = 24
DAYS_PER_WEEK: int = 7
MONTHS_PER_YEAR: int = 12

# Month lengths, indexed by month - 1
DAYS_IN_MONTH: tuple[int, ...] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
DAYS_IN_MONTH_LEAP: tuple[int, ...] = (31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

# Total durations must fit a signed 64-bit nanosecond count
I64_MIN: int = -(2**63)
I64_MAX: int = 2**63 - 1


__all__ = [
    "NANOS_PER_MICROSECOND",
    "NANOS_PER_MILLISECOND",
    "NANOS_PER_SECOND",
    "NANOS_PER_MINUTE",
    "NANOS_PER_HOUR",
    "NANOS_PER_DAY",
    "NANOS_PER_WEEK",
    "MICROS_PER_MILLISECOND",
    "MILLIS_PER_SECOND",
    "SECONDS_PER_MINUTE",
    "MINUTES_PER_HOUR",
    "HOURS_PER_DAY",
    "DAYS_PER_WEEK",
    "MONTHS_PER_YEAR",
    "DAYS_IN_MONTH",
    "DAYS_IN_MONTH_LEAP",
    "I64_MIN",
    "I64_MAX",
]
