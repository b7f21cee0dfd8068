"""civiltime: Civil calendar arithmetic for Temporal-style date libraries.

civiltime computes calendar facts in the proleptic Gregorian calendar,
balances and regulates out-of-range dates, adds calendar units to dates,
and normalizes multi-unit durations down to nanoseconds.

Calendar Facts:
    leap_year, days_in_year, days_in_month, day_of_year,
    day_of_week (ISO, 1=Monday), week_of_year (ISO 8601)

Date Arithmetic:
    balance_year_month, balance_date, constrain_to_range,
    constrain_date, regulate_date, add_date

Duration Arithmetic:
    total_duration_nanoseconds, nanoseconds_to_days, balance_duration

Types:
    YMD, YM, NanoDays: Immutable value records
    Duration: Ten-field duration record
    Overflow: REJECT/CONSTRAIN policy
    TimeUnit: Duration units from YEARS to NANOSECONDS

Exceptions:
    CivilTimeError: Base exception
    ValidationError: Rejected date fields
    ParseError: Unknown enumeration name

Example:
    >>> from civiltime import Overflow, TimeUnit, add_date, balance_duration
    >>> add_date(2023, 1, 31, months=1, overflow=Overflow.CONSTRAIN)
    YMD(year=2023, month=2, day=28)
    >>> balance_duration(0, 0, 0, 0, 0, 0, 3_600_000_000_000, TimeUnit.DAYS)
    Duration(hours=1)
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core types and calendar facts
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

# Units
from civiltime.units.overflow import Overflow
from civiltime.units.timeunit import TimeUnit

# Arithmetic
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

# Hooks
from civiltime._internal.trace import TraceSink, logging_sink
from civiltime._internal.validation import reject_date

# Exceptions
from civiltime.errors import CivilTimeError, ParseError, ValidationError

__all__: list[str] = [
    "__version__",
    # Types
    "YMD",
    "YM",
    "NanoDays",
    "Duration",
    "Overflow",
    "TimeUnit",
    # Calendar facts
    "leap_year",
    "days_in_year",
    "days_in_month",
    "day_of_year",
    "day_of_week",
    "week_of_year",
    # Date arithmetic
    "DateValidator",
    "balance_year_month",
    "balance_date",
    "constrain_to_range",
    "constrain_date",
    "regulate_date",
    "add_date",
    # Duration arithmetic
    "total_duration_nanoseconds",
    "nanoseconds_to_days",
    "balance_duration",
    # Hooks
    "TraceSink",
    "logging_sink",
    "reject_date",
    # Exceptions
    "CivilTimeError",
    "ValidationError",
    "ParseError",
]
