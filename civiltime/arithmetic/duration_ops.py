"""Duration normalization.

This module converts a days-through-nanoseconds duration into a single
nanosecond total, splits totals into whole days, and redistributes a
nanosecond magnitude across the clock fields up to a largest unit.

Days always count as exactly 24 hours here. Totals are expected to fit a
signed 64-bit nanosecond count (I64_MIN to I64_MAX, about 292 years);
this is not checked.
"""

from __future__ import annotations

from civiltime._internal.constants import (
    HOURS_PER_DAY,
    MICROS_PER_MILLISECOND,
    MILLIS_PER_SECOND,
    MINUTES_PER_HOUR,
    NANOS_PER_DAY,
    NANOS_PER_MICROSECOND,
    SECONDS_PER_MINUTE,
)
from civiltime._internal.trace import TraceSink, emit
from civiltime.core.duration import Duration
from civiltime.core.values import NanoDays
from civiltime.units.timeunit import TimeUnit


def total_duration_nanoseconds(
    days: int,
    hours: int,
    minutes: int,
    seconds: int,
    milliseconds: int,
    microseconds: int,
    nanoseconds: int,
) -> int:
    """Return the signed total of a duration in nanoseconds.

    Examples:
        >>> total_duration_nanoseconds(1, 0, 0, 0, 0, 0, 0)
        86400000000000
        >>> total_duration_nanoseconds(0, 0, 0, 1, -1, 0, 0)
        999000000
    """
    total = days * HOURS_PER_DAY + hours
    total = total * MINUTES_PER_HOUR + minutes
    total = total * SECONDS_PER_MINUTE + seconds
    total = total * MILLIS_PER_SECOND + milliseconds
    total = total * MICROS_PER_MILLISECOND + microseconds
    return total * NANOS_PER_MICROSECOND + nanoseconds


def nanoseconds_to_days(nanoseconds: int) -> NanoDays:
    """Split a nanosecond count into whole days and a remainder.

    Division truncates toward zero, so the remainder takes the sign of
    the input and day_length_ns is negated for negative input.

    Examples:
        >>> nanoseconds_to_days(0)
        NanoDays(days=0, nanoseconds=0, day_length_ns=86400000000000)
        >>> nanoseconds_to_days(-1)
        NanoDays(days=0, nanoseconds=-1, day_length_ns=-86400000000000)
    """
    sign = (nanoseconds > 0) - (nanoseconds < 0)
    if sign == 0:
        return NanoDays(0, 0, NANOS_PER_DAY)

    days, remainder = divmod(abs(nanoseconds), NANOS_PER_DAY)
    return NanoDays(sign * days, sign * remainder, sign * NANOS_PER_DAY)


def balance_duration(
    days: int,
    hours: int,
    minutes: int,
    seconds: int,
    milliseconds: int,
    microseconds: int,
    nanoseconds: int,
    largest_unit: TimeUnit | str,
    trace: TraceSink | None = None,
) -> Duration:
    """Redistribute a duration across its fields up to largest_unit.

    For a largest unit of DAYS or coarser, the whole duration is folded
    into nanoseconds, whole days are split off, and the remainder is
    spread over hours down to nanoseconds.

    For HOURS or finer, days come out as zero and only the
    ``nanoseconds`` argument is spread over the fields up to the largest
    unit; the other fields are dropped. The nanosecond total is still
    computed and traced.

    Every populated field carries the same sign. Years, months and weeks
    are always zero, since balancing them needs a calendar.

    Args:
        days, hours, minutes, seconds, milliseconds, microseconds,
        nanoseconds: The signed input fields.
        largest_unit: Coarsest unit to fill, as a TimeUnit or a name.
        trace: Optional sink receiving the nanosecond total and, for
            date units, the day count.

    Returns:
        A new Duration.

    Examples:
        >>> balance_duration(0, 0, 0, 0, 0, 0, 90_061_000_000_001, "days")
        Duration(days=1, hours=1, minutes=1, seconds=1, nanoseconds=1)
        >>> balance_duration(0, 0, 0, 0, 0, 0, -1_500_000, "seconds")
        Duration(milliseconds=-1, microseconds=-500)
    """
    largest_unit = TimeUnit.parse(largest_unit)

    total = total_duration_nanoseconds(
        days, hours, minutes, seconds, milliseconds, microseconds, nanoseconds
    )
    emit(trace, str(total))

    if largest_unit.is_date_unit:
        split = nanoseconds_to_days(total)
        days = split.days
        nanoseconds = split.nanoseconds
        emit(trace, str(days))
    else:
        days = 0

    sign = -1 if nanoseconds < 0 else 1
    nanoseconds = abs(nanoseconds)
    hours = minutes = seconds = milliseconds = microseconds = 0

    # Magnitudes are non-negative, so divmod truncates like the
    # reference integer division
    if largest_unit <= TimeUnit.MICROSECONDS:
        microseconds, nanoseconds = divmod(nanoseconds, NANOS_PER_MICROSECOND)
    if largest_unit <= TimeUnit.MILLISECONDS:
        milliseconds, microseconds = divmod(microseconds, MICROS_PER_MILLISECOND)
    if largest_unit <= TimeUnit.SECONDS:
        seconds, milliseconds = divmod(milliseconds, MILLIS_PER_SECOND)
    if largest_unit <= TimeUnit.MINUTES:
        minutes, seconds = divmod(seconds, SECONDS_PER_MINUTE)
    if largest_unit <= TimeUnit.HOURS:
        hours, minutes = divmod(minutes, MINUTES_PER_HOUR)

    result = Duration(0, 0, 0, days, sign * hours, sign * minutes, sign * seconds)
    result.milliseconds = sign * milliseconds
    result.microseconds = sign * microseconds
    result.nanoseconds = sign * nanoseconds
    return result


__all__ = [
    "total_duration_nanoseconds",
    "nanoseconds_to_days",
    "balance_duration",
]
