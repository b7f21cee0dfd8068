"""Duration record holding ten signed unit fields.

This module provides the Duration class that duration balancing fills in.
Unlike a normalized time span, a Duration keeps each unit separately, so
"1 hour 90 minutes" and "2 hours 30 minutes" are different records.
"""

from __future__ import annotations

from typing import Iterator

_FIELDS: tuple[str, ...] = (
    "years",
    "months",
    "weeks",
    "days",
    "hours",
    "minutes",
    "seconds",
    "milliseconds",
    "microseconds",
    "nanoseconds",
)


class Duration:
    """A duration expressed as ten signed integer fields.

    Fields can be set at construction (any subset, the rest default to
    zero) or assigned directly afterwards. The record does not normalize
    or validate its fields; see civiltime.arithmetic.balance_duration for
    that.

    Attributes:
        years, months, weeks, days: Calendar fields.
        hours, minutes, seconds: Clock fields.
        milliseconds, microseconds, nanoseconds: Sub-second fields.

    Examples:
        >>> d = Duration(days=1, hours=2)
        >>> d.hours
        2
        >>> d.milliseconds = 500
        >>> d.sign
        1

        >>> Duration(0, 0, 0, -3).negated()
        Duration(days=3)
    """

    __slots__ = _FIELDS

    def __init__(
        self,
        years: int = 0,
        months: int = 0,
        weeks: int = 0,
        days: int = 0,
        hours: int = 0,
        minutes: int = 0,
        seconds: int = 0,
        milliseconds: int = 0,
        microseconds: int = 0,
        nanoseconds: int = 0,
    ) -> None:
        self.years = years
        self.months = months
        self.weeks = weeks
        self.days = days
        self.hours = hours
        self.minutes = minutes
        self.seconds = seconds
        self.milliseconds = milliseconds
        self.microseconds = microseconds
        self.nanoseconds = nanoseconds

    def fields(self) -> tuple[int, ...]:
        """Return all ten fields, from years to nanoseconds."""
        return tuple(getattr(self, name) for name in _FIELDS)

    def items(self) -> Iterator[tuple[str, int]]:
        """Yield (field name, value) pairs from years to nanoseconds."""
        for name in _FIELDS:
            yield name, getattr(self, name)

    @property
    def sign(self) -> int:
        """Return -1, 0 or 1 from the first nonzero field.

        Balanced durations carry one sign across all fields, so the first
        nonzero field decides it.

        Examples:
            >>> Duration(hours=-1).sign
            -1
            >>> Duration().sign
            0
        """
        for value in self.fields():
            if value < 0:
                return -1
            if value > 0:
                return 1
        return 0

    @property
    def blank(self) -> bool:
        """Return True if every field is zero."""
        return self.sign == 0

    def negated(self) -> Duration:
        """Return a new Duration with every field negated."""
        return Duration(*(-value for value in self.fields()))

    def abs(self) -> Duration:
        """Return a new Duration with every field made non-negative."""
        return Duration(*(abs(value) for value in self.fields()))

    def __neg__(self) -> Duration:
        return self.negated()

    def __abs__(self) -> Duration:
        return self.abs()

    def __eq__(self, other: object) -> bool:
        """Check field-by-field equality with another Duration.

        Examples:
            >>> Duration(hours=1) == Duration(minutes=60)
            False
        """
        if not isinstance(other, Duration):
            return NotImplemented
        return self.fields() == other.fields()

    # Fields are assignable, so instances are unhashable
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        """Return a representation listing the nonzero fields."""
        parts = [f"{name}={value}" for name, value in self.items() if value != 0]
        return f"Duration({', '.join(parts)})"


__all__ = ["Duration"]
