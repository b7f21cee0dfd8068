"""Overflow enumeration for out-of-range date fields.

This module provides the Overflow enum that tells date regulation what
to do with a month or day outside its valid range.
"""

from __future__ import annotations

from enum import Enum

from civiltime.errors import ParseError


class Overflow(Enum):
    """Policy applied when regulating an out-of-range date.

    CONSTRAIN clamps the month to 1-12 and the day to the month's length.
    REJECT leaves the fields as they are and hands them to an optional
    validator supplied by the caller.

    Examples:
        >>> Overflow.parse("constrain")
        <Overflow.CONSTRAIN: 'constrain'>

        >>> Overflow.CONSTRAIN.is_constrain
        True
    """

    REJECT = "reject"
    CONSTRAIN = "constrain"

    @property
    def is_constrain(self) -> bool:
        """Return True if this policy clamps out-of-range fields."""
        return self == Overflow.CONSTRAIN

    @classmethod
    def parse(cls, value: Overflow | str) -> Overflow:
        """Return the Overflow for a member, name or value.

        Matching is case-insensitive.

        Raises:
            ParseError: If the name matches no policy.
        """
        if isinstance(value, Overflow):
            return value
        if not isinstance(value, str):
            raise ParseError(f"overflow must be a name or Overflow, got {value!r}")
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise ParseError(
                f"overflow must be 'reject' or 'constrain', got {value!r}"
            ) from None


__all__ = ["Overflow"]
