"""civiltime exception hierarchy.

All civiltime-specific exceptions inherit from CivilTimeError.
"""

from __future__ import annotations


class CivilTimeError(Exception):
    """Base exception for all civiltime errors."""

    pass


class ValidationError(CivilTimeError):
    """Invalid input values.

    Raised when a calendar value is out of range and the caller asked
    for it to be rejected rather than constrained.

    Examples:
        - Month value outside 1-12
        - Day value outside valid range for month
    """

    pass


class ParseError(CivilTimeError):
    """Failed to interpret a name as an enumeration member.

    Examples:
        - Unknown overflow policy such as "wrap"
        - Unknown duration unit such as "fortnights"
    """

    pass


__all__ = [
    "CivilTimeError",
    "ValidationError",
    "ParseError",
]
