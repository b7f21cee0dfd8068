"""Enumerations used by civiltime arithmetic.

This module provides:
    - Overflow: REJECT/CONSTRAIN policy for out-of-range dates
    - TimeUnit: Duration units ordered from YEARS to NANOSECONDS
"""

from __future__ import annotations

from civiltime.units.overflow import Overflow
from civiltime.units.timeunit import TimeUnit

__all__: list[str] = [
    "Overflow",
    "TimeUnit",
]
