"""Internal utilities for civiltime.

This module contains private implementation details:
    - Constants and magic numbers
    - Field validators and the opt-in reject_date validator
    - Diagnostic trace sinks

Note: This module is not part of the public API.
"""

from __future__ import annotations

from civiltime._internal.trace import TraceSink, emit, logging_sink
from civiltime._internal.validation import (
    reject_date,
    validate_day,
    validate_month,
)

__all__: list[str] = [
    "TraceSink",
    "emit",
    "logging_sink",
    "reject_date",
    "validate_day",
    "validate_month",
]
