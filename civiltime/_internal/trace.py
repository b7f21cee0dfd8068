"""Diagnostic trace sinks.

Duration balancing reports intermediate values to an optional sink, a
plain callable taking one string. Nothing is traced unless the caller
passes a sink; logging_sink builds one that writes to a logger.

This module is not part of the public API; TraceSink and logging_sink
are re-exported from the package root.
"""

from __future__ import annotations

import logging
from typing import Callable

TraceSink = Callable[[str], None]

logger = logging.getLogger(__name__)


def logging_sink(
    target: logging.Logger | None = None,
    level: int = logging.DEBUG,
) -> TraceSink:
    """Return a trace sink that logs each message.

    Args:
        target: Logger to write to. Defaults to this module's logger.
        level: Level used for every message.

    Returns:
        A callable suitable for the ``trace`` argument of balance_duration.

    Examples:
        >>> logging.basicConfig(level=logging.DEBUG)
        >>> balance_duration(1, 0, 0, 0, 0, 0, 0, "days", trace=logging_sink())
    """
    log = target if target is not None else logger

    def sink(message: str) -> None:
        log.log(level, "balance_duration: %s", message)

    return sink


def emit(trace: TraceSink | None, message: str) -> None:
    """Send message to trace if one was supplied."""
    if trace is not None:
        trace(message)


__all__ = [
    "TraceSink",
    "logging_sink",
    "emit",
]
