"""Tests for duration normalization.

These tests verify nanosecond accumulation, day extraction and the
bounded redistribution performed by balance_duration.
"""

from __future__ import annotations

import logging

import pytest

from civiltime import (
    Duration,
    NanoDays,
    ParseError,
    TimeUnit,
    balance_duration,
    logging_sink,
    nanoseconds_to_days,
    total_duration_nanoseconds,
)
from civiltime._internal.constants import I64_MAX, I64_MIN, NANOS_PER_DAY, NANOS_PER_HOUR

DAY = NANOS_PER_DAY


def _total_of(d: Duration) -> int:
    return total_duration_nanoseconds(
        d.days, d.hours, d.minutes, d.seconds, d.milliseconds, d.microseconds, d.nanoseconds
    )


class TestTotalDurationNanoseconds:
    """Tests for total_duration_nanoseconds."""

    def test_zero(self) -> None:
        """All-zero fields total zero."""
        assert total_duration_nanoseconds(0, 0, 0, 0, 0, 0, 0) == 0

    def test_one_day(self) -> None:
        """A day is exactly 24 hours."""
        assert total_duration_nanoseconds(1, 0, 0, 0, 0, 0, 0) == 86_400_000_000_000

    def test_each_unit(self) -> None:
        """Each field contributes its unit length."""
        assert total_duration_nanoseconds(0, 1, 1, 1, 1, 1, 1) == 3_661_001_001_001

    def test_mixed_signs(self) -> None:
        """Fields of different sign offset each other."""
        assert total_duration_nanoseconds(0, 0, 0, 1, -1, 0, 0) == 999_000_000
        assert total_duration_nanoseconds(1, -24, 0, 0, 0, 0, 0) == 0

    def test_large_values_do_not_wrap(self) -> None:
        """Totals near the 64-bit limit are exact."""
        days = I64_MAX // DAY
        assert total_duration_nanoseconds(days, 0, 0, 0, 0, 0, 0) == days * DAY


class TestNanosecondsToDays:
    """Tests for nanoseconds_to_days."""

    def test_zero(self) -> None:
        """Zero gives a positive day length and no days."""
        assert nanoseconds_to_days(0) == NanoDays(0, 0, 86_400_000_000_000)

    def test_minus_one(self) -> None:
        """A negative remainder keeps the input's sign."""
        assert nanoseconds_to_days(-1) == NanoDays(0, -1, -86_400_000_000_000)

    def test_whole_days(self) -> None:
        """Exact multiples leave no remainder."""
        assert nanoseconds_to_days(DAY) == NanoDays(1, 0, DAY)
        assert nanoseconds_to_days(-2 * DAY) == NanoDays(-2, 0, -DAY)

    def test_truncates_toward_zero(self) -> None:
        """Division truncates rather than floors."""
        assert nanoseconds_to_days(3 * DAY + 5) == NanoDays(3, 5, DAY)
        assert nanoseconds_to_days(-(3 * DAY + 5)) == NanoDays(-3, -5, -DAY)

    def test_remainder_invariants(self) -> None:
        """Remainders are smaller than a day and share the input's sign."""
        for value in (1, -1, DAY - 1, -(DAY - 1), DAY + 1, I64_MAX, I64_MIN, 123_456_789_012_345):
            result = nanoseconds_to_days(value)
            assert abs(result.nanoseconds) < DAY
            assert result.days * DAY + result.nanoseconds == value
            assert (result.day_length_ns > 0) == (value > 0)
            if result.nanoseconds != 0:
                assert (result.nanoseconds > 0) == (value > 0)


class TestBalanceDurationDateUnits:
    """balance_duration with DAYS or a coarser largest unit."""

    def test_all_fields_in_range(self) -> None:
        """Already balanced fields come back unchanged."""
        result = balance_duration(1, 2, 3, 4, 5, 6, 7, TimeUnit.DAYS)
        assert result == Duration(0, 0, 0, 1, 2, 3, 4, 5, 6, 7)

    def test_hours_carry_into_days(self) -> None:
        """25 hours become one day and one hour."""
        assert balance_duration(0, 25, 0, 0, 0, 0, 0, TimeUnit.DAYS) == Duration(days=1, hours=1)

    def test_nanoseconds_carry_all_the_way(self) -> None:
        """A nanosecond count spreads over every field."""
        result = balance_duration(0, 0, 0, 0, 0, 0, 90_061_001_002_003, TimeUnit.DAYS)
        assert result == Duration(
            days=1, hours=1, minutes=1, seconds=1, milliseconds=1, microseconds=2, nanoseconds=3
        )

    def test_calendar_units_behave_like_days(self) -> None:
        """YEARS, MONTHS and WEEKS split days the same way as DAYS."""
        expected = balance_duration(3, 30, 0, 0, 0, 0, 0, TimeUnit.DAYS)
        for unit in (TimeUnit.YEARS, TimeUnit.MONTHS, TimeUnit.WEEKS):
            result = balance_duration(3, 30, 0, 0, 0, 0, 0, unit)
            assert result == expected
            assert result.years == result.months == result.weeks == 0

    def test_negative_duration(self) -> None:
        """Every field carries the negative sign."""
        result = balance_duration(-1, -2, 0, 0, 0, 0, -3, TimeUnit.DAYS)
        assert result == Duration(days=-1, hours=-2, nanoseconds=-3)
        assert result.sign == -1

    def test_mixed_signs_resolve_to_one_sign(self) -> None:
        """Opposite-signed fields net out before balancing."""
        assert balance_duration(1, -1, 0, 0, 0, 0, 0, TimeUnit.DAYS) == Duration(hours=23)
        assert balance_duration(0, 0, 0, 0, 0, 0, -1, TimeUnit.DAYS) == Duration(nanoseconds=-1)

    def test_zero(self) -> None:
        """A zero duration balances to a blank record."""
        assert balance_duration(0, 0, 0, 0, 0, 0, 0, TimeUnit.DAYS).blank

    def test_total_preserved(self) -> None:
        """Balancing never changes the nanosecond total."""
        cases = [
            (0, 0, 0, 0, 0, 0, I64_MAX),
            (0, 0, 0, 0, 0, 0, I64_MIN + 1),
            (10, -3, 500, -7, 1_999, 42, -1),
            (-5, 48, -61, 3_600, 0, -1_000_001, 999),
        ]
        for fields in cases:
            result = balance_duration(*fields, TimeUnit.DAYS)
            assert _total_of(result) == total_duration_nanoseconds(*fields)
            assert abs(result.hours) < 24
            assert abs(result.minutes) < 60
            assert abs(result.seconds) < 60
            assert abs(result.milliseconds) < 1000
            assert abs(result.microseconds) < 1000
            assert abs(result.nanoseconds) < 1000


class TestBalanceDurationTimeUnits:
    """balance_duration with HOURS or a finer largest unit."""

    def test_hours(self) -> None:
        """Hours are unbounded when HOURS is the largest unit."""
        result = balance_duration(0, 0, 0, 0, 0, 0, 90_061_000_000_001, TimeUnit.HOURS)
        assert result == Duration(hours=25, minutes=1, seconds=1, nanoseconds=1)

    def test_minutes(self) -> None:
        """Cascade stops at minutes."""
        result = balance_duration(0, 0, 0, 0, 0, 0, 3_723_000_000_000, TimeUnit.MINUTES)
        assert result == Duration(minutes=62, seconds=3)

    def test_seconds(self) -> None:
        """Cascade stops at seconds."""
        result = balance_duration(0, 0, 0, 0, 0, 0, 3_723_004_005_006, TimeUnit.SECONDS)
        assert result == Duration(seconds=3723, milliseconds=4, microseconds=5, nanoseconds=6)

    def test_milliseconds(self) -> None:
        """Cascade stops at milliseconds."""
        result = balance_duration(0, 0, 0, 0, 0, 0, 1_234_567_891, TimeUnit.MILLISECONDS)
        assert result == Duration(milliseconds=1234, microseconds=567, nanoseconds=891)

    def test_microseconds(self) -> None:
        """Cascade stops at microseconds."""
        result = balance_duration(0, 0, 0, 0, 0, 0, 1_234_567, TimeUnit.MICROSECONDS)
        assert result == Duration(microseconds=1234, nanoseconds=567)

    def test_nanoseconds_round_trip(self) -> None:
        """With NANOSECONDS the magnitude stays in the nanoseconds field."""
        for value in (0, 1, -1, 1_234_567, -987_654_321_000, I64_MAX, I64_MIN + 1):
            result = balance_duration(0, 0, 0, 0, 0, 0, value, TimeUnit.NANOSECONDS)
            assert abs(result.nanoseconds) == abs(total_duration_nanoseconds(0, 0, 0, 0, 0, 0, value))
            assert result.nanoseconds == value
            assert result.fields()[:-1] == (0,) * 9

    def test_negative_sign_applied(self) -> None:
        """Negative input gives negative fields."""
        result = balance_duration(0, 0, 0, 0, 0, 0, -1_500_000, TimeUnit.SECONDS)
        assert result == Duration(milliseconds=-1, microseconds=-500)

    def test_days_always_zero(self) -> None:
        """Days come out as zero below DAYS."""
        result = balance_duration(0, 0, 0, 0, 0, 0, 3 * DAY, TimeUnit.HOURS)
        assert result.days == 0
        assert result.hours == 72

    def test_only_nanoseconds_argument_is_redistributed(self) -> None:
        """Below DAYS the other input fields are dropped, not folded in.

        This mirrors the reference algorithm: the day branch uses the full
        total, while this branch uses the nanoseconds argument alone.
        """
        result = balance_duration(0, 1, 0, 0, 0, 0, 5, TimeUnit.SECONDS)
        assert result == Duration(nanoseconds=5)

        result = balance_duration(2, 1, 30, 0, 0, 0, 0, TimeUnit.HOURS)
        assert result.blank

        days_result = balance_duration(0, 1, 30, 0, 0, 0, 0, TimeUnit.DAYS)
        assert days_result == Duration(hours=1, minutes=30)


class TestBalanceDurationOptions:
    """Tests for largest_unit names and the trace sink."""

    def test_largest_unit_by_name(self) -> None:
        """largest_unit accepts singular or plural names."""
        by_enum = balance_duration(0, 25, 0, 0, 0, 0, 0, TimeUnit.DAYS)
        assert balance_duration(0, 25, 0, 0, 0, 0, 0, "days") == by_enum
        assert balance_duration(0, 25, 0, 0, 0, 0, 0, "Day") == by_enum

    def test_unknown_unit_raises(self) -> None:
        """An unknown unit name raises ParseError."""
        with pytest.raises(ParseError, match="unknown duration unit"):
            balance_duration(0, 0, 0, 0, 0, 0, 0, "fortnights")

    def test_trace_receives_total_and_days(self) -> None:
        """Date units trace the total and the day count."""
        messages: list[str] = []
        balance_duration(1, 1, 0, 0, 0, 0, 0, TimeUnit.DAYS, trace=messages.append)
        assert messages == [str(DAY + NANOS_PER_HOUR), "1"]

    def test_trace_receives_total_only_for_time_units(self) -> None:
        """Time units trace only the total."""
        messages: list[str] = []
        balance_duration(0, 1, 30, 0, 0, 0, 0, TimeUnit.HOURS, trace=messages.append)
        assert messages == ["5400000000000"]

    def test_logging_sink(self, caplog: pytest.LogCaptureFixture) -> None:
        """logging_sink forwards trace messages to a logger under civiltime."""
        caplog.set_level(logging.DEBUG, logger="civiltime")
        balance_duration(1, 0, 0, 0, 0, 0, 0, TimeUnit.DAYS, trace=logging_sink())
        messages = [record.getMessage() for record in caplog.records]
        assert messages == [
            "balance_duration: 86400000000000",
            "balance_duration: 1",
        ]
        assert all(record.name == "civiltime._internal.trace" for record in caplog.records)

    def test_logging_sink_custom_logger_and_level(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        """logging_sink honours a given logger and level."""
        caplog.set_level(logging.INFO, logger="app.durations")
        sink = logging_sink(logging.getLogger("app.durations"), level=logging.INFO)
        balance_duration(0, 0, 0, 0, 0, 0, 1, TimeUnit.NANOSECONDS, trace=sink)
        assert [record.levelno for record in caplog.records] == [logging.INFO]

    def test_no_trace_by_default(self, caplog: pytest.LogCaptureFixture) -> None:
        """Nothing is logged without a sink."""
        caplog.set_level(logging.DEBUG)
        balance_duration(1, 0, 0, 0, 0, 0, 0, TimeUnit.DAYS)
        assert caplog.records == []
