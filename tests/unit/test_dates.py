"""Unit tests for intervalkit._dates — date arithmetic with intervals.

Test Techniques Used:
    - Specification-based Testing: Sign convention of point − other
    - Dependency Injection: FakeClock for "now"
    - Operator Testing: ``datetime + Interval`` / ``datetime - Interval``
    - Error Condition Testing: Mixed naive/aware, overflow
    - Boundary Testing: Naive points read as local time
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from intervalkit._dates import (
    add_interval,
    interval_since,
    interval_since_now,
    subtract_interval,
)
from intervalkit._units import days, hours, microseconds, minutes, nanoseconds
from intervalkit.testing import FakeClock

SIX = datetime(2024, 3, 1, 6, 0, tzinfo=UTC)
SEVEN = datetime(2024, 3, 1, 7, 0, tzinfo=UTC)


class TestIntervalSince:
    """interval_since(point, other) == point − other.

    Technique: Specification-based Testing.
    """

    def test_later_point_is_positive(self) -> None:
        assert interval_since(SEVEN, SIX) == hours(1)

    def test_earlier_point_is_negative(self) -> None:
        """07:00 → 06:00 is one hour ago."""
        assert interval_since(SIX, SEVEN) == hours(-1)

    def test_same_point_is_zero(self) -> None:
        result = interval_since(SIX, SIX)
        assert not result.is_negative
        assert not result.is_positive

    def test_microsecond_precision(self) -> None:
        later = SIX + timedelta(microseconds=1)
        assert interval_since(later, SIX) == microseconds(1)

    def test_mixing_naive_and_aware_raises(self) -> None:
        with pytest.raises(TypeError):
            interval_since(SIX, datetime(2024, 3, 1, 6, 0))


class TestIntervalSinceNow:
    """interval_since_now against an injected clock.

    Technique: Dependency Injection.
    """

    def test_past_point_is_negative(self) -> None:
        clock = FakeClock.at(SIX)
        point = SIX - timedelta(minutes=30)
        assert interval_since_now(point, clock=clock) == minutes(-30)

    def test_future_point_is_positive(self) -> None:
        clock = FakeClock.at(SIX)
        assert interval_since_now(SEVEN, clock=clock) == hours(1)

    def test_follows_clock_advance(self) -> None:
        clock = FakeClock.at(SIX)
        clock.advance(minutes(15))
        assert interval_since_now(SEVEN, clock=clock) == minutes(45)

    def test_naive_point_compares_against_local_now(self) -> None:
        """A naive point is local time, like ``datetime.now()``."""
        clock = FakeClock.at(SIX)
        local_now = clock.now().astimezone().replace(tzinfo=None)
        point = local_now - timedelta(hours=1)
        assert interval_since_now(point, clock=clock) == hours(-1)

    def test_naive_point_with_system_clock(self) -> None:
        result = interval_since_now(datetime.now() - timedelta(hours=1))
        assert result.is_negative
        assert not result.is_shorter(than=hours(1))

    def test_default_clock_is_system_clock(self) -> None:
        """Without a clock the real wall clock is sampled."""
        point = datetime.now(UTC) + timedelta(hours=1)
        result = interval_since_now(point)
        assert result.is_positive
        assert not result.is_longer(than=hours(1))


class TestShifting:
    """add_interval / subtract_interval and their operators.

    Technique: Operator Testing.
    """

    def test_add_interval(self) -> None:
        assert add_interval(SIX, hours(1)) == SEVEN

    def test_add_negative_interval_moves_back(self) -> None:
        assert add_interval(SEVEN, hours(-1)) == SIX

    def test_subtract_interval(self) -> None:
        assert subtract_interval(SEVEN, hours(1)) == SIX

    def test_plus_operator(self) -> None:
        assert SIX + hours(1) == SEVEN

    def test_minus_operator(self) -> None:
        assert SEVEN - minutes(60) == SIX

    def test_round_trip_through_interval_since(self) -> None:
        shifted = SIX + days(2)
        assert interval_since(shifted, SIX) == days(2)

    def test_sub_microsecond_rounds(self) -> None:
        """datetime only resolves microseconds."""
        assert SIX + nanoseconds(400) == SIX

    def test_naive_datetime_supported(self) -> None:
        naive = datetime(2024, 3, 1, 6, 0)
        assert naive + hours(1) == datetime(2024, 3, 1, 7, 0)

    def test_overflow_raises(self) -> None:
        with pytest.raises(OverflowError):
            add_interval(datetime.max, days(1))
