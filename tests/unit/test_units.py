"""Unit tests for intervalkit._units — the unit ladder.

Test Techniques Used:
    - Specification-based Testing: Every rung of the ladder against
      its exact nanosecond value
    - Equivalence Partitioning: int, float, Fraction and rejected
      non-real inputs
    - Protocol Conformance: IntervalConvertible structural checks
    - Error Condition Testing: Unknown unit names
"""

from __future__ import annotations

from fractions import Fraction

import pytest

import intervalkit._units as units
from intervalkit._errors import UnknownUnitError
from intervalkit._interval import Interval
from intervalkit._units import (
    UNITS,
    Amount,
    IntervalConvertible,
    amount,
    canonical_unit,
    hours,
    interval_of,
    minutes,
    nanoseconds,
    project,
)

LADDER = [
    ("nanoseconds", 1.0),
    ("microseconds", 1e3),
    ("milliseconds", 1e6),
    ("seconds", 1e9),
    ("minutes", 6e10),
    ("hours", 3.6e12),
    ("days", 8.64e13),
    ("weeks", 6.048e14),
]


class TestLadder:
    """Every unit derives from the base nanosecond conversion.

    Technique: Specification-based Testing.
    """

    @pytest.mark.parametrize(("unit", "expected_ns"), LADDER)
    def test_amount_properties(self, unit: str, expected_ns: float) -> None:
        """amount(1).<unit> has the documented nanosecond value."""
        assert getattr(amount(1), unit) == Interval(expected_ns)

    @pytest.mark.parametrize(("unit", "expected_ns"), LADDER)
    def test_module_functions(self, unit: str, expected_ns: float) -> None:
        """Module-level shorthands agree with Amount."""
        assert getattr(units, unit)(1) == Interval(expected_ns)

    @pytest.mark.parametrize("unit", UNITS)
    def test_singular_aliases(self, unit: str) -> None:
        """Singular spellings are aliases of the plural ones."""
        singular = unit[:-1]
        assert getattr(amount(3), singular) == getattr(amount(3), unit)
        assert getattr(units, singular)(3) == getattr(units, unit)(3)

    def test_one_hour_equalities(self) -> None:
        """1.hour == 1.hours == 60.minutes."""
        assert amount(1).hour == amount(1).hours == amount(60).minutes

    def test_scaled_values(self) -> None:
        """Non-unit amounts scale linearly."""
        assert hours(1) * 2 == hours(2)
        assert minutes(90) == Interval(5.4e12)

    def test_negative_amounts(self) -> None:
        """Negative numbers give negative intervals."""
        assert minutes(-5).is_negative
        assert hours(-1) == -hours(1)


class TestAmountInputs:
    """Which numeric kinds convert, and how exactly.

    Technique: Equivalence Partitioning.
    """

    def test_int_converts_exactly(self) -> None:
        """Integers within the float mantissa are exact."""
        assert nanoseconds(2**53).nanoseconds == float(2**53)

    def test_float(self) -> None:
        assert amount(1.5).seconds == Interval(1.5e9)

    def test_fraction(self) -> None:
        """Any numbers.Real is accepted."""
        assert amount(Fraction(1, 2)).seconds == Interval(5e8)

    def test_bool_rejected(self) -> None:
        with pytest.raises(TypeError, match="real number"):
            amount(True)

    def test_string_rejected(self) -> None:
        with pytest.raises(TypeError, match="str"):
            Amount("5")  # type: ignore[arg-type]

    def test_amount_is_interval_convertible(self) -> None:
        """Amount satisfies the IntervalConvertible protocol."""
        assert isinstance(amount(1), IntervalConvertible)
        assert amount(7).to_interval() == Interval(7.0)

    def test_plain_number_is_not_convertible(self) -> None:
        """Bare numbers need wrapping."""
        assert not isinstance(5, IntervalConvertible)

    def test_custom_convertible(self) -> None:
        """Any object with to_interval() satisfies the protocol."""

        class Ticks:
            def __init__(self, count: int) -> None:
                self.count = count

            def to_interval(self) -> Interval:
                return Interval(self.count * 100.0)

        assert isinstance(Ticks(3), IntervalConvertible)


class TestUnitNames:
    """Resolution of unit names and projections.

    Technique: Specification-based and Error Condition Testing.
    """

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("ns", "nanoseconds"),
            ("us", "microseconds"),
            ("ms", "milliseconds"),
            ("s", "seconds"),
            ("m", "minutes"),
            ("h", "hours"),
            ("d", "days"),
            ("w", "weeks"),
            ("hour", "hours"),
            ("Hours", "hours"),
            ("  minute ", "minutes"),
            ("weeks", "weeks"),
        ],
    )
    def test_canonical_unit(self, name: str, expected: str) -> None:
        assert canonical_unit(name) == expected

    @pytest.mark.parametrize("name", ["min", "fortnight", "", "hourss"])
    def test_unknown_unit(self, name: str) -> None:
        with pytest.raises(UnknownUnitError) as exc_info:
            canonical_unit(name)
        assert exc_info.value.unit == name
        assert exc_info.value.accepted == UNITS

    def test_interval_of(self) -> None:
        assert interval_of(90, "m") == minutes(90)
        assert interval_of(1, "hour") == hours(1)

    def test_project(self) -> None:
        assert project(hours(1), "minutes") == 60.0
        assert project(hours(1), "ns") == 3.6e12
        assert project(minutes(90), "h") == 1.5
