"""Unit ladder: turning plain numbers into intervals.

Python cannot attach ``.minutes`` to ``int`` the way some languages
extend built-in types, so the capability is split in two:

* :class:`IntervalConvertible` — the contract.  Anything with a
  ``to_interval()`` method returning the *base* nanosecond
  :class:`~intervalkit.Interval` qualifies (PEP 544 structural
  subtyping, no inheritance needed).
* :class:`_UnitLadder` — a mixin that derives every other unit from
  that single base conversion.  The multiplier chain lives here and
  nowhere else.

:class:`Amount` wraps a real number and combines both, so
``amount(90).minutes`` reads like the literal it stands for.  The
module-level functions (``minutes(90)``, ``hour(1)``, ...) are
shorthand for the same thing.

Example::

    >>> amount(1).hour == amount(60).minutes == seconds(3600)
    True
"""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Real
from typing import Protocol, runtime_checkable

from intervalkit._errors import UnknownUnitError
from intervalkit._interval import (
    DAYS_PER_WEEK,
    HOURS_PER_DAY,
    MINUTES_PER_HOUR,
    NS_PER_MICROSECOND,
    NS_PER_MILLISECOND,
    NS_PER_SECOND,
    SECONDS_PER_MINUTE,
    Interval,
)

# ---------------------------------------------------------------------------
# Protocol
# ---------------------------------------------------------------------------


@runtime_checkable
class IntervalConvertible(Protocol):
    """A value that can act as a source of a base :class:`Interval`."""

    def to_interval(self) -> Interval:
        """Return this value reinterpreted as a nanosecond count."""
        ...


# ---------------------------------------------------------------------------
# Ladder mixin
# ---------------------------------------------------------------------------


class _UnitLadder:
    """Derive every unit from ``to_interval()``.

    Singular spellings are aliases: ``x.hour == x.hours``.
    """

    __slots__ = ()

    def to_interval(self) -> Interval:
        raise NotImplementedError  # pragma: no cover

    @property
    def nanoseconds(self) -> Interval:
        return self.to_interval()

    @property
    def microseconds(self) -> Interval:
        return self.nanoseconds * NS_PER_MICROSECOND

    @property
    def milliseconds(self) -> Interval:
        return self.nanoseconds * NS_PER_MILLISECOND

    @property
    def seconds(self) -> Interval:
        return self.nanoseconds * NS_PER_SECOND

    @property
    def minutes(self) -> Interval:
        return self.seconds * SECONDS_PER_MINUTE

    @property
    def hours(self) -> Interval:
        return self.minutes * MINUTES_PER_HOUR

    @property
    def days(self) -> Interval:
        return self.hours * HOURS_PER_DAY

    @property
    def weeks(self) -> Interval:
        return self.days * DAYS_PER_WEEK

    nanosecond = nanoseconds
    microsecond = microseconds
    millisecond = milliseconds
    second = seconds
    minute = minutes
    hour = hours
    day = days
    week = weeks


# ---------------------------------------------------------------------------
# Amount
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Amount(_UnitLadder):
    """A plain number waiting to be given a unit.

    Accepts any :class:`numbers.Real` except ``bool`` (``True.hours``
    is almost certainly a bug).  Integers whose magnitude fits in a
    float mantissa convert exactly.

    Raises:
        TypeError: If *value* is not a real number.
    """

    value: float

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, Real):
            msg = f"Amount requires a real number, got {type(self.value).__name__}"
            raise TypeError(msg)

    def to_interval(self) -> Interval:
        return Interval(float(self.value))


def amount(value: float) -> Amount:
    """Wrap *value* so a unit can be attached: ``amount(5).minutes``."""
    return Amount(value)


def nanoseconds(value: float) -> Interval:
    return Amount(value).nanoseconds


def microseconds(value: float) -> Interval:
    return Amount(value).microseconds


def milliseconds(value: float) -> Interval:
    return Amount(value).milliseconds


def seconds(value: float) -> Interval:
    return Amount(value).seconds


def minutes(value: float) -> Interval:
    return Amount(value).minutes


def hours(value: float) -> Interval:
    return Amount(value).hours


def days(value: float) -> Interval:
    return Amount(value).days


def weeks(value: float) -> Interval:
    return Amount(value).weeks


nanosecond = nanoseconds
microsecond = microseconds
millisecond = milliseconds
second = seconds
minute = minutes
hour = hours
day = days
week = weeks

# ---------------------------------------------------------------------------
# Unit names
# ---------------------------------------------------------------------------

UNITS: tuple[str, ...] = (
    "nanoseconds",
    "microseconds",
    "milliseconds",
    "seconds",
    "minutes",
    "hours",
    "days",
    "weeks",
)
"""Canonical (plural) unit names, shortest first."""

_ABBREVIATIONS: dict[str, str] = {
    "ns": "nanoseconds",
    "us": "microseconds",
    "ms": "milliseconds",
    "s": "seconds",
    "m": "minutes",
    "h": "hours",
    "d": "days",
    "w": "weeks",
}


def canonical_unit(name: str) -> str:
    """Resolve a singular, plural or abbreviated unit name.

    Matching is case-insensitive and ignores surrounding whitespace.

    Raises:
        UnknownUnitError: If *name* is not a known unit.
    """
    key = name.strip().lower()
    if key in _ABBREVIATIONS:
        return _ABBREVIATIONS[key]
    if key in UNITS:
        return key
    if f"{key}s" in UNITS:
        return f"{key}s"
    raise UnknownUnitError(name, accepted=UNITS)


def interval_of(value: float, unit: str) -> Interval:
    """Build an interval from a number and a unit name.

    ``interval_of(90, "min")`` is not accepted; ``"m"``, ``"minute"``
    and ``"minutes"`` are.
    """
    result: Interval = getattr(Amount(value), canonical_unit(unit))
    return result


def project(interval: Interval, unit: str) -> float:
    """Read *interval* back as a plain number of *unit*."""
    result: float = getattr(interval, canonical_unit(unit))
    return result
