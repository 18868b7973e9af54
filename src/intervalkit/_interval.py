"""Signed duration value type with nanosecond precision.

:class:`Interval` wraps a single ``float`` nanosecond count.  The sign
carries meaning: the interval from 06:00 to 07:00 is ``hours(1)``,
while the interval from 07:00 to 06:00 is ``hours(-1)`` ("one hour
ago").  Comparing ``hours(1)`` to ``hours(3)`` likewise gives
``hours(-2)`` ("two hours shorter").

Arithmetic is plain IEEE-754 arithmetic on the nanosecond count: no
overflow guard, no rounding.  Overflow yields ``±inf`` and invalid
operations yield ``nan``; both propagate through every operation.

**Equality is exact.**  Two intervals are equal iff their nanosecond
counts compare equal as floats, so ``Interval(nan) != Interval(nan)``
and intervals reached through long arithmetic chains may not compare
equal to a literal even when they "should".  Compare literal or
constructed values only.

Named methods (``adding``, ``subtracting``, ``multiplying``,
``opposite``) are the primary API; operators delegate to them.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from numbers import Real

from intervalkit._errors import InvalidArgumentError

NS_PER_MICROSECOND = 1e3
NS_PER_MILLISECOND = 1e6
NS_PER_SECOND = 1e9
SECONDS_PER_MINUTE = 60
MINUTES_PER_HOUR = 60
HOURS_PER_DAY = 24
DAYS_PER_WEEK = 7


def _is_scalar(value: object) -> bool:
    """Return ``True`` for real numbers other than ``bool``."""
    return isinstance(value, Real) and not isinstance(value, bool)


def timedelta_to_nanoseconds(delta: timedelta) -> int:
    """Exact nanosecond count of a :class:`~datetime.timedelta`.

    Built from the integer ``days`` / ``seconds`` / ``microseconds``
    components so no float rounding happens before the caller
    converts the result.
    """
    whole_seconds = delta.days * 86_400 + delta.seconds
    return (whole_seconds * 1_000_000 + delta.microseconds) * 1_000


@dataclass(frozen=True, slots=True, eq=False)
class Interval:
    """An immutable, signed length of time.

    Attributes:
        nanoseconds: The length in nanoseconds.  Negative values mean
            "in the past" or "shorter by", depending on context.

    Example::

        >>> Interval.from_seconds(1.5)
        Interval(nanoseconds=1500000000.0)
        >>> Interval.from_hours(1) == Interval.from_minutes(60)
        True
    """

    nanoseconds: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "nanoseconds", float(self.nanoseconds))

    # -- alternate constructors ----------------------------------------------

    @classmethod
    def from_seconds(cls, seconds: float) -> Interval:
        """Create an interval from a number of seconds."""
        return cls(seconds * NS_PER_SECOND)

    @classmethod
    def from_minutes(cls, minutes: float) -> Interval:
        """Create an interval from a number of minutes."""
        return cls.from_seconds(minutes).multiplying(SECONDS_PER_MINUTE)

    @classmethod
    def from_hours(cls, hours: float) -> Interval:
        """Create an interval from a number of hours."""
        return cls.from_minutes(hours).multiplying(MINUTES_PER_HOUR)

    @classmethod
    def from_days(cls, days: float) -> Interval:
        """Create an interval from a number of 24-hour days."""
        return cls.from_hours(days).multiplying(HOURS_PER_DAY)

    @classmethod
    def from_weeks(cls, weeks: float) -> Interval:
        """Create an interval from a number of 7-day weeks."""
        return cls.from_days(weeks).multiplying(DAYS_PER_WEEK)

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> Interval:
        """Create an interval from a :class:`~datetime.timedelta`."""
        return cls(timedelta_to_nanoseconds(delta))

    # -- sign and magnitude --------------------------------------------------

    @property
    def is_negative(self) -> bool:
        """``True`` when the nanosecond count is strictly below zero.

        ``-0.0`` and ``nan`` are not negative.
        """
        return self.nanoseconds < 0

    @property
    def is_positive(self) -> bool:
        """``True`` when the nanosecond count is strictly above zero."""
        return self.nanoseconds > 0

    @property
    def magnitude(self) -> float:
        """Absolute nanosecond count, disregarding the sign."""
        return abs(self.nanoseconds)

    @property
    def opposite(self) -> Interval:
        """The interval with the opposite sign."""
        return Interval(-self.nanoseconds)

    # -- comparison by magnitude ---------------------------------------------

    def is_longer(self, than: Interval) -> bool:
        """Return ``True`` if this interval's magnitude exceeds *than*'s.

        ``hours(-3).is_longer(than=hours(1))`` is ``True``.
        """
        return self.magnitude > than.magnitude

    def is_shorter(self, than: Interval) -> bool:
        """Return ``True`` if this interval's magnitude is below *than*'s."""
        return self.magnitude < than.magnitude

    @staticmethod
    def longest(*intervals: Interval) -> Interval:
        """Return the interval with the greatest magnitude.

        Ties go to the earliest argument, so
        ``Interval.longest(hours(2), hours(-2))`` is ``hours(2)``.

        Raises:
            InvalidArgumentError: If called without arguments.
        """
        if not intervals:
            msg = "longest() requires at least one interval"
            raise InvalidArgumentError(msg)
        return max(intervals, key=_magnitude)

    @staticmethod
    def shortest(*intervals: Interval) -> Interval:
        """Return the interval with the smallest magnitude.

        Ties go to the earliest argument.

        Raises:
            InvalidArgumentError: If called without arguments.
        """
        if not intervals:
            msg = "shortest() requires at least one interval"
            raise InvalidArgumentError(msg)
        return min(intervals, key=_magnitude)

    # -- arithmetic ----------------------------------------------------------

    def multiplying(self, by: float) -> Interval:
        """Return this interval scaled by *by*.

        ``hours(1).multiplying(2) == hours(2)``
        """
        return Interval(self.nanoseconds * by)

    def adding(self, other: Interval) -> Interval:
        """Return the sum of this interval and *other*."""
        return Interval(self.nanoseconds + other.nanoseconds)

    def subtracting(self, other: Interval) -> Interval:
        """Return this interval minus *other*.

        ``hours(2).subtracting(hours(1)) == hours(1)``
        """
        return Interval(self.nanoseconds - other.nanoseconds)

    # -- unit projections ----------------------------------------------------

    @property
    def microseconds(self) -> float:
        """Length in microseconds."""
        return self.nanoseconds / NS_PER_MICROSECOND

    @property
    def milliseconds(self) -> float:
        """Length in milliseconds."""
        return self.nanoseconds / NS_PER_MILLISECOND

    @property
    def seconds(self) -> float:
        """Length in seconds."""
        return self.nanoseconds / NS_PER_SECOND

    @property
    def minutes(self) -> float:
        """Length in minutes."""
        return self.seconds / SECONDS_PER_MINUTE

    @property
    def hours(self) -> float:
        """Length in hours."""
        return self.minutes / MINUTES_PER_HOUR

    @property
    def days(self) -> float:
        """Length in 24-hour days."""
        return self.hours / HOURS_PER_DAY

    @property
    def weeks(self) -> float:
        """Length in 7-day weeks."""
        return self.days / DAYS_PER_WEEK

    def to_timedelta(self) -> timedelta:
        """Convert to a :class:`~datetime.timedelta`.

        ``timedelta`` only resolves microseconds, so sub-microsecond
        precision is rounded (half to even).

        Raises:
            OverflowError: If the interval exceeds ``timedelta``'s range.
            ValueError: If the interval is NaN.
        """
        return timedelta(microseconds=self.nanoseconds / NS_PER_MICROSECOND)

    def to_interval(self) -> Interval:
        """Return ``self``; an interval is trivially convertible."""
        return self

    # -- operators -----------------------------------------------------------

    def __add__(self, other: object) -> Interval:
        if isinstance(other, Interval):
            return self.adding(other)
        return NotImplemented

    def __radd__(self, other: object) -> datetime:
        # datetime + Interval
        if isinstance(other, datetime):
            return other + self.to_timedelta()
        return NotImplemented

    def __sub__(self, other: object) -> Interval:
        if isinstance(other, Interval):
            return self.subtracting(other)
        return NotImplemented

    def __rsub__(self, other: object) -> datetime:
        # datetime - Interval
        if isinstance(other, datetime):
            return other - self.to_timedelta()
        return NotImplemented

    def __mul__(self, other: object) -> Interval:
        if _is_scalar(other):
            return self.multiplying(other)  # type: ignore[arg-type]
        return NotImplemented

    __rmul__ = __mul__

    def __neg__(self) -> Interval:
        return self.opposite

    def __pos__(self) -> Interval:
        return self

    def __abs__(self) -> Interval:
        return Interval(self.magnitude)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self.nanoseconds == other.nanoseconds

    def __hash__(self) -> int:
        return hash(self.nanoseconds)


def _magnitude(interval: Interval) -> float:
    return interval.magnitude
