"""Date arithmetic with intervals.

Bridges :class:`~intervalkit.Interval` and :class:`datetime.datetime`:
the elapsed interval between two points, and a point shifted by an
interval.  The operator forms ``point + interval`` and
``point - interval`` are provided by ``Interval.__radd__`` /
``Interval.__rsub__`` and behave exactly like :func:`add_interval`
and :func:`subtract_interval`.

Naive datetimes are local wall-clock time, as returned by
:meth:`datetime.now`; :func:`interval_since` still follows the standard
library's rule that mixing naive and aware values raises
:class:`TypeError`.  ``datetime`` resolves microseconds only, so
shifting a point rounds the interval to the nearest microsecond.
"""

from __future__ import annotations

from datetime import datetime

from intervalkit._clock import ClockPort, SystemClock
from intervalkit._interval import Interval


def interval_since(point: datetime, other: datetime) -> Interval:
    """Return the interval from *other* to *point* (``point - other``).

    If *point* is earlier than *other* the interval is negative.
    """
    return Interval.from_timedelta(point - other)


def interval_since_now(point: datetime, *, clock: ClockPort | None = None) -> Interval:
    """Return the interval between *point* and the current time.

    Negative when *point* is in the past.  "Now" is sampled once, at
    call time; no ordering is guaranteed against clock reads made
    elsewhere.

    Args:
        point: The datetime to measure from.  A naive *point* is read
            as local time and compared against local "now".
        clock: Clock to sample.  Defaults to :class:`SystemClock`.
    """
    now = (clock if clock is not None else SystemClock()).now()
    if point.tzinfo is None:
        now = now.astimezone().replace(tzinfo=None)
    return interval_since(point, now)


def add_interval(point: datetime, interval: Interval) -> datetime:
    """Return *point* shifted by *interval* (backwards when negative).

    Raises:
        OverflowError: If the result falls outside ``datetime``'s range.
    """
    return point + interval.to_timedelta()


def subtract_interval(point: datetime, interval: Interval) -> datetime:
    """Return *point* shifted back by *interval*."""
    return point - interval.to_timedelta()
