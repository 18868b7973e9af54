"""Wall-clock port and system adapter.

Provides ClockPort (Protocol) and SystemClock for reading "now".

**Why the wall clock?** Deadlines handed to a timer are absolute
points in time, and "the interval since this timestamp" is measured
against calendar time.  Both need the adjustable wall clock
(``time.time_ns()``), not ``time.monotonic()`` whose epoch is
arbitrary.  The flip side is that successive reads are not guaranteed
to be non-decreasing (NTP steps, manual changes).

See Also:
    :mod:`intervalkit._timer` for the deadline computation that
    consumes ``now_ns()``.
"""

from __future__ import annotations

import time
from datetime import UTC, datetime
from typing import Protocol, runtime_checkable


@runtime_checkable
class ClockPort(Protocol):
    """Wall clock for date arithmetic and deadline computation.

    The default implementation wraps ``time.time_ns()``.  Tests
    inject a deterministic fake clock for reproducible timing.
    """

    def now(self) -> datetime:
        """Return the current time as a timezone-aware UTC datetime."""
        ...

    def now_ns(self) -> int:
        """Return the current time in nanoseconds since the Unix epoch."""
        ...


class SystemClock:
    """Production clock wrapping ``time.time_ns()``.

    Satisfies :class:`ClockPort` via structural subtyping — no
    base-class inheritance required (PEP 544).

    Usage::

        clock = SystemClock()
        deadline = clock.now_ns() + 500_000_000
    """

    def now(self) -> datetime:
        """Return the current UTC time."""
        return datetime.now(UTC)

    def now_ns(self) -> int:
        """Return wall-clock nanoseconds since the epoch."""
        return time.time_ns()
