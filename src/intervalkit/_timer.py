"""Timer port, deadline computation and asyncio adapter.

Turns a relative :class:`~intervalkit.Interval` into an absolute
wall-clock deadline and arms a timer with it.  Two policies are fixed
here:

**Negative means never.**  A negative interval does *not* fire
immediately; the timer is armed "to never fire" and its deadline is
:data:`DISTANT_FUTURE_NS`.  A NaN interval is treated the same way.

**Clamp, don't overflow.**  Deadlines are signed 64-bit nanosecond
counts since the Unix epoch.  A nanosecond count that does not fit,
including ``+inf``, saturates at :data:`MAX_DEADLINE_NS` instead of
wrapping or raising.

The timer itself is a port (:class:`TimerPort`).  :class:`AsyncioTimer`
is the production adapter; :class:`~intervalkit.testing.FakeTimer`
records calls for tests.

See Also:
    :mod:`intervalkit._clock` for the clock sampled as "now".
"""

from __future__ import annotations

import asyncio
import logging
import math
from collections.abc import Callable
from typing import Protocol, runtime_checkable

from intervalkit._clock import ClockPort, SystemClock
from intervalkit._errors import InvalidArgumentError
from intervalkit._interval import NS_PER_SECOND, Interval

logger = logging.getLogger(__name__)

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

MAX_DEADLINE_NS = INT64_MAX
"""Latest representable deadline, in wall-clock nanoseconds."""

DISTANT_FUTURE_NS = MAX_DEADLINE_NS
"""Deadline reported for a timer armed to never fire."""

# ---------------------------------------------------------------------------
# Protocol
# ---------------------------------------------------------------------------


@runtime_checkable
class TimerPort(Protocol):
    """A one-shot or repeating timer that fires at an absolute deadline.

    Re-arming replaces any previous deadline.  Cancelling a pending
    fire is the timer's own business; this module only tells it when.
    """

    def arm_at(self, deadline_ns: int) -> None:
        """Fire at *deadline_ns* wall-clock nanoseconds since the epoch."""
        ...

    def arm_never(self) -> None:
        """Drop any pending fire; the timer stays idle until re-armed."""
        ...


# ---------------------------------------------------------------------------
# Deadline computation
# ---------------------------------------------------------------------------


def clamp_to_int(
    value: float,
    *,
    lower: int = INT64_MIN,
    upper: int = INT64_MAX,
) -> int:
    """Convert *value* to an ``int`` within ``[lower, upper]``.

    Truncates toward zero; out-of-range values (including infinities)
    saturate at the nearest bound.

    Raises:
        InvalidArgumentError: If *value* is NaN.
    """
    if math.isnan(value):
        msg = "Cannot clamp NaN to an integer"
        raise InvalidArgumentError(msg)
    if value >= upper:
        return upper
    if value <= lower:
        return lower
    return int(value)


def never_fires(interval: Interval) -> bool:
    """Return ``True`` if *interval* maps to the never-fire deadline."""
    return interval.is_negative or math.isnan(interval.nanoseconds)


def compute_deadline(
    interval: Interval,
    now_ns: int,
    *,
    max_deadline_ns: int = MAX_DEADLINE_NS,
) -> int:
    """Return the absolute deadline for firing *interval* after *now_ns*.

    Args:
        interval: Relative delay.  Negative or NaN means never fire.
        now_ns: Current wall-clock time in nanoseconds since the epoch.
        max_deadline_ns: Upper bound for the returned deadline.

    Returns:
        :data:`DISTANT_FUTURE_NS` for never-fire intervals, otherwise
        ``now_ns + interval`` saturated at *max_deadline_ns*.

    Example::

        >>> compute_deadline(Interval(500_000_000.0), now_ns=1_000)
        500001000
    """
    if never_fires(interval):
        return DISTANT_FUTURE_NS
    delay_ns = clamp_to_int(interval.nanoseconds, upper=max_deadline_ns)
    return min(now_ns + delay_ns, max_deadline_ns)


def schedule_after(
    timer: TimerPort,
    interval: Interval,
    *,
    clock: ClockPort | None = None,
    max_deadline_ns: int = MAX_DEADLINE_NS,
) -> int:
    """Arm *timer* to fire once *interval* has elapsed.

    Negative (and NaN) intervals arm the timer to never fire.

    Args:
        timer: The timer to arm.
        interval: Relative delay from now.
        clock: Clock sampled for "now".  Defaults to :class:`SystemClock`.
        max_deadline_ns: Upper bound for the armed deadline.

    Returns:
        The deadline the timer was armed with.
    """
    if never_fires(interval):
        logger.debug(
            "Arming %r to never fire (interval=%r)",
            timer,
            interval,
            extra={"deadline_ns": DISTANT_FUTURE_NS},
        )
        timer.arm_never()
        return DISTANT_FUTURE_NS

    now_ns = (clock if clock is not None else SystemClock()).now_ns()
    deadline = compute_deadline(interval, now_ns, max_deadline_ns=max_deadline_ns)
    logger.debug(
        "Arming %r at %d ns (interval=%r)",
        timer,
        deadline,
        interval,
        extra={"deadline_ns": deadline},
    )
    timer.arm_at(deadline)
    return deadline


# ---------------------------------------------------------------------------
# asyncio adapter
# ---------------------------------------------------------------------------


class AsyncioTimer:
    """:class:`TimerPort` backed by an asyncio event loop.

    The wall-clock deadline is converted to a ``loop.call_later``
    delay at arm time, so a wall-clock step after arming does not move
    the fire time.  Past deadlines fire on the next loop iteration.

    With *repeat* set, the timer re-arms itself after every fire at the
    previous deadline plus *repeat*, so callback run time and loop
    latency do not accumulate.  A timer that falls behind fires back to
    back until it catches up.  A negative *repeat* leaves it idle after
    the first fire.  Exceptions raised by the callback are logged and
    do not stop a repeating timer.

    Must be armed from the thread running its loop.

    Args:
        callback: Called with no arguments when the timer fires.
        repeat: Optional period for a repeating timer.
        clock: Clock used to turn deadlines into delays.
        loop: Event loop to schedule on.  Defaults to the running loop
            at the first ``arm_*`` call.

    Example::

        timer = AsyncioTimer(poll, repeat=seconds(30))
        schedule_after(timer, seconds(5))
    """

    def __init__(
        self,
        callback: Callable[[], object],
        *,
        repeat: Interval | None = None,
        clock: ClockPort | None = None,
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> None:
        self._callback = callback
        self._repeat = repeat
        self._clock: ClockPort = clock if clock is not None else SystemClock()
        self._loop = loop
        self._handle: asyncio.TimerHandle | None = None
        self._deadline_ns: int | None = None
        self._generation = 0

    def __repr__(self) -> str:
        return f"AsyncioTimer(deadline_ns={self._deadline_ns}, repeat={self._repeat!r})"

    # -- TimerPort -----------------------------------------------------------

    def arm_at(self, deadline_ns: int) -> None:
        """Schedule the callback at *deadline_ns*, replacing any pending fire."""
        self._cancel_handle()
        loop = self._get_loop()
        delay_s = max(deadline_ns - self._clock.now_ns(), 0) / NS_PER_SECOND
        self._deadline_ns = deadline_ns
        self._handle = loop.call_later(delay_s, self._fire)

    def arm_never(self) -> None:
        """Drop any pending fire and stay idle."""
        self._cancel_handle()
        self._deadline_ns = DISTANT_FUTURE_NS

    # -- state ---------------------------------------------------------------

    @property
    def armed(self) -> bool:
        """``True`` while a fire is pending on the loop."""
        return self._handle is not None

    @property
    def deadline_ns(self) -> int | None:
        """The current deadline, or ``None`` when disarmed."""
        return self._deadline_ns

    def cancel(self) -> None:
        """Disarm the timer; a repeating timer stops repeating."""
        self._cancel_handle()
        self._deadline_ns = None

    # -- internals -----------------------------------------------------------

    def _get_loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        return self._loop

    def _cancel_handle(self) -> None:
        self._generation += 1
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _fire(self) -> None:
        fired_ns = self._deadline_ns
        self._handle = None
        self._deadline_ns = None
        generation = self._generation
        try:
            self._callback()
        except Exception:
            logger.exception("Timer callback %r raised", self._callback)
        # Callback re-armed or cancelled the timer: leave it alone.
        if self._repeat is not None and generation == self._generation:
            self._rearm(self._repeat, fired_ns)

    def _rearm(self, repeat: Interval, previous_ns: int | None) -> None:
        if never_fires(repeat):
            self.arm_never()
            return
        if previous_ns is None:
            previous_ns = self._clock.now_ns()
        deadline = compute_deadline(repeat, previous_ns)
        logger.debug(
            "Re-arming %r at %d ns", self, deadline, extra={"deadline_ns": deadline}
        )
        self.arm_at(deadline)
