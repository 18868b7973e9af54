"""intervalkit.

Signed nanosecond-precision durations, a unit ladder for building them
from plain numbers, date arithmetic, and timer deadline computation.
"""

from importlib.metadata import PackageNotFoundError, version

from intervalkit._clock import ClockPort, SystemClock
from intervalkit._dates import (
    add_interval,
    interval_since,
    interval_since_now,
    subtract_interval,
)
from intervalkit._errors import IntervalError, InvalidArgumentError, UnknownUnitError
from intervalkit._interval import Interval
from intervalkit._logging import JsonFormatter, configure_logging
from intervalkit._settings import LoggingSettings, Settings
from intervalkit._timer import (
    DISTANT_FUTURE_NS,
    MAX_DEADLINE_NS,
    AsyncioTimer,
    TimerPort,
    clamp_to_int,
    compute_deadline,
    never_fires,
    schedule_after,
)
from intervalkit._units import (
    UNITS,
    Amount,
    IntervalConvertible,
    amount,
    canonical_unit,
    day,
    days,
    hour,
    hours,
    interval_of,
    microsecond,
    microseconds,
    millisecond,
    milliseconds,
    minute,
    minutes,
    nanosecond,
    nanoseconds,
    project,
    second,
    seconds,
    week,
    weeks,
)

try:
    # Prefer the generated version file (setuptools_scm at build time)
    from intervalkit._version import __version__
except ImportError:
    try:
        # Fallback to installed package metadata
        __version__ = version("intervalkit")
    except PackageNotFoundError:
        # Last resort fallback for editable installs without metadata
        __version__ = "0.0.0+unknown"

__all__ = [
    # Version
    "__version__",
    # Interval
    "Interval",
    # Units
    "UNITS",
    "Amount",
    "IntervalConvertible",
    "amount",
    "canonical_unit",
    "interval_of",
    "project",
    "nanosecond",
    "nanoseconds",
    "microsecond",
    "microseconds",
    "millisecond",
    "milliseconds",
    "second",
    "seconds",
    "minute",
    "minutes",
    "hour",
    "hours",
    "day",
    "days",
    "week",
    "weeks",
    # Dates
    "add_interval",
    "interval_since",
    "interval_since_now",
    "subtract_interval",
    # Clock
    "ClockPort",
    "SystemClock",
    # Timer
    "DISTANT_FUTURE_NS",
    "MAX_DEADLINE_NS",
    "AsyncioTimer",
    "TimerPort",
    "clamp_to_int",
    "compute_deadline",
    "never_fires",
    "schedule_after",
    # Errors
    "IntervalError",
    "InvalidArgumentError",
    "UnknownUnitError",
    # Logging
    "JsonFormatter",
    "configure_logging",
    # Settings
    "LoggingSettings",
    "Settings",
]
