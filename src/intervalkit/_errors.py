"""Exception taxonomy for intervalkit.

Interval arithmetic is total over floating-point input, so almost
nothing in this package raises.  The exceptions below cover the few
precondition violations that cannot be expressed as IEEE-754 values:

- :class:`InvalidArgumentError` — empty ``longest()`` / ``shortest()``
  calls, NaN handed to the integer clamp.
- :class:`UnknownUnitError` — a unit name that is not on the ladder.

Both derive from :class:`ValueError` as well as :class:`IntervalError`
so callers can catch either the package base or the builtin.
"""

from __future__ import annotations

from collections.abc import Iterable


class IntervalError(Exception):
    """Base class for all intervalkit errors."""


class InvalidArgumentError(IntervalError, ValueError):
    """An operation was called with arguments it cannot accept."""


class UnknownUnitError(IntervalError, ValueError):
    """A unit name could not be resolved.

    Args:
        unit: The name that failed to resolve.
        accepted: The names that would have been accepted.
    """

    def __init__(self, unit: str, accepted: Iterable[str] = ()) -> None:
        self.unit = unit
        self.accepted = tuple(accepted)
        msg = f"Unknown unit {unit!r}"
        if self.accepted:
            msg += f". Choose from: {', '.join(self.accepted)}"
        super().__init__(msg)
