"""Public test-support utilities for intervalkit.

Re-exports test doubles and factories so that consumer test suites
can import everything from a single ``intervalkit.testing`` namespace
instead of reaching into private modules.

Provided symbols:

- :class:`FakeClock` — deterministic wall clock for timing tests.
- :class:`FakeTimer` — timer double that records arm calls.
- :func:`make_settings` — factory for ``Settings`` without ``.env`` files.
"""

from intervalkit.testing._clock import FakeClock
from intervalkit.testing._settings import make_settings
from intervalkit.testing._timer import FakeTimer

__all__ = [
    "FakeClock",
    "FakeTimer",
    "make_settings",
]
