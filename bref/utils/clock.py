"""Wall-clock sources for time-based key generation

Time-based keys are derived from whole seconds since the Unix epoch. The
clock is injected so callers (and tests) can supply deterministic values
instead of depending on real elapsed time.

Classes:
    Clock:
        Protocol: anything with a `seconds() -> int` method.
    SystemClock:
        Reads the host's wall-clock time.
    FrozenClock:
        Holds a fixed value which only changes when advanced explicitly.

Example:
    >>> from bref.utils.clock import FrozenClock
    >>> clock = FrozenClock(1000)
    >>> clock.seconds()
    1000
    >>> clock.advance(1).seconds()
    1001
"""

import math
import time
from typing import Protocol


class Clock(Protocol):
    def seconds(self) -> int:
        """Return the current time as whole seconds since the Unix epoch."""
        ...


class SystemClock:
    """Clock backed by `time.time()`.

    NOTE: the value is floored (not truncated), so a host clock set before
          the epoch yields a negative number instead of rounding up to 0.
    """

    def seconds(self) -> int:
        return math.floor(time.time())

    def __repr__(self) -> str:
        return 'SystemClock()'


class FrozenClock:
    """Clock returning a fixed value until advanced."""

    def __init__(self, seconds: int = 0):
        self._seconds = seconds

    def seconds(self) -> int:
        return self._seconds

    def advance(self, seconds: int = 1) -> 'FrozenClock':
        """Move the clock forward by `seconds` (returns self for chaining)."""
        self._seconds += seconds
        return self

    def __repr__(self) -> str:
        return f'FrozenClock({self._seconds})'


SYSTEM_CLOCK = SystemClock()
