"""
Clock providers supplying the registry's notion of "now".

The registry only compares integers: an event date must be strictly
greater than the current clock value, and attendance records remember
the clock value at issuance.
"""

import time


class SystemClock:
    """Wall clock in whole Unix seconds, never running backwards"""

    def __init__(self):
        self._last = 0

    def now(self) -> int:
        current = int(time.time())
        if current < self._last:
            return self._last
        self._last = current
        return current


class ManualClock:
    """Counter advanced explicitly, like a block height"""

    def __init__(self, start: int = 0):
        self._value = start

    def now(self) -> int:
        return self._value

    def advance(self, blocks: int = 1) -> int:
        if blocks < 0:
            raise ValueError("clock cannot move backwards")
        self._value += blocks
        return self._value


_clock = SystemClock()


def get_clock():
    return _clock
