"""
Clocks that supply advance() timestamps, in milliseconds.
"""

import time


class Clock:
    def now(self) -> float:
        raise NotImplementedError


class MonotonicClock(Clock):
    """Wall-clock milliseconds from time.monotonic()."""

    def now(self) -> float:
        return time.monotonic() * 1000.0


class ManualClock(Clock):
    """
    Deterministic clock that only moves when told to.

    Used by tests and headless runs to replay a game frame by frame.
    """

    def __init__(self, start: float = 0.0, frame_ms: float = 16.0):
        if frame_ms < 0:
            raise ValueError("frame_ms must not be negative")
        self._now = start
        self.frame_ms = frame_ms

    def now(self) -> float:
        return self._now

    def tick(self, ms: float = None) -> float:
        step = self.frame_ms if ms is None else ms
        if step < 0:
            raise ValueError("Clock cannot move backwards")
        self._now += step
        return self._now
