"""Millisecond time sources for the frame gate and animation timers."""

import time


class Clock:
    """Elapsed milliseconds since construction, from the monotonic clock."""

    def __init__(self):
        self._start = time.monotonic()

    def millis(self) -> int:
        return int((time.monotonic() - self._start) * 1000)


class ManualClock:
    """Clock driven by the caller. Used by tests and offline previews."""

    def __init__(self, start_ms: int = 0):
        self._now = start_ms

    def millis(self) -> int:
        return self._now

    def advance(self, ms: int) -> int:
        if ms < 0:
            raise ValueError("clock cannot run backwards")
        self._now += ms
        return self._now

    def set(self, ms: int):
        if ms < self._now:
            raise ValueError("clock cannot run backwards")
        self._now = ms


class FrameGate:
    """Throttles the render entry point to a maximum frame rate.

    Polled on every host tick; opens once `interval_ms` has elapsed since
    the last frame that was actually drawn.
    """

    def __init__(self, fps: int = 50):
        self.interval_ms = 1000 // fps
        self.last_frame = 0

    def set_fps(self, fps: int) -> bool:
        """Returns False (and keeps the old interval) for fps <= 0."""
        if fps <= 0:
            return False
        self.interval_ms = 1000 // fps
        return True

    def ready(self, now: int) -> bool:
        return now - self.last_frame >= self.interval_ms

    def mark(self, now: int):
        self.last_frame = now
