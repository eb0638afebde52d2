"""Shared fixtures: a recording surface double and a manual clock."""

import random

import pytest

from roboeyes.clock import ManualClock
from roboeyes.display.surface import DisplaySurface
from roboeyes.robo_eyes import RoboEyes


class RecordingSurface(DisplaySurface):
    """Keeps the pixels written since the last clear()."""

    def __init__(self, width: int = 128, height: int = 64):
        self.width = width
        self.height = height
        self.pixels: dict[tuple[int, int], tuple] = {}
        self.writes = 0
        # Every in-range coordinate written, across clears
        self.touched: set[tuple[int, int]] = set()
        self.out_of_range = 0
        self.clears = 0
        self.flushes = 0
        self.fail_flush: Exception | None = None

    def clear(self):
        self.pixels.clear()
        self.clears += 1

    def set_pixel(self, x, y, color):
        self.writes += 1
        if not (0 <= x < self.width and 0 <= y < self.height):
            self.out_of_range += 1
            return
        self.pixels[(x, y)] = color
        self.touched.add((x, y))

    def flush(self):
        if self.fail_flush is not None:
            raise self.fail_flush
        self.flushes += 1

    def size(self):
        return self.width, self.height

    def lit(self, color=(255, 255, 255)) -> set[tuple[int, int]]:
        return {xy for xy, c in self.pixels.items() if c == color}


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def eyes(surface, clock):
    e = RoboEyes(clock=clock, rng=random.Random(1234))
    e.begin(surface, 128, 64, 50)
    return e
