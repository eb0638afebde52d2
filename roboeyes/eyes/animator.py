"""Timer-driven animations that steer the geometry engine.

Every animation is a small state machine polled once per frame with the
same clock reading:

    RecurringTimer   armed --(now >= due)--> fire, re-arm at now + interval + jitter
    ShakeAnimation   idle --trigger()--> pending --poll--> holding --(duration)--> idle

No animation sleeps or blocks; each poll() finishes within the frame.
"""

import logging
import random
from enum import Enum, auto

from roboeyes.eyes.eye_state import FlickerState
from roboeyes.eyes.geometry import GeometryEngine

log = logging.getLogger("roboeyes")

SHAKE_DURATION_MS = 500
CONFUSED_AMPLITUDE = 20
LAUGH_AMPLITUDE = 5


class RecurringTimer:
    """Fires whenever the clock passes `due`, then re-arms itself."""

    def __init__(self, interval_ms: int, variation_ms: int,
                 rng: random.Random | None = None):
        self.active = False
        self.interval_ms = interval_ms
        self.variation_ms = variation_ms
        self.due = 0
        self._rng = rng or random.Random()

    def configure(self, active: bool, interval_s: int | None = None,
                  variation_s: int | None = None):
        """Enable/disable; interval and variation are given in whole seconds."""
        self.active = active
        if interval_s is not None:
            self.interval_ms = interval_s * 1000
        if variation_s is not None:
            self.variation_ms = variation_s * 1000

    def poll(self, now: int) -> bool:
        if not self.active or now < self.due:
            return False
        self.due = now + self.interval_ms + self._jitter()
        return True

    def _jitter(self) -> int:
        # Zero variation means a fixed interval, never an empty random range
        if self.variation_ms <= 0:
            return 0
        return self._rng.randrange(self.variation_ms)


class ShakePhase(Enum):
    IDLE = auto()
    PENDING = auto()
    HOLDING = auto()


class ShakeAnimation:
    """One-shot flicker burst on one axis for a fixed duration."""

    def __init__(self, name: str, flicker: FlickerState, amplitude: int,
                 duration_ms: int = SHAKE_DURATION_MS):
        self.name = name
        self.amplitude = amplitude
        self.duration_ms = duration_ms
        self.phase = ShakePhase.IDLE
        self.started_at = 0
        self._flicker = flicker

    @property
    def active(self) -> bool:
        return self.phase is not ShakePhase.IDLE

    def trigger(self):
        """Start a shake. Ignored while a previous one is still running."""
        if self.phase is ShakePhase.IDLE:
            self.phase = ShakePhase.PENDING
            log.debug(f"Shake triggered: {self.name}")

    def poll(self, now: int):
        if self.phase is ShakePhase.PENDING:
            self._flicker.active = True
            self._flicker.amplitude = self.amplitude
            self.started_at = now
            self.phase = ShakePhase.HOLDING
        elif self.phase is ShakePhase.HOLDING and now >= self.started_at + self.duration_ms:
            self._flicker.active = False
            self._flicker.amplitude = 0
            self.phase = ShakePhase.IDLE


class AnimationScheduler:
    """Runs autoblink, idle wandering, shakes and flicker against one engine."""

    def __init__(self, geometry: GeometryEngine, rng: random.Random | None = None):
        self._geo = geometry
        self._rng = rng or random.Random()

        self.hflicker = FlickerState(amplitude=2)
        self.vflicker = FlickerState(amplitude=10)

        self.autoblink = RecurringTimer(1000, 4000, self._rng)
        self.idle = RecurringTimer(1000, 3000, self._rng)

        self.confused = ShakeAnimation("confused", self.hflicker, CONFUSED_AMPLITUDE)
        self.laugh = ShakeAnimation("laugh", self.vflicker, LAUGH_AMPLITUDE)

    def set_hflicker(self, active: bool, amplitude: int):
        self.hflicker.active = active
        self.hflicker.amplitude = amplitude

    def set_vflicker(self, active: bool, amplitude: int):
        self.vflicker.active = active
        self.vflicker.amplitude = amplitude

    def tick(self, now: int):
        """Run all state machines for this frame, then apply flicker."""
        geo = self._geo

        if self.autoblink.poll(now):
            # Reopening is left to the geometry step once the lid has collapsed
            geo.close()
            geo.open()

        self.laugh.poll(now)
        self.confused.poll(now)

        if self.idle.poll(now):
            geo.move_to(self._random_below(geo.screen_constraint_x()),
                        self._random_below(geo.screen_constraint_y()))

        if self.hflicker.active:
            self._apply_flicker(self.hflicker, horizontal=True)
        if self.vflicker.active:
            self._apply_flicker(self.vflicker, horizontal=False)

        geo.enforce_cyclops()

    def _apply_flicker(self, flicker: FlickerState, horizontal: bool):
        offset = flicker.amplitude if flicker.alternate else -flicker.amplitude
        if horizontal:
            self._geo.nudge(offset, 0)
        else:
            self._geo.nudge(0, offset)
        flicker.alternate = not flicker.alternate

    def _random_below(self, limit: int) -> int:
        if limit <= 0:
            return 0
        return self._rng.randrange(limit)
