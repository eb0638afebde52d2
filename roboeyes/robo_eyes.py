"""Public control surface for the animated eyes.

Typical host loop:

    eyes = RoboEyes()
    eyes.begin(surface, fps=50)
    eyes.set_autoblink(True, 3, 2)
    eyes.set_idle_mode(True, 2, 2)
    while True:
        eyes.update()      # cheap no-op between frames
        time.sleep(0.005)

Everything runs on the caller's thread; serialize access if several threads
touch the same instance.
"""

import logging
import random

from roboeyes.clock import Clock, FrameGate
from roboeyes.display.surface import BG_COLOR, EYE_COLOR, Color, DisplaySurface
from roboeyes.eyes.animator import AnimationScheduler
from roboeyes.eyes.expressions import Direction, Mood
from roboeyes.eyes.eye_renderer import RenderPipeline
from roboeyes.eyes.geometry import GeometryEngine

log = logging.getLogger("roboeyes")


class RoboEyes:
    """Geometry, animation timers and renderer wired to one surface."""

    def __init__(self, clock=None, rng: random.Random | None = None):
        self._clock = clock
        self._rng = rng or random.Random()
        self._gate = FrameGate()
        self._geo: GeometryEngine | None = None
        self._scheduler: AnimationScheduler | None = None
        self._pipeline: RenderPipeline | None = None

    def begin(self, surface: DisplaySurface, width: int | None = None,
              height: int | None = None, fps: int = 50):
        """Reset all state and size the eyes for the surface.

        Width/height default to what the surface reports.
        """
        if width is None or height is None:
            surface_w, surface_h = surface.size()
            width = surface_w if width is None else width
            height = surface_h if height is None else height

        if self._clock is None:
            self._clock = Clock()

        self._geo = GeometryEngine(width, height)
        self._scheduler = AnimationScheduler(self._geo, self._rng)
        self._pipeline = RenderPipeline(surface, self._geo, self._scheduler,
                                        width, height, EYE_COLOR, BG_COLOR)
        self._gate = FrameGate()
        self._gate.mark(self._clock.millis())
        self.set_framerate(fps)
        log.info(f"RoboEyes ready: {width}x{height}, "
                 f"frame interval {self._gate.interval_ms} ms")

    def update(self) -> bool:
        """Per-tick entry point. Draws a frame only when one is due.

        Returns True when a frame was drawn. Errors raised by the surface's
        flush() propagate to the caller.
        """
        pipeline = self._require()
        now = self._clock.millis()
        if not self._gate.ready(now):
            return False
        pipeline.draw_frame(now)
        self._gate.mark(now)
        return True

    def draw_eyes(self):
        """Render one frame immediately, bypassing the frame gate."""
        self._require().draw_frame(self._clock.millis())

    # --- General setup ---

    def set_framerate(self, fps: int):
        if not self._gate.set_fps(fps):
            log.warning(f"Ignoring invalid frame rate {fps}, "
                        f"keeping {self._gate.interval_ms} ms interval")

    def set_display_colors(self, eye_color: Color, bg_color: Color):
        """Eye and eyelid colors. The surface clears with its own background,
        so give it the same `bg_color` (e.g. ImageSurface.set_background)
        or the eyelid overlays show up as visible wedges."""
        self._require().set_colors(eye_color, bg_color)

    def set_width(self, left: int, right: int):
        self._require()
        self._geo.set_width(left, right)

    def set_height(self, left: int, right: int):
        self._require()
        self._geo.set_height(left, right)

    def set_border_radius(self, left: int, right: int):
        self._require()
        self._geo.set_border_radius(left, right)

    def set_space_between(self, space: int):
        self._require()
        self._geo.set_space_between(space)

    # --- Expressions ---

    def set_mood(self, mood: Mood):
        """Select exactly one of the moods; the others are cleared."""
        pipeline = self._require()
        pipeline.mood = Mood(mood)
        log.debug(f"Mood: {pipeline.mood.value}")

    def set_direction(self, direction: Direction, settled: bool = False):
        """Aim the gaze. With `settled`, the target is measured against the
        eye sizes being eased toward rather than the current ones."""
        self._require()
        self._geo.look(direction, settled)

    def set_curiosity(self, active: bool):
        self._require()
        self._geo.curious = active

    def set_cyclops(self, active: bool):
        self._require()
        self._geo.cyclops = active

    # --- Animations ---

    def set_autoblink(self, active: bool, interval: int | None = None,
                      variation: int | None = None):
        """Automatic blinking every `interval` + random(0..variation) seconds."""
        self._require()
        self._scheduler.autoblink.configure(active, interval, variation)

    def set_idle_mode(self, active: bool, interval: int | None = None,
                      variation: int | None = None):
        """Random gaze repositioning every `interval` + random(0..variation) seconds."""
        self._require()
        self._scheduler.idle.configure(active, interval, variation)

    def set_hflicker(self, active: bool, amplitude: int = 2):
        self._require()
        self._scheduler.set_hflicker(active, amplitude)

    def set_vflicker(self, active: bool, amplitude: int = 10):
        self._require()
        self._scheduler.set_vflicker(active, amplitude)

    def close(self, left: bool = True, right: bool = True):
        self._require()
        self._geo.close(left, right)

    def open(self, left: bool = True, right: bool = True):
        self._require()
        self._geo.open(left, right)

    def blink(self, left: bool = True, right: bool = True):
        self.close(left, right)
        self.open(left, right)

    def anim_confused(self):
        self._require()
        self._scheduler.confused.trigger()

    def anim_laugh(self):
        self._require()
        self._scheduler.laugh.trigger()

    # --- Queries ---

    @property
    def mood(self) -> Mood:
        return self._require().mood

    # Single-flag views of the mood, for callers used to separate booleans
    @property
    def tired(self) -> bool:
        return self.mood is Mood.TIRED

    @property
    def angry(self) -> bool:
        return self.mood is Mood.ANGRY

    @property
    def happy(self) -> bool:
        return self.mood is Mood.HAPPY

    @property
    def frame_interval(self) -> int:
        return self._gate.interval_ms

    @property
    def frame_count(self) -> int:
        return self._require().frame_count

    @property
    def geometry(self) -> GeometryEngine:
        self._require()
        return self._geo

    @property
    def scheduler(self) -> AnimationScheduler:
        self._require()
        return self._scheduler

    def screen_constraint_x(self) -> int:
        self._require()
        return self._geo.screen_constraint_x()

    def screen_constraint_y(self) -> int:
        self._require()
        return self._geo.screen_constraint_y()

    def _require(self) -> RenderPipeline:
        if self._pipeline is None:
            raise RuntimeError("RoboEyes.begin() must be called first")
        return self._pipeline
