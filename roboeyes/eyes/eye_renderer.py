from roboeyes.display.raster import Rasterizer
from roboeyes.display.surface import BG_COLOR, EYE_COLOR, Color, DisplaySurface
from roboeyes.eyes.animator import AnimationScheduler
from roboeyes.eyes.expressions import Mood
from roboeyes.eyes.eye_state import EyelidState, GeometrySnapshot
from roboeyes.eyes.eyelid_mixin import EyelidMixin
from roboeyes.eyes.geometry import GeometryEngine


class RenderPipeline(EyelidMixin):
    """Draws one complete frame of both eyes onto a display surface."""

    def __init__(self, surface: DisplaySurface, geometry: GeometryEngine,
                 scheduler: AnimationScheduler, width: int, height: int,
                 eye_color: Color = EYE_COLOR, bg_color: Color = BG_COLOR):
        self._surface = surface
        self._geo = geometry
        self._scheduler = scheduler
        self._raster = Rasterizer(surface, width, height)
        self.eye_color = eye_color
        self._bg_color = bg_color
        self.mood = Mood.DEFAULT
        self.eyelids = EyelidState()
        self.frame_count = 0

    def set_colors(self, eye_color: Color, bg_color: Color):
        self.eye_color = eye_color
        self._bg_color = bg_color

    def draw_frame(self, now: int) -> GeometrySnapshot:
        """Advance animation state and render. Surface flush errors propagate."""
        # 1. Geometry smoothing
        self._geo.step()

        # 2. Timers, shakes and flicker
        self._scheduler.tick(now)

        snap = self._geo.snapshot()

        # 3. Clear
        self._surface.clear()

        # 4. Eye shapes
        self._draw_eye_shapes(snap)

        # 5. Mood eyelids
        self._draw_eyelids(snap)

        # 6. Push to device
        self._surface.flush()
        self.frame_count += 1
        return snap

    def _draw_eye_shapes(self, snap: GeometrySnapshot):
        left = snap.left
        self._raster.fill_round_rect(left.x, left.y, left.width, left.height,
                                     left.radius, self.eye_color)
        if not snap.cyclops:
            right = snap.right
            self._raster.fill_round_rect(right.x, right.y, right.width,
                                         right.height, right.radius,
                                         self.eye_color)
