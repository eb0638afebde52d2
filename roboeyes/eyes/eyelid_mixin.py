"""Shared eyelid overlay drawing for the eye renderer."""

from roboeyes.eyes.expressions import Mood
from roboeyes.eyes.eye_state import GeometrySnapshot
from roboeyes.utils.math_helpers import ease, tdiv


class EyelidMixin:
    """Mixin providing mood eyelid overlays.

    Requires the using class to set:
        self._raster: Rasterizer
        self._bg_color: Color       (overlays are drawn in background color)
        self.eyelids: EyelidState
        self.mood: Mood
    """

    def _update_eyelids(self, snap: GeometrySnapshot):
        lids = self.eyelids
        half_height = tdiv(snap.left.height, 2)

        lids.tired_next = half_height if self.mood is Mood.TIRED else 0
        lids.angry_next = half_height if self.mood is Mood.ANGRY else 0
        lids.happy_bottom_next = half_height if self.mood is Mood.HAPPY else 0

        lids.tired = ease(lids.tired, lids.tired_next)
        lids.angry = ease(lids.angry, lids.angry_next)
        lids.happy_bottom = ease(lids.happy_bottom, lids.happy_bottom_next)

    def _draw_eyelids(self, snap: GeometrySnapshot):
        self._update_eyelids(snap)
        lids = self.eyelids
        left = snap.left

        # Both eyes share the left eye's top and bottom edges
        top_y = left.y - 1
        bottom_y = left.y + left.height

        if lids.tired > 0:
            self._draw_lid_wedges(snap, top_y, lids.tired, outer=True)
        if lids.angry > 0:
            self._draw_lid_wedges(snap, top_y, lids.angry, outer=False)

        if lids.happy_bottom > 0:
            eyes = (snap.left,) if snap.cyclops else (snap.left, snap.right)
            for eye in eyes:
                self._raster.fill_round_rect(
                    eye.x - 1, bottom_y - lids.happy_bottom + 1,
                    eye.width + 2, lids.happy_bottom,
                    eye.radius, self._bg_color,
                )

    def _draw_lid_wedges(self, snap: GeometrySnapshot, top_y: int, height: int,
                         outer: bool):
        """Triangular lids hanging from the outer (tired) or inner (angry)
        top corner of each eye."""
        tri = self._raster.fill_triangle
        bg = self._bg_color
        bottom = top_y + height

        if snap.cyclops:
            # Single eye: split at the midpoint, one wedge per half
            x0 = snap.left.x
            x1 = snap.left.x + snap.left.width
            mid = snap.left.x + tdiv(snap.left.width, 2)
            tri(x0, top_y, mid, top_y, x0 if outer else mid, bottom, bg)
            tri(mid, top_y, x1, top_y, x1 if outer else mid, bottom, bg)
            return

        left, right = snap.left, snap.right
        lx1 = left.x + left.width
        rx1 = right.x + right.width
        tri(left.x, top_y, lx1, top_y, left.x if outer else lx1, bottom, bg)
        tri(right.x, top_y, rx1, top_y, rx1 if outer else right.x, bottom, bg)
