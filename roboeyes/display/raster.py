"""Software rasterizer: filled shapes written pixel by pixel onto a surface.

Nothing is buffered here. Every coordinate is clipped against the screen
before it reaches the surface, so surfaces never see out-of-range writes
from this module.
"""

from roboeyes.display.surface import Color, DisplaySurface
from roboeyes.utils.math_helpers import clamp, tdiv

# Quadrant masks for fill_circle()
TOP_LEFT = 0x1
TOP_RIGHT = 0x2
BOTTOM_LEFT = 0x4
BOTTOM_RIGHT = 0x8
ALL_QUADRANTS = TOP_LEFT | TOP_RIGHT | BOTTOM_LEFT | BOTTOM_RIGHT


class Rasterizer:
    """Stateless drawing primitives bound to one surface and screen size."""

    def __init__(self, surface: DisplaySurface, width: int, height: int):
        self._surface = surface
        self.width = width
        self.height = height

    def fill_rect(self, x: int, y: int, w: int, h: int, color: Color):
        x0 = clamp(x, 0, self.width)
        x1 = clamp(x + w, 0, self.width)
        y0 = clamp(y, 0, self.height)
        y1 = clamp(y + h, 0, self.height)
        set_pixel = self._surface.set_pixel
        for i in range(x0, x1):
            for j in range(y0, y1):
                set_pixel(i, j, color)

    def fill_round_rect(self, x: int, y: int, w: int, h: int, radius: int,
                        color: Color):
        """Rectangle with quarter-circle corners.

        Thin shapes (either side <= 2) are drawn as plain rectangles. The
        radius is clamped to half the shorter side.
        """
        if w <= 2 or h <= 2:
            self.fill_rect(x, y, w, h, color)
            return

        r = min(radius, w // 2, h // 2)
        if r < 1:
            r = 0

        # Center column at full height, side columns shortened by the corners
        self.fill_rect(x + r, y, w - 2 * r, h, color)
        self.fill_rect(x, y + r, r, h - 2 * r, color)
        self.fill_rect(x + w - r, y + r, r, h - 2 * r, color)

        if r > 0:
            self.fill_circle(x + r, y + r, r, TOP_LEFT, color)
            self.fill_circle(x + w - r - 1, y + r, r, TOP_RIGHT, color)
            self.fill_circle(x + r, y + h - r - 1, r, BOTTOM_LEFT, color)
            self.fill_circle(x + w - r - 1, y + h - r - 1, r, BOTTOM_RIGHT, color)

    def fill_circle(self, x0: int, y0: int, radius: int, corners: int,
                    color: Color):
        """Midpoint circle fill restricted to the quadrants set in `corners`.

        Span lengths differ per quadrant (the left quadrants span the full
        width, top-right is one pixel short of bottom-right). Kept as-is so
        rounded corners match the reference renderer pixel for pixel.
        """
        if radius <= 0:
            return

        f = 1 - radius
        ddf_x = 1
        ddf_y = -2 * radius
        x = 0
        y = radius
        hline = self._fast_hline
        while x <= y:
            if corners & TOP_LEFT:
                hline(x0 - y, y0 - x, 2 * y + 1, color)
                hline(x0 - x, y0 - y, 2 * x + 1, color)
            if corners & TOP_RIGHT:
                hline(x0, y0 - y, x, color)
                hline(x0, y0 - x, y, color)
            if corners & BOTTOM_LEFT:
                hline(x0 - y, y0 + x, 2 * y + 1, color)
                hline(x0 - x, y0 + y, 2 * x + 1, color)
            if corners & BOTTOM_RIGHT:
                hline(x0, y0 + y, x + 1, color)
                hline(x0, y0 + x, y + 1, color)

            if f >= 0:
                y -= 1
                ddf_y += 2
                f += ddf_y
            x += 1
            ddf_x += 2
            f += ddf_x

    def fill_triangle(self, x0: int, y0: int, x1: int, y1: int,
                      x2: int, y2: int, color: Color):
        """Scanline fill. Vertices are sorted top to bottom first.

        Edge crossings use exact integer division, truncated toward zero.
        """
        if y0 > y1:
            x0, y0, x1, y1 = x1, y1, x0, y0
        if y1 > y2:
            x1, y1, x2, y2 = x2, y2, x1, y1
        if y0 > y1:
            x0, y0, x1, y1 = x1, y1, x0, y0

        total_height = y2 - y0
        if total_height == 0:
            return

        top_height = y1 - y0
        bottom_height = y2 - y1

        # Top half: rows y0 .. y1-1, long edge against the x0->x1 edge
        if top_height > 0:
            for y in range(y0, y1):
                ax = x0 + tdiv((x2 - x0) * (y - y0), total_height)
                bx = x0 + tdiv((x1 - x0) * (y - y0), top_height)
                self.hspan(ax, bx, y, color)

        # Bottom half: rows y1 .. y2, long edge against the x1->x2 edge
        if bottom_height > 0:
            for y in range(y1, y2 + 1):
                ax = x0 + tdiv((x2 - x0) * (y - y0), total_height)
                bx = x1 + tdiv((x2 - x1) * (y - y1), bottom_height)
                self.hspan(ax, bx, y, color)

    def hspan(self, xa: int, xb: int, y: int, color: Color):
        """Clipped horizontal line from xa to xb inclusive."""
        if xa > xb:
            xa, xb = xb, xa
        if y < 0 or y >= self.height:
            return
        xa = max(xa, 0)
        xb = min(xb, self.width - 1)
        set_pixel = self._surface.set_pixel
        for x in range(xa, xb + 1):
            set_pixel(x, y, color)

    def _fast_hline(self, x: int, y: int, length: int, color: Color):
        if length > 0:
            self.hspan(x, x + length - 1, y, color)
