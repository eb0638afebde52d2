"""Pillow-backed display surface for headless rendering and previews."""

import numpy as np
from PIL import Image

from roboeyes.display.surface import BG_COLOR, Color, DisplaySurface


class ImageSurface(DisplaySurface):
    """Draws into a PIL Image and hands a copy to `sink` on every flush.

    The sink is typically a panel driver's display call, e.g. a luma.oled
    device's ``display(image)``. Whatever the sink raises is propagated.
    """

    def __init__(self, width: int, height: int, sink=None,
                 background: Color = BG_COLOR):
        self._width = width
        self._height = height
        self._sink = sink
        self._background = background
        self._img = Image.new("RGB", (width, height), background)
        self.flush_count = 0

    @property
    def image(self) -> Image.Image:
        """The pending frame (reused between frames, copy before keeping)."""
        return self._img

    def clear(self):
        self._img.paste(self._background, (0, 0, self._width, self._height))

    def set_pixel(self, x: int, y: int, color: Color):
        if 0 <= x < self._width and 0 <= y < self._height:
            self._img.putpixel((x, y), tuple(color))

    def flush(self):
        if self._sink is not None:
            self._sink(self._img.copy())
        self.flush_count += 1

    def set_background(self, color: Color):
        """Color used by clear() from the next frame on."""
        self._background = tuple(color)

    def size(self) -> tuple[int, int]:
        return self._width, self._height

    def lit_pixels(self) -> set[tuple[int, int]]:
        """Coordinates of every pixel that differs from the background."""
        arr = np.asarray(self._img, dtype=np.int16)
        mask = np.any(arr != np.array(self._background, dtype=np.int16), axis=2)
        return {(int(x), int(y)) for y, x in np.argwhere(mask)}
