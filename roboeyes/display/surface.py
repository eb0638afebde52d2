"""Capability contract between the eye engine and a pixel display."""

from abc import ABC, abstractmethod

Color = tuple[int, int, int]

EYE_COLOR: Color = (255, 255, 255)
BG_COLOR: Color = (0, 0, 0)


class DisplaySurface(ABC):
    """Minimal set of operations the engine needs from a display.

    Implementations:
      - must silently ignore set_pixel() calls outside the drawable area
      - may raise from flush(); the error reaches whoever called the render
        entry point and is not retried
    """

    @abstractmethod
    def clear(self):
        """Reset the drawable area to the background."""

    @abstractmethod
    def set_pixel(self, x: int, y: int, color: Color):
        """Write one pixel into the pending frame."""

    @abstractmethod
    def flush(self):
        """Push the pending frame to the physical device."""

    @abstractmethod
    def size(self) -> tuple[int, int]:
        """Return (width, height) in pixels."""
