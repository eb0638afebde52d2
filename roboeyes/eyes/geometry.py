"""Per-eye size/position/radius state and the per-frame smoothing step."""

import logging

from roboeyes.eyes.expressions import DIRECTION_TARGETS, Direction
from roboeyes.eyes.eye_state import (
    Dimension, EyeBox, EyeGeometry, GeometrySnapshot,
)
from roboeyes.utils.math_helpers import ease, tdiv

log = logging.getLogger("roboeyes")

CLOSED_HEIGHT = 1
CURIOUS_OFFSET = 8
CURIOUS_EDGE_MARGIN = 10


class GeometryEngine:
    """Owns target and current geometry for both eyes.

    Only the left eye's position is driven directly (gaze, idle wandering).
    The right eye trails it at a distance of left width + spacing.
    """

    def __init__(self, screen_width: int, screen_height: int,
                 eye_width: int = 36, eye_height: int = 36,
                 border_radius: int = 8, space_between: int = 10):
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.curious = False
        self.cyclops = False

        self.space = Dimension.settled(space_between)
        self.left = self._new_eye(eye_width, eye_height, border_radius)
        self.right = self._new_eye(eye_width, eye_height, border_radius)

        left, right = self.left, self.right
        left.x_default = tdiv(screen_width - (left.width.default + space_between
                                              + right.width.default), 2)
        left.y_default = tdiv(screen_height - left.height.default, 2)
        right.x_default = left.x_default + left.width.current + space_between
        right.y_default = left.y_default
        for eye in (left, right):
            eye.x = eye.x_next = eye.x_default
            eye.y = eye.y_next = eye.y_default

    @staticmethod
    def _new_eye(width: int, height: int, radius: int) -> EyeGeometry:
        # Eyes start closed and open over the first frames
        return EyeGeometry(
            width=Dimension.settled(width),
            height=Dimension(default=height, current=CLOSED_HEIGHT, next=height),
            radius=Dimension.settled(radius),
        )

    # --- Defaults ---

    def set_width(self, left: int, right: int):
        self.left.width.default = self.left.width.next = left
        self.right.width.default = self.right.width.next = right

    def set_height(self, left: int, right: int):
        self.left.height.default = self.left.height.next = left
        self.right.height.default = self.right.height.next = right

    def set_border_radius(self, left: int, right: int):
        self.left.radius.default = self.left.radius.next = left
        self.right.radius.default = self.right.radius.next = right

    def set_space_between(self, space: int):
        self.space.default = self.space.next = space

    # --- Position targets ---

    def screen_constraint_x(self, settled: bool = False) -> int:
        """Largest x the left eye may take while both eyes stay on screen.

        With `settled`, measured from target sizes instead of current ones.
        """
        if settled:
            return (self.screen_width - self.left.width.next
                    - self.space.next - self.right.width.next)
        return (self.screen_width - self.left.width.current
                - self.space.current - self.right.width.current)

    def screen_constraint_y(self) -> int:
        return self.screen_height - self.left.height.default

    def move_to(self, x: int, y: int):
        """Set the left eye's target position (right eye follows)."""
        self.left.x_next = x
        self.left.y_next = y

    def look(self, direction: Direction, settled: bool = False):
        log.debug(f"Gaze direction: {direction.name}")
        max_x = self.screen_constraint_x(settled)
        max_y = self.screen_constraint_y()
        (xn, xd), (yn, yd) = DIRECTION_TARGETS.get(
            direction, DIRECTION_TARGETS[Direction.CENTER])
        self.move_to(tdiv(max_x * xn, xd), tdiv(max_y * yn, yd))

    # --- Lids ---

    def close(self, left: bool = True, right: bool = True):
        for eye, selected in ((self.left, left), (self.right, right)):
            if selected:
                eye.height.next = CLOSED_HEIGHT
                eye.is_open = False

    def open(self, left: bool = True, right: bool = True):
        for eye, selected in ((self.left, left), (self.right, right)):
            if selected:
                eye.is_open = True

    # --- Per frame ---

    def step(self):
        """Advance every smoothed value one step toward its target."""
        left, right = self.left, self.right
        self._update_curiosity()

        for eye in (left, right):
            eye.height.current = ease(eye.height.current,
                                      eye.height.next + eye.height_offset)
            # Keep the eye vertically centered while it changes height
            eye.y += tdiv(eye.height.default - eye.height.current, 2)
            eye.y -= tdiv(eye.height_offset, 2)

        # A collapsed eye that is meant to be open springs back
        for eye in (left, right):
            if eye.is_open and eye.height.current <= CLOSED_HEIGHT + eye.height_offset:
                eye.height.next = eye.height.default

        left.width.current = ease(left.width.current, left.width.next)
        right.width.current = ease(right.width.current, right.width.next)
        self.space.current = ease(self.space.current, self.space.next)

        left.x = ease(left.x, left.x_next)
        left.y = ease(left.y, left.y_next)
        right.x_next = left.x_next + left.width.current + self.space.current
        right.y_next = left.y_next
        right.x = ease(right.x, right.x_next)
        right.y = ease(right.y, right.y_next)

        left.radius.current = ease(left.radius.current, left.radius.next)
        right.radius.current = ease(right.radius.current, right.radius.next)

    def _update_curiosity(self):
        left, right = self.left, self.right
        if not self.curious:
            left.height_offset = 0
            right.height_offset = 0
            return

        if left.x_next <= CURIOUS_EDGE_MARGIN:
            left.height_offset = CURIOUS_OFFSET
        elif self.cyclops and left.x_next >= self.screen_constraint_x() - CURIOUS_EDGE_MARGIN:
            left.height_offset = CURIOUS_OFFSET
        else:
            left.height_offset = 0

        right_edge = self.screen_width - right.width.current - CURIOUS_EDGE_MARGIN
        right.height_offset = CURIOUS_OFFSET if right.x_next >= right_edge else 0

    def nudge(self, dx: int, dy: int):
        """Shift both eyes' current position (flicker), targets untouched."""
        for eye in (self.left, self.right):
            eye.x += dx
            eye.y += dy

    def enforce_cyclops(self):
        """Hard-hide the right eye. Not smoothed."""
        if self.cyclops:
            self.right.width.current = 0
            self.right.height.current = 0
            self.space.current = 0

    def snapshot(self) -> GeometrySnapshot:
        return GeometrySnapshot(
            left=self._box(self.left),
            right=self._box(self.right),
            cyclops=self.cyclops,
        )

    @staticmethod
    def _box(eye: EyeGeometry) -> EyeBox:
        return EyeBox(eye.x, eye.y, eye.width.current, eye.height.current,
                      eye.radius.current)
