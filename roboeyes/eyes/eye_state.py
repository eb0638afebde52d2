from dataclasses import dataclass


@dataclass
class Dimension:
    """A smoothed value: `current` eases toward `next` once per frame."""

    default: int
    current: int
    next: int

    @classmethod
    def settled(cls, value: int) -> "Dimension":
        return cls(default=value, current=value, next=value)


@dataclass
class EyeGeometry:
    """Complete animated geometry of one eye."""

    width: Dimension
    height: Dimension
    radius: Dimension

    # Top-left corner: current and target
    x: int = 0
    y: int = 0
    x_next: int = 0
    y_next: int = 0
    x_default: int = 0
    y_default: int = 0

    # Curiosity bulge added on top of the height target
    height_offset: int = 0

    # Intended end state, not the visual one (see GeometryEngine.step)
    is_open: bool = False


@dataclass
class EyelidState:
    """Mood overlay sizes, smoothed like the eye geometry."""

    tired: int = 0
    tired_next: int = 0
    angry: int = 0
    angry_next: int = 0
    happy_bottom: int = 0
    happy_bottom_next: int = 0


@dataclass
class FlickerState:
    """Per-axis positional shiver, alternating sign every frame."""

    active: bool = False
    amplitude: int = 0
    alternate: bool = False


@dataclass(frozen=True)
class EyeBox:
    x: int
    y: int
    width: int
    height: int
    radius: int


@dataclass(frozen=True)
class GeometrySnapshot:
    """Per-frame geometry handed from the engine to the renderer."""

    left: EyeBox
    right: EyeBox
    cyclops: bool = False
