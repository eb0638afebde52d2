"""Moods and gaze directions understood by the eye engine."""

from enum import Enum


class Mood(Enum):
    DEFAULT = "default"
    TIRED = "tired"
    ANGRY = "angry"
    HAPPY = "happy"


class Direction(Enum):
    CENTER = "center"
    N = "n"
    NE = "ne"
    E = "e"
    SE = "se"
    S = "s"
    SW = "sw"
    W = "w"
    NW = "nw"


# Gaze targets as (numerator, denominator) fractions of the allowed
# position range on each axis. Results are truncated to whole pixels.
DIRECTION_TARGETS = {
    Direction.CENTER: ((1, 2), (1, 2)),
    Direction.N:      ((1, 2), (0, 1)),
    Direction.NE:     ((1, 1), (0, 1)),
    Direction.E:      ((1, 1), (1, 2)),
    Direction.SE:     ((1, 1), (1, 1)),
    Direction.S:      ((1, 2), (1, 1)),
    Direction.SW:     ((0, 1), (1, 1)),
    Direction.W:      ((0, 1), (1, 2)),
    Direction.NW:     ((0, 1), (0, 1)),
}


def parse_mood(name: str) -> Mood:
    """Look up a mood by case-insensitive name."""
    try:
        return Mood(name.strip().lower())
    except ValueError:
        valid = ", ".join(m.value for m in Mood)
        raise ValueError(f"Unknown mood {name!r} (expected one of: {valid})") from None


def parse_direction(name: str) -> Direction:
    """Look up a gaze direction by case-insensitive name."""
    try:
        return Direction(name.strip().lower())
    except ValueError:
        valid = ", ".join(d.value for d in Direction)
        raise ValueError(f"Unknown direction {name!r} (expected one of: {valid})") from None
