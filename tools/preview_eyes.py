#!/usr/bin/env python3
"""Renders eye expressions to PNG files for checking on a desktop (no display needed)."""

import sys
import os
import random
from PIL import Image
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from roboeyes.clock import ManualClock
from roboeyes.display.image_surface import ImageSurface
from roboeyes.eyes.expressions import Direction, Mood
from roboeyes.robo_eyes import RoboEyes

WIDTH = 128
HEIGHT = 64
SCALE = 4
SETTLE_FRAMES = 30


def _pose(eyes: RoboEyes, mood=Mood.DEFAULT, direction=Direction.CENTER,
          curious=False, cyclops=False):
    eyes.set_mood(mood)
    eyes.set_direction(direction)
    eyes.set_curiosity(curious)
    eyes.set_cyclops(cyclops)


def main():
    previews = {
        "center": {},
        "look_left": {"direction": Direction.W},
        "look_right": {"direction": Direction.E},
        "look_up": {"direction": Direction.N},
        "curious_left": {"direction": Direction.W, "curious": True},
        "tired": {"mood": Mood.TIRED},
        "angry": {"mood": Mood.ANGRY},
        "happy": {"mood": Mood.HAPPY},
        "cyclops": {"cyclops": True},
        "cyclops_angry": {"cyclops": True, "mood": Mood.ANGRY},
    }

    out_dir = os.path.join(os.path.dirname(os.path.abspath(__file__)), "preview_output")
    os.makedirs(out_dir, exist_ok=True)

    for name, pose in previews.items():
        clock = ManualClock()
        surface = ImageSurface(WIDTH, HEIGHT)
        eyes = RoboEyes(clock=clock, rng=random.Random(0))
        eyes.begin(surface, fps=50)
        _pose(eyes, **pose)

        for _ in range(SETTLE_FRAMES):
            clock.advance(eyes.frame_interval)
            eyes.update()

        img = surface.image.resize((WIDTH * SCALE, HEIGHT * SCALE), Image.Resampling.NEAREST)
        path = os.path.join(out_dir, f"{name}.png")
        img.save(path)
        print(f"Saved {path}")

    print(f"\nAll previews saved to {out_dir}/")


if __name__ == "__main__":
    main()
