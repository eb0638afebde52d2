from dataclasses import dataclass, field
from pathlib import Path
import logging

import yaml

from roboeyes.eyes.expressions import parse_direction, parse_mood

log = logging.getLogger("roboeyes")


@dataclass
class DisplayConfig:
    width: int = 128
    height: int = 64
    fps: int = 50
    eye_color: tuple = (255, 255, 255)
    bg_color: tuple = (0, 0, 0)


@dataclass
class EyeConfig:
    width: int = 36
    height: int = 36
    border_radius: int = 8
    space_between: int = 10


@dataclass
class AnimationConfig:
    autoblink: bool = True
    blink_interval: int = 3
    blink_variation: int = 2
    idle: bool = True
    idle_interval: int = 2
    idle_variation: int = 2
    curious: bool = False
    cyclops: bool = False
    mood: str = "default"
    direction: str = "center"


@dataclass
class Config:
    display: DisplayConfig = field(default_factory=DisplayConfig)
    eyes: EyeConfig = field(default_factory=EyeConfig)
    animation: AnimationConfig = field(default_factory=AnimationConfig)
    log_level: str = "INFO"


def load_config(path: str = "config.yaml") -> Config:
    """Load config from YAML file, falling back to defaults for missing keys."""
    config = Config()
    config_path = Path(path)

    if not config_path.exists():
        return config

    with open(config_path) as f:
        data = yaml.safe_load(f) or {}

    if "display" in data:
        d = data["display"]
        config.display = DisplayConfig(
            width=d.get("width", config.display.width),
            height=d.get("height", config.display.height),
            fps=d.get("fps", config.display.fps),
            eye_color=tuple(d.get("eye_color", list(config.display.eye_color))),
            bg_color=tuple(d.get("bg_color", list(config.display.bg_color))),
        )

    if "eyes" in data:
        e = data["eyes"]
        config.eyes = EyeConfig(
            width=e.get("width", config.eyes.width),
            height=e.get("height", config.eyes.height),
            border_radius=e.get("border_radius", config.eyes.border_radius),
            space_between=e.get("space_between", config.eyes.space_between),
        )

    if "animation" in data:
        a = data["animation"]
        config.animation = AnimationConfig(
            autoblink=a.get("autoblink", config.animation.autoblink),
            blink_interval=a.get("blink_interval", config.animation.blink_interval),
            blink_variation=a.get("blink_variation", config.animation.blink_variation),
            idle=a.get("idle", config.animation.idle),
            idle_interval=a.get("idle_interval", config.animation.idle_interval),
            idle_variation=a.get("idle_variation", config.animation.idle_variation),
            curious=a.get("curious", config.animation.curious),
            cyclops=a.get("cyclops", config.animation.cyclops),
            mood=a.get("mood", config.animation.mood),
            direction=a.get("direction", config.animation.direction),
        )

    if "logging" in data:
        config.log_level = data["logging"].get("level", config.log_level)

    log.info(f"Loaded config from {config_path}")
    return config


def apply_config(eyes, config: Config):
    """Push eye and animation settings onto an initialized RoboEyes.

    Raises ValueError for unknown mood or direction names.
    """
    mood = parse_mood(config.animation.mood)
    direction = parse_direction(config.animation.direction)

    e = config.eyes
    eyes.set_display_colors(config.display.eye_color, config.display.bg_color)
    eyes.set_width(e.width, e.width)
    eyes.set_height(e.height, e.height)
    eyes.set_border_radius(e.border_radius, e.border_radius)
    eyes.set_space_between(e.space_between)

    a = config.animation
    eyes.set_autoblink(a.autoblink, a.blink_interval, a.blink_variation)
    eyes.set_idle_mode(a.idle, a.idle_interval, a.idle_variation)
    eyes.set_curiosity(a.curious)
    eyes.set_cyclops(a.cyclops)
    eyes.set_mood(mood)
    # Sizes above are still easing in, aim against where they will settle
    eyes.set_direction(direction, settled=True)
