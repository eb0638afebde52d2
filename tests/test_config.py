"""Tests for YAML config loading and applying it to the eyes."""

import pytest

from roboeyes.config import Config, apply_config, load_config
from roboeyes.eyes.expressions import Mood


def test_missing_file_gives_defaults(tmp_path):
    config = load_config(str(tmp_path / "nope.yaml"))
    assert config == Config()
    assert config.display.fps == 50


def test_partial_file_overrides_only_given_keys(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "display:\n"
        "  fps: 30\n"
        "  eye_color: [0, 200, 255]\n"
        "animation:\n"
        "  mood: happy\n"
        "  idle: false\n"
        "logging:\n"
        "  level: DEBUG\n"
    )
    config = load_config(str(path))
    assert config.display.fps == 30
    assert config.display.width == 128
    assert config.display.eye_color == (0, 200, 255)
    assert config.animation.mood == "happy"
    assert config.animation.idle is False
    assert config.animation.autoblink is True
    assert config.eyes.width == 36
    assert config.log_level == "DEBUG"


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("")
    assert load_config(str(path)) == Config()


def test_apply_config_direction_targets_configured_sizes(eyes):
    config = Config()
    config.eyes.width = 30
    config.eyes.space_between = 6
    config.animation.direction = "center"
    apply_config(eyes, config)
    # (128 - 30 - 6 - 30) // 2
    assert eyes.geometry.left.x_next == 31


def test_apply_config_sets_eyes(eyes):
    config = Config()
    config.eyes.width = 30
    config.eyes.space_between = 6
    config.animation.mood = "Angry"
    config.animation.cyclops = True
    config.animation.idle_interval = 5
    apply_config(eyes, config)

    assert eyes.mood is Mood.ANGRY
    assert eyes.geometry.left.width.next == 30
    assert eyes.geometry.space.next == 6
    assert eyes.geometry.cyclops
    assert eyes.scheduler.idle.active
    assert eyes.scheduler.idle.interval_ms == 5000


@pytest.mark.parametrize("field,value", [("mood", "sleepy"), ("direction", "up")])
def test_apply_config_rejects_unknown_names(eyes, field, value):
    config = Config()
    setattr(config.animation, field, value)
    with pytest.raises(ValueError):
        apply_config(eyes, config)
