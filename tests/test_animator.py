"""Tests for the timer-driven animation state machines."""

import random
from unittest.mock import MagicMock

from roboeyes.eyes.animator import (
    CONFUSED_AMPLITUDE, LAUGH_AMPLITUDE, SHAKE_DURATION_MS,
    AnimationScheduler, RecurringTimer, ShakeAnimation, ShakePhase,
)
from roboeyes.eyes.eye_state import FlickerState
from roboeyes.eyes.geometry import CLOSED_HEIGHT, GeometryEngine


def _fire_times(timer: RecurringTimer, until_ms: int, step_ms: int = 20) -> list[int]:
    return [t for t in range(0, until_ms + 1, step_ms) if timer.poll(t)]


def test_inactive_timer_never_fires():
    timer = RecurringTimer(1000, 0)
    assert _fire_times(timer, 5000) == []


def test_zero_variation_is_fixed_interval_without_random_draw():
    rng = MagicMock(spec=random.Random)
    timer = RecurringTimer(1000, 4000, rng)
    timer.configure(True, 2, 0)
    assert timer.interval_ms == 2000
    assert _fire_times(timer, 7000) == [0, 2000, 4000, 6000]
    rng.randrange.assert_not_called()


def test_variation_bounds_jitter():
    timer = RecurringTimer(1000, 500, random.Random(7))
    timer.active = True
    last = None
    for t in _fire_times(timer, 20000, step_ms=1):
        if last is not None:
            assert 1000 <= t - last < 1500
        last = t


def test_shake_runs_fixed_duration_cycle():
    flicker = FlickerState()
    shake = ShakeAnimation("confused", flicker, 20)
    shake.trigger()
    assert shake.phase is ShakePhase.PENDING

    shake.poll(100)
    assert flicker.active and flicker.amplitude == 20
    assert shake.phase is ShakePhase.HOLDING

    shake.poll(100 + SHAKE_DURATION_MS - 1)
    assert flicker.active

    shake.poll(100 + SHAKE_DURATION_MS)
    assert not flicker.active
    assert flicker.amplitude == 0
    assert not shake.active


def test_shake_retrigger_mid_cycle_is_ignored():
    flicker = FlickerState()
    shake = ShakeAnimation("laugh", flicker, 5)
    shake.trigger()
    shake.poll(0)
    shake.trigger()
    shake.poll(300)
    assert shake.started_at == 0
    shake.poll(SHAKE_DURATION_MS)
    assert not shake.active

    shake.trigger()
    shake.poll(SHAKE_DURATION_MS + 40)
    assert shake.started_at == SHAKE_DURATION_MS + 40


def test_autoblink_closes_and_flags_reopen():
    geo = GeometryEngine(128, 64)
    sched = AnimationScheduler(geo, random.Random(0))
    sched.autoblink.configure(True, 1, 0)
    sched.tick(0)
    assert geo.left.height.next == CLOSED_HEIGHT
    assert geo.right.height.next == CLOSED_HEIGHT
    assert geo.left.is_open and geo.right.is_open
    assert sched.autoblink.due == 1000


def test_idle_fires_every_interval_inside_constraints():
    geo = GeometryEngine(128, 64)
    sched = AnimationScheduler(geo, random.Random(3))
    sched.idle.configure(True, 2, 0)

    fired = []
    for t in range(0, 10001, 20):
        before = sched.idle.due
        sched.tick(t)
        if sched.idle.due != before:
            fired.append(t)
            assert 0 <= geo.left.x_next < geo.screen_constraint_x()
            assert 0 <= geo.left.y_next < geo.screen_constraint_y()
    assert fired == [0, 2000, 4000, 6000, 8000, 10000]


def test_idle_with_no_room_pins_eye_to_origin():
    geo = GeometryEngine(60, 30)
    sched = AnimationScheduler(geo, random.Random(0))
    sched.idle.configure(True, 1, 0)
    sched.tick(0)
    assert (geo.left.x_next, geo.left.y_next) == (0, 0)


def test_flicker_alternates_every_frame():
    geo = GeometryEngine(128, 64)
    sched = AnimationScheduler(geo, random.Random(0))
    sched.set_hflicker(True, 3)
    xs = []
    for t in range(4):
        sched.tick(t)
        xs.append(geo.left.x)
    assert xs == [20, 23, 20, 23]


def test_confused_and_laugh_use_their_axes():
    geo = GeometryEngine(128, 64)
    sched = AnimationScheduler(geo, random.Random(0))
    sched.confused.trigger()
    sched.laugh.trigger()
    sched.tick(0)
    assert sched.hflicker.active and sched.hflicker.amplitude == CONFUSED_AMPLITUDE
    assert sched.vflicker.active and sched.vflicker.amplitude == LAUGH_AMPLITUDE
    sched.tick(SHAKE_DURATION_MS)
    assert not sched.hflicker.active
    assert not sched.vflicker.active


def test_tick_enforces_cyclops():
    geo = GeometryEngine(128, 64)
    geo.cyclops = True
    AnimationScheduler(geo, random.Random(0)).tick(0)
    assert geo.right.width.current == 0
    assert geo.space.current == 0
