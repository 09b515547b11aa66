"""Tests for clock advancement and TickContext generation."""

import random

import pytest
from lifetick.clock import Clock
from lifetick.types import ConfigError, TickContext

_test_rng = random.Random(0)


def test_clock_initialization():
    clock = Clock(fps=50)
    assert clock.fps == 50
    assert clock.frame == 0
    assert clock.elapsed == 0.0
    assert abs(clock.dt - 20.0) < 1e-9


def test_clock_rejects_non_positive_fps():
    with pytest.raises(ConfigError):
        Clock(fps=0)
    with pytest.raises(ConfigError):
        Clock(fps=-5)


def test_advance_with_nominal_dt():
    clock = Clock(fps=50)
    assert clock.advance() == 1
    assert clock.advance() == 2
    assert clock.elapsed == pytest.approx(40.0)


def test_advance_with_variable_dt():
    clock = Clock(fps=60)
    clock.advance(16.0)
    clock.advance(33.0)
    assert clock.frame == 2
    assert clock.elapsed == pytest.approx(49.0)


def test_negative_dt_is_treated_as_zero():
    clock = Clock(fps=60)
    clock.advance(-10.0)
    assert clock.frame == 1
    assert clock.elapsed == 0.0


def test_context_reflects_last_frame():
    clock = Clock(fps=60)
    clock.advance(12.5)
    ctx = clock.context(lambda: None, _test_rng)
    assert isinstance(ctx, TickContext)
    assert ctx.frame == 1
    assert ctx.dt == 12.5
    assert ctx.elapsed == 12.5
    assert ctx.random is _test_rng


def test_context_is_frozen():
    clock = Clock(fps=60)
    ctx = clock.context(lambda: None, _test_rng)
    with pytest.raises(AttributeError):
        ctx.frame = 5  # type: ignore[misc]


def test_reset():
    clock = Clock(fps=60)
    clock.advance(10.0)
    clock.reset(frame=7, elapsed=500.0)
    assert clock.frame == 7
    assert clock.elapsed == 500.0
    clock.reset()
    assert clock.frame == 0
    assert clock.elapsed == 0.0
