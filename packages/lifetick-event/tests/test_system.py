"""Tests for lifetick_event.systems - make_pool_system factory."""
from __future__ import annotations

import random

from lifetick import Engine
from lifetick_signal import SignalBus, make_signal_system
from lifetick_stage import StageTimeline, make_stage_system

from lifetick_event import EventPool, make_pool_system


def _setup(fps: int = 50, bus: SignalBus | None = None) -> tuple[Engine, StageTimeline, EventPool]:
    engine = Engine(fps=fps, seed=7)
    timeline = StageTimeline()
    pool = EventPool(timeline, rng=random.Random(7), bus=bus)
    engine.add_system(make_stage_system(timeline))
    engine.add_system(make_pool_system(pool))
    return engine, timeline, pool


class TestPoolSystem:
    def test_frames_feed_pool_clock(self) -> None:
        engine, timeline, pool = _setup()
        engine.run(10)
        assert pool.now() == 200.0

    def test_generates_after_interval(self) -> None:
        engine, timeline, pool = _setup()
        timeline.start_game()
        engine.run(99)
        assert pool.active_events() == []
        engine.run(1)
        assert len(pool.active_events()) == 1

    def test_unanswered_events_fail(self) -> None:
        engine, timeline, pool = _setup()
        timeline.start_game()
        # First event spawns at 2 s and times out 3 s later.
        engine.run(250)
        assert pool.failed_count == 1
        assert pool.total_completed() == 0

    def test_pausing_engine_freezes_pool(self) -> None:
        engine, timeline, pool = _setup()
        timeline.start_game()
        engine.run(50)
        engine.pause()
        assert engine.step() is False
        assert pool.now() == 1000.0

    def test_signal_system_delivers_pool_notifications(self) -> None:
        bus = SignalBus()
        engine, timeline, pool = _setup(bus=bus)
        engine.add_system(make_signal_system(bus))
        failed: list[int] = []
        pool.on_event_failed(lambda name, data: failed.append(data["event_id"]))
        timeline.start_game()
        engine.run(250)
        assert failed == [0]
        assert bus.pending() == 0
