"""Build the complete game state."""
from __future__ import annotations

import random as _random_mod
from dataclasses import dataclass, field
from typing import Callable

from lifetick import Engine
from lifetick_event import EVENT_COMPLETED, EVENT_FAILED, EventPool, make_pool_system
from lifetick_signal import SignalBus, make_signal_system
from lifetick_stage import StageTimeline, make_stage_system

from game.callbacks import make_on_completed, make_on_failed, make_on_game_end, make_on_transition
from game.catalog import make_catalog
from ui.feedback import FeedbackLayer
from ui.status import StatusLine


@dataclass
class GameState:
    """Holds all game objects and shared UI state."""
    engine: Engine
    timeline: StageTimeline
    pool: EventPool
    bus: SignalBus
    feedback: FeedbackLayer
    status: StatusLine
    # Mouse drag in progress: press position
    drag_origin: tuple[int, int] | None = None
    drag_moved: bool = False
    paused: bool = False
    history: list[int] = field(default_factory=list)

    def restart(self) -> None:
        """Start a new life, keeping the engine and its systems."""
        if self.timeline.is_active or self.timeline.is_complete:
            self.history.append(self.pool.total_score())
        self.timeline.reset_game()
        self.pool.reset()
        self.bus.clear()
        self.feedback.clear()
        self.status.clear()
        self.drag_origin = None
        self.paused = False
        self.engine.resume()
        self.timeline.start_game()


def build_game(
    seed: int = 42,
    fps: int = 60,
    viewport: Callable[[], tuple[int, int] | None] | None = None,
) -> GameState:
    """Wire up engine, timeline, pool and bus and return GameState."""
    engine = Engine(fps=fps, seed=seed)
    bus = SignalBus()
    timeline = StageTimeline()
    pool = EventPool(
        timeline,
        catalog=make_catalog(),
        viewport=viewport,
        rng=_random_mod.Random(seed),
        bus=bus,
    )

    feedback = FeedbackLayer()
    status = StatusLine()

    pool.on_event_completed(make_on_completed(feedback, status))
    pool.on_event_failed(make_on_failed(feedback, status))
    timeline.on_stage_transition(make_on_transition(status))
    timeline.on_game_end(make_on_game_end(status))

    # Order matters: stage boundaries first, then the pool sees the new stage,
    # then notifications are delivered once per frame.
    engine.add_system(make_stage_system(timeline))
    engine.add_system(make_pool_system(pool))
    engine.add_system(make_signal_system(bus))

    return GameState(
        engine=engine,
        timeline=timeline,
        pool=pool,
        bus=bus,
        feedback=feedback,
        status=status,
    )


def count_signals(state: GameState) -> dict[str, int]:
    """Attach counters for pool notifications; used by the headless mode."""
    counts = {EVENT_COMPLETED: 0, EVENT_FAILED: 0}

    def _count(signal: str, data: dict) -> None:
        counts[signal] += 1

    state.bus.subscribe(EVENT_COMPLETED, _count)
    state.bus.subscribe(EVENT_FAILED, _count)
    return counts
