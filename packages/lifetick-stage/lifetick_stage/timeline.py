"""StageTimeline - the life-stage state machine.

States: idle (initial) -> active -> complete. ``start_game`` enters
active from idle or complete, ``update`` moves the cursor and finishes the
game once the total time is reached, ``reset_game`` returns to idle.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Sequence

from lifetick.types import ConfigError, SnapshotError

from lifetick_stage.types import DEFAULT_STAGES, LifeStage

logger = logging.getLogger(__name__)

StageTransitionHook = Callable[[LifeStage | None, LifeStage], None]
TimelineHook = Callable[["StageTimeline"], None]


def _validate(stages: Sequence[LifeStage]) -> None:
    if not stages:
        raise ConfigError("stage list must not be empty")
    expected_start = 0.0
    seen: set[str] = set()
    for stage in stages:
        if stage.id in seen:
            raise ConfigError(f"duplicate stage id {stage.id!r}")
        seen.add(stage.id)
        if stage.duration <= 0:
            raise ConfigError(f"stage {stage.id!r} must have a positive duration")
        if not 1 <= stage.difficulty <= 5:
            raise ConfigError(f"stage {stage.id!r} difficulty must be within 1-5")
        if stage.start_time != expected_start:
            raise ConfigError(
                f"stage {stage.id!r} starts at {stage.start_time}, "
                f"expected {expected_start} (stages must be sorted and contiguous)"
            )
        expected_start = stage.start_time + stage.duration


class StageTimeline:
    """Owns elapsed game time and the currently active life stage."""

    def __init__(self, stages: Sequence[LifeStage] = DEFAULT_STAGES) -> None:
        _validate(stages)
        self._stages: tuple[LifeStage, ...] = tuple(stages)
        self._total_time = sum(s.duration for s in self._stages)
        self._game_time = 0.0
        self._current: LifeStage | None = None
        self._active = False
        self._complete = False
        self._start_hooks: list[TimelineHook] = []
        self._transition_hooks: list[StageTransitionHook] = []
        self._end_hooks: list[TimelineHook] = []

    # --- Listeners ---

    def on_game_start(self, hook: TimelineHook) -> None:
        self._start_hooks.append(hook)

    def on_stage_transition(self, hook: StageTransitionHook) -> None:
        """Register ``hook(previous, new)``; called on every stage change."""
        self._transition_hooks.append(hook)

    def on_game_end(self, hook: TimelineHook) -> None:
        self._end_hooks.append(hook)

    # --- State ---

    @property
    def stages(self) -> tuple[LifeStage, ...]:
        return self._stages

    @property
    def total_time(self) -> float:
        return self._total_time

    @property
    def game_time(self) -> float:
        return self._game_time

    @property
    def current_stage(self) -> LifeStage | None:
        return self._current

    @property
    def is_active(self) -> bool:
        return self._active

    @property
    def is_complete(self) -> bool:
        return self._complete

    # --- Transitions ---

    def start_game(self) -> bool:
        """Start from idle or complete. Returns False if already running."""
        if self._active:
            return False
        self._game_time = 0.0
        self._active = True
        self._complete = False
        self._current = self._stages[0]
        logger.info("Game started, entering %s", self._current.name)
        for hook in self._start_hooks:
            self._notify(hook, self)
        return True

    def reset_game(self) -> None:
        self._game_time = 0.0
        self._active = False
        self._complete = False
        self._current = None
        logger.info("Game reset")

    def update(self, dt: float) -> None:
        if not self._active:
            return
        if dt > 0:
            self._game_time += dt

        new_stage = self.stage_for_time(self._game_time)
        if self._current is None or new_stage.id != self._current.id:
            self._transition_to(new_stage)

        if self._game_time >= self._total_time:
            self._end_game()

    def _transition_to(self, stage: LifeStage) -> None:
        previous = self._current
        self._current = stage
        logger.info(
            "Stage transition: %s -> %s",
            previous.name if previous else "None",
            stage.name,
        )
        for hook in self._transition_hooks:
            self._notify(hook, previous, stage)

    def _end_game(self) -> None:
        self._active = False
        self._complete = True
        logger.info("Game completed at %.0f ms", self._game_time)
        for hook in self._end_hooks:
            self._notify(hook, self)

    @staticmethod
    def _notify(hook: Callable[..., None], *args: Any) -> None:
        # Listeners never interrupt a frame or leave the timeline half-updated.
        try:
            hook(*args)
        except Exception:
            logger.exception("Timeline hook %r failed", hook)

    # --- Queries ---

    def stage_for_time(self, t: float) -> LifeStage:
        for stage in reversed(self._stages):
            if t >= stage.start_time:
                return stage
        return self._stages[0]

    def stage_by_id(self, stage_id: str) -> LifeStage | None:
        for stage in self._stages:
            if stage.id == stage_id:
                return stage
        return None

    def all_stages(self) -> list[LifeStage]:
        return list(self._stages)

    def stage_progress(self) -> float:
        """Fraction of the current stage elapsed, clamped to [0, 1]."""
        if self._current is None:
            return 0.0
        elapsed = self._game_time - self._current.start_time
        return max(0.0, min(elapsed / self._current.duration, 1.0))

    def game_progress(self) -> float:
        return max(0.0, min(self._game_time / self._total_time, 1.0))

    def time_left(self) -> float:
        """Seconds remaining, never negative."""
        return max((self._total_time - self._game_time) / 1000.0, 0.0)

    def elapsed_time(self) -> float:
        """Seconds elapsed."""
        return self._game_time / 1000.0

    # --- Serialization ---

    def snapshot(self) -> dict[str, Any]:
        return {
            "game_time": self._game_time,
            "current_stage": self._current.id if self._current else None,
            "is_active": self._active,
            "is_complete": self._complete,
        }

    def restore(self, data: dict[str, Any]) -> None:
        """Restore the cursor. Hooks are not fired."""
        try:
            game_time = float(data["game_time"])
            stage_id = data["current_stage"]
            active = bool(data["is_active"])
            complete = bool(data["is_complete"])
        except KeyError as exc:
            raise SnapshotError(f"Missing timeline field {exc.args[0]!r}") from exc
        if active and complete:
            raise SnapshotError("Timeline cannot be both active and complete")
        current = None
        if stage_id is not None:
            current = self.stage_by_id(stage_id)
            if current is None:
                raise SnapshotError(f"Unknown stage id {stage_id!r}")
        self._game_time = game_time
        self._current = current
        self._active = active
        self._complete = complete
