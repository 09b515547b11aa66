"""Difficulty scaling: the collaborator protocol and the local fallback formulas."""
from __future__ import annotations

import math
from typing import Protocol

from lifetick_event.types import BUTTON, DRAG, MOVING_OBJECT, Target

MAX_DIFFICULTY = 5
MIN_TIME_LIMIT = 1000.0  # ms
MIN_MOVING_SIZE = 30.0


class DifficultyModel(Protocol):
    """Adaptive difficulty collaborator consumed by EventPool.

    When one is supplied it replaces the local formulas below and is told
    the outcome of every finished event.
    """

    def calculate_event_difficulty(self, base_difficulty: int, stage_id: str) -> float: ...

    def adjust_time_limit(self, base_time_limit: float, difficulty: float) -> float: ...

    def record_interaction_result(
        self, success: bool, difficulty: float, duration: float | None
    ) -> None: ...


def local_event_difficulty(base_difficulty: int, stage_difficulty: int) -> int:
    return min(MAX_DIFFICULTY, base_difficulty + stage_difficulty - 1)


def local_time_limit(base_time_limit: float, stage_difficulty: int) -> float:
    """Higher stage difficulty shortens the deadline, floored at one second."""
    factor = 1 - (stage_difficulty - 1) * 0.15
    return max(MIN_TIME_LIMIT, base_time_limit * factor)


def adjust_target(target: Target, difficulty: float) -> None:
    """Tighten ``target`` in place for the given difficulty."""
    if target.type == BUTTON:
        if difficulty >= 3:
            target.required_clicks = max(target.required_clicks, math.ceil(difficulty))
    elif target.type == DRAG:
        target.drag_distance = target.drag_distance * (1 + (difficulty - 1) * 0.3)
    elif target.type == MOVING_OBJECT:
        target.speed = target.speed * (1 + (difficulty - 1) * 0.4)
        shrink = (difficulty - 1) * 5
        target.width = max(MIN_MOVING_SIZE, target.width - shrink)
        target.height = max(MIN_MOVING_SIZE, target.height - shrink)
