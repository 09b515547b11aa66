"""Core data types for life events."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# Template interaction types.
SIMPLE_CLICK = "simple_click"
RAPID_CLICK = "rapid_click"
DRAG_TARGET = "drag_target"
MOVING_TARGET = "moving_target"

# Target shapes.
BUTTON = "button"
DRAG = "drag_target"
MOVING_OBJECT = "moving_object"

# Input kinds.
CLICK = "click"
DRAG_INPUT = "drag"


@dataclass
class Target:
    """What an interaction must satisfy. Fields beyond the size depend on ``type``."""

    type: str
    width: float
    height: float
    required_clicks: int = 1  # button
    drag_distance: float = 0.0  # drag_target, pixels
    speed: float = 0.0  # moving_object, pixels per second

    @property
    def radius(self) -> float:
        return max(self.width, self.height) / 2


@dataclass(frozen=True)
class EventTemplate:
    """Archetype of a challenge. Not serialized."""

    name: str
    type: str
    difficulty: int
    time_limit: float  # milliseconds
    points: int
    target: Target
    icon: str = ""
    color: str = ""


@dataclass
class Movement:
    """Velocity (px/s) and axis-aligned bounds of a moving target."""

    vx: float
    vy: float
    left: float
    right: float
    top: float
    bottom: float


@dataclass(frozen=True)
class InputEvent:
    """A player input in canvas coordinates. ``dx``/``dy`` carry a drag delta."""

    type: str
    x: float
    y: float
    dx: float = 0.0
    dy: float = 0.0


# Serialized LifeEvent record, as produced by LifeEvent.serialize().
EventRecord = dict[str, Any]


@dataclass
class StageStats:
    completed: int = 0
    total_score: int = 0
    average_time: float = 0.0


@dataclass(frozen=True)
class RenderInfo:
    """Everything a renderer needs to draw one event for one frame."""

    position: tuple[float, float]
    size: tuple[float, float]
    scale: float
    opacity: float
    color: str
    text: str
    progress: float
    time_ratio: float
    icon: str = ""
