"""LifeEvent - a single timed challenge and its interaction state machine.

An event is active until it is either completed (the player satisfied its
target) or failed (its countdown ran out). Both outcomes are terminal: once
reached, every mutating method is a no-op.
"""
from __future__ import annotations

import dataclasses
import logging
import math
import random
import time
from typing import Any, Callable

from lifetick.types import SnapshotError, ViewportFn, resolve_viewport

from lifetick_event.types import (
    BUTTON,
    CLICK,
    DRAG,
    DRAG_INPUT,
    DRAG_TARGET,
    MOVING_OBJECT,
    RAPID_CLICK,
    EventRecord,
    InputEvent,
    Movement,
    RenderInfo,
    Target,
)

logger = logging.getLogger(__name__)

COLOR_CALM = "#2ed573"
COLOR_URGENT = "#ffa502"
COLOR_CRITICAL = "#ff4757"

DEFAULT_UI_MARGIN = 100.0


def _wall_clock_ms() -> float:
    return time.time() * 1000.0


class LifeEvent:
    """A timed challenge spawned from a template.

    ``clock`` returns the current time in milliseconds and stamps
    ``start_time``/``completed_time``; it defaults to wall-clock time.
    ``viewport`` and ``rng`` are only consulted by moving targets, the
    first time they move.
    """

    def __init__(
        self,
        id: int,
        name: str,
        type: str,
        difficulty: float,
        time_limit: float,
        points: int,
        target: Target,
        position: tuple[float, float] = (0.0, 0.0),
        *,
        stage_id: str | None = None,
        icon: str = "",
        color: str = "",
        clock: Callable[[], float] | None = None,
        rng: random.Random | None = None,
        viewport: ViewportFn | None = None,
        ui_margin: float = DEFAULT_UI_MARGIN,
    ) -> None:
        self.id = id
        self.name = name
        self.type = type
        self.difficulty = difficulty
        self.points = points
        self.stage_id = stage_id
        self.icon = icon
        self.color = color

        self.time_limit = time_limit
        self.time_remaining = time_limit
        self.position = position
        self.target = target
        self.movement: Movement | None = None

        self.completed = False
        self.failed = False
        self.click_count = 0
        self.drag_distance = 0.0

        self.scale = 1.0
        self.opacity = 1.0

        self._clock = clock or _wall_clock_ms
        self._rng = rng or random.Random()
        self._viewport = viewport
        self._ui_margin = ui_margin

        self.start_time = self._clock()
        self.completed_time: float | None = None
        self.last_interaction_time: float | None = None

    def __repr__(self) -> str:
        return (
            f"LifeEvent(id={self.id!r}, name={self.name!r}, status={self.status!r}, "
            f"time_remaining={self.time_remaining:.0f})"
        )

    # --- State ---

    @property
    def status(self) -> str:
        if self.completed:
            return "completed"
        if self.failed:
            return "failed"
        return "active"

    @property
    def is_terminal(self) -> bool:
        return self.completed or self.failed

    def is_active(self) -> bool:
        return not self.completed and not self.failed and self.time_remaining > 0

    # --- Per-frame update ---

    def update(self, dt: float) -> None:
        if self.is_terminal:
            return
        if dt > 0:
            self.time_remaining -= dt

        if self.time_remaining <= 0:
            self.fail()
            return

        if self.target.type == MOVING_OBJECT:
            self._move(dt)

    def _move(self, dt: float) -> None:
        if self.movement is None:
            self.movement = self._init_movement()
        m = self.movement

        x = self.position[0] + m.vx * dt / 1000.0
        y = self.position[1] + m.vy * dt / 1000.0

        if x <= m.left or x >= m.right:
            m.vx = -m.vx
        if y <= m.top or y >= m.bottom:
            m.vy = -m.vy

        self.position = (
            max(m.left, min(m.right, x)),
            max(m.top, min(m.bottom, y)),
        )

    def _init_movement(self) -> Movement:
        width, height = resolve_viewport(self._viewport)
        margin = self.target.radius
        left = margin
        top = self._ui_margin
        return Movement(
            vx=(self._rng.random() - 0.5) * self.target.speed,
            vy=(self._rng.random() - 0.5) * self.target.speed,
            left=left,
            right=max(left, width - margin),
            top=top,
            bottom=max(top, height - self._ui_margin),
        )

    # --- Interaction ---

    def handle_interaction(self, input_event: InputEvent) -> bool:
        """Feed one input. Returns True if this input completed the event."""
        if self.is_terminal:
            return False
        self.last_interaction_time = self._clock()

        kind = self.target.type
        if kind == BUTTON:
            return self._handle_click(input_event)
        if kind == DRAG:
            return self._handle_drag(input_event)
        if kind == MOVING_OBJECT:
            return self._handle_moving_click(input_event)
        return False

    def _handle_click(self, input_event: InputEvent) -> bool:
        if input_event.type != CLICK:
            return False
        self.click_count += 1
        if self.click_count >= self.target.required_clicks:
            self.complete()
            return True
        return False

    def _handle_drag(self, input_event: InputEvent) -> bool:
        if input_event.type != DRAG_INPUT:
            return False
        distance = math.hypot(input_event.dx, input_event.dy)
        self.drag_distance = max(self.drag_distance, distance)
        if self.drag_distance >= self.target.drag_distance:
            self.complete()
            return True
        return False

    def _handle_moving_click(self, input_event: InputEvent) -> bool:
        if input_event.type != CLICK:
            return False
        self.complete()
        return True

    def is_point_inside(self, x: float, y: float) -> bool:
        """Circle hit-test: radius is half the larger target side."""
        dx = x - self.position[0]
        dy = y - self.position[1]
        return math.hypot(dx, dy) <= self.target.radius

    # --- Terminal transitions ---

    def complete(self) -> None:
        if self.is_terminal:
            return
        self.completed = True
        self.completed_time = self._clock()
        logger.debug("Event %s completed: %s (+%d points)", self.id, self.name, self.points)

    def fail(self) -> None:
        if self.is_terminal:
            return
        self.failed = True
        logger.debug("Event %s failed: %s", self.id, self.name)

    # --- Derived views ---

    def progress(self) -> float:
        kind = self.target.type
        if kind == BUTTON:
            if self.type == RAPID_CLICK:
                return min(1.0, self.click_count / max(1, self.target.required_clicks))
            return 1.0 if self.click_count >= self.target.required_clicks else 0.0
        if kind == MOVING_OBJECT:
            return 1.0 if self.completed else 0.0
        if kind == DRAG:
            if self.target.drag_distance <= 0:
                return 1.0
            return min(1.0, self.drag_distance / self.target.drag_distance)
        return 0.0

    def time_remaining_ratio(self) -> float:
        if self.time_limit <= 0:
            return 0.0
        return max(0.0, self.time_remaining / self.time_limit)

    def duration(self) -> float:
        """Milliseconds from spawn to completion (or to now while unfinished)."""
        end = self.completed_time if self.completed_time is not None else self._clock()
        return end - self.start_time

    def event_color(self) -> str:
        urgency = 1.0 - self.time_remaining_ratio()
        if urgency > 0.8:
            return COLOR_CRITICAL
        if urgency > 0.5:
            return COLOR_URGENT
        return COLOR_CALM

    def display_text(self) -> str:
        text = self.name
        if self.type == RAPID_CLICK:
            text += f"\n({self.click_count}/{self.target.required_clicks})"
        elif self.type == DRAG_TARGET:
            percent = int(self.progress() * 100 + 0.5)
            text += f"\n({percent}%)"
        return text

    def render_info(self) -> RenderInfo:
        return RenderInfo(
            position=self.position,
            size=(self.target.width, self.target.height),
            scale=self.scale,
            opacity=self.opacity,
            color=self.event_color(),
            text=self.display_text(),
            progress=self.progress(),
            time_ratio=self.time_remaining_ratio(),
            icon=self.icon,
        )

    # --- Serialization ---

    def serialize(self) -> EventRecord:
        return {
            "id": self.id,
            "name": self.name,
            "type": self.type,
            "difficulty": self.difficulty,
            "time_limit": self.time_limit,
            "time_remaining": self.time_remaining,
            "points": self.points,
            "position": list(self.position),
            "target": dataclasses.asdict(self.target),
            "movement": dataclasses.asdict(self.movement) if self.movement else None,
            "stage_id": self.stage_id,
            "icon": self.icon,
            "color": self.color,
            "completed": self.completed,
            "failed": self.failed,
            "start_time": self.start_time,
            "completed_time": self.completed_time,
            "last_interaction_time": self.last_interaction_time,
            "click_count": self.click_count,
            "drag_distance": self.drag_distance,
        }

    @classmethod
    def deserialize(
        cls,
        data: EventRecord,
        *,
        clock: Callable[[], float] | None = None,
        rng: random.Random | None = None,
        viewport: ViewportFn | None = None,
        ui_margin: float = DEFAULT_UI_MARGIN,
    ) -> LifeEvent:
        """Rebuild an event with its full state, terminal flags included."""
        try:
            x, y = data["position"]
            event = cls(
                id=data["id"],
                name=data["name"],
                type=data["type"],
                difficulty=data["difficulty"],
                time_limit=data["time_limit"],
                points=data["points"],
                target=Target(**data["target"]),
                position=(float(x), float(y)),
                stage_id=data.get("stage_id"),
                icon=data.get("icon", ""),
                color=data.get("color", ""),
                clock=clock,
                rng=rng,
                viewport=viewport,
                ui_margin=ui_margin,
            )
            event.time_remaining = data["time_remaining"]
            event.completed = bool(data["completed"])
            event.failed = bool(data["failed"])
            event.start_time = data["start_time"]
        except (KeyError, TypeError, ValueError) as exc:
            raise SnapshotError(f"Malformed life event record: {exc}") from exc

        if event.completed and event.failed:
            raise SnapshotError(f"Event {event.id} cannot be both completed and failed")

        movement = data.get("movement")
        event.movement = Movement(**movement) if movement else None
        event.completed_time = data.get("completed_time")
        event.last_interaction_time = data.get("last_interaction_time")
        event.click_count = data.get("click_count", 0)
        event.drag_distance = data.get("drag_distance", 0.0)
        return event
