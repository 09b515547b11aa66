"""EventPool - generates, tracks and retires concurrently active life events."""
from __future__ import annotations

import copy
import logging
import random as _random_mod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from lifetick.types import ConfigError, SnapshotError, ViewportFn
from lifetick_signal import SignalBus
from lifetick_signal.bus import Handler

from lifetick_event.difficulty import (
    DifficultyModel,
    adjust_target,
    local_event_difficulty,
    local_time_limit,
)
from lifetick_event.event import LifeEvent
from lifetick_event.templates import DEFAULT_CATALOG, Catalog, templates_for
from lifetick_event.types import InputEvent, RenderInfo, StageStats

if TYPE_CHECKING:
    from lifetick_stage import LifeStage, StageTimeline

logger = logging.getLogger(__name__)

EVENT_COMPLETED = "event_completed"
EVENT_FAILED = "event_failed"


@dataclass(frozen=True)
class PoolConfig:
    """Generation cadence and layout settings for an EventPool.

    Attributes:
        generation_interval: Milliseconds between generation attempts.
        max_active_events: Upper bound on simultaneously active events.
        spawn_margin: Minimum distance of a spawn point from the canvas edge.
        default_position: Spawn point used when no viewport is available.
        ui_margin: Band kept clear at the top and bottom for moving targets.
    """

    generation_interval: float = 2000.0
    max_active_events: int = 3
    spawn_margin: float = 100.0
    default_position: tuple[float, float] = (400.0, 300.0)
    ui_margin: float = 100.0

    def __post_init__(self) -> None:
        if self.generation_interval <= 0:
            raise ConfigError("generation_interval must be positive")
        if self.max_active_events < 1:
            raise ConfigError("max_active_events must be at least 1")


class EventPool:
    """Bounded pool of active life events, driven once per frame.

    Events live in ``active_events`` in generation order, which is also the
    order used for hit-testing. Completed events move to an append-only
    history; failed ones are reported and dropped.
    """

    def __init__(
        self,
        timeline: StageTimeline,
        *,
        difficulty: DifficultyModel | None = None,
        catalog: Catalog | None = None,
        viewport: ViewportFn | None = None,
        config: PoolConfig | None = None,
        rng: _random_mod.Random | None = None,
        bus: SignalBus | None = None,
    ) -> None:
        self._timeline = timeline
        self._difficulty = difficulty
        self._catalog: Catalog = catalog if catalog is not None else DEFAULT_CATALOG
        self._viewport = viewport
        self._config = config or PoolConfig()
        self._rng = rng or _random_mod.Random()
        # An owned bus is flushed by the pool itself; an injected one by its owner.
        self._owns_bus = bus is None
        self._bus = bus if bus is not None else SignalBus()

        self._active: list[LifeEvent] = []
        self._completed: list[LifeEvent] = []
        self._last_event_time = 0.0
        self._event_id_counter = 0
        self._failed_count = 0
        self._elapsed = 0.0
        self._paused = False

    # --- Configuration ---

    @property
    def config(self) -> PoolConfig:
        return self._config

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    @property
    def bus(self) -> SignalBus:
        return self._bus

    @property
    def last_event_time(self) -> float:
        return self._last_event_time

    @property
    def event_id_counter(self) -> int:
        return self._event_id_counter

    @property
    def failed_count(self) -> int:
        return self._failed_count

    @property
    def generation_paused(self) -> bool:
        return self._paused

    def now(self) -> float:
        """Pool clock: milliseconds of game time fed through ``update``."""
        return self._elapsed

    # --- Listeners ---

    def on_event_completed(self, handler: Handler) -> None:
        self._bus.subscribe(EVENT_COMPLETED, handler)

    def on_event_failed(self, handler: Handler) -> None:
        self._bus.subscribe(EVENT_FAILED, handler)

    def _flush(self) -> None:
        if self._owns_bus:
            self._bus.flush()

    # --- Frame update ---

    def update(self, dt: float) -> None:
        if dt < 0:
            dt = 0.0
        self._elapsed += dt

        for event in self._active:
            event.update(dt)

        self._try_generate(dt)
        self._sweep_failed()
        self._flush()

    def _try_generate(self, dt: float) -> None:
        # The accumulator only resets on a successful generation; time spent
        # waiting for a free slot is not banked into extra events.
        if self._paused:
            return
        self._last_event_time += dt
        if self._last_event_time < self._config.generation_interval:
            return
        if len(self._active) >= self._config.max_active_events:
            return
        stage = self._timeline.current_stage
        if stage is None or not self._timeline.is_active:
            return
        self.generate_event(stage)
        self._last_event_time = 0.0

    def _sweep_failed(self) -> None:
        for event in [e for e in self._active if e.failed]:
            self._on_event_failed(event)

    def pause_generation(self) -> None:
        self._paused = True

    def resume_generation(self) -> None:
        self._paused = False

    # --- Generation ---

    def generate_event(self, stage: LifeStage) -> LifeEvent | None:
        """Spawn one event for ``stage`` and pool it.

        Returns None, creating nothing, when the pool is full or the stage
        has no templates. Called directly, this bypasses only the cadence.
        """
        if len(self._active) >= self._config.max_active_events:
            return None
        templates = templates_for(self._catalog, stage.id)
        if not templates:
            logger.debug("No templates for stage %r; nothing generated", stage.id)
            return None

        template = templates[self._rng.randrange(len(templates))]
        difficulty = self._event_difficulty(template.difficulty, stage)
        time_limit = self._time_limit(template.time_limit, stage)

        target = copy.deepcopy(template.target)
        adjust_target(target, difficulty)

        event = LifeEvent(
            id=self._event_id_counter,
            name=template.name,
            type=template.type,
            difficulty=difficulty,
            time_limit=time_limit,
            points=template.points,
            target=target,
            position=self._spawn_position(),
            stage_id=stage.id,
            icon=template.icon,
            color=template.color,
            clock=self.now,
            rng=self._rng,
            viewport=self._viewport,
            ui_margin=self._config.ui_margin,
        )
        self._event_id_counter += 1
        self._active.append(event)
        logger.debug(
            "Generated event %d: %s (difficulty %s, %.0f ms)",
            event.id, event.name, difficulty, time_limit,
        )
        return event

    def _event_difficulty(self, base: int, stage: LifeStage) -> float:
        if self._difficulty is not None:
            return self._difficulty.calculate_event_difficulty(base, stage.id)
        return local_event_difficulty(base, stage.difficulty)

    def _time_limit(self, base: float, stage: LifeStage) -> float:
        # Deadlines scale with the stage, not with the individual template.
        if self._difficulty is not None:
            stage_difficulty = self._difficulty.calculate_event_difficulty(1, stage.id)
            return self._difficulty.adjust_time_limit(base, stage_difficulty)
        return local_time_limit(base, stage.difficulty)

    def _spawn_position(self) -> tuple[float, float]:
        if self._viewport is None:
            return self._config.default_position
        size = self._viewport()
        if size is None:
            return self._config.default_position
        width, height = size
        margin = self._config.spawn_margin
        x = margin + self._rng.random() * max(0.0, width - 2 * margin)
        y = margin + self._rng.random() * max(0.0, height - 2 * margin)
        return (x, y)

    # --- Interaction ---

    def process_interaction(self, input_event: InputEvent) -> bool:
        """Offer an input to the active events under it, in generation order.

        Scanning stops at the first event the input completes; events it
        does not complete (a click on a drag target, a partial rapid click)
        let it pass on to the next one. Returns True if an event completed.
        """
        handled = False
        for event in list(self._active):
            if not (event.is_active() and event.is_point_inside(input_event.x, input_event.y)):
                continue
            if event.handle_interaction(input_event):
                self._on_event_completed(event)
                handled = True
                break
        self._flush()
        return handled

    def complete_event(self, event_id: int) -> bool:
        """Complete an active event without a spatial hit. False if not applicable."""
        event = self.find_event(event_id)
        if event is None or not event.is_active():
            return False
        event.complete()
        self._on_event_completed(event)
        self._flush()
        return True

    def find_event(self, event_id: int) -> LifeEvent | None:
        for event in self._active:
            if event.id == event_id:
                return event
        return None

    # --- Finalization ---

    def _on_event_completed(self, event: LifeEvent) -> None:
        if self._difficulty is not None:
            self._difficulty.record_interaction_result(True, event.difficulty, event.duration())
        self._completed.append(event)
        self._active.remove(event)
        self._bus.publish(
            EVENT_COMPLETED,
            event=event,
            event_id=event.id,
            points=event.points,
            position=event.position,
            stage_id=event.stage_id,
        )

    def _on_event_failed(self, event: LifeEvent) -> None:
        if self._difficulty is not None:
            self._difficulty.record_interaction_result(False, event.difficulty, None)
        self._failed_count += 1
        self._active.remove(event)
        self._bus.publish(
            EVENT_FAILED,
            event=event,
            event_id=event.id,
            points=event.points,
            position=event.position,
            stage_id=event.stage_id,
        )

    # --- Queries ---

    def active_events(self) -> list[LifeEvent]:
        return list(self._active)

    def completed_events(self) -> list[LifeEvent]:
        return list(self._completed)

    def total_completed(self) -> int:
        return len(self._completed)

    def total_score(self) -> int:
        return sum(e.points for e in self._completed)

    def stage_stats(self, stage_id: str) -> StageStats:
        events = [e for e in self._completed if e.stage_id == stage_id]
        if not events:
            return StageStats()
        return StageStats(
            completed=len(events),
            total_score=sum(e.points for e in events),
            average_time=sum(e.duration() for e in events) / len(events),
        )

    def generation_stats(self) -> dict[str, Any]:
        generated = self._event_id_counter
        completed = len(self._completed)
        return {
            "total_generated": generated,
            "completed": completed,
            "failed": self._failed_count,
            "active": len(self._active),
            "completion_rate": (completed / generated) * 100 if generated else 0.0,
            "total_score": self.total_score(),
        }

    # --- Lifecycle ---

    def reset(self) -> None:
        self._active = []
        self._completed = []
        self._last_event_time = 0.0
        self._event_id_counter = 0
        self._failed_count = 0
        self._elapsed = 0.0
        self._paused = False
        if self._owns_bus:
            self._bus.clear()
        logger.info("Event pool reset")

    def render_infos(self) -> list[RenderInfo]:
        """Render hints for every active event, in pool order."""
        return [e.render_info() for e in self._active]

    # --- Serialization ---

    def serialize(self) -> dict[str, Any]:
        return {
            "active_events": [e.serialize() for e in self._active],
            "completed_events": [e.serialize() for e in self._completed],
            "last_event_time": self._last_event_time,
            "event_id_counter": self._event_id_counter,
            "failed_count": self._failed_count,
            "elapsed": self._elapsed,
            "generation_paused": self._paused,
        }

    def deserialize(self, data: dict[str, Any]) -> None:
        """Replace all pool state with a snapshot. Nothing is regenerated."""
        try:
            active_data = data["active_events"]
            completed_data = data["completed_events"]
            event_id_counter = int(data["event_id_counter"])
            last_event_time = float(data["last_event_time"])
        except KeyError as exc:
            raise SnapshotError(f"Missing event pool field {exc.args[0]!r}") from exc
        except (TypeError, ValueError) as exc:
            raise SnapshotError(f"Malformed event pool counters: {exc}") from exc

        active = [self._restore_event(d) for d in active_data]
        completed = [self._restore_event(d) for d in completed_data]

        known_ids = [e.id for e in active + completed]
        if known_ids and event_id_counter <= max(known_ids):
            raise SnapshotError(
                f"event_id_counter {event_id_counter} would reuse restored event ids"
            )

        self._active = active
        self._completed = completed
        self._last_event_time = last_event_time
        self._event_id_counter = event_id_counter
        self._failed_count = data.get("failed_count", 0)
        self._elapsed = data.get("elapsed", 0.0)
        self._paused = bool(data.get("generation_paused", False))
        logger.info(
            "Event pool restored: %d active, %d completed",
            len(self._active), len(self._completed),
        )

    def _restore_event(self, data: dict[str, Any]) -> LifeEvent:
        return LifeEvent.deserialize(
            data,
            clock=self.now,
            rng=self._rng,
            viewport=self._viewport,
            ui_margin=self._config.ui_margin,
        )
