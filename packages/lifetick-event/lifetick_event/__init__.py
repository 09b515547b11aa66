"""lifetick-event - Timed life events and the pool that schedules them."""
from lifetick_event.difficulty import DifficultyModel, adjust_target
from lifetick_event.event import LifeEvent
from lifetick_event.pool import EVENT_COMPLETED, EVENT_FAILED, EventPool, PoolConfig
from lifetick_event.systems import make_pool_system
from lifetick_event.templates import DEFAULT_CATALOG, Catalog
from lifetick_event.types import (
    BUTTON,
    CLICK,
    DRAG,
    DRAG_INPUT,
    DRAG_TARGET,
    MOVING_OBJECT,
    MOVING_TARGET,
    RAPID_CLICK,
    SIMPLE_CLICK,
    EventTemplate,
    InputEvent,
    Movement,
    RenderInfo,
    StageStats,
    Target,
)

__all__ = [
    "LifeEvent",
    "EventPool",
    "PoolConfig",
    "EventTemplate",
    "Target",
    "Movement",
    "InputEvent",
    "RenderInfo",
    "StageStats",
    "Catalog",
    "DEFAULT_CATALOG",
    "DifficultyModel",
    "adjust_target",
    "make_pool_system",
    "EVENT_COMPLETED",
    "EVENT_FAILED",
    "SIMPLE_CLICK",
    "RAPID_CLICK",
    "DRAG_TARGET",
    "MOVING_TARGET",
    "BUTTON",
    "DRAG",
    "MOVING_OBJECT",
    "CLICK",
    "DRAG_INPUT",
]
