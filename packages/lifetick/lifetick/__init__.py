"""lifetick - frame-driven core for the life-journey reaction game."""

from lifetick.clock import Clock
from lifetick.engine import Engine
from lifetick.log import configure_logging
from lifetick.types import (
    DEFAULT_VIEWPORT,
    ConfigError,
    SnapshotError,
    System,
    TickContext,
    ViewportFn,
)

__all__ = [
    "Engine",
    "Clock",
    "TickContext",
    "System",
    "ViewportFn",
    "DEFAULT_VIEWPORT",
    "ConfigError",
    "SnapshotError",
    "configure_logging",
]
