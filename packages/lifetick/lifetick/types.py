"""Shared type aliases, errors and defaults for lifetick."""

from __future__ import annotations

import random as _random
from dataclasses import dataclass
from typing import Callable, Optional

# Fallback canvas size when no viewport is available.
DEFAULT_VIEWPORT: tuple[int, int] = (800, 600)

# Returns the current (width, height) of the play area, or None when unknown.
ViewportFn = Callable[[], Optional[tuple[int, int]]]


@dataclass(frozen=True, slots=True)
class TickContext:
    frame: int
    dt: float  # milliseconds since the previous frame
    elapsed: float  # milliseconds since the engine started
    request_stop: Callable[[], None]
    random: _random.Random


class ConfigError(ValueError):
    """Raised at construction time for invalid configuration."""


class SnapshotError(Exception):
    """Raised on restore failures (version mismatch, missing or unknown fields)."""


System = Callable[[TickContext], None]


def resolve_viewport(viewport: ViewportFn | None) -> tuple[int, int]:
    """Ask the provider for its size, falling back to DEFAULT_VIEWPORT."""
    if viewport is None:
        return DEFAULT_VIEWPORT
    size = viewport()
    if size is None:
        return DEFAULT_VIEWPORT
    return size
