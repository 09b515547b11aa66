"""Clock and TickContext for the variable-step frame driver."""

import random
from typing import Callable

from lifetick.types import ConfigError, TickContext


class Clock:
    def __init__(self, fps: int) -> None:
        if fps <= 0:
            raise ConfigError("fps must be positive")
        self._fps = fps
        self._dt = 1000.0 / fps
        self._frame = 0
        self._elapsed = 0.0
        self._last_dt = 0.0

    @property
    def fps(self) -> int:
        return self._fps

    @property
    def dt(self) -> float:
        """Nominal frame length in milliseconds."""
        return self._dt

    @property
    def frame(self) -> int:
        return self._frame

    @property
    def elapsed(self) -> float:
        return self._elapsed

    def advance(self, dt: float | None = None) -> int:
        step = self._dt if dt is None else dt
        if step < 0:
            step = 0.0
        self._frame += 1
        self._elapsed += step
        self._last_dt = step
        return self._frame

    def context(self, stop_fn: Callable[[], None], rng: random.Random) -> TickContext:
        return TickContext(
            frame=self._frame,
            dt=self._last_dt,
            elapsed=self._elapsed,
            request_stop=stop_fn,
            random=rng,
        )

    def reset(self, frame: int = 0, elapsed: float = 0.0) -> None:
        self._frame = frame
        self._elapsed = elapsed
        self._last_dt = 0.0
