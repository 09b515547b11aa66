"""Engine - frame loop, pacing, pause and lifecycle hooks."""

import logging
import os
import random
import time
from typing import Any, Callable

from lifetick.clock import Clock
from lifetick.types import SnapshotError, System, TickContext

logger = logging.getLogger(__name__)

_SNAPSHOT_VERSION = 1


class Engine:
    """Drives registered systems once per frame, in registration order."""

    def __init__(self, fps: int = 60, seed: int | None = None) -> None:
        self._clock = Clock(fps)
        self._systems: list[System] = []
        self._start_hooks: list[Callable[[TickContext], None]] = []
        self._stop_hooks: list[Callable[[TickContext], None]] = []
        self._stop_requested: bool = False
        self._paused: bool = False

        if seed is None:
            seed = int.from_bytes(os.urandom(8))
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def random(self) -> random.Random:
        return self._rng

    @property
    def is_paused(self) -> bool:
        return self._paused

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def on_start(self, hook: Callable[[TickContext], None]) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: Callable[[TickContext], None]) -> None:
        self._stop_hooks.append(hook)

    def pause(self) -> None:
        if not self._paused:
            self._paused = True
            logger.info("Engine paused at frame %d", self._clock.frame)

    def resume(self) -> None:
        if self._paused:
            self._paused = False
            logger.info("Engine resumed at frame %d", self._clock.frame)

    def _request_stop(self) -> None:
        self._stop_requested = True

    def _tick(self, dt: float | None) -> None:
        self._clock.advance(dt)
        ctx = self._clock.context(self._request_stop, self._rng)
        for system in self._systems:
            system(ctx)
            if self._stop_requested:
                break

    def step(self, dt: float | None = None) -> bool:
        """Run one frame of ``dt`` milliseconds. No-op while paused."""
        if self._paused:
            return False
        self._stop_requested = False
        self._tick(dt)
        return True

    def _run_hooks(self, hooks: list[Callable[[TickContext], None]]) -> None:
        ctx = self._clock.context(self._request_stop, self._rng)
        for hook in hooks:
            hook(ctx)

    def run(self, n: int, dt: float | None = None) -> None:
        self._stop_requested = False
        self._run_hooks(self._start_hooks)

        for _ in range(n):
            if self._paused:
                break
            self._tick(dt)
            if self._stop_requested:
                break

        self._run_hooks(self._stop_hooks)

    def run_forever(self) -> None:
        """Run at the nominal frame rate, feeding measured wall-clock deltas."""
        self._stop_requested = False
        self._run_hooks(self._start_hooks)

        frame_s = self._clock.dt / 1000.0
        last = time.monotonic()
        while not self._stop_requested:
            start = time.monotonic()
            if not self._paused:
                self._tick((start - last) * 1000.0)
            last = start
            if self._stop_requested:
                break
            sleep_time = frame_s - (time.monotonic() - start)
            if sleep_time > 0:
                time.sleep(sleep_time)

        self._run_hooks(self._stop_hooks)

    def snapshot(self) -> dict[str, Any]:
        return {
            "version": _SNAPSHOT_VERSION,
            "frame": self._clock.frame,
            "elapsed": self._clock.elapsed,
            "fps": self._clock.fps,
            "seed": self._seed,
            "rng_state": _serialize_rng_state(self._rng.getstate()),
        }

    def restore(self, data: dict[str, Any]) -> None:
        version = data.get("version")
        if version != _SNAPSHOT_VERSION:
            raise SnapshotError(
                f"Unsupported snapshot version {version!r}, expected {_SNAPSHOT_VERSION}"
            )

        snap_fps = data.get("fps")
        if snap_fps != self._clock.fps:
            raise SnapshotError(
                f"FPS mismatch: snapshot has {snap_fps}, engine has {self._clock.fps}"
            )

        self._clock.reset(data["frame"], data["elapsed"])
        self._seed = data["seed"]
        self._rng.setstate(_deserialize_rng_state(data["rng_state"]))


def _serialize_rng_state(state: tuple[int, tuple[int, ...], float | None]) -> list[Any]:
    """Convert Random.getstate() tuple to JSON-compatible list.

    The state format (version, internalstate, gauss_next) is the
    CPython Mersenne Twister representation. Stable across CPython
    versions but may differ on other implementations (PyPy, etc.).
    """
    version, internalstate, gauss_next = state
    return [version, list(internalstate), gauss_next]


def _deserialize_rng_state(data: list[Any]) -> tuple[int, tuple[int, ...], float | None]:
    """Convert JSON list back to Random.setstate() tuple."""
    version, internalstate, gauss_next = data
    return (version, tuple(internalstate), gauss_next)
