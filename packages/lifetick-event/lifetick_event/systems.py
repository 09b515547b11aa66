"""System factory for the life event pool."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from lifetick_event.pool import EventPool

if TYPE_CHECKING:
    from lifetick import TickContext


def make_pool_system(pool: EventPool) -> Callable[[TickContext], None]:
    """Return a system that ticks, generates and sweeps the pool each frame.

    Frame order:
    1. Count down every active event (moving targets also move)
    2. Attempt generation for the timeline's current stage
    3. Retire events whose deadline ran out (event_failed)
    """

    def pool_system(ctx: TickContext) -> None:
        pool.update(ctx.dt)

    return pool_system
