"""System factory for the stage timeline."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from lifetick_stage.timeline import StageTimeline

if TYPE_CHECKING:
    from lifetick import TickContext


def make_stage_system(timeline: StageTimeline) -> Callable[[TickContext], None]:
    """Return a system that advances the timeline by each frame's dt.

    Register it before the event pool system so generation sees the
    stage for the current frame.
    """

    def stage_system(ctx: TickContext) -> None:
        timeline.update(ctx.dt)

    return stage_system
