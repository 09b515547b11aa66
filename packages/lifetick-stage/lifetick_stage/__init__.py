"""lifetick-stage - Life-stage timeline state machine."""
from __future__ import annotations

from lifetick_stage.systems import make_stage_system
from lifetick_stage.timeline import StageTimeline
from lifetick_stage.types import DEFAULT_STAGES, LifeStage, build_stages

__all__ = [
    "LifeStage",
    "DEFAULT_STAGES",
    "build_stages",
    "StageTimeline",
    "make_stage_system",
]
