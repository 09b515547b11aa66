"""Timeline and pool notification callbacks."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from lifetick_stage import LifeStage, StageTimeline
    from ui.feedback import FeedbackLayer
    from ui.status import StatusLine

logger = logging.getLogger(__name__)


def make_on_completed(feedback: FeedbackLayer, status: StatusLine):
    """Return the event_completed handler."""
    def on_completed(signal: str, data: dict) -> None:
        feedback.flash_success(data["position"], data["points"])
        status.set(f"{data['event'].name}  +{data['points']}", (120, 230, 140))
    return on_completed


def make_on_failed(feedback: FeedbackLayer, status: StatusLine):
    """Return the event_failed handler."""
    def on_failed(signal: str, data: dict) -> None:
        feedback.flash_failure(data["position"])
        status.set(f"Missed: {data['event'].name}", (255, 110, 110))
    return on_failed


def make_on_transition(status: StatusLine):
    """Return the stage transition hook."""
    def on_transition(previous: LifeStage | None, current: LifeStage) -> None:
        status.set(f"Entering {current.name}", (200, 200, 120))
    return on_transition


def make_on_game_end(status: StatusLine):
    """Return the game end hook."""
    def on_game_end(timeline: StageTimeline) -> None:
        logger.info("Life finished after %.1f s", timeline.elapsed_time())
        status.set("Life complete", (200, 200, 200))
    return on_game_end
