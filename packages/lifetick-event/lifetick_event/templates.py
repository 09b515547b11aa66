"""Built-in template catalog, one template per default stage."""
from __future__ import annotations

from typing import Mapping, Sequence

from lifetick_event.types import (
    BUTTON,
    DRAG,
    DRAG_TARGET,
    RAPID_CLICK,
    SIMPLE_CLICK,
    EventTemplate,
    Target,
)

# Templates keyed by stage id.
Catalog = Mapping[str, Sequence[EventTemplate]]

DEFAULT_CATALOG: dict[str, list[EventTemplate]] = {
    "baby": [
        EventTemplate(
            name="First Smile",
            type=SIMPLE_CLICK,
            difficulty=1,
            time_limit=3000,
            points=10,
            icon="😊",
            color="#ffb3ba",
            target=Target(type=BUTTON, width=100, height=60, required_clicks=1),
        ),
    ],
    "child": [
        EventTemplate(
            name="Learning to Walk",
            type=RAPID_CLICK,
            difficulty=2,
            time_limit=3000,
            points=20,
            icon="👣",
            color="#bae1ff",
            target=Target(type=BUTTON, width=90, height=50, required_clicks=3),
        ),
    ],
    "teen": [
        EventTemplate(
            name="Passing the Exam",
            type=RAPID_CLICK,
            difficulty=3,
            time_limit=2500,
            points=30,
            icon="📝",
            color="#baffc9",
            target=Target(type=BUTTON, width=80, height=45, required_clicks=5),
        ),
    ],
    "adult": [
        EventTemplate(
            name="Landing a Job",
            type=DRAG_TARGET,
            difficulty=4,
            time_limit=2000,
            points=40,
            icon="💼",
            color="#ffffba",
            target=Target(type=DRAG, width=70, height=70, drag_distance=100),
        ),
    ],
    "elder": [
        EventTemplate(
            name="Retirement",
            type=SIMPLE_CLICK,
            difficulty=2,
            time_limit=3000,
            points=30,
            icon="🎉",
            color="#ffdfba",
            target=Target(type=BUTTON, width=90, height=55, required_clicks=1),
        ),
    ],
}


def templates_for(catalog: Catalog, stage_id: str) -> Sequence[EventTemplate]:
    """Templates for a stage, empty when the catalog has no entry."""
    return catalog.get(stage_id, ())
