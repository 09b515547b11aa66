"""Demo catalog: the built-in templates plus a few extras per stage."""
from __future__ import annotations

from lifetick_event import (
    BUTTON,
    DRAG,
    DRAG_TARGET,
    DEFAULT_CATALOG,
    MOVING_OBJECT,
    MOVING_TARGET,
    RAPID_CLICK,
    SIMPLE_CLICK,
    EventTemplate,
    Target,
)

EXTRA_TEMPLATES: dict[str, list[EventTemplate]] = {
    "baby": [
        EventTemplate(
            name="Catch the Rattle",
            type=MOVING_TARGET,
            difficulty=1,
            time_limit=4000,
            points=15,
            icon="🧸",
            color="#ffb3ba",
            target=Target(type=MOVING_OBJECT, width=70, height=70, speed=120),
        ),
    ],
    "child": [
        EventTemplate(
            name="Riding a Bike",
            type=DRAG_TARGET,
            difficulty=2,
            time_limit=3500,
            points=25,
            icon="🚲",
            color="#bae1ff",
            target=Target(type=DRAG, width=80, height=80, drag_distance=80),
        ),
    ],
    "teen": [
        EventTemplate(
            name="First Crush",
            type=MOVING_TARGET,
            difficulty=3,
            time_limit=3000,
            points=35,
            icon="💌",
            color="#baffc9",
            target=Target(type=MOVING_OBJECT, width=60, height=60, speed=160),
        ),
    ],
    "adult": [
        EventTemplate(
            name="Paying the Mortgage",
            type=RAPID_CLICK,
            difficulty=3,
            time_limit=2500,
            points=35,
            icon="🏠",
            color="#ffffba",
            target=Target(type=BUTTON, width=90, height=50, required_clicks=4),
        ),
        EventTemplate(
            name="Catching the Train",
            type=MOVING_TARGET,
            difficulty=4,
            time_limit=2500,
            points=45,
            icon="🚆",
            color="#ffffba",
            target=Target(type=MOVING_OBJECT, width=60, height=60, speed=180),
        ),
    ],
    "elder": [
        EventTemplate(
            name="Grandchild's Visit",
            type=SIMPLE_CLICK,
            difficulty=1,
            time_limit=3500,
            points=25,
            icon="👶",
            color="#ffdfba",
            target=Target(type=BUTTON, width=100, height=60, required_clicks=1),
        ),
    ],
}


def make_catalog() -> dict[str, list[EventTemplate]]:
    """Merge the built-in catalog with the demo extras."""
    catalog = {stage_id: list(templates) for stage_id, templates in DEFAULT_CATALOG.items()}
    for stage_id, templates in EXTRA_TEMPLATES.items():
        catalog.setdefault(stage_id, []).extend(templates)
    return catalog
