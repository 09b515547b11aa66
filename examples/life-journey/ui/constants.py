"""Layout, color, and rendering constants."""
from __future__ import annotations

# Window defaults (overridden by CLI --width/--height)
DEFAULT_W = 800
DEFAULT_H = 600
FPS = 60

# Layout
HUD_H = 48
STATUS_H = 28
TIMER_BAR_H = 6

# Drags shorter than this (px) still count as clicks
DRAG_THRESHOLD = 6

# UI colors
COLOR_BG = (20, 20, 30)
COLOR_HUD_BG = (28, 28, 40)
COLOR_STATUS_BG = (30, 30, 40)
COLOR_TEXT = (200, 200, 200)
COLOR_TEXT_DIM = (130, 130, 140)
COLOR_PROGRESS_BG = (45, 45, 60)
COLOR_PROGRESS_FG = (120, 180, 255)
COLOR_OUTLINE = (255, 255, 255)

# Per-stage background tint (r, g, b)
STAGE_TINTS: dict[str, tuple[int, int, int]] = {
    "baby": (38, 30, 44),
    "child": (28, 36, 48),
    "teen": (26, 42, 34),
    "adult": (42, 40, 26),
    "elder": (44, 34, 28),
}

# Flash colors
COLOR_SUCCESS = (80, 230, 120)
COLOR_FAILURE = (255, 80, 80)
