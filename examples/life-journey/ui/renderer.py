"""Active event rendering from RenderInfo hints."""
from __future__ import annotations

import pygame

from lifetick_event import RenderInfo

from ui.constants import COLOR_OUTLINE, COLOR_PROGRESS_BG, COLOR_TEXT, TIMER_BAR_H


def hex_to_rgb(value: str, default: tuple[int, int, int] = (200, 200, 200)) -> tuple[int, int, int]:
    """Parse ``#rrggbb``; anything else yields ``default``."""
    if len(value) != 7 or not value.startswith("#"):
        return default
    try:
        return (int(value[1:3], 16), int(value[3:5], 16), int(value[5:7], 16))
    except ValueError:
        return default


def draw_event(surface: pygame.Surface, font: pygame.font.Font, info: RenderInfo) -> None:
    """Draw one event: urgency-colored body, countdown bar, progress, label."""
    w = int(info.size[0] * info.scale)
    h = int(info.size[1] * info.scale)
    x, y = int(info.position[0]), int(info.position[1])
    rect = pygame.Rect(0, 0, w, h)
    rect.center = (x, y)

    color = hex_to_rgb(info.color)
    body = pygame.Surface((w, h), pygame.SRCALPHA)
    body.fill((*color, int(255 * info.opacity)))
    surface.blit(body, rect)
    pygame.draw.rect(surface, COLOR_OUTLINE, rect, 1)

    # Countdown shrinks left to right
    bar = pygame.Rect(rect.x, rect.bottom + 3, w, TIMER_BAR_H)
    pygame.draw.rect(surface, COLOR_PROGRESS_BG, bar)
    remaining = bar.copy()
    remaining.width = int(w * info.time_ratio)
    pygame.draw.rect(surface, color, remaining)

    if 0.0 < info.progress < 1.0:
        pygame.draw.arc(
            surface, COLOR_OUTLINE, rect.inflate(12, 12), 0.0, info.progress * 6.283, 3
        )

    ty = rect.y - 4
    for line in reversed(info.text.split("\n")):
        text = font.render(line, True, COLOR_TEXT)
        ty -= text.get_height()
        surface.blit(text, text.get_rect(midtop=(x, ty)))


def draw_events(surface: pygame.Surface, font: pygame.font.Font, infos: list[RenderInfo]) -> None:
    """Draw in reverse pool order so the event that gets the click is on top."""
    for info in reversed(infos):
        draw_event(surface, font, info)
