"""HUD overlays: stage banner, life progress, pause and summary."""
from __future__ import annotations

import pygame

from lifetick_event import EventPool
from lifetick_stage import StageTimeline

from ui.constants import (
    COLOR_HUD_BG,
    COLOR_PROGRESS_BG,
    COLOR_PROGRESS_FG,
    COLOR_TEXT,
    HUD_H,
)


def draw_hud(
    surface: pygame.Surface,
    font: pygame.font.Font,
    timeline: StageTimeline,
    pool: EventPool,
) -> None:
    """Draw the top bar: stage name, time left, score and life progress."""
    width = surface.get_width()
    pygame.draw.rect(surface, COLOR_HUD_BG, pygame.Rect(0, 0, width, HUD_H))

    stage = timeline.current_stage
    if timeline.is_complete:
        label = "Life complete"
    elif stage is not None:
        label = f"{stage.name}  (difficulty {stage.difficulty})"
    else:
        label = "Press R to begin"
    surface.blit(font.render(label, True, COLOR_TEXT), (10, 8))

    info = f"Score {pool.total_score()}   Time left {timeline.time_left():5.1f}s"
    text = font.render(info, True, COLOR_TEXT)
    surface.blit(text, (width - text.get_width() - 10, 8))

    # Life progress, split into stage segments
    bar = pygame.Rect(10, HUD_H - 14, width - 20, 8)
    pygame.draw.rect(surface, COLOR_PROGRESS_BG, bar)
    filled = bar.copy()
    filled.width = int(bar.width * timeline.game_progress())
    pygame.draw.rect(surface, COLOR_PROGRESS_FG, filled)
    for s in timeline.stages[1:]:
        x = bar.x + int(bar.width * s.start_time / timeline.total_time)
        pygame.draw.line(surface, COLOR_HUD_BG, (x, bar.y), (x, bar.bottom - 1), 2)


def draw_pause_overlay(surface: pygame.Surface, font: pygame.font.Font) -> None:
    """Draw a semi-transparent pause overlay over the play area."""
    width, height = surface.get_size()
    overlay = pygame.Surface((width, height), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 100))
    surface.blit(overlay, (0, 0))

    big_font = pygame.font.SysFont("monospace", 32, bold=True)
    text = big_font.render("PAUSED", True, (255, 255, 255))
    surface.blit(text, text.get_rect(center=(width // 2, height // 2)))

    hint = font.render("Space to resume", True, (180, 180, 180))
    surface.blit(hint, hint.get_rect(center=(width // 2, height // 2 + 30)))


def draw_summary(surface: pygame.Surface, font: pygame.font.Font, pool: EventPool) -> None:
    """Draw the end-of-life summary."""
    width, height = surface.get_size()
    stats = pool.generation_stats()
    lines = [
        f"Final score: {stats['total_score']}",
        f"Events completed: {stats['completed']} / {stats['total_generated']}",
        "R to live again, Esc to quit",
    ]
    y = height // 2 - 30
    for line in lines:
        text = font.render(line, True, COLOR_TEXT)
        surface.blit(text, text.get_rect(center=(width // 2, y)))
        y += 26
