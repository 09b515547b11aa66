"""Bottom status line."""
from __future__ import annotations

import pygame

from ui.constants import COLOR_STATUS_BG, COLOR_TEXT, COLOR_TEXT_DIM, STATUS_H


class StatusLine:
    """Latest message on the left, a detail string on the right."""

    def __init__(self) -> None:
        self._message = ""
        self._color = COLOR_TEXT
        self._font: pygame.font.Font | None = None

    def _get_font(self) -> pygame.font.Font:
        if self._font is None:
            self._font = pygame.font.SysFont("monospace", 14)
        return self._font

    def set(self, message: str, color: tuple[int, int, int] = COLOR_TEXT) -> None:
        self._message = message
        self._color = color

    def clear(self) -> None:
        self._message = ""

    def draw(self, surface: pygame.Surface, detail: str = "") -> None:
        width, height = surface.get_size()
        top = height - STATUS_H
        pygame.draw.rect(surface, COLOR_STATUS_BG, pygame.Rect(0, top, width, STATUS_H))

        font = self._get_font()
        if self._message:
            surface.blit(font.render(self._message, True, self._color), (8, top + 6))
        if detail:
            text = font.render(detail, True, COLOR_TEXT_DIM)
            surface.blit(text, (width - text.get_width() - 8, top + 6))
