"""Completion and timeout flashes."""
from __future__ import annotations

import time

import pygame

from ui.constants import COLOR_FAILURE, COLOR_SUCCESS


class Flash:
    """An expanding ring that fades out where an event ended."""

    def __init__(
        self,
        position: tuple[float, float],
        color: tuple[int, int, int],
        duration: float,
        label: str = "",
    ) -> None:
        self.position = position
        self.color = color
        self.duration = duration
        self.label = label
        self.created = time.monotonic()

    def age(self) -> float:
        return (time.monotonic() - self.created) / self.duration

    def alive(self) -> bool:
        return self.age() < 1.0


class FeedbackLayer:
    """Manages flashes for completed and failed events."""

    def __init__(self) -> None:
        self._flashes: list[Flash] = []
        self._font: pygame.font.Font | None = None

    def _get_font(self) -> pygame.font.Font:
        if self._font is None:
            self._font = pygame.font.SysFont("monospace", 16, bold=True)
        return self._font

    def flash_success(self, position: tuple[float, float], points: int) -> None:
        self._flashes.append(Flash(position, COLOR_SUCCESS, 0.6, f"+{points}"))

    def flash_failure(self, position: tuple[float, float]) -> None:
        self._flashes.append(Flash(position, COLOR_FAILURE, 0.5, "miss"))

    def clear(self) -> None:
        self._flashes.clear()

    def draw(self, surface: pygame.Surface) -> None:
        alive: list[Flash] = []
        font = self._get_font()
        for flash in self._flashes:
            if not flash.alive():
                continue
            alive.append(flash)
            t = flash.age()
            a = 1.0 - t
            r, g, b = flash.color
            color = (int(r * a), int(g * a), int(b * a))
            x, y = int(flash.position[0]), int(flash.position[1])
            pygame.draw.circle(surface, color, (x, y), int(30 + 40 * t), 3)
            if flash.label:
                text = font.render(flash.label, True, color)
                surface.blit(text, text.get_rect(center=(x, y - int(30 * t) - 20)))
        self._flashes = alive
