"""Life Journey - a hundred-second life played one event at a time.

Events pop up across the window as your life moves from infancy to old age.
Click buttons (some need several clicks), drag the drag targets far enough,
and catch the moving ones before their countdown runs out.

Controls:
  Left-click  Click the event under the cursor
  Left-drag   Drag a drag target
  Space       Pause / Resume
  R           Restart
  Escape      Quit
"""
from __future__ import annotations

import argparse
import logging
import math
import sys

import pygame

from lifetick import configure_logging
from lifetick_event import CLICK, DRAG_INPUT, EVENT_COMPLETED, EVENT_FAILED, InputEvent

from game.setup import GameState, build_game, count_signals
from ui.constants import COLOR_BG, DEFAULT_H, DEFAULT_W, DRAG_THRESHOLD, FPS, STAGE_TINTS
from ui.hud import draw_hud, draw_pause_overlay, draw_summary
from ui.renderer import draw_events

logger = logging.getLogger("life_journey")

# Longest frame fed to the engine, in ms; longer stalls are dropped.
MAX_FRAME_MS = 100.0


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Life Journey - lifetick pygame demo")
    p.add_argument("--seed", type=int, default=42, help="Random seed (default: 42)")
    p.add_argument("--fps", type=int, default=FPS, help=f"Frames per second (default: {FPS})")
    p.add_argument("--width", type=int, default=DEFAULT_W, help=f"Window width (default: {DEFAULT_W})")
    p.add_argument("--height", type=int, default=DEFAULT_H, help=f"Window height (default: {DEFAULT_H})")
    p.add_argument("--log-level", type=str, default=None,
                   help="Logging level (default: LIFETICK_LOG_LEVEL or INFO)")
    p.add_argument("--headless", action="store_true",
                   help="Play one unattended life without a window and print the result")
    args = p.parse_args()
    args.fps = max(10, min(240, args.fps))
    args.width = max(400, args.width)
    args.height = max(300, args.height)
    return args


def run_headless(args: argparse.Namespace) -> None:
    """Nobody clicks, so every event times out."""
    state = build_game(seed=args.seed, fps=args.fps, viewport=lambda: (args.width, args.height))
    counts = count_signals(state)

    def stopper(ctx) -> None:
        if state.timeline.is_complete and not state.pool.active_events():
            ctx.request_stop()

    state.engine.add_system(stopper)
    state.timeline.start_game()
    state.engine.run(args.fps * 200)

    stats = state.pool.generation_stats()
    print(
        f"frames={state.engine.clock.frame} generated={stats['total_generated']} "
        f"completed={counts[EVENT_COMPLETED]} failed={counts[EVENT_FAILED]}"
    )


def handle_mouse(state: GameState, event: pygame.event.Event) -> None:
    """Translate mouse events into pool inputs."""
    if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
        x, y = event.pos
        state.drag_origin = (x, y)
        state.drag_moved = False
        state.pool.process_interaction(InputEvent(type=CLICK, x=x, y=y))

    elif event.type == pygame.MOUSEMOTION and state.drag_origin is not None:
        ox, oy = state.drag_origin
        dx = event.pos[0] - ox
        dy = event.pos[1] - oy
        if state.drag_moved or math.hypot(dx, dy) >= DRAG_THRESHOLD:
            state.drag_moved = True
            # Drags are hit-tested where they started
            state.pool.process_interaction(InputEvent(type=DRAG_INPUT, x=ox, y=oy, dx=dx, dy=dy))

    elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
        state.drag_origin = None
        state.drag_moved = False


def main() -> None:
    args = parse_args()
    configure_logging(level=args.log_level, extra_loggers=["life_journey", "game"])

    if args.headless:
        run_headless(args)
        return

    pygame.init()
    screen = pygame.display.set_mode((args.width, args.height))
    pygame.display.set_caption("Life Journey - lifetick demo")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 14)
    big_font = pygame.font.SysFont("monospace", 18, bold=True)

    state = build_game(seed=args.seed, fps=args.fps, viewport=screen.get_size)
    state.timeline.start_game()
    logger.info("Window %dx%d at %d fps, seed %d", args.width, args.height, args.fps, args.seed)

    running = True
    while running:
        frame_ms = min(float(clock.tick(args.fps)), MAX_FRAME_MS)

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    state.paused = not state.paused
                    if state.paused:
                        state.engine.pause()
                    else:
                        state.engine.resume()
                    state.drag_origin = None
                elif event.key == pygame.K_r:
                    state.restart()

            elif event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEMOTION, pygame.MOUSEBUTTONUP):
                if not state.paused and state.timeline.is_active:
                    handle_mouse(state, event)

        # --- Advance ---
        state.engine.step(frame_ms)

        # --- Render ---
        stage = state.timeline.current_stage
        tint = STAGE_TINTS.get(stage.id, COLOR_BG) if stage is not None else COLOR_BG
        screen.fill(tint)

        draw_events(screen, font, state.pool.render_infos())
        state.feedback.draw(screen)
        draw_hud(screen, big_font, state.timeline, state.pool)

        stats = state.pool.generation_stats()
        state.status.draw(
            screen,
            f"done {stats['completed']}  missed {stats['failed']}  "
            f"rate {stats['completion_rate']:.0f}%",
        )

        if state.timeline.is_complete and not state.pool.active_events():
            draw_summary(screen, big_font, state.pool)
        if state.paused:
            draw_pause_overlay(screen, font)

        pygame.display.flip()

    if state.history:
        logger.info("Previous lives scored %s", state.history)
    logger.info("Final score %d", state.pool.total_score())
    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
