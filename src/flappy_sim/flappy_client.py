#!/usr/bin/env python3
"""
flappy_client.py

pygame frame driver, input mapping and rendering for the simulation core.
The renderer only ever sees World.snapshot(); it never mutates the world.
"""

import argparse
import logging
from typing import Optional

import pygame

from .constants import DEFAULT_HEIGHT, DEFAULT_WIDTH, RENDER_FPS
from .data_models import Lifecycle, Viewport, WorldSnapshot
from .physics_core import advance
from .world import World

logger = logging.getLogger(__name__)

SKY = (0, 191, 255)
WHITE = (255, 255, 255)
RED = (220, 30, 30)
PIPE_COLOR = (0, 150, 0)
PIPE_CAP_COLOR = (0, 110, 0)
# Player colour per animation frame: up, level, diving
FRAME_COLORS = ((255, 230, 80), (255, 200, 40), (240, 150, 20))
BUTTON_COLOR = (40, 60, 90)
BUTTON_BORDER = (90, 130, 180)


# ----------------- Rendering -----------------

class Renderer:
    """Draws a WorldSnapshot onto a surface."""

    def __init__(self, viewport: Viewport):
        self.viewport = viewport
        self._fonts = {}

    def _font(self, size: int) -> pygame.font.Font:
        size = max(8, size)
        if size not in self._fonts:
            self._fonts[size] = pygame.font.Font(None, size)
        return self._fonts[size]

    def restart_button_rect(self) -> pygame.Rect:
        w, h = self.viewport.width, self.viewport.height
        btn_w, btn_h = int(self.viewport.scale(180)), int(self.viewport.scale(60))
        return pygame.Rect(int((w - btn_w) / 2), int(h * 0.55), btn_w, btn_h)

    def draw(self, screen: pygame.Surface, state: WorldSnapshot):
        scale = self.viewport.scale
        screen.fill(SKY)

        # Obstacles: a column above the gap and one below, each with a cap
        cap_h = scale(24)
        for obstacle in state.obstacles:
            x, w = obstacle.x, obstacle.width
            pygame.draw.rect(screen, PIPE_COLOR, (x, 0, w, obstacle.top))
            pygame.draw.rect(screen, PIPE_CAP_COLOR, (x - 3, obstacle.top - cap_h, w + 6, cap_h))
            pygame.draw.rect(screen, PIPE_COLOR, (x, obstacle.bottom, w, state.height - obstacle.bottom))
            pygame.draw.rect(screen, PIPE_CAP_COLOR, (x - 3, obstacle.bottom, w + 6, cap_h))

        # Player
        p = state.player
        pygame.draw.rect(screen, FRAME_COLORS[p.frame_index], (p.x, p.y, p.width, p.height))

        # HUD
        score_text = self._font(int(scale(40))).render(str(state.score), True, WHITE)
        screen.blit(score_text, (scale(20), scale(60) - score_text.get_height()))

        if state.lifecycle is Lifecycle.NOT_STARTED:
            self._draw_centered(screen, "Press any key to start", int(scale(36)), WHITE, state.height * 0.45)

        if state.game_over:
            over = self._font(int(scale(60))).render("Game Over", True, RED)
            screen.blit(over, (state.width * 0.28, state.height * 0.45 - over.get_height()))

            rect = self.restart_button_rect()
            pygame.draw.rect(screen, BUTTON_COLOR, rect, border_radius=10)
            pygame.draw.rect(screen, BUTTON_BORDER, rect, width=2, border_radius=10)
            label = self._font(int(scale(32))).render("Restart (R)", True, WHITE)
            screen.blit(label, (rect.centerx - label.get_width() // 2,
                                rect.centery - label.get_height() // 2))

    def _draw_centered(self, screen, text, size, color, y):
        surf = self._font(size).render(text, True, color)
        screen.blit(surf, (self.viewport.width / 2 - surf.get_width() / 2, y))


# ----------------- Game Client (input / frame driver) -----------------

class FlappyClient:
    def __init__(self, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT,
                 fps: int = RENDER_FPS, seed: Optional[int] = None,
                 max_dt: Optional[float] = None):
        pygame.init()
        self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        pygame.display.set_caption("Flappy")

        self.viewport = Viewport(width, height)
        self.world = World(self.viewport, seed=seed)
        self.renderer = Renderer(self.viewport)

        # Time Management
        self.clock = pygame.time.Clock()
        self.fps = fps
        self.max_dt = max_dt

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Maps one pygame event onto world actions. Returns False to quit."""
        world = self.world

        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            return False

        if event.type == pygame.VIDEORESIZE:
            self.resize(event.w, event.h)
        elif event.type == pygame.KEYDOWN:
            if world.lifecycle is Lifecycle.GAME_OVER:
                if event.key == pygame.K_r:
                    world.restart()
            else:
                self._press()
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if world.lifecycle is Lifecycle.GAME_OVER:
                if self.renderer.restart_button_rect().collidepoint(event.pos):
                    world.restart()
            else:
                self._press()
        elif event.type == pygame.KEYUP or (event.type == pygame.MOUSEBUTTONUP and event.button == 1):
            world.release_jump()

        return True

    def _press(self):
        # The first press ever only dismisses the start menu
        if self.world.lifecycle is Lifecycle.NOT_STARTED:
            self.world.start_run()
        else:
            self.world.request_jump()

    def resize(self, width: int, height: int):
        self.viewport.resize(width, height)
        self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        logger.debug("Viewport resized to %dx%d", width, height)

    def frame_time(self, dt: float) -> float:
        if self.max_dt is not None:
            return min(dt, self.max_dt)
        return dt

    def run(self):
        """The main client execution loop."""
        running = True
        try:
            while running:
                dt = self.frame_time(self.clock.tick(self.fps) / 1000.0)

                for event in pygame.event.get():
                    if not self.handle_event(event):
                        running = False

                advance(self.world, dt)
                self.renderer.draw(self.screen, self.world.snapshot())
                pygame.display.flip()
        finally:
            pygame.quit()


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Flappy-style arcade game.")
    p.add_argument("--width", type=int, default=DEFAULT_WIDTH, help="Initial window width")
    p.add_argument("--height", type=int, default=DEFAULT_HEIGHT, help="Initial window height")
    p.add_argument("--fps", type=int, default=RENDER_FPS, help="Frame rate cap")
    p.add_argument("--seed", type=int, default=None, help="Obstacle RNG seed. Omit for random.")
    p.add_argument("--max-dt", type=float, default=None,
                   help="Clamp each frame's time step (seconds). Unclamped by default.")
    p.add_argument("--log-level", default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    print(f"Starting Flappy {args.width}x{args.height} @ {args.fps} fps"
          + (f", seed {args.seed}" if args.seed is not None else ""))
    client = FlappyClient(args.width, args.height, fps=args.fps,
                          seed=args.seed, max_dt=args.max_dt)
    client.run()


if __name__ == "__main__":
    main()
