"""
world.py: The world state and its lifecycle transitions.

Input handlers call the methods here; they only flip flags and the
lifecycle. Numeric state changes only inside physics_core.advance().
"""

import logging
import random
from typing import List, Optional

from .constants import (
    DEFAULT_HEIGHT, DEFAULT_WIDTH, GRAVITY_ACCEL, JUMP_IMPULSE,
    PLAYER_SIZE, PLAYER_START_Y_FRAC, PLAYER_X
)
from .data_models import (
    Lifecycle, Obstacle, ObstacleView, Player, PlayerView, Viewport,
    WorldSnapshot, animation_frame
)
from .difficulty import difficulty

logger = logging.getLogger(__name__)


class World:
    """Single game session: player, obstacles, score and lifecycle."""

    def __init__(self, viewport: Optional[Viewport] = None, seed: Optional[int] = None):
        self.viewport = viewport or Viewport(DEFAULT_WIDTH, DEFAULT_HEIGHT)
        self.rng = random.Random(seed)

        self.player: Player = self._create_player()
        self.obstacles: List[Obstacle] = []
        self.score = 0
        self.lifecycle = Lifecycle.NOT_STARTED
        self.sessions = 0

        # Input state
        self.jump_pending = False       # Held between press and release
        self.jump_applied = False       # Impulse already given for this press

        self.reset()

    def _create_player(self) -> Player:
        viewport = self.viewport
        size = viewport.scale(PLAYER_SIZE)
        return Player(
            x=viewport.scale(PLAYER_X),
            y=viewport.height * PLAYER_START_Y_FRAC,
            width=size,
            height=size,
            gravity=viewport.scale(GRAVITY_ACCEL),
            jump=viewport.scale(JUMP_IMPULSE),
            velocity=0.0,
            frame_index=animation_frame(0.0),
        )

    @property
    def difficulty(self) -> float:
        return difficulty(self.score)

    # ----------------- Lifecycle -----------------

    def reset(self, viewport_height: Optional[float] = None):
        """
        Starts a new session. The first session waits for start_run();
        every later one is already running.
        """
        if viewport_height is not None:
            self.viewport.resize(self.viewport.width, viewport_height)

        self.player = self._create_player()
        self.obstacles = []
        self.score = 0
        self.jump_pending = False
        self.jump_applied = False

        self.lifecycle = Lifecycle.NOT_STARTED if self.sessions == 0 else Lifecycle.RUNNING
        self.sessions += 1
        logger.debug("Session %d reset (%s)", self.sessions, self.lifecycle.value)

    def start_run(self):
        if self.lifecycle is Lifecycle.NOT_STARTED:
            self.lifecycle = Lifecycle.RUNNING
            logger.info("Run started")

    def restart(self):
        if self.lifecycle is Lifecycle.GAME_OVER:
            logger.info("Restarting after score %d", self.score)
            self.reset()

    def game_over(self, cause: str = "collision"):
        if self.lifecycle is Lifecycle.RUNNING:
            self.lifecycle = Lifecycle.GAME_OVER
            logger.info("Game over (%s). Final score: %d", cause, self.score)

    # ----------------- Input -----------------

    def request_jump(self):
        """Key/button down. Holding the key does not re-jump."""
        if self.lifecycle is Lifecycle.RUNNING and not self.jump_pending:
            self.jump_pending = True
            self.jump_applied = False

    def release_jump(self):
        self.jump_pending = False
        self.jump_applied = False

    # ----------------- Rendering -----------------

    def snapshot(self) -> WorldSnapshot:
        """Prepares an immutable view of the world for the renderer."""
        p = self.player
        return WorldSnapshot(
            player=PlayerView(
                x=p.x, y=p.y, width=p.width, height=p.height,
                velocity=p.velocity, frame_index=p.frame_index,
            ),
            obstacles=tuple(
                ObstacleView(x=o.x, width=o.width, top=o.top, bottom=o.bottom, scored=o.scored)
                for o in self.obstacles
            ),
            score=self.score,
            lifecycle=self.lifecycle,
            width=self.viewport.width,
            height=self.viewport.height,
        )
