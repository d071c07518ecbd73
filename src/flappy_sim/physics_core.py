"""
physics_core.py: The per-frame simulation step.

Motion integration, obstacle spawning and retirement, collision and
scoring. The step never yields and never touches the renderer; it reads
the current viewport size from the world every time it runs.
"""

import logging
from typing import TYPE_CHECKING, List

from .constants import (
    MAX_TOP_FRAC, MIN_TOP_FRAC, OBSTACLE_SPEED, OBSTACLE_WIDTH
)
from .data_models import Lifecycle, Obstacle, Player, animation_frame
from .difficulty import difficulty, gap_size, obstacle_speed, spawn_threshold

if TYPE_CHECKING:
    from .world import World

logger = logging.getLogger(__name__)


def collides(player: Player, obstacle: Obstacle) -> bool:
    """True if the player overlaps the obstacle's columns outside the gap."""
    in_x = player.x < obstacle.right and player.right > obstacle.x
    hit_top = player.y < obstacle.top
    hit_bottom = player.bottom > obstacle.bottom
    return in_x and (hit_top or hit_bottom)


class PhysicsCore:
    """
    Deterministic simulation step over a World.
    Randomness comes only from the world's own RNG.
    """

    def apply_gravity_and_movement(self, player: Player, dt: float):
        """Semi-implicit Euler: velocity first, then position."""
        player.velocity += player.gravity * dt
        player.y += player.velocity * dt

    def flap(self, world: "World"):
        """Applies the jump impulse once per press."""
        if world.jump_pending and not world.jump_applied:
            world.player.velocity = world.player.jump
            world.jump_applied = True

    def spawn_obstacle(self, world: "World") -> Obstacle:
        """Adds a new obstacle at the right edge of the viewport."""
        viewport = world.viewport
        min_top = viewport.height * MIN_TOP_FRAC
        max_top = viewport.height * MAX_TOP_FRAC

        top = world.rng.random() * (max_top - min_top) + min_top
        obstacle = Obstacle(
            x=float(viewport.width),
            width=viewport.scale(OBSTACLE_WIDTH),
            top=top,
            bottom=top + gap_size(viewport.height, world.score),
        )
        world.obstacles.append(obstacle)
        logger.debug("Spawned obstacle top=%.1f gap=%.1f at difficulty %.2f",
                     obstacle.top, obstacle.gap, difficulty(world.score))
        return obstacle

    def should_spawn(self, world: "World") -> bool:
        if not world.obstacles:
            return True
        return world.obstacles[-1].x < spawn_threshold(world.viewport.width, world.score)

    def step_obstacles(self, world: "World", dt: float):
        """Moves every obstacle left and drops the ones fully off-screen."""
        base_speed = world.viewport.scale(OBSTACLE_SPEED)
        delta_x = obstacle_speed(base_speed, world.score) * dt

        for obstacle in world.obstacles:
            obstacle.x -= delta_x

        world.obstacles = [o for o in world.obstacles if o.right > 0]

    def check_collision(self, player: Player, obstacles: List[Obstacle]) -> bool:
        return any(collides(player, obstacle) for obstacle in obstacles)

    def out_of_bounds(self, player: Player, viewport_height: float) -> bool:
        """Above the ceiling or touching below the floor."""
        return player.y < 0 or player.bottom > viewport_height

    def update_score(self, world: "World"):
        player = world.player
        for obstacle in world.obstacles:
            if not obstacle.scored and obstacle.right < player.x:
                obstacle.scored = True
                world.score += 1

    def step(self, world: "World", dt: float):
        """
        Advances the world by dt seconds.
        No-op unless the run is in progress or no time has passed.
        """
        if world.lifecycle is not Lifecycle.RUNNING or dt == 0:
            return

        player = world.player

        # 1. Gravity and movement
        self.apply_gravity_and_movement(player, dt)

        # 2. Animation band
        player.frame_index = animation_frame(player.velocity)

        # 3. Jump input
        self.flap(world)

        # 4. Spawn
        if self.should_spawn(world):
            self.spawn_obstacle(world)

        # 5. Move and retire obstacles
        self.step_obstacles(world, dt)

        # 6. Obstacle collision
        if self.check_collision(player, world.obstacles):
            world.game_over("obstacle")

        # 7. Ceiling / floor
        elif self.out_of_bounds(player, world.viewport.height):
            world.game_over("bounds")

        # 8. Score
        self.update_score(world)


_core = PhysicsCore()


def advance(world: "World", dt: float):
    """Advances the world by dt seconds using the shared physics core."""
    _core.step(world, dt)
