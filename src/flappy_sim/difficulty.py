"""
difficulty.py: Score-driven difficulty curve.

Everything here is a pure function of the score, so the step can call it
as often as it likes.
"""

from .constants import DIFFICULTY_PER_POINT, GAP_FRAC, SPAWN_DISTANCE_FRAC


def difficulty(score: int) -> float:
    """Difficulty level: 1.0 at score 0, +0.05 per point."""
    return 1 + score * DIFFICULTY_PER_POINT


def gap_size(viewport_height: float, score: int) -> float:
    """Gap between top and bottom pipe; shrinks as difficulty rises."""
    return viewport_height * GAP_FRAC / difficulty(score)


def obstacle_speed(base_speed: float, score: int) -> float:
    return base_speed * difficulty(score)


def spawn_threshold(viewport_width: float, score: int) -> float:
    """A new obstacle spawns once the newest one is left of this x."""
    return viewport_width * (SPAWN_DISTANCE_FRAC / difficulty(score))
