"""
data_models.py: Data structures for the game state.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from .constants import ANIMATION_BANDS, BASE_HEIGHT, FRAME_DIVE


class Lifecycle(Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    GAME_OVER = "game_over"


@dataclass
class Viewport:
    """Current drawable area. Owned by the renderer, read by the core every step."""
    width: float
    height: float

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Viewport must be positive, got {self.width}x{self.height}")

    def resize(self, width: float, height: float):
        if width <= 0 or height <= 0:
            raise ValueError(f"Viewport must be positive, got {width}x{height}")
        self.width = width
        self.height = height

    def scale(self, value: float) -> float:
        """Converts a reference-screen quantity to the current viewport."""
        return value * (self.height / BASE_HEIGHT)


def animation_frame(velocity: float) -> int:
    """Sprite frame for a vertical velocity: 0 flapping up, 1 level, 2 diving."""
    for upper, frame in ANIMATION_BANDS:
        if velocity < upper:
            return frame
    return FRAME_DIVE


@dataclass
class Player:
    """The player sprite. Mutated only by the simulation step."""
    x: float
    y: float
    width: float
    height: float
    gravity: float
    jump: float
    velocity: float = 0.0
    frame_index: int = 1

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def right(self) -> float:
        return self.x + self.width


@dataclass
class Obstacle:
    """A pipe pair; the player must pass between top and bottom."""
    x: float
    width: float
    top: float
    bottom: float
    scored: bool = False

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def gap(self) -> float:
        return self.bottom - self.top


# ----------------- Read-only views for the renderer -----------------

@dataclass(frozen=True)
class PlayerView:
    x: float
    y: float
    width: float
    height: float
    velocity: float
    frame_index: int


@dataclass(frozen=True)
class ObstacleView:
    x: float
    width: float
    top: float
    bottom: float
    scored: bool


@dataclass(frozen=True)
class WorldSnapshot:
    """Everything the renderer needs for one frame."""
    player: PlayerView
    obstacles: Tuple[ObstacleView, ...]
    score: int
    lifecycle: Lifecycle
    width: float
    height: float

    @property
    def game_over(self) -> bool:
        return self.lifecycle is Lifecycle.GAME_OVER
