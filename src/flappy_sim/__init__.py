"""
Flappy-style arcade game: simulation core plus a pygame client.

The core (world, physics_core, difficulty) has no pygame dependency.
"""

from .data_models import Lifecycle, Obstacle, Player, Viewport, WorldSnapshot, animation_frame
from .difficulty import difficulty
from .physics_core import PhysicsCore, advance, collides
from .world import World

__all__ = [
    "Lifecycle", "Obstacle", "Player", "Viewport", "WorldSnapshot", "animation_frame",
    "difficulty", "PhysicsCore", "advance", "collides", "World",
]
