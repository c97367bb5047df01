"""Simulation subsystems: level loading, kinematics, collision, state digests."""

from timejump.systems.collision import CollisionReport, CollisionResolver
from timejump.systems.digest import state_digest
from timejump.systems.kinematics import decay_cooldown, integrate
from timejump.systems.level_loader import load_level

__all__ = [
    "CollisionReport",
    "CollisionResolver",
    "decay_cooldown",
    "integrate",
    "load_level",
    "state_digest",
]
