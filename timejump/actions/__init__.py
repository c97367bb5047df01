"""Action system: input intents, movement, combat and pickups."""

from timejump.actions.base import IDLE, CommandType, EngineCommand, InputIntent
from timejump.actions.move import MoveAction
from timejump.actions.combat import CombatResolver
from timejump.actions.pickup import PickupResolver

__all__ = [
    "IDLE",
    "CombatResolver",
    "CommandType",
    "EngineCommand",
    "InputIntent",
    "MoveAction",
    "PickupResolver",
]
