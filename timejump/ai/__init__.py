"""Behaviour: the player's animation state machine and per-kind enemy handlers."""

from timejump.ai.enemies import ENEMY_HANDLERS, EnemyBrain
from timejump.ai.player_states import PlayerStateMachine, thrust_offset

__all__ = ["ENEMY_HANDLERS", "EnemyBrain", "PlayerStateMachine", "thrust_offset"]
