"""MoveAction — applies the analog stick and jump button to the player."""

from __future__ import annotations

from typing import TYPE_CHECKING

from timejump.core.enums import Direction

if TYPE_CHECKING:
    from timejump.actions.base import InputIntent
    from timejump.config import EngineConfig
    from timejump.core.world_state import WorldState


class MoveAction:
    """Stateless handler for horizontal movement and jumping."""

    @staticmethod
    def apply_axis(world: WorldState, intent: InputIntent, config: EngineConfig) -> None:
        player = world.player
        axis = intent.move_axis
        if abs(axis) > config.stick_dead_zone:
            player.velocity.x = axis * config.move_scale
            # Facing is locked while an attack animation plays
            if not player.animating:
                player.direction = Direction.RIGHT if axis > 0 else Direction.LEFT
        else:
            player.velocity.x = 0.0

    @staticmethod
    def can_jump(world: WorldState) -> bool:
        return world.player.velocity.y == 0

    @staticmethod
    def jump(world: WorldState, config: EngineConfig) -> bool:
        """Launch the player upward; rejected while airborne."""
        if not MoveAction.can_jump(world):
            return False
        world.player.velocity.y = config.jump_velocity
        world.player.acceleration.y = 0.0
        return True
