"""CombatResolver — attack-box overlap tests and damage application.

Two directions:
  - Player → enemies: only at the moment an attack or thrust begins.
  - Enemies → player: every tick, gated by each enemy's cooldown.

Enemies whose health drops to zero are compacted out of the world after
the pass that killed them, never during the scan. A dead boss hands the
player the key.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from timejump.core.enums import AnimationMode, CharacterKind, Direction
from timejump.core.models import Rect

if TYPE_CHECKING:
    from timejump.config import EngineConfig
    from timejump.core.models import Actor
    from timejump.core.world_state import WorldState

logger = logging.getLogger(__name__)


def thrust_box(box: Rect, direction: Direction) -> Rect:
    """Widen a world-space attack box by one tile in the facing direction."""
    x = box.x - 1.0 if direction == Direction.LEFT else box.x
    return Rect(x, box.y, box.width + 1.0, box.height)


def threat_range(player_box: Rect) -> Rect:
    """The player's box widened to twice its width, same centre."""
    return Rect(
        player_box.x - player_box.width / 2,
        player_box.y,
        player_box.width * 2,
        player_box.height,
    )


class CombatResolver:
    """Stateless combat rules bound to a config."""

    __slots__ = ("_config",)

    def __init__(self, config: EngineConfig) -> None:
        self._config = config

    # -- player → enemies --

    def player_strike(self, world: WorldState, mode: AnimationMode) -> list[Actor]:
        """Resolve the immediate hit of a new attack. Returns the enemies killed."""
        player = world.player
        box = player.strike_box()
        amount = player.attack_strength
        if mode == AnimationMode.THRUST:
            box = thrust_box(box, player.direction)
            amount *= self._config.thrust_multiplier

        for enemy in world.enemies:
            if box.intersects(enemy.hitbox()):
                self.damage_enemy(enemy, amount)
        return self.remove_dead(world)

    @staticmethod
    def damage_enemy(enemy: Actor, amount: float) -> None:
        enemy.health -= amount
        logger.debug("%s takes %.1f damage (health %.1f)", enemy.kind.name, amount, enemy.health)

    @staticmethod
    def remove_dead(world: WorldState) -> list[Actor]:
        dead = world.compact_enemies()
        for enemy in dead:
            logger.info("%s defeated at %s", enemy.kind.name, enemy.position)
            if enemy.kind == CharacterKind.BOSS:
                world.has_key = True
                logger.info("Boss defeated, key granted")
        return dead

    # -- enemies → player --

    def enemy_attacks(self, world: WorldState) -> int:
        """Let every ready enemy in range swing at the player. Returns hits landed."""
        player_box = world.player.hitbox()
        in_range = threat_range(player_box)
        hits = 0
        for enemy in world.enemies:
            strike = enemy.strike_box()
            if not strike.intersects(in_range):
                continue
            if enemy.attack_cooldown is not None:
                continue
            enemy.attack_cooldown = self._config.enemy_attack_cooldown
            if strike.intersects(player_box):
                amount = enemy.attack_strength
                if world.is_blocking:
                    amount /= self._config.block_divisor
                self.damage_player(world, amount)
                hits += 1
        return hits

    # -- player damage --

    @staticmethod
    def damage_player(world: WorldState, amount: float) -> float:
        """Subtract *amount* from player health, floored at zero."""
        player = world.player
        player.health = max(0.0, player.health - amount)
        logger.debug("Player takes %.1f damage (health %.1f)", amount, player.health)
        return player.health

    def spike_damage(self, world: WorldState) -> bool:
        """Hurt the player for touching spikes, at most once per cooldown."""
        if world.spike_cooldown is not None:
            return False
        self.damage_player(world, self._config.spike_damage)
        world.spike_cooldown = self._config.spike_cooldown
        return True
