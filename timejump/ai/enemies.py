"""Enemy behaviour handlers — one class per archetype, dispatched by kind.

Architecture:
  - EnemyContext bundles what a handler needs (actor, world, config, dt).
  - Each handler implements ``handle`` and returns the notifications it
    raised (e.g. the archer's shot sound).
  - Handlers are registered in ENEMY_HANDLERS by CharacterKind; a new
    archetype is one class plus one dict entry.

Behaviour:
  GOBLIN  pursue the player on the same row within range at goblin_speed
  BOSS    same pursuit rule, goblin_speed scaled by boss_speed_multiplier
  ARCHER  stationary; "fires" on a cooldown while the player is in radius
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

from timejump.core.enums import CharacterKind, SoundEffect
from timejump.core.roster import ROSTER
from timejump.systems.kinematics import integrate
from timejump.utils.event_log import Notification, play_sound

if TYPE_CHECKING:
    from timejump.config import EngineConfig
    from timejump.core.models import Actor
    from timejump.core.world_state import WorldState

logger = logging.getLogger(__name__)

# Resting heights are computed per box, so "same row" allows rounding noise
ROW_TOLERANCE = 1e-6


@dataclass(slots=True)
class EnemyContext:
    """All data an enemy handler might need."""

    actor: Actor
    world: WorldState
    config: EngineConfig
    dt: float

    def same_row_as_player(self) -> bool:
        return abs(self.world.player.position.y - self.actor.position.y) < ROW_TOLERANCE

    def touching_player(self) -> bool:
        return self.actor.hitbox().intersects(self.world.player.hitbox())


def select_frame(actor: Actor, frame_rate: float) -> None:
    """Attack frames while on cooldown, walk cycle while moving, else idle."""
    tpl = ROSTER[actor.kind]
    if actor.attack_cooldown is not None and tpl.attack_frames:
        frames = tpl.attack_frames
    elif actor.velocity.x != 0:
        frames = tpl.walk_frames
    else:
        actor.frame = tpl.walk_frames[0]
        return
    actor.frame = frames[int(actor.timing / frame_rate) % len(frames)]


class EnemyHandler(ABC):
    """Base class for per-archetype behaviour."""

    @abstractmethod
    def handle(self, ctx: EnemyContext) -> list[Notification]:
        """Advance one enemy by one tick."""


class PursuitHandler(EnemyHandler):
    """Walk toward a nearby player on the same row; halt otherwise."""

    def __init__(self, multiplier_attr: str | None = None) -> None:
        self._multiplier_attr = multiplier_attr

    def speed(self, config: EngineConfig) -> float:
        if self._multiplier_attr is None:
            return config.goblin_speed
        return config.goblin_speed * getattr(config, self._multiplier_attr)

    def handle(self, ctx: EnemyContext) -> list[Notification]:
        actor = ctx.actor
        actor.timing += ctx.dt
        dx = ctx.world.player.position.x - actor.position.x

        if (
            dx != 0
            and ctx.same_row_as_player()
            and abs(dx) < ctx.config.pursuit_range
            and not ctx.touching_player()
        ):
            speed = self.speed(ctx.config)
            actor.velocity.x = speed if dx > 0 else -speed
        else:
            actor.velocity.x = 0.0

        integrate(actor, ctx.dt)
        select_frame(actor, ctx.config.frame_rate)
        return []


class ArcherHandler(EnemyHandler):
    """Stand still and loose an arrow whenever ready and the player is near.

    No projectile is simulated; the shot is a sound cue plus the cooldown
    that gates the archer's generic attack-box check.
    """

    def handle(self, ctx: EnemyContext) -> list[Notification]:
        actor = ctx.actor
        actor.timing += ctx.dt
        integrate(actor, ctx.dt)

        notes: list[Notification] = []
        player = ctx.world.player
        if actor.attack_cooldown is None:
            if player.position.distance(actor.position) < ctx.config.archer_radius:
                actor.attack_cooldown = ctx.config.archer_cooldown
                notes.append(play_sound(SoundEffect.ARROW_ATTACK))
                logger.debug("Archer at %s fires", actor.position)
        select_frame(actor, ctx.config.frame_rate)
        return notes


ENEMY_HANDLERS: dict[CharacterKind, EnemyHandler] = {
    CharacterKind.GOBLIN: PursuitHandler(),
    CharacterKind.BOSS: PursuitHandler("boss_speed_multiplier"),
    CharacterKind.ARCHER: ArcherHandler(),
}


class EnemyBrain:
    """Dispatches each enemy to the handler for its kind."""

    __slots__ = ("_config",)

    def __init__(self, config: EngineConfig) -> None:
        self._config = config

    def update(self, actor: Actor, world: WorldState, dt: float) -> list[Notification]:
        handler = ENEMY_HANDLERS.get(actor.kind)
        if handler is None:
            # Unknown kinds still obey physics
            integrate(actor, dt)
            return []
        return handler.handle(EnemyContext(actor=actor, world=world, config=self._config, dt=dt))
