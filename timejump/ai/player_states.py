"""Player animation / command state machine.

State machine:
  NONE → ATTACK → NONE   (0.5 s, three frames)
  NONE → THRUST → NONE   (1.0 s, lunge driven by ``thrust_offset``)

Entry requires the NONE state, a sword, and no attack in progress.
Blocking is a separate flag with its own guards.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from timejump.core.enums import AnimationMode, Frame
from timejump.core.roster import HERO, HERO_THRUST_FRAMES, HERO_UNARMED_FRAMES
from timejump.systems.kinematics import integrate

if TYPE_CHECKING:
    from timejump.config import EngineConfig
    from timejump.core.models import Player
    from timejump.core.world_state import WorldState

logger = logging.getLogger(__name__)


def thrust_offset(t: float) -> float:
    """Horizontal lunge offset after *t* seconds of a thrust."""
    if t <= 0:
        return 0.0
    if t >= 1:
        return 1.0
    return (5 * t * t - 2 * t) / 3


def _cycle(frames: tuple[Frame, ...], elapsed: float, period: float) -> Frame:
    return frames[int(elapsed / period) % len(frames)]


class PlayerStateMachine:
    """Drives the hero's attack/thrust animations and walk frames."""

    __slots__ = ("_config",)

    def __init__(self, config: EngineConfig) -> None:
        self._config = config

    # -- transitions --

    @staticmethod
    def can_begin(world: WorldState) -> bool:
        return (
            world.has_sword
            and not world.is_attacking
            and world.player.animation == AnimationMode.NONE
        )

    def begin(self, world: WorldState, mode: AnimationMode) -> bool:
        """Enter ATTACK or THRUST. Returns False if the entry is rejected."""
        if mode == AnimationMode.NONE or not self.can_begin(world):
            return False
        player = world.player
        world.is_attacking = True
        player.velocity.x = 0.0
        player.acceleration.x = 0.0
        player.animation = mode
        player.animation_start_time = player.timing
        player.animation_start_position = player.position.copy()
        logger.debug("Player begins %s at %s", mode.name, player.position)
        return True

    @staticmethod
    def try_block(world: WorldState) -> bool:
        """Raise the shield; rejected while blocking, attacking or airborne."""
        if world.is_blocking or world.is_attacking:
            return False
        if world.player.velocity.y != 0:
            return False
        world.is_blocking = True
        world.player.frame = Frame.HERO_BLOCKING
        return True

    @staticmethod
    def release_block(world: WorldState) -> None:
        world.is_blocking = False

    # -- per tick --

    def update(self, world: WorldState, dt: float) -> None:
        player = world.player
        player.timing += dt

        if player.animating:
            self._animate(player)

        integrate(player, dt)

        if player.animation == AnimationMode.NONE:
            player.frame = self._idle_frame(world)

    def _animate(self, player: Player) -> None:
        cfg = self._config
        elapsed = player.timing - player.animation_start_time
        player.acceleration.x = 0.0
        player.velocity.x = 0.0

        if player.animation == AnimationMode.ATTACK:
            duration = cfg.attack_duration
            if elapsed < duration:
                frames = HERO.attack_frames
                player.frame = _cycle(frames, elapsed, duration / len(frames))
            else:
                self._finish(player)

        elif player.animation == AnimationMode.THRUST:
            duration = cfg.thrust_duration
            if elapsed < duration:
                offset = thrust_offset(elapsed)
                player.position.x = player.animation_start_position.x + offset
                # Reset every tick, so the integrator never accumulates it
                player.velocity.x = -offset
                player.frame = _cycle(HERO_THRUST_FRAMES, elapsed, duration / len(HERO_THRUST_FRAMES))
            else:
                self._finish(player)

    @staticmethod
    def _finish(player: Player) -> None:
        player.animation = AnimationMode.NONE
        player.animation_start_time = None
        player.animation_start_position = None

    def _idle_frame(self, world: WorldState) -> Frame:
        if world.is_blocking:
            return Frame.HERO_BLOCKING
        player = world.player
        frames = HERO.walk_frames if world.has_sword else HERO_UNARMED_FRAMES
        if player.velocity.x != 0:
            return _cycle(frames, player.timing, self._config.frame_rate)
        return frames[0]
