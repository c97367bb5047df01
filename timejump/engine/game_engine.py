"""GameEngine — the authoritative tick orchestrator.

Tick order:
  1. Hazard cooldown decay
  2. Input application — axis, jump, attack/thrust, block
  3. Player state machine + integration, boss music trigger
  4. Enemy AI + integration
  5. Tile collisions — player (spike contact), then enemies
  6. Enemy attacks on the player
  7. Pickups
  8. Terminal checks — game over, level advance / game won

The engine is the only writer of WorldState. Everything the audio and
presentation layers need comes out as Notifications or Snapshots.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import TYPE_CHECKING, Sequence

from timejump.actions.base import IDLE
from timejump.actions.combat import CombatResolver
from timejump.actions.move import MoveAction
from timejump.actions.pickup import PickupResolver
from timejump.ai.enemies import EnemyBrain
from timejump.ai.player_states import PlayerStateMachine
from timejump.config import EngineConfig
from timejump.core.enums import AnimationMode, GamePhase, MusicTrack, SoundEffect
from timejump.core.levels import LEVELS, next_level_index
from timejump.core.snapshot import Snapshot
from timejump.systems.collision import CollisionResolver
from timejump.systems.kinematics import decay_cooldown
from timejump.systems.level_loader import load_level
from timejump.utils import event_log as notify

if TYPE_CHECKING:
    from timejump.actions.base import InputIntent
    from timejump.core.world_state import WorldState
    from timejump.utils.event_log import Notification

logger = logging.getLogger(__name__)


class GameEngine:
    """Owns one WorldState and advances it tick by tick.

    Top-level states: RUNNING, PAUSED, GAME_OVER, GAME_WON. Ticks outside
    RUNNING are no-ops. Notifications raised outside a tick (level loads)
    are held and delivered with the next tick's output.
    """

    __slots__ = (
        "_config",
        "_levels",
        "_world",
        "_phase",
        "_tick",
        "_music",
        "_boss_music",
        "_last_update",
        "_pending",
        "_states",
        "_brain",
        "_collision",
        "_combat",
        "_pickups",
    )

    def __init__(
        self,
        config: EngineConfig | None = None,
        level_index: int = 0,
        levels: Sequence[str] = LEVELS,
    ) -> None:
        self._config = config or EngineConfig()
        self._levels = tuple(levels)
        self._states = PlayerStateMachine(self._config)
        self._brain = EnemyBrain(self._config)
        self._collision = CollisionResolver(self._config)
        self._combat = CombatResolver(self._config)
        self._pickups = PickupResolver()

        self._tick = 0
        self._pending: list[Notification] = []
        self._phase = GamePhase.RUNNING
        self._music: MusicTrack | None = None
        self._boss_music = False
        self._last_update: float | None = None
        self._world: WorldState
        self.load_level_index(level_index)

    # -- public properties --

    @property
    def config(self) -> EngineConfig:
        return self._config

    @property
    def world(self) -> WorldState:
        return self._world

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def tick_count(self) -> int:
        return self._tick

    @property
    def music(self) -> MusicTrack | None:
        return self._music

    @property
    def level_count(self) -> int:
        return len(self._levels)

    # -- lifecycle --

    def load_level_index(self, index: int) -> None:
        """Discard the current world and load built-in level *index*."""
        if not 0 <= index < len(self._levels):
            raise IndexError(f"level index {index} out of range (0..{len(self._levels) - 1})")
        self._world = load_level(self._levels[index], self._config, index)
        self._phase = GamePhase.RUNNING
        self._boss_music = False
        self._last_update = None
        self._pending.append(self._set_music(MusicTrack.WORLD1, looping=True))

    def restart(self) -> None:
        """Reload the current level from scratch."""
        logger.info("Restarting level %d", self._world.level_index)
        self.load_level_index(self._world.level_index)

    def toggle_pause(self) -> GamePhase:
        if self._phase == GamePhase.RUNNING:
            self._phase = GamePhase.PAUSED
        elif self._phase == GamePhase.PAUSED:
            self._phase = GamePhase.RUNNING
            # Time spent paused is not simulated
            self._last_update = None
        logger.info("Phase is now %s", self._phase.name)
        return self._phase

    def create_snapshot(self) -> Snapshot:
        return Snapshot.from_world(self._world, tick=self._tick, phase=self._phase, music=self._music)

    # -- ticking --

    def update(self, now: float, intent: InputIntent = IDLE) -> list[Notification]:
        """Advance by the wall-clock time elapsed since the previous call."""
        if self._last_update is None:
            self._last_update = now
            return []
        dt = max(0.0, now - self._last_update)
        self._last_update = now
        return self.tick(dt, intent)

    def tick(self, dt: float, intent: InputIntent = IDLE) -> list[Notification]:
        """Run one full tick of *dt* seconds. Returns the notifications raised."""
        notes = self._pending
        self._pending = []
        if self._phase != GamePhase.RUNNING:
            return self._stamp(notes)

        self._tick += 1
        world = self._world

        world.spike_cooldown = decay_cooldown(world.spike_cooldown, dt)

        notes.extend(self._apply_input(world, intent.clamped()))

        self._states.update(world, dt)
        self._check_boss_music(world, notes)
        if not world.player.animating:
            world.is_attacking = False

        for enemy in world.enemies:
            notes.extend(self._brain.update(enemy, world, dt))

        report = self._collision.resolve(world.player, world.grid)
        if report.spike_contact:
            self._combat.spike_damage(world)
        # Spikes under enemies only ground them
        for enemy in world.enemies:
            self._collision.resolve(enemy, world.grid)

        self._combat.enemy_attacks(world)
        self._combat.remove_dead(world)

        notes.extend(self._pickups.resolve(world))

        if world.player.health <= 0:
            notes.extend(self._game_over())
        elif world.exit_reached:
            notes.extend(self._advance_level())

        return self._stamp(notes)

    # -- internals --

    def _apply_input(self, world: WorldState, intent: InputIntent) -> list[Notification]:
        cfg = self._config
        notes: list[Notification] = []

        MoveAction.apply_axis(world, intent, cfg)
        if intent.jump_pressed:
            MoveAction.jump(world, cfg)

        if intent.attack_pressed:
            self._begin_attack(world, AnimationMode.ATTACK, SoundEffect.SWORD, notes)
        elif intent.thrust_pressed:
            self._begin_attack(world, AnimationMode.THRUST, SoundEffect.THRUST, notes)

        if intent.block_held:
            self._states.try_block(world)
        else:
            self._states.release_block(world)
        return notes

    def _begin_attack(
        self,
        world: WorldState,
        mode: AnimationMode,
        sound: SoundEffect,
        notes: list[Notification],
    ) -> None:
        if not self._states.begin(world, mode):
            return
        notes.append(notify.play_sound(sound))
        self._combat.player_strike(world, mode)

    def _check_boss_music(self, world: WorldState, notes: list[Notification]) -> None:
        trigger = world.boss_trigger_x
        if self._boss_music or trigger is None:
            return
        if world.player.position.x >= trigger:
            self._boss_music = True
            notes.append(self._set_music(MusicTrack.BOSS1, looping=True))
            logger.info("Boss music triggered at x=%.2f", world.player.position.x)

    def _set_music(self, track: MusicTrack, looping: bool) -> Notification:
        self._music = track
        return notify.set_music(track, looping=looping)

    def _game_over(self) -> list[Notification]:
        self._phase = GamePhase.GAME_OVER
        logger.info("Game over on level %d at tick %d", self._world.level_index, self._tick)
        return [self._set_music(MusicTrack.GAMEOVER, looping=False), notify.game_over()]

    def _advance_level(self) -> list[Notification]:
        current = self._world.level_index
        nxt = next_level_index(current, self._levels)
        if nxt is None:
            self._phase = GamePhase.GAME_WON
            logger.info("All %d levels cleared at tick %d", len(self._levels), self._tick)
            return [self._set_music(MusicTrack.OUTRO, looping=True), notify.game_won()]

        logger.info("Level %d complete, advancing to %d", current, nxt)
        notes = [notify.level_complete(current)]
        self.load_level_index(nxt)
        notes.extend(self._pending)
        self._pending = []
        return notes

    def _stamp(self, notes: list[Notification]) -> list[Notification]:
        return [replace(n, tick=self._tick) for n in notes]
