"""Immutable snapshot of the world state for presentation threads."""

from __future__ import annotations

from dataclasses import dataclass

from timejump.core.enums import GamePhase, MusicTrack
from timejump.core.grid import TileGrid
from timejump.core.models import Actor, Item, Player
from timejump.core.world_state import WorldState


@dataclass(frozen=True, slots=True)
class Snapshot:
    """Read-only view of the world, safe to share across threads.

    Actors and items are copies; the grid is shared because it never
    changes after a level is loaded.
    """

    tick: int
    level_index: int
    phase: GamePhase
    music: MusicTrack | None
    grid: TileGrid
    player: Player
    enemies: tuple[Actor, ...]
    items: tuple[Item, ...]
    health: float
    has_key: bool
    has_sword: bool
    is_blocking: bool

    @classmethod
    def from_world(
        cls,
        world: WorldState,
        tick: int = 0,
        phase: GamePhase = GamePhase.RUNNING,
        music: MusicTrack | None = None,
    ) -> Snapshot:
        return cls(
            tick=tick,
            level_index=world.level_index,
            phase=phase,
            music=music,
            grid=world.grid,
            player=world.player.copy(),
            enemies=tuple(e.copy() for e in world.enemies),
            items=tuple(i.copy() for i in world.items),
            health=world.player.health,
            has_key=world.has_key,
            has_sword=world.has_sword,
            is_blocking=world.is_blocking,
        )

    @property
    def paused(self) -> bool:
        return self.phase == GamePhase.PAUSED

    @property
    def game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def game_won(self) -> bool:
        return self.phase == GamePhase.GAME_WON
