"""Mutable authoritative world state — only mutated by the GameEngine."""

from __future__ import annotations

from dataclasses import replace

from timejump.core.enums import PieceKind
from timejump.core.grid import TileGrid
from timejump.core.models import Actor, Item, Player


class WorldState:
    """The single source of truth for one loaded level."""

    __slots__ = (
        "level_index",
        "player",
        "enemies",
        "items",
        "grid",
        "boss_trigger_x",
        "has_key",
        "has_sword",
        "is_attacking",
        "is_blocking",
        "spike_cooldown",
        "exit_reached",
    )

    def __init__(
        self,
        player: Player,
        grid: TileGrid,
        enemies: list[Actor] | None = None,
        items: list[Item] | None = None,
        boss_trigger_x: float | None = None,
        has_sword: bool = True,
        level_index: int = 0,
    ) -> None:
        self.level_index: int = level_index
        self.player: Player = player
        self.enemies: list[Actor] = enemies if enemies is not None else []
        self.items: list[Item] = items if items is not None else []
        self.grid: TileGrid = grid
        self.boss_trigger_x: float | None = boss_trigger_x
        self.has_key: bool = False
        self.has_sword: bool = has_sword
        self.is_attacking: bool = False
        self.is_blocking: bool = False
        self.spike_cooldown: float | None = None
        self.exit_reached: bool = False

    # -- items --

    def goal(self) -> Item | None:
        for item in self.items:
            if item.piece in (PieceKind.EXIT_LOCKED, PieceKind.EXIT_UNLOCKED):
                return item
        return None

    def unlock_goal(self) -> bool:
        """Swap every locked exit for an unlocked one in place."""
        changed = False
        for i, item in enumerate(self.items):
            if item.piece == PieceKind.EXIT_LOCKED:
                self.items[i] = replace(item, piece=PieceKind.EXIT_UNLOCKED)
                changed = True
        return changed

    # -- enemies --

    def compact_enemies(self) -> list[Actor]:
        """Drop dead enemies, keeping spawn order. Returns the removed ones."""
        dead = [e for e in self.enemies if not e.alive]
        if dead:
            self.enemies = [e for e in self.enemies if e.alive]
        return dead

    def __repr__(self) -> str:
        return (
            f"WorldState(level={self.level_index}, player={self.player.position}, "
            f"enemies={len(self.enemies)}, items={len(self.items)})"
        )
