"""Level loader — parses a textual tile map into a fresh WorldState.

One character per cell, ``\\n``-separated rows. Ragged rows are padded
with empty cells to the width of the longest row. Unknown characters are
logged and left empty; loading never fails on content.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from timejump.core.enums import CharacterKind, PieceKind, Tile
from timejump.core.grid import TileGrid
from timejump.core.models import Actor, Item, Vector2
from timejump.core.roster import make_item, spawn_enemy, spawn_player
from timejump.core.world_state import WorldState

if TYPE_CHECKING:
    from timejump.config import EngineConfig

logger = logging.getLogger(__name__)

TILE_MARKS: dict[str, Tile] = {
    "-": Tile.GROUND,
    "O": Tile.GROUND,
    "|": Tile.GROUND,
    "^": Tile.SPIKE,
    "v": Tile.CEILING_SPIKE,
    "F": Tile.FAKE_BLOCK,
    "I": Tile.INVISIBLE_BLOCK,
}

PIECE_MARKS: dict[str, PieceKind] = {
    "K": PieceKind.KEY,
    "W": PieceKind.SWORD,
    "E": PieceKind.EXIT_LOCKED,
}

ENEMY_MARKS: dict[str, CharacterKind] = {
    "B": CharacterKind.GOBLIN,
    "A": CharacterKind.ARCHER,
    "Z": CharacterKind.BOSS,
}

SPAWN_MARK = "P"
DEFAULT_SPAWN = (0.0, 1.0)


def split_rows(text: str) -> list[str]:
    """Split level text into rows, ignoring a single trailing newline."""
    rows = text.split("\n")
    if rows and rows[-1] == "":
        rows.pop()
    return rows


def load_level(text: str, config: EngineConfig | None = None, level_index: int = 0) -> WorldState:
    """Build a WorldState from level text. Pure apart from logging."""
    if config is None:
        from timejump.config import EngineConfig
        config = EngineConfig()

    rows = split_rows(text)
    tile_rows: list[list[Tile]] = []
    enemies: list[Actor] = []
    items: list[Item] = []
    spawn = DEFAULT_SPAWN
    has_sword = True
    has_goal = False
    boss_trigger_x: float | None = None

    for row, line in enumerate(rows):
        tiles = [Tile.EMPTY] * len(line)
        for col, mark in enumerate(line):
            if mark == " ":
                continue
            pos = Vector2(float(col), float(row))
            if mark in TILE_MARKS:
                tiles[col] = TILE_MARKS[mark]
            elif mark == SPAWN_MARK:
                items.append(make_item(PieceKind.ENTRY, pos))
                spawn = (float(col), float(row))
            elif mark in PIECE_MARKS:
                piece = PIECE_MARKS[mark]
                if piece == PieceKind.EXIT_LOCKED:
                    if has_goal:
                        logger.warning("Level %d: extra exit at (%d, %d) ignored", level_index, col, row)
                        continue
                    has_goal = True
                elif piece == PieceKind.SWORD:
                    has_sword = False
                items.append(make_item(piece, pos))
            elif mark in ENEMY_MARKS:
                kind = ENEMY_MARKS[mark]
                if kind == CharacterKind.BOSS:
                    boss_trigger_x = float(col - config.boss_trigger_offset)
                enemies.append(spawn_enemy(kind, pos))
            else:
                logger.warning("Level %d: unknown mark %r at (%d, %d)", level_index, mark, col, row)
        tile_rows.append(tiles)

    if not has_goal:
        logger.warning("Level %d has no exit", level_index)

    player = spawn_player(
        Vector2(*spawn),
        health=config.player_health,
        attack_strength=config.player_attack_strength,
    )
    world = WorldState(
        player=player,
        grid=TileGrid.from_rows(tile_rows),
        enemies=enemies,
        items=items,
        boss_trigger_x=boss_trigger_x,
        has_sword=has_sword,
        level_index=level_index,
    )
    logger.info(
        "Loaded level %d: %dx%d grid, %d enemies, %d items, sword=%s",
        level_index, world.grid.width, world.grid.height,
        len(enemies), len(items), has_sword,
    )
    return world
