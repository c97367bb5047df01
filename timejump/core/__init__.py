"""Core data models and world representation."""

from timejump.core.enums import CharacterKind, Direction, GamePhase, PieceKind, Tile
from timejump.core.models import Actor, Item, Player, Rect, Vector2
from timejump.core.grid import TileGrid
from timejump.core.world_state import WorldState
from timejump.core.snapshot import Snapshot

__all__ = [
    "Actor",
    "CharacterKind",
    "Direction",
    "GamePhase",
    "Item",
    "PieceKind",
    "Player",
    "Rect",
    "Snapshot",
    "Tile",
    "TileGrid",
    "Vector2",
    "WorldState",
]
