"""Tile grid of a loaded level."""

from __future__ import annotations

from typing import Iterable, Sequence

from timejump.core.enums import GROUND_LIKE, Tile


class TileGrid:
    """Immutable 2D tile grid backed by a flat tuple.

    Indexed by integer (row, col); row 0 is the top of the level. Lookups
    outside the grid return ``Tile.EMPTY`` so collision scans treat them as
    open space.
    """

    __slots__ = ("width", "height", "_tiles")

    def __init__(self, width: int, height: int, tiles: Iterable[Tile] | None = None) -> None:
        self.width = width
        self.height = height
        if tiles is None:
            self._tiles: tuple[Tile, ...] = (Tile.EMPTY,) * (width * height)
        else:
            self._tiles = tuple(tiles)
            if len(self._tiles) != width * height:
                raise ValueError(f"expected {width * height} tiles, got {len(self._tiles)}")

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Tile]]) -> TileGrid:
        """Build a grid from ragged rows, padding short rows with EMPTY."""
        width = max((len(r) for r in rows), default=0)
        flat: list[Tile] = []
        for r in rows:
            flat.extend(r)
            flat.extend([Tile.EMPTY] * (width - len(r)))
        return cls(width, len(rows), flat)

    # -- access --

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def get(self, row: int, col: int) -> Tile:
        if self.in_bounds(row, col):
            return self._tiles[row * self.width + col]
        return Tile.EMPTY

    def is_ground_like(self, row: int, col: int) -> bool:
        return self.get(row, col) in GROUND_LIKE

    def is_ground(self, row: int, col: int) -> bool:
        return self.get(row, col) == Tile.GROUND

    def row(self, row: int) -> tuple[Tile, ...]:
        if not self.in_bounds(row, 0):
            return ()
        start = row * self.width
        return self._tiles[start:start + self.width]

    def rows(self) -> list[tuple[Tile, ...]]:
        return [self.row(r) for r in range(self.height)]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TileGrid):
            return NotImplemented
        return (self.width, self.height, self._tiles) == (other.width, other.height, other._tiles)

    def __hash__(self) -> int:
        return hash((self.width, self.height, self._tiles))

    def __repr__(self) -> str:
        return f"TileGrid({self.width}x{self.height})"
