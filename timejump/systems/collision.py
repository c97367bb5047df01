"""Tile-grid collision resolution.

Three passes per actor, in order: ground, ceiling, wall. Each pass
recomputes the world-space box from the actor's current position, so later
passes see the corrections made by earlier ones.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from timejump.core.enums import SPIKES

if TYPE_CHECKING:
    from timejump.config import EngineConfig
    from timejump.core.grid import TileGrid
    from timejump.core.models import Actor, Rect

logger = logging.getLogger(__name__)

# A box edge lying exactly on a cell boundary belongs to the cell before it
EDGE_EPSILON = 1.0001


@dataclass(frozen=True, slots=True)
class CellSpan:
    """Grid cells covered by a world-space box (inclusive bounds)."""

    min_col: int
    max_col: int
    min_row: int
    max_row: int

    @classmethod
    def of(cls, rect: Rect) -> CellSpan:
        return cls(
            min_col=math.floor(rect.min_x),
            max_col=math.ceil(rect.max_x - EDGE_EPSILON),
            min_row=math.floor(rect.min_y),
            max_row=math.ceil(rect.max_y - EDGE_EPSILON),
        )


@dataclass(slots=True)
class CollisionReport:
    """What one actor touched during a resolution."""

    ground: tuple[int, int] | None = None   # (row, col) of the supporting tile
    ceiling: tuple[int, int] | None = None
    wall: tuple[int, int] | None = None
    spike_contact: bool = False

    @property
    def grounded(self) -> bool:
        return self.ground is not None


class CollisionResolver:
    """Resolves actors against an immutable tile grid.

    Out-of-range cells read as empty, so leaving the grid never raises.
    """

    __slots__ = ("_config",)

    def __init__(self, config: EngineConfig) -> None:
        self._config = config

    def resolve(self, actor: Actor, grid: TileGrid) -> CollisionReport:
        report = CollisionReport()
        self._ground_pass(actor, grid, report)
        self._ceiling_pass(actor, grid, report)
        self._wall_pass(actor, grid, report)
        return report

    # -- passes --

    def _ground_pass(self, actor: Actor, grid: TileGrid, report: CollisionReport) -> None:
        span = CellSpan.of(actor.hitbox())
        row = span.max_row
        hit: tuple[int, int] | None = None
        # Right to left; the last (leftmost) hit stands
        for col in range(span.max_col, span.min_col - 1, -1):
            if grid.is_ground_like(row, col):
                hit = (row, col)
                if grid.get(row, col) in SPIKES:
                    report.spike_contact = True

        if hit is not None:
            actor.velocity.y = 0.0
            actor.acceleration.x = 0.0
            actor.acceleration.y = 0.0
            actor.position.y = hit[0] - actor.bounding_box.max_y
            report.ground = hit
        else:
            actor.acceleration.y = self._config.gravity

    def _ceiling_pass(self, actor: Actor, grid: TileGrid, report: CollisionReport) -> None:
        span = CellSpan.of(actor.hitbox())
        row = span.min_row
        for col in range(span.min_col, span.max_col + 1):
            if grid.is_ground(row, col):
                actor.velocity.y = 0.0
                actor.position.y = float(math.ceil(actor.position.y))
                actor.acceleration.y = self._config.gravity
                report.ceiling = (row, col)
                return

    def _wall_pass(self, actor: Actor, grid: TileGrid, report: CollisionReport) -> None:
        vx = actor.velocity.x
        if vx == 0:
            return
        span = CellSpan.of(actor.hitbox())
        col = span.min_col if vx < 0 else span.max_col
        for row in range(span.min_row, span.max_row + 1):
            if grid.is_ground(row, col):
                actor.velocity.x = 0.0
                if vx < 0:
                    actor.position.x = float(math.ceil(actor.position.x))
                else:
                    actor.position.x = float(math.floor(actor.position.x))
                report.wall = (row, col)
                logger.debug("%s hit wall at %s", actor.kind.name, report.wall)
                return
