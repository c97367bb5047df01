"""Core data models: Vector2, Rect, Actor, Player, Item."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace

from timejump.core.enums import AnimationMode, CharacterKind, Direction, Frame, PieceKind


@dataclass(slots=True)
class Vector2:
    """Mutable 2D point / vector in world units (1.0 = one tile)."""

    x: float = 0.0
    y: float = 0.0

    def distance(self, other: Vector2) -> float:
        return math.sqrt((self.x - other.x) ** 2 + (self.y - other.y) ** 2)

    def copy(self) -> Vector2:
        return Vector2(self.x, self.y)

    def __repr__(self) -> str:
        return f"({self.x:.3f}, {self.y:.3f})"


@dataclass(frozen=True, slots=True)
class Rect:
    """Axis-aligned rectangle; y grows downward, like the tile rows."""

    x: float
    y: float
    width: float
    height: float

    @property
    def min_x(self) -> float:
        return self.x

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def min_y(self) -> float:
        return self.y

    @property
    def max_y(self) -> float:
        return self.y + self.height

    def offset(self, pos: Vector2) -> Rect:
        return Rect(self.x + pos.x, self.y + pos.y, self.width, self.height)

    def intersects(self, other: Rect) -> bool:
        """True when the two rectangles share a region of positive area."""
        return (
            self.min_x < other.max_x
            and other.min_x < self.max_x
            and self.min_y < other.max_y
            and other.min_y < self.max_y
        )


@dataclass(slots=True)
class Actor:
    """A moving, attacking entity: the player or an enemy.

    Boxes are tile-relative and never flipped; ``direction`` only steers
    the thrust lunge and the sprite.
    """

    kind: CharacterKind
    position: Vector2
    bounding_box: Rect
    attack_box: Rect
    draw_rect: Rect
    health: float
    attack_strength: float
    frame: Frame
    direction: Direction = Direction.LEFT
    velocity: Vector2 = field(default_factory=Vector2)
    acceleration: Vector2 = field(default_factory=Vector2)
    attack_cooldown: float | None = None
    timing: float = 0.0

    @property
    def alive(self) -> bool:
        return self.health > 0

    def hitbox(self) -> Rect:
        """Bounding box in world space."""
        return self.bounding_box.offset(self.position)

    def strike_box(self) -> Rect:
        """Attack box in world space."""
        return self.attack_box.offset(self.position)

    def copy(self) -> Actor:
        return replace(
            self,
            position=self.position.copy(),
            velocity=self.velocity.copy(),
            acceleration=self.acceleration.copy(),
        )


@dataclass(slots=True)
class Player(Actor):
    """The hero. Health on this record is the authoritative player health."""

    animation: AnimationMode = AnimationMode.NONE
    animation_start_time: float | None = None
    animation_start_position: Vector2 | None = None

    @property
    def animating(self) -> bool:
        return self.animation != AnimationMode.NONE and self.animation_start_time is not None

    def copy(self) -> Player:
        return replace(
            self,
            position=self.position.copy(),
            velocity=self.velocity.copy(),
            acceleration=self.acceleration.copy(),
            animation_start_position=(
                self.animation_start_position.copy()
                if self.animation_start_position is not None
                else None
            ),
        )


@dataclass(frozen=True, slots=True)
class Item:
    """A static level piece. Kind changes are made by replacing the record."""

    piece: PieceKind
    position: Vector2
    bounding_box: Rect = Rect(0.0, 0.0, 1.0, 1.0)
    draw_rect: Rect = Rect(0.0, 0.0, 1.0, 1.0)

    def hitbox(self) -> Rect:
        return self.bounding_box.offset(self.position)

    def copy(self) -> Item:
        return replace(self, position=self.position.copy())
