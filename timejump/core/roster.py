"""Character and level-piece definitions.

Each ``CharacterKind`` maps to an ``ActorTemplate`` describing its boxes,
health, strength and animation frames. To add an enemy archetype:
  1. Add a ``CharacterKind`` member.
  2. Register its template in ``ROSTER``.
  3. Give it a behaviour in ``timejump.ai.enemies``.
"""

from __future__ import annotations

from dataclasses import dataclass

from timejump.core.enums import CharacterKind, Direction, Frame, PieceKind
from timejump.core.models import Actor, Item, Player, Rect, Vector2

# Pieces all occupy exactly their own cell
PIECE_BOX = Rect(0.0, 0.0, 1.0, 1.0)


@dataclass(frozen=True, slots=True)
class ActorTemplate:
    """Static definition of a character archetype."""

    kind: CharacterKind
    health: float
    attack_strength: float
    bounding_box: Rect
    attack_box: Rect
    draw_rect: Rect
    walk_frames: tuple[Frame, ...]
    attack_frames: tuple[Frame, ...] = ()
    direction: Direction = Direction.LEFT


HERO = ActorTemplate(
    kind=CharacterKind.HERO,
    health=100.0,
    attack_strength=20.0,
    bounding_box=Rect(0.1, -0.55, 0.8, 1.55),
    attack_box=Rect(0.9, -0.7, 0.8, 1.7),
    draw_rect=Rect(-2.0, -2.25, 5.0, 5.0),
    walk_frames=(Frame.HERO_WALK1, Frame.HERO_WALK2, Frame.HERO_WALK3),
    attack_frames=(Frame.HERO_ATTACK1, Frame.HERO_ATTACK2, Frame.HERO_ATTACK3),
    direction=Direction.RIGHT,
)

# Walk cycle used before the sword is picked up
HERO_UNARMED_FRAMES: tuple[Frame, ...] = (
    Frame.HERO_NEW_WALK1,
    Frame.HERO_NEW_WALK2,
    Frame.HERO_NEW_WALK3,
)
HERO_THRUST_FRAMES: tuple[Frame, ...] = (
    Frame.HERO_THRUST1,
    Frame.HERO_THRUST2,
    Frame.HERO_THRUST3,
)

ROSTER: dict[CharacterKind, ActorTemplate] = {
    CharacterKind.HERO: HERO,
    CharacterKind.GOBLIN: ActorTemplate(
        kind=CharacterKind.GOBLIN,
        health=20.0,
        attack_strength=10.0,
        bounding_box=Rect(0.2, -0.1, 0.6, 1.1),
        attack_box=Rect(-0.5, -0.2, 0.7, 0.9),
        draw_rect=Rect(-0.35, -0.25, 1.25, 1.25),
        walk_frames=(Frame.GOBLIN_WALK1, Frame.GOBLIN_WALK2, Frame.GOBLIN_WALK3),
        attack_frames=(Frame.GOBLIN_ATTACK1, Frame.GOBLIN_ATTACK2),
    ),
    CharacterKind.ARCHER: ActorTemplate(
        kind=CharacterKind.ARCHER,
        health=30.0,
        attack_strength=0.0,
        bounding_box=Rect(0.2, -0.1, 0.6, 1.1),
        attack_box=Rect(0.2, -0.1, 0.6, 1.1),
        draw_rect=Rect(-0.4, -0.75, 2.0, 2.0),
        walk_frames=(Frame.ARCHER_ATTACK1,),
        attack_frames=(Frame.ARCHER_ATTACK1, Frame.ARCHER_ATTACK2, Frame.ARCHER_ATTACK3),
    ),
    CharacterKind.BOSS: ActorTemplate(
        kind=CharacterKind.BOSS,
        health=150.0,
        attack_strength=30.0,
        bounding_box=Rect(0.2, -1.4, 1.0, 2.4),
        attack_box=Rect(-1.3, -1.4, 2.0, 2.4),
        draw_rect=Rect(-1.0, -1.4, 2.5, 2.5),
        walk_frames=(Frame.BOSS_WALK1, Frame.BOSS_WALK2, Frame.BOSS_WALK3),
        attack_frames=(Frame.BOSS_ATTACK1, Frame.BOSS_ATTACK2),
    ),
}


def spawn_enemy(kind: CharacterKind, position: Vector2) -> Actor:
    """Build a fresh enemy of *kind* standing at *position*."""
    if kind == CharacterKind.HERO:
        raise ValueError("the hero is spawned with spawn_player()")
    tpl = ROSTER[kind]
    return Actor(
        kind=kind,
        position=position,
        bounding_box=tpl.bounding_box,
        attack_box=tpl.attack_box,
        draw_rect=tpl.draw_rect,
        health=tpl.health,
        attack_strength=tpl.attack_strength,
        frame=tpl.walk_frames[0],
        direction=tpl.direction,
    )


def spawn_player(position: Vector2, health: float = HERO.health,
                 attack_strength: float = HERO.attack_strength) -> Player:
    return Player(
        kind=CharacterKind.HERO,
        position=position,
        bounding_box=HERO.bounding_box,
        attack_box=HERO.attack_box,
        draw_rect=HERO.draw_rect,
        health=health,
        attack_strength=attack_strength,
        frame=HERO_UNARMED_FRAMES[0],
        direction=HERO.direction,
    )


def make_item(piece: PieceKind, position: Vector2) -> Item:
    return Item(piece=piece, position=position, bounding_box=PIECE_BOX, draw_rect=PIECE_BOX)
