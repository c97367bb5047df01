"""Enumerations used throughout the engine."""

from __future__ import annotations

from enum import Enum, IntEnum, unique


@unique
class Tile(IntEnum):
    """Terrain cells of the level grid."""

    EMPTY = 0
    GROUND = 1
    SPIKE = 2
    CEILING_SPIKE = 3
    FAKE_BLOCK = 4       # Drawn like ground, but passable
    INVISIBLE_BLOCK = 5  # Solid, but not drawn
    GOAL = 6


# Tiles an entity can stand on
GROUND_LIKE: frozenset[Tile] = frozenset({
    Tile.GROUND,
    Tile.SPIKE,
    Tile.CEILING_SPIKE,
    Tile.INVISIBLE_BLOCK,
})

SPIKES: frozenset[Tile] = frozenset({Tile.SPIKE, Tile.CEILING_SPIKE})


@unique
class CharacterKind(IntEnum):
    """Identity of a moving, attacking entity."""

    HERO = 0
    GOBLIN = 1
    ARCHER = 2
    BOSS = 3


@unique
class PieceKind(IntEnum):
    """Identity of a static level piece (item)."""

    ENTRY = 0
    EXIT_LOCKED = 1
    EXIT_UNLOCKED = 2
    KEY = 3
    SWORD = 4


@unique
class Direction(IntEnum):
    """Horizontal facing."""

    LEFT = -1
    RIGHT = 1


@unique
class AnimationMode(IntEnum):
    """Player animation state."""

    NONE = 0
    ATTACK = 1
    THRUST = 2


@unique
class GamePhase(IntEnum):
    """Top-level engine state."""

    RUNNING = 0
    PAUSED = 1
    GAME_OVER = 2
    GAME_WON = 3


class Frame(str, Enum):
    """Sprite frame tags, carried through for the presentation layer."""

    ARCHER_ATTACK1 = "archerAttack1"
    ARCHER_ATTACK2 = "archerAttack2"
    ARCHER_ATTACK3 = "archerAttack3"
    BOSS_WALK1 = "bossWalk1"
    BOSS_WALK2 = "bossWalk2"
    BOSS_WALK3 = "bossWalk3"
    BOSS_ATTACK1 = "bossAttack1"
    BOSS_ATTACK2 = "bossAttack2"
    GOBLIN_WALK1 = "goblinWalk1"
    GOBLIN_WALK2 = "goblinWalk2"
    GOBLIN_WALK3 = "goblinWalk3"
    GOBLIN_ATTACK1 = "goblinAttack1"
    GOBLIN_ATTACK2 = "goblinAttack2"
    HERO_NEW_WALK1 = "heroNewWalk1"
    HERO_NEW_WALK2 = "heroNewWalk2"
    HERO_NEW_WALK3 = "heroNewWalk3"
    HERO_WALK1 = "heroWalk1"
    HERO_WALK2 = "heroWalk2"
    HERO_WALK3 = "heroWalk3"
    HERO_ATTACK1 = "heroAttack1"
    HERO_ATTACK2 = "heroAttack2"
    HERO_ATTACK3 = "heroAttack3"
    HERO_THRUST1 = "heroThrust1"
    HERO_THRUST2 = "heroThrust2"
    HERO_THRUST3 = "heroThrust3"
    HERO_BLOCKING = "heroBlocking"


class MusicTrack(str, Enum):
    """Background music cues requested from the audio layer."""

    MENU = "menu"
    INTRO = "intro"
    WORLD1 = "world1"
    BOSS1 = "boss1"
    OUTRO = "outro"
    GAMEOVER = "gameover"


class SoundEffect(str, Enum):
    """Fire-and-forget sound effects."""

    GRUNT = "grunt"
    SWORD = "sword"
    SWORD_BLOCK = "swordBlock"
    SWORD_CLASH = "swordClash"
    THRUST = "thrust"
    SWORD_PICKUP = "swordPickup"
    KEY_PICKUP = "keyPickup"
    PORTAL_TRANSITION = "portalTransition"
    ARROW_ATTACK = "arrowAttack"
    TELEPORT = "teleport"


@unique
class NotificationKind(IntEnum):
    """Side-effect notifications emitted by a tick."""

    PLAY_SOUND = 0
    SET_MUSIC = 1
    LEVEL_COMPLETE = 2
    GAME_OVER = 3
    GAME_WON = 4
