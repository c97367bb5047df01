"""State digest — a stable fingerprint of the simulation state using xxhash.

Two runs that feed identical (dt, intent) sequences from the same level must
produce identical digests after every tick. Only simulation data is hashed;
animation frames and draw rects are presentation and left out.
"""

from __future__ import annotations

import struct
from typing import TYPE_CHECKING

import xxhash

from timejump.core.enums import GamePhase

if TYPE_CHECKING:
    from timejump.core.models import Actor, Item
    from timejump.core.world_state import WorldState

# NaN never occurs in state, so it stands in for "no cooldown"
_ABSENT = float("nan")

_ACTOR = struct.Struct("<i9di?")
_ITEM = struct.Struct("<i2d")
_FLAGS = struct.Struct("<ii6?d")


def _opt(value: float | None) -> float:
    return _ABSENT if value is None else value


def _pack_actor(actor: Actor) -> bytes:
    return _ACTOR.pack(
        actor.kind.value,
        actor.position.x,
        actor.position.y,
        actor.velocity.x,
        actor.velocity.y,
        actor.acceleration.x,
        actor.acceleration.y,
        actor.health,
        _opt(actor.attack_cooldown),
        actor.timing,
        int(actor.direction),
        actor.attack_cooldown is None,
    )


def _pack_item(item: Item) -> bytes:
    return _ITEM.pack(item.piece.value, item.position.x, item.position.y)


def state_digest(world: WorldState, phase: GamePhase = GamePhase.RUNNING) -> str:
    """Hex xxh64 digest of everything that drives the next tick."""
    h = xxhash.xxh64()
    player = world.player
    h.update(_FLAGS.pack(
        world.level_index,
        phase.value,
        world.has_key,
        world.has_sword,
        world.is_attacking,
        world.is_blocking,
        world.exit_reached,
        world.spike_cooldown is None,
        _opt(world.spike_cooldown),
    ))
    h.update(_pack_actor(player))
    h.update(struct.pack("<id", player.animation.value, _opt(player.animation_start_time)))
    for enemy in world.enemies:
        h.update(_pack_actor(enemy))
    for item in world.items:
        h.update(_pack_item(item))
    return h.hexdigest()
