"""Convert engine snapshots and notifications into JSON-ready schemas."""

from __future__ import annotations

from typing import TYPE_CHECKING

from timejump.api.schemas import (
    ActorSchema,
    ItemSchema,
    NotificationSchema,
    PlayerSchema,
    SnapshotSchema,
)

if TYPE_CHECKING:
    from timejump.core.models import Actor, Item, Player
    from timejump.core.snapshot import Snapshot
    from timejump.utils.event_log import Notification


def actor_to_schema(actor: Actor) -> ActorSchema:
    return ActorSchema(
        kind=actor.kind.name,
        x=actor.position.x,
        y=actor.position.y,
        vx=actor.velocity.x,
        vy=actor.velocity.y,
        health=actor.health,
        frame=actor.frame.value,
        direction=int(actor.direction),
        attack_cooldown=actor.attack_cooldown,
    )


def player_to_schema(player: Player) -> PlayerSchema:
    return PlayerSchema(
        kind=player.kind.name,
        x=player.position.x,
        y=player.position.y,
        vx=player.velocity.x,
        vy=player.velocity.y,
        health=player.health,
        frame=player.frame.value,
        direction=int(player.direction),
        attack_cooldown=player.attack_cooldown,
        animation=player.animation.name,
    )


def item_to_schema(item: Item) -> ItemSchema:
    return ItemSchema(piece=item.piece.name, x=item.position.x, y=item.position.y)


def snapshot_to_schema(snapshot: Snapshot) -> SnapshotSchema:
    """Flatten a read-only Snapshot into its JSON payload."""
    grid = snapshot.grid
    return SnapshotSchema(
        tick=snapshot.tick,
        level_index=snapshot.level_index,
        phase=snapshot.phase.name,
        music=snapshot.music.value if snapshot.music else None,
        width=grid.width,
        height=grid.height,
        tiles=[[int(t) for t in row] for row in grid.rows()],
        player=player_to_schema(snapshot.player),
        enemies=[actor_to_schema(e) for e in snapshot.enemies],
        items=[item_to_schema(i) for i in snapshot.items],
        health=snapshot.health,
        has_key=snapshot.has_key,
        has_sword=snapshot.has_sword,
        is_blocking=snapshot.is_blocking,
        paused=snapshot.paused,
        game_over=snapshot.game_over,
        game_won=snapshot.game_won,
    )


def notification_to_schema(note: Notification) -> NotificationSchema:
    return NotificationSchema(
        kind=note.kind.name,
        tick=note.tick,
        effect=note.effect.value if note.effect else None,
        track=note.track.value if note.track else None,
        looping=note.looping,
        level_index=note.level_index,
    )
