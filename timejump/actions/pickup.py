"""PickupResolver — effects of the player overlapping level pieces."""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING

from timejump.core.enums import PieceKind, SoundEffect
from timejump.utils.event_log import Notification, play_sound

if TYPE_CHECKING:
    from timejump.core.models import Item
    from timejump.core.world_state import WorldState

logger = logging.getLogger(__name__)


class PickupOutcome(Enum):
    KEEP = "keep"
    REMOVE = "remove"


class PickupResolver:
    """Applies piece effects. Removals are collected and applied after the scan."""

    __slots__ = ()

    def resolve(self, world: WorldState) -> list[Notification]:
        player_box = world.player.hitbox()
        notes: list[Notification] = []
        to_remove: set[int] = set()

        # Index loop: a key pickup may replace the exit record mid-scan
        for i in range(len(world.items)):
            item = world.items[i]
            if not item.hitbox().intersects(player_box):
                continue
            if self.pickup(world, item, notes) == PickupOutcome.REMOVE:
                to_remove.add(i)

        if to_remove:
            world.items = [it for i, it in enumerate(world.items) if i not in to_remove]
        return notes

    @staticmethod
    def pickup(world: WorldState, item: Item, notes: list[Notification]) -> PickupOutcome:
        match item.piece:
            case PieceKind.ENTRY | PieceKind.EXIT_LOCKED:
                return PickupOutcome.KEEP

            case PieceKind.EXIT_UNLOCKED:
                if not world.exit_reached:
                    world.exit_reached = True
                    notes.append(play_sound(SoundEffect.TELEPORT))
                    logger.info("Exit reached on level %d", world.level_index)
                return PickupOutcome.KEEP

            case PieceKind.KEY:
                world.has_key = True
                world.unlock_goal()
                notes.append(play_sound(SoundEffect.KEY_PICKUP))
                logger.info("Key picked up at %s", item.position)
                return PickupOutcome.REMOVE

            case PieceKind.SWORD:
                world.has_sword = True
                notes.append(play_sound(SoundEffect.SWORD_PICKUP))
                logger.info("Sword picked up at %s", item.position)
                return PickupOutcome.REMOVE

        return PickupOutcome.KEEP
