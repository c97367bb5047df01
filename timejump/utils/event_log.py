"""Tick notifications and a thread-safe log of them for consumers."""

from __future__ import annotations

import threading
from collections import deque
from dataclasses import dataclass

from timejump.core.enums import MusicTrack, NotificationKind, SoundEffect


@dataclass(frozen=True, slots=True)
class Notification:
    """A fire-and-forget side effect requested by the simulation.

    Audio and presentation layers consume these; the core never waits on
    them.
    """

    kind: NotificationKind
    tick: int = 0
    effect: SoundEffect | None = None
    track: MusicTrack | None = None
    looping: bool = False
    level_index: int | None = None

    def __repr__(self) -> str:
        detail = self.effect or self.track or self.level_index
        return f"Notification({self.kind.name}, tick={self.tick}, {detail})"


def play_sound(effect: SoundEffect) -> Notification:
    return Notification(kind=NotificationKind.PLAY_SOUND, effect=effect)


def set_music(track: MusicTrack, looping: bool = True) -> Notification:
    return Notification(kind=NotificationKind.SET_MUSIC, track=track, looping=looping)


def level_complete(level_index: int) -> Notification:
    return Notification(kind=NotificationKind.LEVEL_COMPLETE, level_index=level_index)


def game_over() -> Notification:
    return Notification(kind=NotificationKind.GAME_OVER)


def game_won() -> Notification:
    return Notification(kind=NotificationKind.GAME_WON)


class EventLog:
    """Bounded notification log. Writers append; readers snapshot a slice.

    Thread-safe via a simple lock; writes happen once per tick and reads are
    non-blocking copies.
    """

    __slots__ = ("_buffer", "_lock")

    def __init__(self, maxlen: int | None = 4096) -> None:
        self._buffer: deque[Notification] = deque(maxlen=maxlen)
        self._lock = threading.Lock()

    def append(self, note: Notification) -> None:
        with self._lock:
            self._buffer.append(note)

    def append_many(self, notes: list[Notification]) -> None:
        with self._lock:
            self._buffer.extend(notes)

    def since_tick(self, tick: int) -> list[Notification]:
        """Return all notifications with tick >= *tick*."""
        with self._lock:
            return [n for n in self._buffer if n.tick >= tick]

    def latest(self, count: int = 50) -> list[Notification]:
        """Return the *count* most recent notifications."""
        with self._lock:
            items = list(self._buffer)
        return items[-count:]

    def clear(self) -> None:
        with self._lock:
            self._buffer.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._buffer)
