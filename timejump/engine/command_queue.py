"""Bounded command inbox between control threads and the EngineRunner."""

from __future__ import annotations

import logging
import threading
from collections import deque
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from timejump.actions.base import EngineCommand

logger = logging.getLogger(__name__)


class CommandQueue:
    """Commands pushed by any thread, drained in arrival order between ticks.

    At most *capacity* commands wait at once; pushing onto a full queue
    drops the oldest one.
    """

    __slots__ = ("_pending", "_lock")

    def __init__(self, capacity: int = 64) -> None:
        self._pending: deque[EngineCommand] = deque(maxlen=capacity)
        self._lock = threading.Lock()

    def push(self, command: EngineCommand) -> None:
        with self._lock:
            if len(self._pending) == self._pending.maxlen:
                logger.warning("Command queue full, dropping %r", self._pending[0])
            self._pending.append(command)

    def drain(self) -> list[EngineCommand]:
        with self._lock:
            commands = list(self._pending)
            self._pending.clear()
        return commands

    @property
    def empty(self) -> bool:
        with self._lock:
            return not self._pending

    def __len__(self) -> int:
        with self._lock:
            return len(self._pending)
