"""EngineRunner — drives a GameEngine on a background thread.

Presentation threads read an atomically-swapped immutable Snapshot; input
threads push intents and commands. The GameEngine is touched only by the
runner thread (single writer), commands being applied between ticks.
"""

from __future__ import annotations

import logging
import threading
import time
from typing import TYPE_CHECKING

from timejump.actions.base import IDLE, CommandType, EngineCommand
from timejump.engine.command_queue import CommandQueue
from timejump.engine.game_engine import GameEngine
from timejump.utils.event_log import EventLog

if TYPE_CHECKING:
    from timejump.actions.base import InputIntent
    from timejump.config import EngineConfig
    from timejump.core.snapshot import Snapshot
    from timejump.utils.event_log import Notification

logger = logging.getLogger(__name__)


class EngineRunner:
    """Manages the engine lifecycle on a background thread.

    Provides thread-safe access to:
      - latest snapshot (atomic reference swap)
      - notification log (lock-guarded ring buffer)
      - input intent (latest value wins)
      - control commands (start / stop / step / pause / restart / load level)
    """

    def __init__(self, config: EngineConfig, level_index: int = 0) -> None:
        self._config = config
        self._engine = GameEngine(config, level_index=level_index)
        self._tick_rate: float = config.tick_rate
        self._clock = time.monotonic

        # Thread-safe shared state
        self._snapshot_lock = threading.Lock()
        self._latest_snapshot: Snapshot = self._engine.create_snapshot()
        self._event_log = EventLog()
        self._intent_lock = threading.Lock()
        self._intent: InputIntent = IDLE
        self._commands = CommandQueue()

        # Control
        self._thread: threading.Thread | None = None
        self._running = threading.Event()
        self._stop_requested = threading.Event()

    # -- public properties --

    @property
    def running(self) -> bool:
        return self._running.is_set()

    @property
    def tick_rate(self) -> float:
        return self._tick_rate

    @tick_rate.setter
    def tick_rate(self, value: float) -> None:
        self._tick_rate = max(0.001, min(value, 1.0))

    @property
    def event_log(self) -> EventLog:
        return self._event_log

    # -- snapshot access --

    def get_snapshot(self) -> Snapshot:
        with self._snapshot_lock:
            return self._latest_snapshot

    # -- input --

    def push_intent(self, intent: InputIntent) -> None:
        """Replace the intent sampled by the next tick."""
        with self._intent_lock:
            self._intent = intent

    def _current_intent(self) -> InputIntent:
        with self._intent_lock:
            return self._intent

    # -- commands --

    def toggle_pause(self) -> None:
        self._commands.push(EngineCommand(CommandType.TOGGLE_PAUSE))

    def restart(self) -> None:
        self._commands.push(EngineCommand(CommandType.RESTART))

    def load_level(self, index: int) -> None:
        self._commands.push(EngineCommand(CommandType.LOAD_LEVEL, index))

    # -- lifecycle --

    def start(self) -> None:
        if self._running.is_set():
            return
        self._stop_requested.clear()
        self._running.set()
        self._thread = threading.Thread(target=self._run_loop, name="timejump-runner", daemon=True)
        self._thread.start()
        logger.info("EngineRunner started (tick_rate=%.3fs)", self._tick_rate)

    def step(self, dt: float | None = None) -> list[Notification]:
        """Run exactly one fixed-dt tick on the calling thread (runner must be stopped)."""
        if self._running.is_set():
            raise RuntimeError("step() requires a stopped runner")
        self._apply_commands()
        notes = self._engine.tick(dt if dt is not None else self._tick_rate, self._current_intent())
        self._publish(notes)
        return notes

    def stop(self) -> None:
        self._stop_requested.set()
        self._running.clear()
        if self._thread and self._thread.is_alive():
            self._thread.join(timeout=5.0)
        logger.info("EngineRunner stopped at tick %d.", self._engine.tick_count)

    # -- internals --

    def _run_loop(self) -> None:
        """Apply commands, tick on the wall clock, publish, sleep."""
        logger.info("Runner thread started on level %d.", self._engine.world.level_index)
        while not self._stop_requested.is_set():
            self._apply_commands()
            notes = self._engine.update(self._clock(), self._current_intent())
            self._publish(notes)
            time.sleep(self._tick_rate)
        self._running.clear()
        logger.info("Runner thread exited at tick %d.", self._engine.tick_count)

    def _apply_commands(self) -> None:
        for command in self._commands.drain():
            try:
                self._apply(command)
            except IndexError:
                logger.warning("Rejected %r: no such level", command)

    def _apply(self, command: EngineCommand) -> None:
        match command.verb:
            case CommandType.TOGGLE_PAUSE:
                self._engine.toggle_pause()
            case CommandType.RESTART:
                self._engine.restart()
            case CommandType.LOAD_LEVEL:
                self._engine.load_level_index(int(command.argument))
        logger.debug("Applied %r", command)

    def _publish(self, notes: list[Notification]) -> None:
        """Swap snapshot + push notifications from the last tick."""
        snap = self._engine.create_snapshot()
        with self._snapshot_lock:
            self._latest_snapshot = snap
        if notes:
            self._event_log.append_many(notes)
