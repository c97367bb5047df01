"""Replay serialization — records per-tick inputs and state digests.

A replay holds everything needed to re-simulate a run: the starting level,
and per tick the dt, the input intent and the resulting state digest.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

from timejump.api.schemas import InputIntentSchema, ReplaySchema

if TYPE_CHECKING:
    from timejump.actions.base import InputIntent
    from timejump.config import EngineConfig

logger = logging.getLogger(__name__)


class ReplayRecorder:
    """Accumulates tick records and flushes them to a JSON replay file."""

    __slots__ = ("_path", "_ticks", "_level_index")

    def __init__(self, path: str | Path, level_index: int) -> None:
        self._path = Path(path)
        self._level_index = level_index
        self._ticks: list[dict[str, Any]] = []

    def record_tick(self, tick: int, dt: float, intent: InputIntent, digest: str) -> None:
        self._ticks.append(
            {
                "tick": tick,
                "dt": dt,
                "intent": InputIntentSchema.from_intent(intent).model_dump(),
                "digest": digest,
            }
        )

    @property
    def total_ticks(self) -> int:
        return len(self._ticks)

    def flush(self) -> None:
        """Write accumulated data to disk."""
        replay = {
            "version": "1.0",
            "level_index": self._level_index,
            "total_ticks": len(self._ticks),
            "ticks": self._ticks,
        }
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(replay, indent=2), encoding="utf-8")
        logger.info("Replay saved to %s (%d ticks)", self._path, len(self._ticks))


def load_replay(path: str | Path) -> ReplaySchema:
    """Read and validate a replay file. Raises pydantic.ValidationError if malformed."""
    return ReplaySchema.model_validate_json(Path(path).read_text(encoding="utf-8"))


@dataclass(frozen=True, slots=True)
class ReplayMismatch:
    """First tick at which a re-simulation diverged from the recording."""

    tick: int
    expected: str
    actual: str


def verify_replay(
    replay: ReplaySchema | str | Path,
    config: EngineConfig | None = None,
) -> ReplayMismatch | None:
    """Re-simulate *replay* and compare digests tick by tick."""
    from timejump.engine.game_engine import GameEngine
    from timejump.systems.digest import state_digest

    if not isinstance(replay, ReplaySchema):
        replay = load_replay(replay)

    engine = GameEngine(config, level_index=replay.level_index)
    for record in replay.ticks:
        engine.tick(record.dt, record.intent.to_intent())
        actual = state_digest(engine.world, engine.phase)
        if actual != record.digest:
            logger.warning("Replay diverged at tick %d", record.tick)
            return ReplayMismatch(tick=record.tick, expected=record.digest, actual=actual)

    logger.info("Replay verified (%d ticks)", len(replay.ticks))
    return None
