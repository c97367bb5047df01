"""Input intent and engine commands — the currency between outer layers and the engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, unique
from typing import Any


@dataclass(frozen=True, slots=True)
class InputIntent:
    """Normalized player input for one tick.

    ``move_axis`` is the horizontal analog value in [-1, 1]; the rest are
    pressed / not-pressed flags sampled at tick time.
    """

    move_axis: float = 0.0
    jump_pressed: bool = False
    attack_pressed: bool = False
    thrust_pressed: bool = False
    block_held: bool = False

    def clamped(self) -> InputIntent:
        axis = max(-1.0, min(1.0, self.move_axis))
        if axis == self.move_axis:
            return self
        return InputIntent(axis, self.jump_pressed, self.attack_pressed,
                           self.thrust_pressed, self.block_held)


IDLE = InputIntent()


@unique
class CommandType(IntEnum):
    """Out-of-tick commands pushed by the UI layer."""

    TOGGLE_PAUSE = 0
    RESTART = 1
    LOAD_LEVEL = 2


@dataclass(frozen=True, slots=True)
class EngineCommand:
    """A command queued by another thread, applied between ticks."""

    verb: CommandType
    argument: Any = None

    def __repr__(self) -> str:
        return f"Command({self.verb.name}, {self.argument!r})"
