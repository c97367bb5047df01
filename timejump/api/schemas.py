"""Pydantic models for the JSON payloads that cross the engine boundary."""

from __future__ import annotations

from collections.abc import Iterator

from pydantic import BaseModel, Field

from timejump.actions.base import InputIntent


# --- Input ---

class InputIntentSchema(BaseModel):
    move_axis: float = Field(0.0, ge=-1.0, le=1.0)
    jump_pressed: bool = False
    attack_pressed: bool = False
    thrust_pressed: bool = False
    block_held: bool = False

    def to_intent(self) -> InputIntent:
        return InputIntent(
            move_axis=self.move_axis,
            jump_pressed=self.jump_pressed,
            attack_pressed=self.attack_pressed,
            thrust_pressed=self.thrust_pressed,
            block_held=self.block_held,
        )

    @classmethod
    def from_intent(cls, intent: InputIntent) -> InputIntentSchema:
        return cls(
            move_axis=intent.move_axis,
            jump_pressed=intent.jump_pressed,
            attack_pressed=intent.attack_pressed,
            thrust_pressed=intent.thrust_pressed,
            block_held=intent.block_held,
        )


class InputStepSchema(BaseModel):
    """Hold one intent for a number of ticks."""

    ticks: int = Field(1, ge=1)
    intent: InputIntentSchema = Field(default_factory=InputIntentSchema)


class InputScriptSchema(BaseModel):
    """A scripted input sequence for headless runs."""

    steps: list[InputStepSchema] = Field(default_factory=list)

    def intents(self) -> Iterator[InputIntent]:
        for step in self.steps:
            intent = step.intent.to_intent()
            for _ in range(step.ticks):
                yield intent

    @property
    def total_ticks(self) -> int:
        return sum(step.ticks for step in self.steps)


# --- World ---

class ActorSchema(BaseModel):
    kind: str
    x: float
    y: float
    vx: float = 0.0
    vy: float = 0.0
    health: float
    frame: str
    direction: int
    attack_cooldown: float | None = None


class PlayerSchema(ActorSchema):
    animation: str = "NONE"


class ItemSchema(BaseModel):
    piece: str
    x: float
    y: float


class NotificationSchema(BaseModel):
    kind: str
    tick: int
    effect: str | None = None
    track: str | None = None
    looping: bool = False
    level_index: int | None = None


class SnapshotSchema(BaseModel):
    tick: int
    level_index: int
    phase: str
    music: str | None = None
    width: int
    height: int
    tiles: list[list[int]]
    player: PlayerSchema
    enemies: list[ActorSchema]
    items: list[ItemSchema]
    health: float
    has_key: bool
    has_sword: bool
    is_blocking: bool
    paused: bool
    game_over: bool
    game_won: bool


# --- Replay ---

class ReplayTickSchema(BaseModel):
    tick: int
    dt: float = Field(ge=0.0)
    intent: InputIntentSchema
    digest: str


class ReplaySchema(BaseModel):
    version: str = "1.0"
    level_index: int = Field(0, ge=0)
    total_ticks: int = 0
    ticks: list[ReplayTickSchema] = Field(default_factory=list)
