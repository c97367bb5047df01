"""Tests for the pydantic payload schemas and snapshot serialization.

Covers:
- Input intent validation and conversion
- Input script expansion
- Snapshot → SnapshotSchema shape and JSON dump
- Notification serialization
- Snapshot isolation from later engine ticks
"""

import json
import os
import sys

import pytest
from pydantic import ValidationError

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from timejump.actions.base import InputIntent
from timejump.api.schemas import InputIntentSchema, InputScriptSchema, SnapshotSchema
from timejump.api.serializers import notification_to_schema, snapshot_to_schema
from timejump.core.enums import MusicTrack, SoundEffect
from timejump.engine.game_engine import GameEngine
from timejump.utils.event_log import play_sound, set_music


class TestInputSchemas:
    def test_axis_out_of_range_rejected(self):
        with pytest.raises(ValidationError):
            InputIntentSchema(move_axis=1.5)

    def test_to_intent(self):
        schema = InputIntentSchema(move_axis=-0.25, jump_pressed=True, block_held=True)
        assert schema.to_intent() == InputIntent(move_axis=-0.25, jump_pressed=True, block_held=True)

    def test_from_intent(self):
        intent = InputIntent(move_axis=0.5, thrust_pressed=True)
        assert InputIntentSchema.from_intent(intent).to_intent() == intent

    def test_script_expands_steps(self):
        script = InputScriptSchema.model_validate({
            "steps": [
                {"ticks": 3, "intent": {"move_axis": 1.0}},
                {"intent": {"attack_pressed": True}},
            ]
        })
        intents = list(script.intents())
        assert script.total_ticks == 4
        assert len(intents) == 4
        assert intents[0].move_axis == 1.0
        assert intents[3].attack_pressed is True

    def test_script_rejects_zero_ticks(self):
        with pytest.raises(ValidationError):
            InputScriptSchema.model_validate({"steps": [{"ticks": 0}]})


class TestSnapshotPayload:
    def test_shape(self):
        engine = GameEngine(level_index=0)
        engine.tick(0.1)
        payload = snapshot_to_schema(engine.create_snapshot())

        assert isinstance(payload, SnapshotSchema)
        assert payload.tick == 1
        assert payload.phase == "RUNNING"
        assert payload.music == MusicTrack.WORLD1.value
        assert payload.height == len(payload.tiles)
        assert all(len(row) == payload.width for row in payload.tiles)
        assert payload.player.kind == "HERO"
        assert payload.player.animation == "NONE"
        assert len(payload.enemies) == len(engine.world.enemies)
        assert {i.piece for i in payload.items} >= {"ENTRY", "EXIT_LOCKED", "SWORD"}
        assert payload.has_sword is False
        assert not payload.paused and not payload.game_over and not payload.game_won

    def test_json_dump(self):
        payload = snapshot_to_schema(GameEngine().create_snapshot())
        data = json.loads(payload.model_dump_json())
        assert data["health"] == 100.0
        assert data["player"]["frame"] == "heroNewWalk1"

    def test_snapshot_is_isolated_from_later_ticks(self):
        engine = GameEngine()
        snap = engine.create_snapshot()
        x = snap.player.position.x
        for _ in range(10):
            engine.tick(0.1, InputIntent(move_axis=1.0))
        assert snap.player.position.x == x
        assert engine.world.player.position.x != x


class TestNotificationPayload:
    def test_sound(self):
        payload = notification_to_schema(play_sound(SoundEffect.KEY_PICKUP))
        assert payload.kind == "PLAY_SOUND"
        assert payload.effect == "keyPickup"
        assert payload.track is None

    def test_music(self):
        payload = notification_to_schema(set_music(MusicTrack.GAMEOVER, looping=False))
        assert payload.kind == "SET_MUSIC"
        assert payload.track == "gameover"
        assert payload.looping is False
