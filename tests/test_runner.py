"""Tests for the threaded EngineRunner, the command queue and the CLI.

Covers:
- Manual stepping with intents and commands
- Commands applied between ticks (pause, restart, load level)
- Background thread start / stop and snapshot publishing
- Notification log
- CLI subcommands and exit codes
- Logging setup (stream, format, tick-detail switch)
- Package metadata
"""

import io
import json
import logging
import os
import sys
import time

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from timejump.__main__ import main
from timejump.actions.base import CommandType, EngineCommand, InputIntent
from timejump.config import EngineConfig
from timejump.core.enums import MusicTrack, NotificationKind
from timejump.engine.command_queue import CommandQueue
from timejump.engine.runner import EngineRunner
from timejump.utils.logging import setup_logging


class TestCommandQueue:
    def test_drain_in_order(self):
        q = CommandQueue()
        q.push(EngineCommand(CommandType.TOGGLE_PAUSE))
        q.push(EngineCommand(CommandType.LOAD_LEVEL, 2))
        assert not q.empty
        drained = q.drain()
        assert [c.verb for c in drained] == [CommandType.TOGGLE_PAUSE, CommandType.LOAD_LEVEL]
        assert q.empty
        assert q.drain() == []

    def test_full_queue_drops_oldest(self):
        q = CommandQueue(capacity=2)
        for index in range(3):
            q.push(EngineCommand(CommandType.LOAD_LEVEL, index))
        assert len(q) == 2
        assert [c.argument for c in q.drain()] == [1, 2]


class TestStepping:
    def test_step_advances_and_publishes(self):
        runner = EngineRunner(EngineConfig())
        assert runner.get_snapshot().tick == 0
        runner.step(0.1)
        assert runner.get_snapshot().tick == 1

    def test_intent_moves_player(self):
        runner = EngineRunner(EngineConfig())
        x = runner.get_snapshot().player.position.x
        runner.push_intent(InputIntent(move_axis=1.0))
        for _ in range(3):
            runner.step(0.1)
        assert runner.get_snapshot().player.position.x > x

    def test_pause_command_applied_before_next_tick(self):
        runner = EngineRunner(EngineConfig())
        runner.toggle_pause()
        runner.step(0.1)
        snap = runner.get_snapshot()
        assert snap.paused
        assert snap.tick == 0

    def test_load_level_command(self):
        runner = EngineRunner(EngineConfig())
        runner.load_level(2)
        runner.step(0.1)
        assert runner.get_snapshot().level_index == 2

    def test_bad_level_is_logged_not_raised(self, caplog):
        runner = EngineRunner(EngineConfig())
        runner.load_level(99)
        runner.step(0.1)
        assert runner.get_snapshot().level_index == 0
        assert any("no such level" in r.message for r in caplog.records)

    def test_restart_command(self):
        runner = EngineRunner(EngineConfig(), level_index=1)
        runner.push_intent(InputIntent(move_axis=1.0))
        for _ in range(5):
            runner.step(0.1)
        runner.push_intent(InputIntent())
        runner.restart()
        runner.step(0.1)
        snap = runner.get_snapshot()
        assert snap.level_index == 1
        assert snap.player.position.x == pytest.approx(2.0)

    def test_notifications_logged(self):
        runner = EngineRunner(EngineConfig())
        runner.step(0.1)
        notes = runner.event_log.latest()
        assert notes[0].kind == NotificationKind.SET_MUSIC
        assert notes[0].track == MusicTrack.WORLD1
        assert runner.event_log.since_tick(1) == notes


class TestThread:
    def test_start_and_stop(self):
        runner = EngineRunner(EngineConfig(tick_rate=0.005))
        runner.start()
        try:
            assert runner.running
            deadline = time.monotonic() + 5.0
            while runner.get_snapshot().tick < 3 and time.monotonic() < deadline:
                time.sleep(0.01)
            assert runner.get_snapshot().tick >= 3
        finally:
            runner.stop()
        assert not runner.running

    def test_step_refused_while_running(self):
        runner = EngineRunner(EngineConfig(tick_rate=0.005))
        runner.start()
        try:
            with pytest.raises(RuntimeError):
                runner.step()
        finally:
            runner.stop()

    def test_tick_rate_clamped(self):
        runner = EngineRunner(EngineConfig())
        runner.tick_rate = 0.0
        assert runner.tick_rate == 0.001
        runner.tick_rate = 10.0
        assert runner.tick_rate == 1.0


class TestCli:
    def test_levels(self, capsys):
        assert main(["levels"]) == 0
        rows = json.loads(capsys.readouterr().out)
        assert [r["index"] for r in rows] == [0, 1, 2]
        assert rows[2]["boss"] is True

    def test_run_writes_verifiable_replay(self, tmp_path):
        replay = tmp_path / "run.json"
        assert main(["run", "--ticks", "60", "--replay", str(replay), "--log-level", "WARNING"]) == 0
        assert replay.exists()
        assert main(["verify", str(replay), "--log-level", "WARNING"]) == 0

    def test_run_with_input_script(self, tmp_path, capsys):
        script = tmp_path / "inputs.json"
        script.write_text(json.dumps({"steps": [{"ticks": 10, "intent": {"move_axis": 1.0}}]}))
        assert main([
            "run", "--ticks", "10", "--dt", "0.1", "--inputs", str(script),
            "--snapshot", "--log-level", "WARNING",
        ]) == 0
        snapshot = json.loads(capsys.readouterr().out)
        assert snapshot["tick"] == 10
        assert snapshot["player"]["x"] > 2.0

    def test_verify_detects_tampering(self, tmp_path):
        replay = tmp_path / "run.json"
        main(["run", "--ticks", "20", "--replay", str(replay), "--log-level", "WARNING"])
        data = json.loads(replay.read_text())
        data["ticks"][5]["digest"] = "f" * 16
        replay.write_text(json.dumps(data))
        assert main(["verify", str(replay), "--log-level", "WARNING"]) == 1

    def test_bad_level_exit_code(self):
        assert main(["run", "--level", "9", "--log-level", "WARNING"]) == 2

    def test_bad_input_script_exit_code(self, tmp_path):
        script = tmp_path / "inputs.json"
        script.write_text(json.dumps({"steps": [{"intent": {"move_axis": 7}}]}))
        assert main(["run", "--inputs", str(script), "--log-level", "WARNING"]) == 2

    def test_missing_replay_exit_code(self, tmp_path):
        assert main(["verify", str(tmp_path / "nope.json"), "--log-level", "WARNING"]) == 2


class TestLoggingSetup:
    @pytest.fixture(autouse=True)
    def _restore_root(self):
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        yield
        root.handlers[:] = handlers
        root.setLevel(level)
        for name in ("timejump.actions", "timejump.ai"):
            logging.getLogger(name).setLevel(logging.NOTSET)

    def test_writes_formatted_lines_to_stream(self):
        stream = io.StringIO()
        setup_logging("INFO", stream=stream)
        logging.getLogger("timejump.engine.game_engine").info("hello")
        line = stream.getvalue()
        assert "[INFO ]" in line
        assert "| hello" in line

    def test_tick_detail_off_hides_debug_chatter(self):
        stream = io.StringIO()
        setup_logging("DEBUG", stream=stream, tick_detail=False)
        logging.getLogger("timejump.actions.combat").debug("per-tick")
        logging.getLogger("timejump.engine.game_engine").debug("lifecycle")
        out = stream.getvalue()
        assert "per-tick" not in out
        assert "lifecycle" in out

    def test_unknown_level_falls_back_to_info(self):
        setup_logging("LOUD", stream=io.StringIO())
        assert logging.getLogger().level == logging.INFO


class TestPackaging:
    def test_metadata(self):
        tomllib = pytest.importorskip("tomllib")
        path = os.path.join(os.path.dirname(__file__), "..", "pyproject.toml")
        with open(path, "rb") as fh:
            project = tomllib.load(fh)["project"]
        assert "readme" not in project
        assert project["scripts"]["timejump"] == "timejump.__main__:main"
        deps = " ".join(project["dependencies"])
        assert "pydantic" in deps and "xxhash" in deps
