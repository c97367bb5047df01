"""Entry point: ``python -m timejump``.

Supports three modes:
  - ``python -m timejump run``          → Headless fixed-dt run (default)
  - ``python -m timejump verify FILE``  → Re-simulate a replay and compare digests
  - ``python -m timejump levels``       → List the built-in levels
"""

from __future__ import annotations

import argparse
import itertools
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

logger = logging.getLogger(__name__)

_LOG_LEVELS = ["DEBUG", "INFO", "WARNING"]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Time Jump deterministic platformer engine")
    sub = parser.add_subparsers(dest="command")

    # --- Headless run (default) ---
    run = sub.add_parser("run", help="Run the engine headless with a fixed dt (default)")
    run.add_argument("--level", type=int, default=0)
    run.add_argument("--ticks", type=int, default=300)
    run.add_argument("--dt", type=float, default=None, help="seconds per tick (default: config tick_rate)")
    run.add_argument("--inputs", type=str, default=None, help="JSON input script")
    run.add_argument("--replay", type=str, nargs="?", const="", default=None,
                     help="write a replay file (bare flag: config replay_file)")
    run.add_argument("--snapshot", action="store_true", help="print the final snapshot as JSON")
    run.add_argument("--log-level", type=str, default="INFO", choices=_LOG_LEVELS)
    run.add_argument("--quiet-ticks", action="store_true", help="keep per-tick combat and AI logs out of DEBUG output")

    # --- Replay verification ---
    ver = sub.add_parser("verify", help="Re-simulate a replay and check every tick's digest")
    ver.add_argument("replay", type=str)
    ver.add_argument("--log-level", type=str, default="INFO", choices=_LOG_LEVELS)

    # --- Level listing ---
    lv = sub.add_parser("levels", help="List the built-in levels")
    lv.add_argument("--log-level", type=str, default="WARNING", choices=_LOG_LEVELS)

    return parser


def _run(args: argparse.Namespace) -> int:
    from timejump.actions.base import IDLE
    from timejump.api.schemas import InputScriptSchema
    from timejump.api.serializers import snapshot_to_schema
    from timejump.config import EngineConfig
    from timejump.core.enums import GamePhase
    from timejump.engine.game_engine import GameEngine
    from timejump.systems.digest import state_digest
    from timejump.utils.logging import setup_logging
    from timejump.utils.replay import ReplayRecorder

    overrides = {"replay_file": args.replay} if args.replay else {}
    config = EngineConfig(log_level=args.log_level, **overrides)
    setup_logging(config.log_level, tick_detail=not args.quiet_ticks)
    dt = args.dt if args.dt is not None else config.tick_rate

    if args.inputs:
        script = InputScriptSchema.model_validate_json(Path(args.inputs).read_text(encoding="utf-8"))
        intents = itertools.chain(script.intents(), itertools.repeat(IDLE))
    else:
        intents = itertools.repeat(IDLE)

    engine = GameEngine(config, level_index=args.level)
    recorder = ReplayRecorder(config.replay_file, args.level) if args.replay is not None else None

    logger.info("=== Run started (level=%d, ticks=%d, dt=%.4f) ===", args.level, args.ticks, dt)
    for intent in itertools.islice(intents, args.ticks):
        notes = engine.tick(dt, intent)
        for note in notes:
            logger.info("Tick %d: %r", engine.tick_count, note)
        if recorder:
            recorder.record_tick(engine.tick_count, dt, intent, state_digest(engine.world, engine.phase))

        if engine.tick_count % 50 == 0:
            logger.info(
                "Tick %d: player at %s, health %.1f, %d enemies",
                engine.tick_count,
                engine.world.player.position,
                engine.world.player.health,
                len(engine.world.enemies),
            )
        if engine.phase in (GamePhase.GAME_OVER, GamePhase.GAME_WON):
            break

    logger.info("=== Run finished at tick %d (%s) ===", engine.tick_count, engine.phase.name)
    if recorder:
        recorder.flush()
    if args.snapshot:
        print(snapshot_to_schema(engine.create_snapshot()).model_dump_json(indent=2))
    return 0


def _verify(args: argparse.Namespace) -> int:
    from timejump.utils.logging import setup_logging
    from timejump.utils.replay import verify_replay

    setup_logging(args.log_level)
    mismatch = verify_replay(args.replay)
    if mismatch is not None:
        logger.error(
            "Mismatch at tick %d: expected %s, got %s",
            mismatch.tick, mismatch.expected, mismatch.actual,
        )
        return 1
    return 0


def _levels(args: argparse.Namespace) -> int:
    from timejump.core.levels import LEVELS
    from timejump.systems.level_loader import load_level
    from timejump.utils.logging import setup_logging

    setup_logging(args.log_level)
    rows = []
    for index, text in enumerate(LEVELS):
        world = load_level(text, level_index=index)
        rows.append({
            "index": index,
            "width": world.grid.width,
            "height": world.grid.height,
            "enemies": len(world.enemies),
            "items": len(world.items),
            "sword": world.has_sword,
            "boss": world.boss_trigger_x is not None,
        })
    print(json.dumps(rows, indent=2))
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Default to run mode if no subcommand given
    if args.command is None:
        args = parser.parse_args(["run"])

    handlers = {"run": _run, "verify": _verify, "levels": _levels}
    try:
        return handlers[args.command](args)
    except ValidationError as exc:
        logger.error("Invalid input file: %s", exc)
        return 2
    except IndexError as exc:
        logger.error("%s", exc)
        return 2
    except OSError as exc:
        logger.error("Cannot read %s: %s", exc.filename, exc.strerror)
        return 2


if __name__ == "__main__":
    sys.exit(main())
