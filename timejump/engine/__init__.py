"""Engine layer: tick orchestrator, command queue, threaded runner."""

from timejump.engine.command_queue import CommandQueue
from timejump.engine.game_engine import GameEngine
from timejump.engine.runner import EngineRunner

__all__ = ["CommandQueue", "EngineRunner", "GameEngine"]
