"""Engine configuration with sensible defaults."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EngineConfig:
    """Immutable tuning constants for a simulation run."""

    # Physics (world units = tiles, time in seconds)
    gravity: float = 9.81
    jump_velocity: float = -7.7
    move_scale: float = 5.0
    stick_dead_zone: float = 0.05

    # Player
    player_health: float = 100.0
    player_attack_strength: float = 20.0
    attack_duration: float = 0.5
    thrust_duration: float = 1.0
    thrust_multiplier: float = 2.0
    block_divisor: float = 3.0

    # Hazards
    spike_damage: float = 5.0
    spike_cooldown: float = 1.0

    # Enemies
    enemy_attack_cooldown: float = 0.8
    archer_cooldown: float = 1.5
    archer_radius: float = 9.0
    pursuit_range: float = 4.0
    goblin_speed: float = 1.0
    boss_speed_multiplier: float = 1.5

    # Animation
    frame_rate: float = 0.33

    # Level loading
    boss_trigger_offset: int = 9

    # Runner
    tick_rate: float = 1.0 / 30.0

    # Logging
    log_level: str = "INFO"
    replay_file: str = "replay.json"
