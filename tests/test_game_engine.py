"""End-to-end tests for the GameEngine tick orchestrator.

Covers:
- Spike damage cooldown over continuous contact, spikes under enemies are harmless
- Game over at zero health, terminal no-op ticks
- Pause toggling
- Level advance, game won, restart, level selection
- Clock-driven update() and its first-call behaviour
- Music / sound notifications
"""

import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from timejump.actions.base import InputIntent
from timejump.core.enums import AnimationMode, GamePhase, MusicTrack, NotificationKind, SoundEffect
from timejump.engine.game_engine import GameEngine
from tests.helpers.level_arena import ATTACK, BLOCK, JUMP, RIGHT, LevelArena, level

KEY_RUN = level("PKE", "---")


class TestSpikes:
    def test_three_hits_in_three_seconds(self):
        arena = LevelArena("  P  ", "^^^^^")
        arena.run(3.0, dt=0.1)
        assert arena.player.health == 85.0

    def test_no_damage_on_plain_ground(self):
        arena = LevelArena("  P  ", "-----")
        arena.run(3.0)
        assert arena.player.health == 100.0

    def test_enemy_on_spikes_does_not_hurt_player(self):
        arena = LevelArena("P         B", "----------^")
        arena.run(3.0)
        assert arena.player.health == 100.0
        goblin = arena.world.enemies[0]
        assert goblin.health == 20.0
        assert goblin.position.y == pytest.approx(1 - goblin.bounding_box.max_y)


class TestGameOver:
    def test_zero_health_ends_the_game(self):
        arena = LevelArena("  P  ", "^^^^^")
        arena.player.health = 5.0
        arena.run_until(lambda a: a.engine.phase == GamePhase.GAME_OVER)
        assert arena.player.health == 0.0

        music = arena.notes_of(NotificationKind.SET_MUSIC)[-1]
        assert music.track == MusicTrack.GAMEOVER
        assert music.looping is False
        assert len(arena.notes_of(NotificationKind.GAME_OVER)) == 1

    def test_health_exactly_zero_is_game_over(self):
        arena = LevelArena("P", "-")
        arena.player.health = 0.0
        arena.tick()
        assert arena.engine.phase == GamePhase.GAME_OVER

    def test_ticks_after_game_over_are_noops(self):
        arena = LevelArena("P", "-")
        arena.player.health = 0.0
        arena.tick()
        count = arena.engine.tick_count
        pos = arena.player.position.copy()
        assert arena.tick(RIGHT) == []
        assert arena.engine.tick_count == count
        assert arena.player.position == pos

    def test_pause_ignored_when_over(self):
        arena = LevelArena("P", "-")
        arena.player.health = 0.0
        arena.tick()
        assert arena.engine.toggle_pause() == GamePhase.GAME_OVER


class TestPause:
    def test_paused_ticks_do_nothing(self):
        arena = LevelArena("P   ", "----")
        arena.tick()
        assert arena.engine.toggle_pause() == GamePhase.PAUSED
        x = arena.player.position.x
        arena.run(1.0, RIGHT)
        assert arena.player.position.x == x
        assert arena.engine.create_snapshot().paused

    def test_toggle_back_resumes(self):
        arena = LevelArena("P   ", "----")
        arena.engine.toggle_pause()
        arena.engine.toggle_pause()
        assert arena.engine.phase == GamePhase.RUNNING
        arena.tick(RIGHT)
        assert arena.player.position.x > 0.0


class TestLevelFlow:
    def test_key_then_exit_advances(self):
        arena = LevelArena(levels=[KEY_RUN, level("  P", "---")])
        arena.player.health = 40.0
        arena.run_until(lambda a: a.world.level_index == 1, RIGHT)

        complete = arena.notes_of(NotificationKind.LEVEL_COMPLETE)
        assert [n.level_index for n in complete] == [0]
        assert arena.engine.phase == GamePhase.RUNNING
        assert arena.player.health == 100.0
        assert arena.world.has_key is False
        assert arena.player.position.x == 2.0
        effects = [n.effect for n in arena.notes_of(NotificationKind.PLAY_SOUND)]
        assert SoundEffect.KEY_PICKUP in effects
        assert SoundEffect.TELEPORT in effects
        assert arena.notes_of(NotificationKind.SET_MUSIC)[-1].track == MusicTrack.WORLD1

    def test_last_exit_wins_the_game(self):
        arena = LevelArena(levels=[KEY_RUN])
        arena.run_until(lambda a: a.engine.phase == GamePhase.GAME_WON, RIGHT)
        music = arena.notes_of(NotificationKind.SET_MUSIC)[-1]
        assert music.track == MusicTrack.OUTRO
        assert music.looping is True
        assert len(arena.notes_of(NotificationKind.GAME_WON)) == 1
        assert arena.tick(RIGHT) == []

    def test_locked_exit_does_not_advance(self):
        arena = LevelArena("P E", "---")
        arena.run(1.0, RIGHT)
        assert arena.engine.phase == GamePhase.RUNNING
        assert arena.world.exit_reached is False

    def test_restart_resets_level(self):
        arena = LevelArena("  P  ", "^^^^^")
        arena.run(1.5)
        assert arena.player.health < 100.0
        arena.engine.restart()
        assert arena.player.health == 100.0
        assert arena.world.spike_cooldown is None
        notes = arena.tick()
        assert any(n.track == MusicTrack.WORLD1 for n in notes)

    def test_load_level_index_bounds(self):
        engine = GameEngine()
        with pytest.raises(IndexError):
            engine.load_level_index(engine.level_count)
        with pytest.raises(IndexError):
            engine.load_level_index(-1)

    def test_load_level_index_switches(self):
        engine = GameEngine()
        engine.load_level_index(2)
        assert engine.world.level_index == 2


class TestClock:
    def test_first_update_only_records_time(self):
        engine = GameEngine()
        assert engine.update(100.0) == []
        assert engine.tick_count == 0

    def test_second_update_ticks_with_elapsed_time(self):
        arena = LevelArena("P   ", "----")
        engine = arena.engine
        engine.update(100.0, RIGHT)
        notes = engine.update(100.1, RIGHT)
        assert engine.tick_count == 1
        assert arena.player.position.x == pytest.approx(0.5)
        assert any(n.track == MusicTrack.WORLD1 for n in notes)

    def test_notifications_stamped_with_tick(self):
        arena = LevelArena("P   ", "----")
        arena.tick()
        notes = arena.tick(ATTACK)
        assert notes and all(n.tick == 2 for n in notes)


class TestInput:
    def test_attack_plays_sword_sound(self):
        arena = LevelArena("P   ", "----")
        notes = arena.tick(ATTACK)
        assert [n.effect for n in notes if n.kind == NotificationKind.PLAY_SOUND] == [SoundEffect.SWORD]
        assert arena.world.is_attacking is True

    def test_is_attacking_clears_after_animation(self):
        arena = LevelArena("P   ", "----")
        arena.tick(ATTACK)
        arena.run(0.7)
        assert arena.world.is_attacking is False
        assert arena.player.animation == AnimationMode.NONE

    def test_no_attack_without_sword(self):
        arena = LevelArena("P  W", "----")
        notes = arena.tick(ATTACK)
        assert not any(n.effect == SoundEffect.SWORD for n in notes)
        assert arena.world.is_attacking is False

    def test_attack_kills_adjacent_goblin(self):
        arena = LevelArena("PB", "--")
        arena.tick(ATTACK)
        assert arena.world.enemies == []

    def test_block_held_then_released(self):
        arena = LevelArena("P   ", "----")
        arena.tick(BLOCK)
        assert arena.world.is_blocking is True
        arena.tick()
        assert arena.world.is_blocking is False

    def test_cannot_block_mid_jump(self):
        arena = LevelArena("P   ", "----")
        arena.tick(InputIntent(jump_pressed=True, block_held=True))
        assert arena.world.is_blocking is False
        assert arena.player.velocity.y < 0

    def test_jump_returns_to_ground(self):
        arena = LevelArena("P   ", "----")
        arena.tick(JUMP)
        arena.run(3.0)
        assert arena.player.position.y == pytest.approx(1 - arena.player.bounding_box.max_y)

    def test_goblin_behind_never_reaches_player(self):
        arena = LevelArena("BP   ", "-----")
        arena.tick()
        assert arena.player.health == 100.0
        arena.run(2.0)
        assert arena.player.health == 100.0
        assert arena.world.enemies[0].attack_cooldown is None

    def test_goblin_attack_softened_by_block(self):
        arena = LevelArena("PB", "--")
        arena.tick(BLOCK)
        assert arena.player.health == pytest.approx(100.0 - 10.0 / 3)

    def test_out_of_range_axis_is_clamped(self):
        arena = LevelArena("P     ", "------")
        arena.tick(InputIntent(move_axis=4.0))
        assert arena.player.velocity.x == pytest.approx(5.0)


class TestMusic:
    def test_level_load_sets_world_music(self):
        engine = GameEngine()
        assert engine.music == MusicTrack.WORLD1
        notes = engine.tick(0.1)
        assert notes[0].kind == NotificationKind.SET_MUSIC
        assert notes[0].track == MusicTrack.WORLD1
        assert notes[0].looping is True

    def test_boss_music_triggers_once(self):
        arena = LevelArena("P         Z", "-----------")
        arena.run(0.5, RIGHT)
        boss = [n for n in arena.notes_of(NotificationKind.SET_MUSIC) if n.track == MusicTrack.BOSS1]
        assert len(boss) == 1
        assert arena.engine.music == MusicTrack.BOSS1
