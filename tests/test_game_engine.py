import dataclasses

import pytest

from flying_toilet.data_models import GameMode, SaveData
from flying_toilet.events import GameEvent
from flying_toilet.game_engine import GameEngine


def test_tick_only_advances_while_playing(engine):
    assert engine.tick() is False
    assert engine.state.frame == 0

    engine.flap()
    assert engine.tick() is True
    assert engine.state.frame == 1


def test_frame_after_round_ends_is_not_simulated(engine):
    engine.flap()
    engine.player.y = 0.5
    engine.tick()
    engine.tick()
    assert engine.mode is GameMode.GAME_OVER
    frame, pipes = engine.state.frame, [p.x for p in engine.pipes.pipes]

    for _ in range(10):
        engine.tick()
    assert engine.state.frame == frame
    assert [p.x for p in engine.pipes.pipes] == pipes


def test_save_data_seeds_the_records():
    engine = GameEngine(save_data=SaveData(high_score=44, muted=True, best_level=7))
    assert engine.state.high_score == 44
    assert engine.state.muted is True
    assert engine.state.best_level == 7
    assert engine.save_data() == SaveData(high_score=44, muted=True, best_level=7)


def test_toggle_mute_is_always_legal(engine, recorder):
    assert engine.toggle_mute() is True
    engine.flap()
    engine.toggle_pause()
    assert engine.toggle_mute() is False
    assert recorder.count(GameEvent.MUTE) == 2


def test_engines_are_independent(config):
    a = GameEngine(config)
    b = GameEngine(config)
    a.flap()
    for _ in range(10):
        a.tick()

    assert b.mode is GameMode.START
    assert b.state.frame == 0
    assert b.pipes.pipes == []
    assert b.player.y == 300


def test_snapshot_is_a_detached_copy(engine):
    engine.flap()
    engine.tick()
    snap = engine.snapshot()

    assert snap.mode is GameMode.PLAYING
    assert snap.player == engine.player.get_bounds()
    assert snap.gap == 200
    assert snap.speed == pytest.approx(1.2)
    assert snap.speed_percent == 0
    assert len(snap.pipes) == 1

    engine.tick()
    assert snap.pipes[0].x != engine.pipes.pipes[0].x
    with pytest.raises(dataclasses.FrozenInstanceError):
        snap.score = 99


def test_full_round_saves_once_through_listeners(engine, recorder):
    engine.flap()
    while engine.mode is GameMode.PLAYING:
        engine.tick()

    assert recorder.count(GameEvent.ROUND_END) == 1
    assert engine.state.high_score == engine.state.score
