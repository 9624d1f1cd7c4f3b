from flying_toilet.config import GameConfig
from flying_toilet.events import GameEvent
from flying_toilet.game_engine import GameEngine


def make(pipes_per_level=8):
    engine = GameEngine(GameConfig(pipes_per_level=pipes_per_level))
    events = []
    engine.subscribe(lambda event, state: events.append(event))
    return engine, events


def test_each_pass_adds_exactly_one_point():
    engine, events = make()
    for expected in range(1, 6):
        engine.score_keeper.record_pass()
        assert engine.state.score == expected
        assert engine.state.pipes_passed == expected
    assert events.count(GameEvent.SCORE) == 5


def test_level_tracks_pipes_passed_and_never_drops():
    engine, events = make()
    previous = 1
    for _ in range(40):
        engine.score_keeper.record_pass()
        state = engine.state
        assert state.level == state.pipes_passed // 8 + 1
        assert state.level >= previous
        previous = state.level

    assert engine.state.level == 6
    assert events.count(GameEvent.LEVEL_UP) == 5


def test_level_up_reports_and_raises_best_level():
    engine, _ = make(pipes_per_level=2)
    keeper = engine.score_keeper
    assert keeper.record_pass() is False
    assert keeper.record_pass() is True
    assert engine.state.level == 2
    assert engine.state.best_level == 2


def test_best_level_is_not_lowered_by_an_easier_round():
    engine, _ = make(pipes_per_level=2)
    engine.state.best_level = 9
    engine.score_keeper.record_pass()
    engine.score_keeper.record_pass()
    assert engine.state.best_level == 9


def test_settle_round_keeps_the_maximum():
    engine, _ = make()
    state = engine.state
    state.high_score, state.best_level = 30, 4

    state.score, state.level = 12, 2
    engine.score_keeper.settle_round()
    assert (state.high_score, state.best_level) == (30, 4)

    state.score, state.level = 31, 5
    engine.score_keeper.settle_round()
    assert (state.high_score, state.best_level) == (31, 5)
