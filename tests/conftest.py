import pytest

from flying_toilet.config import GameConfig
from flying_toilet.events import GameEvent
from flying_toilet.game_engine import GameEngine


class MidpointRandom:
    """Stands in for random.Random: every gap lands mid-range."""

    def uniform(self, a, b):
        return (a + b) / 2


class EventRecorder:
    def __init__(self):
        self.events = []

    def __call__(self, event, state):
        self.events.append(event)

    def count(self, event: GameEvent) -> int:
        return self.events.count(event)


@pytest.fixture
def config():
    return GameConfig()


@pytest.fixture
def floating_config():
    """No gravity, so the toilet hangs in place at mid-screen."""
    return GameConfig(gravity=0.0)


@pytest.fixture
def engine(config):
    return GameEngine(config, rng=MidpointRandom())


@pytest.fixture
def floating_engine(floating_config):
    return GameEngine(floating_config, rng=MidpointRandom())


@pytest.fixture
def recorder(engine):
    rec = EventRecorder()
    engine.subscribe(rec)
    return rec


@pytest.fixture
def floating_recorder(floating_engine):
    rec = EventRecorder()
    floating_engine.subscribe(rec)
    return rec
