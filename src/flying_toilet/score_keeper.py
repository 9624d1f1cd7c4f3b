"""
score_keeper.py: Score, level and best-ever bookkeeping.
"""

import logging

from .data_models import GameState
from .difficulty import DifficultyCurve
from .events import EventBus, GameEvent

logger = logging.getLogger(__name__)


class ScoreKeeper:

    def __init__(self, state: GameState, curve: DifficultyCurve, bus: EventBus):
        self.state = state
        self.curve = curve
        self.bus = bus

    def record_pass(self) -> bool:
        """
        Credits one passed pipe and recomputes the level.
        Returns True when the level went up.
        """
        state = self.state
        state.score += 1
        state.pipes_passed += 1
        self.bus.emit(GameEvent.SCORE, state)

        new_level = self.curve.level_for(state.pipes_passed)
        if new_level <= state.level:
            return False

        state.level = new_level
        state.best_level = max(state.best_level, new_level)
        logger.info("Level up: %d (pipes passed: %d)", new_level, state.pipes_passed)
        self.bus.emit(GameEvent.LEVEL_UP, state)
        return True

    def settle_round(self):
        """Folds the finished round into the best-ever records."""
        state = self.state
        if state.score > state.high_score:
            logger.info("New high score: %d", state.score)
        state.high_score = max(state.high_score, state.score)
        state.best_level = max(state.best_level, state.level)

    def reset_round(self):
        self.state.reset_round()
