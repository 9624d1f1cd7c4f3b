"""
state_machine.py: Game modes and the transitions between them.

    START --flap/start--> PLAYING <--toggle_pause--> PAUSED
    PLAYING --collision--> GAME_OVER --restart--> PLAYING

Illegal requests are no-ops that return False; nothing here raises.
"""

import logging
from typing import Callable, List

from .data_models import GameMode, GameState
from .events import EventBus, GameEvent
from .score_keeper import ScoreKeeper

logger = logging.getLogger(__name__)


class GameStateMachine:

    def __init__(self, state: GameState, bus: EventBus, score_keeper: ScoreKeeper):
        self.state = state
        self.bus = bus
        self.score_keeper = score_keeper
        self._restart_hooks: List[Callable[[], None]] = []

    @property
    def mode(self) -> GameMode:
        return self.state.mode

    @property
    def is_playing(self) -> bool:
        return self.state.mode is GameMode.PLAYING

    def add_restart_hook(self, hook: Callable[[], None]):
        """Registers a callable that puts a component back to its initial state."""
        self._restart_hooks.append(hook)

    def _enter(self, mode: GameMode):
        logger.info("Mode: %s -> %s", self.state.mode.value, mode.value)
        self.state.mode = mode

    def start(self) -> bool:
        if self.state.mode is not GameMode.START:
            return False
        self.state.showing_help = False
        self._enter(GameMode.PLAYING)
        self.bus.emit(GameEvent.ROUND_START, self.state)
        return True

    def toggle_pause(self) -> bool:
        if self.state.mode is GameMode.PLAYING:
            self._enter(GameMode.PAUSED)
            self.bus.emit(GameEvent.PAUSE, self.state)
            return True
        if self.state.mode is GameMode.PAUSED:
            self._enter(GameMode.PLAYING)
            self.bus.emit(GameEvent.RESUME, self.state)
            return True
        return False

    def end_round(self) -> bool:
        """
        Enters GAME_OVER. Sticky: a second call in the same round does nothing,
        so simultaneous hits never double-save or double-play the hit sound.
        """
        if self.state.mode is not GameMode.PLAYING:
            return False
        self._enter(GameMode.GAME_OVER)
        self.score_keeper.settle_round()
        self.bus.emit(GameEvent.HIT, self.state)
        self.bus.emit(GameEvent.ROUND_END, self.state)
        return True

    def restart(self) -> bool:
        if self.state.mode is not GameMode.GAME_OVER:
            return False
        self.score_keeper.reset_round()
        for hook in self._restart_hooks:
            hook()
        self.state.showing_help = False
        self._enter(GameMode.PLAYING)
        self.bus.emit(GameEvent.ROUND_START, self.state)
        return True

    def toggle_help(self) -> bool:
        if self.state.mode not in (GameMode.START, GameMode.GAME_OVER):
            return False
        self.state.showing_help = not self.state.showing_help
        return True

    def close_help(self) -> bool:
        if not self.state.showing_help:
            return False
        self.state.showing_help = False
        return True
