"""
game_engine.py: The simulation context.

Owns the state, the player, the pipe field and the event bus for one game.
Nothing here is module-level, so independent engines can run side by side.
"""

import dataclasses
import logging
import random
from typing import Optional

from .config import GameConfig
from .data_models import FrameSnapshot, GameMode, GameState, SaveData
from .difficulty import DifficultyCurve
from .events import EventBus, GameEvent, Listener
from .physics_core import PhysicsCore
from .pipe_field import PipeField
from .player_body import PlayerBody
from .score_keeper import ScoreKeeper
from .state_machine import GameStateMachine

logger = logging.getLogger(__name__)


class GameEngine:

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        save_data: Optional[SaveData] = None,
        rng: Optional[random.Random] = None,
    ):
        self.config = config or GameConfig()
        self.state = GameState()
        if save_data is not None:
            self.state.apply_save_data(save_data)

        self.bus = EventBus()
        self.physics = PhysicsCore(self.config)
        self.curve = DifficultyCurve(self.config)
        self.score_keeper = ScoreKeeper(self.state, self.curve, self.bus)
        self.machine = GameStateMachine(self.state, self.bus, self.score_keeper)
        self.player = PlayerBody(self.config, self.physics, self.machine)
        self.pipes = PipeField(self.config, self.physics, self.curve, self.machine,
                               self.score_keeper, self.player, rng=rng)

        self.machine.add_restart_hook(self.player.reset)
        self.machine.add_restart_hook(self.pipes.reset)

    # ---------- Frame driver ----------

    def tick(self) -> bool:
        """
        Advances the simulation one frame. Returns False when the mode froze it.
        """
        if not self.machine.is_playing:
            return False

        self.player.update()
        self.pipes.update()
        self.state.frame += 1
        return True

    # ---------- Input surface ----------

    def flap(self) -> bool:
        return self.player.flap()

    def start(self) -> bool:
        """Play button: begins the round, then flaps."""
        if not self.machine.start():
            return False
        self.player.flap()
        return True

    def restart(self) -> bool:
        return self.machine.restart()

    def toggle_pause(self) -> bool:
        return self.machine.toggle_pause()

    def toggle_help(self) -> bool:
        return self.machine.toggle_help()

    def close_help(self) -> bool:
        return self.machine.close_help()

    def toggle_mute(self) -> bool:
        """Always legal. Returns the new mute flag."""
        self.state.muted = not self.state.muted
        logger.info("Sound %s", "muted" if self.state.muted else "unmuted")
        self.bus.emit(GameEvent.MUTE, self.state)
        return self.state.muted

    def subscribe(self, listener: Listener):
        self.bus.subscribe(listener)

    # ---------- Read-only views ----------

    @property
    def mode(self) -> GameMode:
        return self.state.mode

    def save_data(self) -> SaveData:
        return self.state.to_save_data()

    def snapshot(self) -> FrameSnapshot:
        state = self.state
        return FrameSnapshot(
            mode=state.mode,
            score=state.score,
            level=state.level,
            pipes_passed=state.pipes_passed,
            high_score=state.high_score,
            best_level=state.best_level,
            muted=state.muted,
            showing_help=state.showing_help,
            player=self.player.get_bounds(),
            pipes=tuple(dataclasses.replace(p) for p in self.pipes.pipes),
            gap=self.pipes.current_gap(),
            speed=self.pipes.current_speed(),
            speed_percent=self.curve.speed_percent(state.level),
        )
