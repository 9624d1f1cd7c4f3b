"""
pipe_field.py: Spawning, scrolling, collision and scoring of pipes.
"""

import logging
import random
from typing import List, Optional

from .config import GameConfig
from .data_models import Pipe
from .difficulty import DifficultyCurve
from .physics_core import PhysicsCore
from .player_body import PlayerBody
from .score_keeper import ScoreKeeper
from .state_machine import GameStateMachine

logger = logging.getLogger(__name__)


class PipeField:
    """
    Owns the live pipes. Spawns append at the right edge and every pipe moves
    at the same speed, so list order is also left-to-right world order.
    """

    def __init__(
        self,
        config: GameConfig,
        physics: PhysicsCore,
        curve: DifficultyCurve,
        machine: GameStateMachine,
        score_keeper: ScoreKeeper,
        player: PlayerBody,
        rng: Optional[random.Random] = None,
    ):
        self.config = config
        self.physics = physics
        self.curve = curve
        self.machine = machine
        self.score_keeper = score_keeper
        self.player = player
        self.rng = rng or random.Random()

        self.pipes: List[Pipe] = []
        # None means a spawn is due on the next update
        self.frames_since_spawn: Optional[int] = None

    @property
    def level(self) -> int:
        return self.machine.state.level

    def current_gap(self) -> float:
        return self.curve.gap(self.level)

    def current_speed(self) -> float:
        return self.curve.speed(self.level)

    def current_spawn_interval(self) -> int:
        return self.curve.spawn_interval(self.level)

    def spawn(self) -> Pipe:
        """Appends a pipe at the right edge with a random gap position."""
        gap = self.current_gap()
        min_y = self.config.pipe_min_margin
        max_y = self.config.floor_y - gap - self.config.pipe_min_bottom_margin
        top_height = self.rng.uniform(min_y, max_y)

        pipe = Pipe(x=float(self.config.world_width), top_height=top_height,
                    bottom_y=top_height + gap)
        self.pipes.append(pipe)
        logger.debug("Spawned pipe top=%.1f gap=%.1f (frame %d)",
                     top_height, gap, self.machine.state.frame)
        return pipe

    def _spawn_due(self) -> bool:
        if self.frames_since_spawn is None:
            return True
        return self.frames_since_spawn >= self.current_spawn_interval()

    def update(self):
        if not self.machine.is_playing:
            return

        if self._spawn_due():
            self.spawn()
            self.frames_since_spawn = 0
        self.frames_since_spawn += 1

        speed = self.current_speed()
        bounds = self.player.get_bounds()
        expired = False

        for pipe in self.pipes:
            pipe.x -= speed

            if self.physics.is_off_screen(pipe):
                expired = True
                continue

            if self.physics.check_collision(bounds, pipe):
                # Keep sweeping so every pipe still moves this frame
                self.machine.end_round()
            elif (not pipe.scored and self.machine.is_playing
                    and self.physics.has_passed(pipe, self.player.x)):
                pipe.scored = True
                self.score_keeper.record_pass()

        if expired:
            self.pipes = [p for p in self.pipes if not self.physics.is_off_screen(p)]

    def reset(self):
        self.pipes = []
        self.frames_since_spawn = None
