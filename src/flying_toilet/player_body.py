"""
player_body.py: The flying toilet.
"""

from .config import GameConfig
from .data_models import Bounds, GameMode
from .events import GameEvent
from .physics_core import PhysicsCore
from .state_machine import GameStateMachine


class PlayerBody:
    """
    Vertical position and velocity of the toilet. X never changes.
    """

    def __init__(self, config: GameConfig, physics: PhysicsCore, machine: GameStateMachine):
        self.config = config
        self.physics = physics
        self.machine = machine

        self.x = float(config.toilet_x)
        self.width = config.toilet_width
        self.height = config.toilet_height
        self.y = 0.0
        self.velocity = 0.0
        self.reset()

    def reset(self):
        self.y = self.config.world_height / 2
        self.velocity = 0.0

    def flap(self) -> bool:
        """
        Applies the flap impulse. A flap on the start screen begins the round.
        """
        if self.machine.mode not in (GameMode.START, GameMode.PLAYING):
            return False

        self.velocity = self.physics.flap()
        self.machine.bus.emit(GameEvent.FLAP, self.machine.state)
        if self.machine.mode is GameMode.START:
            self.machine.start()
        return True

    def update(self):
        if not self.machine.is_playing:
            return

        self.y, self.velocity = self.physics.apply_gravity_and_movement(self.y, self.velocity)

        self.y, hit_boundary = self.physics.clamp_to_world(self.y, self.height)
        if hit_boundary:
            self.velocity = 0.0
            self.machine.end_round()

    def get_bounds(self) -> Bounds:
        return Bounds(self.x, self.y, self.width, self.height)
