"""
physics_core.py: The shared, deterministic kinematic functions and collision logic.
"""

from typing import Tuple

from .config import GameConfig
from .data_models import Bounds, Pipe


class PhysicsCore:
    """
    Stateless per-frame physics used by the player body and the pipe field.
    """

    def __init__(self, config: GameConfig):
        self.config = config

    def apply_gravity_and_movement(self, y: float, velocity: float) -> Tuple[float, float]:
        """
        Integrates one frame. Only the downward speed is clamped.
        """
        velocity += self.config.gravity
        velocity = min(velocity, self.config.max_velocity)
        y += velocity
        return y, velocity

    def flap(self) -> float:
        """Returns the instantaneous velocity after a flap."""
        return self.config.flap_impulse

    def clamp_to_world(self, y: float, height: float) -> Tuple[float, bool]:
        """
        Keeps a body between the ceiling and the ground.
        Returns the clamped y and whether a clamp happened.
        """
        lowest = self.config.floor_y - height
        if y < 0:
            return 0.0, True
        if y > lowest:
            return lowest, True
        return y, False

    def check_collision(self, bounds: Bounds, pipe: Pipe) -> bool:
        """AABB test of a body against one pipe's two barriers."""
        pipe_right = pipe.x + self.config.pipe_width
        if bounds.right > pipe.x and bounds.x < pipe_right:
            # Horizontally aligned, so anything outside the gap is a hit
            if bounds.y < pipe.top_height or bounds.bottom > pipe.bottom_y:
                return True
        return False

    def has_passed(self, pipe: Pipe, player_x: float) -> bool:
        """A pipe is passed once its right edge is behind the player's x."""
        return pipe.x + self.config.pipe_width < player_x

    def is_off_screen(self, pipe: Pipe) -> bool:
        return pipe.x + self.config.pipe_width < 0
