"""
difficulty.py: Level-driven difficulty curve.

Every output is a pure function of the 1-indexed level, clamped so that
levels past the clamp point change nothing.
"""

from .config import GameConfig


class DifficultyCurve:

    def __init__(self, config: GameConfig):
        self.config = config

    def gap(self, level: int) -> float:
        cfg = self.config
        return max(cfg.base_gap - (level - 1) * cfg.gap_decrement, cfg.min_gap)

    def speed(self, level: int) -> float:
        cfg = self.config
        return min(cfg.base_speed + (level - 1) * cfg.speed_increment, cfg.max_speed)

    def spawn_interval(self, level: int) -> int:
        cfg = self.config
        return max(cfg.base_spawn_interval - (level - 1) * cfg.spawn_decrement,
                   cfg.min_spawn_interval)

    def level_for(self, pipes_passed: int) -> int:
        return pipes_passed // self.config.pipes_per_level + 1

    def speed_percent(self, level: int) -> int:
        """How far along the speed ramp a level is, 0-100, for the HUD."""
        cfg = self.config
        span = cfg.max_speed - cfg.base_speed
        if span <= 0:
            return 100
        return round((self.speed(level) - cfg.base_speed) / span * 100)
