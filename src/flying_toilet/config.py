"""Game configuration loaded from constants with environment overrides."""

from __future__ import annotations

import dataclasses
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from . import constants as C


@dataclass(frozen=True)
class GameConfig:
    """Every simulation tunable. Defaults mirror ``constants.py``."""

    world_width: int = C.WORLD_WIDTH
    world_height: int = C.WORLD_HEIGHT
    ground_height: int = C.GROUND_HEIGHT

    toilet_x: float = C.TOILET_X
    toilet_width: int = C.TOILET_WIDTH
    toilet_height: int = C.TOILET_HEIGHT

    gravity: float = C.GRAVITY
    flap_impulse: float = C.FLAP_IMPULSE
    max_velocity: float = C.MAX_VELOCITY

    pipe_width: int = C.PIPE_WIDTH
    pipe_min_margin: float = C.PIPE_MIN_MARGIN
    pipe_min_bottom_margin: float = C.PIPE_MIN_BOTTOM_MARGIN

    base_speed: float = C.BASE_SPEED
    max_speed: float = C.MAX_SPEED
    speed_increment: float = C.SPEED_INCREMENT

    base_gap: float = C.BASE_GAP
    min_gap: float = C.MIN_GAP
    gap_decrement: float = C.GAP_DECREMENT

    base_spawn_interval: int = C.BASE_SPAWN_INTERVAL
    min_spawn_interval: int = C.MIN_SPAWN_INTERVAL
    spawn_decrement: int = C.SPAWN_DECREMENT

    pipes_per_level: int = C.PIPES_PER_LEVEL

    def __post_init__(self):
        if self.world_width <= 0 or self.world_height <= 0:
            raise ValueError("world dimensions must be positive")
        if not 0 <= self.ground_height < self.world_height:
            raise ValueError("ground_height must fit inside the world")
        if self.toilet_width <= 0 or self.toilet_height <= 0 or self.pipe_width <= 0:
            raise ValueError("body sizes must be positive")
        if self.gravity < 0 or self.max_velocity <= 0:
            raise ValueError("gravity must be >= 0 and max_velocity > 0")
        if self.min_gap <= 0 or self.min_gap > self.base_gap:
            raise ValueError("gap range must satisfy 0 < min_gap <= base_gap")
        if self.base_speed <= 0 or self.max_speed < self.base_speed:
            raise ValueError("speed range must satisfy 0 < base_speed <= max_speed")
        if self.min_spawn_interval < 1 or self.min_spawn_interval > self.base_spawn_interval:
            raise ValueError("spawn interval range must satisfy 1 <= min <= base")
        if self.gap_decrement < 0 or self.speed_increment < 0 or self.spawn_decrement < 0:
            raise ValueError("difficulty steps must not be negative")
        if self.pipes_per_level < 1:
            raise ValueError("pipes_per_level must be >= 1")
        if self.max_top_height < self.pipe_min_margin:
            raise ValueError("world too small for the widest gap and its margins")

    @property
    def floor_y(self) -> float:
        return self.world_height - self.ground_height

    @property
    def max_top_height(self) -> float:
        """Upper bound for a pipe's top barrier at the widest gap."""
        return self.floor_y - self.base_gap - self.pipe_min_bottom_margin

    def replace(self, **changes) -> "GameConfig":
        return dataclasses.replace(self, **changes)

    @classmethod
    def from_env(cls, prefix: str = C.ENV_PREFIX) -> "GameConfig":
        """Build a config from .env and FLYING_TOILET_* environment variables."""
        load_dotenv()

        overrides = {}
        for f in dataclasses.fields(cls):
            raw = os.environ.get(prefix + f.name.upper())
            if raw is None:
                continue
            cast = int if f.type == "int" else float
            try:
                overrides[f.name] = cast(raw)
            except ValueError:
                raise ValueError(f"Invalid value for {prefix}{f.name.upper()}: {raw!r}") from None
        return cls(**overrides)
