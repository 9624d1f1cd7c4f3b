"""Flying Toilet: an endless-runner arcade game built around a fixed-step simulation."""

from .config import GameConfig
from .data_models import Bounds, FrameSnapshot, GameMode, GameState, Pipe, SaveData
from .events import EventBus, GameEvent
from .game_engine import GameEngine

__all__ = [
    "Bounds",
    "EventBus",
    "FrameSnapshot",
    "GameConfig",
    "GameEngine",
    "GameEvent",
    "GameMode",
    "GameState",
    "Pipe",
    "SaveData",
]
