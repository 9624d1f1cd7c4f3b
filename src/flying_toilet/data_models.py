"""
data_models.py: Data structures for the game state.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Tuple


class GameMode(str, Enum):
    START = "start"
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned bounding box in world coordinates."""
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height


@dataclass
class Pipe:
    """A top and bottom barrier pair. The gap is fixed when the pipe spawns."""
    x: float
    top_height: float
    bottom_y: float
    scored: bool = False

    @property
    def gap(self) -> float:
        return self.bottom_y - self.top_height


@dataclass
class GameState:
    """Mode plus per-round and best-ever counters."""
    mode: GameMode = GameMode.START
    score: int = 0
    frame: int = 0
    level: int = 1
    pipes_passed: int = 0

    # Persisted fields
    high_score: int = 0
    best_level: int = 1
    muted: bool = False

    showing_help: bool = False

    def reset_round(self):
        """Zero the per-round counters. Best-ever records are kept."""
        self.score = 0
        self.frame = 0
        self.level = 1
        self.pipes_passed = 0

    def to_save_data(self) -> "SaveData":
        return SaveData(
            high_score=self.high_score,
            muted=self.muted,
            best_level=self.best_level,
        )

    def apply_save_data(self, data: "SaveData"):
        self.high_score = data.high_score
        self.muted = data.muted
        self.best_level = data.best_level


@dataclass(frozen=True)
class SaveData:
    """The only record that outlives the process."""
    high_score: int = 0
    muted: bool = False
    best_level: int = 1

    def to_dict(self) -> Dict[str, Any]:
        return {
            "high_score": self.high_score,
            "muted": self.muted,
            "best_level": self.best_level,
        }

    @classmethod
    def from_dict(cls, data: Any) -> "SaveData":
        """Parse a stored record. Missing fields take their defaults."""
        if not isinstance(data, dict):
            raise ValueError(f"save data must be an object, got {type(data).__name__}")

        high_score = int(data.get("high_score") or 0)
        best_level = int(data.get("best_level") or 1)
        if high_score < 0 or best_level < 1:
            raise ValueError("save data out of range")
        muted = data.get("muted", False)
        if muted is None:
            muted = False
        if not isinstance(muted, bool):
            raise ValueError(f"muted must be a boolean, got {muted!r}")
        return cls(
            high_score=high_score,
            muted=muted,
            best_level=best_level,
        )


@dataclass(frozen=True)
class FrameSnapshot:
    """Read-only view of one frame, handed to the renderer."""
    mode: GameMode
    score: int
    level: int
    pipes_passed: int
    high_score: int
    best_level: int
    muted: bool
    showing_help: bool
    player: Bounds
    pipes: Tuple[Pipe, ...] = field(default_factory=tuple)
    gap: float = 0.0
    speed: float = 0.0
    speed_percent: int = 0
