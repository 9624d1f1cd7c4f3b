"""Synchronous event bus that lets audio and persistence react to the simulation."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable

from .data_models import GameState

logger = logging.getLogger(__name__)


class GameEvent(str, Enum):
    FLAP = "flap"
    SCORE = "score"
    HIT = "hit"
    LEVEL_UP = "level_up"
    ROUND_START = "round_start"
    ROUND_END = "round_end"
    PAUSE = "pause"
    RESUME = "resume"
    MUTE = "mute"


Listener = Callable[[GameEvent, GameState], None]


class EventBus:
    """Fans each event out to subscribed listeners, in subscription order."""

    def __init__(self) -> None:
        self._listeners: list[Listener] = []

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        try:
            self._listeners.remove(listener)
        except ValueError:
            pass

    def emit(self, event: GameEvent, state: GameState) -> None:
        for listener in list(self._listeners):
            try:
                listener(event, state)
            except Exception:
                # A broken collaborator must not take the frame down with it.
                logger.exception("Listener %r failed on %s", listener, event.value)
