"""
input_handler.py: Translates pygame events into simulation calls.
"""

import logging
from typing import Dict, Optional, Tuple

import pygame

from .data_models import GameMode
from .game_engine import GameEngine
from .renderer import button_layout

logger = logging.getLogger(__name__)

FLAP_KEYS = (pygame.K_SPACE, pygame.K_UP)


def point_in_button(x: float, y: float, button: pygame.Rect) -> bool:
    """Inclusive on every edge, unlike Rect.collidepoint."""
    return button.left <= x <= button.right and button.top <= y <= button.bottom


class InputHandler:
    """
    Keyboard and pointer mapping. Illegal actions fall through to the
    engine, which ignores them.
    """

    def __init__(self, engine: GameEngine, window_size: Optional[Tuple[int, int]] = None):
        self.engine = engine
        cfg = engine.config
        self.world_size = (cfg.world_width, cfg.world_height)
        self.window_size = window_size or self.world_size
        self.buttons: Dict[str, pygame.Rect] = button_layout(*self.world_size)

    def to_world(self, pos: Tuple[float, float]) -> Tuple[float, float]:
        """Maps window pixels onto the virtual world."""
        sx = self.world_size[0] / self.window_size[0]
        sy = self.world_size[1] / self.window_size[1]
        return pos[0] * sx, pos[1] * sy

    def handle(self, event: pygame.event.Event) -> bool:
        """Returns False when the player asked to quit."""
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN:
            self.handle_key(event.key)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            # SDL mirrors each tap as a click too; FINGERDOWN already handled it
            if getattr(event, "touch", False):
                return True
            self.handle_click(*self.to_world(event.pos))
        elif event.type == pygame.FINGERDOWN:
            # Touch coordinates are normalized to 0..1
            self.handle_click(event.x * self.world_size[0], event.y * self.world_size[1])
        return True

    def handle_key(self, key: int):
        engine = self.engine
        mode = engine.mode

        if key in FLAP_KEYS:
            if mode in (GameMode.START, GameMode.PLAYING):
                engine.flap()
        elif key == pygame.K_r:
            if mode is GameMode.GAME_OVER:
                engine.restart()
        elif key == pygame.K_m:
            engine.toggle_mute()
        elif key == pygame.K_p:
            engine.toggle_pause()
        elif key == pygame.K_ESCAPE:
            if engine.state.showing_help:
                engine.close_help()
            elif mode is GameMode.PAUSED:
                engine.toggle_pause()

    def handle_click(self, x: float, y: float):
        engine = self.engine
        mode = engine.mode
        b = self.buttons

        # Help overlay swallows everything but its close button
        if engine.state.showing_help:
            if point_in_button(x, y, b["close_help"]):
                engine.close_help()
            return

        if mode is GameMode.START:
            if point_in_button(x, y, b["play"]):
                engine.start()
            elif point_in_button(x, y, b["help_start"]):
                engine.toggle_help()
            else:
                engine.flap()
        elif mode is GameMode.PLAYING:
            if point_in_button(x, y, b["pause"]):
                engine.toggle_pause()
            else:
                engine.flap()
        elif mode is GameMode.PAUSED:
            if point_in_button(x, y, b["pause"]):
                engine.toggle_pause()
        elif mode is GameMode.GAME_OVER:
            if point_in_button(x, y, b["restart"]):
                engine.restart()
            elif point_in_button(x, y, b["help_game_over"]):
                engine.toggle_help()
