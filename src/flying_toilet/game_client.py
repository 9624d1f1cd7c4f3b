"""
game_client.py

Pygame front end: fixed-step simulation, input, audio, persistence and rendering.
"""

import argparse
import logging
import random
from typing import Optional

import pygame

from .config import GameConfig
from .constants import DB_FILE, FPS, MAX_STEPS_PER_FRAME, TICK_TIME, WINDOW_SCALE
from .audio import AudioPlayer
from .game_db import Database
from .game_engine import GameEngine
from .input_handler import InputHandler
from .logger import setup_logging
from .renderer import Renderer

logger = logging.getLogger(__name__)


class GameClient:
    def __init__(self, config: GameConfig, db: Database, scale: float = WINDOW_SCALE,
                 seed: Optional[int] = None, force_mute: bool = False):
        pygame.init()
        self.config = config
        self.db = db

        size = (int(config.world_width * scale), int(config.world_height * scale))
        self.screen = pygame.display.set_mode(size)
        pygame.display.set_caption("Flying Toilet")

        # --- Game Logic ---
        save_data = db.load()
        logger.info("Loaded save: high score %d, best level %d", save_data.high_score, save_data.best_level)
        self.engine = GameEngine(config, save_data=save_data, rng=random.Random(seed))
        if force_mute and not self.engine.state.muted:
            self.engine.toggle_mute()

        # --- Collaborators ---
        self.audio = AudioPlayer()
        self.engine.subscribe(self.audio.on_event)
        self.engine.subscribe(db.on_event)
        self.input = InputHandler(self.engine, window_size=size)
        self.renderer = Renderer(config, self.screen)

        # Time Management
        self.clock = pygame.time.Clock()
        self.tick_timer = 0.0

    def run(self):
        """The main client execution loop."""
        running = True
        while running:
            frame_time = self.clock.tick(FPS) / 1000.0

            for event in pygame.event.get():
                if not self.input.handle(event):
                    running = False

            # --- Simulation Loop (Fixed Timestep) ---
            self.tick_timer += frame_time
            steps = 0
            while self.tick_timer >= TICK_TIME and steps < MAX_STEPS_PER_FRAME:
                self.tick_timer -= TICK_TIME
                self.engine.tick()
                steps += 1
            if steps == MAX_STEPS_PER_FRAME:
                # Too far behind: drop the backlog instead of spiralling
                self.tick_timer = 0.0

            self.renderer.draw(self.engine.snapshot())

    def shutdown(self):
        logger.info("Shutting down. High score %d", self.engine.state.high_score)
        self.audio.close()
        self.db.close()
        pygame.quit()


def _parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Flying Toilet: fly through the pipes.")
    parser.add_argument("--db", default=DB_FILE, help="SQLite file for high scores and settings.")
    parser.add_argument("--log-level", default="info", help="debug, info, warning or error.")
    parser.add_argument("--log-file", default=None, help="Optional NDJSON log file.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for pipe placement.")
    parser.add_argument("--mute", action="store_true", help="Start with sound muted.")
    parser.add_argument("--scale", type=float, default=WINDOW_SCALE, help="Window scale factor.")
    return parser.parse_args(argv)


def main(argv=None) -> None:
    args = _parse_args(argv)
    setup_logging(level=args.log_level, log_file=args.log_file)

    config = GameConfig.from_env()
    client = GameClient(config, Database(args.db), scale=args.scale,
                        seed=args.seed, force_mute=args.mute)
    try:
        client.run()
    except KeyboardInterrupt:
        logger.info("Interrupted")
    finally:
        client.shutdown()
