"""
game_db.py: Key-value persistence for the high score, best level and mute flag.

Failures never reach the simulation: they are logged and defaults are used.
"""

import json
import logging
import sqlite3
from typing import Optional

from .constants import DB_FILE, SAVE_KEY
from .data_models import GameState, SaveData
from .events import GameEvent

logger = logging.getLogger(__name__)


class Database:
    """Handles all interaction with the SQLite database."""

    def __init__(self, db_file: str = DB_FILE, key: str = SAVE_KEY):
        self.db_file = db_file
        self.key = key
        self.conn: Optional[sqlite3.Connection] = None
        try:
            self.conn = sqlite3.connect(db_file)
            self.setup()
        except sqlite3.Error as e:
            logger.warning("Save store %s unavailable, progress will not be kept: %s", db_file, e)
            self.close()

    def setup(self):
        """Creates tables if they don't exist."""
        self.conn.execute("""
            CREATE TABLE IF NOT EXISTS Store (
                key TEXT PRIMARY KEY,
                value TEXT NOT NULL
            )
        """)
        self.conn.commit()

    @property
    def available(self) -> bool:
        return self.conn is not None

    def load(self) -> SaveData:
        """Returns the saved record, or defaults when it is missing or unreadable."""
        if self.conn is None:
            return SaveData()
        try:
            row = self.conn.execute(
                "SELECT value FROM Store WHERE key=?", (self.key,)).fetchone()
            if row is None:
                return SaveData()
            return SaveData.from_dict(json.loads(row[0]))
        except (sqlite3.Error, ValueError, TypeError) as e:
            logger.warning("Failed to load game data, using defaults: %s", e)
            return SaveData()

    def save(self, data: SaveData) -> bool:
        if self.conn is None:
            return False
        try:
            self.conn.execute(
                "INSERT OR REPLACE INTO Store (key, value) VALUES (?, ?)",
                (self.key, json.dumps(data.to_dict())))
            self.conn.commit()
        except sqlite3.Error as e:
            logger.warning("Failed to save game data: %s", e)
            return False
        logger.debug("Saved %s", data)
        return True

    def on_event(self, event: GameEvent, state: GameState):
        """Event listener: persist on round end and on mute toggle."""
        if event in (GameEvent.ROUND_END, GameEvent.MUTE):
            self.save(state.to_save_data())

    def close(self):
        if self.conn is not None:
            self.conn.close()
            self.conn = None
