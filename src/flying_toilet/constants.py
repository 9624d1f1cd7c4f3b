"""
constants.py: Centralized configuration for game world, physics and difficulty.
"""

# -------- Timing --------
FPS = 60                        # Simulation ticks per second (one per display refresh)
TICK_TIME = 1.0 / FPS           # Fixed time step
MAX_STEPS_PER_FRAME = 5         # Catch-up limit for the fixed-step loop

# -------- Game World Config --------
WORLD_WIDTH = 600
WORLD_HEIGHT = 600
GROUND_HEIGHT = 50
WINDOW_SCALE = 1.0

# -------- Toilet Config --------
TOILET_X = 80                   # Fixed toilet X position
TOILET_WIDTH = 40
TOILET_HEIGHT = 40

# -------- Physics Config (pixels / frame) --------
GRAVITY = 0.3
FLAP_IMPULSE = -6.5             # Instantaneous velocity, negative is upward
MAX_VELOCITY = 7.0              # Fall speed clamp, never applied upward

# -------- Pipe Config --------
PIPE_WIDTH = 60
PIPE_MIN_MARGIN = 50            # Minimum height of the top barrier
PIPE_MIN_BOTTOM_MARGIN = 100    # Minimum clearance between gap and ground

BASE_SPEED = 1.2
MAX_SPEED = 3.5
SPEED_INCREMENT = 0.12          # 10% of BASE_SPEED per level

BASE_GAP = 200
MIN_GAP = 150
GAP_DECREMENT = 2

BASE_SPAWN_INTERVAL = 180       # Frames between spawns at level 1
MIN_SPAWN_INTERVAL = 110
SPAWN_DECREMENT = 3

# -------- Difficulty Progression --------
PIPES_PER_LEVEL = 8

# -------- Persistence --------
DB_FILE = "flying_toilet.db"
SAVE_KEY = "flyingToiletData"
ENV_PREFIX = "FLYING_TOILET_"
