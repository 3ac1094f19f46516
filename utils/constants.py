"""
Global constants for Maze Survival
"""

# Screen settings
FPS = 60
DEFAULT_SCREEN_W = 1280
DEFAULT_SCREEN_H = 720
MIN_WINDOW_WIDTH = 640
MIN_WINDOW_HEIGHT = 480

# World settings
CELL_SIZE = 80            # World units per grid cell
MAZE_WIDTH = 50
MAZE_HEIGHT = 50

# Cell kinds
OPEN = 0
WALL = 1
DOOR = 2

# Carving directions (dx, dy): up, right, down, left
DIRS = [
    (0, -1),
    (1, 0),
    (0, 1),
    (-1, 0),
]

# Entity sizes (world units)
PLAYER_SIZE = 30
ENEMY_SIZE = 30
OBJECT_SIZE = 20

# Population
ENEMY_COUNT = 20
DOOR_COUNT = 15
COLLECTIBLES_COUNT = 400
DOOR_PLACE_ATTEMPTS = 1000
SAFE_START_CELLS = 3      # Enemies never spawn with col < 3 and row < 3

# Motion
DAMPING = 0.9

# Player settings
PLAYER_ACCEL = 0.5
PLAYER_MAX_SPEED = 3.0
PLAYER_DASH_SPEED = 6.0
DASH_DURATION_MS = 200
DASH_COOLDOWN_MS = 800

# Enemy settings
ENEMY_SPEED = 1.5
ENEMY_WANDER_TICKS = 60
ENEMY_SIGHT_CELLS = 5
SIGHT_STEP = 5            # World units between line-of-sight samples

# Scoring / lives
PICKUP_SCORE = 10
START_LIVES = 3
START_LEVEL = 1
INVULNERABILITY_MS = 0    # 0 keeps every enemy contact damaging

# UI
MESSAGE_DURATION = 2.5    # Seconds a level/game-over banner stays up
