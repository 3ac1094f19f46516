"""
Game configuration for Maze Survival
Every field defaults to the matching constant in utils.constants
"""

import os

from utils.constants import (
    CELL_SIZE, MAZE_WIDTH, MAZE_HEIGHT,
    PLAYER_SIZE, ENEMY_SIZE, OBJECT_SIZE,
    ENEMY_COUNT, DOOR_COUNT, COLLECTIBLES_COUNT, DOOR_PLACE_ATTEMPTS,
    SAFE_START_CELLS, DAMPING,
    PLAYER_ACCEL, PLAYER_MAX_SPEED, PLAYER_DASH_SPEED,
    DASH_DURATION_MS, DASH_COOLDOWN_MS,
    ENEMY_SPEED, ENEMY_WANDER_TICKS, ENEMY_SIGHT_CELLS, SIGHT_STEP,
    PICKUP_SCORE, START_LIVES, INVULNERABILITY_MS,
    DEFAULT_SCREEN_W, DEFAULT_SCREEN_H,
)


ENV_PREFIX = "MAZE_"


class GameConfig:
    """Startup configuration for a game session"""
    def __init__(self, **kwargs):
        # Maze
        self.cols = kwargs.get('cols', MAZE_WIDTH)
        self.rows = kwargs.get('rows', MAZE_HEIGHT)
        self.cell_size = kwargs.get('cell_size', CELL_SIZE)

        # Entity sizes
        self.player_size = kwargs.get('player_size', PLAYER_SIZE)
        self.enemy_size = kwargs.get('enemy_size', ENEMY_SIZE)
        self.object_size = kwargs.get('object_size', OBJECT_SIZE)

        # Population
        self.enemy_count = kwargs.get('enemy_count', ENEMY_COUNT)
        self.door_count = kwargs.get('door_count', DOOR_COUNT)
        self.collectible_count = kwargs.get('collectible_count', COLLECTIBLES_COUNT)
        self.door_attempts = kwargs.get('door_attempts', DOOR_PLACE_ATTEMPTS)
        self.safe_start_cells = kwargs.get('safe_start_cells', SAFE_START_CELLS)

        # Motion
        self.damping = kwargs.get('damping', DAMPING)
        self.player_accel = kwargs.get('player_accel', PLAYER_ACCEL)
        self.player_max_speed = kwargs.get('player_max_speed', PLAYER_MAX_SPEED)
        self.player_dash_speed = kwargs.get('player_dash_speed', PLAYER_DASH_SPEED)
        self.dash_duration_ms = kwargs.get('dash_duration_ms', DASH_DURATION_MS)
        self.dash_cooldown_ms = kwargs.get('dash_cooldown_ms', DASH_COOLDOWN_MS)

        # Enemies
        self.enemy_speed = kwargs.get('enemy_speed', ENEMY_SPEED)
        self.enemy_wander_ticks = kwargs.get('enemy_wander_ticks', ENEMY_WANDER_TICKS)
        self.enemy_sight_cells = kwargs.get('enemy_sight_cells', ENEMY_SIGHT_CELLS)
        self.sight_step = kwargs.get('sight_step', SIGHT_STEP)

        # Scoring / lives
        self.pickup_score = kwargs.get('pickup_score', PICKUP_SCORE)
        self.start_lives = kwargs.get('start_lives', START_LIVES)
        self.hit_invulnerability_ms = kwargs.get('hit_invulnerability_ms', INVULNERABILITY_MS)

        # Viewport
        self.viewport_w = kwargs.get('viewport_w', DEFAULT_SCREEN_W)
        self.viewport_h = kwargs.get('viewport_h', DEFAULT_SCREEN_H)

        # Random seed (None = system entropy)
        self.seed = kwargs.get('seed', None)

        self.validate()

    def validate(self):
        """
        Check that the settings describe a playable maze

        Raises:
            ValueError: on a size or count the generator can't honour
        """
        if self.cols < 5 or self.rows < 5:
            raise ValueError(f"maze must be at least 5x5, got {self.cols}x{self.rows}")
        if self.cols % 2 == 1 and self.rows % 2 == 0:
            # Exit cell (cols-1, rows-2) touches no room in this layout
            raise ValueError(f"odd width needs odd height, got {self.cols}x{self.rows}")
        for name in ('cell_size', 'player_size', 'enemy_size', 'object_size', 'sight_step'):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")
        for name in ('enemy_count', 'door_count', 'collectible_count', 'door_attempts'):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must not be negative")
        if self.start_lives < 1:
            raise ValueError("start_lives must be at least 1")
        if not 0.0 <= self.damping < 1.0:
            raise ValueError(f"damping must be in [0, 1), got {self.damping}")

    @property
    def start_pos(self):
        """World position of the player spawn (centre of cell (1, 1))"""
        return (self.cell_size * 1.5, self.cell_size * 1.5)

    @property
    def world_size(self):
        """Maze extent in world units"""
        return (self.cols * self.cell_size, self.rows * self.cell_size)

    @classmethod
    def from_env(cls, environ=None, **kwargs):
        """
        Build a config from MAZE_* environment variables

        MAZE_SEED=42 sets seed, MAZE_ENEMY_COUNT=5 sets enemy_count, ...
        Keyword arguments win over the environment.
        """
        environ = os.environ if environ is None else environ
        defaults = cls()
        overrides = {}

        for key, raw in environ.items():
            if not key.startswith(ENV_PREFIX):
                continue
            name = key[len(ENV_PREFIX):].lower()
            if not hasattr(defaults, name):
                continue
            current = getattr(defaults, name)
            if isinstance(current, float):
                overrides[name] = float(raw)
            elif isinstance(current, int) or current is None:
                overrides[name] = int(raw)

        overrides.update(kwargs)
        return cls(**overrides)

    def __repr__(self):
        return (f"GameConfig(size={self.cols}x{self.rows}, enemies={self.enemy_count}, "
                f"collectibles={self.collectible_count}, seed={self.seed})")
