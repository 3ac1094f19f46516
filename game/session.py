"""
Game Session - owns the level, counters and the per-tick simulation pass
"""

import logging
import random

from maze.generator import generate_maze, place_doors
from entities.player import Player
from entities.enemy import EnemyManager
from entities.collectible import CollectibleManager
from entities.door import doors_from_cells
from game.collision import CollisionOracle, CollisionHandler
from game.camera import Camera
from game.game_state import LevelComplete, LifeLost, GameOver
from utils.config import GameConfig
from utils.constants import OPEN, START_LEVEL

logger = logging.getLogger(__name__)


class MoveIntent:
    """
    Input for one tick: axis signals in {-1, 0, 1} and a dash trigger
    """
    def __init__(self, dx=0, dy=0, dash=False):
        self.dx = max(-1, min(1, dx))
        self.dy = max(-1, min(1, dy))
        self.dash = dash

    def is_idle(self):
        return self.dx == 0 and self.dy == 0 and not self.dash

    def __repr__(self):
        return f"MoveIntent(dx={self.dx}, dy={self.dy}, dash={self.dash})"


IDLE = MoveIntent()


class Level:
    """
    One generated maze with its doors, player, enemies and collectibles
    """
    def __init__(self, config, rng):
        """
        Args:
            config: GameConfig
            rng: random.Random used for every random choice in the level
        """
        self.config = config
        self.rng = rng
        self.cols = config.cols
        self.rows = config.rows
        self.cell_size = config.cell_size
        self.start_pos = config.start_pos

        # Maze data
        self.grid = None
        self.doors = []
        self.oracle = None

        # Entities
        self.player = None
        self.enemy_manager = EnemyManager()
        self.collectible_manager = CollectibleManager(config.pickup_score)

        self._generate()

    def _generate(self):
        """Carve the maze, place doors and spawn everything"""
        self.enemy_manager.clear()
        self.collectible_manager.clear()

        self.grid = generate_maze(self.cols, self.rows, self.rng)
        door_cells = place_doors(self.grid, self.config.door_count, self.rng,
                                 self.config.door_attempts)
        self.doors = doors_from_cells(door_cells, self.cell_size)
        self.oracle = CollisionOracle(self.grid, self.cell_size)
        self._spawn_entities()

    def cell_center(self, x, y):
        """World position of a cell's centre"""
        return ((x + 0.5) * self.cell_size, (y + 0.5) * self.cell_size)

    def _spawn_entities(self):
        """Spawn player, enemies and collectibles"""
        cfg = self.config

        # Create player
        self.player = Player(
            self.start_pos[0], self.start_pos[1],
            size=cfg.player_size,
            accel=cfg.player_accel,
            max_speed=cfg.player_max_speed,
            dash_speed=cfg.player_dash_speed,
            dash_duration_ms=cfg.dash_duration_ms,
            dash_cooldown_ms=cfg.dash_cooldown_ms,
            invulnerability_ms=cfg.hit_invulnerability_ms,
            damping=cfg.damping,
        )

        open_cells = self.grid.open_cells()

        # Spawn enemies away from the start corner
        safe = cfg.safe_start_cells
        enemy_cells = [(x, y) for x, y in open_cells if not (x < safe and y < safe)]
        if cfg.enemy_count and not enemy_cells:
            logger.warning("No open cell outside the start corner, spawning no enemies")
        elif enemy_cells:
            for _ in range(cfg.enemy_count):
                x, y = self.cell_center(*self.rng.choice(enemy_cells))
                self.enemy_manager.add_enemy(
                    x, y,
                    size=cfg.enemy_size,
                    speed=cfg.enemy_speed,
                    wander_ticks=cfg.enemy_wander_ticks,
                    sight_range=cfg.enemy_sight_cells * cfg.cell_size,
                    sight_step=cfg.sight_step,
                    damping=cfg.damping,
                )

        # Spawn collectibles on any open cell
        for _ in range(cfg.collectible_count):
            x, y = self.cell_center(*self.rng.choice(open_cells))
            self.collectible_manager.add_collectible(x, y, size=cfg.object_size, rng=self.rng)

        logger.debug("Spawned %d enemies and %d collectibles",
                     len(self.enemy_manager), self.collectible_manager.remaining())

    def reset_player(self):
        """Put the player back at the start, maze untouched"""
        self.player.reset_position(*self.start_pos)

    def __repr__(self):
        return (f"Level(size={self.cols}x{self.rows}, doors={len(self.doors)}, "
                f"enemies={len(self.enemy_manager)}, left={self.collectible_manager.remaining()})")


class GameSession:
    """
    One playable game: current level plus score, level number and lives
    """
    def __init__(self, config=None, rng=None):
        """
        Args:
            config: GameConfig (defaults if None)
            rng: random.Random; seeded from config.seed if None
        """
        self.config = config or GameConfig()
        self.rng = rng or random.Random(self.config.seed)

        self.score = 0
        self.level = START_LEVEL
        self.lives = self.config.start_lives

        world_w, world_h = self.config.world_size
        self.camera = Camera(self.config.viewport_w, self.config.viewport_h, world_w, world_h)
        self.collision_handler = CollisionHandler()

        self.current = None
        self.tick_count = 0
        self.new_level()

    # ----- accessors -----

    @property
    def grid(self):
        return self.current.grid

    @property
    def player(self):
        return self.current.player

    @property
    def enemies(self):
        return self.current.enemy_manager.enemies

    @property
    def collectibles(self):
        return self.current.collectible_manager.collectibles

    # ----- lifecycle -----

    def new_level(self):
        """Regenerate maze, enemies and collectibles; counters untouched"""
        self.current = Level(self.config, self.rng)
        self.camera.update(self.player.x, self.player.y)
        logger.info("Level %d ready: %r", self.level, self.current)

    def reset(self):
        """Start over from level 1 with full lives"""
        self.score = 0
        self.level = START_LEVEL
        self.lives = self.config.start_lives
        self.new_level()

    def resize_viewport(self, width, height):
        self.camera.resize(width, height)
        self.camera.update(self.player.x, self.player.y)

    # ----- simulation -----

    def tick(self, intent=None, now_ms=0):
        """
        Advance the simulation by one frame

        Args:
            intent: MoveIntent for this frame (idle if None)
            now_ms: Wall clock in milliseconds, drives the dash timers

        Returns:
            List of GameEvent emitted this tick
        """
        intent = intent or IDLE
        level = self.current
        player = level.player
        oracle = level.oracle
        events = []
        self.tick_count += 1

        # Player
        if intent.dx or intent.dy:
            player.move(intent.dx, intent.dy, oracle)
        if intent.dash:
            player.dash(now_ms)
        player.update(now_ms, oracle)
        self.camera.update(player.x, player.y)

        # Enemies
        level.enemy_manager.update(player, oracle, self.rng)

        # Pickups
        collected = self.collision_handler.collect_pickups(player, level.collectible_manager)
        if collected:
            self.score += level.collectible_manager.score_for(collected)

        # Level complete
        if level.collectible_manager.is_empty():
            events.append(LevelComplete(self.level, self.score))
            logger.info("Level %d complete, score %d", self.level, self.score)
            self.level += 1
            self.new_level()
            return events

        # Enemy contact
        for _enemy in self.collision_handler.enemy_contacts(player, level.enemy_manager):
            if player.is_invulnerable(now_ms):
                continue

            self.lives -= 1
            if self.lives <= 0:
                events.append(GameOver(self.score))
                logger.info("Game over, final score %d", self.score)
                self.reset()
                break

            player.register_hit(now_ms)
            level.reset_player()
            self.camera.update(player.x, player.y)
            events.append(LifeLost(self.lives))
            logger.info("Life lost, %d left", self.lives)

        return events

    # ----- presentation view -----

    def snapshot(self, now_ms=0):
        """
        Read-only view of the session for rendering

        Returns:
            dict with grid, doors, player, enemies, collectibles, counters
            and camera offset; nothing in it aliases live state.
        """
        player = self.player
        return {
            'grid': {
                'cols': self.grid.cols,
                'rows': self.grid.rows,
                'cell_size': self.config.cell_size,
                'cells': tuple(tuple(row) for row in self.grid.cells),
            },
            'doors': [(door.x, door.y) for door in self.current.doors],
            'player': {
                'x': player.x,
                'y': player.y,
                'size': player.size,
                'angle': player.angle,
                'dash_progress': player.dash_progress(now_ms),
                'dash_state': player.dash_state(now_ms).name,
            },
            'enemies': [
                {'x': e.x, 'y': e.y, 'size': e.size, 'angle': e.angle}
                for e in self.enemies
            ],
            'collectibles': [
                {'x': c.x, 'y': c.y, 'size': c.size, 'color': c.color}
                for c in self.collectibles
            ],
            'score': self.score,
            'level': self.level,
            'lives': self.lives,
            'camera': self.camera.offset,
        }

    def __repr__(self):
        return f"GameSession(level={self.level}, score={self.score}, lives={self.lives})"
