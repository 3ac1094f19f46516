"""
Enemy AI entities
Chase the player on sight, wander otherwise
"""

import math
import random
from enum import Enum, auto
from pygame.math import Vector2

from entities.entity import Entity
from utils.colors import COLOR_ENEMY
from utils.constants import (
    ENEMY_SIZE, ENEMY_SPEED, ENEMY_WANDER_TICKS, ENEMY_SIGHT_CELLS,
    CELL_SIZE, SIGHT_STEP, DAMPING
)


class EnemyState(Enum):
    """Behavior states; recomputed every tick, never stored"""
    CHASING = auto()
    WANDERING = auto()


def behavior_state(enemy, player, oracle):
    """
    Decide what an enemy does this tick

    CHASING when the player is within sight range with no wall sampled
    along the straight line between them, WANDERING otherwise.
    """
    if oracle.has_line_of_sight(enemy.x, enemy.y, player.x, player.y,
                                enemy.sight_range, enemy.sight_step):
        return EnemyState.CHASING
    return EnemyState.WANDERING


class Enemy(Entity):
    """
    Reactive pursuer
    """
    def __init__(self, x, y, size=ENEMY_SIZE, speed=ENEMY_SPEED,
                 wander_ticks=ENEMY_WANDER_TICKS,
                 sight_range=ENEMY_SIGHT_CELLS * CELL_SIZE, sight_step=SIGHT_STEP,
                 damping=DAMPING):
        """
        Args:
            x, y: World position
            size: Diameter in world units
            speed: Chase / wander speed
            wander_ticks: Ticks between random heading changes
            sight_range: Max distance at which the player can be seen
            sight_step: Sampling step for line of sight
        """
        super().__init__(x, y, size, COLOR_ENEMY, damping)
        self.speed = speed
        self.wander_ticks = wander_ticks
        self.sight_range = sight_range
        self.sight_step = sight_step

        # Ticks until the next random heading
        self.wander_cooldown = 0

    def update(self, player, oracle, rng=None):
        """
        Update enemy AI for one tick

        Args:
            player: Player object
            oracle: CollisionOracle
            rng: random.Random (module random if None)

        Returns:
            EnemyState the enemy acted on
        """
        rng = rng or random
        self.integrate(oracle)

        state = behavior_state(self, player, oracle)
        if state == EnemyState.CHASING:
            self._chase(player)
        elif self.wander_cooldown <= 0:
            self.pick_random_heading(rng)
            self.wander_cooldown = self.wander_ticks
        else:
            self.wander_cooldown -= 1

        # Wall ahead: turn somewhere else
        if oracle.is_blocked(self.x + self.velocity.x, self.y + self.velocity.y):
            self.pick_random_heading(rng)

        self.face_velocity()
        return state

    def _chase(self, player):
        """Head straight at the player"""
        to_player = Vector2(player.x - self.x, player.y - self.y)
        if to_player.length_squared() == 0:
            self.velocity.update(0, 0)
            return
        self.velocity = to_player.normalize() * self.speed

    def pick_random_heading(self, rng):
        angle = rng.random() * math.pi * 2
        self.velocity = Vector2(math.cos(angle), math.sin(angle)) * self.speed

    def __repr__(self):
        return f"Enemy(pos=({self.x:.1f},{self.y:.1f}), cooldown={self.wander_cooldown})"


class EnemyManager:
    """
    Manages all enemies in the level
    """
    def __init__(self):
        self.enemies = []

    def add_enemy(self, x, y, **kwargs):
        """Add an enemy to the level"""
        enemy = Enemy(x, y, **kwargs)
        self.enemies.append(enemy)
        return enemy

    def update(self, player, oracle, rng=None):
        """
        Update all enemies

        Returns:
            Number of enemies chasing the player this tick
        """
        chasing = 0
        for enemy in self.enemies:
            if enemy.update(player, oracle, rng) == EnemyState.CHASING:
                chasing += 1
        return chasing

    def clear(self):
        """Remove all enemies"""
        self.enemies.clear()

    def __len__(self):
        return len(self.enemies)

    def __repr__(self):
        return f"EnemyManager(enemies={len(self.enemies)})"
