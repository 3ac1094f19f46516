"""
Collision detection - wall queries, line of sight and entity contact
"""

import math

from utils.constants import WALL, SIGHT_STEP
from utils.helpers import circles_touch


class CollisionOracle:
    """
    Answers "is this world point blocked" for a maze grid
    Out-of-bounds and WALL cells block; OPEN and DOOR cells don't.
    """
    def __init__(self, grid, cell_size):
        self.grid = grid
        self.cell_size = cell_size

    def cell_at(self, x, y):
        """Map world coordinates to (col, row)"""
        return (math.floor(x / self.cell_size), math.floor(y / self.cell_size))

    def is_blocked(self, x, y):
        col, row = self.cell_at(x, y)
        if not self.grid.in_bounds(col, row):
            return True
        return self.grid.get(col, row) == WALL

    def has_line_of_sight(self, x0, y0, x1, y1, max_distance, step=SIGHT_STEP):
        """
        Sampled straight-line check from (x0, y0) towards (x1, y1)

        Fails when the points are further apart than max_distance or when
        any sample along the segment is blocked. The origin itself is the
        first sample; the target point is not sampled.
        """
        dx = x1 - x0
        dy = y1 - y0
        dist = math.sqrt(dx * dx + dy * dy)

        if dist > max_distance:
            return False

        steps = int(dist // step)
        for i in range(steps):
            if self.is_blocked(x0 + dx * i / steps, y0 + dy * i / steps):
                return False

        return True

    def __repr__(self):
        return f"CollisionOracle(grid={self.grid.cols}x{self.grid.rows}, cell={self.cell_size})"


class CollisionHandler:
    """
    Handles entity-vs-entity contact for the player
    """
    def collect_pickups(self, player, collectible_manager):
        """
        Remove and return every collectible overlapping the player

        Args:
            player: Player object
            collectible_manager: CollectibleManager object

        Returns:
            List of collected Collectible objects
        """
        return collectible_manager.collect_touching(player)

    def enemy_contacts(self, player, enemy_manager):
        """Yield each enemy touching the player's current position"""
        for enemy in list(enemy_manager.enemies):
            if entities_touch(player, enemy):
                yield enemy


def entities_touch(a, b):
    """Circular proximity test between two entities"""
    return circles_touch(a.x, a.y, a.size, b.x, b.y, b.size)
