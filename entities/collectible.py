"""
Collectible entities
Picked up on contact for score, never respawn
"""

import random

from utils.colors import COLLECTIBLE_COLORS
from utils.constants import OBJECT_SIZE, PICKUP_SCORE
from utils.helpers import circles_touch


class Collectible:
    """
    Static pickup (drawn as a chalice)
    """
    def __init__(self, x, y, color, size=OBJECT_SIZE):
        """
        Args:
            x, y: World position (centre)
            color: RGB color
            size: Diameter in world units
        """
        self.x = x
        self.y = y
        self.color = color
        self.size = size

    def touches(self, entity):
        """Check overlap with an entity"""
        return circles_touch(self.x, self.y, self.size, entity.x, entity.y, entity.size)

    def __repr__(self):
        return f"Collectible(pos=({self.x:.1f},{self.y:.1f}), color={self.color})"


class CollectibleManager:
    """
    Manages the live set of collectibles in the level
    """
    def __init__(self, reward=PICKUP_SCORE):
        self.collectibles = []
        self.reward = reward

    def add_collectible(self, x, y, color=None, size=OBJECT_SIZE, rng=None):
        """
        Add a collectible to the level

        Args:
            x, y: World position
            color: RGB color, random palette color if None
            size: Diameter

        Returns:
            Collectible object
        """
        if color is None:
            color = (rng or random).choice(COLLECTIBLE_COLORS)

        collectible = Collectible(x, y, color, size)
        self.collectibles.append(collectible)
        return collectible

    def collect_touching(self, entity):
        """
        Remove every collectible overlapping the entity

        Returns:
            List of removed Collectible objects
        """
        taken = []
        kept = []
        for collectible in self.collectibles:
            if collectible.touches(entity):
                taken.append(collectible)
            else:
                kept.append(collectible)

        if taken:
            self.collectibles = kept
        return taken

    def score_for(self, collected):
        """Score awarded for a batch of pickups"""
        return len(collected) * self.reward

    def remaining(self):
        return len(self.collectibles)

    def is_empty(self):
        return not self.collectibles

    def clear(self):
        """Remove all collectibles"""
        self.collectibles.clear()

    def __repr__(self):
        return f"CollectibleManager(remaining={len(self.collectibles)})"
