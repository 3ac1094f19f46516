"""
Base moving entity - position, size, heading and damped velocity
"""

import math
from pygame.math import Vector2

from utils.constants import DAMPING


class Entity:
    """
    Anything that moves through the maze in world coordinates
    """
    def __init__(self, x, y, size, color, damping=DAMPING):
        """
        Args:
            x, y: World position (centre)
            size: Diameter in world units
            color: RGB color for rendering
            damping: Velocity scale applied every tick
        """
        self.x = x
        self.y = y
        self.size = size
        self.color = color
        self.angle = 0.0
        self.velocity = Vector2(0, 0)
        self.damping = damping

    def integrate(self, oracle):
        """
        Advance one tick: move by velocity, then damp it

        X and Y are checked separately so the entity can slide along a wall;
        a blocked axis keeps its coordinate and loses its velocity component.
        """
        new_x = self.x + self.velocity.x
        if oracle.is_blocked(new_x, self.y):
            self.velocity.x = 0
        else:
            self.x = new_x

        new_y = self.y + self.velocity.y
        if oracle.is_blocked(self.x, new_y):
            self.velocity.y = 0
        else:
            self.y = new_y

        self.velocity *= self.damping

    def face_velocity(self):
        """Point heading along the current velocity"""
        self.angle = math.atan2(self.velocity.y, self.velocity.x)

    def current_speed(self):
        """Current velocity magnitude"""
        return self.velocity.length()

    def place(self, x, y):
        """Teleport to a position and stop"""
        self.x = x
        self.y = y
        self.velocity.update(0, 0)

    def __repr__(self):
        return f"{type(self).__name__}(pos=({self.x:.1f},{self.y:.1f}), vel=({self.velocity.x:.2f},{self.velocity.y:.2f}))"
