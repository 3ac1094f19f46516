"""
Player entity with acceleration, speed cap and dash
"""

from enum import Enum, auto
from pygame.math import Vector2

from entities.entity import Entity
from utils.colors import COLOR_PLAYER
from utils.constants import (
    PLAYER_SIZE, PLAYER_ACCEL, PLAYER_MAX_SPEED, PLAYER_DASH_SPEED,
    DASH_DURATION_MS, DASH_COOLDOWN_MS, INVULNERABILITY_MS, DAMPING
)


class DashState(Enum):
    """Dash phases, derived from time since the last dash start"""
    IDLE = auto()
    DASHING = auto()
    COOLDOWN = auto()


class Player(Entity):
    """
    Player entity driven by movement intent
    """
    def __init__(self, x, y, size=PLAYER_SIZE, accel=PLAYER_ACCEL,
                 max_speed=PLAYER_MAX_SPEED, dash_speed=PLAYER_DASH_SPEED,
                 dash_duration_ms=DASH_DURATION_MS, dash_cooldown_ms=DASH_COOLDOWN_MS,
                 invulnerability_ms=INVULNERABILITY_MS, damping=DAMPING):
        super().__init__(x, y, size, COLOR_PLAYER, damping)
        self.accel = accel
        self.max_speed = max_speed
        self.dash_speed = dash_speed

        # Dash timing (wall clock, milliseconds)
        self.dash_duration_ms = dash_duration_ms
        self.dash_cooldown_ms = dash_cooldown_ms
        self.is_dashing = False
        self.last_dash_time = None  # None = never dashed

        # Post-hit grace window (0 = off)
        self.invulnerability_ms = invulnerability_ms
        self.last_hit_time = None

    def current_cap(self):
        """Speed cap of the active regime"""
        return self.dash_speed if self.is_dashing else self.max_speed

    def move(self, dx, dy, oracle):
        """
        Apply movement intent (dx, dy in -1..1) to velocity

        Adds acceleration for the active regime, renormalises the result to
        the regime's cap and drops any component that would step into a wall.
        """
        accel = self.dash_speed if self.is_dashing else self.accel
        cap = self.current_cap()

        new_velocity = self.velocity + Vector2(dx, dy) * accel
        if new_velocity.length() > cap:
            new_velocity.scale_to_length(cap)

        if oracle.is_blocked(self.x + new_velocity.x, self.y):
            new_velocity.x = 0
        if oracle.is_blocked(self.x, self.y + new_velocity.y):
            new_velocity.y = 0

        self.velocity = new_velocity

        if dx != 0 or dy != 0:
            self.face_velocity()

    def dash(self, now_ms):
        """
        Start a dash if one is available

        Returns:
            True if a dash started
        """
        if self.is_dashing:
            return False
        if self.last_dash_time is not None and now_ms - self.last_dash_time < self.dash_cooldown_ms:
            return False

        self.is_dashing = True
        self.last_dash_time = now_ms
        return True

    def update(self, now_ms, oracle):
        """
        Integrate motion, then end an expired dash

        Args:
            now_ms: Wall clock in milliseconds
            oracle: CollisionOracle gating movement
        """
        self.integrate(oracle)

        if self.is_dashing and now_ms - self.last_dash_time >= self.dash_duration_ms:
            self.is_dashing = False

    def dash_state(self, now_ms):
        if self.is_dashing:
            return DashState.DASHING
        if self.last_dash_time is not None and now_ms - self.last_dash_time < self.dash_cooldown_ms:
            return DashState.COOLDOWN
        return DashState.IDLE

    def dash_progress(self, now_ms):
        """Cooldown recovery in 0..1 (1 = ready)"""
        if self.last_dash_time is None:
            return 1.0
        return max(0.0, min((now_ms - self.last_dash_time) / self.dash_cooldown_ms, 1.0))

    def register_hit(self, now_ms):
        """Record an enemy hit for the grace window"""
        self.last_hit_time = now_ms

    def is_invulnerable(self, now_ms):
        if self.invulnerability_ms <= 0 or self.last_hit_time is None:
            return False
        return now_ms - self.last_hit_time < self.invulnerability_ms

    def reset_position(self, x, y):
        """Reset player to starting position"""
        self.place(x, y)

    def __repr__(self):
        return f"Player(pos=({self.x:.1f},{self.y:.1f}), speed={self.current_speed():.2f}, dashing={self.is_dashing})"
