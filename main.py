"""
Maze Survival
Collect every chalice, stay away from the red arrows
"""

import logging
import math
import os

os.environ.setdefault('PYGAME_HIDE_SUPPORT_PROMPT', '1')

import pygame

from game.session import GameSession, MoveIntent
from game.game_state import GameStateManager
from game.ui_manager import UIManager
from utils.config import GameConfig
from utils.constants import (
    FPS, WALL, DOOR, MESSAGE_DURATION, MIN_WINDOW_WIDTH, MIN_WINDOW_HEIGHT
)
from utils.colors import (
    COLOR_BG, COLOR_WALL, COLOR_WALL_SPECK, COLOR_DOOR, COLOR_DOOR_MARK,
    COLOR_PLAYER, COLOR_ENEMY, COLOR_DASH_RING
)

GAME_TITLE = "Maze Survival"

logger = logging.getLogger(__name__)


class MazeGame:
    """
    Main game class - window, input and drawing around a GameSession
    """
    def __init__(self, config=None):
        pygame.init()

        self.config = config or GameConfig.from_env()
        self.screen = pygame.display.set_mode(
            (self.config.viewport_w, self.config.viewport_h), pygame.RESIZABLE
        )
        pygame.display.set_caption(GAME_TITLE)

        # Managers
        self.session = GameSession(self.config)
        self.state_manager = GameStateManager(MESSAGE_DURATION)
        self.ui_manager = UIManager()

        self.clock = pygame.time.Clock()
        self.running = True

    def handle_events(self):
        """Handle window and key events"""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.running = False
            elif event.type == pygame.VIDEORESIZE:
                w = max(MIN_WINDOW_WIDTH, event.w)
                h = max(MIN_WINDOW_HEIGHT, event.h)
                self.screen = pygame.display.set_mode((w, h), pygame.RESIZABLE)
                self.session.resize_viewport(w, h)

    def read_intent(self):
        """Turn held keys into a MoveIntent"""
        keys = pygame.key.get_pressed()
        dx = dy = 0
        if keys[pygame.K_w] or keys[pygame.K_UP]:
            dy -= 1
        if keys[pygame.K_s] or keys[pygame.K_DOWN]:
            dy += 1
        if keys[pygame.K_a] or keys[pygame.K_LEFT]:
            dx -= 1
        if keys[pygame.K_d] or keys[pygame.K_RIGHT]:
            dx += 1
        return MoveIntent(dx, dy, dash=bool(keys[pygame.K_SPACE]))

    def update(self, dt):
        now = pygame.time.get_ticks()
        for event in self.session.tick(self.read_intent(), now):
            self.state_manager.handle_event(event)
        self.state_manager.update(dt)

    # ========== DRAWING ==========

    def draw_maze(self, snapshot):
        """Draw visible walls and doors"""
        grid = snapshot['grid']
        cell = grid['cell_size']
        cam_x, cam_y = snapshot['camera']
        min_x, max_x, min_y, max_y = self.session.camera.get_visible_range(
            cell, grid['cols'], grid['rows']
        )

        for y in range(min_y, max_y):
            row = grid['cells'][y]
            for x in range(min_x, max_x):
                kind = row[x]
                rect = pygame.Rect(x * cell - cam_x, y * cell - cam_y, cell, cell)
                if kind == WALL:
                    pygame.draw.rect(self.screen, COLOR_WALL, rect)
                    pygame.draw.circle(self.screen, COLOR_WALL_SPECK, rect.center, 3)
                elif kind == DOOR:
                    pygame.draw.rect(self.screen, COLOR_DOOR, rect)
                    pygame.draw.circle(self.screen, COLOR_DOOR_MARK, rect.center, cell // 4)

    def draw_arrow(self, x, y, size, angle, color):
        """Triangle pointing along angle"""
        half = size / 2
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        points = []
        for px, py in ((half, 0), (-half, -half), (-half, half)):
            points.append((x + px * cos_a - py * sin_a, y + px * sin_a + py * cos_a))
        pygame.draw.polygon(self.screen, color, points)

    def render(self):
        now = pygame.time.get_ticks()
        snapshot = self.session.snapshot(now)
        cam_x, cam_y = snapshot['camera']

        self.screen.fill(COLOR_BG)
        self.draw_maze(snapshot)

        for item in snapshot['collectibles']:
            center = (item['x'] - cam_x, item['y'] - cam_y)
            pygame.draw.circle(self.screen, item['color'], center, item['size'] // 2)

        player = snapshot['player']
        px, py = player['x'] - cam_x, player['y'] - cam_y
        self.draw_arrow(px, py, player['size'], player['angle'], COLOR_PLAYER)

        # Dash cooldown ring
        progress = player['dash_progress']
        if progress < 1.0:
            radius = player['size'] / 2 + 5
            rect = pygame.Rect(px - radius, py - radius, radius * 2, radius * 2)
            pygame.draw.arc(self.screen, COLOR_DASH_RING, rect, 0, math.pi * 2 * progress, 3)

        for enemy in snapshot['enemies']:
            self.draw_arrow(enemy['x'] - cam_x, enemy['y'] - cam_y, enemy['size'], enemy['angle'], COLOR_ENEMY)

        self.ui_manager.draw_hud(self.screen, snapshot)
        self.ui_manager.draw_banner(self.screen, self.state_manager)

        pygame.display.flip()

    def run(self):
        """Main loop: one tick per frame"""
        while self.running:
            dt = self.clock.tick(FPS) / 1000.0
            self.handle_events()
            if not self.running:
                break
            self.update(dt)
            self.render()

        pygame.quit()
        logger.info("Game closed.")


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s: %(message)s")
    MazeGame().run()


if __name__ == "__main__":
    main()
