"""
UI Manager - HUD and event banners
"""

import pygame
from utils.colors import (
    COLOR_TEXT, COLOR_TEXT_HIGHLIGHT, COLOR_PLAYER, COLOR_MENU_OVERLAY
)
from utils.helpers import format_score
from game.game_state import GameState


class UIManager:
    """
    Manages all UI rendering
    """
    def __init__(self):
        # Fonts
        self.font_small = None
        self.font_large = None
        self.font_title = None
        self._init_fonts()

    def _init_fonts(self):
        """Initialize fonts"""
        pygame.font.init()
        self.font_small = pygame.font.SysFont("arial", 16)
        self.font_large = pygame.font.SysFont("arial", 24, bold=True)
        self.font_title = pygame.font.SysFont("arial", 40, bold=True)

    def draw_hud(self, screen, snapshot):
        """
        Draw HUD (score, lives, level)

        Args:
            screen: Pygame screen
            snapshot: GameSession.snapshot() dict
        """
        score_text = self.font_large.render(f"SCORE: {format_score(snapshot['score'])}", True, COLOR_TEXT)
        screen.blit(score_text, (10, 10))

        # Lives as small arrows pointing up
        for i in range(snapshot['lives']):
            cx = 200 + i * 40
            cy = 22
            points = [(cx, cy - 10), (cx - 5, cy + 5), (cx + 5, cy + 5)]
            pygame.draw.polygon(screen, COLOR_PLAYER, points)

        level_text = self.font_small.render(f"LEVEL {snapshot['level']}", True, COLOR_TEXT)
        screen.blit(level_text, (10, 40))

        left_text = self.font_small.render(f"Left: {len(snapshot['collectibles'])}", True, COLOR_TEXT)
        screen.blit(left_text, (10, 60))

    def draw_banner(self, screen, state_manager):
        """Draw level-complete / game-over message while its timer runs"""
        if state_manager.is_state(GameState.PLAYING):
            return

        data = state_manager.state_data
        if state_manager.is_state(GameState.LEVEL_COMPLETE):
            title = "LEVEL COMPLETE"
            subtitle = f"You completed level {data.get('level')}. Your score is {data.get('score')}."
        else:
            title = "GAME OVER"
            subtitle = f"Your final score is {data.get('score')}."

        screen_w, screen_h = screen.get_size()
        overlay = pygame.Surface((screen_w, 140), pygame.SRCALPHA)
        overlay.fill(COLOR_MENU_OVERLAY)
        screen.blit(overlay, (0, screen_h // 2 - 70))

        title_text = self.font_title.render(title, True, COLOR_TEXT_HIGHLIGHT)
        screen.blit(title_text, title_text.get_rect(center=(screen_w // 2, screen_h // 2 - 20)))

        subtitle_text = self.font_small.render(subtitle, True, COLOR_TEXT)
        screen.blit(subtitle_text, subtitle_text.get_rect(center=(screen_w // 2, screen_h // 2 + 30)))
