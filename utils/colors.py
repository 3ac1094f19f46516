"""
Color palette for Maze Survival
"""

# Background colors
COLOR_BG = (34, 34, 34)           # Floor / main background

# Maze colors
COLOR_WALL = (68, 68, 68)         # Wall block
COLOR_WALL_SPECK = (150, 150, 150)
COLOR_DOOR = (165, 42, 42)        # Door block (brown)
COLOR_DOOR_MARK = (255, 215, 0)   # Door knob (gold)

# UI colors
COLOR_TEXT = (255, 255, 255)
COLOR_TEXT_HIGHLIGHT = (255, 230, 160)
COLOR_MENU_OVERLAY = (10, 12, 16, 200)

# Entity colors
COLOR_PLAYER = (0, 0, 255)
COLOR_ENEMY = (255, 0, 0)
COLOR_DASH_RING = (0, 255, 0)

# Collectible colors
COLOR_GOLD = (255, 215, 0)
COLOR_SILVER = (192, 192, 192)
COLOR_BRONZE = (184, 115, 51)
COLOR_LAVENDER = (230, 230, 250)
COLOR_DARK_TURQUOISE = (0, 206, 209)
COLOR_HOT_PINK = (255, 105, 180)
COLOR_LIME_GREEN = (50, 205, 50)
COLOR_ORANGE_RED = (255, 69, 0)
COLOR_MEDIUM_PURPLE = (147, 112, 219)
COLOR_MEDIUM_SPRING_GREEN = (0, 250, 154)

COLLECTIBLE_COLORS = [
    COLOR_GOLD,
    COLOR_SILVER,
    COLOR_BRONZE,
    COLOR_LAVENDER,
    COLOR_DARK_TURQUOISE,
    COLOR_HOT_PINK,
    COLOR_LIME_GREEN,
    COLOR_ORANGE_RED,
    COLOR_MEDIUM_PURPLE,
    COLOR_MEDIUM_SPRING_GREEN,
]
