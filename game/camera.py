"""
Camera/Viewport System - keeps the player centred in a maze larger than the screen
"""

from utils.helpers import clamp


class Camera:
    """
    Viewport offset in world units, clamped to the maze extent
    """
    def __init__(self, viewport_w, viewport_h, world_w, world_h):
        # Screen info
        self.viewport_w = viewport_w
        self.viewport_h = viewport_h

        # Maze extent in world units
        self.world_w = world_w
        self.world_h = world_h

        # Camera position (top-left corner of viewport in world units)
        self.camera_x = 0.0
        self.camera_y = 0.0

    def update(self, target_x, target_y):
        """
        Centre the viewport on a world position

        Clamped so the view never leaves the maze; when the maze is smaller
        than the viewport the offset stays at 0.
        """
        x = target_x - self.viewport_w / 2
        y = target_y - self.viewport_h / 2
        self.camera_x = clamp(x, 0, max(0, self.world_w - self.viewport_w))
        self.camera_y = clamp(y, 0, max(0, self.world_h - self.viewport_h))

    def resize(self, viewport_w, viewport_h):
        """Window was resized"""
        self.viewport_w = viewport_w
        self.viewport_h = viewport_h

    def world_to_screen(self, world_x, world_y):
        """
        Convert world coordinates to screen pixels

        Returns:
            tuple: (screen_x, screen_y)
        """
        return world_x - self.camera_x, world_y - self.camera_y

    def is_visible(self, world_x, world_y, margin=0):
        """Check if a world position falls inside the viewport"""
        return (self.camera_x - margin <= world_x < self.camera_x + self.viewport_w + margin and
                self.camera_y - margin <= world_y < self.camera_y + self.viewport_h + margin)

    def get_visible_range(self, cell_size, cols, rows):
        """
        Get the range of visible cells

        Returns:
            tuple: (min_x, max_x, min_y, max_y) in cells
        """
        min_x = max(0, int(self.camera_x // cell_size))
        max_x = min(cols, int((self.camera_x + self.viewport_w) // cell_size) + 1)
        min_y = max(0, int(self.camera_y // cell_size))
        max_y = min(rows, int((self.camera_y + self.viewport_h) // cell_size) + 1)
        return (min_x, max_x, min_y, max_y)

    @property
    def offset(self):
        return (self.camera_x, self.camera_y)
