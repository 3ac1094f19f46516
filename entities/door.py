"""
Door entities
A door is a wall cell opened into a passage; drawn apart from plain floor
"""


class Door:
    """
    Door placed on a grid cell
    """
    def __init__(self, x, y, cell_size):
        """
        Args:
            x, y: Grid position
            cell_size: World units per cell
        """
        self.x = x
        self.y = y
        self.cell_size = cell_size

    @property
    def world_pos(self):
        """Top-left corner in world units"""
        return (self.x * self.cell_size, self.y * self.cell_size)


    def is_at_position(self, x, y):
        """Check if door is at given grid position"""
        return self.x == x and self.y == y

    def __repr__(self):
        return f"Door(pos=({self.x},{self.y}))"


def doors_from_cells(cells, cell_size):
    """Wrap placed door cells into Door objects"""
    return [Door(x, y, cell_size) for x, y in cells]
