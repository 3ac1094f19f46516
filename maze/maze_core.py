"""
Core maze functions - grid storage, neighbourhood and reachability
"""

from collections import deque
from utils.constants import OPEN, WALL, DOOR, DIRS


class MazeGrid:
    """
    Maze grid with cell-based representation
    Each cell is OPEN, WALL or DOOR; cells[row][col]
    """
    def __init__(self, cols, rows, fill=WALL):
        self.cols = cols
        self.rows = rows
        # Initialize all cells as walls
        self.cells = [[fill for _ in range(cols)] for _ in range(rows)]

    def in_bounds(self, x, y):
        """Check if coordinates are within grid bounds"""
        return 0 <= x < self.cols and 0 <= y < self.rows

    def get(self, x, y):
        """Cell kind at (x, y)"""
        return self.cells[y][x]

    def set(self, x, y, kind):
        """Set cell kind at (x, y)"""
        self.cells[y][x] = kind

    def is_open(self, x, y):
        return self.in_bounds(x, y) and self.cells[y][x] == OPEN

    def is_wall(self, x, y):
        return self.in_bounds(x, y) and self.cells[y][x] == WALL

    def is_passable(self, x, y):
        """Open and door cells can be walked through"""
        return self.in_bounds(x, y) and self.cells[y][x] != WALL

    def open_cells(self):
        """List of (x, y) for every OPEN cell"""
        return [(x, y) for y in range(self.rows) for x in range(self.cols)
                if self.cells[y][x] == OPEN]

    def count(self, kind):
        """Number of cells of a given kind"""
        return sum(row.count(kind) for row in self.cells)

    def __repr__(self):
        return f"MazeGrid({self.cols}x{self.rows}, open={self.count(OPEN)}, doors={self.count(DOOR)})"


def neighbors_passable(grid, x, y):
    """Get list of passable neighbour cells"""
    res = []
    for dx, dy in DIRS:
        nx, ny = x + dx, y + dy
        if grid.is_passable(nx, ny):
            res.append((nx, ny))
    return res


def reachable_from(grid, start):
    """BFS flood fill over passable cells, returns the set of reached cells"""
    if not grid.is_passable(*start):
        return set()

    q = deque([start])
    seen = {start}

    while q:
        x, y = q.popleft()
        for n in neighbors_passable(grid, x, y):
            if n not in seen:
                seen.add(n)
                q.append(n)
    return seen


def is_fully_connected(grid, start):
    """Check every OPEN cell can be reached from start"""
    reached = reachable_from(grid, start)
    return all(cell in reached for cell in grid.open_cells())
