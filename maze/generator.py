"""
Maze generation - recursive backtracker and door placement
"""

import logging
import random

from utils.constants import OPEN, WALL, DOOR, DIRS, DOOR_PLACE_ATTEMPTS
from maze.maze_core import MazeGrid

logger = logging.getLogger(__name__)


def entrance_cell(cols, rows):
    """Grid edge cell next to the first room"""
    return (0, 1)


def exit_cell(cols, rows):
    """Opposite corner of the entrance"""
    return (cols - 1, rows - 2)


def _shuffled_dirs(rng):
    dirs = list(DIRS)
    rng.shuffle(dirs)
    return dirs


# ========== GENERATOR: BACKTRACKER ==========

def gen_backtracker(cols, rows, rng=None):
    """
    Depth-first backtracker on the odd-coordinate room graph - step generator

    Each stack frame holds a room and the directions it has still to try,
    shuffled once when the room is entered. Yields a state dict per carve or
    backtrack step; the final state has done=True and the entrance/exit open.
    """
    rng = rng or random

    grid = MazeGrid(cols, rows)
    grid.set(1, 1, OPEN)
    stack = [(1, 1, _shuffled_dirs(rng))]

    yield {"grid": grid, "current": (1, 1), "carved": None, "done": False}

    while stack:
        cx, cy, dirs = stack[-1]
        carved = None

        while dirs:
            dx, dy = dirs.pop(0)
            nx, ny = cx + dx * 2, cy + dy * 2
            if grid.is_wall(nx, ny):
                grid.set(cx + dx, cy + dy, OPEN)
                grid.set(nx, ny, OPEN)
                stack.append((nx, ny, _shuffled_dirs(rng)))
                carved = ((cx, cy), (nx, ny))
                break

        if carved:
            yield {"grid": grid, "current": carved[1], "carved": carved, "done": False}
        else:
            stack.pop()
            yield {"grid": grid, "current": (cx, cy), "carved": None, "done": False}

    ex, ey = entrance_cell(cols, rows)
    grid.set(ex, ey, OPEN)
    xx, xy = exit_cell(cols, rows)
    grid.set(xx, xy, OPEN)

    yield {"grid": grid, "current": (1, 1), "carved": None, "done": True}


def generate_maze(cols, rows, rng=None):
    """Generate a maze instantly, returns a MazeGrid"""
    last_state = None
    steps = 0
    for state in gen_backtracker(cols, rows, rng):
        last_state = state
        steps += 1

    grid = last_state["grid"]
    logger.debug("Generated %dx%d maze in %d steps (%d open cells)",
                 cols, rows, steps, grid.count(OPEN))
    return grid


# ========== DOORS ==========

def is_door_candidate(grid, x, y):
    """A wall cell between two open cells, vertically or horizontally"""
    if grid.get(x, y) != WALL:
        return False
    vertical = grid.get(x, y - 1) == OPEN and grid.get(x, y + 1) == OPEN
    horizontal = grid.get(x - 1, y) == OPEN and grid.get(x + 1, y) == OPEN
    return vertical or horizontal


def place_doors(grid, count, rng=None, max_attempts=DOOR_PLACE_ATTEMPTS):
    """
    Turn up to `count` qualifying wall cells into doors

    Samples interior cells at random for at most `max_attempts` tries.
    Placing fewer doors than requested is not an error, only logged.

    Returns:
        List of (x, y) door cells in placement order
    """
    rng = rng or random
    doors = []
    attempts = 0

    if grid.cols < 3 or grid.rows < 3:
        max_attempts = 0

    while len(doors) < count and attempts < max_attempts:
        x = rng.randint(1, grid.cols - 2)
        y = rng.randint(1, grid.rows - 2)

        if is_door_candidate(grid, x, y):
            grid.set(x, y, DOOR)
            doors.append((x, y))

        attempts += 1

    logger.info("Placed %d doors after %d attempts", len(doors), attempts)
    if len(doors) < count:
        logger.warning("Door placement fell short: %d of %d requested", len(doors), count)

    return doors
