import os
import random
import sys
from pathlib import Path

import pytest

# Ensure the repo root is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

from maze.maze_core import MazeGrid  # noqa: E402
from game.collision import CollisionOracle  # noqa: E402
from utils.constants import OPEN, WALL  # noqa: E402


class NoShuffleRng(random.Random):
    """Random source whose shuffle keeps the input order"""
    def shuffle(self, x):
        return None


class SequenceRng(random.Random):
    """Random source whose random() replays a fixed sequence"""
    def __init__(self, values, seed=0):
        super().__init__(seed)
        self.values = list(values)

    def random(self):
        return self.values.pop(0)


@pytest.fixture
def open_grid():
    return MazeGrid(20, 20, fill=OPEN)


@pytest.fixture
def open_oracle(open_grid):
    return CollisionOracle(open_grid, 80)


@pytest.fixture
def walled_oracle():
    """20x20 open grid with a full wall at column 11 (world x 880..960)"""
    grid = MazeGrid(20, 20, fill=OPEN)
    for y in range(grid.rows):
        grid.set(11, y, WALL)
    return CollisionOracle(grid, 80)


@pytest.fixture
def no_shuffle_rng():
    return NoShuffleRng(0)


@pytest.fixture
def sequence_rng():
    return SequenceRng
