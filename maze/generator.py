"""
Maze generation - randomized depth-first backtracker on a cell/wall lattice
"""

import logging
import random

from maze.maze_core import Maze, Position
from utils.constants import CARVE_DIRS, START_POS, MAZE_MIN_SIZE
from utils.helpers import next_odd

logger = logging.getLogger(__name__)


def normalize_size(value):
    """Next odd value >= value (never smaller than the 3x3 minimum lattice)"""
    return next_odd(max(MAZE_MIN_SIZE, value))


def carve_steps(cols, rows, rng=None):
    """
    Depth-First Search with backtracking - step generator

    Carves on odd coordinates; walls keep the alternating lattice. Uses an
    explicit stack of (cell, pending directions) frames, so the visiting
    order is the same as the recursive carver without its depth limit.

    Args:
        cols, rows: Normalized (odd) dimensions
        rng: random.Random-like source, module random when None

    Yields:
        {"maze", "current", "carved", "done"} dicts, like the animated
        generators; "carved" is (mid_cell, cell) for each carve
    """
    rng = rng or random
    maze = Maze(cols, rows)

    sx, sy = START_POS
    maze.carve(sx, sy)

    def shuffled_dirs():
        dirs = list(CARVE_DIRS)
        rng.shuffle(dirs)
        return iter(dirs)

    stack = [(sx, sy, shuffled_dirs())]
    yield {"maze": maze, "current": Position(sx, sy), "carved": None, "done": False}

    while stack:
        cx, cy, pending = stack[-1]

        for dx, dy in pending:
            nx, ny = cx + dx, cy + dy
            if 0 < nx < cols - 1 and 0 < ny < rows - 1 and maze.is_wall(nx, ny):
                mid = Position(cx + dx // 2, cy + dy // 2)
                maze.carve(nx, ny)
                maze.carve(*mid)
                stack.append((nx, ny, shuffled_dirs()))
                yield {"maze": maze, "current": Position(nx, ny), "carved": (mid, Position(nx, ny)), "done": False}
                break
        else:
            # All directions tried - backtrack
            stack.pop()

    yield {"maze": maze, "current": Position(sx, sy), "carved": None, "done": True}


def generate_maze(width, height, rng=None):
    """
    Generate a perfect maze instantly

    Args:
        width, height: Requested size; each is raised to the next odd value
        rng: Optional random source for reproducible layouts

    Returns:
        Maze
    """
    cols = normalize_size(width)
    rows = normalize_size(height)

    last_state = None
    for state in carve_steps(cols, rows, rng):
        last_state = state

    maze = last_state["maze"]
    logger.debug("Generated %r", maze)
    return maze
