"""
Spawn position helpers - free path cells for letters and the enemy
"""

import random

from maze.maze_core import Position
from utils.constants import START_POS
from utils.helpers import manhattan_distance


def free_positions(maze, count, rng=None):
    """
    Sample distinct path cells, excluding the start cell

    Args:
        maze: Maze to sample from (not modified)
        count: Maximum number of positions wanted
        rng: random.Random-like source, module random when None

    Returns:
        List of up to `count` Positions in random order (all free cells
        when fewer are available)
    """
    rng = rng or random
    candidates = [p for p in maze.path_cells() if p != START_POS]
    rng.shuffle(candidates)
    return candidates[:max(0, count)]


def furthest(candidates, origin):
    """
    Candidate with the greatest Manhattan distance from origin

    Ties keep the first candidate encountered. Returns None when there are
    no candidates.
    """
    best = None
    best_dist = -1
    ox, oy = origin

    for pos in candidates:
        dist = manhattan_distance(ox, oy, pos[0], pos[1])
        if dist > best_dist:
            best_dist = dist
            best = Position(*pos)

    return best
