"""
Core maze data - grid representation, neighbours, reachability and line of sight
"""

from collections import deque
from typing import NamedTuple

import numpy as np

from utils.constants import WALL, PATH, DIRS


class Position(NamedTuple):
    """Integer grid coordinate"""
    x: int
    y: int


class Maze:
    """
    Rectangular grid of WALL/PATH cells backed by a numpy array

    The array is indexed grid[y, x]. Dimensions are fixed once built; the
    only mutation after generation is carve() (drill effect, wall -> path).
    """
    def __init__(self, cols, rows, grid=None):
        self.cols = cols
        self.rows = rows
        if grid is None:
            # Initialize fully walled
            grid = np.full((rows, cols), WALL, dtype=np.uint8)
        self.grid = grid

    @classmethod
    def from_rows(cls, rows):
        """
        Build a maze from text rows ('#' = wall, anything else = path)

        Handy for hand-made layouts:
            Maze.from_rows(["#####",
                            "#...#",
                            "#####"])
        """
        grid = np.array(
            [[WALL if ch == '#' else PATH for ch in row] for row in rows],
            dtype=np.uint8,
        )
        return cls(grid.shape[1], grid.shape[0], grid)

    def in_bounds(self, x, y):
        """Check if coordinates are within grid bounds"""
        return 0 <= x < self.cols and 0 <= y < self.rows

    def is_wall(self, x, y):
        return self.grid[y, x] == WALL

    def is_path(self, x, y):
        return self.in_bounds(x, y) and self.grid[y, x] == PATH

    def carve(self, x, y):
        """Turn a cell into path"""
        self.grid[y, x] = PATH

    def path_cells(self):
        """All path cells in row-major order"""
        return [Position(int(x), int(y)) for y, x in np.argwhere(self.grid == PATH)]

    def to_rows(self):
        """Inverse of from_rows()"""
        return [''.join('#' if c == WALL else '.' for c in row) for row in self.grid]

    def __repr__(self):
        return f"Maze({self.cols}x{self.rows}, paths={int(np.count_nonzero(self.grid))})"


def neighbors_open(maze, x, y):
    """Get list of 4-connected path neighbours of a cell"""
    res = []
    for dx, dy in DIRS:
        nx, ny = x + dx, y + dy
        if maze.is_path(nx, ny):
            res.append(Position(nx, ny))
    return res


def reachable_from(maze, start):
    """BFS flood fill; returns the set of path cells reachable from start"""
    if not maze.is_path(*start):
        return set()

    start = Position(*start)
    q = deque([start])
    seen = {start}

    while q:
        x, y = q.popleft()
        for n in neighbors_open(maze, x, y):
            if n not in seen:
                seen.add(n)
                q.append(n)
    return seen


def count_path_edges(maze):
    """Number of adjacent path/path pairs (a spanning tree has cells - 1)"""
    path = maze.grid == PATH
    horizontal = np.count_nonzero(path[:, 1:] & path[:, :-1])
    vertical = np.count_nonzero(path[1:, :] & path[:-1, :])
    return int(horizontal + vertical)


def clear_line(maze, a, b):
    """
    Check that no wall lies strictly between two cells sharing a row or column

    Endpoints are not inspected. Cells that are not aligned never have a
    clear line.
    """
    ax, ay = a
    bx, by = b

    if ax == bx:
        lo, hi = sorted((ay, by))
        return not np.any(maze.grid[lo + 1:hi, ax] == WALL)
    if ay == by:
        lo, hi = sorted((ax, bx))
        return not np.any(maze.grid[ay, lo + 1:hi] == WALL)
    return False
