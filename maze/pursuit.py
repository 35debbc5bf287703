"""
Enemy pursuit - weighted shortest path (Dijkstra) returning a single step

Moving into a penalized cell (an uncollected letter) costs 1 + LETTER_PENALTY,
so the hunter walks around letters unless the detour is long. The target cell
is never penalized, otherwise a player standing on a letter could not be
caught.
"""

import heapq
from itertools import count

from maze.maze_core import Position, neighbors_open
from utils.constants import LETTER_PENALTY


def step_cost(cell, target, penalized):
    """Cost of moving into cell"""
    if cell in penalized and cell != target:
        return 1 + LETTER_PENALTY
    return 1


def next_step_towards(maze, start, target, penalized_positions=()):
    """
    First cell on the cheapest route from start to target

    Uniform-cost search over 4-connected path cells. Each queue entry keeps
    its accumulated cost and the first step taken from start; the search ends
    when the target is popped. Among entries of equal cost the most recently
    queued one is expanded first.

    Args:
        maze: Maze (read only)
        start: Mover position
        target: Position to reach
        penalized_positions: Cells to avoid when reasonably possible

    Returns:
        Position to occupy next; start itself when start == target or when
        the target cannot be reached
    """
    start = Position(*start)
    target = Position(*target)
    penalized = {Position(*p) for p in penalized_positions}

    seq = count()
    # (cost, -seq, pos, first_step): negative sequence = LIFO among ties
    open_heap = [(0, -next(seq), start, None)]
    best = {start: 0}

    while open_heap:
        cost, _, cur, first_step = heapq.heappop(open_heap)

        if cur == target:
            return first_step or start

        if cost > best.get(cur, cost):
            continue  # stale entry

        for nxt in neighbors_open(maze, cur.x, cur.y):
            new_cost = cost + step_cost(nxt, target, penalized)
            if new_cost < best.get(nxt, float('inf')):
                best[nxt] = new_cost
                heapq.heappush(open_heap, (new_cost, -next(seq), nxt, first_step or nxt))

    # No route - stay put
    return start
