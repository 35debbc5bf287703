"""
Helper utility functions for Word Maze
"""


def manhattan_distance(x1, y1, x2, y2):
    """Calculate Manhattan distance between two points"""
    return abs(x2 - x1) + abs(y2 - y1)


def next_odd(value):
    """Smallest odd integer >= value"""
    return value if value % 2 == 1 else value + 1


def format_score(score):
    """Format score with thousands separator"""
    return f"{score:,}"
