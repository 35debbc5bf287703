"""
Level configuration - maze size, word length and spawn settings per level
"""

from utils.constants import (
    MAZE_BASE_SIZE, MAZE_SIZE_STEP, MAZE_MAX_SIZE,
    WORD_BASE_LENGTH, WORD_MAX_LENGTH, EXTRA_SPAWN_CANDIDATES
)


class LevelConfig:
    """Configuration for a single level"""
    def __init__(self, **kwargs):
        self.level = kwargs.get('level', 1)

        # Maze dimensions (square)
        self.maze_size = kwargs.get('maze_size', MAZE_BASE_SIZE)

        # Requested word length (the word source may not honour it)
        self.word_length = kwargs.get('word_length', WORD_BASE_LENGTH)

        # Free cells sampled beyond the letters, enemy spawn candidates
        self.extra_spawn_candidates = kwargs.get('extra_spawn_candidates', EXTRA_SPAWN_CANDIDATES)

        # Hunter
        self.enemy_enabled = kwargs.get('enemy_enabled', True)

    def __repr__(self):
        return f"LevelConfig(level={self.level}, maze={self.maze_size}, word_length={self.word_length})"


def maze_size_for_level(level):
    """
    Maze grows by two cells every two levels, capped

    level 1-2 -> 21, 3-4 -> 23, ... -> 35
    """
    return min(MAZE_BASE_SIZE + MAZE_SIZE_STEP * ((level - 1) // 2), MAZE_MAX_SIZE)


def word_length_for_level(level):
    return min(WORD_BASE_LENGTH + level // 2, WORD_MAX_LENGTH)


def get_level_config(level):
    """
    Get configuration for a level number

    Args:
        level: Positive level number

    Returns:
        LevelConfig object
    """
    return LevelConfig(
        level=level,
        maze_size=maze_size_for_level(level),
        word_length=word_length_for_level(level),
        extra_spawn_candidates=EXTRA_SPAWN_CANDIDATES,
        enemy_enabled=level >= 1,
    )
