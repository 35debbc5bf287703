"""
Level Manager - handles word fetch, maze generation and entity placement
"""

import logging
import random

from entities.letter import LetterManager
from game.exceptions import LevelSetupError
from game.word_source import WordProvider
from maze.difficulty import get_level_config
from maze.generator import generate_maze
from maze.sampler import free_positions, furthest
from utils.constants import START_POS

logger = logging.getLogger(__name__)


class Level:
    """
    Represents a single level attempt: word, maze, letters and enemy spawn
    """
    def __init__(self, number, language, config, word, hint, maze, letter_manager, enemy_spawn):
        self.number = number
        self.language = language
        self.config = config

        # Word data
        self.word = word
        self.hint = hint

        # Maze data
        self.maze = maze
        self.start_pos = START_POS

        # Entities
        self.letter_manager = letter_manager
        self.enemy_spawn = enemy_spawn

    @property
    def cols(self):
        return self.maze.cols

    @property
    def rows(self):
        return self.maze.rows

    def __repr__(self):
        return f"Level({self.number}, word={self.word!r}, size={self.cols}x{self.rows})"


class LevelManager:
    """
    Builds levels from a level number and language
    """
    def __init__(self, word_provider=None, rng=None):
        """
        Args:
            word_provider: WordProvider, a fallback-only one when None
            rng: random.Random shared by maze generation and sampling
        """
        self.rng = rng or random.Random()
        self.word_provider = word_provider or WordProvider(rng=self.rng)
        self.current_level = None

    def create_level(self, number, language):
        """
        Create a new level

        Steps: fetch the word, generate the maze, sample word length + extra
        free cells, give the first ones to the letters (word order) and the
        farthest of the rest (from the start cell) to the enemy.

        Returns:
            Level object

        Raises:
            LevelSetupError: when any step fails
        """
        config = get_level_config(number)

        try:
            word_data = self.word_provider.fetch(number, language, config.word_length)
            word = word_data.word

            maze = generate_maze(config.maze_size, config.maze_size, self.rng)

            spots = free_positions(maze, len(word) + config.extra_spawn_candidates, self.rng)
            letter_manager = LetterManager()
            letter_manager.place_word(word, spots[:len(word)])

            enemy_spawn = None
            if config.enemy_enabled:
                enemy_spawn = furthest(spots[len(word):], START_POS)
        except Exception as e:
            self.current_level = None
            raise LevelSetupError(f"Failed to set up level {number}: {e}") from e

        level = Level(number, language, config, word, word_data.hint, maze, letter_manager, enemy_spawn)
        self.current_level = level
        logger.info("Level %d ready: %d letters, maze %dx%d, enemy at %s",
                    number, len(word), maze.cols, maze.rows, enemy_spawn)
        return level

    def get_current_level(self):
        """Get current level"""
        return self.current_level

    def __repr__(self):
        return f"LevelManager(current_level={self.current_level})"
