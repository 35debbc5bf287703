import random

import pytest

from entities.letter import LetterManager
from game.exceptions import LevelSetupError
from game.game_flow import GameFlow
from game.level_manager import Level
from game.word_source import WordData
from maze.difficulty import get_level_config
from maze.maze_core import Maze
from utils.constants import ITEM_SHIELD, ITEM_SWORD, ITEM_PISTOL, ITEM_DRILL

# ======================================================================
# LAYOUTS
# ======================================================================

# Two corridors (rows 1 and 3) joined at both ends; (2..6, 2) are walls.
LOOP_ROWS = [
    "#########",
    "#.......#",
    "#.#####.#",
    "#.......#",
    "#########",
]

ITEM_NAMES = {
    'shields': ITEM_SHIELD,
    'swords': ITEM_SWORD,
    'pistols': ITEM_PISTOL,
    'drills': ITEM_DRILL,
}


class StubWordSource:
    """Word collaborator returning a fixed word (or raising)"""
    def __init__(self, word="CAT", hint="A small pet", error=None):
        self.word = word
        self.hint = hint
        self.error = error
        self.calls = []

    def get_word(self, level, language, length):
        self.calls.append((level, language, length))
        if self.error:
            raise self.error
        return WordData(self.word, self.hint)


class FixedLevelManager:
    """
    Level builder with a hand-made layout

    Every (re)build returns a fresh copy of the same maze with the letters
    and the enemy spawn at fixed cells.
    """
    def __init__(self, rows=None, word="CAT", letters=None, enemy=None, fail=False):
        self.rows = rows or LOOP_ROWS
        self.word = word
        self.letters = letters or [(3, 3), (5, 3), (7, 1)]
        self.enemy = enemy
        self.fail = fail
        self.created = []

    def create_level(self, number, language):
        self.created.append((number, language))
        if self.fail:
            raise LevelSetupError(f"Failed to set up level {number}: no word")

        letter_manager = LetterManager()
        letter_manager.place_word(self.word, self.letters)
        return Level(number, language, get_level_config(number), self.word, "hint",
                     Maze.from_rows(self.rows), letter_manager, self.enemy)


# ======================================================================
# FIXTURES
# ======================================================================

@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def loop_maze():
    return Maze.from_rows(LOOP_ROWS)


@pytest.fixture
def stub_source():
    return StubWordSource()


@pytest.fixture
def make_game(rng):
    """
    Build a GameFlow on the fixed layout and start level 1 in English

    Keyword arguments go to FixedLevelManager except the inventory counts
    (shields, swords, pistols, drills), which are granted after the start.
    """
    def _make(start=True, level_complete_delay=0, **kwargs):
        items = {k: kwargs.pop(k) for k in ITEM_NAMES if k in kwargs}
        game = GameFlow(FixedLevelManager(**kwargs), rng=rng, level_complete_delay=level_complete_delay)
        if start:
            game.select_language('en')
        for name, amount in items.items():
            game.inventory.add(ITEM_NAMES[name], amount)
        return game
    return _make
