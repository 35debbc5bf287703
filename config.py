"""
Game configuration - title, version and environment overrides
"""

import os

from utils.constants import DEFAULT_LANGUAGE, LANGUAGES

GAME_TITLE = "Word Maze"
GAME_VERSION = "1.0.0"


def get_language():
    """Default language for the selection screen (WORD_MAZE_LANGUAGE)"""
    lang = os.environ.get('WORD_MAZE_LANGUAGE', DEFAULT_LANGUAGE).lower()
    if lang not in LANGUAGES:
        return DEFAULT_LANGUAGE
    return lang


def get_seed():
    """
    Optional fixed random seed (WORD_MAZE_SEED)

    Returns:
        int or None when unset or not a number
    """
    raw = os.environ.get('WORD_MAZE_SEED')
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


def get_log_level():
    return os.environ.get('WORD_MAZE_LOG_LEVEL', 'INFO').upper()
