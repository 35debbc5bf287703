"""
Global constants for Word Maze
All timings are in milliseconds
"""

# Screen settings
CELL_SIZE = 22
FPS = 60

# HUD panel height
PANEL_H = 110

# Cell values (maze grid)
WALL = 0
PATH = 1

# Player always starts (and restarts) here
START_POS = (1, 1)

# Direction vectors (up, down, left, right)
UP = (0, -1)
DOWN = (0, 1)
LEFT = (-1, 0)
RIGHT = (1, 0)
DIRS = [UP, DOWN, LEFT, RIGHT]

# Two-step carving offsets for the backtracker
CARVE_DIRS = [(0, -2), (0, 2), (-2, 0), (2, 0)]

# Maze sizing
MAZE_BASE_SIZE = 21
MAZE_SIZE_STEP = 2       # grows every two levels
MAZE_MAX_SIZE = 35
MAZE_MIN_SIZE = 3

# Word sizing (requested length from the word source)
WORD_BASE_LENGTH = 5
WORD_MAX_LENGTH = 8

# Free cells sampled on top of the word length (enemy spawn candidates)
EXTRA_SPAWN_CANDIDATES = 5

# Pursuit
LETTER_PENALTY = 10

# Enemy settings
ENEMY_BASE_INTERVAL_MS = 600
ENEMY_MIN_INTERVAL_MS = 200
ENEMY_SPEED_INCREMENT = 0.1
ENEMY_RESPAWN_DELAY_MS = 2000
ENEMY_RESPAWN_CANDIDATES = 20

# Input / flow timing
INPUT_TICK_MS = 110
LEVEL_COMPLETE_DELAY_MS = 300

# Shop
ITEM_SHIELD = 'shield'
ITEM_SWORD = 'sword'
ITEM_PISTOL = 'pistol'
ITEM_DRILL = 'drill'

ITEM_KINDS = [ITEM_SHIELD, ITEM_SWORD, ITEM_PISTOL, ITEM_DRILL]

ITEM_PRICES = {
    ITEM_SHIELD: 3,
    ITEM_SWORD: 4,
    ITEM_PISTOL: 5,
    ITEM_DRILL: 12,
}

# Languages
LANG_EN = 'en'
LANG_PT = 'pt'
LANGUAGES = [LANG_EN, LANG_PT]
DEFAULT_LANGUAGE = LANG_EN
