"""
Color palette for Word Maze
"""

# Background colors
COLOR_BG = (20, 22, 28)           # Main background
COLOR_PANEL_BG = (12, 14, 18)     # Panel background

# Maze
COLOR_WALL = (51, 65, 85)
COLOR_PATH = (15, 23, 42)

# UI colors
COLOR_TEXT = (210, 210, 210)      # Normal text
COLOR_TEXT_HIGHLIGHT = (255, 230, 160)  # Highlighted text
COLOR_TEXT_DIM = (150, 150, 150)  # Dimmed text
COLOR_TEXT_ERROR = (255, 110, 110)

# Entity colors
COLOR_PLAYER = (70, 140, 255)
COLOR_ENEMY = (255, 50, 50)
COLOR_LETTER = (250, 204, 21)
COLOR_LETTER_TEXT = (20, 20, 20)

# Word progress slots
COLOR_SLOT_FOUND = (5, 150, 105)
COLOR_SLOT_EMPTY = (30, 41, 59)

# Item colors (HUD / shop)
ITEM_COLORS = {
    'shield': (96, 165, 250),
    'sword': (251, 146, 60),
    'pistol': (248, 113, 113),
    'drill': (250, 204, 21),
}
