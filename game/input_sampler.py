"""
Input intents and held-direction sampling

The game never sees a keyboard: the presenter translates devices into
intents. Directions are sampled on a fixed tick; at most one move is
produced per tick from whatever directions are currently held.
"""

from enum import Enum, auto

from utils.constants import UP, DOWN, LEFT, RIGHT


class Intent(Enum):
    """Discrete player intents"""
    MOVE_UP = auto()
    MOVE_DOWN = auto()
    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    FIRE = auto()
    BUY_ITEM = auto()
    ADVANCE_LEVEL = auto()
    RESTART_GAME = auto()
    SELECT_LANGUAGE = auto()


DIRECTION_INTENTS = {
    Intent.MOVE_UP: UP,
    Intent.MOVE_DOWN: DOWN,
    Intent.MOVE_LEFT: LEFT,
    Intent.MOVE_RIGHT: RIGHT,
}

# Checked in this order when several directions are held
DIRECTION_PRIORITY = [Intent.MOVE_UP, Intent.MOVE_DOWN, Intent.MOVE_LEFT, Intent.MOVE_RIGHT]


class InputSampler:
    """
    Tracks held directions between ticks
    """
    def __init__(self):
        self.held = set()

    def press(self, intent):
        if intent in DIRECTION_INTENTS:
            self.held.add(intent)

    def release(self, intent):
        self.held.discard(intent)

    def clear(self):
        self.held.clear()

    def sample(self):
        """
        Direction to apply this tick

        Returns:
            (dx, dy) of the highest-priority held direction, or None
        """
        for intent in DIRECTION_PRIORITY:
            if intent in self.held:
                return DIRECTION_INTENTS[intent]
        return None

    def __repr__(self):
        return f"InputSampler(held={sorted(i.name for i in self.held)})"
