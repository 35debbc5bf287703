"""
Player entity with grid position and the item inventory
"""

from maze.maze_core import Position
from utils.constants import (
    START_POS, ITEM_KINDS, ITEM_SHIELD, ITEM_SWORD, ITEM_PISTOL, ITEM_DRILL
)


class Inventory:
    """
    Consumable item counters

    Counts never go negative. The inventory outlives levels and level
    restarts; only a full game restart clears it.
    """
    def __init__(self, shields=0, swords=0, pistols=0, drills=0):
        self.counts = {
            ITEM_SHIELD: shields,
            ITEM_SWORD: swords,
            ITEM_PISTOL: pistols,
            ITEM_DRILL: drills,
        }

    @property
    def shields(self):
        return self.counts[ITEM_SHIELD]

    @property
    def swords(self):
        return self.counts[ITEM_SWORD]

    @property
    def pistols(self):
        return self.counts[ITEM_PISTOL]

    @property
    def drills(self):
        return self.counts[ITEM_DRILL]

    def has(self, kind):
        return self.counts[kind] > 0

    def add(self, kind, amount=1):
        if kind not in self.counts:
            raise KeyError(f"unknown item: {kind}")
        self.counts[kind] += amount

    def use(self, kind):
        """
        Consume one item

        Returns:
            True if an item was available and consumed
        """
        if self.counts[kind] <= 0:
            return False
        self.counts[kind] -= 1
        return True

    def clear(self):
        for kind in ITEM_KINDS:
            self.counts[kind] = 0

    def as_dict(self):
        """Presenter view, keyed like the HUD (plural names)"""
        return {
            'shields': self.shields,
            'swords': self.swords,
            'pistols': self.pistols,
            'drills': self.drills,
        }

    def __repr__(self):
        return f"Inventory({self.as_dict()})"


class Player:
    """
    Player position and per-attempt tracking
    """
    def __init__(self, x=START_POS[0], y=START_POS[1]):
        self.x = x
        self.y = y
        self.moves = 0

    @property
    def position(self):
        return Position(self.x, self.y)

    def move_to(self, x, y):
        self.x = x
        self.y = y
        self.moves += 1

    def reset_position(self, x=START_POS[0], y=START_POS[1]):
        """Reset player to starting position"""
        self.x = x
        self.y = y
        self.moves = 0

    def __repr__(self):
        return f"Player(pos=({self.x},{self.y}), moves={self.moves})"
