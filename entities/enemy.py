"""
Enemy entity - the hunter that chases the player through the maze
"""

from maze.maze_core import Position
from utils.constants import (
    ENEMY_BASE_INTERVAL_MS, ENEMY_MIN_INTERVAL_MS, ENEMY_SPEED_INCREMENT
)


class Enemy:
    """
    Single pursuing enemy

    The position is kept after a kill (the hunter is simply inactive) and is
    replaced on respawn.
    """
    def __init__(self):
        self.x = None
        self.y = None
        self.active = False
        self.speed_multiplier = 1.0
        self.kills = 0

    @property
    def position(self):
        if self.x is None:
            return None
        return Position(self.x, self.y)

    def spawn(self, x, y):
        """Place the enemy and activate it"""
        self.x = x
        self.y = y
        self.active = True

    def move_to(self, x, y):
        self.x = x
        self.y = y

    def is_at(self, x, y):
        """Check if an active enemy occupies the cell"""
        return self.active and self.x == x and self.y == y

    def kill(self):
        """Deactivate; every kill makes the next life faster"""
        self.active = False
        self.kills += 1
        self.speed_multiplier += ENEMY_SPEED_INCREMENT

    def move_interval(self):
        """Milliseconds between steps for the current speed multiplier"""
        return max(ENEMY_MIN_INTERVAL_MS, ENEMY_BASE_INTERVAL_MS / self.speed_multiplier)

    def reset(self):
        """Forget position and speed (new level attempt)"""
        self.x = None
        self.y = None
        self.active = False
        self.speed_multiplier = 1.0

    def __repr__(self):
        return f"Enemy(pos=({self.x},{self.y}), active={self.active}, speed={self.speed_multiplier:.1f})"
