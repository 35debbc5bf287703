"""
Game State Machine - game states and transition bookkeeping
"""

import logging
from enum import Enum, auto

logger = logging.getLogger(__name__)


class GameState(Enum):
    """Game states"""
    LANGUAGE_SELECT = auto()
    LOADING = auto()
    PLAYING = auto()
    LEVEL_COMPLETE = auto()  # Shop between levels
    ERROR = auto()


# Allowed transitions; LOADING is re-entered from PLAYING on death
TRANSITIONS = {
    GameState.LANGUAGE_SELECT: {GameState.LOADING},
    GameState.LOADING: {GameState.PLAYING, GameState.ERROR},
    GameState.PLAYING: {GameState.LOADING, GameState.LEVEL_COMPLETE, GameState.LANGUAGE_SELECT},
    GameState.LEVEL_COMPLETE: {GameState.LOADING, GameState.LANGUAGE_SELECT},
    GameState.ERROR: {GameState.LANGUAGE_SELECT},
}


class GameStateManager:
    """
    Tracks the current state, the previous one and per-state data
    """
    def __init__(self):
        self.current_state = GameState.LANGUAGE_SELECT
        self.previous_state = None
        self.state_data = {}  # For passing data between states

    def can_transition(self, new_state):
        return new_state in TRANSITIONS[self.current_state]

    def transition_to(self, new_state, **kwargs):
        """
        Transition to a new state

        Args:
            new_state: GameState enum value
            **kwargs: Additional data to pass to new state

        Raises:
            ValueError: for a transition the machine does not allow
        """
        if not self.can_transition(new_state):
            raise ValueError(f"invalid transition {self.current_state.name} -> {new_state.name}")

        logger.debug("State %s -> %s", self.current_state.name, new_state.name)
        self.previous_state = self.current_state
        self.current_state = new_state
        self.state_data = kwargs

    def is_state(self, state):
        """Check if current state matches"""
        return self.current_state == state

    def get_state_name(self):
        """Get current state name"""
        return self.current_state.name

    def __repr__(self):
        return f"GameStateManager(state={self.current_state.name})"
