class WordMazeError(Exception):
    """Base class for game errors."""


class WordSourceError(WordMazeError):
    """Raised by a word source that cannot deliver a word."""


class LevelSetupError(WordMazeError):
    """Raised when a level cannot be initialized (word or maze setup failed)."""
