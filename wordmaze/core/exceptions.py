"""Custom exception hierarchy for word maze generation."""


class WordMazeError(Exception):
    """Base exception for generator failures."""


class UnsolvableError(WordMazeError):
    """Raised when no path spells the answer sequence through the maze."""


class PerimeterIndexError(WordMazeError, IndexError):
    """Raised when a perimeter index or boundary side is out of range."""


class BarrierRelaxationError(WordMazeError, ValueError):
    """Raised when more barriers are requested than closed interior walls exist."""


class AlternateAnswerError(WordMazeError, ValueError):
    """Raised when alternate answers do not line up with the primary words."""


class WordListError(WordMazeError):
    """Raised when the word list CSV cannot be read or parsed."""


class ValidationError(WordMazeError):
    """Raised when the maze integrity checks fail."""
