"""Custom exception hierarchy for word search generation."""


class WordSearchError(Exception):
    """Base exception for generator failures."""


class InvalidArgumentError(WordSearchError, ValueError):
    """Raised when a grid size or word list violates a precondition."""


class PlacementError(WordSearchError):
    """Raised when a word is written where it does not fit."""


class ValidationError(WordSearchError):
    """Raised when the grid integrity checks fail."""
