"""Custom exception hierarchy for the crossword core."""


class CrosswordError(Exception):
    """Base exception for crossword failures."""


class ValidationError(CrosswordError):
    """Raised when the crossword integrity checks fail."""


class CellNotPlayableError(CrosswordError):
    """Raised when a player writes into a blocked or off-grid cell."""


class ClueGenerationError(CrosswordError):
    """Raised when a clue generator returns an unusable payload."""
