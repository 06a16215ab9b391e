"""
Errors raised by the team-splitting engine.
"""


class InvalidInputError(ValueError):
    """Raised when the roster handed to the engine cannot be split (fewer than 2 players)."""


class NoSolutionError(RuntimeError):
    """
    Raised when enumeration produced zero candidate splits.

    This cannot happen for a valid roster and indicates a defect in the search.
    """
