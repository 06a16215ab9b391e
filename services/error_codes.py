"""
Standard error codes for service layer.

These error codes allow callers to programmatically handle specific error
conditions without parsing error message text.

Usage:
    from services.error_codes import INSUFFICIENT_PLAYERS
    from services.result import Result

    if len(players) < min_players:
        return Result.fail("Not enough players", code=INSUFFICIENT_PLAYERS)
"""

# General errors
VALIDATION_ERROR = "validation_error"

# Roster errors
INSUFFICIENT_PLAYERS = "insufficient_players"
INVALID_INPUT = "invalid_input"

# Engine errors (internal invariant violations)
NO_SOLUTION = "no_solution"
