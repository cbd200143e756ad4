"""
Standard error codes for service layer.

These error codes allow callers to programmatically handle specific error
conditions without parsing error message text.

Usage:
    from services.error_codes import ROSTER_FULL
    from services.result import Result

    if len(players) >= max_players:
        return Result.fail("Roster is full", code=ROSTER_FULL)
"""

# General errors
NOT_FOUND = "not_found"
VALIDATION_ERROR = "validation_error"

# Roster errors
ROSTER_FULL = "roster_full"
ROSTER_NOT_FOUND = "roster_not_found"
INVALID_RANK = "invalid_rank"

# Division errors
INSUFFICIENT_PLAYERS = "insufficient_players"
