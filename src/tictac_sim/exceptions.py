"""Exceptions raised by the grid, the players and the round.

Blocked moves are not errors: they are reported as ``MoveResult.BLOCKED``.
"""


class TicTacError(Exception):
    """Base class for all TicTac Sim errors."""
    pass


# ============ Argument errors ============

class InvalidCoordinateError(TicTacError, ValueError):
    """Grid coordinate outside of [0, 2]."""
    def __init__(self, name: str, value: int):
        self.name = name
        self.value = value
        super().__init__(f"Argument '{name}' must be in range [0,2], got {value}.")


class InvalidSymbolError(TicTacError, ValueError):
    """Empty symbol used where a player symbol is required."""
    pass


# ============ Round operation errors ============

class OperationUnavailableError(TicTacError):
    """Operation is not available in the current game mode or round state."""
    pass


class RoundFinishedError(OperationUnavailableError):
    """Round is finished and accepts no more turns until it is reset."""
    pass


# ============ Should-not-happen errors ============

class NoValidMovesError(TicTacError):
    """A move was requested but every field of the grid is taken."""
    pass


class UnexpectedMoveResultError(TicTacError):
    """A completed turn reported a result the round can't act on."""
    def __init__(self, result):
        self.result = result
        super().__init__(f"Unexpected result: {result}.")
