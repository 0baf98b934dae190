"""Grid symbols and move results."""

from enum import Enum

from ...exceptions import InvalidSymbolError


class Symbol(Enum):
    """Value of a grid field, or the identity of a player."""
    EMPTY = " "
    X = "X"
    O = "O"
    
    @property
    def opposite(self) -> "Symbol":
        """Symbol of the other player."""
        if self is Symbol.X:
            return Symbol.O
        if self is Symbol.O:
            return Symbol.X
        raise InvalidSymbolError(f"Unexpected symbol: {self}")
    
    def __str__(self) -> str:
        return "." if self is Symbol.EMPTY else self.value


class MoveResult(Enum):
    """Result of an attempt to set a symbol on a grid."""
    SUCCESS = "success"    # Symbol was set
    BLOCKED = "blocked"    # Another symbol is already in that field, nothing changed
    VICTORY = "victory"    # Symbol was set and completed a winning formation
    TIE = "tie"            # Symbol filled the last empty field without a winning formation
