"""Move history component for GameGrid."""

from typing import List, Optional, Tuple

Coordinates = Tuple[int, int]


class MoveHistoryComponent:
    """Stack of the coordinates of every move made on a grid.
    
    Symbols aren't stored because a field can't change once it is set, so the
    symbol of a move can always be read back from the grid.
    """
    
    def __init__(self):
        self._moves: List[Coordinates] = []
    
    def __len__(self) -> int:
        return len(self._moves)
    
    def push(self, x: int, y: int) -> None:
        """Record a move as the most recent one."""
        self._moves.append((x, y))
    
    def pop(self) -> Optional[Coordinates]:
        """Remove and return the most recent move, or None if there are no moves."""
        if not self._moves:
            return None
        return self._moves.pop()
    
    def clear(self) -> None:
        self._moves.clear()
    
    def as_tuple(self) -> Tuple[Coordinates, ...]:
        """All moves, oldest first."""
        return tuple(self._moves)
