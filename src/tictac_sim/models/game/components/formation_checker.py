"""Winning formation detection component for GameGrid."""

from typing import Optional, Tuple, TYPE_CHECKING

from ..symbol import Symbol

if TYPE_CHECKING:
    from ..grid import GameGrid


# Offsets of all 8 neighbours of a field, in scan order
NEIGHBOUR_OFFSETS = tuple(
    (x_offset, y_offset)
    for x_offset in (-1, 0, 1)
    for y_offset in (-1, 0, 1)
    if (x_offset, y_offset) != (0, 0)
)


class FormationCheckerComponent:
    """Finds formations of three same symbols in a row, column or diagonal.
    
    Both checks walk the 8 neighbours of a field. A formation through the field is
    either two more symbols extending in one direction, or one neighbour on each
    side of the field.
    """
    
    def is_winning_formation(self, x: int, y: int, grid: "GameGrid") -> bool:
        """Check if the symbol at (x, y) is part of a winning formation."""
        if grid.move_count < grid.GRID_SIZE:
            return False  # Not enough symbols on the grid for any formation
        
        symbol = grid.get_symbol(x, y)
        if symbol is Symbol.EMPTY:
            return False
        
        for x_offset, y_offset in NEIGHBOUR_OFFSETS:
            current_x, current_y = x + x_offset, y + y_offset
            if not self._holds(grid, current_x, current_y, symbol):
                continue
            
            # Further in the same direction
            if self._holds(grid, current_x + x_offset, current_y + y_offset, symbol):
                return True
            
            # Opposite side, when (x, y) is the middle of the formation
            if self._holds(grid, x - x_offset, y - y_offset, symbol):
                return True
        
        return False
    
    def try_get_winning_move(self, symbol: Symbol, grid: "GameGrid") -> Optional[Tuple[int, int]]:
        """Find a move that completes a formation for symbol.
        
        Fields are scanned row-major (x outer, y inner), so when several winning
        moves exist the first one found is returned.
        """
        if symbol is Symbol.EMPTY:
            return None
        if grid.move_count < grid.GRID_SIZE - 1:
            return None  # No two symbols to build on yet
        
        for x in range(grid.GRID_SIZE):
            for y in range(grid.GRID_SIZE):
                if grid.get_symbol(x, y) is not symbol:
                    continue
                move = self._try_get_finishing_move(x, y, symbol, grid)
                if move is not None:
                    return move
        
        return None
    
    def _try_get_finishing_move(self, x: int, y: int, symbol: Symbol,
                                grid: "GameGrid") -> Optional[Tuple[int, int]]:
        """Find the move that finishes a formation started at (x, y), if there is one."""
        for x_offset, y_offset in NEIGHBOUR_OFFSETS:
            current_x, current_y = x + x_offset, y + y_offset
            if not grid.is_in_range(current_x) or not grid.is_in_range(current_y):
                continue
            
            next_x, next_y = current_x + x_offset, current_y + y_offset
            neighbour = grid.get_symbol(current_x, current_y)
            
            # Gap between two symbols: filling it wins
            if neighbour is Symbol.EMPTY and self._holds(grid, next_x, next_y, symbol):
                return current_x, current_y
            
            if neighbour is not symbol:
                continue
            
            if self._holds(grid, next_x, next_y, Symbol.EMPTY):
                return next_x, next_y
            
            if self._holds(grid, x - x_offset, y - y_offset, Symbol.EMPTY):
                return x - x_offset, y - y_offset
        
        return None
    
    @staticmethod
    def _holds(grid: "GameGrid", x: int, y: int, symbol: Symbol) -> bool:
        """True if (x, y) is on the grid and holds symbol."""
        return grid.is_in_range(x) and grid.is_in_range(y) and grid.get_symbol(x, y) is symbol
