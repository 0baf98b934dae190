"""3x3 game grid model for TicTac Sim."""

from typing import Callable, List, Optional, Tuple

from .symbol import Symbol, MoveResult
from .components import MoveHistoryComponent, FormationCheckerComponent
from ...exceptions import InvalidCoordinateError, InvalidSymbolError
from ...utils.logging_config import get_game_logger

logger = get_game_logger(__name__)

Coordinates = Tuple[int, int]
FieldChangedListener = Callable[[int, int], None]


class GameGrid:
    """3x3 grid with fields that are either X, O or empty.

    Fields are addressed as (x, y), both in range [0, 2]. Every move is recorded in
    a history so it can be undone; a field can only change through a move, an undo
    or a reset.
    """
    GRID_SIZE = 3
    GRID_FIELD_COUNT = GRID_SIZE * GRID_SIZE
    MAX_COORDINATE = GRID_SIZE - 1

    def __init__(self):
        self._fields: List[List[Symbol]] = [
            [Symbol.EMPTY for _ in range(self.GRID_SIZE)] for _ in range(self.GRID_SIZE)
        ]
        self._field_changed_listeners: List[FieldChangedListener] = []

        # Component instances for delegated functionality
        self._move_history = MoveHistoryComponent()
        self._formation_checker = FormationCheckerComponent()

    # Field changed notifications
    def add_field_changed_listener(self, listener: FieldChangedListener) -> None:
        """Register a listener called with (x, y) every time a field value is written."""
        self._field_changed_listeners.append(listener)

    def remove_field_changed_listener(self, listener: FieldChangedListener) -> None:
        """Remove a listener added with add_field_changed_listener."""
        if listener in self._field_changed_listeners:
            self._field_changed_listeners.remove(listener)

    @property
    def move_count(self) -> int:
        """Number of moves made since the grid was created or reset."""
        return len(self._move_history)

    @property
    def history(self) -> Tuple[Coordinates, ...]:
        """Coordinates of all moves, oldest first."""
        return self._move_history.as_tuple()

    def try_set_symbol(self, symbol: Symbol, x: int, y: int) -> MoveResult:
        """Attempt to set symbol at the given field.

        Args:
            symbol: X or O
            x: Field index along the X axis in range [0, 2]
            y: Field index along the Y axis in range [0, 2]

        Returns:
            BLOCKED if the field is taken (the grid is left unchanged), otherwise
            VICTORY, TIE or SUCCESS depending on the formation the move created.
        """
        self._check_coordinates(x, y)
        if symbol is Symbol.EMPTY:
            raise InvalidSymbolError("Can't make a move with an empty symbol.")

        if self._fields[x][y] is not Symbol.EMPTY:
            return MoveResult.BLOCKED

        self._move_history.push(x, y)
        self._set_symbol_internal(symbol, x, y)
        logger.debug(f"{symbol} placed at ({x}, {y}), move {self.move_count}")

        if self.is_winning_formation(x, y):
            return MoveResult.VICTORY
        if self.move_count >= self.GRID_FIELD_COUNT:
            return MoveResult.TIE

        return MoveResult.SUCCESS

    def get_symbol(self, x: int, y: int) -> Symbol:
        """Current symbol at the given field."""
        self._check_coordinates(x, y)
        return self._fields[x][y]

    def get_all_valid_moves(self) -> List[Coordinates]:
        """Coordinates of all empty fields, x outer and y inner."""
        return [
            (x, y)
            for x in range(self.GRID_SIZE)
            for y in range(self.GRID_SIZE)
            if self._fields[x][y] is Symbol.EMPTY
        ]

    def reset(self) -> List[Coordinates]:
        """Set every field to empty and forget all moves.

        Listeners are notified for every field, including ones that were already empty.

        Returns:
            Coordinates of all fields
        """
        self._move_history.clear()
        changed = []
        for x in range(self.GRID_SIZE):
            for y in range(self.GRID_SIZE):
                self._fields[x][y] = Symbol.EMPTY
                changed.append((x, y))

        for x, y in changed:
            self._notify_field_changed(x, y)

        logger.debug("Grid reset")
        return changed

    def undo(self, n: Optional[int] = None) -> List[Coordinates]:
        """Undo the last n moves, most recent first.

        If n is greater than the number of moves made, nothing is undone. Without
        n, the last move is undone if there is one.

        Returns:
            Coordinates of the fields that were cleared, in the order they were cleared
        """
        if n is None:
            n = 1 if self.move_count else 0
        if n < 0:
            raise ValueError(f"Number of moves to undo can't be negative, got {n}.")
        if n > self.move_count:
            return []

        cleared = []
        for _ in range(n):
            x, y = self._move_history.pop()
            self._set_symbol_internal(Symbol.EMPTY, x, y)
            cleared.append((x, y))

        if cleared:
            logger.debug(f"Undid {len(cleared)} move(s): {cleared}")
        return cleared

    def is_winning_formation(self, x: int, y: int) -> bool:
        """Check if the symbol at (x, y) is part of three in a row, column or diagonal."""
        self._check_coordinates(x, y)
        return self._formation_checker.is_winning_formation(x, y, self)

    def try_get_winning_move(self, symbol: Symbol) -> Optional[Coordinates]:
        """Find a move that wins for symbol, or None if there is no such move.

        When there is more than one winning move, the first one found is returned.
        """
        return self._formation_checker.try_get_winning_move(symbol, self)

    @classmethod
    def is_in_range(cls, i: int) -> bool:
        """True if i is an acceptable X or Y coordinate."""
        return 0 <= i <= cls.MAX_COORDINATE

    def _check_coordinates(self, x: int, y: int) -> None:
        if not self.is_in_range(x):
            raise InvalidCoordinateError("x", x)
        if not self.is_in_range(y):
            raise InvalidCoordinateError("y", y)

    def _set_symbol_internal(self, symbol: Symbol, x: int, y: int) -> None:
        """Write a field without touching the history and notify listeners."""
        self._fields[x][y] = symbol
        self._notify_field_changed(x, y)

    def _notify_field_changed(self, x: int, y: int) -> None:
        for listener in list(self._field_changed_listeners):
            listener(x, y)

    def __str__(self) -> str:
        """Grid as three rows of text, y top to bottom."""
        return "\n".join(
            "".join(str(self._fields[x][y]) for x in range(self.GRID_SIZE))
            for y in range(self.GRID_SIZE)
        )
