"""Player models for TicTac Sim."""

import random
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from .grid import GameGrid
from .symbol import Symbol, MoveResult
from ...exceptions import InvalidSymbolError, NoValidMovesError
from ...utils.logging_config import get_game_logger

logger = get_game_logger(__name__)


@dataclass(frozen=True)
class TurnResult:
    """Outcome of a completed turn, handed back to whoever runs the turns."""
    player: "Player"
    move_result: MoveResult
    x: int
    y: int


class Player(ABC):
    """Decides what move to make in their turn.

    Players share the grid with the round and with each other; the round makes
    sure only the player whose turn it is touches it.
    """

    def __init__(self, symbol: Symbol, grid: GameGrid):
        if symbol is Symbol.EMPTY:
            raise InvalidSymbolError("Player can't be assigned empty symbol.")

        self.symbol = symbol
        self.grid = grid

    @property
    def is_ai(self) -> bool:
        return False

    def _move(self, x: int, y: int) -> TurnResult:
        result = self.grid.try_set_symbol(self.symbol, x, y)
        return TurnResult(self, result, x, y)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.symbol.value})"


class Human(Player):
    """Player controlled by a user."""

    def receive_input(self, x: int, y: int) -> Optional[TurnResult]:
        """Try to move to the given field.

        Returns:
            None if the field is taken and the player has to pick again, otherwise
            the result of the completed turn.
        """
        turn = self._move(x, y)
        if turn.move_result is MoveResult.BLOCKED:
            logger.debug(f"{self} input at ({x}, {y}) blocked")
            return None
        return turn


class AI(Player):
    """Player controlled by the computer."""

    def __init__(self, symbol: Symbol, grid: GameGrid, rng: Optional[random.Random] = None):
        super().__init__(symbol, grid)
        self.rng = rng or random.Random()

    @property
    def is_ai(self) -> bool:
        return True

    @abstractmethod
    def make_move(self) -> TurnResult:
        """Pick a move, make it and return the result of the turn."""
        pass

    def _random_valid_move(self):
        valid_moves = self.grid.get_all_valid_moves()
        if not valid_moves:
            raise NoValidMovesError("There are no valid moves.")
        return self.rng.choice(valid_moves)


class EasyAI(AI):
    """AI that makes random moves."""

    def make_move(self) -> TurnResult:
        x, y = self._random_valid_move()
        logger.debug(f"{self} picked random move ({x}, {y})")
        return self._move(x, y)


class MediumAI(AI):
    """AI that always wins when it can and blocks the other player from winning."""

    def __init__(self, symbol: Symbol, grid: GameGrid, rng: Optional[random.Random] = None):
        super().__init__(symbol, grid, rng)
        self.opposite_symbol = symbol.opposite

    def make_move(self) -> TurnResult:
        # 1. Win if possible
        # 2. Block the other player from winning in their turn
        # 3. Random valid move
        move = self.grid.try_get_winning_move(self.symbol)
        if move is None:
            move = self.grid.try_get_winning_move(self.opposite_symbol)
        if move is None:
            move = self._random_valid_move()

        x, y = move
        logger.debug(f"{self} moves to ({x}, {y})")
        return self._move(x, y)
