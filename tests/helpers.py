"""Shared test helpers and utilities for all test files."""

import random
from typing import Iterable, List, Optional, Tuple

from tictac_sim.engine.manual_time_source import ManualTimeSource
from tictac_sim.engine.round import Round
from tictac_sim.models.game.game_mode import GameMode
from tictac_sim.models.game.grid import GameGrid
from tictac_sim.models.game.player import Player
from tictac_sim.models.game.symbol import Symbol

# All valid coordinates of the grid
VALID_COORDINATES = [
    (0, 0), (1, 0), (2, 0),
    (0, 1), (1, 1), (2, 1),
    (0, 2), (1, 2), (2, 2),
]

# All 8 winning formations
WINNING_FORMATIONS = [
    [(0, 0), (1, 0), (2, 0)],  # Upper row
    [(0, 1), (1, 1), (2, 1)],  # Middle row
    [(0, 2), (1, 2), (2, 2)],  # Bottom row
    [(0, 0), (0, 1), (0, 2)],  # Left column
    [(1, 0), (1, 1), (1, 2)],  # Middle column
    [(2, 0), (2, 1), (2, 2)],  # Right column
    [(0, 0), (1, 1), (2, 2)],  # Diagonal 1
    [(2, 0), (1, 1), (0, 2)],  # Diagonal 2
]

X, O = Symbol.X, Symbol.O

# Full grids without a winning formation, indexed [x][y]
DRAW_FORMATIONS = [
    [[O, X, X], [X, O, O], [O, X, X]],
    [[X, X, O], [O, O, X], [X, O, X]],
    [[O, X, O], [X, O, X], [X, O, X]],
    [[X, O, O], [O, X, X], [X, X, O]],
]


def symbol_for_index(i: int) -> Symbol:
    """X for even indexes and O for odd ones, so tests use both symbols."""
    return Symbol.O if i % 2 else Symbol.X


def create_grid(moves: Iterable[Tuple[Symbol, int, int]] = ()) -> GameGrid:
    """Helper to create a grid with the given moves already made."""
    grid = GameGrid()
    for symbol, x, y in moves:
        grid.try_set_symbol(symbol, x, y)
    return grid


def create_alternating_grid(coordinates: Iterable[Tuple[int, int]]) -> GameGrid:
    """Helper to create a grid with X and O alternating over the given fields."""
    return create_grid(
        (symbol_for_index(i), x, y) for i, (x, y) in enumerate(coordinates)
    )


class CoinFlipRandom(random.Random):
    """Seeded random source with a fixed coin flip.
    
    random() always returns coin, so the round's symbol assignment is known:
    below 0.5 the human plays X, otherwise the AI does. Random picks made with
    choice() are derived from the same value, so they are repeatable too.
    """
    
    def __init__(self, coin: float, seed: int = 1234):
        super().__init__(seed)
        self.coin = coin
    
    def random(self) -> float:
        return self.coin


HUMAN_IS_X = 0.0
AI_IS_X = 0.9


class RoundRecorder:
    """Round finished handler that remembers every call."""
    
    def __init__(self):
        self.winners: List[Optional[Player]] = []
    
    def __call__(self, winner: Optional[Player]) -> None:
        self.winners.append(winner)
    
    @property
    def call_count(self) -> int:
        return len(self.winners)


def setup_round(mode: GameMode = GameMode.PLAYER_VS_PLAYER, grid: Optional[GameGrid] = None,
                coin: float = HUMAN_IS_X, time_per_turn: float = 10.0, event_manager=None):
    """Helper to create a round on a manual clock.
    
    Returns:
        (round, grid, time_source, recorder)
    """
    grid = grid if grid is not None else GameGrid()
    time_source = ManualTimeSource()
    recorder = RoundRecorder()
    game_round = Round(mode, grid, recorder, time_source, time_per_turn,
                       rng=CoinFlipRandom(coin), event_manager=event_manager)
    return game_round, grid, time_source, recorder
