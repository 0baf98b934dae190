"""Game models for TicTac Sim."""

from .symbol import Symbol, MoveResult
from .game_mode import GameMode
from .grid import GameGrid
from .player import Player, Human, AI, EasyAI, MediumAI, TurnResult

__all__ = [
    "Symbol",
    "MoveResult",
    "GameMode",
    "GameGrid",
    "Player",
    "Human",
    "AI",
    "EasyAI",
    "MediumAI",
    "TurnResult",
]
