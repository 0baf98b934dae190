"""End-of-round messages for the presentation layer."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..models.game.game_mode import GameMode
from ..models.game.player import Player
from ..models.game.symbol import Symbol


class EndOfRoundKind(Enum):
    """How the end of a round is framed to the user."""
    VICTORY = "victory"
    DEFEAT = "defeat"
    DRAW = "draw"


@dataclass(frozen=True)
class EndOfRoundMessage:
    """What to show when a round finishes."""
    kind: EndOfRoundKind
    symbol: Optional[Symbol] = None  # Winner's symbol, only when it is needed to tell who won


def describe_round_outcome(mode: GameMode, winner: Optional[Player]) -> EndOfRoundMessage:
    """Choose victory, defeat or draw framing for a finished round.
    
    In player vs player the result is always a victory tagged with the winner's
    symbol. Against AI the human either wins or is defeated, and the symbol is
    left out.
    """
    if winner is None:
        return EndOfRoundMessage(EndOfRoundKind.DRAW)
    if mode is GameMode.PLAYER_VS_PLAYER:
        return EndOfRoundMessage(EndOfRoundKind.VICTORY, winner.symbol)
    if winner.is_ai:
        return EndOfRoundMessage(EndOfRoundKind.DEFEAT)
    return EndOfRoundMessage(EndOfRoundKind.VICTORY)
