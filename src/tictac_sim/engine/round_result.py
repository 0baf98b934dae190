"""Round result types."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..models.game.player import Player


class RoundResult(Enum):
    """Possible round results."""
    ONGOING = "ongoing"
    VICTORY = "victory"   # A player completed a winning formation
    TIE = "tie"           # Grid filled up without a winning formation
    TIMEOUT = "timeout"   # Current player ran out of time, the other player wins


@dataclass(frozen=True)
class RoundOutcome:
    """Result of a round and its winner, if there is one."""
    result: RoundResult
    winner: Optional[Player] = None
    
    @property
    def is_finished(self) -> bool:
        return self.result is not RoundResult.ONGOING
    
    @property
    def is_draw(self) -> bool:
        return self.result is RoundResult.TIE
    
    @classmethod
    def ongoing(cls) -> "RoundOutcome":
        return cls(RoundResult.ONGOING)
    
    def __str__(self) -> str:
        if self.winner is None:
            return self.result.value
        return f"{self.result.value} ({self.winner.symbol.value})"
