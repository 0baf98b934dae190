"""Game modes a round can be played in."""

from enum import Enum


class GameMode(Enum):
    """Who plays against whom."""
    PLAYER_VS_PLAYER = "player_vs_player"      # Local multiplayer
    PLAYER_VS_EASY_AI = "player_vs_easy_ai"
    PLAYER_VS_MEDIUM_AI = "player_vs_medium_ai"
    
    @property
    def is_against_ai(self) -> bool:
        return self is not GameMode.PLAYER_VS_PLAYER
