"""Round settings, with overrides from environment variables."""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from ..models.game.game_mode import GameMode

MIN_TIME_PER_TURN = 1.0
MAX_TIME_PER_TURN = 30.0
DEFAULT_TIME_PER_TURN = 10.0

TIME_PER_TURN_ENV = "TICTAC_TIME_PER_TURN"
GAME_MODE_ENV = "TICTAC_GAME_MODE"


@dataclass
class RoundSettings:
    """Settings a round is started with."""
    time_per_turn: float = DEFAULT_TIME_PER_TURN  # Seconds a player has to complete their turn
    mode: GameMode = GameMode.PLAYER_VS_MEDIUM_AI
    
    def __post_init__(self) -> None:
        """Validate settings after creation."""
        if not MIN_TIME_PER_TURN <= self.time_per_turn <= MAX_TIME_PER_TURN:
            raise ValueError(
                f"Time per turn must be in range [{MIN_TIME_PER_TURN:g}, {MAX_TIME_PER_TURN:g}], "
                f"got {self.time_per_turn}"
            )
        if not isinstance(self.mode, GameMode):
            raise ValueError(f"Unexpected game mode: {self.mode}")
    
    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "RoundSettings":
        """Create settings from TICTAC_TIME_PER_TURN and TICTAC_GAME_MODE, falling back to defaults."""
        if environ is None:
            environ = os.environ
        
        time_per_turn = DEFAULT_TIME_PER_TURN
        raw_time = environ.get(TIME_PER_TURN_ENV)
        if raw_time:
            try:
                time_per_turn = float(raw_time)
            except ValueError:
                raise ValueError(f"{TIME_PER_TURN_ENV} must be a number, got {raw_time!r}") from None
        
        mode = GameMode.PLAYER_VS_MEDIUM_AI
        raw_mode = environ.get(GAME_MODE_ENV)
        if raw_mode:
            try:
                mode = GameMode(raw_mode.strip().lower())
            except ValueError:
                valid = ", ".join(m.value for m in GameMode)
                raise ValueError(f"{GAME_MODE_ENV} must be one of {valid}, got {raw_mode!r}") from None
        
        return cls(time_per_turn=time_per_turn, mode=mode)
