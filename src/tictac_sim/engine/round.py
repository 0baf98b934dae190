"""Round of the game: two players take turns until one wins, the grid fills up or time runs out."""

import random
from typing import Callable, List, Optional, Tuple

from .event_system import GameEvent, EventContext, GameEventManager
from .round_result import RoundResult, RoundOutcome
from .time_source import TimeSource
from ..exceptions import (
    OperationUnavailableError, RoundFinishedError, NoValidMovesError, UnexpectedMoveResultError
)
from ..models.game.game_mode import GameMode
from ..models.game.grid import GameGrid
from ..models.game.player import Player, Human, AI, EasyAI, MediumAI, TurnResult
from ..models.game.symbol import Symbol, MoveResult
from ..utils.logging_config import get_game_logger
from ..utils.settings import RoundSettings

logger = get_game_logger(__name__)

# Called with the winner of the round, or None for a draw
RoundFinishedHandler = Callable[[Optional[Player]], None]


class Round:
    """Turn coordination for one round between two players.

    X always moves first. AI players move as soon as their turn begins; human
    players move when input is forwarded with forward_grid_input. Each turn is
    limited to time_per_turn seconds, and a player who runs out of time loses.

    Once finished, the round accepts no more turns until reset() is called.
    """

    def __init__(self, mode: GameMode, grid: GameGrid, round_finished: RoundFinishedHandler,
                 time_source: TimeSource, time_per_turn: float,
                 rng: Optional[random.Random] = None,
                 event_manager: Optional[GameEventManager] = None):
        if not isinstance(mode, GameMode):
            raise ValueError(f"Unexpected game mode: {mode}.")
        if time_per_turn <= 0:
            raise ValueError(f"Time per turn must be positive, got {time_per_turn}.")

        self.mode = mode
        self.grid = grid
        self.rng = rng or random.Random()
        self.event_manager = event_manager
        self._round_finished = round_finished
        self._time_per_turn = float(time_per_turn)

        # Invoked if the current player doesn't move before they run out of time
        self._turn_timed_out_action = time_source.schedule(self._on_turn_timed_out, self._time_per_turn)

        self.player_x, self.player_o = self._create_players()
        self._is_player_x_turn = True
        self.outcome = RoundOutcome.ongoing()

        self._start_first_turn()

    @classmethod
    def from_settings(cls, settings: RoundSettings, grid: GameGrid, round_finished: RoundFinishedHandler,
                      time_source: TimeSource, rng: Optional[random.Random] = None,
                      event_manager: Optional[GameEventManager] = None) -> "Round":
        """Create a round with the mode and time limit from settings."""
        return cls(settings.mode, grid, round_finished, time_source, settings.time_per_turn,
                   rng=rng, event_manager=event_manager)

    # Availability flags
    @property
    def is_undo_available(self) -> bool:
        return self.mode.is_against_ai

    @property
    def is_hint_available(self) -> bool:
        return self.mode.is_against_ai

    @property
    def is_reset_available(self) -> bool:
        return True

    @property
    def is_finished(self) -> bool:
        return self.outcome.is_finished

    # Players
    @property
    def current_player(self) -> Player:
        """The player whose move the round is waiting for."""
        return self.player_x if self._is_player_x_turn else self.player_o

    @property
    def next_player(self) -> Player:
        """The player who moves in the next turn."""
        return self.player_o if self._is_player_x_turn else self.player_x

    # Time
    @property
    def time_per_turn(self) -> float:
        """Seconds a player has to complete their turn."""
        return self._time_per_turn

    @property
    def remaining_time_in_turn(self) -> float:
        """Seconds left before the current player runs out of time."""
        return self._turn_timed_out_action.time_remaining

    @property
    def remaining_time_ratio(self) -> float:
        """Remaining share of the turn's time in range [0, 1], for progress bars."""
        ratio = self.remaining_time_in_turn / self._time_per_turn
        return max(0.0, min(1.0, ratio))

    def forward_grid_input(self, x: int, y: int) -> Optional[TurnResult]:
        """Pass a field selected by the user to the current player.

        Input is ignored when the current player isn't human. If the field is taken
        the turn continues and None is returned.
        """
        self._check_in_progress("forward grid input")

        player = self.current_player
        if not isinstance(player, Human):
            logger.debug(f"Dropped input ({x}, {y}), it's {player}'s turn")
            return None

        turn = player.receive_input(x, y)
        if turn is None:
            return None

        self._handle_turn_result(turn)
        self._play_ai_turns()
        return turn

    def get_hint(self) -> Tuple[Symbol, int, int]:
        """Suggest a valid move for the current player.

        Returns:
            Current player's symbol and the coordinates of the suggested move
        """
        if not self.is_hint_available:
            raise OperationUnavailableError(f"Hints are not available in {self.mode.value}.")
        self._check_in_progress("get a hint")

        # Happens to match MediumAI today, kept separate so either can change on its own:
        # 1. Win if possible
        # 2. Block the other player from winning in their turn
        # 3. Random valid move
        symbol = self.current_player.symbol
        move = self.grid.try_get_winning_move(symbol)
        if move is None:
            move = self.grid.try_get_winning_move(self.next_player.symbol)
        if move is None:
            valid_moves = self.grid.get_all_valid_moves()
            if not valid_moves:
                raise NoValidMovesError("There are no valid moves.")
            move = self.rng.choice(valid_moves)

        x, y = move
        return symbol, x, y

    def undo(self) -> List[Tuple[int, int]]:
        """Undo the last move of both players, so it stays the same player's turn.

        Returns:
            Coordinates of the fields that were cleared
        """
        if not self.is_undo_available:
            raise OperationUnavailableError(f"Undo is not available in {self.mode.value}.")
        self._check_in_progress("undo")

        cleared = self.grid.undo(2)
        if cleared:
            logger.debug(f"Undid moves {cleared}, still {self.current_player}'s turn")
            self._trigger(GameEvent.MOVES_UNDONE, self.current_player, cleared=cleared)
        return cleared

    def reset(self) -> None:
        """Start this round from the beginning with the same settings."""
        if not self.is_reset_available:
            raise OperationUnavailableError("Reset is not available.")

        # New players, so symbols get assigned at random again
        self.player_x, self.player_o = self._create_players()
        self.grid.reset()
        logger.info(f"Round reset ({self.mode.value})")

        self._start_first_turn()

    def _create_players(self) -> Tuple[Player, Player]:
        """Create players matching the mode, as (X, O)."""
        if not self.mode.is_against_ai:
            return Human(Symbol.X, self.grid), Human(Symbol.O, self.grid)

        # Coin flip decides who gets which symbol
        if self.rng.random() < 0.5:
            return Human(Symbol.X, self.grid), self._create_ai_player(Symbol.O)
        return self._create_ai_player(Symbol.X), Human(Symbol.O, self.grid)

    def _create_ai_player(self, symbol: Symbol) -> AI:
        if self.mode is GameMode.PLAYER_VS_EASY_AI:
            return EasyAI(symbol, self.grid, self.rng)
        if self.mode is GameMode.PLAYER_VS_MEDIUM_AI:
            return MediumAI(symbol, self.grid, self.rng)
        raise ValueError(f"Unexpected game mode: {self.mode}.")

    def _start_first_turn(self) -> None:
        self._is_player_x_turn = True
        self.outcome = RoundOutcome.ongoing()
        self._turn_timed_out_action.restart()

        logger.info(f"Round started ({self.mode.value}): X={self.player_x!r}, O={self.player_o!r}")
        self._trigger(GameEvent.ROUND_STARTED, self.current_player)
        self._trigger(GameEvent.TURN_BEGINS, self.current_player)

        self._play_ai_turns()

    def _play_ai_turns(self) -> None:
        """Let AI players move for as long as it is their turn."""
        while not self.is_finished and isinstance(self.current_player, AI):
            self._handle_turn_result(self.current_player.make_move())

    def _handle_turn_result(self, turn: TurnResult) -> None:
        """Advance the round after a player completed their turn."""
        result = turn.move_result
        self._trigger(GameEvent.TURN_ENDS, turn.player, move_result=result, x=turn.x, y=turn.y)

        if result is MoveResult.SUCCESS:
            self._is_player_x_turn = not self._is_player_x_turn
            self._turn_timed_out_action.restart()
            logger.debug(f"{turn.player} moved to ({turn.x}, {turn.y}), {self.current_player}'s turn")
            self._trigger(GameEvent.TURN_BEGINS, self.current_player)
        elif result is MoveResult.VICTORY:
            self._finish(turn.player, RoundResult.VICTORY)
        elif result is MoveResult.TIE:
            self._finish(None, RoundResult.TIE)
        else:
            raise UnexpectedMoveResultError(result)

    def _on_turn_timed_out(self) -> None:
        if self.is_finished:
            return
        logger.info(f"{self.current_player} ran out of time")
        self._trigger(GameEvent.TURN_TIMED_OUT, self.current_player)
        self._finish(self.next_player, RoundResult.TIMEOUT)

    def _finish(self, winner: Optional[Player], result: RoundResult) -> None:
        """Finish the round with a winner, or None for a draw."""
        self._turn_timed_out_action.cancel()
        self.outcome = RoundOutcome(result, winner)

        logger.info(f"Round finished: {self.outcome}")
        self._trigger(GameEvent.ROUND_FINISHED, winner, result=result)
        self._round_finished(winner)

    def _check_in_progress(self, operation: str) -> None:
        if self.is_finished:
            raise RoundFinishedError(f"Can't {operation} after the round finished.")

    def _trigger(self, event: GameEvent, player: Optional[Player], **data) -> None:
        if self.event_manager is None:
            return
        self.event_manager.trigger_event(EventContext(
            event_type=event,
            player=player,
            round=self,
            additional_data=data
        ))

    def __str__(self) -> str:
        if self.is_finished:
            return f"Round ({self.mode.value}) - {self.outcome}"
        return f"Round ({self.mode.value}) - {self.current_player}'s turn"
