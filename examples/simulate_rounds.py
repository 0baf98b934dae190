"""Headless rounds of tic-tac-toe demonstrating the round engine.

This example shows:
- A human that always follows the hint playing against Easy and Medium AI
- Turns limited by a virtual clock, so a slow human loses on time
- A round on the asyncio event loop where nobody moves and time runs out
- Round events and end-of-round messages
"""

import asyncio
import os
import random
import sys
from collections import Counter
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

from tictac_sim.engine.asyncio_time_source import AsyncioTimeSource
from tictac_sim.engine.event_system import GameEvent, GameEventManager
from tictac_sim.engine.manual_time_source import ManualTimeSource
from tictac_sim.engine.round import Round
from tictac_sim.engine.round_messages import EndOfRoundKind, describe_round_outcome
from tictac_sim.models.game.game_mode import GameMode
from tictac_sim.models.game.grid import GameGrid
from tictac_sim.utils.settings import RoundSettings


def format_message(mode, winner):
    """Text shown at the end of a round."""
    message = describe_round_outcome(mode, winner)
    if message.kind is EndOfRoundKind.DRAW:
        return "Draw!"
    if message.kind is EndOfRoundKind.DEFEAT:
        return "Defeat!"
    if message.symbol is not None:
        return f"{message.symbol.value} wins!"
    return "Victory!"


def play_hinted_round(mode, seed, think_time=0.5, time_per_turn=10.0, verbose=False):
    """Play one round where the human moves to the hinted field after think_time seconds.

    Returns:
        End-of-round text
    """
    grid = GameGrid()
    time = ManualTimeSource()
    events = GameEventManager()
    results = []

    if verbose:
        events.register_listener(
            GameEvent.TURN_ENDS,
            lambda ctx: print(f"  {ctx.player} -> ({ctx.additional_data['x']}, {ctx.additional_data['y']})")
        )
        events.register_listener(
            GameEvent.TURN_TIMED_OUT,
            lambda ctx: print(f"  {ctx.player} ran out of time")
        )

    game_round = Round(mode, grid, results.append, time, time_per_turn,
                       rng=random.Random(seed), event_manager=events)

    while not game_round.is_finished:
        time.advance(think_time)
        if game_round.is_finished:
            break
        _, x, y = game_round.get_hint()
        game_round.forward_grid_input(x, y)

    if verbose:
        print(grid)
    return format_message(mode, results[0])


async def play_idle_round(time_per_turn=1.0):
    """Start a player vs player round on the event loop and let X run out of time."""
    finished = asyncio.get_running_loop().create_future()
    game_round = Round(GameMode.PLAYER_VS_PLAYER, GameGrid(), finished.set_result,
                       AsyncioTimeSource(), time_per_turn)

    winner = await finished
    return game_round, winner


def main():
    settings = RoundSettings.from_env()

    print(f"=== One verbose round ({settings.mode.value}) ===")
    print(play_hinted_round(settings.mode, seed=1, time_per_turn=settings.time_per_turn, verbose=True))

    for mode in (GameMode.PLAYER_VS_EASY_AI, GameMode.PLAYER_VS_MEDIUM_AI):
        tally = Counter(play_hinted_round(mode, seed) for seed in range(100))
        print(f"\n=== Hint follower vs {mode.value}, 100 rounds ===")
        for text, count in tally.most_common():
            print(f"  {text:10} {count}")

    print("\n=== Slow human, 2 seconds per turn ===")
    print(play_hinted_round(GameMode.PLAYER_VS_MEDIUM_AI, seed=3, think_time=3.0, time_per_turn=2.0,
                            verbose=True))

    print("\n=== Idle round on the event loop ===")
    game_round, winner = asyncio.run(play_idle_round())
    print(f"  {game_round.outcome} -> {format_message(game_round.mode, winner)}")


if __name__ == "__main__":
    main()
