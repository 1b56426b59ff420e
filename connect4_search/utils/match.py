"""Utilities for playing matches between agents."""

from __future__ import annotations

import time
from typing import List, Optional, Tuple

from ..agents.base_agent import BaseAgent
from ..games.connect4 import Cell, Connect4Game, Connect4State
from .metrics import MetricsLogger


def play_game(
    first: BaseAgent,
    second: BaseAgent,
    game: Optional[Connect4Game] = None,
) -> Tuple[Connect4State, List[float]]:
    """
    Play one game, ``first`` moving as player one.

    An agent answering with an illegal column (including -1 on a live board)
    makes ``apply_action`` raise ``IllegalMove``.

    Returns:
        The final state and the seconds each move took to choose.
    """
    game = game or Connect4Game()
    first.reset()
    second.reset()

    state = game.initial_state()
    move_times: List[float] = []
    while not game.is_terminal(state):
        agent = first if state.current_player is Cell.PLAYER_ONE else second
        start = time.perf_counter()
        action = agent.act(state)
        move_times.append(time.perf_counter() - start)
        state = game.apply_action(state, action)
    return state, move_times


def play_match(
    agent1: BaseAgent,
    agent2: BaseAgent,
    num_games: int = 1,
    alternate_first_player: bool = False,
    metrics_logger: Optional[MetricsLogger] = None,
    game: Optional[Connect4Game] = None,
) -> Tuple[int, int, int]:
    """
    Play a match between two agents.

    Args:
        agent1: First agent
        agent2: Second agent
        num_games: Number of games to play
        alternate_first_player: If True, agent2 opens every second game.
                                If False, agent1 always goes first (as player one).
        metrics_logger: Optional logger receiving one row per game.
        game: Rules instance (defaults to a standard 6x7 board).

    Returns:
        Tuple of (agent1_wins, draws, agent2_wins).
    """
    game = game or Connect4Game()
    agent1_wins = 0
    draws = 0
    agent2_wins = 0

    for game_idx in range(num_games):
        agent1_first = not (alternate_first_player and game_idx % 2 == 1)
        first, second = (agent1, agent2) if agent1_first else (agent2, agent1)

        final_state, move_times = play_game(first, second, game)

        if final_state.winner is None:
            draws += 1
            result = "draw"
        elif (final_state.winner is Cell.PLAYER_ONE) == agent1_first:
            agent1_wins += 1
            result = "agent1"
        else:
            agent2_wins += 1
            result = "agent2"

        if metrics_logger is not None:
            metrics_logger.log_dict(
                {
                    "result": result,
                    "agent1_first": agent1_first,
                    "plies": final_state.moves_played,
                    "mean_move_seconds": sum(move_times) / len(move_times),
                },
                step=game_idx,
            )

    return agent1_wins, draws, agent2_wins
