"""Connect4 move selection: search policies and the closed strategy set."""

from __future__ import annotations

from enum import Enum
from typing import Optional, Union

from ...games.connect4 import Connect4Game, Connect4State, threat_move
from ..minimax_policy import MinimaxConfig, MinimaxPolicy, SearchAlgorithm
from .terminal_value_fn import Connect4TerminalValueFn

DEFAULT_DEPTH = 4

DIFFICULTY_DEPTHS = {
    "easy": 2,
    "medium": 4,
    "hard": 6,
}


class Strategy(str, Enum):
    MINIMAX = "minimax"
    ALPHABETA = "alphabeta"
    EXPECTIMINIMAX = "expectiminimax"
    THREAT = "threat"

    @property
    def is_search(self) -> bool:
        return self is not Strategy.THREAT


def depth_for_difficulty(difficulty: str) -> int:
    try:
        return DIFFICULTY_DEPTHS[difficulty]
    except KeyError:
        raise ValueError(
            f"Unknown difficulty '{difficulty}', expected one of {sorted(DIFFICULTY_DEPTHS)}"
        ) from None


def make_connect4_minimax_policy(
    *,
    algorithm: Union[SearchAlgorithm, str] = SearchAlgorithm.ALPHABETA,
    depth: int = DEFAULT_DEPTH,
    chance_opponent: bool = True,
) -> MinimaxPolicy[Connect4State]:
    config = MinimaxConfig(
        depth=depth,
        algorithm=SearchAlgorithm(algorithm),
        chance_opponent=chance_opponent,
    )
    return MinimaxPolicy[Connect4State](
        value_fn=Connect4TerminalValueFn(),
        config=config,
    )


def best_move(
    state: Connect4State,
    algorithm: Union[Strategy, str] = Strategy.ALPHABETA,
    depth: int = DEFAULT_DEPTH,
    game: Optional[Connect4Game] = None,
) -> int:
    """
    Column chosen by ``algorithm`` for the player to move, or -1 if none.

    ``depth`` is ignored by the threat strategy, which only looks one ply
    ahead.
    """
    strategy = Strategy(algorithm)
    if strategy is Strategy.THREAT:
        return threat_move(state)
    policy = make_connect4_minimax_policy(algorithm=strategy.value, depth=depth)
    return int(policy.select_action(game or Connect4Game(state.rows, state.cols), state))
