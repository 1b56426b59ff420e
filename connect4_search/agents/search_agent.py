"""Agent that plays the move chosen by a tree search policy."""

from __future__ import annotations

from typing import Optional, Union

from ..games.connect4 import Connect4Game, Connect4State
from ..search import SearchAlgorithm, SearchStats
from ..search.connect4 import DEFAULT_DEPTH, make_connect4_minimax_policy
from .base_agent import BaseAgent


class SearchAgent(BaseAgent):
    """Wraps a MinimaxPolicy so it can take part in ``play_match``."""

    def __init__(
        self,
        algorithm: Union[SearchAlgorithm, str] = SearchAlgorithm.ALPHABETA,
        depth: int = DEFAULT_DEPTH,
        game: Optional[Connect4Game] = None,
    ) -> None:
        self._game = game or Connect4Game()
        self._policy = make_connect4_minimax_policy(algorithm=algorithm, depth=depth)
        self.name = SearchAlgorithm(algorithm).value

    @property
    def depth(self) -> int:
        return self._policy.config.depth

    @property
    def last_stats(self) -> SearchStats:
        return self._policy.stats

    def act(self, state: Connect4State) -> int:
        return int(self._policy.select_action(self._game, state))
