"""Depth-limited game-tree search: minimax, alpha-beta and expectiminimax."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, Sequence, TypeVar

import math

from ..games.turn_based_game import Action, TurnBasedGame
from .action_policy import ActionPolicy
from .value_fn import StateValueFn

StateT = TypeVar("StateT")


class SearchAlgorithm(str, Enum):
    MINIMAX = "minimax"
    ALPHABETA = "alphabeta"
    EXPECTIMINIMAX = "expectiminimax"


class NodeType(Enum):
    MAX = "max"
    MIN = "min"
    CHANCE = "chance"


@dataclass
class MinimaxConfig:
    depth: int = 4
    algorithm: SearchAlgorithm = SearchAlgorithm.ALPHABETA
    # expectiminimax only: opponent plies average their children instead of
    # taking the minimum
    chance_opponent: bool = True


@dataclass
class SearchStats:
    nodes: int = 0


class MinimaxPolicy(ActionPolicy[StateT], Generic[StateT]):
    """
    Fixed-depth tree search over a TurnBasedGame + StateValueFn.

    The side to move at the root is the maximising player for the whole
    search; deeper levels only flip between maximising and minimising (or
    chance) roles. Every expansion goes through ``game.apply_action``, so
    sibling branches never share a state.
    """

    def __init__(
        self,
        value_fn: StateValueFn[StateT],
        config: Optional[MinimaxConfig] = None,
    ) -> None:
        self.value_fn = value_fn
        self.config = config or MinimaxConfig()
        self.stats = SearchStats()

    def select_action(
        self,
        game: TurnBasedGame[StateT],
        state: StateT,
        legal_actions: Optional[Sequence[Action]] = None,
    ) -> Action:
        if self.config.depth < 0:
            raise ValueError("Search depth must be >= 0")

        self.stats = SearchStats()
        if game.is_terminal(state):
            return -1

        if legal_actions is None:
            legal_actions = list(game.legal_actions(state))

        root_player = game.current_player(state)
        child_depth = max(self.config.depth - 1, 0)

        best_value = -math.inf
        best_action: Action = -1

        for action in legal_actions:
            next_state = game.apply_action(state, action)
            value = self._score_child(game, next_state, child_depth, root_player, best_value)
            if value > best_value:
                best_value = value
                best_action = action

        return best_action

    def _score_child(
        self,
        game: TurnBasedGame[StateT],
        state: StateT,
        depth: int,
        root_player: int,
        best_value: float,
    ) -> float:
        algorithm = SearchAlgorithm(self.config.algorithm)
        if algorithm is SearchAlgorithm.MINIMAX:
            return self.minimax(game, state, depth, False, root_player)
        if algorithm is SearchAlgorithm.ALPHABETA:
            # A child that cannot beat the best sibling so far only needs an
            # upper bound, which still loses the strict comparison above.
            return self.alphabeta(game, state, depth, best_value, math.inf, False, root_player)
        node_type = NodeType.CHANCE if self.config.chance_opponent else NodeType.MIN
        return self.expectiminimax(game, state, depth, node_type, root_player)

    def _leaf_value(
        self,
        game: TurnBasedGame[StateT],
        state: StateT,
        depth: int,
        root_player: int,
    ) -> Optional[float]:
        """Evaluation when ``state`` is a leaf, None when it must be expanded."""
        self.stats.nodes += 1
        if depth <= 0 or game.is_terminal(state):
            return self.value_fn.evaluate(game, state, root_player)
        return None

    def minimax(
        self,
        game: TurnBasedGame[StateT],
        state: StateT,
        depth: int,
        maximizing: bool,
        root_player: int,
    ) -> float:
        leaf = self._leaf_value(game, state, depth, root_player)
        if leaf is not None:
            return leaf

        legal_actions = list(game.legal_actions(state))
        if not legal_actions:
            return self.value_fn.evaluate(game, state, root_player)

        if maximizing:
            value = -math.inf
            for action in legal_actions:
                child = game.apply_action(state, action)
                value = max(value, self.minimax(game, child, depth - 1, False, root_player))
        else:
            value = math.inf
            for action in legal_actions:
                child = game.apply_action(state, action)
                value = min(value, self.minimax(game, child, depth - 1, True, root_player))
        return value

    def alphabeta(
        self,
        game: TurnBasedGame[StateT],
        state: StateT,
        depth: int,
        alpha: float,
        beta: float,
        maximizing: bool,
        root_player: int,
    ) -> float:
        leaf = self._leaf_value(game, state, depth, root_player)
        if leaf is not None:
            return leaf

        legal_actions = list(game.legal_actions(state))
        if not legal_actions:
            return self.value_fn.evaluate(game, state, root_player)

        if maximizing:
            value = -math.inf
            for action in legal_actions:
                child = game.apply_action(state, action)
                child_value = self.alphabeta(
                    game, child, depth - 1, alpha, beta, False, root_player
                )
                value = max(value, child_value)
                alpha = max(alpha, child_value)
                if beta <= alpha:
                    break
        else:
            value = math.inf
            for action in legal_actions:
                child = game.apply_action(state, action)
                child_value = self.alphabeta(
                    game, child, depth - 1, alpha, beta, True, root_player
                )
                value = min(value, child_value)
                beta = min(beta, child_value)
                if beta <= alpha:
                    break
        return value

    def expectiminimax(
        self,
        game: TurnBasedGame[StateT],
        state: StateT,
        depth: int,
        node_type: NodeType,
        root_player: int,
    ) -> float:
        leaf = self._leaf_value(game, state, depth, root_player)
        if leaf is not None:
            return leaf

        legal_actions = list(game.legal_actions(state))
        if not legal_actions:
            return self.value_fn.evaluate(game, state, root_player)

        if node_type is NodeType.MAX:
            opponent_node = NodeType.CHANCE if self.config.chance_opponent else NodeType.MIN
            value = -math.inf
            for action in legal_actions:
                child = game.apply_action(state, action)
                value = max(
                    value,
                    self.expectiminimax(game, child, depth - 1, opponent_node, root_player),
                )
            return value

        if node_type is NodeType.MIN:
            value = math.inf
            for action in legal_actions:
                child = game.apply_action(state, action)
                value = min(
                    value,
                    self.expectiminimax(game, child, depth - 1, NodeType.MAX, root_player),
                )
            return value

        # chance: the opponent picks uniformly among its legal moves
        total = 0.0
        for action in legal_actions:
            child = game.apply_action(state, action)
            total += self.expectiminimax(game, child, depth - 1, NodeType.MAX, root_player)
        return total / len(legal_actions)
