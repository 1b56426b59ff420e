"""Search algorithms (minimax, alpha-beta, expectiminimax) and value functions."""

from .action_policy import ActionPolicy
from .value_fn import StateValueFn
from .minimax_policy import (
    MinimaxConfig,
    MinimaxPolicy,
    NodeType,
    SearchAlgorithm,
    SearchStats,
)

__all__ = [
    "ActionPolicy",
    "StateValueFn",
    "MinimaxConfig",
    "MinimaxPolicy",
    "NodeType",
    "SearchAlgorithm",
    "SearchStats",
]
