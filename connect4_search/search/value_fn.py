"""Abstract state value function for search algorithms."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from ..games.turn_based_game import TurnBasedGame

StateT = TypeVar("StateT")


class StateValueFn(Generic[StateT], ABC):
    """
    Leaf evaluator used by the tree searches.
    """

    @abstractmethod
    def evaluate(self, game: TurnBasedGame[StateT], state: StateT, root_player: int) -> float:
        """
        Higher is better for ``root_player``, whoever is to move in ``state``.
        """
        ...
