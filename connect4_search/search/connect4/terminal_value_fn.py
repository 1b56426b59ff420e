"""Terminal-only value function for Connect4 search."""

from __future__ import annotations

from ...games.connect4 import Cell, Connect4State, connect4_terminal_evaluator
from ...games.turn_based_game import TurnBasedGame
from ..value_fn import StateValueFn


class Connect4TerminalValueFn(StateValueFn[Connect4State]):
    """Uses connect4_terminal_evaluator: +/-1000 for decided games, 0.0 otherwise."""

    def evaluate(
        self,
        game: TurnBasedGame[Connect4State],
        state: Connect4State,
        root_player: int,
    ) -> float:
        return connect4_terminal_evaluator(state, Cell(root_player))
