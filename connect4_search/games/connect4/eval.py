"""Connect4 evaluation functions for search algorithms."""

from __future__ import annotations

from .state import Cell, Connect4State, Outcome

WIN_SCORE = 1000.0
DRAW_SCORE = 0.0


def connect4_terminal_evaluator(state: Connect4State, root_player: Cell) -> float:
    """
    Score ``state`` for ``root_player``: +1000 for a win, -1000 for a loss and
    0 for a draw. Non-terminal positions score 0, there is no positional term.
    """
    if state.outcome is not Outcome.WON:
        return DRAW_SCORE
    if state.winner == root_player:
        return WIN_SCORE
    return -WIN_SCORE
