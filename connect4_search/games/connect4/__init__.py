from __future__ import annotations

from .eval import WIN_SCORE, connect4_terminal_evaluator
from .game import Connect4Game, apply_move, is_legal_move, legal_moves, new_game
from .state import Cell, Connect4State, Outcome
from .threats import (
    blocking_moves,
    center_preference_move,
    forced_move,
    threat_move,
    winning_moves,
)
from .utils import (
    CONNECT4_COLS,
    CONNECT4_ROWS,
    check_n_in_row,
    format_board,
    has_win_at,
)

__all__ = [
    "CONNECT4_COLS",
    "CONNECT4_ROWS",
    "Cell",
    "Connect4Game",
    "Connect4State",
    "Outcome",
    "WIN_SCORE",
    "apply_move",
    "blocking_moves",
    "center_preference_move",
    "check_n_in_row",
    "connect4_terminal_evaluator",
    "forced_move",
    "format_board",
    "has_win_at",
    "is_legal_move",
    "legal_moves",
    "new_game",
    "threat_move",
    "winning_moves",
]

from ...registry import list_games, register_game

if "connect4" not in list_games():
    register_game("connect4", Connect4Game, rows=CONNECT4_ROWS, cols=CONNECT4_COLS)
