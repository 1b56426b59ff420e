"""Connect4 game engine with minimax, alpha-beta and expectiminimax search."""

from .exceptions import Connect4Error, IllegalMove
from .games.connect4 import (
    Cell,
    Connect4Game,
    Connect4State,
    Outcome,
    apply_move,
    blocking_moves,
    forced_move,
    format_board,
    has_win_at,
    is_legal_move,
    legal_moves,
    new_game,
    winning_moves,
)
from .search.connect4 import Strategy, best_move

__all__ = [
    "Cell",
    "Connect4Error",
    "Connect4Game",
    "Connect4State",
    "IllegalMove",
    "Outcome",
    "Strategy",
    "apply_move",
    "best_move",
    "blocking_moves",
    "forced_move",
    "format_board",
    "has_win_at",
    "is_legal_move",
    "legal_moves",
    "new_game",
    "winning_moves",
]
