"""Connect4-specific search policies and value functions."""

from .terminal_value_fn import Connect4TerminalValueFn
from .minimax import (
    DEFAULT_DEPTH,
    DIFFICULTY_DEPTHS,
    Strategy,
    best_move,
    depth_for_difficulty,
    make_connect4_minimax_policy,
)

__all__ = [
    "Connect4TerminalValueFn",
    "DEFAULT_DEPTH",
    "DIFFICULTY_DEPTHS",
    "Strategy",
    "best_move",
    "depth_for_difficulty",
    "make_connect4_minimax_policy",
]
