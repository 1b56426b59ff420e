from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional, Tuple

import numpy as np


class Cell(IntEnum):
    EMPTY = 0
    PLAYER_ONE = 1
    PLAYER_TWO = 2

    @property
    def opponent(self) -> "Cell":
        if self is Cell.EMPTY:
            raise ValueError("EMPTY has no opponent")
        return Cell.PLAYER_TWO if self is Cell.PLAYER_ONE else Cell.PLAYER_ONE


class Outcome(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


@dataclass(frozen=True, eq=False)
class Connect4State:
    """
    Snapshot of a Connect4 game.

    ``board[0]`` is the bottom row. States are never mutated once built: the
    board is flagged read-only and every move produces a fresh state.
    """

    board: np.ndarray
    current_player: Cell = Cell.PLAYER_ONE
    outcome: Outcome = Outcome.IN_PROGRESS
    winner: Optional[Cell] = None
    moves_played: int = 0
    last_move: Optional[Tuple[int, int]] = None

    @property
    def done(self) -> bool:
        return self.outcome is not Outcome.IN_PROGRESS

    @property
    def rows(self) -> int:
        return int(self.board.shape[0])

    @property
    def cols(self) -> int:
        return int(self.board.shape[1])
