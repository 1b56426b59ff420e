"""
One-ply threat detection for Connect4.

Looks at the current legal moves only: for each open column a piece is
dropped on a scratch copy of the board, tested with :func:`has_win_at` and
taken back. Nothing here recurses, and the state's own board is never touched.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Set

import numpy as np

from .game import legal_moves
from .state import Cell, Connect4State
from .utils import drop_row, has_win_at

CENTER_PREFERENCE = (3, 2, 4, 1, 5, 0, 6)


def _immediate_wins(board: np.ndarray, columns: Sequence[int], player: Cell) -> List[int]:
    """Columns (ascending) where dropping a ``player`` piece wins at once."""
    scratch = board.copy()
    found = []
    for col in columns:
        row = drop_row(scratch, col)
        if row is None:
            continue
        scratch[row, col] = int(player)
        if has_win_at(scratch, row, col):
            found.append(col)
        scratch[row, col] = Cell.EMPTY
    return found


def _open_two_blocks(board: np.ndarray, columns: Sequence[int], opponent: Cell) -> List[int]:
    """
    Flank columns for ``. O O .`` opponent patterns along a row.

    A flank is playable when its column is open and the flank cell is the
    next landing cell in it. The pattern only counts when there is one more
    empty cell beyond either flank. The left flank is taken when playable,
    otherwise the right one.
    """
    rows, cols = board.shape
    open_columns = set(columns)
    found = []
    for row in range(rows):
        for col in range(cols - 3):
            if not (
                board[row, col] == Cell.EMPTY
                and board[row, col + 1] == opponent
                and board[row, col + 2] == opponent
                and board[row, col + 3] == Cell.EMPTY
            ):
                continue

            left_col, right_col = col, col + 3
            left_valid = left_col in open_columns and (
                row == 0 or board[row - 1, left_col] != Cell.EMPTY
            )
            right_valid = right_col in open_columns and (
                row == 0 or board[row - 1, right_col] != Cell.EMPTY
            )
            left_has_space = col > 0 and board[row, col - 1] == Cell.EMPTY
            right_has_space = col + 4 < cols and board[row, col + 4] == Cell.EMPTY

            if not (left_has_space or right_has_space):
                continue
            if left_valid:
                found.append(left_col)
            elif right_valid:
                found.append(right_col)
    return found


def winning_moves(state: Connect4State) -> Set[int]:
    """Columns that win immediately for the player to move."""
    if state.done:
        return set()
    return set(_immediate_wins(state.board, legal_moves(state), state.current_player))


def blocking_moves(state: Connect4State) -> Set[int]:
    """
    Columns the player to move should take away from the opponent.

    Combines the opponent's immediate wins with the open-two setups found by
    :func:`_open_two_blocks`. The second part is a rough heuristic and can
    both miss and overstate threats.
    """
    if state.done:
        return set()
    columns = legal_moves(state)
    opponent = state.current_player.opponent
    blocks = set(_immediate_wins(state.board, columns, opponent))
    blocks.update(_open_two_blocks(state.board, columns, opponent))
    return blocks


def forced_move(state: Connect4State) -> Optional[int]:
    """
    The move the position forces, if any.

    Winning beats blocking, and blocking an immediate win beats breaking up an
    open two. Lower columns win ties. Returns None when nothing is forced.
    """
    if state.done:
        return None
    columns = legal_moves(state)
    wins = _immediate_wins(state.board, columns, state.current_player)
    if wins:
        return wins[0]
    opponent = state.current_player.opponent
    blocks = _immediate_wins(state.board, columns, opponent)
    if blocks:
        return blocks[0]
    setups = _open_two_blocks(state.board, columns, opponent)
    if setups:
        return min(setups)
    return None


def center_preference_move(state: Connect4State) -> int:
    """First open column in center-out order, or -1 when the board is full."""
    columns = set(legal_moves(state))
    for col in CENTER_PREFERENCE:
        if col in columns:
            return col
    return -1


def threat_move(state: Connect4State) -> int:
    """Forced move when there is one, center preference otherwise."""
    if state.done:
        return -1
    move = forced_move(state)
    if move is not None:
        return move
    return center_preference_move(state)
