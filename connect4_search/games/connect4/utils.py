"""Shared utilities for Connect4 game logic."""

from __future__ import annotations

from typing import Optional

import numpy as np

from .state import Cell

# Board dimensions
CONNECT4_ROWS = 6
CONNECT4_COLS = 7
CONNECT_N = 4

# horizontal, vertical, diagonal ↗, diagonal ↘
WIN_DIRECTIONS = ((0, 1), (1, 0), (1, 1), (1, -1))

_SYMBOLS = {Cell.EMPTY: ".", Cell.PLAYER_ONE: "R", Cell.PLAYER_TWO: "Y"}


def empty_board(rows: int = CONNECT4_ROWS, cols: int = CONNECT4_COLS) -> np.ndarray:
    return np.zeros((rows, cols), dtype=np.int8)


def drop_row(board: np.ndarray, col: int) -> Optional[int]:
    """Row a piece dropped into ``col`` would land on, or None if the column is full."""
    for row in range(board.shape[0]):
        if board[row, col] == Cell.EMPTY:
            return row
    return None


def check_n_in_row(
    board: np.ndarray,
    row: int,
    col: int,
    player: int,
    n: int,
) -> bool:
    """
    Check if there are at least n pieces in a row for the given player
    passing through (row, col).

    Args:
        board: Game board array.
        row: Row position to check from.
        col: Column position to check from.
        player: Player cell value.
        n: Number of pieces in a row to check for.

    Returns:
        True if player has at least n in a row through (row, col).
    """
    rows, cols = board.shape

    for dr, dc in WIN_DIRECTIONS:
        count = 1
        # Check positive direction
        for i in range(1, n):
            r, c = row + dr * i, col + dc * i
            if 0 <= r < rows and 0 <= c < cols and board[r, c] == player:
                count += 1
            else:
                break
        # Check negative direction
        for i in range(1, n):
            r, c = row - dr * i, col - dc * i
            if 0 <= r < rows and 0 <= c < cols and board[r, c] == player:
                count += 1
            else:
                break

        if count >= n:
            return True

    return False


def has_win_at(board: np.ndarray, row: int, col: int) -> bool:
    """
    True if the piece at (row, col) completes four in a row.

    Meant to be called right after a piece lands on (row, col); this is the
    only win check in the package, real and simulated drops both go through it.
    """
    player = int(board[row, col])
    if player == Cell.EMPTY:
        return False
    return check_n_in_row(board, row, col, player, n=CONNECT_N)


def format_board(board: np.ndarray) -> str:
    """
    Render the board as text, top row first.

    Each line is prefixed with its row index; ``.`` is empty, ``R`` is player
    one and ``Y`` is player two. A column footer closes the picture.
    """
    rows, cols = board.shape
    lines = []
    for row in range(rows - 1, -1, -1):
        cells = " ".join(_SYMBOLS[Cell(int(v))] for v in board[row])
        lines.append(f"{row}| {cells}")
    lines.append("   " + " ".join(str(c) for c in range(cols)))
    return "\n".join(lines)
