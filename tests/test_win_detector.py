"""Tests for the single-placement win detector."""

import numpy as np
import pytest

from conftest import P1, P2, board_with

from connect4_search.games.connect4 import has_win_at
from connect4_search.games.connect4.utils import WIN_DIRECTIONS

ROWS, COLS = 6, 7


def _segments_through(row, col, dr, dc):
    """All 4-cell segments along (dr, dc) that lie on the board and contain (row, col)."""
    for offset in range(4):
        start_r, start_c = row - dr * offset, col - dc * offset
        cells = [(start_r + dr * i, start_c + dc * i) for i in range(4)]
        if all(0 <= r < ROWS and 0 <= c < COLS for r, c in cells):
            yield cells


@pytest.mark.parametrize("direction", WIN_DIRECTIONS)
def test_win_detected_on_every_axis_and_cell(direction):
    dr, dc = direction
    for row in range(ROWS):
        for col in range(COLS):
            for cells in _segments_through(row, col, dr, dc):
                board = board_with({cell: P1 for cell in cells})
                assert has_win_at(board, row, col), (direction, row, col, cells)

                # three of the four are never enough
                for missing in cells:
                    if missing == (row, col):
                        continue
                    partial = board.copy()
                    partial[missing] = 0
                    assert not has_win_at(partial, row, col)

                    # nor is a segment with an opponent piece in it
                    blocked = board.copy()
                    blocked[missing] = int(P2)
                    assert not has_win_at(blocked, row, col)


def test_empty_cell_never_wins():
    board = board_with({(0, 0): P1, (0, 1): P1, (0, 2): P1, (0, 3): P1})
    assert not has_win_at(board, 0, 4)
    assert not has_win_at(board, 3, 3)


def test_five_in_a_row_counts():
    board = board_with({(2, c): P2 for c in range(1, 6)})
    assert has_win_at(board, 2, 3)


def test_empty_board_has_no_wins():
    board = np.zeros((ROWS, COLS), dtype=np.int8)
    assert not any(has_win_at(board, r, c) for r in range(ROWS) for c in range(COLS))
