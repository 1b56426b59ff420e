"""Shared fixtures and board builders for the test suite."""

import sys
from pathlib import Path

import numpy as np
import pytest

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from connect4_search.games.connect4 import Cell, Connect4Game

P1 = Cell.PLAYER_ONE
P2 = Cell.PLAYER_TWO

# Rows alternate between these two patterns (row 0 at the bottom); the full
# board they form has no four in a row anywhere.
DRAW_ROW_A = [1, 1, 2, 2, 1, 1, 2]
DRAW_ROW_B = [2, 2, 1, 1, 2, 2, 1]


def board_with(pieces, rows=6, cols=7):
    """Board with ``pieces`` mapping (row, col) -> cell, row 0 at the bottom."""
    board = np.zeros((rows, cols), dtype=np.int8)
    for (row, col), cell in pieces.items():
        board[row, col] = int(cell)
    return board


def drawn_board():
    return np.array([DRAW_ROW_A, DRAW_ROW_B] * 3, dtype=np.int8)


@pytest.fixture
def game():
    return Connect4Game()


@pytest.fixture
def p1_three_in_row(game):
    """Player one holds row 0 columns 0-2, column 3 is open, player one to move."""
    board = board_with({
        (0, 0): P1, (0, 1): P1, (0, 2): P1,
        (0, 5): P2, (0, 6): P2, (1, 0): P2,
    })
    return game.state_from_board(board)


@pytest.fixture
def p2_three_in_row(game):
    """Player two holds row 0 columns 0-2, column 3 is open, player one to move."""
    board = board_with({
        (0, 0): P2, (0, 1): P2, (0, 2): P2,
        (0, 5): P1, (0, 6): P1, (1, 0): P1,
    })
    return game.state_from_board(board)


def random_states(count, max_plies=20, seed=0):
    """Reachable in-progress states produced by random play."""
    game = Connect4Game()
    rng = np.random.default_rng(seed)
    states = []
    while len(states) < count:
        state = game.initial_state()
        plies = int(rng.integers(0, max_plies + 1))
        for _ in range(plies):
            if state.done:
                break
            state = game.apply_action(state, int(rng.choice(game.legal_actions(state))))
        if not state.done:
            states.append(state)
    return states
