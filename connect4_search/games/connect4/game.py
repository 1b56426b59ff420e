"""Connect4 game rules (immutable state, for search algorithms)."""

from __future__ import annotations

from typing import List, Optional

import numpy as np

from ...exceptions import IllegalMove
from ..turn_based_game import TurnBasedGame, Action
from .state import Cell, Connect4State, Outcome
from .utils import CONNECT4_COLS, CONNECT4_ROWS, drop_row, empty_board, has_win_at


class Connect4Game(TurnBasedGame[Connect4State]):
    """
    Pure Connect4 rules: only state transitions, no environment around them.
    """

    def __init__(
        self, rows: int = CONNECT4_ROWS, cols: int = CONNECT4_COLS
    ) -> None:
        self.rows = rows
        self.cols = cols

    def initial_state(self) -> Connect4State:
        board = empty_board(self.rows, self.cols)
        board.flags.writeable = False
        return Connect4State(board=board)

    def legal_actions(self, state: Connect4State) -> List[Action]:
        top_row = state.board[-1]
        return [col for col in range(state.cols) if top_row[col] == Cell.EMPTY]

    def is_legal(self, state: Connect4State, action: Action) -> bool:
        if state.done or not 0 <= action < state.cols:
            return False
        return state.board[-1, action] == Cell.EMPTY

    def apply_action(self, state: Connect4State, action: Action) -> Connect4State:
        if state.done:
            raise IllegalMove(action, "game is already over")

        if action < 0 or action >= state.cols:
            raise IllegalMove(action, f"column must be in [0, {state.cols - 1}]")

        if state.board[-1, action] != Cell.EMPTY:
            raise IllegalMove(action, "column is full")

        board = state.board.copy()
        row = drop_row(board, action)
        assert row is not None
        player = state.current_player
        board[row, action] = int(player)
        board.flags.writeable = False

        moves_played = state.moves_played + 1
        outcome = Outcome.IN_PROGRESS
        winner: Optional[Cell] = None
        next_player = player

        if has_win_at(board, row, action):
            outcome = Outcome.WON
            winner = player
        elif moves_played == board.size:
            outcome = Outcome.DRAW
        else:
            next_player = player.opponent

        return Connect4State(
            board=board,
            current_player=next_player,
            outcome=outcome,
            winner=winner,
            moves_played=moves_played,
            last_move=(row, action),
        )

    def current_player(self, state: Connect4State) -> Cell:
        return state.current_player

    def opponent(self, player: int) -> Cell:
        return Cell(player).opponent

    def is_terminal(self, state: Connect4State) -> bool:
        return state.done

    def winner(self, state: Connect4State) -> Optional[Cell]:
        return state.winner

    def state_from_board(
        self,
        board: np.ndarray,
        current_player: Optional[Cell] = None,
    ) -> Connect4State:
        """
        Build an in-progress state from a raw board (row 0 = bottom).

        Used for setting up positions directly. When ``current_player`` is not
        given it is derived from the piece counts. The board must already
        satisfy the gravity rule and must not contain a finished game.
        """
        board = np.array(board, dtype=np.int8)
        if board.shape != (self.rows, self.cols):
            raise ValueError(
                f"Board must have shape {(self.rows, self.cols)}, got {board.shape}"
            )
        moves_played = int(np.count_nonzero(board))
        if current_player is None:
            ones = int(np.count_nonzero(board == Cell.PLAYER_ONE))
            twos = int(np.count_nonzero(board == Cell.PLAYER_TWO))
            current_player = Cell.PLAYER_ONE if ones <= twos else Cell.PLAYER_TWO
        outcome = Outcome.DRAW if moves_played == board.size else Outcome.IN_PROGRESS
        board.flags.writeable = False
        return Connect4State(
            board=board,
            current_player=Cell(current_player),
            outcome=outcome,
            moves_played=moves_played,
        )


_DEFAULT_GAME = Connect4Game()


def new_game() -> Connect4State:
    """Fresh game: empty board, player one to move."""
    return _DEFAULT_GAME.initial_state()


def legal_moves(state: Connect4State) -> List[int]:
    """Open columns in ascending order."""
    return _DEFAULT_GAME.legal_actions(state)


def apply_move(state: Connect4State, column: int) -> Connect4State:
    """Drop a piece for the player to move; raises ``IllegalMove``."""
    return _DEFAULT_GAME.apply_action(state, column)


def is_legal_move(state: Connect4State, column: int) -> bool:
    return _DEFAULT_GAME.is_legal(state, column)
