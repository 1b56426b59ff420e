from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Sequence, TypeVar, Optional

S = TypeVar("S")  # state type
Action = int  # actions are integer indices (columns for Connect4)


class TurnBasedGame(ABC, Generic[S]):
    """
    Common interface for a deterministic two-player perfect-information game.
    Pure rules only: every transition returns a new state.
    """

    @abstractmethod
    def initial_state(self) -> S:
        """Fresh state at the start of a game."""

    @abstractmethod
    def legal_actions(self, state: S) -> Sequence[Action]:
        """All legal actions in ``state``, in ascending order."""

    @abstractmethod
    def apply_action(self, state: S, action: Action) -> S:
        """Return the new state after playing ``action``."""

    @abstractmethod
    def current_player(self, state: S) -> int:
        """Identity of the player to move."""

    @abstractmethod
    def opponent(self, player: int) -> int:
        """Identity of the other player."""

    @abstractmethod
    def is_terminal(self, state: S) -> bool:
        """Whether the game is over (win or draw)."""

    @abstractmethod
    def winner(self, state: S) -> Optional[int]:
        """
        Who won:

        * a player identity -- that player won
        * None -- draw, or the game is not finished yet
        """
