"""Base agent interface."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..games.connect4 import Connect4State


class BaseAgent(ABC):
    """Base class for all agents."""

    name: str = "agent"

    @abstractmethod
    def act(self, state: Connect4State) -> int:
        """Return a column for the player to move in ``state`` (-1 if none)."""

    def reset(self) -> None:
        """Called before every new game."""
