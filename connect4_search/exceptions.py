"""Exceptions raised by the Connect4 engine."""

from __future__ import annotations

from typing import Optional


class Connect4Error(Exception):
    """Base class for engine errors."""


class IllegalMove(Connect4Error, ValueError):
    """
    Raised when a column drop cannot be applied.

    The state the move was attempted on is never modified, so the caller can
    simply pick another column.
    """

    def __init__(self, column: Optional[int], reason: str) -> None:
        self.column = column
        self.reason = reason
        super().__init__(f"Illegal move in column {column}: {reason}")
