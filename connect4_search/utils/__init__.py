"""Utility modules."""

from .match import play_game, play_match
from .metrics import MetricsLogger

__all__ = ["MetricsLogger", "play_game", "play_match"]
