"""Threat-based advisory agent."""

from ..games.connect4 import Connect4State, threat_move
from .base_agent import BaseAgent


class ThreatAgent(BaseAgent):
    """
    Agent that follows simple rules:
    1. Win if possible
    2. Block the opponent's immediate win, or an open two on a row
    3. Otherwise play the column closest to the center
    """

    name = "threat"

    def act(self, state: Connect4State) -> int:
        return threat_move(state)
