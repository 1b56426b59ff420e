"""Random agent implementation."""

from typing import Optional

import numpy as np

from ..games.connect4 import Connect4State, legal_moves
from .base_agent import BaseAgent


class RandomAgent(BaseAgent):
    """Agent that selects columns uniformly from the legal ones."""

    name = "random"

    def __init__(self, seed: Optional[int] = None):
        """
        Initialize random agent.

        Args:
            seed: Random seed for reproducibility
        """
        self.rng = np.random.default_rng(seed)

    def act(self, state: Connect4State) -> int:
        if state.done:
            return -1
        columns = legal_moves(state)
        if not columns:
            return -1
        return int(self.rng.choice(columns))
