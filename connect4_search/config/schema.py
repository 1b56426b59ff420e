"""Configuration schema for matches between agents."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from ..search.connect4 import DEFAULT_DEPTH, Strategy, depth_for_difficulty

RANDOM_AGENT = "random"
AGENT_CHOICES = (RANDOM_AGENT,) + tuple(s.value for s in Strategy)


@dataclass
class PlayerConfig:
    agent: str = Strategy.ALPHABETA.value
    depth: int = DEFAULT_DEPTH
    difficulty: Optional[str] = None
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        self.agent = str(getattr(self.agent, "value", self.agent))
        if self.agent not in AGENT_CHOICES:
            raise ValueError(f"Unknown agent '{self.agent}', expected one of {AGENT_CHOICES}")
        if self.difficulty is not None:
            self.depth = depth_for_difficulty(self.difficulty)
        if self.depth < 0:
            raise ValueError(f"depth must be >= 0, got {self.depth}")

    @property
    def is_search(self) -> bool:
        return self.agent != RANDOM_AGENT and Strategy(self.agent).is_search

    def agent_kwargs(self) -> Dict[str, Any]:
        """Constructor arguments for the registered agent."""
        if self.agent == RANDOM_AGENT:
            return {"seed": self.seed}
        if self.is_search:
            return {"depth": self.depth}
        return {}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PlayerConfig":
        seed = data.get("seed")
        return cls(
            agent=str(data.get("agent", Strategy.ALPHABETA.value)),
            depth=int(data.get("depth", DEFAULT_DEPTH)),
            difficulty=data.get("difficulty"),
            seed=int(seed) if seed is not None else None,
        )


@dataclass
class MatchConfig:
    player_one: PlayerConfig = field(default_factory=PlayerConfig)
    player_two: PlayerConfig = field(default_factory=PlayerConfig)
    num_games: int = 1
    alternate_first_player: bool = False
    seed: Optional[int] = None
    log_dir: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MatchConfig":
        seed = data.get("seed")
        num_games = int(data.get("num_games", 1))
        if num_games < 1:
            raise ValueError(f"num_games must be >= 1, got {num_games}")
        return cls(
            player_one=PlayerConfig.from_dict(data.get("player_one") or {}),
            player_two=PlayerConfig.from_dict(data.get("player_two") or {}),
            num_games=num_games,
            alternate_first_player=bool(data.get("alternate_first_player", False)),
            seed=int(seed) if seed is not None else None,
            log_dir=data.get("log_dir"),
        )


def load_config(path: Union[str, Path]) -> MatchConfig:
    """Load MatchConfig from a YAML file."""
    path = Path(path)
    with path.open() as f:
        data = yaml.safe_load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Config must be a YAML mapping, got {type(data)}")
    return MatchConfig.from_dict(data)
