"""Config package exports."""

from .schema import AGENT_CHOICES, MatchConfig, PlayerConfig, load_config

__all__ = ["AGENT_CHOICES", "MatchConfig", "PlayerConfig", "load_config"]
