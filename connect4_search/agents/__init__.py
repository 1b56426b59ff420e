"""Agents and their registry entries."""

from functools import partial

from ..registry import list_agents, register_agent
from ..search import SearchAlgorithm
from .base_agent import BaseAgent
from .random_agent import RandomAgent
from .search_agent import SearchAgent
from .threat_agent import ThreatAgent

_DEFAULT_AGENTS = {
    "random": RandomAgent,
    "threat": ThreatAgent,
    "minimax": partial(SearchAgent, SearchAlgorithm.MINIMAX),
    "alphabeta": partial(SearchAgent, SearchAlgorithm.ALPHABETA),
    "expectiminimax": partial(SearchAgent, SearchAlgorithm.EXPECTIMINIMAX),
}

for _agent_id, _ctor in _DEFAULT_AGENTS.items():
    if _agent_id not in list_agents():
        register_agent(_agent_id, _ctor)

__all__ = ["BaseAgent", "RandomAgent", "SearchAgent", "ThreatAgent"]
