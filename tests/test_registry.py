"""Tests for game and agent registries."""

from __future__ import annotations

from uuid import uuid4

import pytest

from connect4_search.registry import (
    list_agents,
    list_games,
    make_agent,
    make_game,
    register_agent,
    register_game,
)
import connect4_search.agents  # noqa: F401 - ensures default agents are registered
from connect4_search.agents import RandomAgent, SearchAgent, ThreatAgent
from connect4_search.games.connect4 import Connect4Game


class _StubGame:
    def __init__(self, size: int, reward: float = 0.0) -> None:
        self.size = size
        self.reward = reward


def test_register_and_make_game():
    game_id = f"stub_game_{uuid4().hex}"
    register_game(game_id, _StubGame, size=4, reward=1.0)

    instance = make_game(game_id, reward=2.5)
    assert isinstance(instance, _StubGame)
    assert instance.size == 4
    assert instance.reward == 2.5
    assert game_id in list_games()


def test_duplicate_registration_rejected():
    game_id = f"stub_game_{uuid4().hex}"
    register_game(game_id, _StubGame, size=1)
    with pytest.raises(ValueError):
        register_game(game_id, _StubGame, size=2)


def test_unknown_ids():
    with pytest.raises(KeyError):
        make_game("missing_game")
    with pytest.raises(KeyError):
        make_agent("missing_agent")


def test_default_entries():
    game = make_game("connect4")
    assert isinstance(game, Connect4Game)
    assert (game.rows, game.cols) == (6, 7)

    assert isinstance(make_agent("random", seed=1), RandomAgent)
    assert isinstance(make_agent("threat"), ThreatAgent)
    for algorithm in ("minimax", "alphabeta", "expectiminimax"):
        agent = make_agent(algorithm, depth=2)
        assert isinstance(agent, SearchAgent)
        assert agent.name == algorithm
        assert agent.depth == 2


def test_register_custom_agent():
    agent_id = f"stub_agent_{uuid4().hex}"
    register_agent(agent_id, ThreatAgent)
    assert agent_id in list_agents()
    assert isinstance(make_agent(agent_id), ThreatAgent)
