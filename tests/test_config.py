"""Tests for configuration schemas."""

from __future__ import annotations

import pytest

from connect4_search.config import MatchConfig, PlayerConfig, load_config
from connect4_search.search.connect4 import Strategy


def test_match_config_parsing():
    data = {
        "player_one": {"agent": "minimax", "depth": 3},
        "player_two": {"agent": "expectiminimax", "difficulty": "hard"},
        "num_games": 10,
        "alternate_first_player": True,
        "seed": "7",
    }

    cfg = MatchConfig.from_dict(data)
    assert cfg.player_one.agent == "minimax"
    assert cfg.player_one.depth == 3
    assert cfg.player_two.depth == 6
    assert cfg.num_games == 10
    assert cfg.alternate_first_player is True
    assert cfg.seed == 7
    assert cfg.log_dir is None


def test_defaults_follow_alphabeta_depth_4():
    cfg = MatchConfig.from_dict({})
    assert cfg.player_one.agent == "alphabeta"
    assert cfg.player_one.depth == 4
    assert cfg.num_games == 1


def test_agent_kwargs():
    assert PlayerConfig(agent="alphabeta", depth=5).agent_kwargs() == {"depth": 5}
    assert PlayerConfig(agent="random", seed=3).agent_kwargs() == {"seed": 3}
    assert PlayerConfig(agent="threat").agent_kwargs() == {}
    assert PlayerConfig(agent=Strategy.MINIMAX).agent == "minimax"


@pytest.mark.parametrize(
    "data",
    [
        {"player_one": {"agent": "mcts"}},
        {"player_one": {"depth": -1}},
        {"player_two": {"difficulty": "impossible"}},
        {"num_games": 0},
    ],
)
def test_invalid_config(data):
    with pytest.raises(ValueError):
        MatchConfig.from_dict(data)


def test_load_config(tmp_path):
    path = tmp_path / "match.yaml"
    path.write_text(
        "player_one:\n"
        "  agent: alphabeta\n"
        "  difficulty: easy\n"
        "player_two:\n"
        "  agent: random\n"
        "  seed: 1\n"
        "num_games: 2\n"
        f"log_dir: {tmp_path / 'logs'}\n"
    )
    cfg = load_config(path)
    assert cfg.player_one.depth == 2
    assert cfg.player_two.agent == "random"
    assert cfg.player_two.seed == 1
    assert cfg.log_dir == str(tmp_path / "logs")


def test_load_config_requires_mapping(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("- just\n- a list\n")
    with pytest.raises(ValueError):
        load_config(path)
