"""Tests for agents and matches."""

import csv

import pytest

from conftest import random_states

from connect4_search import legal_moves, new_game
from connect4_search.agents import RandomAgent, SearchAgent, ThreatAgent
from connect4_search.games.connect4 import Outcome
from connect4_search.search import SearchAlgorithm
from connect4_search.utils import MetricsLogger, play_game, play_match


def test_random_agent():
    agent = RandomAgent(seed=42)
    state = new_game()
    for _ in range(10):
        assert agent.act(state) in legal_moves(state)


def test_random_agent_is_reproducible():
    states = random_states(5, seed=1)
    first = [RandomAgent(seed=3).act(s) for s in states]
    second = [RandomAgent(seed=3).act(s) for s in states]
    assert first == second


def test_threat_agent_takes_win(p1_three_in_row):
    assert ThreatAgent().act(p1_three_in_row) == 3


def test_threat_agent_blocks(p2_three_in_row):
    assert ThreatAgent().act(p2_three_in_row) == 3


def test_search_agent(p1_three_in_row):
    agent = SearchAgent(SearchAlgorithm.ALPHABETA, depth=2)
    assert agent.name == "alphabeta"
    assert agent.depth == 2
    assert agent.act(p1_three_in_row) == 3
    assert agent.last_stats.nodes > 0


def test_play_game_runs_to_the_end():
    final, move_times = play_game(ThreatAgent(), RandomAgent(seed=0))
    assert final.outcome is not Outcome.IN_PROGRESS
    assert len(move_times) == final.moves_played


def test_threat_self_play_is_deterministic():
    first, _ = play_game(ThreatAgent(), ThreatAgent())
    second, _ = play_game(ThreatAgent(), ThreatAgent())
    assert first.done
    assert (first.board == second.board).all()
    assert first.winner == second.winner


def test_play_match_counts_every_game():
    agent1_wins, draws, agent2_wins = play_match(
        SearchAgent("alphabeta", depth=2),
        RandomAgent(seed=5),
        num_games=4,
        alternate_first_player=True,
    )
    assert agent1_wins + draws + agent2_wins == 4


def test_play_match_logs_metrics(tmp_path):
    with MetricsLogger(log_dir=str(tmp_path)) as logger:
        play_match(ThreatAgent(), RandomAgent(seed=1), num_games=3, metrics_logger=logger)
        assert len(logger.get_metric("result")) == 3

    with open(logger.csv_path, newline="") as f:
        rows = list(csv.DictReader(f))
    assert [row["step"] for row in rows] == ["0", "1", "2"]
    assert {row["result"] for row in rows} <= {"agent1", "agent2", "draw"}
    assert all(int(row["plies"]) >= 7 for row in rows)


def test_agent_giving_up_on_live_board_is_illegal():
    class Resigning(RandomAgent):
        def act(self, state):
            return -1

    with pytest.raises(ValueError):
        play_game(Resigning(), RandomAgent(seed=0))
