"""CLI for playing agent vs agent."""

import sys
from pathlib import Path
from typing import Literal, Optional

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

import tyro

from connect4_search import agents  # noqa: F401 - ensures default agents are registered
from connect4_search.config import MatchConfig, PlayerConfig, load_config
from connect4_search.registry import make_agent
from connect4_search.utils import MetricsLogger, play_match

AgentChoice = Literal["random", "threat", "minimax", "alphabeta", "expectiminimax"]


def play_agent_vs_agent(
    agent1_type: AgentChoice = "alphabeta",
    agent2_type: AgentChoice = "threat",
    agent1_depth: int = 4,
    agent2_depth: int = 4,
    num_games: int = 1,
    alternate_first_player: bool = False,
    seed: int = 42,
    log_dir: Optional[str] = None,
    config: Optional[Path] = None,
):
    """
    Play agent vs agent games.

    Args:
        agent1_type: Strategy of agent1
        agent2_type: Strategy of agent2
        agent1_depth: Search depth of agent1 (search strategies only)
        agent2_depth: Search depth of agent2 (search strategies only)
        num_games: Number of games to play
        alternate_first_player: Let agent2 open every second game
        seed: Random seed (random agents only)
        log_dir: Directory for per-game CSV metrics
        config: YAML match config; overrides every other option
    """
    if config is not None:
        match_cfg = load_config(config)
    else:
        match_cfg = MatchConfig(
            player_one=PlayerConfig(agent=agent1_type, depth=agent1_depth, seed=seed),
            player_two=PlayerConfig(agent=agent2_type, depth=agent2_depth, seed=seed + 1),
            num_games=num_games,
            alternate_first_player=alternate_first_player,
            seed=seed,
            log_dir=log_dir,
        )

    agent1 = make_agent(match_cfg.player_one.agent, **match_cfg.player_one.agent_kwargs())
    agent2 = make_agent(match_cfg.player_two.agent, **match_cfg.player_two.agent_kwargs())

    print("=" * 50)
    print("Connect Four - Agent vs Agent")
    print("=" * 50)
    print(f"Agent 1: {describe_player(match_cfg.player_one)}")
    print(f"Agent 2: {describe_player(match_cfg.player_two)}")
    print(f"Games: {match_cfg.num_games}")
    print("=" * 50)

    logger = MetricsLogger(log_dir=match_cfg.log_dir) if match_cfg.log_dir else None
    try:
        agent1_wins, draws, agent2_wins = play_match(
            agent1,
            agent2,
            num_games=match_cfg.num_games,
            alternate_first_player=match_cfg.alternate_first_player,
            metrics_logger=logger,
        )
    finally:
        if logger is not None:
            logger.close()

    total = match_cfg.num_games
    print("=" * 50)
    print("Results Summary")
    print("=" * 50)
    print(f"Agent 1 wins: {agent1_wins} ({agent1_wins/total*100:.1f}%)")
    print(f"Agent 2 wins: {agent2_wins} ({agent2_wins/total*100:.1f}%)")
    print(f"Draws: {draws} ({draws/total*100:.1f}%)")
    if logger is not None:
        print(f"Metrics saved to: {logger.csv_path}")
    print("=" * 50)


def describe_player(cfg: PlayerConfig) -> str:
    if cfg.is_search:
        return f"{cfg.agent} (depth {cfg.depth})"
    return cfg.agent


if __name__ == "__main__":
    tyro.cli(play_agent_vs_agent)
