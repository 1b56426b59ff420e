"""CLI for playing against an agent."""

import sys
from pathlib import Path
from typing import Literal, Optional

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

import tyro

from connect4_search import agents  # noqa: F401 - ensures default agents are registered
from connect4_search.config import PlayerConfig
from connect4_search.exceptions import IllegalMove
from connect4_search.games.connect4 import Cell, Connect4Game, format_board
from connect4_search.registry import make_agent


def play_human_vs_agent(
    agent_type: Literal["random", "threat", "minimax", "alphabeta", "expectiminimax"] = "alphabeta",
    difficulty: Optional[Literal["easy", "medium", "hard"]] = None,
    depth: int = 4,
    human_first: bool = True,
    seed: int = 42,
):
    """
    Play a game against an agent.

    Args:
        agent_type: Strategy the agent plays with
        difficulty: Depth preset (easy=2, medium=4, hard=6); overrides depth
        depth: Search depth for search strategies
        human_first: Whether human plays first
        seed: Random seed
    """
    cfg = PlayerConfig(agent=agent_type, depth=depth, difficulty=difficulty, seed=seed)
    agent = make_agent(cfg.agent, **cfg.agent_kwargs())
    game = Connect4Game()
    human = Cell.PLAYER_ONE if human_first else Cell.PLAYER_TWO

    print("=" * 50)
    print("Connect Four - Human vs Agent")
    print("=" * 50)
    print(f"Agent: {agent_type}" + (f" (depth {cfg.depth})" if cfg.is_search else ""))
    print(f"Human plays: {'first (R)' if human_first else 'second (Y)'}")
    print("=" * 50)
    print()

    state = game.initial_state()
    while not game.is_terminal(state):
        print(format_board(state.board))
        legal_actions = game.legal_actions(state)

        if state.current_player is human:
            print(f"Your turn! Legal columns: {legal_actions}")
            while True:
                try:
                    state = game.apply_action(state, int(input("Enter column (0-6): ")))
                    break
                except IllegalMove as exc:
                    print(f"{exc.reason}! Legal columns: {legal_actions}")
                except ValueError:
                    print("Please enter a valid number!")
        else:
            print("Agent's turn...")
            action = agent.act(state)
            print(f"Agent chose column: {action}")
            state = game.apply_action(state, action)
        print()

    print(format_board(state.board))
    if state.winner is None:
        print("It's a draw!")
    elif state.winner is human:
        print("You win!")
    else:
        print("Agent wins!")


if __name__ == "__main__":
    tyro.cli(play_human_vs_agent)
