"""CLI rendering and input helpers for Connect-K."""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional, Sequence

from connectk.agents import Agent, HumanAgent, RandomAgent, SearchAgent
from connectk.engine import PLAYER_X, PRESETS, SYMBOLS, ConnectKConfig, GameState, Move, initial_state
from connectk.search.driver import SearchResult

AGENT_CHOICES = ["human", "random", "minimax", "alphabeta"]


def render_board(s: GameState) -> str:
    lines: List[str] = []
    for r in range(s.rows):
        lines.append(" ".join(SYMBOLS[int(s.board[r, c])] for c in range(s.cols)))
    lines.append("-" * (2 * s.cols - 1))
    lines.append(" ".join(str(c + 1) for c in range(s.cols)))
    return "\n".join(lines)


def format_move_history(moves: Sequence[Move]) -> str:
    return " ".join(f"{m.ply}:{SYMBOLS[m.player]}@{m.col + 1}" for m in moves)


def format_search_result(result: SearchResult) -> str:
    return "\n".join(
        [
            f"{result.engine} is thinking...",
            f" visited {result.nodes_visited} states",
            f" best move: @{result.column + 1}, value: {result.score}",
            f" elapsed time: {result.elapsed:.3f} secs",
        ]
    )


def print_search_result(result: SearchResult) -> None:
    print(format_search_result(result))


def _parse_column(raw: str, cols: int) -> Optional[int]:
    """Parse a 1-based column label into a 0-based index."""

    raw = raw.strip()
    if not raw:
        return None
    try:
        col = int(raw)
    except ValueError:
        return None

    if 1 <= col <= cols:
        return col - 1
    return None


def prompt_for_human_move(s: GameState, name: str) -> int:
    legal = s.valid_moves()
    labels = [c + 1 for c in legal]
    prompt = f"{name} ({SYMBOLS[s.current_player]}) to move. Column {labels}: "

    while True:
        raw = input(prompt)
        col = _parse_column(raw, s.cols)
        if col is None:
            print(f"Enter a column number between 1 and {s.cols}.")
            continue
        if col not in legal:
            print("Column is full. Try another.")
            continue
        return col


def play_game(cfg: ConnectKConfig, x_agent: Agent, o_agent: Agent) -> GameState:
    s = initial_state(cfg, starting_player=PLAYER_X)

    while True:
        print(render_board(s))
        agent = x_agent if s.current_player == PLAYER_X else o_agent
        col = agent.select_move(s)
        if not s.apply_move(col):
            # Agents only return valid columns; a bad one is a bug, not user input.
            raise ValueError(f"{agent.name} played an illegal column: {col}")

        move = s.moves[-1]
        print(f"Move: {SYMBOLS[move.player]} -> col {move.col + 1}, row {move.row + 1}")
        print("")

        # The mover is still current_player here, so check_win() looks at the right side.
        if s.check_win():
            print(render_board(s))
            print(f"Result: {SYMBOLS[s.current_player]} wins")
            break
        if s.is_full():
            print(render_board(s))
            print("Result: draw")
            break
        s.switch_player()

    print(f"Moves: {format_move_history(s.moves)}")
    return s


def build_agent(choice: str, side: str, *, depth: int, seed: Optional[int]) -> Agent:
    name = f"Player {side}"
    if choice == "human":
        return HumanAgent(name, prompt_for_human_move)
    if choice == "random":
        return RandomAgent(f"Random {side}", seed=seed)
    if choice in ("minimax", "alphabeta"):
        label = "Minimax" if choice == "minimax" else "AlphaBeta"
        return SearchAgent(f"{label} {side}", engine=choice, depth=depth, report=print_search_result)

    raise ValueError(f"unsupported agent choice: {choice}")


def _pick_seed(base: Optional[int], *, offset: int) -> Optional[int]:
    if base is not None:
        return base + offset
    return None


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Connect-K CLI")
    parser.add_argument(
        "--board",
        choices=sorted(PRESETS),
        default="tiny",
        help="tiny 3x3 connect-3, wide 3x5 connect-3, standard 6x7 connect-4",
    )
    parser.add_argument("--x", choices=AGENT_CHOICES, default="human", help="agent for X (moves first)")
    parser.add_argument("--o", choices=AGENT_CHOICES, default="alphabeta", help="agent for O")
    parser.add_argument("--depth", type=int, default=5, help="search depth (plies) for minimax/alphabeta")
    parser.add_argument("--seed", type=int, default=None, help="base random seed (for random agents)")
    parser.add_argument("--verbose", action="store_true", help="log search decisions")

    args = parser.parse_args(argv)
    if args.depth < 0:
        parser.error("--depth must be >= 0")
    return args


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    cfg = PRESETS[args.board]
    x_agent = build_agent(args.x, "X", depth=args.depth, seed=_pick_seed(args.seed, offset=0))
    o_agent = build_agent(args.o, "O", depth=args.depth, seed=_pick_seed(args.seed, offset=1))

    play_game(cfg, x_agent, o_agent)


if __name__ == "__main__":
    main()
