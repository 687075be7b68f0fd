"""
Compare minimax and alpha-beta on the same positions.

Both engines must agree on value and column at every depth; alpha-beta
should get there visiting fewer nodes. The command prints one table row
per depth and exits with status 1 if the engines ever disagree.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table
from tqdm import trange

from connectk.engine import PRESETS, GameState, initial_state
from connectk.search.driver import SearchResult, choose_move

console = Console()
app = typer.Typer()


@dataclass(frozen=True)
class Comparison:
    depth: int
    minimax: SearchResult
    alphabeta: SearchResult

    @property
    def agree(self) -> bool:
        return (self.minimax.column, self.minimax.score) == (self.alphabeta.column, self.alphabeta.score)


def position_after(board: str, opening: Optional[List[int]] = None) -> GameState:
    """Empty preset board with the 0-based `opening` columns played alternately from X."""

    s = initial_state(PRESETS[board])
    for col in opening or []:
        if not s.apply_move(col):
            raise ValueError(f"illegal opening move: column {col}")
        if s.check_win() or s.is_full():
            raise ValueError("opening ends the game")
        s.switch_player()
    return s


def compare_engines(s: GameState, depths: List[int]) -> List[Comparison]:
    rows: List[Comparison] = []
    for i in trange(len(depths), desc="depths", leave=False):
        depth = depths[i]
        rows.append(
            Comparison(
                depth=depth,
                minimax=choose_move(s, "minimax", depth),
                alphabeta=choose_move(s, "alphabeta", depth),
            )
        )
    return rows


def _print_comparison(rows: List[Comparison]) -> None:
    table = Table(title="Minimax vs alpha-beta")
    table.add_column("depth", justify="right")
    table.add_column("col", justify="right")
    table.add_column("value", justify="right")
    table.add_column("minimax nodes", justify="right")
    table.add_column("alphabeta nodes", justify="right")
    table.add_column("minimax s", justify="right")
    table.add_column("alphabeta s", justify="right")
    table.add_column("agree")
    for row in rows:
        table.add_row(
            str(row.depth),
            str(row.alphabeta.column + 1),
            str(row.alphabeta.score),
            str(row.minimax.nodes_visited),
            str(row.alphabeta.nodes_visited),
            f"{row.minimax.elapsed:.3f}",
            f"{row.alphabeta.elapsed:.3f}",
            "yes" if row.agree else "[red]NO[/red]",
        )
    console.print(table)


@app.command()
def compare(
    board: str = typer.Option("tiny", help="board preset: tiny, wide or standard"),
    min_depth: int = typer.Option(1, help="first depth to search"),
    max_depth: int = typer.Option(5, help="last depth to search"),
    opening: Optional[List[int]] = typer.Option(None, help="0-based columns played before searching"),
) -> None:
    """Run both engines at each depth and report value, column and node counts."""

    if board not in PRESETS:
        raise typer.BadParameter(f"unknown board {board!r}, expected one of {sorted(PRESETS)}")
    if min_depth < 0 or max_depth < min_depth:
        raise typer.BadParameter("need 0 <= min-depth <= max-depth")

    try:
        s = position_after(board, opening)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    rows = compare_engines(s, list(range(min_depth, max_depth + 1)))
    _print_comparison(rows)

    if not all(row.agree for row in rows):
        console.print("[red]engines disagree[/red]")
        raise typer.Exit(code=1)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
