"""Move selection for automated players: run an engine and report diagnostics."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from connectk.engine import GameState
from connectk.search.engine import Search, SearchStats
from connectk.search.evaluator import TerminalEvaluator

logger = logging.getLogger(__name__)

# engine name -> whether it prunes
ENGINES: Dict[str, bool] = {"minimax": False, "alphabeta": True}


@dataclass(frozen=True)
class SearchResult:
    column: int
    score: int
    nodes_visited: int
    elapsed: float  # seconds
    engine: str
    depth: int


def choose_move(s: GameState, engine: str = "alphabeta", depth: int = 5, k: Optional[int] = None) -> SearchResult:
    """
    Pick a column for the player to move in `s`.

    The search runs on a clone, so `s` is left exactly as it was passed in.
    Asking for a move on a finished game or with a negative depth is a
    caller error and raises ValueError instead of returning a made-up move.
    """

    if engine not in ENGINES:
        raise ValueError(f"unknown engine: {engine!r} (expected one of {sorted(ENGINES)})")
    if depth < 0:
        raise ValueError("depth must be >= 0")
    k = s.cfg.k if k is None else k
    if s.terminal_result(k).is_terminal:
        raise ValueError("cannot search a terminal state")

    search = Search(TerminalEvaluator(maximizing_player=s.current_player), k=k, prune=ENGINES[engine])
    stats = SearchStats()

    t0 = time.perf_counter()
    column, value = search.search_root(s.clone(), depth, stats)
    elapsed = time.perf_counter() - t0

    if column not in s.valid_moves():
        raise RuntimeError(f"{engine} picked an illegal column: {column}")

    result = SearchResult(
        column=column,
        score=int(value),
        nodes_visited=stats.nodes,
        elapsed=elapsed,
        engine=engine,
        depth=depth,
    )
    logger.debug(
        "%s depth=%d: col=%d score=%d nodes=%d elapsed=%.3fs",
        engine,
        depth,
        result.column,
        result.score,
        result.nodes_visited,
        result.elapsed,
    )
    return result


def best_move_minimax(s: GameState, depth: int, k: Optional[int] = None) -> Tuple[int, int]:
    result = choose_move(s, "minimax", depth, k)
    return result.column, result.score


def best_move_alphabeta(s: GameState, depth: int, k: Optional[int] = None) -> Tuple[int, int]:
    result = choose_move(s, "alphabeta", depth, k)
    return result.column, result.score
