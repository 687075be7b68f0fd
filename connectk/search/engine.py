"""Depth-bounded minimax search, with optional alpha-beta pruning."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Tuple

from connectk.engine import GameState
from connectk.search.evaluator import TerminalEvaluator


@dataclass
class SearchStats:
    nodes: int = 0


class Search:
    """
    Exhaustive minimax over trial moves on a single GameState.

    A node is the position right after a stone was placed, with the mover
    still recorded as current_player; that keeps check_win() looking at the
    side that could have just won. Expanding a node hands the turn to the
    opponent, tries each valid column in ascending order and takes the stone
    back before trying the next one.

    With prune=False the (alpha, beta) window is never tightened, so every
    node is visited. With prune=True the usual cut-offs apply; the returned
    value is the same, only fewer nodes are visited.
    """

    def __init__(self, evaluator: TerminalEvaluator, *, k: int, prune: bool) -> None:
        self.evaluator = evaluator
        self.k = k
        self.prune = prune

    def search_root(self, s: GameState, depth: int, stats: SearchStats) -> Tuple[int, float]:
        """
        Return (column, value) for the player to move in `s`.

        Columns are scanned in ascending order and a later column only replaces
        the best one when its value is strictly greater, so ties go to the
        lowest column.
        """

        legal = s.valid_moves()
        if not legal:
            raise ValueError("no legal moves available")

        best_move: Optional[int] = None
        best_value = -math.inf
        alpha, beta = -math.inf, math.inf

        for col in legal:
            with s.trial_move(col):
                value = self._search(s, depth - 1, alpha, beta, maximizing=False, stats=stats)
            if value > best_value:
                best_value = value
                best_move = col
            if self.prune:
                # Later root moves only matter if they beat what we already have.
                alpha = max(alpha, value)

        assert best_move is not None
        return best_move, best_value

    def _search(
        self,
        s: GameState,
        depth: int,
        alpha: float,
        beta: float,
        *,
        maximizing: bool,
        stats: SearchStats,
    ) -> float:
        stats.nodes += 1

        if depth <= 0 or s.is_terminal(self.k):
            return self.evaluator.evaluate(s, self.k)

        s.switch_player()
        try:
            if maximizing:
                value = -math.inf
                for col in s.valid_moves():
                    with s.trial_move(col):
                        child = self._search(s, depth - 1, alpha, beta, maximizing=False, stats=stats)
                    value = max(value, child)
                    if self.prune:
                        alpha = max(alpha, child)
                        if beta <= alpha:
                            break  # beta cut-off
                return value

            value = math.inf
            for col in s.valid_moves():
                with s.trial_move(col):
                    child = self._search(s, depth - 1, alpha, beta, maximizing=True, stats=stats)
                value = min(value, child)
                if self.prune:
                    beta = min(beta, child)
                    if beta <= alpha:
                        break  # alpha cut-off
            return value
        finally:
            s.switch_player()
