"""Terminal-only position scoring used at search leaves."""

from __future__ import annotations

from typing import Optional

from connectk.engine import GameState

WIN_SCORE = 100


class TerminalEvaluator:
    """
    Score a leaf by whether the player recorded on it has connected k.

    There is no heuristic for open positions: anything that is
    not a win scores 0, whatever the depth, so search strength comes from
    depth alone.
    """

    def __init__(self, maximizing_player: int) -> None:
        self.maximizing_player = maximizing_player

    def evaluate(self, s: GameState, k: Optional[int] = None) -> int:
        if not s.check_win(k):
            return 0
        return WIN_SCORE if s.current_player == self.maximizing_player else -WIN_SCORE
