"""Adversarial search engines and the move-selection driver."""

from connectk.search.driver import ENGINES, SearchResult, best_move_alphabeta, best_move_minimax, choose_move
from connectk.search.engine import Search, SearchStats
from connectk.search.evaluator import WIN_SCORE, TerminalEvaluator

__all__ = [
    "ENGINES",
    "Search",
    "SearchResult",
    "SearchStats",
    "TerminalEvaluator",
    "WIN_SCORE",
    "best_move_alphabeta",
    "best_move_minimax",
    "choose_move",
]
