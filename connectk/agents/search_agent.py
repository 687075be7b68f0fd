"""Agent backed by the minimax / alpha-beta move-selection driver."""

from __future__ import annotations

from typing import Callable, Optional

from connectk.agents.base import Agent
from connectk.engine import GameState
from connectk.search.driver import ENGINES, SearchResult, choose_move

ReportFn = Callable[[SearchResult], None]


class SearchAgent(Agent):
    def __init__(
        self,
        name: str,
        *,
        engine: str = "alphabeta",
        depth: int = 5,
        report: Optional[ReportFn] = None,
    ) -> None:
        if engine not in ENGINES:
            raise ValueError(f"unknown engine: {engine!r}")
        if depth < 0:
            raise ValueError("depth must be >= 0")
        self.name = name
        self.engine = engine
        self.depth = depth
        self.report = report
        self.last_result: Optional[SearchResult] = None

    def select_move(self, s: GameState) -> int:
        result = choose_move(s, self.engine, self.depth)
        self.last_result = result
        if self.report is not None:
            self.report(result)
        return result.column
