"""Abstract base class for Connect-K agents."""

from __future__ import annotations

import abc

from connectk.engine import GameState


class Agent(abc.ABC):
    name: str

    @abc.abstractmethod
    def select_move(self, s: GameState) -> int:
        raise NotImplementedError
