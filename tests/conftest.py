from __future__ import annotations

from typing import Iterable

import pytest

from connectk.engine import PRESETS, GameState, initial_state


def play(s: GameState, cols: Iterable[int]) -> GameState:
    """Apply `cols` alternately, switching player after each move."""

    for col in cols:
        assert s.apply_move(col), f"illegal move in fixture: {col}"
        s.switch_player()
    return s


@pytest.fixture
def tiny() -> GameState:
    return initial_state(PRESETS["tiny"])


@pytest.fixture
def standard() -> GameState:
    return initial_state(PRESETS["standard"])
