"""Connect-K package (engine + search + agents + CLI)."""

from connectk.engine import (
    PLAYER_O,
    PLAYER_X,
    PRESETS,
    ConnectKConfig,
    GameState,
    Move,
    TerminalResult,
    create_state,
    initial_state,
)

__all__ = [
    "PLAYER_O",
    "PLAYER_X",
    "PRESETS",
    "ConnectKConfig",
    "GameState",
    "Move",
    "TerminalResult",
    "create_state",
    "initial_state",
]
