"""Connect-K game engine: configuration, mutable game state and win detection."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional

import numpy as np

EMPTY = 0
PLAYER_X = +1
PLAYER_O = -1

SYMBOLS: Dict[int, str] = {PLAYER_X: "X", PLAYER_O: "O", EMPTY: "."}

# (d_row, d_col) for horizontal, vertical, down-right and up-right lines.
_DIRECTIONS = ((0, 1), (1, 0), (1, 1), (-1, 1))


@dataclass(frozen=True)
class ConnectKConfig:
    rows: int = 6
    cols: int = 7
    k: int = 4

    def validate(self) -> None:
        if self.rows < 1 or self.cols < 1:
            raise ValueError("rows/cols must be >= 1")
        if self.k < 1:
            raise ValueError("k must be >= 1")


PRESETS: Dict[str, ConnectKConfig] = {
    "tiny": ConnectKConfig(rows=3, cols=3, k=3),
    "wide": ConnectKConfig(rows=3, cols=5, k=3),
    "standard": ConnectKConfig(rows=6, cols=7, k=4),
}


@dataclass(frozen=True)
class Move:
    ply: int
    player: int  # PLAYER_X or PLAYER_O
    row: int
    col: int


@dataclass(frozen=True)
class TerminalResult:
    is_terminal: bool
    winner: int  # PLAYER_X / PLAYER_O / 0 (draw or in progress)
    reason: str


def other(player: int) -> int:
    return -player


def has_run(mask: np.ndarray, k: int) -> bool:
    """
    True if `mask` holds k consecutive True cells along any of the four lines.

    For each direction we AND together k shifted views of the mask; a cell of
    the result is True exactly when a run of length k starts there.
    """

    rows, cols = mask.shape
    for dr, dc in _DIRECTIONS:
        row_span = rows - (k - 1) * abs(dr)
        col_span = cols - (k - 1) * dc
        if row_span <= 0 or col_span <= 0:
            continue
        row0 = k - 1 if dr < 0 else 0
        acc = np.ones((row_span, col_span), dtype=bool)
        for i in range(k):
            r = row0 + i * dr
            c = i * dc
            acc &= mask[r : r + row_span, c : c + col_span]
        if acc.any():
            return True
    return False


@dataclass
class GameState:
    """
    Mutable game state. Row 0 is the top of the grid.

    board values:
      +1 = X stone
      -1 = O stone
      0  = empty

    heights[col] counts the stones in a column, so the next stone in `col`
    lands on row `rows - 1 - heights[col]`. The gravity invariant holds as
    long as the board is only changed through apply_move / trial_move.
    """

    cfg: ConnectKConfig
    board: np.ndarray  # shape (rows, cols), dtype=int8
    heights: np.ndarray  # shape (cols,), dtype=int16
    current_player: int
    moves: List[Move] = field(default_factory=list)

    @property
    def rows(self) -> int:
        return self.cfg.rows

    @property
    def cols(self) -> int:
        return self.cfg.cols

    @property
    def ply(self) -> int:
        return len(self.moves)

    @property
    def last_move(self) -> Optional[Move]:
        return self.moves[-1] if self.moves else None

    def apply_move(self, col: int) -> bool:
        """Drop the current player's stone into `col`; False (and no change) if illegal."""

        if not self.is_valid_move(col):
            return False
        row = self.rows - 1 - int(self.heights[col])
        self.board[row, col] = self.current_player
        self.heights[col] += 1
        self.moves.append(Move(ply=self.ply, player=self.current_player, row=row, col=col))
        return True

    def is_valid_move(self, col: int) -> bool:
        return 0 <= col < self.cols and int(self.board[0, col]) == EMPTY

    def valid_moves(self) -> List[int]:
        return np.nonzero(self.board[0] == EMPTY)[0].tolist()

    def is_full(self) -> bool:
        return not bool(np.any(self.board[0] == EMPTY))

    def check_win(self, k: Optional[int] = None, player: Optional[int] = None) -> bool:
        """
        Does `player` (default: the current player) own a run of >= k stones?

        With the default player this must be called right after a stone is
        placed and before switch_player(), otherwise it checks the wrong side.
        """

        k = self.cfg.k if k is None else k
        player = self.current_player if player is None else player
        return has_run(self.board == player, k)

    def is_terminal(self, k: Optional[int] = None) -> bool:
        return self.check_win(k) or self.is_full()

    def winner(self, k: Optional[int] = None) -> int:
        """Return the player owning a winning run (checked for both sides), or 0."""

        for player in (self.current_player, other(self.current_player)):
            if self.check_win(k, player=player):
                return player
        return EMPTY

    def terminal_result(self, k: Optional[int] = None) -> TerminalResult:
        winner = self.winner(k)
        if winner != EMPTY:
            return TerminalResult(True, winner, "connect-k")
        if self.is_full():
            return TerminalResult(True, 0, "draw")
        return TerminalResult(False, 0, "in-progress")

    def switch_player(self) -> None:
        self.current_player = other(self.current_player)

    def clone(self) -> GameState:
        return GameState(
            cfg=self.cfg,
            board=self.board.copy(),
            heights=self.heights.copy(),
            current_player=self.current_player,
            moves=list(self.moves),
        )

    @contextmanager
    def trial_move(self, col: int) -> Iterator[GameState]:
        """
        Place the current player's stone in `col` for the duration of the block.

        The stone is always taken back on exit, including when the block
        breaks out early or raises. The current player is not switched.
        """

        if not self.apply_move(col):
            raise ValueError(f"illegal trial move: column {col}")
        try:
            yield self
        finally:
            self._undo(col)

    def _undo(self, col: int) -> None:
        move = self.moves.pop()
        if move.col != col:
            raise RuntimeError(f"undo out of order: expected column {move.col}, got {col}")
        self.board[move.row, col] = EMPTY
        self.heights[col] -= 1


def initial_state(cfg: ConnectKConfig, starting_player: int = PLAYER_X) -> GameState:
    cfg.validate()
    if starting_player not in (PLAYER_X, PLAYER_O):
        raise ValueError(f"unknown player: {starting_player}")
    board = np.zeros((cfg.rows, cfg.cols), dtype=np.int8)
    heights = np.zeros((cfg.cols,), dtype=np.int16)
    return GameState(cfg=cfg, board=board, heights=heights, current_player=starting_player)


def create_state(rows: int, cols: int, starting_player: int = PLAYER_X, k: int = 4) -> GameState:
    return initial_state(ConnectKConfig(rows=rows, cols=cols, k=k), starting_player)
